"""Type descriptors for value object properties.

A type descriptor is the rule a property's value must satisfy. It is one of:

- Primitive(kind): the value's primitive kind must be string, number or
  boolean. Declared with the tags "string", "number", "boolean".
- InstanceOf(cls): the value must be an instance of cls or any subclass.
  Declared with the class itself.

None satisfies every descriptor. UNDEFINED satisfies none; it is rejected
as a shape error before descriptors are consulted.

Usage:
    descriptor = resolve_descriptor("string")
    descriptor.matches("abc")    # True
    descriptor.describe()        # "string"

    descriptor = resolve_descriptor(datetime)
    descriptor.describe()        # "instanceof datetime"
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from numbers import Real
from typing import Any

from valobj.domain.errors.construction import DefinitionError
from valobj.domain.primitives.undefined import UNDEFINED


class PrimitiveKind(StrEnum):
    """Primitive kinds a property can be declared with."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"


def primitive_kind_of(value: Any) -> PrimitiveKind | None:
    """Return the primitive kind of value, or None for non-primitives.

    bool is checked before numbers: True is a boolean, never a number.
    """
    if isinstance(value, bool):
        return PrimitiveKind.BOOLEAN
    if isinstance(value, str):
        return PrimitiveKind.STRING
    if isinstance(value, Real):
        return PrimitiveKind.NUMBER
    return None


@dataclass(frozen=True)
class Primitive:
    """Descriptor accepting values of one primitive kind."""

    kind: PrimitiveKind

    def matches(self, value: Any) -> bool:
        return value is None or primitive_kind_of(value) is self.kind

    def describe(self) -> str:
        return self.kind.value


@dataclass(frozen=True)
class InstanceOf:
    """Descriptor accepting instances of a class or any of its subclasses."""

    cls: type

    def matches(self, value: Any) -> bool:
        return value is None or isinstance(value, self.cls)

    def describe(self) -> str:
        return f"instanceof {self.cls.__name__}"


@dataclass(frozen=True)
class Untyped:
    """Descriptor of a positional property: any supplied value is accepted."""

    def matches(self, value: Any) -> bool:
        return value is not UNDEFINED

    def describe(self) -> str:
        return "any"


TypeDescriptor = Primitive | InstanceOf | Untyped

UNTYPED = Untyped()


def resolve_descriptor(raw: Any) -> TypeDescriptor:
    """Turn a declared type (tag or class) into a TypeDescriptor.

    Args:
        raw: A primitive tag ("string", "number", "boolean"), a class, or an
            already resolved descriptor.

    Returns:
        The matching descriptor.

    Raises:
        DefinitionError: If raw is an unknown tag or not a class.
    """
    if isinstance(raw, (Primitive, InstanceOf, Untyped)):
        return raw
    if isinstance(raw, str):
        try:
            return Primitive(PrimitiveKind(raw))
        except ValueError:
            raise DefinitionError(
                f"Unknown type descriptor '{raw}', "
                f"expected one of: {', '.join(k.value for k in PrimitiveKind)} or a class"
            ) from None
    if isinstance(raw, type):
        return InstanceOf(raw)
    raise DefinitionError(
        f"Type descriptor must be a primitive tag or a class, got {type(raw).__name__}"
    )


def matches(descriptor: Any, value: Any) -> bool:
    """Return True if value satisfies descriptor.

    Args:
        descriptor: A declared type (tag or class) or a resolved descriptor.
        value: The candidate value.
    """
    return resolve_descriptor(descriptor).matches(value)


def describe_value(value: Any) -> str:
    """Render the runtime kind of value for error messages.

    Returns "null" for None, "undefined" for UNDEFINED, the primitive kind for
    strings, numbers and booleans, and "object <ClassName>" otherwise.
    """
    if value is None:
        return "null"
    if value is UNDEFINED:
        return "undefined"
    kind = primitive_kind_of(value)
    if kind is not None:
        return kind.value
    return f"object {type(value).__name__}"
