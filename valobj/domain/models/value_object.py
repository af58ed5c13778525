"""ValueObject base class.

A value object is identified by the values of its properties rather than by
identity. Concrete types declare their properties either with ``define``:

    class Point(ValueObject.define("x", "y")):
        pass

    class Person(ValueObject.define({"name": "string", "born": date})):
        pass

or directly as a ``properties`` class attribute, which merges with every
ancestor's declaration:

    class Base(ValueObject):
        properties = {"id": "string", "seq": "number"}

    class Sub(Base):
        properties = {"city": "string"}

Construction checks arity, shape, UNDEFINED values and types (in that
order), assigns the properties read-only, runs the ``_init`` hook and then
freezes the instance. A failed check raises before any instance escapes.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar

import structlog

from valobj.config.serialization_config import DEFAULT_TYPE_KEY
from valobj.domain.errors.construction import DefinitionError
from valobj.domain.errors.validation import ValidationError
from valobj.domain.models.property_schema import PropertySchema
from valobj.domain.models.validation_failures import ValidationFailures
from valobj.domain.primitives.freeze import FreezeMixin

log = structlog.get_logger()


class ValueObject(FreezeMixin):
    """Immutable record with structural equality and tagged serialization.

    Attributes:
        type_name: Name the concrete type serializes under. Defaults to the
            class name; set it with ``class Foo(ValueObject, type_name="foo")``.
    """

    type_name: ClassVar[str] = "ValueObject"

    def __init_subclass__(cls, type_name: str | None = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls.type_name = type_name or cls.__name__

    @classmethod
    def define(cls, /, *names: Any, **named: Any) -> type[ValueObject]:
        """Declare a property schema and return a class to inherit from.

        Args:
            *names: Positional property names, or a single mapping of
                property name to type descriptor.
            **named: Property name to type descriptor, as keywords.

        Returns:
            A subclass of cls carrying the declared ``properties``.
        """
        if named:
            if names:
                raise TypeError("define() takes either names or a mapping, not both")
            declaration: Any = dict(named)
        elif len(names) == 1 and isinstance(names[0], Mapping):
            declaration = dict(names[0])
        else:
            declaration = tuple(names)
        # validate the declaration eagerly; the merged schema is resolved on first use
        PropertySchema.from_declaration(declaration)
        return type(cls.__name__, (cls,), {"properties": declaration, "__module__": cls.__module__})

    @classmethod
    def schema(cls) -> PropertySchema:
        """Return the merged property schema of this class.

        Raises:
            DefinitionError: If no properties are declared along the MRO.
        """
        schema = cls.__dict__.get("_resolved_schema")
        if schema is None:
            schema = PropertySchema.for_class(cls)
            cls._resolved_schema = schema
        return schema

    def __init__(self, /, *args: Any, **kwargs: Any) -> None:
        cls = type(self)
        values = cls.schema().bind(cls.__name__, args, kwargs)
        self._assign_read_only(values)
        self._init()
        self._freeze()

    def _init(self) -> None:
        """Hook run after properties are assigned and before freezing.

        Subclasses may attach computed attributes here; once the hook
        returns they become read-only like the declared properties.
        """

    def _values(self) -> dict[str, Any]:
        return {name: self.__dict__[name] for name in type(self).schema().names}

    def is_equal_to(self, other: object) -> bool:
        """True if other has the exact same class and equal property values."""
        if type(other) is not type(self):
            return False
        return self._values() == other._values()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValueObject):
            return NotImplemented
        return self.is_equal_to(other)

    def __hash__(self) -> int:
        return hash((type(self), tuple(self._values().items())))

    def __repr__(self) -> str:
        values = self._values()
        if type(self).schema().positional:
            rendered = ", ".join(repr(value) for value in values.values())
        else:
            rendered = ", ".join(f"{name}={value!r}" for name, value in values.items())
        return f"{type(self).__name__}({rendered})"

    def __reduce__(self) -> tuple[Any, ...]:
        return (_rebuild, (type(self), self._values()))

    def with_values(self, overrides: Mapping[str, Any] | None = None, **changes: Any) -> ValueObject:
        """Return a copy with some property values replaced.

        Unspecified properties, inherited ones included, are carried over.
        The copy goes through the normal constructor checks.

        Args:
            overrides: Property name to new value.
            **changes: Property name to new value, as keywords.

        Raises:
            ShapeError: If an override names an undeclared property.
            PropertyTypeError: If an override violates its type descriptor.
        """
        record = {**self._values(), **(overrides or {}), **changes}
        return type(self)(**record)

    def to_json(self, type_key: str = DEFAULT_TYPE_KEY) -> dict[str, Any]:
        """Return every declared property in schema order plus the type tag.

        Values are returned as-is; ``valobj.dumps`` renders them as JSON.

        Raises:
            DefinitionError: If type_key is also a property name.
        """
        if type_key in type(self).schema():
            raise DefinitionError(
                f"{type(self).__name__} cannot be serialized with type key {type_key!r}: "
                "it is a property name"
            )
        return {**self._values(), type_key: type(self).type_name}

    @classmethod
    def from_json(cls, record: Mapping[str, Any]) -> ValueObject:
        """Construct an instance from a deserialized record (type tag removed)."""
        if cls.schema().positional:
            return cls(**record)
        return cls(record)

    def validate(self) -> None:
        """Run the validation hook and report any collected failures.

        Raises:
            ValidationError: From the default ``throw_validation_error``.
        """
        failures = ValidationFailures()
        self.add_validation_failures(failures)
        if failures:
            log.info(
                "value_object_validation_failed",
                type_name=type(self).type_name,
                failure_count=len(failures),
            )
            self.throw_validation_error(failures)

    def add_validation_failures(self, failures: ValidationFailures) -> None:
        """Hook for subclasses to report semantic failures. No-op by default."""

    def throw_validation_error(self, failures: ValidationFailures) -> None:
        """Consume collected failures; the default raises ValidationError.

        Subclasses may override this to format failures differently or to
        handle them without raising.
        """
        raise ValidationError(f"{type(self).__name__} is invalid: {failures.render()}", failures)


def _rebuild(cls: type[ValueObject], values: dict[str, Any]) -> ValueObject:
    return cls(**values)
