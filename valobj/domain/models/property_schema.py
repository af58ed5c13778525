"""Property schemas for value objects.

A property schema is the declared list of properties of a value object type.
It is either:

- Positional: an ordered sequence of names with no declared types. The
  constructor takes one argument per name, in order.
- Named: a mapping of name to type descriptor. The constructor takes a single
  record whose keys must equal the declared names exactly.

Schemas are merged across the inheritance chain. Merge order is fixed: the
most-derived class's own properties come first, then each ancestor walking
the MRO outward. A name redeclared closer to the concrete class keeps the
closer declaration; ancestor properties that are not redeclared are kept.

Binding (``PropertySchema.bind``) runs the construction checks in order:
arity, shape, undefined, type. It returns the values in schema order.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from valobj.config.serialization_config import DEFAULT_TYPE_KEY
from valobj.domain.errors.construction import (
    ArityError,
    DefinitionError,
    PropertyTypeError,
    ShapeError,
    UndefinedArgumentError,
)
from valobj.domain.models.type_descriptor import (
    UNTYPED,
    TypeDescriptor,
    describe_value,
    resolve_descriptor,
)
from valobj.domain.primitives.undefined import is_undefined

NO_PROPERTIES_MESSAGE = "ValueObjects must define static properties member"


@dataclass(frozen=True)
class PropertySchema:
    """Resolved, immutable property schema of one value object type.

    Attributes:
        properties: (name, descriptor) pairs in schema order.
        positional: True for positional schemas, False for named ones.
    """

    properties: tuple[tuple[str, TypeDescriptor], ...]
    positional: bool

    @classmethod
    def from_declaration(cls, declaration: Any) -> PropertySchema:
        """Build a schema from a single class's ``properties`` declaration.

        Args:
            declaration: A sequence of names (positional) or a mapping of
                name to type tag or class (named).

        Raises:
            DefinitionError: If the declaration has an unsupported shape or
                an unknown type descriptor.
        """
        if isinstance(declaration, Mapping):
            return cls(
                properties=tuple(
                    (_check_name(name), resolve_descriptor(descriptor))
                    for name, descriptor in declaration.items()
                ),
                positional=False,
            )
        if isinstance(declaration, Sequence) and not isinstance(declaration, str):
            names = [_check_name(name) for name in declaration]
            if len(set(names)) != len(names):
                raise DefinitionError(f"Duplicate positional property names: {', '.join(names)}")
            return cls(
                properties=tuple((name, UNTYPED) for name in names),
                positional=True,
            )
        raise DefinitionError(
            "properties must be a sequence of names or a mapping of names to types, "
            f"got {type(declaration).__name__}"
        )

    @classmethod
    def for_class(cls, value_object_cls: type) -> PropertySchema:
        """Merge the ``properties`` declarations along a class's MRO.

        Raises:
            DefinitionError: If no class in the chain declares properties, or
                positional and named declarations are mixed.
        """
        merged: dict[str, TypeDescriptor] = {}
        kinds: set[bool] = set()
        for klass in value_object_cls.__mro__:
            declaration = klass.__dict__.get("properties")
            if declaration is None:
                continue
            level = cls.from_declaration(declaration)
            if not level.properties:
                continue
            kinds.add(level.positional)
            for name, descriptor in level.properties:
                merged.setdefault(name, descriptor)

        if not merged:
            raise DefinitionError(NO_PROPERTIES_MESSAGE)
        if len(kinds) > 1:
            raise DefinitionError(
                f"{value_object_cls.__name__} mixes positional and named property declarations"
            )
        return cls(properties=tuple(merged.items()), positional=kinds.pop())

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(name for name, _ in self.properties)

    def __iter__(self) -> Iterator[tuple[str, TypeDescriptor]]:
        return iter(self.properties)

    def __len__(self) -> int:
        return len(self.properties)

    def __contains__(self, name: object) -> bool:
        return name in self.names

    def bind(self, type_name: str, args: tuple[Any, ...], kwargs: Mapping[str, Any]) -> dict[str, Any]:
        """Check constructor arguments and map them to property names.

        Positional schemas take one argument per property; named schemas take
        a single record. Either kind also accepts the record as keyword
        arguments.

        Args:
            type_name: Name of the concrete type, used in error messages.
            args: Positional constructor arguments.
            kwargs: Keyword constructor arguments.

        Returns:
            Property values keyed by name, in schema order.

        Raises:
            ArityError: Wrong number of arguments.
            ShapeError: Record keys differ from the declared names.
            UndefinedArgumentError: A property resolved to UNDEFINED.
            PropertyTypeError: A value violates its type descriptor.
        """
        if kwargs and not args:
            supplied = self._check_record(type_name, kwargs)
        elif self.positional:
            if kwargs or len(args) != len(self.properties):
                raise ArityError(type_name, ", ".join(self.names), len(args) + len(kwargs))
            supplied = dict(zip(self.names, args))
        else:
            if len(args) != 1 or kwargs:
                argument_count = len(args) + (1 if kwargs else 0)
                raise ArityError(type_name, "{" + ", ".join(self.names) + "}", argument_count)
            supplied = self._check_record(type_name, args[0])

        self._check_undefined(type_name, supplied)
        self._check_types(type_name, supplied)
        return {name: supplied[name] for name in self.names}

    def _check_record(self, type_name: str, record: Any) -> dict[str, Any]:
        if not isinstance(record, Mapping):
            raise ShapeError(type_name, self.names, ())
        if set(record) != set(self.names):
            raise ShapeError(type_name, self.names, [str(key) for key in record])
        return dict(record)

    def _check_undefined(self, type_name: str, supplied: Mapping[str, Any]) -> None:
        undefined = [name for name in self.names if is_undefined(supplied[name])]
        if not undefined:
            return
        if self.positional:
            message = (
                f"{type_name}({', '.join(self.names)}) "
                f"called with undefined for {', '.join(undefined)}"
            )
        else:
            declared = ", ".join(f"{name}:{descriptor.describe()}" for name, descriptor in self)
            actual = ", ".join(f"{name}: undefined" for name in undefined)
            message = f"{type_name} {{ {declared} }} called with {{ {actual} }}"
        raise UndefinedArgumentError(message, type_name, undefined)

    def _check_types(self, type_name: str, supplied: Mapping[str, Any]) -> None:
        invalid = [
            name for name, descriptor in self if not descriptor.matches(supplied[name])
        ]
        if not invalid:
            return
        raise PropertyTypeError(
            type_name,
            declared=[f"{name}:{descriptor.describe()}" for name, descriptor in self],
            actual=[f"{name}:{describe_value(value)}" for name, value in supplied.items()],
            invalid=invalid,
        )


def _check_name(name: Any) -> str:
    if not isinstance(name, str) or not name.isidentifier():
        raise DefinitionError(f"Property names must be identifiers, got {name!r}")
    if name == DEFAULT_TYPE_KEY:
        raise DefinitionError(f"{DEFAULT_TYPE_KEY} is reserved for the serialized type tag")
    return name
