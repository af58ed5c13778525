"""Deserializer: rebuild value objects from tagged JSON text.

The caller supplies an ordered sequence of registry groups, each mapping a
type name to a ValueObject class. The serialized type tag is looked up in
the groups in order; the first group containing it wins.

Before construction, string fields declared with a class that has a reviver
are converted back, so the constructor's type check sees the same types the
original instance held. Default revivers cover datetime, date, UUID and
Decimal; callers may add more (nested value objects included):

    deserialize = build_deserialize(
        [registry_group(Order, Address)],
        revivers={Address: lambda data: Address.from_json(
            {k: v for k, v in data.items() if k != "__type__"}
        )},
    )
"""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping, Sequence
from datetime import date, datetime
from decimal import Decimal
from typing import Any
from uuid import UUID

import structlog

from valobj.config.serialization_config import (
    DEFAULT_SERIALIZATION_CONFIG,
    SerializationConfig,
)
from valobj.domain.errors.lookup import UnknownTypeError
from valobj.domain.models.type_descriptor import InstanceOf
from valobj.domain.models.value_object import ValueObject

log = structlog.get_logger()

Reviver = Callable[[Any], Any]
RegistryGroup = Mapping[str, type[ValueObject]]
Deserialize = Callable[[str | bytes], ValueObject]

REVIVER_ERRORS = (ValueError, TypeError, ArithmeticError)


def _from_string(parse: Callable[[str], Any]) -> Reviver:
    """Wrap parse so it only accepts the string form dumps writes."""

    def reviver(value: Any) -> Any:
        if not isinstance(value, str):
            raise TypeError(f"expected a string, got {type(value).__name__}")
        return parse(value)

    return reviver


DEFAULT_REVIVERS: Mapping[type, Reviver] = {
    datetime: _from_string(datetime.fromisoformat),
    date: _from_string(date.fromisoformat),
    UUID: _from_string(UUID),
    Decimal: _from_string(Decimal),
}


def registry_group(*classes: type[ValueObject]) -> dict[str, type[ValueObject]]:
    """Build a registry group keyed by each class's type_name.

    When two classes share a type name the later one replaces the earlier
    and a warning is logged.
    """
    group: dict[str, type[ValueObject]] = {}
    for cls in classes:
        if cls.type_name in group and group[cls.type_name] is not cls:
            log.warning(
                "duplicate_registry_type_name",
                type_name=cls.type_name,
                replaced=group[cls.type_name].__qualname__,
                replacement=cls.__qualname__,
            )
        group[cls.type_name] = cls
    return group


def revive_fields(
    cls: type[ValueObject],
    record: Mapping[str, Any],
    revivers: Mapping[type, Reviver],
) -> dict[str, Any]:
    """Convert serialized fields back to the classes their descriptors name.

    Only fields declared with a class descriptor that has a reviver are
    touched, and only when the value is neither None nor already an
    instance of that class. Unknown keys are passed through untouched so the
    constructor's shape check reports them.

    A value the reviver rejects with one of REVIVER_ERRORS is left as it was,
    so the constructor's type check raises PropertyTypeError for it.
    """
    revived = dict(record)
    for name, descriptor in cls.schema():
        if name not in revived or not isinstance(descriptor, InstanceOf):
            continue
        reviver = revivers.get(descriptor.cls)
        value = revived[name]
        if reviver is None or value is None or isinstance(value, descriptor.cls):
            continue
        try:
            revived[name] = reviver(value)
        except REVIVER_ERRORS:
            log.debug("value_object_field_not_revived", type_name=cls.type_name, field=name)
    return revived


def lookup_type(
    registry_groups: Sequence[RegistryGroup],
    type_name: Any,
) -> type[ValueObject]:
    """Find type_name in the registry groups; the first match wins.

    Raises:
        UnknownTypeError: If no group contains type_name.
    """
    if isinstance(type_name, str):
        for group in registry_groups:
            if type_name in group:
                return group[type_name]
    known = list(dict.fromkeys(name for group in registry_groups for name in group))
    log.warning("unknown_value_object_type", type_name=type_name, known=known)
    raise UnknownTypeError(type_name if isinstance(type_name, str) else None, known)


def build_deserialize(
    registry_groups: Sequence[RegistryGroup],
    revivers: Mapping[type, Reviver] | None = None,
    config: SerializationConfig | None = None,
) -> Deserialize:
    """Build a function that turns tagged JSON text back into value objects.

    Args:
        registry_groups: Ordered type name to class mappings.
        revivers: Extra class to reviver mappings, merged over the defaults.
        config: Serialization options; only type_key is used here.

    Returns:
        ``deserialize(text) -> ValueObject``.
    """
    groups = tuple(dict(group) for group in registry_groups)
    all_revivers = {**DEFAULT_REVIVERS, **(revivers or {})}
    type_key = (config or DEFAULT_SERIALIZATION_CONFIG).type_key

    def deserialize(serialized: str | bytes) -> ValueObject:
        """Parse serialized text and construct the tagged value object.

        Raises:
            UnknownTypeError: If the tag is missing or not registered.
            ValueObjectError: If the fields fail the constructor's checks.
        """
        data = json.loads(serialized)
        type_name = data.pop(type_key, None) if isinstance(data, dict) else None
        cls = lookup_type(groups, type_name)
        instance = cls.from_json(revive_fields(cls, data, all_revivers))
        log.debug("value_object_deserialized", type_name=type_name)
        return instance

    return deserialize
