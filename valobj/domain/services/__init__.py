"""Domain services: value object serialization and deserialization."""

from valobj.domain.services.deserializer import (
    DEFAULT_REVIVERS,
    build_deserialize,
    lookup_type,
    registry_group,
    revive_fields,
)
from valobj.domain.services.serializer import dumps, to_serializable

__all__: list[str] = [
    "dumps",
    "to_serializable",
    "build_deserialize",
    "registry_group",
    "lookup_type",
    "revive_fields",
    "DEFAULT_REVIVERS",
]
