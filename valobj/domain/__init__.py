"""
Domain layer - value object construction, validation and serialization.

This layer contains:
- Domain exceptions (ValueObjectError and its families)
- Primitives (UNDEFINED sentinel, freezing mixin)
- Models (type descriptors, property schemas, failure collector, ValueObject)
- Services (serializer, deserializer)

This layer must NOT import from infrastructure; config is plain data and may be
imported.
"""

from valobj.domain.exceptions import ValueObjectError
from valobj.domain.models import ValueObject

__all__: list[str] = [
    "ValueObjectError",
    "ValueObject",
]
