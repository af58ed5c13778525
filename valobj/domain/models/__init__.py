"""Domain models for valobj."""

from valobj.domain.models.property_schema import PropertySchema
from valobj.domain.models.type_descriptor import (
    InstanceOf,
    Primitive,
    PrimitiveKind,
    TypeDescriptor,
    Untyped,
    describe_value,
    matches,
    resolve_descriptor,
)
from valobj.domain.models.validation_failures import (
    PropertyFailures,
    ValidationFailure,
    ValidationFailures,
)
from valobj.domain.models.value_object import ValueObject

__all__: list[str] = [
    "ValueObject",
    "PropertySchema",
    "TypeDescriptor",
    "Primitive",
    "PrimitiveKind",
    "InstanceOf",
    "Untyped",
    "matches",
    "resolve_descriptor",
    "describe_value",
    "ValidationFailure",
    "ValidationFailures",
    "PropertyFailures",
]
