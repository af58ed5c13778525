"""
valobj - Immutable, structurally-typed value objects

Value objects are records identified by the values of their properties
rather than by identity. This package provides:
- Declarative property schemas (positional or named with type descriptors)
- Constructor-time shape and type checking
- Frozen instances that refuse mutation
- Structural equality and copy-with-overrides
- Tagged JSON serialization and registry-driven deserialization
- On-demand validation through a failure collector
"""

from valobj.domain.errors import (
    ArityError,
    DefinitionError,
    MutationError,
    PropertyTypeError,
    ShapeError,
    UndefinedArgumentError,
    UnknownTypeError,
    ValidationError,
)
from valobj.domain.exceptions import ValueObjectError
from valobj.domain.models import (
    ValidationFailure,
    ValidationFailures,
    ValueObject,
)
from valobj.domain.primitives import UNDEFINED
from valobj.domain.services import build_deserialize, dumps, registry_group

__version__ = "0.1.0"
__all__ = [
    "__version__",
    "ValueObject",
    "ValidationFailure",
    "ValidationFailures",
    "UNDEFINED",
    "build_deserialize",
    "dumps",
    "registry_group",
    "ValueObjectError",
    "DefinitionError",
    "ArityError",
    "ShapeError",
    "UndefinedArgumentError",
    "PropertyTypeError",
    "MutationError",
    "UnknownTypeError",
    "ValidationError",
]
