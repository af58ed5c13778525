"""Domain errors for valobj.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from ValueObjectError.
"""

from valobj.domain.errors.construction import (
    ArityError,
    DefinitionError,
    PropertyTypeError,
    ShapeError,
    UndefinedArgumentError,
)
from valobj.domain.errors.lookup import UnknownTypeError
from valobj.domain.errors.mutation import MutationError
from valobj.domain.errors.validation import ValidationError

__all__: list[str] = [
    "DefinitionError",
    "ArityError",
    "ShapeError",
    "UndefinedArgumentError",
    "PropertyTypeError",
    "MutationError",
    "UnknownTypeError",
    "ValidationError",
]
