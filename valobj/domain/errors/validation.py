"""Validation errors surfaced by ValueObject.validate()."""

from __future__ import annotations

from typing import TYPE_CHECKING

from valobj.domain.exceptions import ValueObjectError

if TYPE_CHECKING:
    from valobj.domain.models.validation_failures import ValidationFailures


class ValidationError(ValueObjectError, ValueError):
    """Raised when a value object reports semantic validation failures.

    Usage:
        raise ValidationError("Holiday is invalid: name should be nicer", failures)

    Attributes:
        failures: The collector holding every failure, in insertion order.
    """

    def __init__(self, message: str, failures: ValidationFailures) -> None:
        self.failures = failures
        super().__init__(message)
