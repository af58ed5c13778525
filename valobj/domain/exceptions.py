"""Base exception classes for the valobj domain layer."""


class ValueObjectError(Exception):
    """Base exception for all value object errors.

    All domain-specific exceptions MUST inherit from this class.
    This enables catching every failure raised by the library with a
    single except clause, while each family also subclasses the closest
    builtin (TypeError, AttributeError, LookupError, ValueError).
    """

    def __init__(self, message: str = "") -> None:
        """Initialize the exception with an optional message.

        Args:
            message: Human-readable error description.
        """
        super().__init__(message)
