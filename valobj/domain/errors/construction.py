"""Construction errors for value objects.

This module provides the exception classes raised while a value object is
being built. None of them is ever recovered internally: when one is raised,
no instance reference escapes the failed constructor call.

Failure order during construction:
1. DefinitionError - the class has no usable property schema
2. ArityError - wrong number of constructor arguments
3. ShapeError - named record keys differ from the declared names
4. UndefinedArgumentError - a declared property resolved to UNDEFINED
5. PropertyTypeError - one or more values violate their type descriptor

Message texts are part of the public contract; callers may match on them.
"""

from collections.abc import Sequence

from valobj.domain.exceptions import ValueObjectError


class DefinitionError(ValueObjectError, TypeError):
    """Raised when a value object class has no valid property schema.

    Usage:
        raise DefinitionError("ValueObjects must define static properties member")
    """

    pass


class ArityError(ValueObjectError, TypeError):
    """Raised when a constructor receives the wrong number of arguments.

    Attributes:
        type_name: Name of the concrete value object type.
        signature: Rendered declared property list, e.g. "a, b" or "{b, a}".
        argument_count: Number of arguments actually supplied.
    """

    def __init__(self, type_name: str, signature: str, argument_count: int) -> None:
        """Initialize arity error.

        Args:
            type_name: Name of the concrete value object type.
            signature: Rendered declared property list.
            argument_count: Number of arguments actually supplied.
        """
        self.type_name = type_name
        self.signature = signature
        self.argument_count = argument_count
        super().__init__(f"{type_name}({signature}) called with {argument_count} arguments")


class ShapeError(ValueObjectError, TypeError):
    """Raised when a named record's keys differ from the declared names.

    Attributes:
        type_name: Name of the concrete value object type.
        declared: Declared property names in schema order.
        supplied: Keys supplied by the caller, in the caller's order.
    """

    def __init__(
        self,
        type_name: str,
        declared: Sequence[str],
        supplied: Sequence[str],
    ) -> None:
        """Initialize shape error.

        Args:
            type_name: Name of the concrete value object type.
            declared: Declared property names in schema order.
            supplied: Keys supplied by the caller.
        """
        self.type_name = type_name
        self.declared = tuple(declared)
        self.supplied = tuple(supplied)
        super().__init__(
            f"{type_name}({{{', '.join(self.declared)}}}) "
            f"called with {{{', '.join(self.supplied)}}}"
        )


class UndefinedArgumentError(ValueObjectError, TypeError):
    """Raised when a declared property resolves to UNDEFINED.

    The message layout differs between positional and named schemas, so the
    caller renders it; the structured fields are kept for inspection.

    Attributes:
        type_name: Name of the concrete value object type.
        undefined: Names of the properties that were UNDEFINED.
    """

    def __init__(self, message: str, type_name: str, undefined: Sequence[str]) -> None:
        """Initialize undefined argument error.

        Args:
            message: Fully rendered error message.
            type_name: Name of the concrete value object type.
            undefined: Names of the properties that were UNDEFINED.
        """
        self.type_name = type_name
        self.undefined = tuple(undefined)
        super().__init__(message)


class PropertyTypeError(ValueObjectError, TypeError):
    """Raised when supplied values violate their declared type descriptors.

    A single error covers the whole schema: the declared signature is paired
    against the runtime kind of every supplied value, not only failing ones.

    Attributes:
        type_name: Name of the concrete value object type.
        declared: Rendered "name:descriptor" entries in schema order.
        actual: Rendered "name:kind" entries in the caller's order.
        invalid: Names of the properties that failed their descriptor.
    """

    def __init__(
        self,
        type_name: str,
        declared: Sequence[str],
        actual: Sequence[str],
        invalid: Sequence[str],
    ) -> None:
        """Initialize property type error.

        Args:
            type_name: Name of the concrete value object type.
            declared: Rendered declared signature entries.
            actual: Rendered runtime kind entries.
            invalid: Names of the properties that failed.
        """
        self.type_name = type_name
        self.declared = tuple(declared)
        self.actual = tuple(actual)
        self.invalid = tuple(invalid)
        super().__init__(
            f"{type_name}({', '.join(self.declared)}) "
            f"called with wrong types ({', '.join(self.actual)})"
        )
