"""Lookup errors for value object deserialization."""

from collections.abc import Sequence

from valobj.domain.exceptions import ValueObjectError


class UnknownTypeError(ValueObjectError, LookupError):
    """Raised when a serialized type tag is not in any registry group.

    Also raised when the serialized payload carries no type tag at all,
    in which case type_name is None.

    Attributes:
        type_name: The tag read from the payload, or None if absent.
        known: Every type name available across the registry groups.
    """

    def __init__(self, type_name: str | None, known: Sequence[str]) -> None:
        """Initialize unknown type error.

        Args:
            type_name: The tag read from the payload, or None if absent.
            known: Every type name available across the registry groups.
        """
        self.type_name = type_name
        self.known = tuple(known)
        if type_name is None:
            message = "Serialized value object has no type tag"
        else:
            message = f"Unknown value object type: {type_name}"
        super().__init__(f"{message} (known: {', '.join(self.known) or 'none'})")
