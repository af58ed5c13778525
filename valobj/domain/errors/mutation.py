"""Mutation errors for frozen value objects.

Raised at the point of an illegal write, never at construction time.
Subclasses AttributeError so code that expects the behaviour of frozen
dataclasses keeps working.
"""

from valobj.domain.exceptions import ValueObjectError


class MutationError(ValueObjectError, AttributeError):
    """Raised when a frozen value object is written to.

    Attributes:
        type_name: Name of the concrete value object type.
        property_name: Attribute the caller tried to add, assign or delete.
    """

    def __init__(self, message: str, type_name: str, property_name: str) -> None:
        self.type_name = type_name
        self.property_name = property_name
        super().__init__(message)

    @classmethod
    def not_extensible(cls, type_name: str, property_name: str) -> "MutationError":
        """Build the error for adding a property to a frozen instance."""
        return cls(
            f"Can't add property {property_name}, object is not extensible",
            type_name,
            property_name,
        )

    @classmethod
    def read_only(cls, type_name: str, property_name: str) -> "MutationError":
        """Build the error for reassigning or deleting a declared property."""
        return cls(
            f"Cannot assign to read only property '{property_name}' "
            f"of object '#<{type_name}>'",
            type_name,
            property_name,
        )
