"""Failure collector used by ValueObject.validate().

Subclasses report semantic problems through ``add_validation_failures``:

    def add_validation_failures(self, failures: ValidationFailures) -> None:
        if self.year <= 0:
            failures.for_property("year").add("must be > 0")
            failures.add("is invalid")

Entries keep their insertion order across scoped and unscoped additions.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ValidationFailure:
    """A single validation failure, optionally scoped to a property.

    Attributes:
        message: Human-readable description of the failure.
        property: Property the failure concerns, or None if unscoped.
    """

    message: str
    property: str | None = None

    def render(self) -> str:
        """Render as "<message>" or "<property> <message>"."""
        if self.property is None:
            return self.message
        return f"{self.property} {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Serialize for transmission; the property key is omitted if unscoped."""
        if self.property is None:
            return {"message": self.message}
        return {"property": self.property, "message": self.message}


@dataclass
class ValidationFailures:
    """Ordered accumulator of validation failures."""

    _entries: list[ValidationFailure] = field(default_factory=list)

    def add(self, message: str) -> ValidationFailures:
        """Append an unscoped failure.

        Returns:
            The collector, so calls can be chained.
        """
        self._entries.append(ValidationFailure(message))
        return self

    def for_property(self, property_name: str) -> PropertyFailures:
        """Return a view that appends failures scoped to property_name."""
        return PropertyFailures(self, property_name)

    def _append(self, failure: ValidationFailure) -> None:
        self._entries.append(failure)

    def render(self) -> str:
        """Render every failure comma-joined, in insertion order."""
        return ", ".join(failure.render() for failure in self._entries)

    def to_list(self) -> list[dict[str, Any]]:
        return [failure.to_dict() for failure in self._entries]

    def __iter__(self) -> Iterator[ValidationFailure]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __getitem__(self, index: int) -> ValidationFailure:
        return self._entries[index]


@dataclass(frozen=True)
class PropertyFailures:
    """Sub-view of a ValidationFailures scoped to one property."""

    parent: ValidationFailures
    property_name: str

    def add(self, message: str) -> PropertyFailures:
        """Append a failure scoped to this view's property."""
        self.parent._append(ValidationFailure(message, self.property_name))
        return self
