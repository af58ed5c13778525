"""Primitive: freeze instances against mutation.

This module provides a mixin that turns ordinary attribute writes into
MutationError once an instance has been locked. It mirrors two levels of
protection:

- Read-only attributes: assigned through ``_assign_read_only``; reassigning
  or deleting them raises immediately, even before the instance is frozen.
- Frozen instances: after ``_freeze`` no attribute may be added, reassigned
  or deleted.

Usage:
    class Point(FreezeMixin):
        def __init__(self, x: int) -> None:
            self._assign_read_only({"x": x})
            self._freeze()

    point = Point(1)
    point.x = 2      # MutationError: Cannot assign to read only property 'x' ...
    point.label = 1  # MutationError: Can't add property label, ...
"""

from collections.abc import Mapping
from typing import Any

from valobj.domain.errors.mutation import MutationError


class FreezeMixin:
    """Mixin that rejects writes to read-only or frozen instances.

    State is kept in the instance ``__dict__`` under name-mangled keys so
    subclasses can still use ordinary attributes before freezing.

    Example:
        >>> class Frozen(FreezeMixin):
        ...     def __init__(self) -> None:
        ...         self._freeze()
        >>> Frozen().anything = 1  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
            ...
        MutationError: Can't add property anything, object is not extensible
    """

    def _assign_read_only(self, values: Mapping[str, Any]) -> None:
        """Assign values as attributes that can never be reassigned.

        Args:
            values: Attribute names mapped to their values.
        """
        locked = self.__dict__.get("_FreezeMixin__locked", frozenset())
        for name, value in values.items():
            object.__setattr__(self, name, value)
        object.__setattr__(self, "_FreezeMixin__locked", locked | frozenset(values))

    def _freeze(self) -> None:
        """Make the instance non-extensible and every attribute read-only."""
        object.__setattr__(self, "_FreezeMixin__frozen", True)

    def _is_frozen(self) -> bool:
        return self.__dict__.get("_FreezeMixin__frozen", False)

    def _is_read_only(self, name: str) -> bool:
        if name in self.__dict__.get("_FreezeMixin__locked", ()):
            return True
        return self._is_frozen() and name in self.__dict__

    def __setattr__(self, name: str, value: Any) -> None:
        if self._is_read_only(name):
            raise MutationError.read_only(type(self).__name__, name)
        if self._is_frozen():
            raise MutationError.not_extensible(type(self).__name__, name)
        object.__setattr__(self, name, value)

    def __delattr__(self, name: str) -> None:
        if self._is_read_only(name):
            raise MutationError.read_only(type(self).__name__, name)
        if self._is_frozen():
            raise MutationError.not_extensible(type(self).__name__, name)
        object.__delattr__(self, name)
