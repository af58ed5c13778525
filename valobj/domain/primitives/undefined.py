"""Primitive: the UNDEFINED sentinel.

None is a legal value for every declared property. UNDEFINED marks a value
that was never supplied; passing it for any declared property is rejected
before type checking runs.

Usage:
    from valobj.domain.primitives import UNDEFINED

    Point(1, UNDEFINED)  # raises UndefinedArgumentError
"""

from typing import Final


class _Undefined:
    """Singleton type of UNDEFINED."""

    _instance: "_Undefined | None" = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "undefined"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Final = _Undefined()


def is_undefined(value: object) -> bool:
    """Return True if value is the UNDEFINED sentinel."""
    return value is UNDEFINED
