"""Primitives for the valobj domain layer.

- UNDEFINED: sentinel for a value that was never supplied
- FreezeMixin: rejects writes to read-only or frozen instances
"""

from valobj.domain.primitives.freeze import FreezeMixin
from valobj.domain.primitives.undefined import UNDEFINED, is_undefined

__all__: list[str] = [
    "UNDEFINED",
    "is_undefined",
    "FreezeMixin",
]
