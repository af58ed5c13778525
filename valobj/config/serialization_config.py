"""Serialization configuration.

This module defines how value objects are rendered to and read back from
JSON text, with environment variable overrides.

Environment Variables:
- VALOBJ_TYPE_KEY: Key carrying the concrete type name (default: __type__)
- VALOBJ_JSON_INDENT: Indentation for dumps(); unset or negative for compact
- VALOBJ_JSON_SORT_KEYS: Sort object keys in dumps() (default: false)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any

DEFAULT_TYPE_KEY = "__type__"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _get_str_env(key: str, default: str) -> str:
    """Get string environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or blank.

    Returns:
        The stripped value or default.
    """
    value = os.environ.get(key)
    if value is None or not value.strip():
        return default
    return value.strip()


def _get_int_env(key: str, default: int | None) -> int | None:
    """Get integer environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed integer value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _get_bool_env(key: str, default: bool) -> bool:
    """Get boolean environment variable with default.

    Accepts 1/true/yes/on and 0/false/no/off, case-insensitively.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    return default


@dataclass(frozen=True)
class SerializationConfig:
    """Configuration for value object JSON rendering.

    Attributes:
        type_key: Key carrying the concrete type name in serialized objects.
                  Default: "__type__".
        indent: Indentation passed to json.dumps. None for compact output.
        sort_keys: Whether json.dumps sorts object keys. Default: False,
                   which keeps schema order.
    """

    type_key: str = DEFAULT_TYPE_KEY
    indent: int | None = None
    sort_keys: bool = False

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if not self.type_key:
            raise ValueError("type_key must be a non-empty string")
        if self.indent is not None and self.indent < 0:
            raise ValueError(f"indent must be non-negative, got {self.indent}")

    @classmethod
    def from_environment(cls) -> SerializationConfig:
        """Create config from environment variables with defaults.

        A negative VALOBJ_JSON_INDENT is treated as unset.

        Returns:
            SerializationConfig with values from environment or defaults.
        """
        indent = _get_int_env("VALOBJ_JSON_INDENT", None)
        if indent is not None and indent < 0:
            indent = None
        return cls(
            type_key=_get_str_env("VALOBJ_TYPE_KEY", DEFAULT_TYPE_KEY),
            indent=indent,
            sort_keys=_get_bool_env("VALOBJ_JSON_SORT_KEYS", False),
        )

    def dumps_options(self) -> dict[str, Any]:
        """Keyword arguments for json.dumps."""
        return {"indent": self.indent, "sort_keys": self.sort_keys}


# Default config (compact, schema-ordered, "__type__" tag)
DEFAULT_SERIALIZATION_CONFIG = SerializationConfig()

# Human-readable config for debugging output
PRETTY_SERIALIZATION_CONFIG = SerializationConfig(indent=2)
