"""Serializer: render value objects as tagged JSON text.

``ValueObject.to_json`` produces a plain mapping; ``dumps`` is the generic
stringification entry point that calls it wherever a value object appears in
the structure being encoded.

Encoding of non-JSON values:
- ValueObject -> to_json() mapping with the type tag
- datetime / date -> ISO 8601 string
- UUID, Decimal -> str
"""

from __future__ import annotations

import json
from datetime import date, datetime
from decimal import Decimal
from typing import Any
from uuid import UUID

from valobj.config.serialization_config import (
    DEFAULT_SERIALIZATION_CONFIG,
    SerializationConfig,
)
from valobj.domain.models.value_object import ValueObject


def to_serializable(value: Any, type_key: str = DEFAULT_SERIALIZATION_CONFIG.type_key) -> Any:
    """Convert a value json cannot encode natively.

    Suitable as the ``default`` hook of json.dumps.

    Raises:
        TypeError: If value has no known JSON representation.
    """
    if isinstance(value, ValueObject):
        return value.to_json(type_key)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, (UUID, Decimal)):
        return str(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def dumps(value: Any, config: SerializationConfig | None = None) -> str:
    """Serialize value, and any value objects inside it, to JSON text.

    Args:
        value: A value object or any JSON-compatible structure containing them.
        config: Rendering options. Defaults to DEFAULT_SERIALIZATION_CONFIG.

    Returns:
        JSON text.
    """
    config = config or DEFAULT_SERIALIZATION_CONFIG
    return json.dumps(
        value,
        default=lambda item: to_serializable(item, config.type_key),
        **config.dumps_options(),
    )
