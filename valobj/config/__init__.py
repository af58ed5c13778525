"""Configuration module for valobj.

Available Configurations:
- SerializationConfig: JSON rendering of value objects (type tag key,
  indentation, key ordering)
"""

from valobj.config.serialization_config import (
    DEFAULT_SERIALIZATION_CONFIG,
    DEFAULT_TYPE_KEY,
    PRETTY_SERIALIZATION_CONFIG,
    SerializationConfig,
)

__all__ = [
    "SerializationConfig",
    "DEFAULT_SERIALIZATION_CONFIG",
    "DEFAULT_TYPE_KEY",
    "PRETTY_SERIALIZATION_CONFIG",
]
