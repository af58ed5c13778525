"""Structured logging configuration with structlog.

The library logs through ``structlog.get_logger()`` and never configures
logging on import. Applications call ``configure_structlog`` once at
startup, choosing production (JSON) or development (console) output.

Events emitted by valobj:
    value_object_deserialized      debug    type_name
    value_object_field_not_revived debug    type_name, field
    unknown_value_object_type      warning  type_name, known
    duplicate_registry_type_name   warning  type_name, replaced, replacement
    value_object_validation_failed info     type_name, failure_count

Usage:
    from valobj.infrastructure.observability import configure_structlog

    configure_structlog(environment="production")  # JSON output
    configure_structlog(environment="development")  # Console output
"""

import logging
import os

import structlog
from structlog.typing import Processor

# Environment variable for log level (default: INFO)
LOG_LEVEL_ENV = "LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"


def _get_log_level() -> int:
    """Get the configured log level from environment.

    Returns:
        The logging level integer (e.g., logging.INFO).
    """
    level_name = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    level = getattr(logging, level_name, logging.INFO)
    return level if isinstance(level, int) else logging.INFO


def configure_structlog(environment: str = "production") -> None:
    """Configure structlog for an application using valobj.

    Args:
        environment: 'production' for JSON output, 'development' for console.
                    Defaults to 'production'.
    """
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if environment == "production":
        final_processor: Processor = structlog.processors.JSONRenderer()
    else:
        final_processor = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=shared_processors + [final_processor],
        wrapper_class=structlog.make_filtering_bound_logger(_get_log_level()),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger_for_service(
    service_name: str, component: str = "valobj"
) -> structlog.typing.FilteringBoundLogger:
    """Get a logger with service name and component already bound.

    Args:
        service_name: The name of the service (typically class name).
        component: The component type (default: "valobj").

    Returns:
        A bound logger with service and component bound.
    """
    return structlog.get_logger().bind(
        service=service_name,
        component=component,
    )
