"""Observability infrastructure: structured logging with structlog.

Usage:
    from valobj.infrastructure.observability import configure_structlog

    # At application startup
    configure_structlog(environment="production")
"""

from valobj.infrastructure.observability.logging import (
    configure_structlog,
    get_logger_for_service,
)

__all__: list[str] = [
    "configure_structlog",
    "get_logger_for_service",
]
