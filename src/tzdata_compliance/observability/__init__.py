"""Observability helpers (structured logging)."""

from tzdata_compliance.observability.logging import (
    bind_context,
    bound_context,
    clear_context,
    configure_logging,
    get_logger,
)

__all__ = ["bind_context", "bound_context", "clear_context", "configure_logging", "get_logger"]
