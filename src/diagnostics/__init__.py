"""Diagnostics module - Structured logging for operations and errors."""

from .sink import (
    DiagnosticLogger,
    BelowErrorFilter,
    BestEffortFileHandler,
    add_service_tag,
    configure_logging,
    get_diagnostic_logger,
)

__all__ = [
    "DiagnosticLogger",
    "BelowErrorFilter",
    "BestEffortFileHandler",
    "add_service_tag",
    "configure_logging",
    "get_diagnostic_logger",
]
