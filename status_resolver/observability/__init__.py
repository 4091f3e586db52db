"""Observability package for structured logging setup."""

from .logging_setup import (
    observability_configure_logging,
    observability_create_null_logger,
    observability_get_logger,
)

__all__ = [
    "observability_configure_logging",
    "observability_create_null_logger",
    "observability_get_logger",
]
