"""Custom exceptions for tone-metrics."""

from .exceptions import (
    ConfigurationError,
    ToneMetricsError,
    ValidationError,
    ensure_text,
)

__all__ = [
    "ToneMetricsError",
    "ConfigurationError",
    "ValidationError",
    "ensure_text",
]
