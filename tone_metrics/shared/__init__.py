"""
Shared utilities for tone-metrics.

Cross-cutting concerns that are used across multiple layers.
"""

from .config import (
    READING_EASE_EMPTY_DEFAULT,
    FK_GRADE_EMPTY_DEFAULT,
    TARGET_READABILITY_GRADE,
    WARNING_READABILITY_GRADE,
)
from .errors import ConfigurationError, ToneMetricsError, ValidationError, ensure_text

__all__ = [
    # Exceptions
    "ToneMetricsError",
    "ConfigurationError",
    "ValidationError",
    "ensure_text",
    # Constants
    "FK_GRADE_EMPTY_DEFAULT",
    "READING_EASE_EMPTY_DEFAULT",
    "TARGET_READABILITY_GRADE",
    "WARNING_READABILITY_GRADE",
]
