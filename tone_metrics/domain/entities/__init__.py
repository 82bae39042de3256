"""Domain entities for tone-metrics."""

from .intent import IntentCategory, IntentClassification
from .readability import ReadabilityReport, ReadabilityStatus, TextStatistics
from .validation import ValidationConfig, ValidationLevel

__all__ = [
    "IntentCategory",
    "IntentClassification",
    "ReadabilityReport",
    "ReadabilityStatus",
    "TextStatistics",
    "ValidationConfig",
    "ValidationLevel",
]
