"""
Domain layer for tone-metrics.

This layer contains:
- Entities: Value objects produced by analysis (TextStatistics,
  ReadabilityReport, IntentClassification)
- Interfaces: Contracts for scorers and classifiers (Protocols)

No external dependencies, pure data.
"""

from .entities import (
    IntentCategory,
    IntentClassification,
    ReadabilityReport,
    ReadabilityStatus,
    TextStatistics,
    ValidationConfig,
    ValidationLevel,
)
from .interfaces import IntentClassifier, ReadabilityScorer

__all__ = [
    # Entities
    "IntentCategory",
    "IntentClassification",
    "ReadabilityReport",
    "ReadabilityStatus",
    "TextStatistics",
    "ValidationConfig",
    "ValidationLevel",
    # Interfaces
    "IntentClassifier",
    "ReadabilityScorer",
]
