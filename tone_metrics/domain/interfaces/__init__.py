"""Domain interfaces (Protocols) for tone-metrics."""

from .intent_classifier import IntentClassifier
from .readability_scorer import ReadabilityScorer

__all__ = [
    "IntentClassifier",
    "ReadabilityScorer",
]
