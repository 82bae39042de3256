"""
Tone Metrics - readability scoring and keyword intent classification for short copy.
"""

from .analysis.intent_classifier import KeywordIntentClassifier, classify_intent
from .analysis.readability import (
    FleschReadabilityScorer,
    analyze_readability,
    flesch_kincaid_grade,
    flesch_reading_ease,
    readability_ease,
    readability_grade,
    text_statistics,
)
from .analysis.syllables import count_syllables, count_syllables_in_word
from .analysis.tokenizer import count_sentences, count_words, sentence_count, word_count
from .domain.entities import (
    IntentCategory,
    IntentClassification,
    ReadabilityReport,
    ReadabilityStatus,
    TextStatistics,
    ValidationConfig,
    ValidationLevel,
)
from .infrastructure import AnalysisConfiguration, Container
from .shared.errors import ConfigurationError, ToneMetricsError, ValidationError
from .stress import StressReport, run_stress_checks

__version__ = "0.1.0"
__all__ = [
    # Core operations
    "readability_grade",
    "readability_ease",
    "classify_intent",
    "word_count",
    "sentence_count",
    # Building blocks
    "count_sentences",
    "count_words",
    "count_syllables",
    "count_syllables_in_word",
    "flesch_kincaid_grade",
    "flesch_reading_ease",
    "text_statistics",
    "analyze_readability",
    # Implementations
    "FleschReadabilityScorer",
    "KeywordIntentClassifier",
    # Schemas and types
    "IntentCategory",
    "IntentClassification",
    "ReadabilityReport",
    "ReadabilityStatus",
    "TextStatistics",
    "ValidationConfig",
    "ValidationLevel",
    # Configuration
    "AnalysisConfiguration",
    "Container",
    # Errors
    "ToneMetricsError",
    "ConfigurationError",
    "ValidationError",
    # Stress checks
    "StressReport",
    "run_stress_checks",
]
