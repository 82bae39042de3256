"""
Analysis module for tone-metrics.
Contains the tokenizer, syllable estimator, readability scorer and
intent classifier.
"""

from .intent_classifier import (
    DEFAULT_KEYWORD_TABLE,
    KeywordIntentClassifier,
    build_keyword_table,
    classify_intent,
)
from .readability import (
    FleschReadabilityScorer,
    analyze_readability,
    flesch_kincaid_grade,
    flesch_reading_ease,
    readability_ease,
    readability_grade,
    text_statistics,
)
from .syllables import count_syllables, count_syllables_in_word
from .tokenizer import count_sentences, count_words, sentence_count, word_count

__all__ = [
    # Tokenizer
    "count_sentences",
    "count_words",
    "sentence_count",
    "word_count",
    # Syllables
    "count_syllables",
    "count_syllables_in_word",
    # Readability
    "flesch_kincaid_grade",
    "flesch_reading_ease",
    "readability_grade",
    "readability_ease",
    "text_statistics",
    "analyze_readability",
    "FleschReadabilityScorer",
    # Intent
    "DEFAULT_KEYWORD_TABLE",
    "build_keyword_table",
    "classify_intent",
    "KeywordIntentClassifier",
]
