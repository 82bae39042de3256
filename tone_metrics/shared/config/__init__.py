"""Configuration constants for tone-metrics."""

from .constants import (
    CONTENT_GENERATION_KEYWORDS,
    DOMAIN_INQUIRY_KEYWORDS,
    FK_GRADE_EMPTY_DEFAULT,
    FK_GRADE_OFFSET,
    FK_GRADE_SENTENCE_WEIGHT,
    FK_GRADE_SYLLABLE_WEIGHT,
    GENERAL_CHAT_KEYWORDS,
    READING_EASE_BASE,
    READING_EASE_EMPTY_DEFAULT,
    READING_EASE_MAX,
    READING_EASE_MIN,
    READING_EASE_SENTENCE_WEIGHT,
    READING_EASE_SYLLABLE_WEIGHT,
    SENTENCE_TERMINATORS,
    STRESS_COMPLEX_TEXT_MIN_GRADE,
    STRESS_PARTIAL_RATE,
    STRESS_PASS_RATE,
    STRESS_PERFORMANCE_BUDGET_MS,
    STRESS_PERFORMANCE_ITERATIONS,
    STRESS_SIMPLE_TEXT_MAX_GRADE,
    STRESS_TARGET_TEXT_MAX_GRADE,
    TARGET_READABILITY_GRADE,
    VOWELS,
    WARNING_READABILITY_GRADE,
)

__all__ = [
    "SENTENCE_TERMINATORS",
    "VOWELS",
    "FK_GRADE_SENTENCE_WEIGHT",
    "FK_GRADE_SYLLABLE_WEIGHT",
    "FK_GRADE_OFFSET",
    "FK_GRADE_EMPTY_DEFAULT",
    "READING_EASE_BASE",
    "READING_EASE_SENTENCE_WEIGHT",
    "READING_EASE_SYLLABLE_WEIGHT",
    "READING_EASE_MIN",
    "READING_EASE_MAX",
    "READING_EASE_EMPTY_DEFAULT",
    "TARGET_READABILITY_GRADE",
    "WARNING_READABILITY_GRADE",
    "CONTENT_GENERATION_KEYWORDS",
    "DOMAIN_INQUIRY_KEYWORDS",
    "GENERAL_CHAT_KEYWORDS",
    "STRESS_SIMPLE_TEXT_MAX_GRADE",
    "STRESS_TARGET_TEXT_MAX_GRADE",
    "STRESS_COMPLEX_TEXT_MIN_GRADE",
    "STRESS_PERFORMANCE_ITERATIONS",
    "STRESS_PERFORMANCE_BUDGET_MS",
    "STRESS_PASS_RATE",
    "STRESS_PARTIAL_RATE",
]
