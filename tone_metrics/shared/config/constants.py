"""
Constants for tone-metrics.

This module contains the formula coefficients, thresholds and keyword
lists used across the codebase, each with a descriptive name and a short
note on where it is used.
"""

# ============================================================================
# TOKENIZER CONSTANTS
# ============================================================================

SENTENCE_TERMINATORS: frozenset[str] = frozenset(".!?")
"""
Characters that end a sentence.

Used in: analysis/tokenizer.py
A run of several terminators ("?!", "...") counts as one boundary.
"""

VOWELS: frozenset[str] = frozenset("aeiouy")
"""
Letters treated as vowels by the syllable estimator.

Used in: analysis/syllables.py
"y" is included so that words like "rhythm" get a nucleus.
"""

# ============================================================================
# FLESCH-KINCAID GRADE LEVEL
# ============================================================================

FK_GRADE_SENTENCE_WEIGHT: float = 0.39
FK_GRADE_SYLLABLE_WEIGHT: float = 11.8
FK_GRADE_OFFSET: float = 15.59
"""
Coefficients of the Flesch-Kincaid grade formula:

    0.39 * (words / sentences) + 11.8 * (syllables / words) - 15.59
"""

FK_GRADE_EMPTY_DEFAULT: float = 0.0
"""Grade returned when a text has no words."""

# ============================================================================
# FLESCH READING EASE
# ============================================================================

READING_EASE_BASE: float = 206.835
READING_EASE_SENTENCE_WEIGHT: float = 1.015
READING_EASE_SYLLABLE_WEIGHT: float = 84.6
"""
Coefficients of the Flesch reading ease formula:

    206.835 - 1.015 * (words / sentences) - 84.6 * (syllables / words)
"""

READING_EASE_MIN: float = 0.0
READING_EASE_MAX: float = 100.0

READING_EASE_EMPTY_DEFAULT: float = 100.0
"""
Ease returned when a text has no words.

Differs from FK_GRADE_EMPTY_DEFAULT: an empty text is both grade 0
and maximally easy.
"""

# ============================================================================
# READABILITY TARGETS
# ============================================================================

TARGET_READABILITY_GRADE: float = 8.0
"""
Grade level that published copy should stay at or below.

Used in: domain/entities/readability.py, infrastructure/container.py
"""

WARNING_READABILITY_GRADE: float = 10.0
"""
Grade level above which copy is flagged as too complex.

Between TARGET_READABILITY_GRADE and this value text is "near target".
"""

# ============================================================================
# INTENT KEYWORDS
# ============================================================================

CONTENT_GENERATION_KEYWORDS: tuple[str, ...] = (
    "write",
    "create",
    "draft",
    "generate",
    "compose",
)
"""Keywords marking a request to produce copy. Checked first."""

DOMAIN_INQUIRY_KEYWORDS: tuple[str, ...] = (
    "jio",
    "recharge",
    "fiber",
    "postpaid",
    "prepaid",
)
"""Keywords marking a question about products or plans. Checked second."""

GENERAL_CHAT_KEYWORDS: tuple[str, ...] = (
    "hello",
    "hi",
    "thanks",
    "bye",
    "how are you",
)
"""
Keywords marking small talk. Checked last.

Matching is by substring, so "hi" also matches "this".
"""

# ============================================================================
# STRESS CHECK THRESHOLDS
# ============================================================================

STRESS_SIMPLE_TEXT_MAX_GRADE: float = 6.0
STRESS_TARGET_TEXT_MAX_GRADE: float = 10.0
STRESS_COMPLEX_TEXT_MIN_GRADE: float = 10.0

STRESS_PERFORMANCE_ITERATIONS: int = 1000
STRESS_PERFORMANCE_BUDGET_MS: float = 1000.0
"""
1000 grade computations on a short sentence must finish within one second.

Used in: stress/runner.py
"""

STRESS_PASS_RATE: float = 90.0
STRESS_PARTIAL_RATE: float = 70.0
"""
Pass-rate cut-offs (percent) for the overall stress verdict.

>= 90 is PASSED, >= 70 is PARTIAL, anything lower is FAILED.
"""
