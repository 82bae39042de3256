"""
Readability scoring with the Flesch formulas.

Implements Flesch-Kincaid grade level and Flesch reading ease on top of
the tokenizer and syllable estimator.

The two formulas deliberately disagree on empty input: a text without
words is grade 0 and reading ease 100.
"""

import logging
from typing import Optional

from tone_metrics.analysis.syllables import count_syllables_in_word
from tone_metrics.analysis.tokenizer import count_sentences, count_words
from tone_metrics.domain.entities import (
    ReadabilityReport,
    ReadabilityStatus,
    TextStatistics,
)
from tone_metrics.shared.config import (
    FK_GRADE_EMPTY_DEFAULT,
    FK_GRADE_OFFSET,
    FK_GRADE_SENTENCE_WEIGHT,
    FK_GRADE_SYLLABLE_WEIGHT,
    READING_EASE_BASE,
    READING_EASE_EMPTY_DEFAULT,
    READING_EASE_MAX,
    READING_EASE_MIN,
    READING_EASE_SENTENCE_WEIGHT,
    READING_EASE_SYLLABLE_WEIGHT,
    TARGET_READABILITY_GRADE,
    WARNING_READABILITY_GRADE,
)
from tone_metrics.shared.errors import ConfigurationError

logger = logging.getLogger(__name__)


def flesch_kincaid_grade(
    sentence_count: int, word_count: int, syllable_count: int
) -> float:
    """
    Calculate Flesch-Kincaid Grade Level from raw counts.

    Returns the US grade level needed to understand the text.

    5.0 = 5th grade level
    8.0 = 8th grade level
    12.0 = 12th grade (high school senior)
    13+ = College level

    Args:
        sentence_count: Number of sentences
        word_count: Number of words
        syllable_count: Number of syllables

    Returns:
        Grade level, never below 0 (0 when there are no sentences or words)
    """
    if sentence_count <= 0 or word_count <= 0:
        return FK_GRADE_EMPTY_DEFAULT

    avg_words_per_sentence = word_count / sentence_count
    avg_syllables_per_word = syllable_count / word_count

    grade = (
        (FK_GRADE_SENTENCE_WEIGHT * avg_words_per_sentence)
        + (FK_GRADE_SYLLABLE_WEIGHT * avg_syllables_per_word)
        - FK_GRADE_OFFSET
    )

    return max(0.0, grade)


def flesch_reading_ease(
    sentence_count: int, word_count: int, syllable_count: int
) -> float:
    """
    Calculate Flesch Reading Ease score (0-100) from raw counts.
    Higher score = easier to read.

    90-100: Very easy (5th grade)
    60-70: Standard (8th-9th grade)
    0-30: Very difficult (college graduate)

    Args:
        sentence_count: Number of sentences
        word_count: Number of words
        syllable_count: Number of syllables

    Returns:
        Score clamped to [0, 100] (100 when there are no sentences or words)
    """
    if sentence_count <= 0 or word_count <= 0:
        return READING_EASE_EMPTY_DEFAULT

    avg_words_per_sentence = word_count / sentence_count
    avg_syllables_per_word = syllable_count / word_count

    score = (
        READING_EASE_BASE
        - (READING_EASE_SENTENCE_WEIGHT * avg_words_per_sentence)
        - (READING_EASE_SYLLABLE_WEIGHT * avg_syllables_per_word)
    )

    # Clamp between 0 and 100
    return max(READING_EASE_MIN, min(READING_EASE_MAX, score))


def text_statistics(text: str) -> TextStatistics:
    """
    Tokenize text once and collect the counts both formulas need.

    Args:
        text: Raw text

    Returns:
        TextStatistics for text
    """
    words = count_words(text)
    return TextStatistics(
        sentence_count=count_sentences(text),
        word_count=len(words),
        syllable_count=sum(count_syllables_in_word(word) for word in words),
    )


def readability_grade(text: str) -> float:
    """Flesch-Kincaid grade level of text (>= 0)."""
    stats = text_statistics(text)
    return flesch_kincaid_grade(
        stats.sentence_count, stats.word_count, stats.syllable_count
    )


def readability_ease(text: str) -> float:
    """Flesch reading ease of text, within [0, 100]."""
    stats = text_statistics(text)
    return flesch_reading_ease(
        stats.sentence_count, stats.word_count, stats.syllable_count
    )


def analyze_readability(
    text: str,
    target_grade: float = TARGET_READABILITY_GRADE,
    warning_grade: float = WARNING_READABILITY_GRADE,
) -> ReadabilityReport:
    """
    Comprehensive readability analysis.

    Args:
        text: Raw text
        target_grade: Highest grade that meets the target
        warning_grade: Highest grade still considered near the target

    Returns:
        ReadabilityReport with statistics, both scores and a verdict
    """
    stats = text_statistics(text)
    grade = flesch_kincaid_grade(
        stats.sentence_count, stats.word_count, stats.syllable_count
    )
    ease = flesch_reading_ease(
        stats.sentence_count, stats.word_count, stats.syllable_count
    )

    return ReadabilityReport(
        statistics=stats,
        grade=grade,
        ease=ease,
        target_grade=target_grade,
        status=ReadabilityStatus.for_grade(grade, target_grade, warning_grade),
    )


class FleschReadabilityScorer:
    """
    Readability scorer bound to a grade target.

    Implements the ReadabilityScorer protocol. The scoring itself is
    stateless; the instance only carries the target and warning grades
    used for the report verdict.
    """

    def __init__(
        self,
        target_grade: Optional[float] = None,
        warning_grade: Optional[float] = None,
    ):
        """
        Initialize scorer.

        Args:
            target_grade: Highest grade that meets the target (default: 8.0)
            warning_grade: Highest grade near the target (default: 10.0)

        Raises:
            ConfigurationError: If target_grade is negative or
                warning_grade is below target_grade
        """
        self.target_grade = (
            TARGET_READABILITY_GRADE if target_grade is None else target_grade
        )
        self.warning_grade = (
            WARNING_READABILITY_GRADE if warning_grade is None else warning_grade
        )

        if self.target_grade < 0:
            raise ConfigurationError(
                message=f"Target grade must be >= 0, got {self.target_grade}",
                config_key="target_grade",
                config_value=self.target_grade,
                expected_type="non-negative float",
            )

        if self.warning_grade < self.target_grade:
            raise ConfigurationError(
                message="Warning grade must not be below target grade",
                config_key="warning_grade",
                config_value=self.warning_grade,
                expected_type=f">= {self.target_grade}",
            )

        logger.info(
            f"Created Flesch scorer (target_grade={self.target_grade}, "
            f"warning_grade={self.warning_grade})"
        )

    def grade(self, text: str) -> float:
        """Flesch-Kincaid grade level of text."""
        return readability_grade(text)

    def ease(self, text: str) -> float:
        """Flesch reading ease of text."""
        return readability_ease(text)

    def analyze(self, text: str) -> ReadabilityReport:
        """Full report judged against this scorer's targets."""
        return analyze_readability(
            text, target_grade=self.target_grade, warning_grade=self.warning_grade
        )
