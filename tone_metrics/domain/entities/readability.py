"""
Readability entities - text statistics and scored reports.

Part of the readability domain model. All objects are immutable and
computed fresh for every call.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class ReadabilityStatus(str, Enum):
    """
    How a grade level compares with the configured targets.

    Mirrors the traffic-light bands used in compliance reports.
    """

    MEETS_TARGET = "meets-target"
    NEAR_TARGET = "near-target"
    ABOVE_TARGET = "above-target"

    @classmethod
    def for_grade(
        cls, grade: float, target_grade: float, warning_grade: float
    ) -> "ReadabilityStatus":
        """
        Classify a grade against the target and warning levels.

        Args:
            grade: Flesch-Kincaid grade level
            target_grade: Highest grade that meets the target
            warning_grade: Highest grade still considered near the target

        Returns:
            ReadabilityStatus for the grade
        """
        if grade <= target_grade:
            return cls.MEETS_TARGET
        if grade <= warning_grade:
            return cls.NEAR_TARGET
        return cls.ABOVE_TARGET


@dataclass(frozen=True)
class TextStatistics:
    """
    Counts extracted from a text (immutable).

    sentence_count is always >= 1; word_count and syllable_count are 0
    for text without words.
    """

    sentence_count: int = 1
    word_count: int = 0
    syllable_count: int = 0

    @property
    def avg_words_per_sentence(self) -> float:
        """Average sentence length in words."""
        if self.sentence_count <= 0:
            return 0.0
        return self.word_count / self.sentence_count

    @property
    def avg_syllables_per_word(self) -> float:
        """Average word length in syllables."""
        if self.word_count <= 0:
            return 0.0
        return self.syllable_count / self.word_count

    def to_dict(self) -> Dict[str, Any]:
        """Convert statistics to dictionary for serialization."""
        return {
            "sentence_count": self.sentence_count,
            "word_count": self.word_count,
            "syllable_count": self.syllable_count,
            "avg_words_per_sentence": round(self.avg_words_per_sentence, 2),
            "avg_syllables_per_word": round(self.avg_syllables_per_word, 2),
        }


@dataclass(frozen=True)
class ReadabilityReport:
    """
    Readability scores for one text (immutable).

    Bundles the raw statistics with both Flesch scores and the verdict
    against the grade target the text was judged by.
    """

    statistics: TextStatistics
    grade: float
    ease: float
    target_grade: float
    status: ReadabilityStatus

    @property
    def meets_target(self) -> bool:
        """Check if the grade is at or below the target grade."""
        return self.status is ReadabilityStatus.MEETS_TARGET

    def to_dict(self) -> Dict[str, Any]:
        """Convert report to dictionary for serialization."""
        return {
            **self.statistics.to_dict(),
            "flesch_kincaid_grade": round(self.grade, 1),
            "flesch_reading_ease": round(self.ease, 1),
            "target_grade": self.target_grade,
            "status": self.status.value,
        }
