"""
Readability Scorer interface (Protocol).

Defines the contract for readability scoring strategies.
"""

from typing import Protocol, runtime_checkable

from tone_metrics.domain.entities import ReadabilityReport


@runtime_checkable
class ReadabilityScorer(Protocol):
    """
    Readability Scorer protocol (interface).

    Using Protocol allows structural subtyping without inheritance.

    Implementations: FleschReadabilityScorer
    """

    def grade(self, text: str) -> float:
        """
        Estimate the school grade level needed to read text.

        Args:
            text: Raw text

        Returns:
            Grade level, never below 0
        """
        ...

    def ease(self, text: str) -> float:
        """
        Score how easy text is to read.

        Args:
            text: Raw text

        Returns:
            Score in [0, 100], higher is easier
        """
        ...

    def analyze(self, text: str) -> ReadabilityReport:
        """
        Produce the full readability report for text.

        Args:
            text: Raw text

        Returns:
            ReadabilityReport with statistics, both scores and a verdict
        """
        ...
