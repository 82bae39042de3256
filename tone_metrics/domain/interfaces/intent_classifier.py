"""
Intent Classifier interface (Protocol).

Defines the contract for intent classification strategies.
"""

from typing import Protocol, runtime_checkable

from tone_metrics.domain.entities import IntentCategory, IntentClassification


@runtime_checkable
class IntentClassifier(Protocol):
    """
    Intent Classifier protocol (interface).

    Implementations: KeywordIntentClassifier
    """

    def classify(self, text: str) -> IntentClassification:
        """
        Classify text and report the evidence.

        Args:
            text: Short user text

        Returns:
            IntentClassification with category and matched keywords
        """
        ...

    def classify_category(self, text: str) -> IntentCategory:
        """
        Classify text to a category only.

        Args:
            text: Short user text

        Returns:
            IntentCategory (general-chat when nothing matches)
        """
        ...
