"""
Intent entities - categories and classification results.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Tuple

from .validation import ValidationConfig, ValidationLevel


class IntentCategory(str, Enum):
    """
    Intent category enumeration.

    Members compare equal to their label strings, e.g.
    IntentCategory.GENERAL_CHAT == "general-chat".
    """

    CONTENT_GENERATION = "content-generation"
    DOMAIN_INQUIRY = "domain-inquiry"
    GENERAL_CHAT = "general-chat"

    @property
    def requires_validation(self) -> bool:
        """Only generated content goes through downstream validation."""
        return self is IntentCategory.CONTENT_GENERATION

    @property
    def validation_level(self) -> ValidationLevel:
        """How deeply text of this category is checked."""
        if self is IntentCategory.CONTENT_GENERATION:
            return ValidationLevel.FULL
        return ValidationLevel.MINIMAL

    @property
    def validation_config(self) -> ValidationConfig:
        """Check flags for this category's validation level."""
        return ValidationConfig.for_level(self.validation_level)

    @classmethod
    def default(cls) -> "IntentCategory":
        """Category used when no keyword list matches."""
        return cls.GENERAL_CHAT


@dataclass(frozen=True)
class IntentClassification:
    """
    Result of classifying one text (immutable).

    matched_keywords lists the keywords of the winning category found in
    the text, in keyword-list order. It is empty for the fallback.
    """

    category: IntentCategory
    matched_keywords: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def requires_validation(self) -> bool:
        """Check if downstream validation should run for this text."""
        return self.category.requires_validation

    @property
    def validation_level(self) -> ValidationLevel:
        return self.category.validation_level

    @property
    def validation_config(self) -> ValidationConfig:
        """Checks to run on this text; readability only for full validation."""
        return self.category.validation_config

    @property
    def is_fallback(self) -> bool:
        """Check if no keyword matched."""
        return not self.matched_keywords

    def to_dict(self) -> Dict[str, Any]:
        """Convert classification to dictionary for serialization."""
        return {
            "category": self.category.value,
            "matched_keywords": list(self.matched_keywords),
            "requires_validation": self.requires_validation,
            "validation_level": self.validation_level.value,
        }
