"""
Validation entities - how much checking a text gets after classification.

Small talk and product questions only get a light pass; generated copy
goes through every check, including readability.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class ValidationLevel(str, Enum):
    """Validation depth, from no checks to strict compliance."""

    NONE = "none"
    MINIMAL = "minimal"
    STANDARD = "standard"
    FULL = "full"
    STRICT = "strict"


@dataclass(frozen=True)
class ValidationConfig:
    """
    Checks to run for a validation level (immutable).

    Use ValidationConfig.for_level() rather than building flags by hand.
    """

    check_avoid_words: bool = True
    check_readability: bool = True
    calculate_trust_score: bool = True
    apply_auto_fixes: bool = True
    strict_mode: bool = False

    @classmethod
    def for_level(cls, level: ValidationLevel) -> "ValidationConfig":
        """
        Get the check flags for a validation level.

        Args:
            level: Validation level

        Returns:
            ValidationConfig for the level
        """
        if level is ValidationLevel.NONE:
            return cls(
                check_avoid_words=False,
                check_readability=False,
                calculate_trust_score=False,
                apply_auto_fixes=False,
            )
        if level is ValidationLevel.MINIMAL:
            return cls(
                check_readability=False,
                calculate_trust_score=False,
                apply_auto_fixes=False,
            )
        if level is ValidationLevel.STANDARD:
            return cls()

        # FULL and STRICT run everything; STRICT also turns on strict mode
        return cls(strict_mode=level is ValidationLevel.STRICT)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary for serialization."""
        return {
            "check_avoid_words": self.check_avoid_words,
            "check_readability": self.check_readability,
            "calculate_trust_score": self.calculate_trust_score,
            "apply_auto_fixes": self.apply_auto_fixes,
            "strict_mode": self.strict_mode,
        }
