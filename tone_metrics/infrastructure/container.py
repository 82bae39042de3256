"""
Simple dependency injection container.

Provides centralized configuration and object creation
without requiring external DI libraries.

Follows the Service Locator pattern (lightweight alternative to DI containers).
"""

import logging
import os
from dataclasses import dataclass
from typing import Iterable, Mapping, Optional, Sequence, Tuple, Union

from tone_metrics.analysis import FleschReadabilityScorer, KeywordIntentClassifier
from tone_metrics.domain.entities import IntentCategory
from tone_metrics.domain.interfaces import IntentClassifier, ReadabilityScorer
from tone_metrics.shared import (
    TARGET_READABILITY_GRADE,
    WARNING_READABILITY_GRADE,
    ConfigurationError,
)

logger = logging.getLogger(__name__)

ENV_TARGET_GRADE = "TONE_METRICS_TARGET_GRADE"
ENV_WARNING_GRADE = "TONE_METRICS_WARNING_GRADE"


def _read_grade(environ: Mapping[str, str], key: str, default: float) -> float:
    raw_value = environ.get(key)
    if raw_value is None or not raw_value.strip():
        return default

    try:
        return float(raw_value)
    except ValueError as e:
        raise ConfigurationError(
            message=f"Invalid grade in environment variable {key}",
            config_key=key,
            config_value=raw_value,
            expected_type="float",
            cause=e,
        ) from e


@dataclass
class AnalysisConfiguration:
    """
    Configuration for tone-metrics.

    Centralizes all configuration in one place following
    the Configuration Object pattern.
    """

    # Readability config
    target_grade: float = TARGET_READABILITY_GRADE
    warning_grade: float = WARNING_READABILITY_GRADE

    # Intent config (None uses the built-in table)
    keyword_table: Optional[
        Sequence[Tuple[Union[IntentCategory, str], Iterable[str]]]
    ] = None

    def __post_init__(self) -> None:
        """Validate configuration."""
        if self.target_grade < 0:
            raise ConfigurationError(
                message=f"target_grade must be >= 0, got {self.target_grade}",
                config_key="target_grade",
                config_value=self.target_grade,
                expected_type="non-negative float",
            )

        if self.warning_grade < self.target_grade:
            raise ConfigurationError(
                message=(
                    f"warning_grade ({self.warning_grade}) must be >= "
                    f"target_grade ({self.target_grade})"
                ),
                config_key="warning_grade",
                config_value=self.warning_grade,
            )

    @classmethod
    def from_env(
        cls, environ: Optional[Mapping[str, str]] = None
    ) -> "AnalysisConfiguration":
        """
        Build configuration from environment variables.

        Reads TONE_METRICS_TARGET_GRADE and TONE_METRICS_WARNING_GRADE;
        unset or blank variables keep the defaults. Call load_dotenv()
        first to pick up a .env file.

        Args:
            environ: Mapping to read from (default: os.environ)

        Returns:
            Validated AnalysisConfiguration

        Raises:
            ConfigurationError: If a variable is not a number or the
                resulting grades are invalid
        """
        environ = os.environ if environ is None else environ

        return cls(
            target_grade=_read_grade(
                environ, ENV_TARGET_GRADE, TARGET_READABILITY_GRADE
            ),
            warning_grade=_read_grade(
                environ, ENV_WARNING_GRADE, WARNING_READABILITY_GRADE
            ),
        )


class Container:
    """
    Simple dependency injection container.

    Manages object lifecycle and dependency wiring. Scorer and classifier
    are created lazily, once per container.
    """

    def __init__(self, config: Optional[AnalysisConfiguration] = None):
        """
        Initialize container.

        Args:
            config: Analysis configuration (uses defaults if not provided)
        """
        self.config = config or AnalysisConfiguration()
        self._scorer: Optional[ReadabilityScorer] = None
        self._classifier: Optional[IntentClassifier] = None

        logger.info("Container initialized with configuration")

    def get_readability_scorer(self) -> ReadabilityScorer:
        """
        Get readability scorer instance (singleton per container).

        Returns:
            Scorer implementing ReadabilityScorer protocol
        """
        if self._scorer is None:
            logger.info("Creating readability scorer (first call)")
            self._scorer = FleschReadabilityScorer(
                target_grade=self.config.target_grade,
                warning_grade=self.config.warning_grade,
            )

        return self._scorer

    def get_intent_classifier(self) -> IntentClassifier:
        """
        Get intent classifier instance (singleton per container).

        Returns:
            Classifier implementing IntentClassifier protocol

        Raises:
            ConfigurationError: If the configured keyword table is invalid
        """
        if self._classifier is None:
            logger.info("Creating intent classifier (first call)")
            self._classifier = KeywordIntentClassifier(
                keyword_table=self.config.keyword_table
            )

        return self._classifier

    def reset(self) -> None:
        """Reset container (clear singletons)."""
        logger.info("Resetting container (clearing singletons)")
        self._scorer = None
        self._classifier = None
