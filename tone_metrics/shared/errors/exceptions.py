"""
Custom exception hierarchy for tone-metrics.

The scoring and classification functions are total over text, so errors
only surface at the edges: a caller passing something that is not text,
or a scorer/classifier built from bad settings.
"""

from typing import Any, Dict, Optional


class ToneMetricsError(Exception):
    """
    Base exception for all tone-metrics errors.

    Carries a message, a dict of the offending settings or inputs, and the
    lower-level exception when one triggered it.
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.context = context or {}
        self.cause = cause

    def __str__(self) -> str:
        """Return message followed by (key=value, ...) and the cause, if any."""
        rendered = self.message

        if self.context:
            details = ", ".join(f"{k}={v}" for k, v in self.context.items())
            rendered = f"{rendered} ({details})"

        if self.cause:
            rendered = f"{rendered} [Caused by: {type(self.cause).__name__}: {self.cause}]"

        return rendered


class ConfigurationError(ToneMetricsError):
    """
    Raised when a scorer, classifier or AnalysisConfiguration gets bad settings.

    Examples:
        - Keyword table is empty, repeats a category or holds a non-str keyword
        - Target grade is negative or above the warning grade
        - TONE_METRICS_* environment override is not a number
    """

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        config_value: Optional[Any] = None,
        expected_type: Optional[str] = None,
        cause: Optional[Exception] = None,
    ):
        """
        Initialize configuration error.

        Args:
            message: Error message
            config_key: Setting that is invalid (e.g. "keyword_table.general-chat")
            config_value: Invalid value provided
            expected_type: What the setting should look like
            cause: Parsing error behind it, e.g. float() failing on an env var
        """
        context = {}
        if config_key:
            context["config_key"] = config_key
        if config_value is not None:
            context["config_value"] = str(config_value)
        if expected_type:
            context["expected_type"] = expected_type

        super().__init__(message=message, context=context, cause=cause)


class ValidationError(ToneMetricsError):
    """
    Raised when a text operation receives something other than str.

    Examples:
        - readability_grade(None)
        - count_syllables_in_word(b"cat")
    """

    def __init__(
        self,
        message: str,
        field_name: Optional[str] = None,
        invalid_value: Optional[Any] = None,
        validation_rule: Optional[str] = None,
    ):
        """
        Initialize validation error.

        Args:
            message: Error message
            field_name: Parameter that received the bad value ("text", "word")
            invalid_value: Type name of the value received
            validation_rule: Rule that was violated
        """
        context = {}
        if field_name:
            context["field"] = field_name
        if invalid_value is not None:
            context["value"] = str(invalid_value)
        if validation_rule:
            context["rule"] = validation_rule

        super().__init__(message=message, context=context)


def ensure_text(value: Any, field_name: str = "text") -> str:
    """
    Check that a public operation received a string.

    Args:
        value: Value passed by the caller
        field_name: Parameter name used in the error context

    Returns:
        The value unchanged

    Raises:
        ValidationError: If value is not a str
    """
    if not isinstance(value, str):
        raise ValidationError(
            message=f"Expected text as str, got {type(value).__name__}",
            field_name=field_name,
            invalid_value=type(value).__name__,
            validation_rule="must be str",
        )
    return value
