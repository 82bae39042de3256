"""
Keyword-based intent classification.

Categories are checked in a fixed priority order and the first category
with any keyword occurring in the lower-cased text wins. Keywords match
as substrings, so "hi" matches inside "this"; recall is favoured over
precision.
"""

import logging
from typing import Iterable, Optional, Sequence, Tuple, Union

from tone_metrics.domain.entities import IntentCategory, IntentClassification
from tone_metrics.shared.config import (
    CONTENT_GENERATION_KEYWORDS,
    DOMAIN_INQUIRY_KEYWORDS,
    GENERAL_CHAT_KEYWORDS,
)
from tone_metrics.shared.errors import ConfigurationError, ensure_text

logger = logging.getLogger(__name__)

KeywordTable = Tuple[Tuple[IntentCategory, Tuple[str, ...]], ...]

DEFAULT_KEYWORD_TABLE: KeywordTable = (
    (IntentCategory.CONTENT_GENERATION, CONTENT_GENERATION_KEYWORDS),
    (IntentCategory.DOMAIN_INQUIRY, DOMAIN_INQUIRY_KEYWORDS),
    (IntentCategory.GENERAL_CHAT, GENERAL_CHAT_KEYWORDS),
)


def _match(table: KeywordTable, text: str) -> IntentClassification:
    lowered = text.lower()

    for category, keywords in table:
        matched = tuple(keyword for keyword in keywords if keyword in lowered)
        if matched:
            return IntentClassification(category=category, matched_keywords=matched)

    return IntentClassification(category=IntentCategory.default())


def build_keyword_table(
    entries: Iterable[Tuple[Union[IntentCategory, str], Iterable[str]]],
) -> KeywordTable:
    """
    Validate and freeze an ordered keyword table.

    Args:
        entries: (category, keywords) pairs in priority order. Categories
            may be given as IntentCategory or as their label string.

    Returns:
        Immutable keyword table with lower-cased keywords

    Raises:
        ConfigurationError: If the table is empty, a category is unknown
            or repeated, a keyword is not a str, or a category has no
            usable keywords
    """
    table = []
    seen = set()

    for raw_category, raw_keywords in entries:
        try:
            category = IntentCategory(raw_category)
        except ValueError as e:
            raise ConfigurationError(
                message=f"Unknown intent category: {raw_category}",
                config_key="keyword_table",
                config_value=raw_category,
                expected_type=f"One of: {', '.join(c.value for c in IntentCategory)}",
                cause=e,
            ) from e

        if category in seen:
            raise ConfigurationError(
                message=f"Intent category listed twice: {category.value}",
                config_key="keyword_table",
                config_value=category.value,
            )
        seen.add(category)

        if isinstance(raw_keywords, str):
            raise ConfigurationError(
                message="Keywords must be a collection of strings, not a string",
                config_key=f"keyword_table.{category.value}",
                config_value=raw_keywords,
                expected_type="sequence of str",
            )

        raw_keywords = tuple(raw_keywords)
        for keyword in raw_keywords:
            if not isinstance(keyword, str):
                raise ConfigurationError(
                    message=f"Keyword for {category.value} is not a string: {keyword!r}",
                    config_key=f"keyword_table.{category.value}",
                    config_value=keyword,
                    expected_type="sequence of str",
                )

        keywords = tuple(keyword.lower() for keyword in raw_keywords)
        if not keywords or any(not keyword.strip() for keyword in keywords):
            raise ConfigurationError(
                message=f"Empty keyword list or keyword for {category.value}",
                config_key=f"keyword_table.{category.value}",
                config_value=list(keywords),
                expected_type="non-empty sequence of non-blank str",
            )

        table.append((category, keywords))

    if not table:
        raise ConfigurationError(
            message="Keyword table must contain at least one category",
            config_key="keyword_table",
        )

    return tuple(table)


def classify_intent(text: str) -> IntentCategory:
    """
    Classify text with the default keyword table.

    Args:
        text: Short user text

    Returns:
        First matching IntentCategory in priority order, general-chat
        when nothing matches

    Raises:
        ValidationError: If text is not a str
    """
    ensure_text(text)
    return _match(DEFAULT_KEYWORD_TABLE, text).category


class KeywordIntentClassifier:
    """
    Intent classifier driven by an ordered keyword table.

    Implements the IntentClassifier protocol. The table is validated and
    frozen at construction, so an instance can be shared freely.
    """

    def __init__(
        self,
        keyword_table: Optional[
            Sequence[Tuple[Union[IntentCategory, str], Iterable[str]]]
        ] = None,
    ):
        """
        Initialize classifier.

        Args:
            keyword_table: (category, keywords) pairs in priority order
                (default: content-generation, domain-inquiry, general-chat)

        Raises:
            ConfigurationError: If the keyword table is invalid
        """
        if keyword_table is None:
            self.keyword_table = DEFAULT_KEYWORD_TABLE
        else:
            self.keyword_table = build_keyword_table(keyword_table)

        priority = " > ".join(category.value for category in self.categories)
        logger.info(f"Created keyword intent classifier (priority: {priority})")

    @property
    def categories(self) -> Tuple[IntentCategory, ...]:
        """Categories in the order they are checked."""
        return tuple(category for category, _ in self.keyword_table)

    def classify(self, text: str) -> IntentClassification:
        """
        Classify text and report the matched keywords.

        Args:
            text: Short user text

        Returns:
            IntentClassification for text

        Raises:
            ValidationError: If text is not a str
        """
        ensure_text(text)
        result = _match(self.keyword_table, text)

        logger.debug(
            f"Classified intent: {result.category.value} "
            f"(keywords={list(result.matched_keywords)})"
        )

        return result

    def classify_category(self, text: str) -> IntentCategory:
        """Classify text to a category only."""
        return self.classify(text).category
