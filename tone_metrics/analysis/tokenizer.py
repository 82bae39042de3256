"""
Sentence and word tokenization.

Character classification is done by set membership rather than regular
expressions so results do not depend on the regex engine or locale.
"""

from typing import List

from tone_metrics.shared.config import SENTENCE_TERMINATORS
from tone_metrics.shared.errors import ensure_text


def count_sentences(text: str) -> int:
    """
    Count sentences in text.

    Each maximal run of ".", "!" or "?" is one sentence boundary, so
    "Wait... what?!" has two. Text with no terminator counts as one
    sentence.

    Args:
        text: Raw text

    Returns:
        Number of sentences, at least 1

    Raises:
        ValidationError: If text is not a str
    """
    ensure_text(text)

    boundaries = 0
    in_run = False
    for char in text:
        is_terminator = char in SENTENCE_TERMINATORS
        if is_terminator and not in_run:
            boundaries += 1
        in_run = is_terminator

    return max(1, boundaries)


def count_words(text: str) -> List[str]:
    """
    Split text into words on any whitespace.

    Args:
        text: Raw text

    Returns:
        Non-empty tokens in original order and case

    Raises:
        ValidationError: If text is not a str
    """
    ensure_text(text)
    # str.split() without a separator already drops empty fragments
    return text.split()


def word_count(text: str) -> int:
    """Number of whitespace-separated words in text."""
    return len(count_words(text))


def sentence_count(text: str) -> int:
    """Number of sentences in text (at least 1)."""
    return count_sentences(text)
