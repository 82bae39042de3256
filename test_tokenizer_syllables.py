"""
Tests for sentence/word tokenization and syllable estimation.

Covers:
1. Sentence boundaries from runs of terminal punctuation
2. Whitespace word splitting
3. Vowel-group syllable heuristic, including its known miscounts
"""

import logging

import pytest

from tone_metrics import (
    ValidationError,
    count_sentences,
    count_syllables,
    count_syllables_in_word,
    count_words,
    sentence_count,
    word_count,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("One. Two! Three?", 3),
        ("Wait... what?!", 2),
        ("No punctuation here", 1),
        ("", 1),
        ("   \n\t ", 1),
        ("Ends without a stop. Then more", 1),
        ("?!?!", 1),
    ],
)
def test_count_sentences(text: str, expected: int) -> None:
    """Runs of terminators count once and the result is never below 1."""
    assert count_sentences(text) == expected
    assert sentence_count(text) == expected


def test_count_words_splits_on_any_whitespace() -> None:
    """Spaces, tabs and newlines all separate words; empty pieces vanish."""
    words = count_words("  Hello\tworld\n\nagain,  friend ")

    assert words == ["Hello", "world", "again,", "friend"]
    assert word_count("  Hello\tworld\n\nagain,  friend ") == 4


def test_count_words_empty_input() -> None:
    """Empty and whitespace-only text has no words."""
    assert count_words("") == []
    assert count_words(" \t\n ") == []
    assert word_count("") == 0


@pytest.mark.parametrize(
    "word, expected",
    [
        ("cat", 1),
        ("The", 1),
        ("cat.", 1),
        ("Managing", 3),
        ("readability", 5),
        ("beautiful", 3),
        ("rhythm", 1),
        ("make", 1),
        ("see", 1),
        ("recipe", 2),
        ("follow", 2),
        ("account", 2),
    ],
)
def test_count_syllables_in_word(word: str, expected: int) -> None:
    """Vowel groups are counted with the silent-e adjustment."""
    assert count_syllables_in_word(word) == expected


def test_trailing_le_is_not_special_cased() -> None:
    """'simple' loses its final syllable to the silent-e rule."""
    assert count_syllables_in_word("simple") == 1
    assert count_syllables_in_word("simple.") == 1


@pytest.mark.parametrize("word", ["", "123", "!!!", "🚀", "--"])
def test_words_without_letters_count_as_one(word: str) -> None:
    """Every token is at least one syllable."""
    assert count_syllables_in_word(word) == 1


def test_count_syllables_sums_words() -> None:
    """Text syllables are the sum of the per-word estimates."""
    assert count_syllables("The cat sat on the mat. It was a good cat.") == 11
    assert count_syllables("") == 0


def test_non_string_input_is_rejected() -> None:
    """Public operations only accept str."""
    with pytest.raises(ValidationError) as exc_info:
        count_words(None)

    assert "field=text" in str(exc_info.value)
    assert exc_info.value.cause is None
    assert exc_info.value.context["rule"] == "must be str"

    with pytest.raises(ValidationError):
        count_syllables_in_word(b"cat")
