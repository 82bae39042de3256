"""
Heuristic syllable estimation.

Counts vowel groups instead of looking words up in a dictionary. Irregular
words are miscounted ("simple" is one syllable, "recipe" two); readability
thresholds are tuned against this behaviour, so it is kept as is.
"""

from tone_metrics.analysis.tokenizer import count_words
from tone_metrics.shared.config import VOWELS
from tone_metrics.shared.errors import ensure_text


def count_syllables_in_word(word: str) -> int:
    """
    Estimate syllables in a single word.

    Steps:
        1. Drop every non-letter character ("cat." -> "cat")
        2. Lower-case
        3. Count runs of vowels (a, e, i, o, u, y)
        4. Drop one for a trailing silent "e" when more than one run exists
        5. Never return less than 1

    Args:
        word: A single token, punctuation allowed

    Returns:
        Estimated syllable count, at least 1

    Raises:
        ValidationError: If word is not a str
    """
    ensure_text(word, field_name="word")

    cleaned = "".join(char for char in word if char.isalpha()).lower()

    count = 0
    previous_was_vowel = False
    for char in cleaned:
        is_vowel = char in VOWELS
        if is_vowel and not previous_was_vowel:
            count += 1
        previous_was_vowel = is_vowel

    # Silent 'e'
    if cleaned.endswith("e") and count > 1:
        count -= 1

    return max(1, count)


def count_syllables(text: str) -> int:
    """
    Estimate total syllables in text.

    Args:
        text: Raw text

    Returns:
        Sum of per-word estimates, 0 for text without words
    """
    ensure_text(text)
    return sum(count_syllables_in_word(word) for word in count_words(text))
