"""
Tests for the Flesch readability scorer.

Covers:
1. Formula guards and clamping on raw counts
2. Divergent defaults for empty text (grade 0, ease 100)
3. Grade bands for simple, target and complex sample texts
4. ReadabilityReport verdicts against the grade target
"""

import logging

import pytest

from tone_metrics import (
    ConfigurationError,
    FleschReadabilityScorer,
    ReadabilityStatus,
    analyze_readability,
    flesch_kincaid_grade,
    flesch_reading_ease,
    readability_ease,
    readability_grade,
    text_statistics,
)
from tone_metrics.domain.interfaces import ReadabilityScorer

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

SIMPLE_TEXT = "The cat sat on the mat. It was a good cat."
TARGET_TEXT = (
    "Managing your account is simple. Log in and follow the steps shown on screen."
)
COMPLEX_TEXTS = [
    "The implementation necessitates comprehensive understanding of multifaceted computational paradigms.",
    "Subsequently, the aforementioned circumstances precipitated unprecedented ramifications.",
    "Notwithstanding the considerable complexities involved, the functionality exhibits remarkable characteristics.",
]
SAMPLE_TEXTS = [
    "",
    "   ",
    "🚀 ✨ 🎉",
    "Hi.",
    SIMPLE_TEXT,
    TARGET_TEXT,
    *COMPLEX_TEXTS,
    "a " * 200,
    "Antidisestablishmentarianism " * 40,
]


def test_grade_formula() -> None:
    """0.39 * words/sentence + 11.8 * syllables/word - 15.59."""
    assert flesch_kincaid_grade(1, 10, 20) == pytest.approx(11.91)


def test_grade_is_zero_without_sentences_or_words() -> None:
    """Zero counts short-circuit to grade 0."""
    assert flesch_kincaid_grade(0, 10, 20) == 0
    assert flesch_kincaid_grade(1, 0, 0) == 0


def test_grade_is_floored_at_zero() -> None:
    """Very short words in short sentences would score negative."""
    assert flesch_kincaid_grade(2, 4, 4) == 0


def test_ease_formula_and_clamping() -> None:
    """206.835 - 1.015 * words/sentence - 84.6 * syllables/word, within [0, 100]."""
    assert flesch_reading_ease(1, 30, 60) == pytest.approx(7.185)
    assert flesch_reading_ease(1, 10, 10) == 100
    assert flesch_reading_ease(1, 50, 150) == 0


def test_ease_is_hundred_without_sentences_or_words() -> None:
    """Zero counts short-circuit to ease 100."""
    assert flesch_reading_ease(0, 10, 20) == 100
    assert flesch_reading_ease(1, 0, 0) == 100


def test_empty_text_defaults_diverge() -> None:
    """Empty text is grade 0 and reading ease 100."""
    assert readability_grade("") == 0
    assert readability_ease("") == 100


@pytest.mark.parametrize("text", SAMPLE_TEXTS)
def test_scores_stay_in_range(text: str) -> None:
    """Grade is never negative and ease never leaves [0, 100]."""
    assert readability_grade(text) >= 0
    assert 0 <= readability_ease(text) <= 100


def test_grade_does_not_decrease_with_more_syllables() -> None:
    """At fixed sentence and word counts grade rises with syllables."""
    grades = [flesch_kincaid_grade(3, 30, syllables) for syllables in range(30, 120)]

    assert all(later >= earlier for earlier, later in zip(grades, grades[1:]))


def test_simple_text_is_below_grade_six() -> None:
    """Short sentences of one-syllable words read easily."""
    assert readability_grade(SIMPLE_TEXT) < 6.0


def test_target_text_is_at_most_grade_ten() -> None:
    """Plain product copy stays within the grade 10 ceiling."""
    stats = text_statistics(TARGET_TEXT)

    assert (stats.sentence_count, stats.word_count, stats.syllable_count) == (2, 14, 18)
    assert readability_grade(TARGET_TEXT) <= 10.0


def test_complex_texts_average_above_grade_ten() -> None:
    """Long polysyllabic sentences score as advanced."""
    grades = [readability_grade(text) for text in COMPLEX_TEXTS]
    logger.info(f"Complex grades: {[round(g, 1) for g in grades]}")

    assert sum(grades) / len(grades) > 10.0


def test_scoring_is_deterministic() -> None:
    """Repeated calls give identical results."""
    assert readability_grade(TARGET_TEXT) == readability_grade(TARGET_TEXT)
    assert readability_ease(TARGET_TEXT) == readability_ease(TARGET_TEXT)


def test_text_statistics_averages() -> None:
    """Averages are derived from the counts and are 0 for empty text."""
    stats = text_statistics(SIMPLE_TEXT)

    assert stats.sentence_count == 2
    assert stats.word_count == 11
    assert stats.avg_words_per_sentence == pytest.approx(5.5)
    assert stats.avg_syllables_per_word == pytest.approx(1.0)

    empty = text_statistics("")
    assert empty.sentence_count == 1
    assert empty.avg_syllables_per_word == 0.0


def test_analyze_readability_report() -> None:
    """The report carries both scores and the verdict."""
    report = analyze_readability(TARGET_TEXT)

    assert report.grade == pytest.approx(readability_grade(TARGET_TEXT))
    assert report.ease == pytest.approx(readability_ease(TARGET_TEXT))
    assert report.target_grade == 8.0
    assert report.status is ReadabilityStatus.MEETS_TARGET
    assert report.meets_target

    data = report.to_dict()
    assert data["word_count"] == 14
    assert data["status"] == "meets-target"


def test_complex_text_is_above_target() -> None:
    """Complex text misses both the target and warning grades."""
    report = analyze_readability(COMPLEX_TEXTS[0])

    assert report.status is ReadabilityStatus.ABOVE_TARGET
    assert not report.meets_target


@pytest.mark.parametrize(
    "grade, expected",
    [
        (0.0, ReadabilityStatus.MEETS_TARGET),
        (8.0, ReadabilityStatus.MEETS_TARGET),
        (9.0, ReadabilityStatus.NEAR_TARGET),
        (10.0, ReadabilityStatus.NEAR_TARGET),
        (10.5, ReadabilityStatus.ABOVE_TARGET),
    ],
)
def test_status_bands(grade: float, expected: ReadabilityStatus) -> None:
    """Grades are banded against target 8 and warning 10."""
    assert ReadabilityStatus.for_grade(grade, 8.0, 10.0) is expected


def test_scorer_uses_its_own_target() -> None:
    """A stricter scorer judges the same text differently."""
    scorer = FleschReadabilityScorer(target_grade=2.0, warning_grade=5.0)

    assert isinstance(scorer, ReadabilityScorer)
    assert scorer.grade(TARGET_TEXT) == readability_grade(TARGET_TEXT)
    assert scorer.analyze(TARGET_TEXT).status is ReadabilityStatus.NEAR_TARGET


def test_scorer_rejects_inverted_grades() -> None:
    """Warning grade below target grade is a configuration error."""
    with pytest.raises(ConfigurationError):
        FleschReadabilityScorer(target_grade=10.0, warning_grade=8.0)


@pytest.mark.parametrize(
    "target_grade, warning_grade",
    [(-3.0, -1.0), (-0.5, 10.0)],
)
def test_scorer_rejects_negative_target(target_grade: float, warning_grade: float) -> None:
    """A negative target grade is rejected however the scorer is built."""
    with pytest.raises(ConfigurationError) as exc_info:
        FleschReadabilityScorer(target_grade=target_grade, warning_grade=warning_grade)

    assert "config_key=target_grade" in str(exc_info.value)


def test_scorer_accepts_zero_target() -> None:
    """Grade 0 is the lowest valid target."""
    scorer = FleschReadabilityScorer(target_grade=0.0, warning_grade=0.0)

    assert scorer.analyze("The cat sat.").status is ReadabilityStatus.MEETS_TARGET
