"""
Stress checks for the readability scorer and intent classifier.

Feeds fixed inputs to the analysis layer, compares the outputs with
target thresholds and collects the outcome as an immutable report.
Nothing is accumulated in module state: every run builds its own
tuple of CheckResult objects and hands it back to the caller.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple

from tone_metrics.analysis import FleschReadabilityScorer, KeywordIntentClassifier
from tone_metrics.domain.entities import IntentCategory
from tone_metrics.domain.interfaces import IntentClassifier, ReadabilityScorer
from tone_metrics.shared.config import (
    STRESS_COMPLEX_TEXT_MIN_GRADE,
    STRESS_PARTIAL_RATE,
    STRESS_PASS_RATE,
    STRESS_PERFORMANCE_BUDGET_MS,
    STRESS_PERFORMANCE_ITERATIONS,
    STRESS_SIMPLE_TEXT_MAX_GRADE,
    STRESS_TARGET_TEXT_MAX_GRADE,
)

logger = logging.getLogger(__name__)

CLEAN_TEXTS: Tuple[str, ...] = (
    "Welcome to Jio! Your account is ready.",
    "Your recharge of Rs 299 was successful.",
    "Thank you for choosing Jio Fiber.",
)

COMPLEX_TEXTS: Tuple[str, ...] = (
    "The implementation necessitates comprehensive understanding of multifaceted computational paradigms.",
    "Subsequently, the aforementioned circumstances precipitated unprecedented ramifications.",
    "Notwithstanding the considerable complexities involved, the functionality exhibits remarkable characteristics.",
)

SIMPLE_TEXT = "The cat sat on the mat. It was a good cat."
TARGET_TEXT = (
    "Managing your account is simple. Log in and follow the steps shown on screen."
)
PERFORMANCE_TEXT = "Sample text for readability testing."
EMOJI_TEXT = "🚀 ✨ 🎉"

STRESS_CATEGORIES: Tuple[str, ...] = ("Readability", "Intent", "Performance", "EdgeCase")
"""Categories every full run should cover, in status-block order."""

GENERAL_CHAT_SAMPLES: Tuple[str, ...] = ("hello", "hi there", "thanks", "bye")
CONTENT_GENERATION_SAMPLES: Tuple[str, ...] = (
    "write a push notification",
    "create an email",
    "draft a message",
)
DOMAIN_INQUIRY_SAMPLES: Tuple[str, ...] = (
    "jio recharge",
    "jio fiber plans",
    "jio postpaid",
)


@dataclass(frozen=True)
class CheckResult:
    """Outcome of a single stress check (immutable)."""

    name: str
    passed: bool
    message: str
    category: str


@dataclass(frozen=True)
class StressReport:
    """
    Aggregated stress check results (immutable).

    Verdict thresholds:
        pass rate >= 90%: PASSED
        pass rate >= 70%: PARTIAL
        otherwise: FAILED
    """

    results: Tuple[CheckResult, ...] = field(default_factory=tuple)

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def passed(self) -> int:
        return sum(1 for result in self.results if result.passed)

    @property
    def failed(self) -> int:
        return self.total - self.passed

    @property
    def pass_rate(self) -> float:
        """Percentage of passed checks (0.0 for an empty report)."""
        if not self.results:
            return 0.0
        return self.passed / self.total * 100

    @property
    def overall_status(self) -> str:
        if self.pass_rate >= STRESS_PASS_RATE:
            return "PASSED"
        if self.pass_rate >= STRESS_PARTIAL_RATE:
            return "PARTIAL"
        return "FAILED"

    def by_category(self) -> Dict[str, Tuple[CheckResult, ...]]:
        """Group results by category, categories sorted by name."""
        grouped: Dict[str, List[CheckResult]] = {}
        for result in self.results:
            grouped.setdefault(result.category, []).append(result)
        return {name: tuple(grouped[name]) for name in sorted(grouped)}

    def failures(self) -> Tuple[CheckResult, ...]:
        return tuple(result for result in self.results if not result.passed)

    def category_status(self, category: str) -> str:
        """
        Summarize one category.

        Returns:
            "IMPLEMENTED (p/t)" when every check passed, "PARTIAL (p/t)"
            otherwise, "NO TESTS" when the category has no checks
        """
        results = [result for result in self.results if result.category == category]
        if not results:
            return "NO TESTS"

        passed = sum(1 for result in results if result.passed)
        if passed == len(results):
            return f"IMPLEMENTED ({passed}/{len(results)})"
        return f"PARTIAL ({passed}/{len(results)})"


def _readability_checks(scorer: ReadabilityScorer) -> List[CheckResult]:
    simple_grade = scorer.grade(SIMPLE_TEXT)
    target_grade = scorer.grade(TARGET_TEXT)
    complex_grades = [scorer.grade(text) for text in COMPLEX_TEXTS]
    avg_complex_grade = sum(complex_grades) / len(complex_grades)

    scores = [scorer.ease(text) for text in CLEAN_TEXTS + COMPLEX_TEXTS]
    all_in_range = all(0.0 <= score <= 100.0 for score in scores)

    return [
        CheckResult(
            name="Readability: Simple Text",
            passed=simple_grade < STRESS_SIMPLE_TEXT_MAX_GRADE,
            message=f"Grade {simple_grade:.1f} (target: < {STRESS_SIMPLE_TEXT_MAX_GRADE:g})",
            category="Readability",
        ),
        CheckResult(
            name="Readability: Grade 8 Target",
            passed=target_grade <= STRESS_TARGET_TEXT_MAX_GRADE,
            message=f"Grade {target_grade:.1f} (target: <= {STRESS_TARGET_TEXT_MAX_GRADE:g})",
            category="Readability",
        ),
        CheckResult(
            name="Readability: Complex Text",
            passed=avg_complex_grade > STRESS_COMPLEX_TEXT_MIN_GRADE,
            message=f"Avg Grade {avg_complex_grade:.1f} (target: > {STRESS_COMPLEX_TEXT_MIN_GRADE:g})",
            category="Readability",
        ),
        CheckResult(
            name="Readability: Score Range",
            passed=all_in_range,
            message=(
                "All scores in 0-100 range"
                if all_in_range
                else f"Out of range scores: {[round(s, 1) for s in scores]}"
            ),
            category="Readability",
        ),
    ]


def _count_correct(
    classifier: IntentClassifier, samples: Tuple[str, ...], expected: IntentCategory
) -> int:
    return sum(
        1 for text in samples if classifier.classify_category(text) is expected
    )


def _intent_checks(classifier: IntentClassifier) -> List[CheckResult]:
    chat_correct = _count_correct(
        classifier, GENERAL_CHAT_SAMPLES, IntentCategory.GENERAL_CHAT
    )
    content_correct = _count_correct(
        classifier, CONTENT_GENERATION_SAMPLES, IntentCategory.CONTENT_GENERATION
    )
    domain_correct = _count_correct(
        classifier, DOMAIN_INQUIRY_SAMPLES, IntentCategory.DOMAIN_INQUIRY
    )

    chat_skips = not classifier.classify("hello").requires_validation
    content_validates = classifier.classify(
        CONTENT_GENERATION_SAMPLES[0]
    ).requires_validation

    return [
        CheckResult(
            name="Intent: General Chat",
            passed=chat_correct >= 2,
            message=f"{chat_correct}/{len(GENERAL_CHAT_SAMPLES)} classified correctly",
            category="Intent",
        ),
        CheckResult(
            name="Intent: Content Generation",
            passed=content_correct > 0,
            message=f"{content_correct}/{len(CONTENT_GENERATION_SAMPLES)} classified correctly",
            category="Intent",
        ),
        CheckResult(
            name="Intent: Domain Inquiry",
            passed=domain_correct > 0,
            message=f"{domain_correct}/{len(DOMAIN_INQUIRY_SAMPLES)} classified correctly",
            category="Intent",
        ),
        CheckResult(
            name="Intent: Skip Logic",
            passed=chat_skips and content_validates,
            message="general-chat skips, content-generation validates",
            category="Intent",
        ),
    ]


def _performance_checks(
    scorer: ReadabilityScorer, clock: Callable[[], float]
) -> List[CheckResult]:
    start = clock()
    for _ in range(STRESS_PERFORMANCE_ITERATIONS):
        scorer.grade(PERFORMANCE_TEXT)
    elapsed_ms = (clock() - start) * 1000

    return [
        CheckResult(
            name=f"Performance: Readability ({STRESS_PERFORMANCE_ITERATIONS} calcs)",
            passed=elapsed_ms < STRESS_PERFORMANCE_BUDGET_MS,
            message=f"{elapsed_ms:.1f}ms (target: < {STRESS_PERFORMANCE_BUDGET_MS:g}ms)",
            category="Performance",
        )
    ]


def _edge_case_checks(scorer: ReadabilityScorer) -> List[CheckResult]:
    empty_grade = scorer.grade("")
    empty_ease = scorer.ease("")
    emoji_grade = scorer.grade(EMOJI_TEXT)
    emoji_ease = scorer.ease(EMOJI_TEXT)

    return [
        CheckResult(
            name="EdgeCase: Empty String",
            passed=empty_grade == 0 and empty_ease == 100,
            message=f"Grade {empty_grade:.1f}, ease {empty_ease:.1f}",
            category="EdgeCase",
        ),
        CheckResult(
            name="EdgeCase: Unicode/Emoji",
            passed=emoji_grade >= 0 and 0 <= emoji_ease <= 100,
            message=f"Grade {emoji_grade:.1f}, ease {emoji_ease:.1f}",
            category="EdgeCase",
        ),
    ]


def run_stress_checks(
    scorer: Optional[ReadabilityScorer] = None,
    classifier: Optional[IntentClassifier] = None,
    clock: Callable[[], float] = time.perf_counter,
) -> StressReport:
    """
    Run every stress check and collect the results.

    Args:
        scorer: Readability scorer under test (default: FleschReadabilityScorer)
        classifier: Intent classifier under test (default: KeywordIntentClassifier)
        clock: Monotonic clock in seconds used for the performance check

    Returns:
        StressReport with one CheckResult per check, in run order
    """
    scorer = scorer or FleschReadabilityScorer()
    classifier = classifier or KeywordIntentClassifier()

    logger.info("Starting stress checks...")

    results = (
        _readability_checks(scorer)
        + _intent_checks(classifier)
        + _performance_checks(scorer, clock)
        + _edge_case_checks(scorer)
    )

    report = StressReport(results=tuple(results))
    logger.info(
        f"Stress checks finished: {report.passed}/{report.total} passed "
        f"({report.pass_rate:.1f}%)"
    )
    return report


def render_report(report: StressReport) -> List[str]:
    """
    Render a report as text lines.

    Args:
        report: Report to render

    Returns:
        Summary lines, one block per category, then the per-category
        implementation status and the overall verdict
    """
    separator = "=" * 80
    lines = [
        separator,
        "STRESS TEST REPORT",
        separator,
        f"Total Tests:  {report.total}",
        f"Passed:       {report.passed}",
        f"Failed:       {report.failed}",
        f"Pass Rate:    {report.pass_rate:.1f}%",
    ]

    for category, results in report.by_category().items():
        category_passed = sum(1 for result in results if result.passed)
        lines.append(separator)
        lines.append(f"{category.upper()} ({category_passed}/{len(results)})")
        lines.append(separator)
        for result in results:
            status = "PASS" if result.passed else "FAIL"
            lines.append(f"[{status}] {result.name}")
            lines.append(f"   -> {result.message}")

    lines.append(separator)
    lines.append("IMPLEMENTATION STATUS")
    lines.append(separator)
    extra = [name for name in report.by_category() if name not in STRESS_CATEGORIES]
    for category in STRESS_CATEGORIES + tuple(extra):
        lines.append(f"{category + ':':<14}{report.category_status(category)}")

    lines.append(separator)
    lines.append(f"OVERALL RESULT: {report.overall_status}")
    lines.append(separator)
    return lines


def log_report(report: StressReport) -> None:
    """Write the rendered report to the module logger."""
    for line in render_report(report):
        logger.info(line)

    for result in report.failures():
        logger.warning(f"Check failed: {result.name} - {result.message}")
