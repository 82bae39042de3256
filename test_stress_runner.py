"""
Tests for the stress check runner and its report.
"""

import logging

from tone_metrics import IntentCategory, run_stress_checks
from tone_metrics.domain.entities import IntentClassification
from tone_metrics.stress import CheckResult, StressReport, log_report, render_report

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


class ChatOnlyClassifier:
    """Classifier that calls everything small talk."""

    def classify(self, text: str) -> IntentClassification:
        return IntentClassification(category=IntentCategory.GENERAL_CHAT)

    def classify_category(self, text: str) -> IntentCategory:
        return IntentCategory.GENERAL_CHAT


def fake_clock(*readings: float):
    return iter(readings).__next__


def test_default_stack_passes_every_check() -> None:
    """The built-in scorer and classifier pass all stress checks."""
    report = run_stress_checks(clock=fake_clock(0.0, 0.25))

    for result in report.failures():
        logger.error(f"{result.name}: {result.message}")

    assert report.total == 11
    assert report.failed == 0
    assert report.pass_rate == 100.0
    assert report.overall_status == "PASSED"


def test_results_are_immutable_tuple() -> None:
    """Each run returns its own tuple of results."""
    first = run_stress_checks(clock=fake_clock(0.0, 0.1))
    second = run_stress_checks(clock=fake_clock(0.0, 0.1))

    assert isinstance(first.results, tuple)
    assert first.results == second.results
    assert first is not second


def test_slow_performance_is_reported() -> None:
    """Exceeding the time budget fails only the performance check."""
    report = run_stress_checks(clock=fake_clock(0.0, 5.0))

    failures = report.failures()
    assert [result.category for result in failures] == ["Performance"]
    assert "5000.0ms" in failures[0].message
    assert report.overall_status == "PASSED"


def test_broken_classifier_is_partial() -> None:
    """Misrouted intents drag the verdict down to PARTIAL."""
    report = run_stress_checks(
        classifier=ChatOnlyClassifier(), clock=fake_clock(0.0, 0.1)
    )

    failed_names = {result.name for result in report.failures()}
    assert failed_names == {
        "Intent: Content Generation",
        "Intent: Domain Inquiry",
        "Intent: Skip Logic",
    }
    assert report.overall_status == "PARTIAL"


def test_empty_report_fails() -> None:
    """No results means a 0% pass rate."""
    report = StressReport()

    assert report.total == 0
    assert report.pass_rate == 0.0
    assert report.overall_status == "FAILED"


def test_by_category_is_sorted() -> None:
    """Categories are grouped and sorted by name."""
    report = StressReport(
        results=(
            CheckResult("b1", True, "ok", "Beta"),
            CheckResult("a1", False, "bad", "Alpha"),
            CheckResult("b2", True, "ok", "Beta"),
        )
    )

    grouped = report.by_category()
    assert list(grouped) == ["Alpha", "Beta"]
    assert [result.name for result in grouped["Beta"]] == ["b1", "b2"]


def test_render_report() -> None:
    """Rendered lines include the summary, category blocks and verdict."""
    report = run_stress_checks(clock=fake_clock(0.0, 0.1))
    lines = render_report(report)

    assert "Total Tests:  11" in lines
    assert "OVERALL RESULT: PASSED" in lines
    headers = [line for line in lines if line.endswith(")") and line.isupper()]
    assert headers == [
        "EDGECASE (2/2)",
        "INTENT (4/4)",
        "PERFORMANCE (1/1)",
        "READABILITY (4/4)",
    ]


def test_log_report_warns_on_failures(caplog) -> None:
    """Failed checks are repeated at WARNING level."""
    report = StressReport(results=(CheckResult("Broken", False, "nope", "X"),))

    with caplog.at_level(logging.INFO, logger="tone_metrics.stress.runner"):
        log_report(report)

    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "Broken" in warnings[0].getMessage()


def test_render_report_implementation_status() -> None:
    """Every expected category gets a status line before the verdict."""
    lines = render_report(run_stress_checks(clock=fake_clock(0.0, 0.1)))

    start = lines.index("IMPLEMENTATION STATUS")
    status_lines = lines[start + 2 : start + 6]
    assert status_lines == [
        "Readability:  IMPLEMENTED (4/4)",
        "Intent:       IMPLEMENTED (4/4)",
        "Performance:  IMPLEMENTED (1/1)",
        "EdgeCase:     IMPLEMENTED (2/2)",
    ]
    assert lines.index("OVERALL RESULT: PASSED") > start


def test_category_status() -> None:
    """Categories are IMPLEMENTED, PARTIAL or have NO TESTS."""
    report = StressReport(
        results=(
            CheckResult("i1", True, "ok", "Intent"),
            CheckResult("i2", False, "bad", "Intent"),
            CheckResult("r1", True, "ok", "Readability"),
        )
    )

    assert report.category_status("Readability") == "IMPLEMENTED (1/1)"
    assert report.category_status("Intent") == "PARTIAL (1/2)"
    assert report.category_status("Performance") == "NO TESTS"

    lines = render_report(report)
    assert "Performance:  NO TESTS" in lines
    assert "EdgeCase:     NO TESTS" in lines


def test_status_block_lists_unknown_categories() -> None:
    """Categories outside the standard set still get a status line."""
    report = StressReport(results=(CheckResult("c1", True, "ok", "Custom"),))

    assert "Custom:       IMPLEMENTED (1/1)" in render_report(report)
