"""Stress checks and reporting for tone-metrics."""

from .runner import (
    CheckResult,
    StressReport,
    log_report,
    render_report,
    run_stress_checks,
)

__all__ = [
    "CheckResult",
    "StressReport",
    "run_stress_checks",
    "render_report",
    "log_report",
]
