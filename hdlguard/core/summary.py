"""
HDLGuard — Summary line for an analysis result.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from hdlguard.models.issue_models import SEVERITY_ORDER, Issue, Severity

NO_ISSUES_SUMMARY = "No issues found. Code looks good!"

_SEVERITY_LABELS: dict[Severity, str] = {
    Severity.ERROR: "error(s)",
    Severity.WARNING: "warning(s)",
    Severity.INFO: "info",
}


def generate_summary(issues: Iterable[Issue]) -> str:
    """Render the per-severity counts of `issues`.

    Zero counts are omitted; order is always error, warning, info.
    """
    issues = list(issues)
    if not issues:
        return NO_ISSUES_SUMMARY

    counts = Counter(issue.severity for issue in issues)
    parts = [
        f"{counts[severity]} {_SEVERITY_LABELS[severity]}"
        for severity in SEVERITY_ORDER
        if counts[severity]
    ]
    return f"Found {len(issues)} issue(s): " + ", ".join(parts)
