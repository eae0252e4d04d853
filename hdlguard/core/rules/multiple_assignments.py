"""
Multiple Assignment Rule — one target assigned more than once in the file.

Counts `name =` and `name <=` occurrences across the whole file; separate
always blocks are not distinguished.
"""

from __future__ import annotations

import re
from collections import Counter

from hdlguard.core.scanner import TextScanner
from hdlguard.models.issue_models import Issue, IssueKind, Severity

RULE_ID = "multiple_assignments"
KIND = IssueKind.MULTIPLE_ASSIGNMENTS
SEVERITY = Severity.ERROR
SUGGESTION = "Ensure each signal is assigned in only one always block or assign statement"

ASSIGNMENT = re.compile(r"\b([A-Za-z_][A-Za-z0-9_]*)\s*<?=(?!=)")


def assignment_counts(scanner: TextScanner) -> Counter[str]:
    """Assignment count per target, in first-appearance order."""
    return Counter(match.group(1) for match in scanner.find_all(ASSIGNMENT))


def check(scanner: TextScanner) -> list[Issue]:
    """Detect signals driven from more than one assignment."""
    return [
        Issue(
            kind=KIND,
            severity=SEVERITY,
            message=f"Signal '{signal}' assigned multiple times ({count} assignments)",
            suggestion=SUGGESTION,
            rule_id=RULE_ID,
        )
        for signal, count in assignment_counts(scanner).items()
        if count > 1
    ]
