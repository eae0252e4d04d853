"""
Line Length Rule — applies to every language.
"""

from __future__ import annotations

from hdlguard.core.scanner import TextScanner
from hdlguard.models.issue_models import Issue, IssueKind, Severity

RULE_ID = "long_lines"
KIND = IssueKind.STYLE
SEVERITY = Severity.INFO
SUGGESTION = "Consider breaking long lines for better readability"

MAX_LINE_LENGTH = 120


def check(scanner: TextScanner) -> list[Issue]:
    long_lines = sum(1 for line in scanner.lines if len(line) > MAX_LINE_LENGTH)
    if not long_lines:
        return []
    return [
        Issue(
            kind=KIND,
            severity=SEVERITY,
            message=f"{long_lines} lines exceed {MAX_LINE_LENGTH} characters",
            suggestion=SUGGESTION,
            rule_id=RULE_ID,
        )
    ]
