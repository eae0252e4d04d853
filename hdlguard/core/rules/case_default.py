"""
Missing Case Default Rule — a case statement with no default anywhere.
"""

from __future__ import annotations

import re

from hdlguard.core.scanner import TextScanner
from hdlguard.models.issue_models import Issue, IssueKind, Severity

RULE_ID = "no_case_default"
KIND = IssueKind.NO_CASE_DEFAULT
SEVERITY = Severity.WARNING
SUGGESTION = "Add a default clause to handle unexpected values"

_CASE = re.compile(r"\bcase[xz]?\b")
_DEFAULT = re.compile(r"\bdefault\b")


def check(scanner: TextScanner) -> list[Issue]:
    if not scanner.contains(_CASE) or scanner.contains(_DEFAULT):
        return []
    return [
        Issue(
            kind=KIND,
            severity=SEVERITY,
            message="Case statement without default clause",
            suggestion=SUGGESTION,
            rule_id=RULE_ID,
        )
    ]
