"""
Mixed Variable/Signal Rule (VHDL) — informational.
"""

from __future__ import annotations

import re

from hdlguard.core.scanner import TextScanner
from hdlguard.models.issue_models import Issue, IssueKind, Severity

RULE_ID = "mixed_variable_signal"
KIND = IssueKind.MIXED_VARIABLE_SIGNAL
SEVERITY = Severity.INFO
SUGGESTION = (
    "Variables update immediately, signals update at end of process - "
    "ensure correct usage"
)

_VARIABLE = re.compile(r"\bvariable\b", re.IGNORECASE)
_SIGNAL = re.compile(r"\bsignal\b", re.IGNORECASE)


def check(scanner: TextScanner) -> list[Issue]:
    if not (scanner.contains(_VARIABLE) and scanner.contains(_SIGNAL)):
        return []
    return [
        Issue(
            kind=KIND,
            severity=SEVERITY,
            message="Process uses both variables and signals",
            suggestion=SUGGESTION,
            rule_id=RULE_ID,
        )
    ]
