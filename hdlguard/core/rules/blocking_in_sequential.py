"""
Blocking Assignment Rule — `=` used in edge-triggered logic.

Triggers when the file has an edge-triggered sensitivity list, at least one
blocking assignment, and no non-blocking assignment anywhere.
"""

from __future__ import annotations

import re

from hdlguard.core.scanner import SENSITIVITY_HEADER, TextScanner
from hdlguard.models.issue_models import Issue, IssueKind, Severity

RULE_ID = "blocking_in_sequential"
KIND = IssueKind.BLOCKING_IN_SEQUENTIAL
SEVERITY = Severity.ERROR
SUGGESTION = "Use non-blocking assignments (<=) for sequential logic"

_EDGE = re.compile(r"\b(?:posedge|negedge)\b")
# A lone `=`: not part of <=, >=, ==, !=
_BLOCKING = re.compile(r"(?<![<>=!])=(?!=)")
_NON_BLOCKING = re.compile(r"<=")


def has_edge_header(scanner: TextScanner) -> bool:
    return any(
        _EDGE.search(header.group(1))
        for header in scanner.find_all(SENSITIVITY_HEADER)
    )


def check(scanner: TextScanner) -> list[Issue]:
    """Detect blocking assignments in a file with sequential blocks."""
    if not has_edge_header(scanner):
        return []
    if scanner.contains(_NON_BLOCKING) or not scanner.contains(_BLOCKING):
        return []
    return [
        Issue(
            kind=KIND,
            severity=SEVERITY,
            message="Using blocking assignments (=) in sequential always block",
            suggestion=SUGGESTION,
            rule_id=RULE_ID,
        )
    ]
