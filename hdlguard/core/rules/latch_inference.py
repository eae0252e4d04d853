"""
Latch Inference Rule (Verilog) — `if` without any `else` in the file.

A whole-file heuristic: an `else` anywhere suppresses the warning, even when
it belongs to an unrelated block.
"""

from __future__ import annotations

import re

from hdlguard.core.scanner import TextScanner
from hdlguard.models.issue_models import Issue, IssueKind, Severity

RULE_ID = "latch_inference"
KIND = IssueKind.LATCH_INFERENCE
SEVERITY = Severity.WARNING
SUGGESTION = "Add an else clause or default assignment before the if statement"

_IF = re.compile(r"\bif\b")
_ELSE = re.compile(r"\belse\b")


def check(scanner: TextScanner) -> list[Issue]:
    """Detect an incomplete if statement."""
    if scanner.contains(_ELSE):
        return []
    line = scanner.line_of_first(_IF)
    if line is None:
        return []
    return [
        Issue(
            kind=KIND,
            severity=SEVERITY,
            line=line,
            message="Incomplete if statement may cause latch inference",
            suggestion=SUGGESTION,
            rule_id=RULE_ID,
        )
    ]
