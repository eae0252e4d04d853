"""
VHDL Latch Inference Rule — a process with no `else` anywhere in the file.

`elsif` alone does not count as an else branch.
"""

from __future__ import annotations

import re

from hdlguard.core.scanner import TextScanner
from hdlguard.models.issue_models import Issue, IssueKind, Severity

RULE_ID = "vhdl_latch_inference"
KIND = IssueKind.LATCH_INFERENCE
SEVERITY = Severity.WARNING
SUGGESTION = "Ensure all signals have default assignments or complete if-else chains"

_PROCESS = re.compile(r"\bprocess\b", re.IGNORECASE)
_ELSE = re.compile(r"\belse\b", re.IGNORECASE)


def check(scanner: TextScanner) -> list[Issue]:
    if not scanner.contains(_PROCESS) or scanner.contains(_ELSE):
        return []
    return [
        Issue(
            kind=KIND,
            severity=SEVERITY,
            message="Incomplete conditional assignment in process may cause latch",
            suggestion=SUGGESTION,
            rule_id=RULE_ID,
        )
    ]
