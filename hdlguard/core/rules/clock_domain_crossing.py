"""
Clock Domain Crossing Rule — more than one posedge clock in the file.

The clock of a block is the first `posedge` signal in its sensitivity list,
so `@(posedge clk or posedge rst)` counts only `clk` and
`@(negedge rst_n or posedge clk)` counts `clk`.
"""

from __future__ import annotations

import re

from hdlguard.core.scanner import SENSITIVITY_HEADER, TextScanner
from hdlguard.models.issue_models import Issue, IssueKind, Severity

RULE_ID = "clock_domain_crossing"
KIND = IssueKind.CLOCK_DOMAIN_CROSSING
SEVERITY = Severity.WARNING
SUGGESTION = "Use proper synchronizers (two-flop) for single-bit CDC, async FIFOs for data"

_POSEDGE = re.compile(r"\bposedge\s+([A-Za-z_][A-Za-z0-9_]*)")


def clock_signals(scanner: TextScanner) -> set[str]:
    clocks: set[str] = set()
    for header in scanner.find_all(SENSITIVITY_HEADER):
        clock = _POSEDGE.search(header.group(1))
        if clock:
            clocks.add(clock.group(1))
    return clocks


def check(scanner: TextScanner) -> list[Issue]:
    if len(clock_signals(scanner)) < 2:
        return []
    return [
        Issue(
            kind=KIND,
            severity=SEVERITY,
            message="Multiple clock domains detected - potential CDC issues",
            suggestion=SUGGESTION,
            rule_id=RULE_ID,
        )
    ]
