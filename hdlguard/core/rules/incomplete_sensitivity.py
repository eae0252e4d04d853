"""
Incomplete Sensitivity List Rule — combinational block missing signals.

Looks at the first `always @(...)` header only. When it carries no edge
keyword, every signal referenced anywhere in the file that the list does not
name is reported.
"""

from __future__ import annotations

import re

from hdlguard.core.scanner import TextScanner
from hdlguard.core.signals import ordered_signals
from hdlguard.models.issue_models import Issue, IssueKind, Severity

RULE_ID = "incomplete_sensitivity"
KIND = IssueKind.INCOMPLETE_SENSITIVITY
SEVERITY = Severity.WARNING
SUGGESTION = "Use always @(*) for automatic sensitivity list generation"

# Closed, unnested, single-line headers only
_ALWAYS_HEADER = re.compile(r"always\s*@\s*\(([^()\n]*)\)")
_EDGE = re.compile(r"\b(?:posedge|negedge)\b")
_SEPARATOR = re.compile(r"\s*,\s*|\s+or\s+")


def listed_signals(sensitivity_list: str) -> set[str]:
    """Names in a comma or `or` separated sensitivity list."""
    return {
        name.strip()
        for name in _SEPARATOR.split(sensitivity_list)
        if name.strip()
    }


def check(scanner: TextScanner) -> list[Issue]:
    """Detect signals missing from a combinational sensitivity list."""
    header = scanner.search(_ALWAYS_HEADER)
    if header is None:
        return []

    sensitivity_list = header.group(1)
    if _EDGE.search(sensitivity_list):
        return []

    listed = listed_signals(sensitivity_list)

    missing = [name for name in ordered_signals(scanner) if name not in listed]
    if not missing:
        return []

    return [
        Issue(
            kind=KIND,
            severity=SEVERITY,
            line=scanner.line_of(header.start()),
            message=(
                "Potentially incomplete sensitivity list. "
                f"Missing signals: {', '.join(missing)}"
            ),
            suggestion=SUGGESTION,
            rule_id=RULE_ID,
        )
    ]
