"""
Signal Extractor — approximates the identifiers referenced in HDL source.

Purely lexical: string and comment contents, literal fragments such as the
`b0` in `1'b0`, and keywords missing from the blocklist are all counted.
"""

from __future__ import annotations

from hdlguard.core.scanner import TextScanner

KEYWORD_BLOCKLIST: frozenset[str] = frozenset(
    {"always", "if", "else", "case", "begin", "end", "module", "endmodule"}
)


def ordered_signals(scanner: TextScanner) -> list[str]:
    """Signal names in first-appearance order, blocklist removed."""
    return [name for name in scanner.identifiers() if name not in KEYWORD_BLOCKLIST]


def extract_signals(source: str) -> set[str]:
    """Return the set of identifier tokens in `source` that are not keywords."""
    return set(ordered_signals(TextScanner(source)))
