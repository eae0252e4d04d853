"""
HDLGuard — Lexical text scanner.

Thin wrapper around `re` giving rules the three capabilities they need:
find a pattern, extract identifiers, and locate the line of a first match.
No HDL parsing happens here.
"""

from __future__ import annotations

import re
from functools import cached_property

IDENTIFIER_PATTERN = re.compile(r"\b[A-Za-z_][A-Za-z0-9_]*\b")
# `@( ... )` with no nested parentheses; captures the list
SENSITIVITY_HEADER = re.compile(r"@\s*\(([^()]*)\)")


class TextScanner:
    """Pattern queries over a single source string."""

    def __init__(self, source: str, flags: int = 0) -> None:
        self.source = source
        self.flags = flags

    @cached_property
    def lines(self) -> list[str]:
        return self.source.split("\n")

    def _compile(self, pattern: str | re.Pattern[str]) -> re.Pattern[str]:
        if isinstance(pattern, re.Pattern):
            return pattern
        return re.compile(pattern, self.flags)

    def search(self, pattern: str | re.Pattern[str]) -> re.Match[str] | None:
        return self._compile(pattern).search(self.source)

    def contains(self, pattern: str | re.Pattern[str]) -> bool:
        return self.search(pattern) is not None

    def find_all(self, pattern: str | re.Pattern[str]) -> list[re.Match[str]]:
        return list(self._compile(pattern).finditer(self.source))

    def line_of(self, offset: int) -> int:
        """1-based line number containing the character at `offset`."""
        return self.source.count("\n", 0, offset) + 1

    def line_of_first(self, pattern: str | re.Pattern[str]) -> int | None:
        match = self.search(pattern)
        if match is None:
            return None
        return self.line_of(match.start())

    def identifiers(self) -> list[str]:
        """Distinct identifier tokens in first-appearance order."""
        seen: dict[str, None] = {}
        for match in IDENTIFIER_PATTERN.finditer(self.source):
            seen.setdefault(match.group(0), None)
        return list(seen)
