"""
Rule Engine — Orchestrates all lexical HDL rules.

Runs the registered rules for a language, then the language-independent
rules, against a single source string. No parsing, no network, no state.
"""

from __future__ import annotations

import logging
from typing import Callable

from hdlguard.core.rules import (
    blocking_in_sequential,
    case_default,
    clock_domain_crossing,
    incomplete_sensitivity,
    latch_inference,
    long_lines,
    mixed_variable_signal,
    multiple_assignments,
    vhdl_latch_inference,
)
from hdlguard.core.scanner import TextScanner
from hdlguard.core.summary import generate_summary
from hdlguard.models.issue_models import (
    AnalysisResult,
    Issue,
    IssueKind,
    Language,
    Severity,
)

logger = logging.getLogger("hdlguard.engine")

# Type for a rule check function
RuleCheckFn = Callable[[TextScanner], list[Issue]]

# Rule tables, evaluated in insertion order
VERILOG_RULES: dict[str, RuleCheckFn] = {
    latch_inference.RULE_ID: latch_inference.check,
    blocking_in_sequential.RULE_ID: blocking_in_sequential.check,
    incomplete_sensitivity.RULE_ID: incomplete_sensitivity.check,
    case_default.RULE_ID: case_default.check,
    multiple_assignments.RULE_ID: multiple_assignments.check,
    clock_domain_crossing.RULE_ID: clock_domain_crossing.check,
}

VHDL_RULES: dict[str, RuleCheckFn] = {
    vhdl_latch_inference.RULE_ID: vhdl_latch_inference.check,
    mixed_variable_signal.RULE_ID: mixed_variable_signal.check,
}

COMMON_RULES: dict[str, RuleCheckFn] = {
    long_lines.RULE_ID: long_lines.check,
}

RULE_REGISTRY: dict[Language, dict[str, RuleCheckFn]] = {
    Language.VERILOG: {**VERILOG_RULES, **COMMON_RULES},
    Language.VHDL: {**VHDL_RULES, **COMMON_RULES},
}


class RuleEngine:
    """
    Lexical rule engine.

    Rules are pure functions of a TextScanner. A rule that raises is reported
    as an internal_error issue instead of aborting the analysis.
    """

    def __init__(self, rules: dict[Language, dict[str, RuleCheckFn]] | None = None) -> None:
        self.rules = rules or RULE_REGISTRY

    def run(self, source: str, language: Language | str) -> AnalysisResult:
        """
        Run every rule registered for `language` against `source`.

        Args:
            source: HDL source text, treated as an opaque string.
            language: "verilog" or "vhdl". Anything else raises ValueError.

        Returns:
            AnalysisResult with issues in detection order.
        """
        language = Language(language)
        scanner = TextScanner(source)
        issues: list[Issue] = []
        rules_executed: list[str] = []

        for rule_id, check_fn in self.rules.get(language, {}).items():
            rules_executed.append(rule_id)
            try:
                issues.extend(check_fn(scanner))
            except Exception as e:
                logger.exception(f"Rule '{rule_id}' failed")
                issues.append(
                    Issue(
                        kind=IssueKind.INTERNAL_ERROR,
                        severity=Severity.INFO,
                        message=f"Rule '{rule_id}' internal error: {type(e).__name__}: {e}",
                        suggestion="Report this input to the HDLGuard maintainers",
                        rule_id=rule_id,
                    )
                )

        logger.debug(
            f"Analyzed {len(scanner.lines)} {language.value} lines, "
            f"{len(issues)} issue(s) from {len(rules_executed)} rules"
        )

        return AnalysisResult(
            totalIssues=len(issues),
            issues=issues,
            summary=generate_summary(issues),
            language=language,
            rules_executed=rules_executed,
        )

    def run_single_rule(self, rule_id: str, source: str, language: Language | str) -> list[Issue]:
        """Run one rule against a source string."""
        rules = self.rules.get(Language(language), {})
        if rule_id not in rules:
            raise ValueError(f"Unknown rule: {rule_id}")
        return rules[rule_id](TextScanner(source))


_default_engine = RuleEngine()


def analyze(source: str, language: Language | str) -> AnalysisResult:
    """Analyze HDL source with the default rule tables."""
    return _default_engine.run(source, language)
