"""
Tests for Rule Engine — verify each lexical rule fires correctly.
"""

import pytest

from hdlguard.core.rule_engine import RULE_REGISTRY, RuleEngine, analyze
from hdlguard.core.summary import generate_summary
from hdlguard.models.issue_models import IssueKind, Language, Severity


def _kinds(result):
    return [issue.kind for issue in result.issues]


def test_empty_source_has_no_issues():
    result = analyze("", "verilog")
    assert result.totalIssues == 0
    assert result.issues == []
    assert result.summary == "No issues found. Code looks good!"


def test_empty_vhdl_source_has_no_issues():
    result = analyze("", "vhdl")
    assert result.totalIssues == 0


def test_unknown_language_rejected():
    with pytest.raises(ValueError):
        analyze("module m; endmodule", "systemc")


def test_combinational_example(combinational_verilog):
    result = analyze(combinational_verilog, "verilog")
    assert _kinds(result) == [IssueKind.LATCH_INFERENCE, IssueKind.INCOMPLETE_SENSITIVITY]

    latch, sensitivity = result.issues
    assert latch.severity == Severity.WARNING
    assert latch.line == 2
    assert sensitivity.severity == Severity.WARNING
    assert sensitivity.line == 1
    # `or` is not on the keyword blocklist, so it is reported too
    assert sensitivity.message.endswith("Missing signals: or, out")
    assert result.summary == "Found 2 issue(s): 2 warning(s)"


def test_sequential_blocking(sequential_blocking_verilog):
    result = analyze(sequential_blocking_verilog, "verilog")
    assert _kinds(result) == [IssueKind.BLOCKING_IN_SEQUENTIAL, IssueKind.MULTIPLE_ASSIGNMENTS]
    assert all(issue.severity == Severity.ERROR for issue in result.issues)
    assert result.issues[0].line is None
    assert "'q'" in result.issues[1].message
    assert result.summary == "Found 2 issue(s): 2 error(s)"


def test_clean_code_no_issues(clean_verilog):
    result = analyze(clean_verilog, "verilog")
    assert result.totalIssues == 0
    assert result.summary == "No issues found. Code looks good!"


def test_two_clock_domains_single_warning(two_clock_verilog):
    result = analyze(two_clock_verilog, "verilog")
    assert _kinds(result) == [IssueKind.CLOCK_DOMAIN_CROSSING]
    assert result.issues[0].severity == Severity.WARNING


def test_case_without_default(case_without_default_verilog):
    result = analyze(case_without_default_verilog, "verilog")
    assert _kinds(result) == [
        IssueKind.INCOMPLETE_SENSITIVITY,
        IssueKind.NO_CASE_DEFAULT,
        IssueKind.MULTIPLE_ASSIGNMENTS,
    ]
    # `*` names no identifier, so every referenced signal is reported
    assert result.issues[0].message.endswith(
        "Missing signals: sel, b00, y, a, b01, b, endcase"
    )
    assert "'y'" in result.issues[2].message


def test_vhdl_rules(vhdl_process):
    result = analyze(vhdl_process, "vhdl")
    assert _kinds(result) == [IssueKind.LATCH_INFERENCE, IssueKind.MIXED_VARIABLE_SIGNAL]
    assert result.issues[1].severity == Severity.INFO
    assert result.summary == "Found 2 issue(s): 1 warning(s), 1 info"


def test_verilog_rules_not_applied_to_vhdl(combinational_verilog):
    result = analyze(combinational_verilog, "vhdl")
    assert IssueKind.INCOMPLETE_SENSITIVITY not in _kinds(result)


def test_long_lines_reported_for_both_languages():
    source = "\n".join(["x" * 121, "short", "y" * 130])
    for language in ("verilog", "vhdl"):
        result = analyze(source, language)
        style = [i for i in result.issues if i.kind == IssueKind.STYLE]
        assert len(style) == 1
        assert style[0].severity == Severity.INFO
        assert style[0].message.startswith("2 lines exceed 120")


def test_summary_rederivable_from_issues(
    combinational_verilog, sequential_blocking_verilog, vhdl_process
):
    for source, language in (
        (combinational_verilog, "verilog"),
        (sequential_blocking_verilog, "verilog"),
        (vhdl_process, "vhdl"),
    ):
        result = analyze(source, language)
        assert result.totalIssues == len(result.issues)
        assert result.summary == generate_summary(result.issues)


def test_all_rules_executed(clean_verilog):
    result = analyze(clean_verilog, Language.VERILOG)
    assert result.rules_executed == list(RULE_REGISTRY[Language.VERILOG])
    assert "long_lines" in result.rules_executed


def test_failing_rule_becomes_internal_error():
    def boom(scanner):
        raise RuntimeError("bad rule")

    engine = RuleEngine(rules={Language.VERILOG: {"boom": boom}})
    result = engine.run("module m; endmodule", "verilog")
    assert result.totalIssues == 1
    issue = result.issues[0]
    assert issue.kind == IssueKind.INTERNAL_ERROR
    assert issue.severity == Severity.INFO
    assert issue.rule_id == "boom"


def test_run_single_rule(two_clock_verilog):
    engine = RuleEngine()
    issues = engine.run_single_rule("clock_domain_crossing", two_clock_verilog, "verilog")
    assert len(issues) == 1
    with pytest.raises(ValueError):
        engine.run_single_rule("no_such_rule", two_clock_verilog, "verilog")


def test_issue_lines_are_valid(combinational_verilog, case_without_default_verilog):
    for source in (combinational_verilog, case_without_default_verilog):
        line_count = len(source.split("\n"))
        for issue in analyze(source, "verilog").issues:
            assert issue.message and issue.suggestion
            if issue.line is not None:
                assert 1 <= issue.line <= line_count
