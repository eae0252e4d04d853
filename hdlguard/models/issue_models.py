"""
Issue Data Models — Detected HDL design issues and analysis results.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, model_validator


class Language(str, Enum):
    VERILOG = "verilog"
    VHDL = "vhdl"


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


# Fixed rendering order for summaries
SEVERITY_ORDER: tuple[Severity, ...] = (Severity.ERROR, Severity.WARNING, Severity.INFO)


class IssueKind(str, Enum):
    LATCH_INFERENCE = "latch_inference"
    BLOCKING_IN_SEQUENTIAL = "blocking_in_sequential"
    INCOMPLETE_SENSITIVITY = "incomplete_sensitivity"
    NO_CASE_DEFAULT = "no_case_default"
    MULTIPLE_ASSIGNMENTS = "multiple_assignments"
    CLOCK_DOMAIN_CROSSING = "clock_domain_crossing"
    MIXED_VARIABLE_SIGNAL = "mixed_variable_signal"
    STYLE = "style"
    INTERNAL_ERROR = "internal_error"


class Issue(BaseModel):
    """A single detected design issue."""

    kind: IssueKind
    severity: Severity
    line: int | None = Field(
        default=None, ge=1, description="1-based line of the triggering pattern"
    )
    message: str = Field(..., min_length=1, description="What was found")
    suggestion: str = Field(..., min_length=1, description="How to fix it")
    rule_id: str = Field(default="", description="Rule that produced this issue")


class AnalysisResult(BaseModel):
    """Output of a single analyze() call."""

    totalIssues: int = Field(default=0, ge=0)  # noqa: N815 — wire compat
    issues: list[Issue] = Field(default_factory=list)
    summary: str = ""
    language: Language | None = None
    rules_executed: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_total(self) -> AnalysisResult:
        if self.totalIssues != len(self.issues):
            raise ValueError(
                f"totalIssues={self.totalIssues} does not match {len(self.issues)} issues"
            )
        return self
