"""
Request/Response Models — API contract schemas.

These are the public-facing Pydantic models used by the FastAPI endpoints and
by the tool registry. Invalid enum values are rejected here, before the core
analyzer ever sees them.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

from hdlguard.models.guidance_models import SignalType, ViolationType


class AnalyzeRequest(BaseModel):
    """Request body for /analyze."""

    code: str = Field(..., description="The Verilog or VHDL code to analyze")
    language: Literal["verilog", "vhdl"] = Field(
        ..., description="The hardware description language"
    )


class TimingRequest(BaseModel):
    """Request body for /timing."""

    issue: str = Field(..., description="Description of the timing issue")
    clockFrequency: float | None = Field(  # noqa: N815 — wire compat
        default=None, description="Target clock frequency in MHz"
    )
    violationType: ViolationType = "unknown"  # noqa: N815 — wire compat


class CDCRequest(BaseModel):
    """Request body for /cdc."""

    description: str = Field(..., description="Description of the CDC scenario")
    signalType: SignalType | None = None  # noqa: N815 — wire compat


class ToolDescriptor(BaseModel):
    """A callable tool as advertised to an orchestration layer."""

    name: str
    description: str
    parameters: dict[str, Any] = Field(
        default_factory=dict, description="JSON schema of the tool arguments"
    )


class AuditEntry(BaseModel):
    """Audit metadata for one API invocation."""

    request_id: str
    operation: str
    language: str | None = None
    total_issues: int = 0
    duration_ms: float = 0.0
