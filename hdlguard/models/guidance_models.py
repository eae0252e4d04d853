"""
Advisory Data Models — Timing and clock-domain-crossing guidance.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

ViolationType = Literal["setup", "hold", "both", "unknown"]
SignalType = Literal["single-bit", "multi-bit", "bus", "handshake"]


class TimingStep(BaseModel):
    """One step of timing-closure guidance."""

    step: str
    description: str
    commands: list[str] | None = None


class TimingGuidance(BaseModel):
    issue: str
    violationType: ViolationType = "unknown"  # noqa: N815 — wire compat
    clockFrequency: float | None = None  # noqa: N815 — wire compat
    guidance: list[TimingStep] = Field(default_factory=list)
    generalTips: list[str] = Field(default_factory=list)  # noqa: N815 — wire compat


class CDCRecommendation(BaseModel):
    """A synchronization technique for one crossing scenario."""

    scenario: str
    solution: str
    example: str | None = Field(default=None, description="Verilog example")


class CDCGuidance(BaseModel):
    description: str
    signalType: SignalType | None = None  # noqa: N815 — wire compat
    recommendations: list[CDCRecommendation] = Field(default_factory=list)
    generalGuidelines: list[str] = Field(default_factory=list)  # noqa: N815 — wire compat
    toolRecommendations: list[str] = Field(default_factory=list)  # noqa: N815 — wire compat
