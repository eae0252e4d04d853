"""
Timing Advisor — static timing-closure guidance.

A table lookup keyed on the violation type, plus an optional clock-period
step. Nothing here inspects a netlist or a timing report.
"""

from __future__ import annotations

import math

from hdlguard.models.guidance_models import TimingGuidance, TimingStep, ViolationType

GENERAL_TIPS: tuple[str, ...] = (
    "Use register-to-register paths for best timing",
    "Avoid long combinational clouds",
    "Balance clock tree carefully",
    "Consider using timing exceptions for known multi-cycle paths",
    "Use synthesis constraints to guide optimization",
)

SETUP_STEPS: tuple[TimingStep, ...] = (
    TimingStep(
        step="Identify Critical Path",
        description="Run timing analysis to find the longest combinational path",
        commands=[
            "report_timing -from [all_registers] -to [all_registers] -max_paths 10",
            "report_timing -delay_type max -path_type full_clock",
        ],
    ),
    TimingStep(
        step="Analyze Path Components",
        description="Break down the delay into: logic delay, net delay, and cell delay",
        commands=["report_timing -path full_clock -delay max -nets"],
    ),
    TimingStep(
        step="Optimization Strategies",
        description="Consider these approaches to reduce critical path delay",
        commands=[
            "// Add pipeline stages to break up long paths",
            "// Use faster cells in the critical path",
            "// Reduce fanout of high-fanout nets",
            "// Consider multi-cycle path constraints if applicable",
        ],
    ),
)

HOLD_STEPS: tuple[TimingStep, ...] = (
    TimingStep(
        step="Check Hold Violations",
        description="Hold violations often indicate clock skew or fast data paths",
        commands=["report_timing -delay_type min", "report_clock_skew"],
    ),
    TimingStep(
        step="Hold Fixing",
        description="Tools typically fix hold violations automatically, but you can:",
        commands=[
            "// Add delay buffers in the data path",
            "// Balance clock tree to reduce skew",
            "// Check for inappropriate multi-cycle paths",
        ],
    ),
)

_VIOLATION_TYPES = ("setup", "hold", "both", "unknown")


def clock_period_ns(clock_frequency_mhz: float) -> float:
    """Period in ns for a frequency in MHz; 0 MHz maps to an infinite period
    carrying the sign of the zero."""
    if clock_frequency_mhz == 0:
        return math.copysign(math.inf, clock_frequency_mhz)
    return 1000 / clock_frequency_mhz


def clock_period_step(clock_frequency_mhz: float) -> TimingStep:
    period = f"{clock_period_ns(clock_frequency_mhz):.3f}"
    return TimingStep(
        step="Clock Period Analysis",
        description=f"Target clock period: {period} ns at {clock_frequency_mhz} MHz",
        commands=[f"create_clock -period {period} [get_ports clk]"],
    )


def timing_guidance(
    issue_description: str,
    clock_frequency_mhz: float | None = None,
    violation_type: ViolationType = "unknown",
) -> TimingGuidance:
    """Select timing guidance steps for a violation type and clock target.

    Raises:
        ValueError: if `violation_type` is not one of setup/hold/both/unknown.
    """
    if violation_type not in _VIOLATION_TYPES:
        raise ValueError(f"Unknown violation type: {violation_type}")

    steps: list[TimingStep] = []
    if violation_type in ("setup", "both"):
        steps.extend(step.model_copy(deep=True) for step in SETUP_STEPS)
    if violation_type in ("hold", "both"):
        steps.extend(step.model_copy(deep=True) for step in HOLD_STEPS)
    if clock_frequency_mhz is not None:
        steps.append(clock_period_step(clock_frequency_mhz))

    return TimingGuidance(
        issue=issue_description,
        violationType=violation_type,
        clockFrequency=clock_frequency_mhz,
        guidance=steps,
        generalTips=list(GENERAL_TIPS),
    )
