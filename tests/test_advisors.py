"""
Tests for the timing and CDC advisors.
"""

import pytest

from hdlguard.core.advisors.cdc import cdc_guidance
from hdlguard.core.advisors.timing import GENERAL_TIPS, timing_guidance


def _steps(guidance):
    return [step.step for step in guidance.guidance]


def test_setup_steps():
    result = timing_guidance("slow path", violation_type="setup")
    assert _steps(result) == [
        "Identify Critical Path",
        "Analyze Path Components",
        "Optimization Strategies",
    ]
    assert result.guidance[0].commands


def test_hold_steps():
    result = timing_guidance("fast path", violation_type="hold")
    assert _steps(result) == ["Check Hold Violations", "Hold Fixing"]


def test_both_steps_setup_then_hold():
    result = timing_guidance("both", violation_type="both")
    assert len(result.guidance) == 5
    assert _steps(result)[3] == "Check Hold Violations"


def test_unknown_default_has_no_steps_but_tips():
    result = timing_guidance("something")
    assert result.violationType == "unknown"
    assert result.issue == "something"
    assert result.guidance == []
    assert result.generalTips == list(GENERAL_TIPS)
    assert len(result.generalTips) == 5


def test_clock_period_step():
    result = timing_guidance("x", 100, "setup")
    period = result.guidance[-1]
    assert period.step == "Clock Period Analysis"
    assert "10.000 ns" in period.description
    assert period.commands == ["create_clock -period 10.000 [get_ports clk]"]


def test_zero_frequency_gives_infinite_period():
    result = timing_guidance("x", 0)
    assert result.guidance[-1].commands == ["create_clock -period inf [get_ports clk]"]


def test_negative_frequency_divided_as_given():
    result = timing_guidance("x", -250)
    assert "-4.000" in result.guidance[-1].commands[0]


def test_returned_steps_are_independent_copies():
    first = timing_guidance("x", violation_type="setup")
    first.guidance[0].commands.append("mutated")
    second = timing_guidance("x", violation_type="setup")
    assert "mutated" not in second.guidance[0].commands


def test_invalid_violation_type():
    with pytest.raises(ValueError):
        timing_guidance("x", violation_type="skew")


def test_cdc_default_matches_single_bit():
    default = cdc_guidance("flag crossing")
    single = cdc_guidance("flag crossing", "single-bit")
    assert default.recommendations == single.recommendations
    assert default.recommendations[0].solution == "Use a two-flop synchronizer"


@pytest.mark.parametrize("signal_type", ["multi-bit", "bus"])
def test_cdc_bus_recommendations(signal_type):
    result = cdc_guidance("counter", signal_type)
    assert [r.scenario for r in result.recommendations] == [
        "Multi-bit bus crossing",
        "Data bus with enable signal",
    ]
    assert all(r.example for r in result.recommendations)


def test_cdc_handshake():
    result = cdc_guidance("req/ack", "handshake")
    assert len(result.recommendations) == 1
    assert "Four-phase" in result.recommendations[0].solution


def test_cdc_fixed_lists():
    result = cdc_guidance("anything", "bus")
    assert len(result.generalGuidelines) == 6
    assert len(result.toolRecommendations) == 3


def test_cdc_invalid_signal_type():
    with pytest.raises(ValueError):
        cdc_guidance("x", "analog")


def test_large_frequency_printed_as_given():
    result = timing_guidance("x", 1234567)
    assert "at 1234567 MHz" in result.guidance[-1].description


def test_negative_zero_frequency_keeps_sign():
    result = timing_guidance("x", -0.0)
    assert result.guidance[-1].commands == ["create_clock -period -inf [get_ports clk]"]
