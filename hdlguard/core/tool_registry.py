"""
Tool Registry — the analyzer operations described as callable tools.

An orchestration layer (chat agent, LLM function calling) lists the tools
with `describe_tools()` and invokes them by name with `execute_tool()`.
Arguments are validated by the tool's pydantic request model first.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable

from pydantic import BaseModel

from hdlguard.core.advisors.cdc import cdc_guidance
from hdlguard.core.advisors.timing import timing_guidance
from hdlguard.core.rule_engine import analyze
from hdlguard.models.scan_models import (
    AnalyzeRequest,
    CDCRequest,
    TimingRequest,
    ToolDescriptor,
)

logger = logging.getLogger("hdlguard.tools")


class UnknownToolError(KeyError):
    """Raised when a tool name is not registered."""


@dataclass(frozen=True)
class ToolSpec:
    name: str
    description: str
    request_model: type[BaseModel]
    execute: Callable[[Any], BaseModel]


def _run_analyze(req: AnalyzeRequest) -> BaseModel:
    return analyze(req.code, req.language)


def _run_timing(req: TimingRequest) -> BaseModel:
    return timing_guidance(req.issue, req.clockFrequency, req.violationType)


def _run_cdc(req: CDCRequest) -> BaseModel:
    return cdc_guidance(req.description, req.signalType)


TOOL_REGISTRY: dict[str, ToolSpec] = {
    "analyzeVerilog": ToolSpec(
        name="analyzeVerilog",
        description=(
            "Analyze Verilog or VHDL code for common synthesis and design issues: "
            "latch inference, incomplete case statements, clock domain crossing, "
            "blocking vs non-blocking assignments and sensitivity list problems"
        ),
        request_model=AnalyzeRequest,
        execute=_run_analyze,
    ),
    "timingAnalysis": ToolSpec(
        name="timingAnalysis",
        description=(
            "Provide guidance on timing analysis and optimization: setup and hold "
            "violations, critical path analysis, clock period constraints"
        ),
        request_model=TimingRequest,
        execute=_run_timing,
    ),
    "detectCDCIssues": ToolSpec(
        name="detectCDCIssues",
        description=(
            "Guidance on clock domain crossing: synchronizers, multi-bit bus "
            "crossing, handshakes and CDC verification tools"
        ),
        request_model=CDCRequest,
        execute=_run_cdc,
    ),
}


def describe_tools() -> list[ToolDescriptor]:
    """Name, description and argument JSON schema of every tool."""
    return [
        ToolDescriptor(
            name=spec.name,
            description=spec.description,
            parameters=spec.request_model.model_json_schema(),
        )
        for spec in TOOL_REGISTRY.values()
    ]


def execute_tool(name: str, arguments: dict[str, Any]) -> BaseModel:
    """
    Validate `arguments` against the tool's request model and run it.

    Raises:
        UnknownToolError: if no tool is registered under `name`.
        pydantic.ValidationError: if the arguments do not validate.
    """
    spec = TOOL_REGISTRY.get(name)
    if spec is None:
        raise UnknownToolError(name)

    request = spec.request_model.model_validate(arguments)
    logger.info(f"Executing tool '{name}'")
    return spec.execute(request)
