"""
Tool Routes — list and invoke the analyzer tools by name.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import ValidationError

from hdlguard.core.tool_registry import UnknownToolError, describe_tools, execute_tool
from hdlguard.models.scan_models import ToolDescriptor

router = APIRouter(prefix="/tools")


@router.get("", response_model=list[ToolDescriptor])
async def list_tools():
    return describe_tools()


@router.post("/{name}")
async def run_tool(name: str, arguments: dict[str, Any]):
    """Execute a registered tool with JSON arguments."""
    try:
        result = execute_tool(name, arguments)
    except UnknownToolError:
        raise HTTPException(status_code=404, detail=f"Unknown tool: {name}") from None
    except ValidationError as e:
        raise HTTPException(
            status_code=422,
            detail=e.errors(include_url=False, include_context=False),
        ) from None
    return result.model_dump(mode="json")
