"""
HDLGuard — POST /analyze endpoint.

Accepts {"code": str, "language": "verilog" | "vhdl"} and returns the
lexical analysis result.
"""

from __future__ import annotations

import logging
import time
import uuid

from fastapi import APIRouter, Depends, HTTPException

from hdlguard.api.dependencies import get_audit_logger, get_rule_engine
from hdlguard.audit.logger import AuditLogger
from hdlguard.config import settings
from hdlguard.core.rule_engine import RuleEngine
from hdlguard.models.issue_models import AnalysisResult
from hdlguard.models.scan_models import AnalyzeRequest, AuditEntry

logger = logging.getLogger("hdlguard.api.analyze")
router = APIRouter()


@router.post("/analyze", response_model=AnalysisResult)
async def analyze_code(
    req: AnalyzeRequest,
    engine: RuleEngine = Depends(get_rule_engine),
    audit: AuditLogger = Depends(get_audit_logger),
):
    """Analyze Verilog/VHDL source for common design issues."""
    if len(req.code) > settings.max_code_length:
        raise HTTPException(
            status_code=400,
            detail=f"Code exceeds maximum length of {settings.max_code_length} characters",
        )

    start = time.monotonic()
    result = engine.run(req.code, req.language)
    elapsed = (time.monotonic() - start) * 1000

    logger.info(f"{req.language}: {result.summary} ({elapsed:.1f} ms)")
    audit.log(
        AuditEntry(
            request_id=uuid.uuid4().hex,
            operation="analyze",
            language=req.language,
            total_issues=result.totalIssues,
            duration_ms=round(elapsed, 2),
        )
    )
    return result
