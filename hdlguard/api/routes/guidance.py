"""
HDLGuard — advisory endpoints.

  POST /timing → timing-closure guidance
  POST /cdc    → clock-domain-crossing guidance
"""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends

from hdlguard.api.dependencies import get_audit_logger
from hdlguard.audit.logger import AuditLogger
from hdlguard.core.advisors.cdc import cdc_guidance
from hdlguard.core.advisors.timing import timing_guidance
from hdlguard.models.guidance_models import CDCGuidance, TimingGuidance
from hdlguard.models.scan_models import AuditEntry, CDCRequest, TimingRequest

router = APIRouter()


@router.post("/timing", response_model=TimingGuidance)
async def timing(req: TimingRequest, audit: AuditLogger = Depends(get_audit_logger)):
    """Timing violation guidance for a violation type and clock target."""
    audit.log(AuditEntry(request_id=uuid.uuid4().hex, operation="timing"))
    return timing_guidance(req.issue, req.clockFrequency, req.violationType)


@router.post("/cdc", response_model=CDCGuidance)
async def cdc(req: CDCRequest, audit: AuditLogger = Depends(get_audit_logger)):
    """Synchronizer recommendations for a crossing signal type."""
    audit.log(AuditEntry(request_id=uuid.uuid4().hex, operation="cdc"))
    return cdc_guidance(req.description, req.signalType)
