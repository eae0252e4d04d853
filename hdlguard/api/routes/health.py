"""
Health Check Route — GET /health
"""

from __future__ import annotations

from fastapi import APIRouter

from hdlguard.core.rule_engine import RULE_REGISTRY

router = APIRouter()

VERSION = "1.0.0"


@router.get("/health")
async def health():
    """Health check endpoint."""
    return {
        "status": "ok",
        "version": VERSION,
        "rules": {
            language.value: list(rules) for language, rules in RULE_REGISTRY.items()
        },
    }
