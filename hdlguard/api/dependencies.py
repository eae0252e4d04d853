"""
FastAPI Dependencies — Shared singletons injected via Depends().
"""

from __future__ import annotations

from functools import lru_cache

from hdlguard.audit.logger import AuditLogger
from hdlguard.core.rule_engine import RuleEngine


@lru_cache
def get_rule_engine() -> RuleEngine:
    """Shared rule engine singleton."""
    return RuleEngine()


@lru_cache
def get_audit_logger() -> AuditLogger:
    """Shared audit logger singleton."""
    return AuditLogger()
