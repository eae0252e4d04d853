"""
Audit Logger — one JSON line per HDLGuard API call.

Only operation metadata (language, issue count, duration) is written;
HDL source text never reaches the log.
"""

from __future__ import annotations

import json
import logging
import time
from pathlib import Path

from hdlguard.config import settings
from hdlguard.models.scan_models import AuditEntry

logger = logging.getLogger("hdlguard.audit")


class AuditLogger:
    """Appends AuditEntry records to a JSON-lines file when enabled."""

    def __init__(self, log_path: str | None = None, enabled: bool | None = None) -> None:
        self.log_path = Path(log_path or settings.audit_log_path)
        self.enabled = settings.audit_enabled if enabled is None else enabled

    def log(self, entry: AuditEntry) -> None:
        if not self.enabled:
            return

        record = {
            "timestamp": time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime()),
            **entry.model_dump(exclude_none=True),
        }
        try:
            with self.log_path.open("a", encoding="utf-8") as f:
                f.write(json.dumps(record) + "\n")
        except OSError as e:
            logger.error(f"Failed to write audit entry for {entry.operation}: {e}")
