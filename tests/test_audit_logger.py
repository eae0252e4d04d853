"""
Tests for the JSON-lines audit logger.
"""

import json

from hdlguard.audit.logger import AuditLogger
from hdlguard.models.scan_models import AuditEntry


def _entry(operation="analyze", language="verilog"):
    return AuditEntry(request_id="r1", operation=operation, language=language, total_issues=3)


def _records(path):
    return [json.loads(line) for line in path.read_text().splitlines()]


def test_log_appends_one_line_per_entry(tmp_path):
    path = tmp_path / "audit.jsonl"
    audit = AuditLogger(log_path=str(path), enabled=True)
    audit.log(_entry())
    audit.log(_entry("cdc", language=None))

    records = _records(path)
    assert [r["operation"] for r in records] == ["analyze", "cdc"]
    assert records[0]["total_issues"] == 3
    assert records[0]["language"] == "verilog"
    assert "language" not in records[1]
    assert "timestamp" in records[0]


def test_disabled_logger_writes_nothing(tmp_path):
    path = tmp_path / "audit.jsonl"
    AuditLogger(log_path=str(path), enabled=False).log(_entry())
    assert not path.exists()


def test_unwritable_path_does_not_raise(tmp_path):
    audit = AuditLogger(log_path=str(tmp_path / "missing" / "audit.jsonl"), enabled=True)
    audit.log(_entry())
