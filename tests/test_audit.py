"""
Tests for the serialization audit ledger.
"""

import json

import pytest

from treegraph.core.audit import AuditLog, audit_operation
from treegraph.core.matrix_writer import IncidenceMatrixWriter
from treegraph.core.node import GraphNode
from treegraph.core.ports import FormatError
from treegraph.formats.json_codec import JsonGraphReader, JsonGraphWriter


def test_empty_log_summary():
    log = AuditLog()
    assert log.summary() == {"count": 0, "failed": 0, "integrity_passed": True}
    assert log.verify_integrity()


def test_read_and_write_are_recorded(sample, sample_json):
    log = AuditLog()
    tree = GraphNode.from_reader(JsonGraphReader(), sample_json, log=log)
    tree.write_to_str(IncidenceMatrixWriter(), log=log)

    assert [(e.operation, e.format_name) for e in log.entries] == [("read", "json"), ("write", "matrix")]
    assert all(e.node_count == 5 for e in log.entries)
    s = log.summary()
    assert s["reads"] == 1 and s["writes"] == 1
    assert s["max_node_count"] == 5
    assert s["integrity_passed"]


def test_failed_read_is_recorded_and_reraised():
    log = AuditLog()
    with pytest.raises(FormatError):
        GraphNode.from_reader(JsonGraphReader(), '{"nodes": []}', log=log)

    assert len(log.entries) == 1
    entry = log.entries[0]
    assert not entry.succeeded
    assert "value" in entry.note
    assert not log.verify_integrity()
    assert log.failures() == [entry]


def test_failed_write_is_recorded():
    log = AuditLog()
    with pytest.raises(FormatError):
        GraphNode(999).write_to_str(JsonGraphWriter(), log=log)
    assert log.summary()["failed"] == 1


def test_audit_operation_context():
    log = AuditLog()
    with audit_operation(log, "read", "custom") as entry:
        assert log.entries == [entry]
        entry.node_count = 3
    assert log.entries[0].node_count == 3
    assert log.entries[0].succeeded


def test_export_json_and_clear(tmp_path):
    log = AuditLog()
    log.record("write", "json", node_count=2)
    path = tmp_path / "audit.json"
    log.export_json(str(path))

    data = json.loads(path.read_text())
    assert data[0]["operation"] == "write"
    assert data[0]["node_count"] == 2
    assert "AuditLog(count=1" in log.describe()

    log.clear()
    assert log.entries == []
