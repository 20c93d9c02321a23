"""
treegraph Core — audit.py
-------------------------
Ledger of serialization operations.

Every read or write routed through GraphNode.from_reader / write_to_str
can be recorded here with:
    • the operation and format involved
    • the size of the tree that crossed the boundary
    • whether it succeeded (and the error text if not)

The ledger never swallows errors: a failed operation is recorded and the
original exception continues to the caller.
"""

from __future__ import annotations
import time
import json
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator

import numpy as np


# -------------------------------------------------------------------
# Audit Entry — one serialization operation
# -------------------------------------------------------------------

@dataclass
class AuditEntry:
    timestamp: float
    operation: str
    format_name: str
    node_count: int = 0
    succeeded: bool = True
    note: str = ""

    def to_dict(self) -> dict:
        """Convert the entry to a serializable dictionary."""
        return {
            "timestamp": self.timestamp,
            "operation": self.operation,
            "format": self.format_name,
            "node_count": self.node_count,
            "succeeded": self.succeeded,
            "note": self.note,
        }


# -------------------------------------------------------------------
# Audit Log — chronological ledger
# -------------------------------------------------------------------

@dataclass
class AuditLog:
    """Records reads and writes in the order they happened."""
    entries: list[AuditEntry] = field(default_factory=list)

    def record(
        self,
        operation: str,
        format_name: str,
        node_count: int = 0,
        succeeded: bool = True,
        note: str = "",
    ) -> AuditEntry:
        entry = AuditEntry(
            timestamp=time.time(),
            operation=operation,
            format_name=format_name,
            node_count=node_count,
            succeeded=succeeded,
            note=note,
        )
        self.entries.append(entry)
        return entry

    # ---------------------------------------------------------------
    # Verification and statistics
    # ---------------------------------------------------------------

    def verify_integrity(self) -> bool:
        """Return True if every recorded operation succeeded."""
        return all(e.succeeded for e in self.entries)

    def failures(self) -> list[AuditEntry]:
        return [e for e in self.entries if not e.succeeded]

    def summary(self) -> dict:
        """Return statistical summary of the audit history."""
        if not self.entries:
            return {"count": 0, "failed": 0, "integrity_passed": True}

        sizes = np.array([e.node_count for e in self.entries])
        return {
            "count": len(self.entries),
            "failed": len(self.failures()),
            "reads": sum(1 for e in self.entries if e.operation == "read"),
            "writes": sum(1 for e in self.entries if e.operation == "write"),
            "mean_node_count": float(np.mean(sizes)),
            "max_node_count": int(np.max(sizes)),
            "integrity_passed": self.verify_integrity(),
        }

    # ---------------------------------------------------------------
    # Persistence
    # ---------------------------------------------------------------

    def export_json(self, path: str) -> None:
        """Export the full audit history to a JSON file."""
        with open(path, "w", encoding="utf-8") as f:
            json.dump([e.to_dict() for e in self.entries], f, indent=2)

    def clear(self) -> None:
        self.entries.clear()

    def describe(self) -> str:
        """Readable one-line summary for console/debug output."""
        s = self.summary()
        return (
            f"AuditLog(count={s['count']}, "
            f"failed={s['failed']}, "
            f"mean_nodes={s.get('mean_node_count', 0):.1f}, "
            f"integrity={s['integrity_passed']})"
        )


# -------------------------------------------------------------------
# Helper: record one operation around a block
# -------------------------------------------------------------------

@contextmanager
def audit_operation(log: AuditLog, operation: str, format_name: str) -> Iterator[AuditEntry]:
    """
    Record one operation in `log` up front. The yielded entry may be updated inside
    the block (e.g. node_count). On error the entry is marked failed and
    the exception is re-raised.
    """
    entry = log.record(operation, format_name)
    try:
        yield entry
    except Exception as e:
        entry.succeeded = False
        entry.note = str(e)
        raise
