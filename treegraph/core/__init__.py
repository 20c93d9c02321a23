"""
treegraph Core — Initialization
===============================

Defines the canonical import interface for the tree substrate:
    - GraphNode: labeled, ordered, owned-children tree node
    - GraphReader / GraphWriter: pluggable serialization contracts
    - IncidenceMatrix: edge-by-vertex parent-end membership
    - IncidenceMatrixWriter: the matrix exposed through the writer contract
    - AuditLog: ledger of reads and writes
"""

from __future__ import annotations

# -------------------------------------------------------------------
# Core imports
# -------------------------------------------------------------------

from .audit import (
    AuditEntry,
    AuditLog,
    audit_operation,
)

from .node import GraphNode

from .ports import (
    FormatError,
    GraphReader,
    GraphWriter,
)

from .incidence import (
    IncidenceMatrix,
    build_header,
    build_raw,
    incidence_matrix,
    vertex_values,
)

from .matrix_writer import (
    IncidenceMatrixWriter,
    format_debug,
)

__all__ = [
    # audit
    "AuditEntry",
    "AuditLog",
    "audit_operation",

    # node
    "GraphNode",

    # ports
    "FormatError",
    "GraphReader",
    "GraphWriter",

    # incidence
    "IncidenceMatrix",
    "build_header",
    "build_raw",
    "incidence_matrix",
    "vertex_values",

    # matrix writer
    "IncidenceMatrixWriter",
    "format_debug",
]
