"""
treegraph
=========
Rooted, ordered trees with pluggable text serialization and incidence
matrix derivation.
"""

from __future__ import annotations

from .core import (
    AuditLog,
    FormatError,
    GraphNode,
    GraphReader,
    GraphWriter,
    IncidenceMatrix,
    IncidenceMatrixWriter,
    incidence_matrix,
)
from .formats import JsonGraphReader, JsonGraphWriter

# -------------------------------------------------------------------
# Module Metadata
# -------------------------------------------------------------------

__version__ = "0.1.0"

__all__ = [
    "AuditLog",
    "FormatError",
    "GraphNode",
    "GraphReader",
    "GraphWriter",
    "IncidenceMatrix",
    "IncidenceMatrixWriter",
    "JsonGraphReader",
    "JsonGraphWriter",
    "incidence_matrix",
]
