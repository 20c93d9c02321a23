"""
treegraph Core — incidence.py
=============================
Derives the incidence matrix of a tree.

Columns are parent→child edges, labelled "<parent><sep><child>" in
pre-order (a node's own edges come before its descendants' edges).
Rows are vertex occurrences in pre-order. A cell is True when the row's
value is the parent end of the column's edge.

Correlation is by value, not by node identity: when a value occurs more
than once, every occurrence is marked for every edge leaving any node
with that value.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

import numpy as np

from treegraph.config import CONFIG
from treegraph.core.node import GraphNode


# -------------------------------------------------------------------
# Building blocks
# -------------------------------------------------------------------

def build_header(graph: GraphNode, separator: Optional[str] = None) -> List[str]:
    """Edge labels: each node's outgoing edges, nodes taken in pre-order."""
    sep = CONFIG["edge_separator"] if separator is None else separator
    return [f"{node.value}{sep}{child.value}" for node in graph.walk() for child in node.nodes]


def vertex_values(graph: GraphNode) -> List[int]:
    """Values of every node occurrence in pre-order."""
    return [node.value for node in graph.walk()]


def build_raw(
    vertices: Sequence[int], header: Sequence[str], separator: Optional[str] = None
) -> np.ndarray:
    """Boolean (len(vertices), len(header)) array of parent-end membership."""
    sep = CONFIG["edge_separator"] if separator is None else separator
    raw = np.zeros((len(vertices), len(header)), dtype=bool)
    values = np.asarray(vertices)
    # one column mask per distinct value, shared by all its occurrences
    for value in dict.fromkeys(vertices):
        prefix = f"{value}{sep}"
        mask = np.array([column.startswith(prefix) for column in header], dtype=bool)
        raw[values == value] = mask
    return raw


# -------------------------------------------------------------------
# Incidence Matrix
# -------------------------------------------------------------------

@dataclass(frozen=True, eq=False)
class IncidenceMatrix:
    """Header labels plus a read-only boolean array, one row per vertex occurrence."""

    header: Tuple[str, ...]
    raw: np.ndarray
    vertices: Tuple[int, ...] = field(default=())

    @classmethod
    def from_graph(cls, graph: GraphNode, separator: Optional[str] = None) -> "IncidenceMatrix":
        header = build_header(graph, separator)
        vertices = vertex_values(graph)
        raw = build_raw(vertices, header, separator)
        raw.setflags(write=False)
        return cls(header=tuple(header), raw=raw, vertices=tuple(vertices))

    @property
    def rows(self) -> List[List[bool]]:
        return self.raw.tolist()

    @property
    def shape(self) -> Tuple[int, int]:
        return self.raw.shape

    def row_for(self, value: int) -> List[bool]:
        """Row of the first occurrence of `value` (KeyError if absent)."""
        try:
            return self.rows[self.vertices.index(value)]
        except ValueError:
            raise KeyError(value) from None

    def out_degrees(self) -> np.ndarray:
        """Per-row count of marked edges."""
        return self.raw.sum(axis=1)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IncidenceMatrix):
            return NotImplemented
        return (
            self.header == other.header
            and self.vertices == other.vertices
            and np.array_equal(self.raw, other.raw)
        )

    __hash__ = None  # type: ignore[assignment]


def incidence_matrix(graph: GraphNode, separator: Optional[str] = None) -> IncidenceMatrix:
    return IncidenceMatrix.from_graph(graph, separator)


# -------------------------------------------------------------------
# Self-check
# -------------------------------------------------------------------

if __name__ == "__main__":
    g = GraphNode(1).add(GraphNode(2).add(GraphNode(4).add(GraphNode(3)).add(GraphNode(5))))
    m = IncidenceMatrix.from_graph(g)
    print("header:", list(m.header))
    for value, row in zip(m.vertices, m.rows):
        print(f"  {value}: {row}")
    assert m.shape == (g.node_count(), g.node_count() - 1)
    print("incidence.py self-check passed ✓")
