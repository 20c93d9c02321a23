"""
treegraph Core — matrix_writer.py
=================================
Writer that renders a tree's incidence matrix instead of the tree itself,
so matrix derivation goes through the same `write` call as any format.
"""

from __future__ import annotations
import json
from typing import List, Optional

from treegraph.config import CONFIG
from treegraph.core.incidence import IncidenceMatrix
from treegraph.core.node import GraphNode
from treegraph.core.ports import GraphWriter


def _format_list(items: List[str], level: int, pad: str) -> List[str]:
    """Lines of a bracketed list whose first line is already opened by the caller."""
    if not items:
        return ["[]"]
    inner = pad * (level + 1)
    lines = ["["]
    lines.extend(f"{inner}{item}," for item in items)
    lines.append(f"{pad * level}]")
    return lines


def format_debug(matrix: IncidenceMatrix, indent: Optional[int] = None) -> str:
    """
    Deterministic field-per-line dump:

        IncidenceMatrix {
            header: [
                "1-2",
            ],
            raw: [
                [
                    true,
                ],
            ],
        }
    """
    pad = " " * (CONFIG["debug_indent"] if indent is None else indent)

    header_lines = _format_list([json.dumps(h, ensure_ascii=False) for h in matrix.header], 1, pad)

    row_blocks = []
    for row in matrix.rows:
        cells = ["true" if cell else "false" for cell in row]
        row_blocks.append("\n".join(_format_list(cells, 2, pad)))
    raw_lines = _format_list(row_blocks, 1, pad)

    out = ["IncidenceMatrix {"]
    out.append(f"{pad}header: " + "\n".join(header_lines) + ",")
    out.append(f"{pad}raw: " + "\n".join(raw_lines) + ",")
    out.append("}")
    return "\n".join(out)


class IncidenceMatrixWriter(GraphWriter):
    """Encodes a tree as the debug dump of its incidence matrix."""

    format_name = "matrix"

    def __init__(self, separator: Optional[str] = None, indent: Optional[int] = None):
        self.separator = separator
        self.indent = indent

    def write(self, graph: GraphNode) -> str:
        return format_debug(IncidenceMatrix.from_graph(graph, self.separator), self.indent)
