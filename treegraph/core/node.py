"""
treegraph Core — node.py
========================
Defines the GraphNode: one labeled point of a rooted, ordered tree.
A node owns its children outright; there are no parent links, so the
structure cannot close into a cycle through this API.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, TYPE_CHECKING

from treegraph.core.audit import AuditLog, audit_operation

if TYPE_CHECKING:
    from treegraph.core.ports import GraphReader, GraphWriter


@dataclass
class GraphNode:
    """
    A passive container: a byte-sized value and its ordered children.
    Equality is structural (value and children, in order).
    """

    value: int
    nodes: List["GraphNode"] = field(default_factory=list)

    # ---------------------------------------------------------------
    # Construction
    # ---------------------------------------------------------------

    def add(self, child: "GraphNode") -> "GraphNode":
        """Append a child and return self so calls can be chained."""
        self.nodes.append(child)
        return self

    @property
    def children(self) -> List["GraphNode"]:
        return self.nodes

    # ---------------------------------------------------------------
    # Traversal
    # ---------------------------------------------------------------

    def walk(self) -> Iterator["GraphNode"]:
        """Yield every node occurrence in pre-order (self first)."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.nodes))

    def node_count(self) -> int:
        return sum(1 for _ in self.walk())

    def depth(self) -> int:
        """Number of levels; a lone node has depth 1."""
        deepest = 0
        stack = [(self, 1)]
        while stack:
            node, level = stack.pop()
            deepest = max(deepest, level)
            stack.extend((child, level + 1) for child in node.nodes)
        return deepest

    # ---------------------------------------------------------------
    # Reader / writer entry points
    # ---------------------------------------------------------------

    @classmethod
    def from_reader(
        cls, reader: "GraphReader", src: str, log: Optional[AuditLog] = None
    ) -> "GraphNode":
        """Decode `src` with `reader`. FormatError propagates to the caller."""
        if log is None:
            return reader.read(src)
        with audit_operation(log, "read", reader.format_name) as entry:
            graph = reader.read(src)
            entry.node_count = graph.node_count()
        return graph

    def write_to_str(self, writer: "GraphWriter", log: Optional[AuditLog] = None) -> str:
        """Encode this tree with `writer`. FormatError propagates to the caller."""
        if log is None:
            return writer.write(self)
        with audit_operation(log, "write", writer.format_name) as entry:
            entry.node_count = self.node_count()
            out = writer.write(self)
        return out

    # ---------------------------------------------------------------
    # Display
    # ---------------------------------------------------------------

    def to_text(self) -> str:
        """Nested diagnostic form: ``"1 { 2 { } 3 { } } "``."""
        parts = []
        # a str on the stack is a closing brace waiting to be emitted
        stack: list = [self]
        while stack:
            item = stack.pop()
            if isinstance(item, str):
                parts.append(item)
                continue
            parts.append(f"{item.value} {{ ")
            stack.append("} ")
            stack.extend(reversed(item.nodes))
        return "".join(parts)

    def __str__(self) -> str:
        return self.to_text()
