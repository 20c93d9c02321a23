# treegraph/storage.py
"""
File load/save for trees. OS errors (missing file, permissions) propagate
unchanged; format problems surface as FormatError from the reader/writer.
"""
from __future__ import annotations
from pathlib import Path
from typing import Optional

from treegraph.core.audit import AuditLog
from treegraph.core.node import GraphNode
from treegraph.core.ports import FormatError, GraphReader, GraphWriter
from treegraph.formats.json_codec import JsonGraphReader, JsonGraphWriter


def load_graph(
    path: str | Path,
    reader: Optional[GraphReader] = None,
    log: Optional[AuditLog] = None,
) -> GraphNode:
    """Read `path` (UTF-8) and decode it, JSON by default."""
    if reader is None:
        reader = JsonGraphReader()
    try:
        src = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise FormatError(f"{path}: not UTF-8 text ({e.reason})") from e
    return GraphNode.from_reader(reader, src, log=log)


def save_graph(
    graph: GraphNode,
    path: str | Path,
    writer: Optional[GraphWriter] = None,
    log: Optional[AuditLog] = None,
) -> Path:
    """Encode `graph` and write it to `path`, creating parent directories."""
    if writer is None:
        writer = JsonGraphWriter()
    text = graph.write_to_str(writer, log=log)
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(text, encoding="utf-8")
    return out
