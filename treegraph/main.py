"""
Command-line entry point: load a JSON tree and render it.

    treegraph res/input.json                    # nested text form
    treegraph res/input.json --format matrix    # incidence matrix dump
    treegraph res/input.json --format table --plot overview.png
"""
from __future__ import annotations
import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from treegraph.config import CONFIG
from treegraph.core.audit import AuditLog
from treegraph.core.incidence import IncidenceMatrix
from treegraph.core.matrix_writer import IncidenceMatrixWriter
from treegraph.core.node import GraphNode
from treegraph.core.ports import FormatError
from treegraph.formats.json_codec import JsonGraphWriter
from treegraph.storage import load_graph

FORMATS = ("text", "json", "matrix", "table")


def render(graph: GraphNode, fmt: str, log: Optional[AuditLog] = None) -> str:
    """Render `graph` in one of FORMATS."""
    if fmt == "text":
        return graph.to_text()
    if fmt == "json":
        return graph.write_to_str(JsonGraphWriter(), log=log)
    if fmt == "matrix":
        return graph.write_to_str(IncidenceMatrixWriter(), log=log)
    if fmt == "table":
        from treegraph.analysis import to_frame

        return to_frame(IncidenceMatrix.from_graph(graph)).to_string()
    raise ValueError(f"Unknown format '{fmt}'. Valid: {list(FORMATS)}")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="treegraph",
        description="Render a JSON tree as text, JSON or its incidence matrix.",
    )
    p.add_argument("input", type=Path, help="JSON file: {\"value\": n, \"nodes\": [...]}")
    p.add_argument("-f", "--format", choices=FORMATS, default=CONFIG["default_format"])
    p.add_argument("-o", "--output", type=Path, default=None, help="write the rendering here instead of stdout")
    p.add_argument("--plot", type=Path, default=None, help="save a tree + matrix figure to this path")
    p.add_argument("--audit", type=Path, default=None, help="export the read/write audit log as JSON")
    return p


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    log = AuditLog()

    try:
        graph = load_graph(args.input, log=log)
        out = render(graph, args.format, log=log)
    except FileNotFoundError as e:
        print(f"❌ Input not found: {e.filename}", file=sys.stderr)
        return 2
    except FormatError as e:
        print(f"❌ Could not read {args.input}: {e}", file=sys.stderr)
        return 1
    finally:
        if args.audit is not None:
            log.export_json(str(args.audit))

    if args.output is not None:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(out + "\n", encoding="utf-8")
        print(f"📘 Wrote {args.format} rendering to {args.output}")
    else:
        print(out)

    if args.plot is not None:
        import matplotlib

        matplotlib.use("Agg")
        from treegraph.analysis import plot_overview

        plot_overview(graph, str(args.plot))
        print(f"🌳 Saved figure to {args.plot}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
