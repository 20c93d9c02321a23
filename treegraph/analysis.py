"""
analysis.py
-----------
Diagnostic views of a tree and its incidence matrix:
tabular (pandas), graph (networkx) and plots (matplotlib).
"""
from __future__ import annotations
from typing import Dict, Optional, Tuple

import matplotlib.pyplot as plt
import networkx as nx
import numpy as np
import pandas as pd

from treegraph.config import CONFIG
from treegraph.core.incidence import IncidenceMatrix
from treegraph.core.node import GraphNode


# -------------------------------------------------------------------
# Tabular / graph conversions
# -------------------------------------------------------------------

def to_frame(matrix: IncidenceMatrix) -> pd.DataFrame:
    """Rows indexed by vertex value, one boolean column per edge label."""
    return pd.DataFrame(
        np.array(matrix.raw, copy=True),
        index=pd.Index(matrix.vertices, name="vertex"),
        columns=pd.Index(matrix.header, name="edge"),
        dtype=bool,
    )


def to_networkx(graph: GraphNode) -> nx.DiGraph:
    """
    DiGraph keyed by pre-order position (0 = root), so repeated values stay
    distinct nodes. Each node carries `value` and `depth`; edges run
    parent → child and carry `label`.
    """
    G = nx.DiGraph()
    sep = CONFIG["edge_separator"]
    counter = 0

    def visit(node: GraphNode, depth: int) -> int:
        nonlocal counter
        node_id = counter
        counter += 1
        G.add_node(node_id, value=node.value, depth=depth)
        for child in node.nodes:
            child_id = visit(child, depth + 1)
            G.add_edge(node_id, child_id, label=f"{node.value}{sep}{child.value}")
        return node_id

    visit(graph, 0)
    return G


def tree_layout(G: nx.DiGraph, root: int = 0) -> Dict[int, Tuple[float, float]]:
    """Leaves spaced one unit apart left to right; parents centred over children."""
    pos: Dict[int, Tuple[float, float]] = {}
    next_x = 0.0

    def place(n: int) -> float:
        nonlocal next_x
        children = list(G.successors(n))
        if children:
            xs = [place(c) for c in children]
            x = sum(xs) / len(xs)
        else:
            x = next_x
            next_x += 1.0
        pos[n] = (x, -float(G.nodes[n]["depth"]))
        return x

    place(root)
    return pos


# -------------------------------------------------------------------
# Plots
# -------------------------------------------------------------------

def draw_tree(graph: GraphNode, ax: Optional[plt.Axes] = None, title: str = "Tree") -> plt.Axes:
    """Draw the tree top-down with node values as labels and edge labels."""
    if ax is None:
        _, ax = plt.subplots(figsize=CONFIG["figure_size"])

    G = to_networkx(graph)
    pos = tree_layout(G)
    nx.draw_networkx(
        G,
        pos=pos,
        ax=ax,
        labels={n: str(d["value"]) for n, d in G.nodes(data=True)},
        node_color="lightsteelblue",
        edgecolors="black",
        arrows=True,
    )
    nx.draw_networkx_edge_labels(
        G, pos=pos, ax=ax, edge_labels=nx.get_edge_attributes(G, "label"), font_size=8
    )
    ax.set_title(title)
    ax.set_axis_off()
    return ax


def plot_incidence(
    matrix: IncidenceMatrix, ax: Optional[plt.Axes] = None, title: str = "Incidence Matrix"
) -> plt.Axes:
    """Heatmap of the boolean matrix, edges on x, vertex occurrences on y."""
    if ax is None:
        _, ax = plt.subplots(figsize=CONFIG["figure_size"])

    n_rows, n_cols = matrix.shape
    ax.imshow(matrix.raw.astype(float), cmap=CONFIG["matrix_cmap"], vmin=0.0, vmax=1.0, aspect="auto")
    ax.set_xticks(np.arange(n_cols))
    ax.set_xticklabels(matrix.header, rotation=45, ha="right")
    ax.set_yticks(np.arange(n_rows))
    ax.set_yticklabels([str(v) for v in matrix.vertices])
    ax.set_xlabel("edge")
    ax.set_ylabel("vertex")
    ax.set_title(title)
    return ax


def plot_overview(graph: GraphNode, path: Optional[str] = None) -> plt.Figure:
    """Tree and matrix side by side; saved to `path` when given."""
    fig, axes = plt.subplots(1, 2, figsize=(CONFIG["figure_size"][0] * 2, CONFIG["figure_size"][1]))
    draw_tree(graph, ax=axes[0])
    plot_incidence(IncidenceMatrix.from_graph(graph), ax=axes[1])
    fig.tight_layout()
    if path is not None:
        fig.savefig(path)
    return fig
