import matplotlib

matplotlib.use("Agg")

import pytest

from treegraph.core.node import GraphNode


def make_sample() -> GraphNode:
    """1 → 2 → 4 → {3, 5}"""
    g = GraphNode(1)
    a = GraphNode(2)
    b = GraphNode(3)
    c = GraphNode(4)
    d = GraphNode(5)

    c.add(b)
    c.add(d)
    a.add(c)
    g.add(a)
    return g


SAMPLE_JSON = (
    '{"value":1,"nodes":[{"value":2,"nodes":[{"value":4,"nodes":'
    '[{"value":3,"nodes":[]},{"value":5,"nodes":[]}]}]}]}'
)


@pytest.fixture
def sample() -> GraphNode:
    return make_sample()


@pytest.fixture
def sample_json() -> str:
    return SAMPLE_JSON


@pytest.fixture
def wide() -> GraphNode:
    """0 → {1 → {3, 4}, 2 → {5}}"""
    return GraphNode(0).add(GraphNode(1).add(GraphNode(3)).add(GraphNode(4))).add(
        GraphNode(2).add(GraphNode(5))
    )


@pytest.fixture
def sample_twin() -> GraphNode:
    """A separately built tree equal to `sample`."""
    return make_sample()
