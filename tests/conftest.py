import matplotlib

matplotlib.use("Agg")

import networkx as nx
import pytest

from randgraph import PyRandom


@pytest.fixture
def rng() -> PyRandom:
    return PyRandom(20240501)


def as_graph(edges, nodes) -> nx.Graph:
    G = nx.Graph()
    G.add_nodes_from(nodes)
    G.add_edges_from(edges)
    return G


def undirected(edges):
    return sorted(tuple(sorted(e)) for e in edges)
