import io
from collections import Counter

import networkx as nx
import pytest

from randgraph import (
    ATTACH_EARLIEST,
    ATTACH_RECENT,
    ConfigError,
    InputError,
    PyRandom,
    StdLogger,
    custom_tree,
    prufer_to_edges,
    uniform_tree,
)

from conftest import as_graph


@pytest.mark.parametrize("size", [2, 3, 5, 17, 100])
@pytest.mark.parametrize("base", [0, 1, 7])
def test_uniform_tree_is_a_tree(size, base, rng):
    edges = uniform_tree(size, base, rng=rng)
    assert len(edges) == size - 1
    G = as_graph(edges, range(base, base + size))
    assert G.number_of_nodes() == size
    assert nx.is_tree(G)


def test_uniform_tree_single_node(rng):
    assert uniform_tree(1, rng=rng) == []


@pytest.mark.parametrize("size", [0, -3])
def test_uniform_tree_rejects_non_positive_size(size):
    with pytest.raises(ConfigError):
        uniform_tree(size)


def test_uniform_tree_covers_cayley_count_evenly():
    rng = PyRandom(12345)
    trials = 16000
    counts = Counter(
        frozenset(tuple(sorted(e)) for e in uniform_tree(4, rng=rng)) for _ in range(trials)
    )
    # Cayley: 4^(4-2) labeled trees on 4 nodes.
    assert len(counts) == 16
    expected = trials / 16
    for c in counts.values():
        assert abs(c - expected) < 0.15 * expected


def test_uniform_tree_is_reproducible():
    assert uniform_tree(40, rng=5) == uniform_tree(40, rng=5)


def test_prufer_to_edges_decodes_star_and_path():
    assert prufer_to_edges([3, 3, 3, 4], 6) == [(0, 3), (1, 3), (2, 3), (3, 4), (4, 5)]
    assert prufer_to_edges([], 2) == [(0, 1)]


@pytest.mark.parametrize(
    "seq,size",
    [([0, 1], 3), ([5], 3), ([-1], 3), ([], 1)],
)
def test_prufer_to_edges_rejects_bad_input(seq, size):
    with pytest.raises(InputError):
        prufer_to_edges(seq, size)


@pytest.mark.parametrize("tree_type", [0, 1, 2, 9])
@pytest.mark.parametrize("dis", [1, 3, 50])
def test_custom_tree_is_a_tree(tree_type, dis, rng):
    size = 60
    edges = custom_tree(size, tree_type, dis, base=2, rng=rng)
    G = as_graph(edges, range(2, 2 + size))
    assert len(edges) == size - 1
    assert nx.is_tree(G)


def test_custom_tree_recent_window_of_one_is_a_path(rng):
    for _ in range(20):
        G = as_graph(custom_tree(30, ATTACH_RECENT, 1, rng=rng), range(30))
        assert nx.is_tree(G)
        assert max(d for _, d in G.degree) <= 2


def test_custom_tree_earliest_window_of_one_is_a_star(rng):
    G = as_graph(custom_tree(30, ATTACH_EARLIEST, 1, rng=rng), range(30))
    assert sorted(d for _, d in G.degree)[-1] == 29


def test_custom_tree_single_node(rng):
    assert custom_tree(1, ATTACH_RECENT, 4, rng=rng) == []


@pytest.mark.parametrize("tree_type", [ATTACH_RECENT, ATTACH_EARLIEST])
def test_custom_tree_requires_positive_dis(tree_type):
    with pytest.raises(ConfigError):
        custom_tree(5, tree_type, 0)


def test_custom_tree_ignores_dis_for_any_attachment(rng):
    assert len(custom_tree(5, 0, 0, rng=rng)) == 4


def test_custom_tree_rejects_non_positive_size():
    with pytest.raises(ConfigError):
        custom_tree(0, 0)


def test_tree_generators_log_their_result(rng):
    buf = io.StringIO()
    uniform_tree(5, rng=rng, logger=StdLogger(level="info", stream=buf))
    assert buf.getvalue() == "info uniform_tree size=5 edges=4\n"


def test_tree_generators_accept_bound_logger(rng):
    buf = io.StringIO()
    log = StdLogger(level="info", stream=buf).bind(batch="a")
    custom_tree(4, 1, 1, rng=rng, logger=log)
    assert buf.getvalue() == "info custom_tree batch=a size=4 tree_type=1 edges=3\n"
