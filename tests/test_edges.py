from randgraph import PyRandom, relabel_edges, shuffle_edges

from conftest import undirected


def test_shuffle_edges_keeps_edges_and_adds_base(rng):
    edges = [(0, 1), (1, 2), (2, 3), (3, 4), (0, 4)]
    out = list(edges)
    shuffle_edges(out, 10, rng=rng)
    assert len(out) == len(edges)
    assert undirected(out) == undirected((u + 10, v + 10) for u, v in edges)


def test_shuffle_edges_swaps_some_endpoints():
    edges = [(i, i + 1) for i in range(200)]
    out = list(edges)
    shuffle_edges(out, rng=PyRandom(3))
    flipped = sum(1 for u, v in out if u > v)
    assert 50 < flipped < 150


def test_shuffle_edges_is_reproducible():
    a = [(i, i + 1) for i in range(30)]
    b = list(a)
    shuffle_edges(a, rng=11)
    shuffle_edges(b, rng=11)
    assert a == b


def test_shuffle_edges_empty(rng):
    edges = []
    shuffle_edges(edges, 5, rng=rng)
    assert edges == []


def test_relabel_edges_dense_ranks():
    edges = [(10, 4), (4, 7)]
    relabel_edges(edges)
    assert edges == [(2, 0), (0, 1)]


def test_relabel_edges_with_base_keeps_order():
    edges = [(100, -5), (42, 100), (-5, 42)]
    relabel_edges(edges, base=1)
    assert edges == [(3, 1), (2, 3), (1, 2)]
