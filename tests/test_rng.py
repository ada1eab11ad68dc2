import pytest

import randgraph
from randgraph import NumpyRandom, PyRandom, custom_tree, uniform_tree
from randgraph.rng import get_default, resolve_rng, set_default


@pytest.mark.parametrize("factory", [PyRandom, NumpyRandom])
def test_next_int_is_inclusive(factory):
    src = factory(1)
    seen = {src.next_int(3, 5) for _ in range(300)}
    assert seen == {3, 4, 5}


@pytest.mark.parametrize("factory", [PyRandom, NumpyRandom])
def test_next_real_stays_in_range(factory):
    src = factory(2)
    assert all(0.5 <= src.next_real(0.5, 1.5) <= 1.5 for _ in range(300))


@pytest.mark.parametrize("factory", [PyRandom, NumpyRandom])
def test_shuffle_permutes_in_place(factory):
    items = list(range(50))
    factory(3).shuffle(items)
    assert sorted(items) == list(range(50))
    assert items != list(range(50))


@pytest.mark.parametrize("factory", [PyRandom, NumpyRandom])
def test_empty_range_raises(factory):
    with pytest.raises(ValueError):
        factory(0).next_int(2, 1)


def test_numpy_source_wraps_existing_generator():
    import numpy as np

    gen = np.random.default_rng(4)
    assert NumpyRandom(generator=gen).generator is gen


def test_resolve_rng_accepts_seed_source_and_none():
    src = PyRandom(0)
    assert resolve_rng(src) is src
    assert isinstance(resolve_rng(5), PyRandom)
    assert resolve_rng(None) is get_default()
    with pytest.raises(TypeError):
        resolve_rng(True)


def test_global_seed_reproduces_output():
    old = get_default()
    try:
        randgraph.seed(5)
        a = uniform_tree(20), custom_tree(20, 1, 3)
        randgraph.seed(5)
        b = uniform_tree(20), custom_tree(20, 1, 3)
        assert a == b
    finally:
        set_default(old)


def test_numpy_source_drives_generators():
    assert uniform_tree(30, rng=NumpyRandom(8)) == uniform_tree(30, rng=NumpyRandom(8))
