"""Dynamic weighted random sampling.

:class:`WeightPool` keeps a set of keys with non-negative weights and draws a
key with probability proportional to its weight. Inserting, overwriting and
erasing a key, as well as drawing, take ``O(log n)``.

Two structures cooperate:

- an AVL tree ordered by ``(sort_key(key), weight)`` whose nodes cache the
  weight sum of their subtree, used for the weighted descent;
- a dict from sort key to the stored ``(key, weight)``, used to find the
  current weight of a key so its tree node can be located and replaced.

Tree nodes never change their ordering fields in place: an overwrite inserts
a new node and removes the old one. Tree updates only compare keys on the way
down and only relink on the way back up, so a comparison that raises (for
instance on incomparable sort keys) leaves the tree untouched; the dict is
written only after the tree update succeeded.
"""

from __future__ import annotations

import numbers
from typing import (
    Any,
    Callable,
    Dict,
    Generic,
    Hashable,
    Iterable,
    Iterator,
    List,
    Mapping,
    NamedTuple,
    Optional,
    Tuple,
    TypeVar,
    Union,
)

from .exceptions import AlgorithmError, InputError
from .rng import RandomSource, RngLike, resolve_rng

K = TypeVar("K")
Weight = Union[int, float]


class PoolEntry(NamedTuple):
    """Snapshot of one key and its weight at the time it was returned."""

    key: Any
    weight: Weight


class _Node:
    __slots__ = ("skey", "key", "weight", "total", "height", "left", "right")

    def __init__(self, skey: Any, key: Any, weight: Weight) -> None:
        self.skey = skey
        self.key = key
        self.weight = weight
        self.total: Weight = weight
        self.height = 1
        self.left: Optional[_Node] = None
        self.right: Optional[_Node] = None


def _height(n: Optional[_Node]) -> int:
    return n.height if n is not None else 0


def _total(n: Optional[_Node]) -> Weight:
    return n.total if n is not None else 0


def _update(n: _Node) -> None:
    n.height = 1 + max(_height(n.left), _height(n.right))
    n.total = n.weight + _total(n.left) + _total(n.right)


def _less(ak: Any, aw: Weight, bk: Any, bw: Weight) -> bool:
    """Order on ``(sort key, weight)`` pairs using ``<`` only."""
    if ak < bk:
        return True
    if bk < ak:
        return False
    return aw < bw


def _rotate_right(y: _Node) -> _Node:
    x = y.left
    assert x is not None
    y.left = x.right
    x.right = y
    _update(y)
    _update(x)
    return x


def _rotate_left(x: _Node) -> _Node:
    y = x.right
    assert y is not None
    x.right = y.left
    y.left = x
    _update(x)
    _update(y)
    return y


def _rebalance(n: _Node) -> _Node:
    _update(n)
    balance = _height(n.left) - _height(n.right)
    if balance > 1:
        assert n.left is not None
        if _height(n.left.left) < _height(n.left.right):
            n.left = _rotate_left(n.left)
        return _rotate_right(n)
    if balance < -1:
        assert n.right is not None
        if _height(n.right.right) < _height(n.right.left):
            n.right = _rotate_right(n.right)
        return _rotate_left(n)
    return n


def _insert(root: Optional[_Node], node: _Node) -> _Node:
    if root is None:
        return node
    if _less(node.skey, node.weight, root.skey, root.weight):
        root.left = _insert(root.left, node)
    else:
        root.right = _insert(root.right, node)
    return _rebalance(root)


def _pop_min(root: _Node) -> Tuple[Optional[_Node], _Node]:
    """Detach the leftmost node; return ``(new subtree, detached node)``."""
    if root.left is None:
        return root.right, root
    root.left, smallest = _pop_min(root.left)
    return _rebalance(root), smallest


def _replace(root: Optional[_Node], skey: Any, key: Any, weight: Weight) -> None:
    """Store ``key`` and ``weight`` on the node ordered equal to ``(skey, weight)``."""
    path: List[_Node] = []
    n = root
    while n is not None:
        path.append(n)
        if _less(skey, weight, n.skey, n.weight):
            n = n.left
        elif _less(n.skey, n.weight, skey, weight):
            n = n.right
        else:
            n.key = key
            n.weight = weight
            for p in reversed(path):
                _update(p)
            return
    raise AlgorithmError(f"weight tree has no node for ({skey!r}, {weight!r})")


def _delete(root: Optional[_Node], skey: Any, weight: Weight) -> Optional[_Node]:
    if root is None:
        raise AlgorithmError(f"weight tree has no node for ({skey!r}, {weight!r})")
    if _less(skey, weight, root.skey, root.weight):
        root.left = _delete(root.left, skey, weight)
    elif _less(root.skey, root.weight, skey, weight):
        root.right = _delete(root.right, skey, weight)
    else:
        if root.left is None:
            return root.right
        if root.right is None:
            return root.left
        right, succ = _pop_min(root.right)
        succ.left = root.left
        succ.right = right
        return _rebalance(succ)
    return _rebalance(root)


class WeightPool(Generic[K]):
    """Keys with weights, sampled proportionally to weight.

    Args:
        items: Optional mapping or iterable of ``(key, weight)`` pairs to
            insert, in iteration order.
        key: Function mapping a key to its sort key. Keys with equal sort
            keys are the same pool key. Defaults to the key itself.
        rng: Random source, integer seed, or ``None`` to use the process-wide
            default at every draw.
        empty: Value returned by :meth:`next` when nothing can be drawn.

    Examples:
        ```python
        >>> pool = WeightPool({"a": 1, "b": 3}, rng=1)
        >>> pool.insert("c", 0.5)
        PoolEntry(key='c', weight=0.5)
        >>> pool.total()
        4.5
        >>> pool.next() in {"a", "b", "c"}
        True
        ```
    """

    def __init__(
        self,
        items: Union[Mapping[K, Weight], Iterable[Tuple[K, Weight]], None] = None,
        *,
        key: Optional[Callable[[K], Hashable]] = None,
        rng: RngLike = None,
        empty: Any = None,
    ) -> None:
        """Initialize the pool and insert ``items``."""
        self._key: Callable[[K], Hashable] = key or (lambda k: k)
        self._rng: Optional[RandomSource] = None if rng is None else resolve_rng(rng)
        self._empty = empty
        self._root: Optional[_Node] = None
        self._record: Dict[Hashable, Tuple[K, Weight]] = {}
        if items is not None:
            pairs = items.items() if isinstance(items, Mapping) else items
            for k, w in pairs:
                self.insert(k, w)

    # ---- mutation -----------------------------------------------------

    def insert(self, key: K, weight: Weight) -> PoolEntry:
        """Insert ``key`` or overwrite its weight.

        Args:
            key: Key to store.
            weight: Non-negative weight.

        Returns:
            The stored entry.

        Raises:
            InputError: If ``weight`` is negative or not a number.
        """
        if not isinstance(weight, numbers.Real) or not weight >= 0:
            raise InputError(f"weight for {key!r} must be a non-negative number, got {weight!r}")
        skey = self._key(key)
        old = self._record.get(skey)
        if old is not None and old[1] == weight:
            _replace(self._root, skey, key, weight)
        else:
            root = _insert(self._root, _Node(skey, key, weight))
            if old is not None:
                try:
                    root = _delete(root, skey, old[1])
                except Exception:
                    self._root = _delete(root, skey, weight)
                    raise
            self._root = root
        self._record[skey] = (key, weight)
        return PoolEntry(key, weight)

    def erase(self, key: K) -> bool:
        """Remove ``key`` if present.

        Returns:
            ``True`` if an entry was removed.
        """
        skey = self._key(key)
        old = self._record.get(skey)
        if old is None:
            return False
        self._root = _delete(self._root, skey, old[1])
        del self._record[skey]
        return True

    def erase_at(self, entry: PoolEntry) -> Optional[PoolEntry]:
        """Remove the key of ``entry`` and return the entry that follows it.

        Args:
            entry: An entry obtained from :meth:`insert`, :meth:`find`,
                :meth:`begin` or iteration. Its key is removed even if the
                weight was overwritten since.

        Returns:
            The next entry in key order, or ``None`` if it was the last.

        Raises:
            KeyError: If the key is no longer in the pool.
        """
        skey = self._key(entry.key)
        old = self._record.get(skey)
        if old is None:
            raise KeyError(entry.key)
        self._root = _delete(self._root, skey, old[1])
        del self._record[skey]
        return self._successor(skey, old[1])

    def clear(self) -> None:
        """Remove every entry."""
        self._root = None
        self._record.clear()

    def swap(self, other: "WeightPool[K]") -> None:
        """Exchange contents (and key functions) with ``other``.

        The random source and the ``empty`` sentinel stay with each pool
        object, so after ``a.swap(b)`` pool ``a`` draws ``b``'s former keys
        with ``a``'s source.
        """
        self._root, other._root = other._root, self._root
        self._record, other._record = other._record, self._record
        self._key, other._key = other._key, self._key

    # ---- queries ------------------------------------------------------

    def size(self) -> int:
        """Return the number of keys."""
        return len(self._record)

    def empty(self) -> bool:
        """Return ``True`` if the pool holds no keys."""
        return not self._record

    def __len__(self) -> int:
        return len(self._record)

    def __bool__(self) -> bool:
        return bool(self._record)

    def __contains__(self, key: object) -> bool:
        return self._key(key) in self._record  # type: ignore[arg-type]

    def __getitem__(self, key: K) -> Weight:
        return self._record[self._key(key)][1]

    def find(self, key: K) -> Optional[PoolEntry]:
        """Return the entry stored for ``key`` or ``None``."""
        rec = self._record.get(self._key(key))
        return PoolEntry(*rec) if rec is not None else None

    def begin(self) -> Optional[PoolEntry]:
        """Return the entry with the smallest key, or ``None`` if empty."""
        n = self._root
        if n is None:
            return None
        while n.left is not None:
            n = n.left
        return PoolEntry(n.key, n.weight)

    def __iter__(self) -> Iterator[PoolEntry]:
        """Yield entries in key order. The pool must not change meanwhile."""
        stack: List[_Node] = []
        n = self._root
        while stack or n is not None:
            while n is not None:
                stack.append(n)
                n = n.left
            n = stack.pop()
            yield PoolEntry(n.key, n.weight)
            n = n.right

    def total(self) -> Weight:
        """Return the sum of all weights."""
        return _total(self._root)

    def _successor(self, skey: Any, weight: Weight) -> Optional[PoolEntry]:
        best: Optional[_Node] = None
        n = self._root
        while n is not None:
            if _less(skey, weight, n.skey, n.weight):
                best = n
                n = n.left
            else:
                n = n.right
        return PoolEntry(best.key, best.weight) if best is not None else None

    # ---- sampling -----------------------------------------------------

    def select(self, value: Weight) -> Any:
        """Return the key whose cumulative weight interval contains ``value``.

        Keys are laid out in key order on ``[0, total()]``; the key at
        position ``value`` is found by descending the tree with subtree sums.
        If rounding leaves a remainder at a node without a right subtree, that
        node is returned.

        Args:
            value: Position in ``[0, total()]``.

        Returns:
            The selected key, or the ``empty`` sentinel if the pool is empty
            or ``value`` exceeds the total weight.
        """
        n = self._root
        if n is None or value > n.total:
            return self._empty
        while True:
            left = n.left
            if left is not None and left.total >= value:
                n = left
                continue
            if left is not None:
                value -= left.total
            if n.right is None or n.weight >= value:
                return n.key
            value -= n.weight
            n = n.right

    def next(self) -> Any:
        """Draw a key with probability proportional to its weight.

        Integral totals draw a position in ``[1, total]`` so that zero-weight
        keys are never chosen; other totals draw a real in ``[0, total]``.

        Returns:
            The drawn key, or the ``empty`` sentinel if the pool is empty or
            its total weight is zero.
        """
        if self._root is None:
            return self._empty
        total = self._root.total
        if total <= 0:
            return self._empty
        src = self._rng if self._rng is not None else resolve_rng(None)
        if isinstance(total, numbers.Integral):
            value: Weight = src.next_int(1, int(total))
        else:
            value = src.next_real(0, total)
        return self.select(value)

    def __repr__(self) -> str:
        body = ", ".join(f"{e.key!r}: {e.weight!r}" for e in self)
        return f"WeightPool({{{body}}})"


__all__ = ["PoolEntry", "WeightPool"]
