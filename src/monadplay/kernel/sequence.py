"""Seq - the list container the monad is built on."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")
A = TypeVar("A")


class Seq(Generic[T]):
    """Ordered, finite, mutable sequence with O(1) front removal.

    The container behaves like a linked list: elements can be appended,
    another sequence can be spliced onto the end, and the front element
    can be popped. Equality is element-wise and order sensitive.

    The monad surface mirrors the free functions in ``monadplay.kernel.ops``:
    ``Seq.start`` is ``unit``, ``then`` is ``prod``, ``map`` is ``fmap`` and
    ``fold`` is ``foldl``.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: deque[T] = deque(items)

    @classmethod
    def of(cls, *items: T) -> Seq[T]:
        return cls(items)

    @classmethod
    def range(cls, n: int) -> Seq[int]:
        """Integer sequence 0, 1, ..., n - 1."""
        return cls(range(n))  # type: ignore[arg-type]

    def append(self, item: T) -> None:
        self._items.append(item)

    def splice(self, other: Seq[T]) -> None:
        """Move every element of ``other`` onto the end of this sequence.

        ``other`` is left empty.
        """
        if other is self:
            raise ValueError("Cannot splice a sequence into itself")
        self._items.extend(other._items)
        other._items.clear()

    def empty(self) -> bool:
        return not self._items

    def front(self) -> T:
        if not self._items:
            raise IndexError("front() on empty Seq")
        return self._items[0]

    def pop_front(self) -> T:
        if not self._items:
            raise IndexError("pop_front() on empty Seq")
        return self._items.popleft()

    def copy(self) -> Seq[T]:
        return Seq(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Seq):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Seq({list(self._items)!r})"

    # Monad surface

    @staticmethod
    def start(value: U) -> Seq[U]:
        """Lift a value into a one-element sequence."""
        from monadplay.kernel.ops import unit

        return unit(value)

    def then(self, func: Callable[[T], Seq[U]]) -> Seq[U]:
        """Bind ``func`` over this sequence (``prod(func, self)``)."""
        from monadplay.kernel.ops import prod

        return prod(func, self)

    def map(self, func: Callable[[T], U]) -> Seq[U]:
        from monadplay.kernel.ops import fmap

        return fmap(func, self)

    def fold(self, func: Callable[[A, T], A], seed: A) -> A:
        from monadplay.kernel.ops import foldl

        return foldl(func, self, seed)
