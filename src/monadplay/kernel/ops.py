"""Monad primitives over Seq: unit, prod (bind), join, fmap and foldl.

All four structural operations are defined in terms of two primitives:

    unit : T -> Seq[T]
    prod : (T -> Seq[U]) x Seq[T] -> Seq[U]

``join`` is ``prod`` with the identity, ``fmap`` is ``prod`` composed with
``unit``. ``foldl`` is the left reduction used to consume the results.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from monadplay.kernel.sequence import Seq

T = TypeVar("T")
U = TypeVar("U")
A = TypeVar("A")


def unit(x: T) -> Seq[T]:
    """Lift a single value into a newly allocated one-element sequence."""
    return Seq((x,))


def prod(f: Callable[[T], Seq[U]], xs: Seq[T]) -> Seq[U]:
    """Bind ``f`` over ``xs``.

    Returns ``f(x0)`` followed by ``prod(f, rest)``; the empty sequence maps
    to the empty sequence. The recursion descends once per element, so the
    input length is bounded by the interpreter recursion limit.

    ``xs`` is not consumed: the recursion pops the front of a private copy.

    Args:
        f: Transformation from an element to a sequence. Treated as pure.
        xs: Source sequence.

    Returns:
        Concatenation of ``f(x)`` for every ``x`` in ``xs``, in source order.

    Raises:
        TypeError: If ``f`` returns something other than a Seq.
    """
    return _prod(f, xs.copy())


bind = prod


def _prod(f: Callable[[T], Seq[U]], xs: Seq[T]) -> Seq[U]:
    if xs.empty():
        return Seq()
    y = f(xs.front())
    if not isinstance(y, Seq):
        raise TypeError(f"bind transformation must return Seq, got {type(y).__name__}")
    # f may hand back a sequence it still owns; splice into a fresh one
    y = y.copy()
    xs.pop_front()
    y.splice(_prod(f, xs))
    return y


def join(xss: Seq[Seq[T]]) -> Seq[T]:
    """Flatten one level of nesting, outer order then inner order."""
    return prod(lambda y: y, xss)


def fmap(f: Callable[[T], U], xs: Seq[T]) -> Seq[U]:
    """Apply ``f`` to every element, preserving length and order."""
    return prod(lambda y: unit(f(y)), xs)


def foldl(f: Callable[[A, T], A], xs: Seq[T], seed: A) -> A:
    """Left-to-right reduction: ``f(...f(f(seed, x0), x1)..., xn)``."""
    acc = seed
    for item in xs:
        acc = f(acc, item)
    return acc
