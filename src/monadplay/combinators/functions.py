"""Plain function helpers used to build transformations for prod and fmap."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")


def identity(x: T) -> T:
    return x


def add(x: Any, y: Any) -> Any:
    return x + y


def sub(x: Any, y: Any) -> Any:
    return x - y


def square(x: Any) -> Any:
    return x * x


def dot(f: Callable[[U], V], g: Callable[[T], U]) -> Callable[[T], V]:
    """Compose two functions: ``dot(f, g)(z) == f(g(z))``."""
    return lambda z: f(g(z))


def par(f: Callable[[T, U], V], y: U) -> Callable[[T], V]:
    """Fix the second argument of a binary function: ``par(f, y)(z) == f(z, y)``."""
    return lambda z: f(z, y)


def sum_to(n: int) -> int:
    """Closed form of 0 + 1 + ... + n."""
    return n * (n + 1) // 2


def sum_squares_to(n: int) -> int:
    """Closed form of 0^2 + 1^2 + ... + n^2."""
    return n * (n + 1) * (2 * n + 1) // 6
