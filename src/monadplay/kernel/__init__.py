"""Kernel layer - the Seq container and its monad primitives."""

from monadplay.kernel.ops import bind, fmap, foldl, join, prod, unit
from monadplay.kernel.sequence import Seq

__all__ = [
    "Seq",
    "unit",
    "prod",
    "bind",
    "join",
    "fmap",
    "foldl",
]
