"""Combinators - function helpers and the monad laws they are checked against."""

from .errors import LawViolation
from .functions import add, dot, identity, par, square, sub, sum_squares_to, sum_to
from .laws import (
    associativity,
    check_monad_laws,
    functor_composition,
    functor_identity,
    left_identity,
    right_identity,
    verify_monad_laws,
)
from .types import LawReport

__all__ = [
    # Functions
    "identity",
    "add",
    "sub",
    "square",
    "dot",
    "par",
    "sum_to",
    "sum_squares_to",
    # Laws
    "left_identity",
    "right_identity",
    "associativity",
    "functor_identity",
    "functor_composition",
    "check_monad_laws",
    "verify_monad_laws",
    "LawReport",
    "LawViolation",
]
