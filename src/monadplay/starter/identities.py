"""Numeric identities computed through fold, prod and fmap."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Literal

from pydantic import BaseModel

from ..combinators import add, dot, par, square, sub, sum_squares_to, sum_to
from ..kernel import Seq, fmap, foldl, prod

logger = logging.getLogger(__name__)

IntKleisli = Callable[[int], Seq[int]]

IdentityName = Literal["sum_of_doubles", "sum_of_squares", "squares_vs_square_of_sum"]
IDENTITY_NAMES: tuple[IdentityName, ...] = ("sum_of_doubles", "sum_of_squares", "squares_vs_square_of_sum")


class IdentityCheck(BaseModel):
    name: IdentityName
    passed: bool


def sum_of_doubles(g: IntKleisli, ls: Seq[int]) -> IdentityCheck:
    """foldl(add, prod(g, ls), 0) against twice the closed-form sum."""
    n = len(ls) - 1
    passed = foldl(add, prod(g, ls), 0) == 2 * sum_to(n)
    return IdentityCheck(name="sum_of_doubles", passed=passed)


def sum_of_squares(f: IntKleisli, ls: Seq[int]) -> IdentityCheck:
    """foldl(add, prod(f, ls), 0) against the closed-form sum of squares."""
    n = len(ls) - 1
    passed = foldl(add, prod(f, ls), 0) == sum_squares_to(n)
    return IdentityCheck(name="sum_of_squares", passed=passed)


def _dx_sqr(x: int, ls: Seq[int]) -> Seq[int]:
    # (l - x)^2 for every l
    return fmap(dot(square, par(sub, x)), ls)


def sigma_squares(ls: Seq[int]) -> int:
    return foldl(add, fmap(square, ls), 0)


def sigma_sqr(ls: Seq[int]) -> int:
    return square(foldl(add, ls, 0))


def sigma_dx2(ls: Seq[int]) -> int:
    """Sum over all i, j of (x_i - x_j)^2."""
    return foldl(add, prod(par(_dx_sqr, ls), ls), 0)


def squares_vs_square_of_sum(ls: Seq[int]) -> IdentityCheck:
    """n * sum(x^2) - (sum x)^2 == 1/2 * sum_i sum_j (x_i - x_j)^2."""
    passed = len(ls) * sigma_squares(ls) - sigma_sqr(ls) == sigma_dx2(ls) // 2
    return IdentityCheck(name="squares_vs_square_of_sum", passed=passed)


def check_identities(f: IntKleisli, g: IntKleisli, ls: Seq[int]) -> list[IdentityCheck]:
    checks = [
        sum_of_doubles(g, ls),
        sum_of_squares(f, ls),
        squares_vs_square_of_sum(ls),
    ]
    for check in checks:
        logger.debug("Identity %s: passed=%s", check.name, check.passed)
    return checks
