"""Monad and functor laws for (Seq, unit, prod)."""

# The triple (Seq, unit, prod) is a monad when, for pure f, g and any x:
#
# 1. Left identity: prod(f, unit(x)) == f(x)
#
# 2. Right identity: prod(unit, m) == m
#
# 3. Associativity: prod(f, prod(g, m)) == prod(lambda y: prod(f, g(y)), m)
#
# fmap = prod . unit is then a functor:
#
# 4. Identity: fmap(identity, m) == m
#
# 5. Composition: fmap(dot(g, f), m) == fmap(g, fmap(f, m))

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from monadplay.combinators.functions import dot, identity
from monadplay.combinators.types import LawReport
from monadplay.kernel import Seq, fmap, foldl, prod, unit

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")

Kleisli = Callable[[Any], Seq[Any]]


def left_identity(f: Callable[[T], Seq[U]], x: T) -> bool:
    return prod(f, unit(x)) == f(x)


def right_identity(x: T) -> bool:
    m = unit(x)
    return prod(unit, m) == m


def associativity(f: Kleisli, g: Kleisli, x: Any) -> bool:
    return prod(f, prod(g, unit(x))) == prod(lambda y: prod(f, g(y)), unit(x))


def functor_identity(xs: Seq[T]) -> bool:
    return fmap(identity, xs) == xs


def functor_composition(f: Callable[[T], U], g: Callable[[U], V], xs: Seq[T]) -> bool:
    return fmap(dot(g, f), xs) == fmap(g, fmap(f, xs))


def _laws(f: Kleisli, g: Kleisli) -> list[tuple[str, Callable[[Any], bool]]]:
    return [
        ("left identity", lambda x: left_identity(f, x)),
        ("right identity", right_identity),
        ("associativity", lambda x: associativity(f, g, x)),
    ]


def check_monad_laws(f: Kleisli, g: Kleisli, xs: Seq[Any]) -> bool:
    """Check all three monad laws pointwise over every element of ``xs``.

    Folds a boolean AND across the checks; once a check fails the
    remaining predicates are no longer evaluated.
    """
    laws = _laws(f, g)

    def step(ok: bool, x: Any) -> bool:
        return ok and all(law(x) for _, law in laws)

    return foldl(step, xs, True)


def verify_monad_laws(f: Kleisli, g: Kleisli, xs: Seq[Any]) -> LawReport:
    """Like check_monad_laws, but report the first failing law and element."""
    laws = _laws(f, g)

    def step(report: LawReport, x: Any) -> LawReport:
        if not report.passed:
            return report
        for name, law in laws:
            if not law(x):
                logger.debug("%s law failed at element %r", name, x)
                return LawReport(passed=False, checked=report.checked + 1, law=name, element=x)
        return LawReport(passed=True, checked=report.checked + 1)

    report = foldl(step, xs, LawReport(passed=True))
    logger.debug("Monad laws checked over %d elements: passed=%s", report.checked, report.passed)
    return report
