from .combinators import (
    LawReport,
    LawViolation,
    check_monad_laws,
    dot,
    identity,
    par,
    verify_monad_laws,
)
from .kernel import Seq, bind, fmap, foldl, join, prod, unit
from .starter import DemoConfig, DemoReport, run_demo

__all__ = [
    # Kernel
    "Seq",
    "unit",
    "prod",
    "bind",
    "join",
    "fmap",
    "foldl",
    # Combinators
    "identity",
    "dot",
    "par",
    "check_monad_laws",
    "verify_monad_laws",
    "LawReport",
    "LawViolation",
    # Starter
    "DemoConfig",
    "DemoReport",
    "run_demo",
]
