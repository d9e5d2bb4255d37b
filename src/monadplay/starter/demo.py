from __future__ import annotations

import logging

from pydantic import BaseModel, Field, model_validator

from ..combinators import check_monad_laws
from ..kernel import Seq, unit
from .config import DemoConfig
from .formatter import format_report
from .identities import IDENTITY_NAMES, IdentityCheck, check_identities

logger = logging.getLogger(__name__)


class DemoReport(BaseModel):
    length: int = Field(gt=0)
    laws_hold: bool
    identities: list[IdentityCheck]

    @model_validator(mode="after")
    def _require_every_identity(self) -> DemoReport:
        names = [check.name for check in self.identities]
        missing = [name for name in IDENTITY_NAMES if name not in names]
        if missing or len(names) != len(set(names)):
            raise ValueError(f"identities must hold each of {IDENTITY_NAMES} exactly once, missing {missing}")
        return self


def square_unit(x: int) -> Seq[int]:
    return unit(x * x)


def double_unit(x: int) -> Seq[int]:
    return unit(x + x)


def run_demo(config: DemoConfig | None = None) -> DemoReport:
    """Check the monad laws and the numeric identities over 0..length-1."""
    config = config or DemoConfig()
    ls = Seq.range(config.length)

    laws_hold = check_monad_laws(square_unit, double_unit, ls)
    logger.debug("Monad laws over %d elements: %s", config.length, laws_hold)

    identities = check_identities(square_unit, double_unit, ls)
    return DemoReport(length=config.length, laws_hold=laws_hold, identities=identities)


def main() -> int:
    report = run_demo()
    for line in format_report(report):
        print(line)
    return 0
