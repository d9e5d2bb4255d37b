"""Law verification types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from monadplay.combinators.errors import LawViolation


@dataclass(frozen=True)
class LawReport:
    """Outcome of verifying the monad laws over a sequence.

    Attributes:
        passed: True iff every law held at every element.
        checked: Number of elements examined before stopping.
        law: Name of the first law that failed, if any.
        element: Element the first failure occurred at, if any.
    """

    passed: bool
    checked: int = 0
    law: str | None = None
    element: Any = None

    def raise_for_failure(self) -> None:
        if not self.passed:
            raise LawViolation(
                f"{self.law} law does not hold at element {self.element!r}",
                law=self.law or "",
                element=self.element,
            )
