"""Error types for law verification."""

from __future__ import annotations


class LawViolation(Exception):
    """A monad law evaluated false at some element of the checked sequence.

    ``law`` is one of "left identity", "right identity" or "associativity";
    ``element`` is the source element whose unit(x) broke it.
    """

    def __init__(self, message: str, law: str, element: object) -> None:
        self.law = law
        self.element = element
        super().__init__(message)

    def __repr__(self) -> str:
        return f"LawViolation(law={self.law!r}, element={self.element!r})"
