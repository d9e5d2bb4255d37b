from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DemoConfig:
    """Settings for the law demonstration.

    Attributes:
        length: Number of integers in the test sequence 0..length-1. prod
            recurses once per element and the square-sum identity nests one
            prod inside another, so the demo needs about 2 * length frames:
            keep length below sys.getrecursionlimit() // 4 (250 with the
            default limit of 1000). Longer sequences raise RecursionError.
    """

    length: int = 100

    def __post_init__(self) -> None:
        if self.length <= 0:
            raise ValueError("length must be positive")
