from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .calculator import median, mode
from .result import ModeResult


@dataclass(frozen=True)
class IntegerSample:
    """Integers in ascending order, ready for median/mode."""

    values: tuple[int, ...]

    @classmethod
    def from_values(cls, values: Iterable[int]) -> "IntegerSample":
        return cls(values=tuple(sorted(int(v) for v in values)))

    def median(self) -> float:
        return median(self.values)

    def mode(self) -> ModeResult:
        return mode(self.values)
