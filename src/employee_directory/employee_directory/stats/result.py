from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ModeResult:
    value: int
    count: int
