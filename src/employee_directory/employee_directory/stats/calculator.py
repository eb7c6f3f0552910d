from __future__ import annotations

from collections import Counter
from typing import Sequence

from ..core.exceptions import EmptySampleError
from .result import ModeResult


def median(values: Sequence[int]) -> float:
    """Middle value of an already sorted sequence.

    The input is not sorted here. For an even length the two middle elements
    are averaged.
    """
    n = len(values)
    if n == 0:
        raise EmptySampleError("Median of an empty sample is undefined")
    mid = n // 2
    if n % 2 == 0:
        return (values[mid - 1] + values[mid]) / 2
    return float(values[mid])


def mode(values: Sequence[int]) -> ModeResult:
    """Most frequent value; ties go to the smallest value."""
    if not values:
        raise EmptySampleError("Mode of an empty sample is undefined")
    counts = Counter(values)
    value, count = min(counts.items(), key=lambda item: (-item[1], item[0]))
    return ModeResult(value=value, count=count)


def word_counts(text: str) -> dict[str, int]:
    # Counter keeps first-occurrence order
    return dict(Counter(text.split()))
