from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Department:
    """Read model for one department: its name and its employees, sorted."""

    name: str
    employees: tuple[str, ...]
