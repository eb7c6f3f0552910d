from __future__ import annotations

from typing import Optional, Protocol, Sequence


class DirectoryRepository(Protocol):
    """Storage of department -> employee names.

    The service depends on this interface, not on a concrete store.
    """

    def append(self, *, department: str, name: str) -> None:
        raise NotImplementedError

    def get_employees(self, department: str) -> Optional[Sequence[str]]:
        raise NotImplementedError

    def list_departments(self) -> Sequence[str]:
        raise NotImplementedError
