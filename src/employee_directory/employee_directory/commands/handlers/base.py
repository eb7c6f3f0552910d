from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ...directory.service import DirectoryService
from ..model import Command


@dataclass(frozen=True)
class HandlerResult:
    lines: tuple[str, ...] = ()
    stop: bool = False


class CommandHandler(ABC):
    """Strategy Pattern: encapsulate how one kind of command is applied."""

    @abstractmethod
    def handle(self, command: Command, directory: DirectoryService) -> HandlerResult:
        raise NotImplementedError
