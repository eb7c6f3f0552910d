from __future__ import annotations

from dataclasses import dataclass

from .commands.factory import CommandHandlerFactory
from .console.controller import DirectoryController
from .directory.memory_repository import InMemoryDirectoryRepository
from .directory.service import DirectoryService


@dataclass(frozen=True)
class Container:
    directory_repo: InMemoryDirectoryRepository

    directory_service: DirectoryService
    handler_factory: CommandHandlerFactory
    controller: DirectoryController


def build_container() -> Container:
    """Wire a fresh, empty directory; each call owns its own store."""
    directory_repo = InMemoryDirectoryRepository()

    directory_service = DirectoryService(directory_repo)
    handler_factory = CommandHandlerFactory()
    controller = DirectoryController(directory_service, handler_factory=handler_factory)

    return Container(
        directory_repo=directory_repo,
        directory_service=directory_service,
        handler_factory=handler_factory,
        controller=controller,
    )
