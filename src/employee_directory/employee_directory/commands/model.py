from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ..core.constants import MSG_INVALID
from ..core.enums import CommandKind


@dataclass(frozen=True)
class AddEmployee:
    name: str
    department: str
    kind: CommandKind = CommandKind.ADD_EMPLOYEE


@dataclass(frozen=True)
class ListDepartment:
    department: str
    kind: CommandKind = CommandKind.LIST_DEPARTMENT


@dataclass(frozen=True)
class ListAll:
    kind: CommandKind = CommandKind.LIST_ALL


@dataclass(frozen=True)
class Quit:
    kind: CommandKind = CommandKind.QUIT


@dataclass(frozen=True)
class Invalid:
    """Unrecognized or malformed line; carries only the text shown to the user."""

    message: str = MSG_INVALID
    kind: CommandKind = CommandKind.INVALID


Command = Union[AddEmployee, ListDepartment, ListAll, Quit, Invalid]
