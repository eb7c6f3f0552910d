from __future__ import annotations

from enum import Enum


class CommandKind(str, Enum):
    """Tag of every command a console line can be parsed into."""

    ADD_EMPLOYEE = "ADD_EMPLOYEE"
    LIST_DEPARTMENT = "LIST_DEPARTMENT"
    LIST_ALL = "LIST_ALL"
    QUIT = "QUIT"
    INVALID = "INVALID"
