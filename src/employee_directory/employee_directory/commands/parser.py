from __future__ import annotations

from ..core.constants import (
    ADD_PREFIX,
    ADD_SEPARATOR,
    LIST_ALL_PREFIX,
    LIST_PREFIX,
    MSG_INVALID_ADD,
    MSG_INVALID_LIST,
    QUIT_WORD,
)
from .model import AddEmployee, Command, Invalid, ListAll, ListDepartment, Quit


def parse_command(line: str) -> Command:
    """Turn one console line into a Command.

    The line is expected to be trimmed by the caller. Every input maps to
    exactly one variant; unrecognized text becomes ``Invalid``. Checks run in
    a fixed order and the first match wins, so "List all" is tested before
    the generic "List " prefix.
    """
    if line.isascii() and line.lower() == QUIT_WORD:
        return Quit()

    if line.startswith(ADD_PREFIX):
        return _parse_add(line[len(ADD_PREFIX):])

    if line.startswith(LIST_ALL_PREFIX):
        return ListAll()

    if line.startswith(LIST_PREFIX):
        department = line[len(LIST_PREFIX):].strip()
        if not department:
            return Invalid(MSG_INVALID_LIST)
        return ListDepartment(department=department)

    return Invalid()


def _parse_add(rest: str) -> Command:
    name, sep, department = rest.partition(ADD_SEPARATOR)
    name = name.strip()
    department = department.strip()
    if not sep or not name or not department:
        return Invalid(MSG_INVALID_ADD)
    return AddEmployee(name=name, department=department)
