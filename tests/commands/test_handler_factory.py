from __future__ import annotations

from dataclasses import dataclass

from src.employee_directory.employee_directory.commands.factory import CommandHandlerFactory
from src.employee_directory.employee_directory.commands.handlers.add_handler import AddEmployeeHandler
from src.employee_directory.employee_directory.commands.handlers.invalid_handler import InvalidHandler
from src.employee_directory.employee_directory.commands.handlers.list_all_handler import ListAllHandler
from src.employee_directory.employee_directory.commands.handlers.list_handler import ListDepartmentHandler
from src.employee_directory.employee_directory.commands.handlers.quit_handler import QuitHandler
from src.employee_directory.employee_directory.commands.model import (
    AddEmployee,
    Invalid,
    ListAll,
    ListDepartment,
    Quit,
)


def test_factory_picks_handler_per_kind():
    factory = CommandHandlerFactory()

    assert isinstance(factory.for_command(AddEmployee(name="A", department="B")), AddEmployeeHandler)
    assert isinstance(factory.for_command(ListDepartment(department="B")), ListDepartmentHandler)
    assert isinstance(factory.for_command(ListAll()), ListAllHandler)
    assert isinstance(factory.for_command(Quit()), QuitHandler)
    assert isinstance(factory.for_command(Invalid()), InvalidHandler)


def test_factory_falls_back_for_unknown_command():
    @dataclass(frozen=True)
    class Unknown:
        pass

    assert isinstance(CommandHandlerFactory().for_command(Unknown()), InvalidHandler)


def test_quit_handler_stops(container):
    result = QuitHandler().handle(Quit(), container.directory_service)
    assert result.stop is True
    assert result.lines == ("Exiting",)
