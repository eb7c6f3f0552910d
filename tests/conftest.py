from __future__ import annotations

import pytest

from src.employee_directory.employee_directory.container import Container, build_container


@pytest.fixture
def container() -> Container:
    return build_container()


@pytest.fixture(autouse=True)
def testing_env(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
