from __future__ import annotations

from typing import Protocol

import typer


class OutputSink(Protocol):
    def write_line(self, text: str) -> None:
        raise NotImplementedError


class EchoOutput(OutputSink):
    def write_line(self, text: str) -> None:
        typer.echo(text)


class ListOutput(OutputSink):
    """Collects lines in memory."""

    def __init__(self):
        self.lines: list[str] = []

    def write_line(self, text: str) -> None:
        self.lines.append(text)
