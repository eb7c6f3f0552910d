from __future__ import annotations

import logging
from typing import Iterable

from ..commands.parser import parse_command
from ..core.constants import MSG_EXITING
from .controller import DirectoryController
from .output import OutputSink
from .sources import LineSource

logger = logging.getLogger(__name__)


def write_banner(out: OutputSink, lines: Iterable[str]) -> None:
    for line in lines:
        out.write_line(line)


def run_loop(source: LineSource, controller: DirectoryController, out: OutputSink) -> int:
    """Read, parse and apply commands until Quit or end of input.

    End of input is handled like Quit. Returns the number of lines processed.
    """
    processed = 0
    while True:
        raw = source.read_line()
        if raw is None:
            out.write_line(MSG_EXITING)
            break

        command = parse_command(raw.strip())
        result = controller.handle(command)
        processed += 1

        for line in result.lines:
            out.write_line(line)
        if result.stop:
            break

    logger.debug(
        "session ended after %d command(s), %d department(s) in directory",
        processed,
        controller.department_count(),
    )
    return processed
