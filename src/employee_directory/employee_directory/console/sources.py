from __future__ import annotations

import logging
from typing import Iterable, Optional, Protocol, TextIO

import typer

logger = logging.getLogger(__name__)


class LineSource(Protocol):
    def read_line(self) -> Optional[str]:
        """Next raw line, or None once input is exhausted."""
        raise NotImplementedError


class StreamLineSource(LineSource):
    """Reads from a text stream such as stdin.

    End of input and read failures both end the session: they come back as
    None instead of propagating. Open streams with errors="replace" so a bad
    byte turns into one unparseable line instead of a failed read.
    """

    def __init__(self, stream: TextIO, *, prompt: Optional[str] = None):
        self._stream = stream
        self._prompt = prompt

    def read_line(self) -> Optional[str]:
        if self._prompt:
            typer.echo(self._prompt, nl=False)
        try:
            line = self._stream.readline()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("input stream failed, ending session: %s", e)
            return None
        if not line:
            logger.debug("end of input")
            return None
        return line


class IterableLineSource(LineSource):
    """Serves lines from a list or an open text file.

    A file that fails to decode or read ends the session like end of input.
    """

    def __init__(self, lines: Iterable[str]):
        self._lines = iter(lines)

    def read_line(self) -> Optional[str]:
        try:
            return next(self._lines, None)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("input lines failed, ending session: %s", e)
            return None
