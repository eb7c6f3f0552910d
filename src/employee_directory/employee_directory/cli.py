"""
Typer application for the employee directory.

``run`` drives the interactive directory; ``stats``, ``pig-latin`` and
``word-count`` expose the small number/text utilities.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Optional

import typer

from .console.loop import run_loop, write_banner
from .console.output import EchoOutput
from .console.sources import StreamLineSource
from .core.constants import BANNER_LINES, INPUT_DECODE_ERRORS
from .core.exceptions import DomainError
from .main import AppSettings, create_app, load_settings
from .stats.calculator import word_counts
from .stats.model import IntegerSample
from .text.pig_latin import pig_latin

app = typer.Typer(
    name="employee-directory",
    help="Employee directory - add people to departments and list them.",
    no_args_is_help=True,
)


@app.callback()
def _root(ctx: typer.Context) -> None:
    """Employee directory and small text/number utilities."""
    ctx.obj = load_settings()


@app.command("run")
def run(
    ctx: typer.Context,
    script: Optional[Path] = typer.Option(
        None,
        "--script",
        "-s",
        exists=True,
        dir_okay=False,
        readable=True,
        help="Read commands from a text file instead of stdin.",
    ),
    banner: Optional[bool] = typer.Option(
        None,
        "--banner/--no-banner",
        help="Print the command summary before the first prompt.",
    ),
) -> None:
    """Start the directory command loop."""
    settings: AppSettings = ctx.obj
    settings, container = create_app(settings)
    out = EchoOutput()

    show_banner = settings.show_banner if banner is None else banner
    if show_banner:
        write_banner(out, BANNER_LINES)

    if script is not None:
        with script.open(encoding=settings.script_encoding, errors=INPUT_DECODE_ERRORS) as fh:
            run_loop(StreamLineSource(fh), container.controller, out)
        return

    reconfigure = getattr(sys.stdin, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(errors=INPUT_DECODE_ERRORS)

    prompt = settings.prompt if sys.stdin.isatty() else None
    run_loop(StreamLineSource(sys.stdin, prompt=prompt), container.controller, out)


@app.command("stats", context_settings={"ignore_unknown_options": True})
def stats(
    values: Optional[List[int]] = typer.Argument(None, help="Integers to summarize; negative values are accepted."),
) -> None:
    """Print the sorted list, its median and its mode."""
    sample = IntegerSample.from_values(values or [])
    try:
        median_value = sample.median()
        mode_result = sample.mode()
    except DomainError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"list of integers: {list(sample.values)}")
    typer.echo(f"Median: {median_value:.2f}")
    typer.echo(f"Mode: {mode_result.value} (occurs {mode_result.count} times)")


@app.command("pig-latin")
def pig_latin_cmd(
    words: List[str] = typer.Argument(..., help="Words to convert."),
) -> None:
    """Convert each word to (simplified) Pig Latin."""
    for word in words:
        typer.echo(f"pig latin {word}: {pig_latin(word)}")


@app.command("word-count")
def word_count(
    text: str = typer.Argument(..., help="Text to count words in."),
) -> None:
    """Count whitespace-separated words, in order of first appearance."""
    for word, count in word_counts(text).items():
        typer.echo(f"{word}: {count}")
