"""CLI command implementations"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from valdiff.config import Settings, load_config
from valdiff.core.models import TerminalEncoding
from valdiff.terminal import supported_encodings
from valdiff.validation import ValidationError, require_that


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _read(path: str) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as e:
        _fail(f"Cannot read {path}", e)


def compare_cmd(
    actual: Annotated[str, typer.Argument(help="Actual value (a file path with --file)")],
    expected: Annotated[str, typer.Argument(help="Expected value (a file path with --file)")],
    from_file: Annotated[bool, typer.Option("--file", help="Compare the contents of two files")] = False,
    encoding: Annotated[Optional[TerminalEncoding], typer.Option("--encoding", help="Terminal encoding of the diff")] = None,
    width: Annotated[Optional[int], typer.Option("--width", help="Terminal width in columns")] = None,
    no_diff: Annotated[bool, typer.Option("--no-diff", help="Print actual and expected without a diff")] = False,
    ):
    """Print the failure message describing how ACTUAL differs from EXPECTED."""
    settings = _settings(overrides={
        "terminal_encoding": encoding, "terminal_width": width,
        "diff_enabled": False if no_diff else None,
    })
    if from_file:
        actual, expected = _read(actual), _read(expected)

    try:
        require_that(actual, "actual", settings).is_equal_to(expected)
    except ValidationError as e:
        typer.echo(str(e))
        raise typer.Exit(1)
    typer.echo("Values are equal.")


def encodings_cmd():
    """List the terminal encodings stdout supports, best first; * marks the one in use."""
    settings = _settings().resolved()
    for enc in supported_encodings():
        marker = "*" if enc == settings.terminal_encoding else " "
        typer.echo(f"{marker} {enc.value}")
