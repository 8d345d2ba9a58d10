"""Terminal capability detection: supported color encodings and display width.

Usage:
    from valdiff.terminal import detect_encoding, detect_width

    detect_encoding()   # TerminalEncoding.ansi_256 on a typical xterm
    detect_width()      # columns of the controlling terminal, 80 if unknown
"""

import os
import shutil
import sys
from typing import Optional, TextIO

from valdiff.core.models import TerminalEncoding


DEFAULT_WIDTH = 80


def _color_depth(stream: TextIO) -> TerminalEncoding:
    """Best color encoding for stream, judged from the environment."""
    if os.environ.get("NO_COLOR"):
        return TerminalEncoding.none
    isatty = getattr(stream, "isatty", None)
    if isatty is None or not isatty():
        return TerminalEncoding.none

    term = os.environ.get("TERM", "").lower()
    colorterm = os.environ.get("COLORTERM", "").lower()

    if colorterm in ("truecolor", "24bit") or "truecolor" in colorterm:
        return TerminalEncoding.ansi_16m
    if "256color" in term or "256" in colorterm:
        return TerminalEncoding.ansi_256
    if term and term != "dumb":
        return TerminalEncoding.ansi_16
    return TerminalEncoding.none


def supported_encodings(stream: Optional[TextIO] = None) -> list[TerminalEncoding]:
    """Return every encoding stream can display, best first. NONE is always included."""
    best = _color_depth(stream if stream is not None else sys.stdout)
    return sorted(
        (e for e in TerminalEncoding if e.rank <= best.rank),
        key=lambda e: e.rank,
        reverse=True,
    )


def detect_encoding(stream: Optional[TextIO] = None) -> TerminalEncoding:
    """Return the best encoding supported by stream (stdout by default)."""
    return supported_encodings(stream)[0]


def detect_width() -> int:
    """Return the terminal width in columns, falling back to 80."""
    return shutil.get_terminal_size((DEFAULT_WIDTH, 24)).columns or DEFAULT_WIDTH
