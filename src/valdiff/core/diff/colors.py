"""Decoration strategies for each terminal encoding.

A scheme wraps spans of a diff row with the visual convention of one terminal capability level:

- ``TextOnly`` leaves text untouched and describes the diff with a separate row of symbols
  (``-`` delete, ``+`` insert, `` `` equal or padding).
- The ANSI schemes color the text itself (white on green for insertions, white on red for
  deletions, ``/`` on black for padding) and produce no symbol row.

Schemes are stateless; use ``color_scheme_for()`` to look one up.
"""

import re

from valdiff.core.models import TerminalEncoding


RESET_FOREGROUND = "\x1b[39m"
RESET_BACKGROUND = "\x1b[49m"
WHITE_BRIGHT = "\x1b[97m"
BLACK_BACKGROUND = "\x1b[40m"


class ColorScheme:
    """Base scheme: no decoration, space padding, no diff symbols."""
    encoding: TerminalEncoding = TerminalEncoding.none
    padding_marker: str = " "
    has_diff_symbols: bool = False

    def __init__(self):
        prefix, suffix = self.decorate_padding(1).split(self.padding_marker, 1)
        marker = re.escape(self.padding_marker)
        # a bare marker run needs no inner quantifier
        run = re.escape(prefix) + marker + "+" + re.escape(suffix) if prefix or suffix else marker
        self._padding_re = re.compile(f"(?:{run})*")

    def decorate_equal_text(self, text: str) -> str:
        return text

    def decorate_inserted_text(self, text: str) -> str:
        return text

    def decorate_deleted_text(self, text: str) -> str:
        return text

    def decorate_padding(self, length: int) -> str:
        return self.padding_marker * length

    def is_empty(self, line: str) -> bool:
        """True if line holds nothing but (decorated) padding."""
        return self._padding_re.fullmatch(line) is not None


class TextOnly(ColorScheme):
    """Plain-text scheme; the diff is spelled out by a row of symbols under the actual value."""
    DIFF_PADDING = " "
    DIFF_EQUAL = " "
    DIFF_DELETE = "-"
    DIFF_INSERT = "+"

    encoding = TerminalEncoding.none
    padding_marker = DIFF_PADDING
    has_diff_symbols = True


class _AnsiColors(ColorScheme):
    padding_marker = "/"
    insert_background: str
    delete_background: str

    def decorate_equal_text(self, text: str) -> str:
        return WHITE_BRIGHT + text + RESET_FOREGROUND

    def decorate_inserted_text(self, text: str) -> str:
        return self.insert_background + WHITE_BRIGHT + text + RESET_FOREGROUND + RESET_BACKGROUND

    def decorate_deleted_text(self, text: str) -> str:
        return self.delete_background + WHITE_BRIGHT + text + RESET_FOREGROUND + RESET_BACKGROUND

    def decorate_padding(self, length: int) -> str:
        return BLACK_BACKGROUND + self.padding_marker * length + RESET_BACKGROUND


class Ansi16Colors(_AnsiColors):
    encoding = TerminalEncoding.ansi_16
    insert_background = "\x1b[42m"
    delete_background = "\x1b[41m"


class Ansi256Colors(_AnsiColors):
    # xterm palette 28 = rgb(0, 135, 0), 124 = rgb(175, 0, 0)
    encoding = TerminalEncoding.ansi_256
    insert_background = "\x1b[48;5;28m"
    delete_background = "\x1b[48;5;124m"


class Ansi16MillionColors(_AnsiColors):
    encoding = TerminalEncoding.ansi_16m
    insert_background = "\x1b[48;2;0;135;0m"
    delete_background = "\x1b[48;2;175;0;0m"


SCHEMES: dict[TerminalEncoding, ColorScheme] = {
    TerminalEncoding.none:     TextOnly(),
    TerminalEncoding.ansi_16:  Ansi16Colors(),
    TerminalEncoding.ansi_256: Ansi256Colors(),
    TerminalEncoding.ansi_16m: Ansi16MillionColors(),
}


def color_scheme_for(encoding: TerminalEncoding) -> ColorScheme:
    """Return the scheme for encoding. Raises ValueError for an unknown encoding."""
    try:
        return SCHEMES[TerminalEncoding(encoding)]
    except (KeyError, ValueError) as e:
        raise ValueError(f"Unsupported terminal encoding: {encoding!r}") from e
