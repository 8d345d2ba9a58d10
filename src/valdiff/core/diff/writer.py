"""Row layout for an edit script: splits deltas into vertically aligned display rows"""

from dataclasses import dataclass, field
from typing import Optional

from valdiff.core.diff.colors import ColorScheme, TextOnly
from valdiff.core.models import Delta, DeltaType, DiffResult
from valdiff.core.utils.tokens import split_lines


NEWLINE_MARKER = "\\n"

# (kind, text) where kind None denotes padding
Span = tuple[Optional[DeltaType], str]


@dataclass
class _Row:
    actual:   list[Span] = field(default_factory=list)
    expected: list[Span] = field(default_factory=list)
    diff:     list[str] = field(default_factory=list)


class DiffWriter:
    """Accumulates deltas into rows, keeping actual, expected and diff symbols in lock-step.

    Actual and expected advance through rows independently: deleted line terminators move only
    the actual cursor, inserted ones only the expected cursor. Whenever text lands in a row, the
    other side of that row receives the same amount of padding.
    """

    def __init__(self, scheme: ColorScheme):
        self.scheme = scheme
        self._rows: list[_Row] = []
        self._actual_row = 0
        self._expected_row = 0
        self._closed = False

    def _row(self, number: int) -> _Row:
        while len(self._rows) <= number:
            self._rows.append(_Row())
        return self._rows[number]

    def write(self, delta: Delta) -> None:
        """Append delta, starting a new row after every line terminator it contains."""
        if self._closed:
            raise RuntimeError("Writer must be open")
        segments = split_lines(delta.text)
        last = len(segments) - 1
        for i, segment in enumerate(segments):
            text = segment + NEWLINE_MARKER if i < last else segment
            if text:
                self._write_span(delta.type, text)
            if i < last:
                self._newline(delta.type)

    def _write_span(self, kind: DeltaType, text: str) -> None:
        padding: Span = (None, text)
        if kind == DeltaType.equal:
            actual_row = self._row(self._actual_row)
            expected_row = self._row(self._expected_row)
            actual_row.actual.append((kind, text))
            actual_row.diff.append(TextOnly.DIFF_EQUAL * len(text))
            if self._actual_row != self._expected_row:
                actual_row.expected.append(padding)
                expected_row.actual.append(padding)
                expected_row.diff.append(TextOnly.DIFF_EQUAL * len(text))
            expected_row.expected.append((kind, text))
        elif kind == DeltaType.delete:
            row = self._row(self._actual_row)
            row.actual.append((kind, text))
            row.expected.append(padding)
            row.diff.append(TextOnly.DIFF_DELETE * len(text))
        elif kind == DeltaType.insert:
            row = self._row(self._expected_row)
            row.actual.append(padding)
            row.expected.append((kind, text))
            row.diff.append(TextOnly.DIFF_INSERT * len(text))
        else:
            raise ValueError(f"Unexpected delta type: {kind!r}")

    def _newline(self, kind: DeltaType) -> None:
        if kind != DeltaType.insert:
            self._actual_row += 1
        if kind != DeltaType.delete:
            self._expected_row += 1

    def _render(self, spans: list[Span]) -> str:
        merged: list[list] = []
        for kind, text in spans:
            if merged and merged[-1][0] == kind:
                merged[-1][1] += text
            else:
                merged.append([kind, text])

        out = []
        for kind, text in merged:
            if kind is None:
                out.append(self.scheme.decorate_padding(len(text)))
            elif kind == DeltaType.equal:
                out.append(self.scheme.decorate_equal_text(text))
            elif kind == DeltaType.insert:
                out.append(self.scheme.decorate_inserted_text(text))
            else:
                out.append(self.scheme.decorate_deleted_text(text))
        return "".join(out)

    def close(self) -> DiffResult:
        """Finish writing and return the rendered rows."""
        self._closed = True
        self._row(max(self._actual_row, self._expected_row))
        actual_lines = tuple(self._render(row.actual) for row in self._rows)
        expected_lines = tuple(self._render(row.expected) for row in self._rows)
        if self.scheme.has_diff_symbols:
            diff_lines = tuple("".join(row.diff) for row in self._rows)
        else:
            diff_lines = ()
        return DiffResult(
            actual_lines=actual_lines,
            expected_lines=expected_lines,
            diff_lines=diff_lines,
            padding_marker=self.scheme.padding_marker,
        )
