"""Word-aware character diff of two strings, rendered as aligned rows"""

from difflib import SequenceMatcher

from valdiff.core.diff.colors import ColorScheme, color_scheme_for
from valdiff.core.diff.writer import NEWLINE_MARKER, DiffWriter
from valdiff.core.models import Delta, DeltaType, DiffResult, TerminalEncoding
from valdiff.core.utils.tokens import NEWLINE_RE, split_words


EOS_MARKER = "\\0"

__all__ = ["EOS_MARKER", "NEWLINE_MARKER", "DiffGenerator", "compute_deltas"]


def _diff_chars(removed: str, added: str) -> list[Delta]:
    """Character-level diff of one changed word region.

    Falls back to replacing the whole region when the characters differ in more than one place,
    so "dog" -> "fox" reads as one deletion and one insertion instead of d/f, o, g/x fragments.
    """
    # line terminators are never split
    if NEWLINE_RE.search(removed) or NEWLINE_RE.search(added):
        return [Delta(DeltaType.delete, removed), Delta(DeltaType.insert, added)]
    opcodes = SequenceMatcher(None, removed, added, autojunk=False).get_opcodes()
    if sum(1 for op in opcodes if op[0] != "equal") > 1:
        return [Delta(DeltaType.delete, removed), Delta(DeltaType.insert, added)]

    deltas = []
    for tag, i1, i2, j1, j2 in opcodes:
        if tag == "equal":
            deltas.append(Delta(DeltaType.equal, removed[i1:i2]))
            continue
        if i2 > i1:
            deltas.append(Delta(DeltaType.delete, removed[i1:i2]))
        if j2 > j1:
            deltas.append(Delta(DeltaType.insert, added[j1:j2]))
    return deltas


def _normalize(deltas: list[Delta]) -> list[Delta]:
    """Drop empty deltas, merge neighbours, and put deletions before insertions in each change."""
    result: list[Delta] = []
    deleted: list[str] = []
    inserted: list[str] = []

    def _flush() -> None:
        if deleted:
            result.append(Delta(DeltaType.delete, "".join(deleted)))
        if inserted:
            result.append(Delta(DeltaType.insert, "".join(inserted)))
        deleted.clear()
        inserted.clear()

    for delta in deltas:
        if not delta.text:
            continue
        if delta.type == DeltaType.delete:
            deleted.append(delta.text)
        elif delta.type == DeltaType.insert:
            inserted.append(delta.text)
        else:
            _flush()
            if result and result[-1].type == DeltaType.equal:
                result[-1] = Delta(DeltaType.equal, result[-1].text + delta.text)
            else:
                result.append(delta)
    _flush()
    return result


def compute_deltas(actual: str, expected: str) -> list[Delta]:
    """Return the edit script turning actual into expected, aligned on word boundaries."""
    actual_words = split_words(actual)
    expected_words = split_words(expected)
    matcher = SequenceMatcher(None, actual_words, expected_words, autojunk=False)

    deltas: list[Delta] = []
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        removed = "".join(actual_words[i1:i2])
        added = "".join(expected_words[j1:j2])
        if tag == "equal":
            deltas.append(Delta(DeltaType.equal, removed))
        elif tag == "delete":
            deltas.append(Delta(DeltaType.delete, removed))
        elif tag == "insert":
            deltas.append(Delta(DeltaType.insert, added))
        else:
            deltas.extend(_diff_chars(removed, added))
    return _normalize(deltas)


class DiffGenerator:
    """Generates the diff of two strings for one terminal encoding."""

    def __init__(self, encoding: TerminalEncoding = TerminalEncoding.none):
        self.scheme: ColorScheme = color_scheme_for(encoding)

    def diff(self, actual: str, expected: str) -> DiffResult:
        """Diff actual against expected. Every row ends with a newline or end-of-string marker."""
        if not isinstance(actual, str):
            raise TypeError(f"actual must be a str, got {type(actual).__name__}")
        if not isinstance(expected, str):
            raise TypeError(f"expected must be a str, got {type(expected).__name__}")

        # the end-of-string marker keeps trailing whitespace and empty strings visible
        deltas = _normalize(compute_deltas(actual, expected) + [Delta(DeltaType.equal, EOS_MARKER)])
        writer = DiffWriter(self.scheme)
        for delta in deltas:
            writer.write(delta)
        return writer.close()

    def is_empty(self, line: str) -> bool:
        """True if a rendered line contains nothing but padding."""
        return self.scheme.is_empty(line)
