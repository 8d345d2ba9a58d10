"""Value types shared by the diff generator, context generator and validators"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class TerminalEncoding(str, Enum):
    """Terminal capability levels, ordered from least to most capable."""
    none = "none"
    ansi_16 = "ansi_16"
    ansi_256 = "ansi_256"
    ansi_16m = "ansi_16m"

    @property
    def rank(self) -> int:
        return list(TerminalEncoding).index(self)


class DeltaType(str, Enum):
    equal = "equal"
    insert = "insert"
    delete = "delete"


class ValueKind(str, Enum):
    """How a compared value is rendered: element-wise, flat, or as diffable text."""
    array = "array"
    boolean = "boolean"
    text = "text"

    @classmethod
    def of(cls, value: Any) -> "ValueKind":
        # bool is checked first; it is never treated as text
        if isinstance(value, bool):
            return cls.boolean
        if isinstance(value, (list, tuple)):
            return cls.array
        return cls.text


@dataclass(frozen=True)
class Delta:
    """A contiguous span of text tagged EQUAL, INSERT or DELETE."""
    type: DeltaType
    text: str


@dataclass(frozen=True)
class DiffResult:
    """Rendered rows of a diff; diff_lines is empty when the encoding carries no diff symbols."""
    actual_lines:   tuple[str, ...]
    expected_lines: tuple[str, ...]
    diff_lines:     tuple[str, ...]
    padding_marker: str

    def __post_init__(self):
        if len(self.actual_lines) != len(self.expected_lines):
            raise AssertionError(
                f"actual_lines and expected_lines must have the same length\n"
                f"actual_lines: {len(self.actual_lines)}\n"
                f"expected_lines: {len(self.expected_lines)}"
            )
        if self.diff_lines and len(self.diff_lines) != len(self.actual_lines):
            raise AssertionError(
                f"diff_lines must be empty or match the number of rows\n"
                f"diff_lines: {len(self.diff_lines)}\n"
                f"actual_lines: {len(self.actual_lines)}"
            )


@dataclass(frozen=True)
class ContextLine:
    """One labeled row of a failure message; an empty label continues the previous entry."""
    label: str
    value: Any

    def __post_init__(self):
        if not isinstance(self.label, str):
            raise TypeError(f"label must be a str, got {type(self.label).__name__}")
