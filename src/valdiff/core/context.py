"""Turns the difference between two values into labeled failure-message context"""

import re
from typing import Any, Callable, Optional

from valdiff.config import Settings
from valdiff.core.diff.colors import TextOnly
from valdiff.core.diff.generator import DiffGenerator
from valdiff.core.models import ContextLine, DiffResult, ValueKind
from valdiff.core.utils.strings import to_string


LINES_NOT_EQUAL = re.compile("[^" + re.escape(TextOnly.DIFF_EQUAL + TextOnly.DIFF_PADDING) + "]")
SKIPPED_LINES = "[...]"


def require_name(value: Any, name: str) -> str:
    """Raise TypeError/ValueError unless value is a non-empty str."""
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")
    if not value.strip():
        raise ValueError(f"{name} may not be empty")
    return value


def _lines_are_equal(actual_line: str, expected_line: str, diff_line: str) -> bool:
    if diff_line:
        return LINES_NOT_EQUAL.search(diff_line) is None
    return actual_line == expected_line


def _skip_marker() -> list[ContextLine]:
    return [ContextLine("", ""), ContextLine("", SKIPPED_LINES)]


class ContextGenerator:
    """Builds the context lines appended to a failure message comparing actual and expected."""

    def __init__(self, settings: Optional[Settings] = None, converter: Callable[[Any], str] = to_string):
        self.settings = (settings or Settings()).resolved()
        self.converter = converter
        self.diff_generator = DiffGenerator(self.settings.terminal_encoding)

    def get_context(
        self,
        actual_name: str,
        actual_value: Any,
        expected_name: str,
        expected_value: Any,
        expected_in_message: bool,
        compare_types: bool = False,
        ) -> list[ContextLine]:
        """Return the name/value rows describing how actual_value differs from expected_value.

        expected_in_message suppresses the flat expected row when the caller's headline already
        shows the expected value. compare_types adds a comparison of the value types when both
        values render identically.
        """
        require_name(actual_name, "actual_name")
        require_name(expected_name, "expected_name")
        if not isinstance(expected_in_message, bool):
            raise TypeError(f"expected_in_message must be a bool, got {type(expected_in_message).__name__}")

        actual_kind = ValueKind.of(actual_value)
        expected_kind = ValueKind.of(expected_value)
        if actual_kind == ValueKind.array and expected_kind == ValueKind.array:
            return self._context_for_arrays(
                actual_name, actual_value, expected_name, expected_value, expected_in_message, compare_types)
        if ValueKind.boolean in (actual_kind, expected_kind) or not self.settings.diff_enabled:
            return self._flat_context(
                actual_name, actual_value, expected_name, expected_value, expected_in_message)

        diff = self.diff_generator.diff(self.converter(actual_value), self.converter(expected_value))
        if len(diff.actual_lines) == 1:
            result = self._single_line(actual_name, expected_name, diff)
            diff_line = diff.diff_lines[0] if diff.diff_lines else ""
            if compare_types and _lines_are_equal(diff.actual_lines[0], diff.expected_lines[0], diff_line):
                result.extend(self._compare_types(actual_name, actual_value, expected_name, expected_value))
            return result
        return self._multiple_lines(actual_name, expected_name, diff)

    @staticmethod
    def _flat_context(actual_name, actual_value, expected_name, expected_value, expected_in_message):
        result = [ContextLine(actual_name, actual_value)]
        if not expected_in_message:
            result.append(ContextLine(expected_name, expected_value))
        return result

    @staticmethod
    def _single_line(actual_name: str, expected_name: str, diff: DiffResult) -> list[ContextLine]:
        actual_line = diff.actual_lines[0]
        expected_line = diff.expected_lines[0]
        diff_line = diff.diff_lines[0] if diff.diff_lines else ""
        result = [ContextLine("", ""), ContextLine(actual_name, actual_line)]
        if diff_line and not _lines_are_equal(actual_line, expected_line, diff_line):
            result.append(ContextLine("Diff", diff_line))
        result.append(ContextLine(expected_name, expected_line))
        return result

    def _multiple_lines(self, actual_name: str, expected_name: str, diff: DiffResult) -> list[ContextLine]:
        if len(diff.actual_lines) != len(diff.expected_lines):
            raise AssertionError(
                f"actual_lines and expected_lines must have the same length\n"
                f"actual_lines: {len(diff.actual_lines)}\n"
                f"expected_lines: {len(diff.expected_lines)}"
            )
        result: list[ContextLine] = []
        # actual and expected lines are numbered independently; either side may lack a line
        actual_number = 0
        expected_number = 0
        skipped_duplicates = False
        count = len(diff.actual_lines)

        for i in range(count):
            actual_line = diff.actual_lines[i]
            expected_line = diff.expected_lines[i]
            diff_line = diff.diff_lines[i] if diff.diff_lines else ""
            lines_equal = _lines_are_equal(actual_line, expected_line, diff_line)
            actual_has_text = not self.diff_generator.is_empty(actual_line)
            expected_has_text = not self.diff_generator.is_empty(expected_line)

            if 0 < i < count - 1 and lines_equal:
                skipped_duplicates = True
                actual_number += actual_has_text
                expected_number += expected_has_text
                continue
            if skipped_duplicates:
                skipped_duplicates = False
                result.extend(_skip_marker())

            actual_label = actual_name
            if actual_has_text:
                actual_label = f"{actual_name}@{actual_number}"
                actual_number += 1
            expected_label = expected_name
            if expected_has_text:
                expected_label = f"{expected_name}@{expected_number}"
                expected_number += 1

            result.append(ContextLine("", ""))
            result.append(ContextLine(actual_label, actual_line))
            if diff_line and not lines_equal:
                result.append(ContextLine("Diff", diff_line))
            result.append(ContextLine(expected_label, expected_line))
        return result

    def _context_for_arrays(
        self, actual_name, actual_value, expected_name, expected_value, expected_in_message, compare_types=False):
        if not self.settings.diff_enabled:
            return self._flat_context(
                actual_name, actual_value, expected_name, expected_value, expected_in_message)

        actual_size = len(actual_value)
        expected_size = len(expected_value)
        max_size = max(actual_size, expected_size)
        result: list[ContextLine] = []
        skipped_duplicates = False
        all_equal = True

        for i in range(max_size):
            elements_equal = True
            if i < actual_size:
                actual_text = self.converter(actual_value[i])
                actual_label = f"{actual_name}[{i}]"
            else:
                actual_text, actual_label, elements_equal = "", actual_name, False
            if i < expected_size:
                expected_text = self.converter(expected_value[i])
                expected_label = f"{expected_name}[{i}]"
            else:
                expected_text, expected_label, elements_equal = "", expected_name, False
            if elements_equal:
                elements_equal = actual_value[i] == expected_value[i]
            all_equal = all_equal and elements_equal

            if 0 < i < max_size - 1 and elements_equal:
                skipped_duplicates = True
                continue
            if skipped_duplicates:
                skipped_duplicates = False
                result.extend(_skip_marker())
            result.extend(self.get_context(actual_label, actual_text, expected_label, expected_text, False))
        # equal elements in different containers, e.g. a list and a tuple
        if compare_types and all_equal:
            result.extend(self._compare_types(actual_name, actual_value, expected_name, expected_value))
        return result

    def _compare_types(self, actual_name, actual_value, expected_name, expected_value) -> list[ContextLine]:
        actual_type = type(actual_value).__name__
        expected_type = type(expected_value).__name__
        if actual_type == expected_type:
            return []
        return self.get_context(f"{actual_name}.type", actual_type, f"{expected_name}.type", expected_type, False)
