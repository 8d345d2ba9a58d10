"""Equality validation whose failures describe the difference between actual and expected"""

from typing import Any, Callable, Optional

from valdiff.config import Settings, load_config
from valdiff.core.context import ContextGenerator, require_name
from valdiff.core.message import format_message
from valdiff.core.models import ContextLine
from valdiff.core.utils.strings import to_string


class ValidationError(ValueError):
    """Raised when a value fails validation; context holds the rows appended to the message."""

    def __init__(self, message: str, context: list[ContextLine] = None):
        super().__init__(message)
        self.context = list(context or [])


class ObjectValidator:
    """Validates a single named value."""

    def __init__(
        self,
        actual: Any,
        name: str,
        settings: Optional[Settings] = None,
        converter: Callable[[Any], str] = to_string,
        ):
        self.actual = actual
        self.name = require_name(name, "name")
        self.settings = (settings or load_config()).resolved()
        self.converter = converter

    def _context(self, expected: Any, expected_in_message: bool) -> list[ContextLine]:
        generator = ContextGenerator(self.settings, self.converter)
        return generator.get_context(
            "Actual", self.actual, "Expected", expected, expected_in_message, compare_types=True)

    def _fail(self, headline: str, context: list[ContextLine]) -> None:
        raise ValidationError(format_message(headline, context, self.converter), context)

    def is_equal_to(self, expected: Any, name: Optional[str] = None) -> "ObjectValidator":
        """Raise ValidationError unless the value equals expected.

        The expected value is quoted in the headline only if the headline fits the terminal
        width; otherwise it is listed in the context below.
        """
        if name is not None:
            require_name(name, "name")
        if self.actual == expected:
            return self

        if name:
            self._fail(f"{self.name} must be equal to {name}.", self._context(expected, False))
        message = f"{self.name} must be equal to {self.converter(expected)}."
        if len(message) < self.settings.terminal_width:
            self._fail(message, self._context(expected, True))
        self._fail(f"{self.name} had an unexpected value.", self._context(expected, False))

    def is_not_equal_to(self, value: Any, name: Optional[str] = None) -> "ObjectValidator":
        """Raise ValidationError if the value equals value."""
        if name is not None:
            require_name(name, "name")
        if self.actual != value:
            return self

        if name:
            self._fail(f"{self.name} may not be equal to {name}.", [ContextLine("Actual", self.actual)])
        self._fail(f"{self.name} may not be equal to {self.converter(value)}.", [])


def require_that(
    actual: Any,
    name: str,
    settings: Optional[Settings] = None,
    converter: Callable[[Any], str] = to_string,
    ) -> ObjectValidator:
    """Start validating actual, referred to as name in failure messages."""
    return ObjectValidator(actual, name, settings, converter)
