"""Failure message assembly from a headline and context lines"""

from typing import Any, Callable, Iterable

from valdiff.core.models import ContextLine
from valdiff.core.utils.strings import to_string


def format_message(
    headline: str,
    context: Iterable[ContextLine],
    converter: Callable[[Any], str] = to_string,
    ) -> str:
    """Join headline and context rows, left-justifying labels to the widest one.

    Rows without a label (blank separators, the [...] marker) are emitted as the bare value.
    Non-string values are rendered with converter; strings are already display text.
    """
    context = list(context)
    width = max((len(line.label) for line in context), default=0)
    rows = [headline]
    for line in context:
        value = line.value if isinstance(line.value, str) else converter(line.value)
        rows.append(f"{line.label.ljust(width)}: {value}" if line.label else value)
    return "\n".join(rows)
