"""Default conversion of compared values to their display strings"""

from typing import Any


def to_string(value: Any) -> str:
    """Return the display string for value. Deterministic and total for any input."""
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(to_string(v) for v in value) + "]"
    if isinstance(value, dict):
        items = (f"{to_string(k)}={to_string(v)}" for k, v in value.items())
        return "{" + ", ".join(items) + "}"
    try:
        return str(value)
    except Exception:
        return object.__repr__(value)
