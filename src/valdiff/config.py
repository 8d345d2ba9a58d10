"""Library configuration: settings schema and valdiff.yaml loader"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field

from valdiff.core.models import TerminalEncoding
from valdiff.terminal import detect_encoding, detect_width


CONFIG_FILE = "valdiff.yaml"
ENV_PREFIX = "VALDIFF_"


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    diff_enabled:      bool = Field(default=True, description="Render a diff of actual vs expected in failure messages")
    terminal_encoding: Optional[TerminalEncoding] = Field(default=None, description="none, ansi_16, ansi_256 or ansi_16m; detected when unset")
    terminal_width:    Optional[int] = Field(default=None, ge=1, description="Columns available to failure messages; detected when unset")

    def resolved(self) -> "Settings":
        """Return a copy with the terminal encoding and width filled in from the terminal."""
        return self.model_copy(update={
            "terminal_encoding": self.terminal_encoding or detect_encoding(),
            "terminal_width": self.terminal_width or detect_width(),
        })


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from valdiff.yaml, then VALDIFF_<FIELD> env vars, then non-None overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"{ENV_PREFIX}{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
