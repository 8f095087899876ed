"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from linediff.core.diff import MAX_ALIGNED_LINES


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    app_name:      str = "linediff"
    max_lines:     int = Field(default=MAX_ALIGNED_LINES, ge=0, description="Combined line count above which the naive diff is used")
    line_numbers:  bool = Field(default=True, description="Show line numbers in text output")
    output_format: str = Field(default="text", pattern="^(text|json)$", description="text or json")
    encoding:      str = Field(default="utf-8", description="Encoding used to read input files")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then LINEDIFF_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e

    for name in Settings.model_fields:
        if val := os.getenv(f"LINEDIFF_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
