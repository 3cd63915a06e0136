"""Application configuration: settings schema and fmstrip.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from fmstrip.util.logging import LOG_LEVELS


CONFIG_FILE = "fmstrip.yaml"


class Settings(BaseModel):
    app_name:  str = "frontmatter-strip"
    log_level: str = Field(default="warning", description="Logging level for stderr output")
    renderers: list[str] = Field(default=["html"], min_length=1, description="Renderers the preprocessor supports")

    @field_validator("log_level")
    @classmethod
    def _check_level(cls, v: str) -> str:
        v = v.lower()
        if v not in LOG_LEVELS:
            raise ValueError(f"must be one of {', '.join(LOG_LEVELS)}")
        return v

    @field_validator("renderers", mode="before")
    @classmethod
    def _split_renderers(cls, v: Any) -> Any:
        """Accept 'html,markdown' as well as a list (env vars are plain strings)."""
        if isinstance(v, str):
            return [r.strip() for r in v.split(",") if r.strip()]
        return v


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from fmstrip.yaml, then FMSTRIP_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"FMSTRIP_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return Settings(**data)
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e
