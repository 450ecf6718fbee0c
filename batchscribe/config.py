"""
batchscribe.config - Processing options, YAML loading, validation.

Only two options are recognized: the Whisper model tier and the target
language. Options are an explicit value handed to the pipeline, never
module state.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from batchscribe.exceptions import ConfigError

# Ordered fastest/least accurate to slowest/most accurate.
MODEL_TIERS: tuple[str, ...] = ("tiny", "base", "small", "medium", "large")

AUTO_LANGUAGE = "auto"

DEFAULT_MODEL = "base"
DEFAULT_LANGUAGE = "en"

_LANGUAGE_RE = re.compile(r"^[a-z]{2,3}(-[a-z0-9]{2,8})?$")


class ProcessingOptions(BaseModel):
    """Transcription options for one batch run."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    model: str = DEFAULT_MODEL
    language: str = DEFAULT_LANGUAGE

    @field_validator("model")
    @classmethod
    def validate_model(cls, v: str) -> str:
        v = v.strip().lower()
        if v not in MODEL_TIERS:
            raise ValueError(f"model must be one of: {', '.join(MODEL_TIERS)}")
        return v

    @field_validator("language")
    @classmethod
    def validate_language(cls, v: str) -> str:
        v = v.strip().lower()
        if v != AUTO_LANGUAGE and not _LANGUAGE_RE.match(v):
            raise ValueError(f"language must be a language code or '{AUTO_LANGUAGE}'")
        return v

    @property
    def auto_language(self) -> bool:
        return self.language == AUTO_LANGUAGE


def merge_options(base: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    """Merge option dicts. Non-None overrides take precedence."""
    merged = base.copy()
    for key, value in overrides.items():
        if value is not None:
            merged[key] = value
    return merged


def load_options(path: Path) -> dict[str, Any]:
    """Load raw options from a YAML file.

    Args:
        path: YAML file with optional ``model`` and ``language`` keys

    Returns:
        Dict of the options found in the file

    Raises:
        ConfigError: If the file is missing, malformed, or has unknown keys
    """
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"Config file must contain a mapping: {path}")

    unknown = set(raw) - set(ProcessingOptions.model_fields)
    if unknown:
        raise ConfigError(f"Unknown option(s) in {path}: {', '.join(sorted(unknown))}")

    return raw


def build_options(
    config_path: Path | None = None,
    model: str | None = None,
    language: str | None = None,
) -> ProcessingOptions:
    """Resolve options from defaults, an optional YAML file and CLI flags.

    Raises:
        ConfigError: If the resolved options are invalid
    """
    file_options = load_options(config_path) if config_path else {}
    merged = merge_options(file_options, {"model": model, "language": language})
    try:
        return ProcessingOptions(**merged)
    except ValidationError as e:
        raise ConfigError(str(e)) from e
