"""Store configuration: id prefixes, title derivation, log level, and the config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "DOCSTORE_"


class Settings(BaseModel):
    doc_id_prefix:    str = Field(default="DOC",  min_length=1, description="Prefix for generated document ids")
    author_id_prefix: str = Field(default="AUTH", min_length=1, description="Prefix for generated author ids")
    title_length:     int = Field(default=25, ge=1, description="Characters of content used as a derived title")
    untitled:         str = Field(default="Untitled", description="Title used when content is empty")
    log_level:        str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR)$")


def _read_config_file(path: Path, required: bool) -> dict[str, Any]:
    """Parse a YAML settings mapping. Unknown keys are rejected so typos are not silently ignored."""
    if not path.exists():
        if required:
            raise ValueError(f"Config file not found: {path}")
        return {}
    try:
        data = yaml.safe_load(path.read_text()) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid {path.name}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Invalid {path.name}: expected a mapping of settings")
    unknown = sorted(set(data) - set(Settings.model_fields))
    if unknown:
        raise ValueError(f"Invalid {path.name}: unknown setting(s) {', '.join(unknown)}")
    return data


def load_config(overrides: dict[str, Any] = None, path: str | Path = None) -> Settings:
    """Load Settings from a config file, then DOCSTORE_<FIELD> env vars, then non-None overrides.

    Without an explicit path, ./config.yaml is read when present.
    """
    data = _read_config_file(Path(path or CONFIG_FILE), required=path is not None)

    for name in Settings.model_fields:
        if val := os.getenv(f"{ENV_PREFIX}{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
