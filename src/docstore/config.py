"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "DOCSTORE_"
CONFIG_ENV = f"{ENV_PREFIX}CONFIG"   # alternate path to the YAML config file


class Settings(BaseModel):
    app_name:      str = "docstore"
    data_file:     str = Field(default="documents.yaml", description="YAML or JSON seed dataset loaded by the CLI")
    log_level:     str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    output_format: str = Field(default="json", pattern="^(json|text)$", description="json or text")

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, v: Any) -> Any:
        return v.upper() if isinstance(v, str) else v


def _config_path() -> Path:
    return Path(os.getenv(CONFIG_ENV) or CONFIG_FILE)


def _file_values(path: Path) -> dict[str, Any]:
    """Read settings from a YAML file; a missing file contributes nothing."""
    if not path.exists():
        return {}
    try:
        raw = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid {path.name}: {e}") from e
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ValueError(f"Invalid {path.name}: expected a mapping, got {type(raw).__name__}")
    return raw


def _env_values() -> dict[str, str]:
    return {
        name: val for name in Settings.model_fields
        if (val := os.getenv(f"{ENV_PREFIX}{name.upper()}"))
    }


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Merge the config file, then DOCSTORE_<FIELD> env vars, then non-None CLI overrides.

    The config file is config.yaml in the working directory unless DOCSTORE_CONFIG names another.
    """
    data = {**_file_values(_config_path()), **_env_values()}
    data.update({k: v for k, v in (overrides or {}).items() if v is not None})
    return Settings(**data)
