"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    app_name:  str = "docstore"
    id_format: str = Field(default="uuid", pattern="^(uuid|hex)$", description="Generated id form: uuid or hex")
    log_level: str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
                           description="Root log level for the docstore logger")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Resolve id_format and log_level (and app_name) for a CLI run.

    Precedence, lowest first: config.yaml in the working directory, DOCSTORE_<FIELD>
    env vars (e.g. DOCSTORE_ID_FORMAT=hex), then non-None CLI overrides.
    Raises ValueError for malformed YAML and ValidationError for bad values.
    """
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e

    for name in Settings.model_fields:
        if val := os.getenv(f"DOCSTORE_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
