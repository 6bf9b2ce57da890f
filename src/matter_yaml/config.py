"""CLI configuration: settings schema and matter-yaml.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from matter_yaml.core.models import DumpOptions


CONFIG_FILE = "matter-yaml.yaml"
ENV_PREFIX = "MATTER_YAML_"


class Settings(BaseModel):
    indent:        int  = Field(default=2,  ge=2, le=9, description="YAML mapping indent width")
    width:         int  = Field(default=80, ge=20, description="Preferred YAML line width")
    sort_keys:     bool = Field(default=False, description="Sort front matter keys on output")
    allow_unicode: bool = Field(default=True,  description="Write non-ASCII characters unescaped")
    log_level:     str  = Field(default="warning", pattern="^(?i:debug|info|warning|error|critical)$",
                                description="Logging level for the CLI")

    def dump_options(self) -> DumpOptions:
        """DumpOptions carrying this configuration's encoder settings."""
        return DumpOptions(
            indent=self.indent,
            width=self.width,
            sort_keys=self.sort_keys,
            allow_unicode=self.allow_unicode,
        )


def _read_config_file(path: Path) -> dict[str, Any]:
    """Return the mapping stored in path, or {} when the file is absent or empty."""
    if not path.exists():
        return {}
    try:
        loaded = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid {path.name}: {e}") from e
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ValueError(f"Invalid {path.name}: expected a mapping, got {type(loaded).__name__}")
    return loaded


def _env_settings() -> dict[str, str]:
    """Collect non-empty MATTER_YAML_<FIELD> variables that name a Settings field."""
    found = {}
    for key, val in os.environ.items():
        field = key.upper().removeprefix(ENV_PREFIX).lower()
        if key.upper().startswith(ENV_PREFIX) and val and field in Settings.model_fields:
            found[field] = val
    return found


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Build Settings from the config file, then env vars, then non-None overrides (last wins)."""
    layers = [
        _read_config_file(Path(CONFIG_FILE)),
        _env_settings(),
        {k: v for k, v in (overrides or {}).items() if v is not None},
    ]
    merged: dict[str, Any] = {}
    for layer in layers:
        merged.update(layer)
    return Settings(**merged)


def default_config_text() -> str:
    """YAML text of the default settings, as written by `matter-yaml init`."""
    return yaml.safe_dump(Settings().model_dump(), sort_keys=False)
