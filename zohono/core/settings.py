"""Layered configuration: built-in defaults, a YAML file, then the environment.

Command line flags are applied on top by the caller. Only the keys named in
``ENV_KEYS`` are read from a YAML file; anything else in it is ignored so one
file can be shared with other tools.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import ValidationError

from zohono.core.schema import TimesheetConfig
from zohono.core.validation import ConfigError

CONFIG_ENV = "ZOHONO_CONFIG"

ENV_KEYS = {
    "job": "ZOHONO_JOB",
    "hours": "ZOHONO_HOURS",
    "output_dir": "ZOHONO_OUTPUT_DIR",
    "output_format": "ZOHONO_FORMAT",
}


def _load_yaml(path: Path) -> dict:
    try:
        with path.open("r", encoding="utf-8") as fp:
            data = yaml.safe_load(fp)
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"could not read config file {str(path)!r}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"config file {str(path)!r} must contain a mapping")
    return {key: value for key, value in data.items() if key in ENV_KEYS}


def load_settings(config_path: Path | None = None) -> dict[str, Any]:
    """Return configuration values from the YAML file and the environment.

    A file passed explicitly must exist. A file named through ``ZOHONO_CONFIG``
    is skipped when missing.
    """

    settings: dict[str, Any] = {}

    if config_path is not None:
        settings.update(_load_yaml(config_path))
    else:
        env_path = os.getenv(CONFIG_ENV)
        if env_path:
            candidate = Path(env_path).expanduser()
            if candidate.exists():
                settings.update(_load_yaml(candidate))

    for key, env_name in ENV_KEYS.items():
        value = os.getenv(env_name)
        if value:
            settings[key] = value

    return settings


def build_config(settings: Mapping[str, Any], overrides: Mapping[str, Any]) -> TimesheetConfig:
    """Validate merged settings, letting non-``None`` overrides win."""

    merged = dict(settings)
    merged.update({key: value for key, value in overrides.items() if value is not None})
    try:
        return TimesheetConfig(**merged)
    except ValidationError as exc:
        raise ConfigError(f"invalid configuration: {exc}") from exc
