"""
execguard Configuration

The enforcement flag is decided once, at build-configuration time,
and handed to the guard as a frozen value. Nothing here reads
process-wide state.

Config file (execguard.yaml):

    execution_guard:
      enabled: true
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from loguru import logger
from pydantic import BaseModel, ConfigDict, ValidationError

CONFIG_FILENAME = "execguard.yaml"
CONFIG_SECTION = "execution_guard"


class ConfigError(Exception):
    """Raised when a config file exists but cannot be used."""
    pass


class GuardConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    enabled: bool = False


def load_config(path: Path | str | None = None) -> GuardConfig:
    """
    Load the guard configuration.

    `path` may be a YAML file or a directory holding execguard.yaml.
    A missing file or a file without an `execution_guard` section
    yields the defaults (enforcement off).
    """
    if path is None:
        return GuardConfig()

    config_path = Path(path)
    if config_path.is_dir():
        config_path = config_path / CONFIG_FILENAME

    if not config_path.exists():
        logger.debug(f"[CONFIG] No config at {config_path}, using defaults")
        return GuardConfig()

    try:
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config root must be a mapping: {config_path}")

    config = config_from_dict(data.get(CONFIG_SECTION) or {}, source=str(config_path))
    logger.info(f"[CONFIG] Loaded {config_path} (enabled={config.enabled})")
    return config


def config_from_dict(section: dict[str, Any], source: str = "<dict>") -> GuardConfig:
    """Validate a raw `execution_guard` section."""
    if not isinstance(section, dict):
        raise ConfigError(f"'{CONFIG_SECTION}' must be a mapping in {source}")
    try:
        return GuardConfig.model_validate(section)
    except ValidationError as e:
        raise ConfigError(f"Invalid '{CONFIG_SECTION}' section in {source}:\n{e}") from e
