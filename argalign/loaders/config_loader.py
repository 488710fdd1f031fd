from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from argalign.errors import ConfigError
from argalign.models.config import AlignmentConfig

logger = logging.getLogger(__name__)

SECTION_KEY = "argalign"


def load_config(path: str | Path) -> AlignmentConfig:
    """Read an AlignmentConfig from a YAML file.

    The settings may sit at the top level or under an ``argalign`` key::

        argalign:
          include: assertEquals,assertThat
          exclude: [format]
          column_alignment: true
          column_alignment_first: false

    Args:
        path: YAML file to read.

    Returns:
        The parsed configuration; defaults for an empty file.

    Raises:
        ConfigError: If the file cannot be read or holds invalid settings.
    """

    config_path = Path(path)
    try:
        raw: Any = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Failed to read config file {config_path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file {config_path}: {e}") from e

    if raw is None:
        logger.debug("Config file %s is empty; using defaults", config_path)
        return AlignmentConfig()
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file {config_path} must contain a mapping")
    if SECTION_KEY in raw:
        raw = raw[SECTION_KEY] or {}
        if not isinstance(raw, dict):
            raise ConfigError(f"'{SECTION_KEY}' section of {config_path} must be a mapping")

    try:
        return AlignmentConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid settings in config file {config_path}: {e}") from e
