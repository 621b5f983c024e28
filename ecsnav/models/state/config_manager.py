"""Settings loading: YAML file -> AppSettings."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from ecsnav.constants.defaults import CONFIG_PATH_DEFAULT, CONFIG_PATH_ENV
from ecsnav.exceptions import ConfigLoadError
from ecsnav.models.state.app_settings import AppSettings

logger = logging.getLogger(__name__)


class ConfigManager:
    """Loads AppSettings from YAML."""

    @staticmethod
    def default_path() -> Path:
        """Settings file location (``$ECSNAV_CONFIG`` wins over the default)."""
        return Path(os.environ.get(CONFIG_PATH_ENV) or CONFIG_PATH_DEFAULT).expanduser()

    @classmethod
    def load(cls, path: Path | None = None) -> AppSettings:
        """Load settings; a missing file yields defaults.

        Raises:
            ConfigLoadError: The file cannot be read, parsed or validated.
        """
        config_path = path or cls.default_path()
        if not config_path.exists():
            logger.debug(f"No settings file at {config_path}, using defaults")
            return AppSettings()

        try:
            raw = yaml.safe_load(config_path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as e:
            raise ConfigLoadError(f"Cannot read settings file {config_path}", e) from e

        if raw is None:
            return AppSettings()
        if not isinstance(raw, dict):
            raise ConfigLoadError(f"Settings file {config_path} must contain a mapping")

        try:
            return AppSettings.model_validate(raw)
        except ValidationError as e:
            raise ConfigLoadError(f"Invalid settings in {config_path}", e) from e
