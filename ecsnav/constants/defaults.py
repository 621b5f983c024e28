"""Default values for settings and environment lookups."""

from typing import Final

LOG_LEVEL_DEFAULT: Final = "error"

# Environment variables read once at startup
DEFAULT_REGION_ENV: Final = "AWS_DEFAULT_REGION"
LOG_LEVEL_ENV: Final = "LOG_LEVEL"
CONFIG_PATH_ENV: Final = "ECSNAV_CONFIG"

CONFIG_PATH_DEFAULT: Final = "~/.config/ecsnav/settings.yaml"
SSH_KEY_DIR_DEFAULT: Final = "~/.ssh"

__all__ = [
    "CONFIG_PATH_DEFAULT",
    "CONFIG_PATH_ENV",
    "DEFAULT_REGION_ENV",
    "LOG_LEVEL_DEFAULT",
    "LOG_LEVEL_ENV",
    "SSH_KEY_DIR_DEFAULT",
]
