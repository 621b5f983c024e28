"""Constants module for the ecsnav TUI.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Page keys, messages and formatting constants (Final)
- defaults.py: Default values and environment variable names
- limits.py: Remote call limits
- regions.py: Static region catalog

Note: Keyboard tables are defined in the ecsnav.keyboard module.
"""

from ecsnav.constants.defaults import (
    CONFIG_PATH_DEFAULT,
    CONFIG_PATH_ENV,
    DEFAULT_REGION_ENV,
    LOG_LEVEL_DEFAULT,
    LOG_LEVEL_ENV,
)
from ecsnav.constants.enums import NavigationLevel, Severity, ViewKind
from ecsnav.constants.limits import DESCRIBE_CONTAINER_INSTANCES_BATCH
from ecsnav.constants.values import (
    APP_NAME,
    APP_TITLE,
    INFORMATIONAL_PAGE,
    MAIN_PAGE,
    NO_CLUSTERS_MESSAGE,
    NO_INSTANCES_MESSAGE,
)

__all__ = [
    "APP_NAME",
    "APP_TITLE",
    "CONFIG_PATH_DEFAULT",
    "CONFIG_PATH_ENV",
    "DEFAULT_REGION_ENV",
    "DESCRIBE_CONTAINER_INSTANCES_BATCH",
    "INFORMATIONAL_PAGE",
    "LOG_LEVEL_DEFAULT",
    "LOG_LEVEL_ENV",
    "MAIN_PAGE",
    "NO_CLUSTERS_MESSAGE",
    "NO_INSTANCES_MESSAGE",
    "NavigationLevel",
    "Severity",
    "ViewKind",
]
