"""Scalar constants for the TUI.

Page keys, user-facing messages and formatting constants.
"""

from typing import Final

# ============================================================================
# Application
# ============================================================================

APP_NAME: Final = "ecsnav"
APP_TITLE: Final = "ECS Navigator"

# ============================================================================
# Page keys
# ============================================================================

MAIN_PAGE: Final = "*main*"
INFORMATIONAL_PAGE: Final = "informational"

# ============================================================================
# Messages
# ============================================================================

NO_CLUSTERS_MESSAGE: Final = "No clusters found in this region!"
NO_INSTANCES_MESSAGE: Final = "No instances found in this cluster!"
RUN_COMPLETE_MESSAGE: Final = "Run complete."

# ============================================================================
# Formatting
# ============================================================================

TIMESTAMP_FORMAT: Final = "%Y-%m-%d %H:%M:%S"
UNKNOWN_VALUE: Final = "unknown"

__all__ = [
    "APP_NAME",
    "APP_TITLE",
    "INFORMATIONAL_PAGE",
    "MAIN_PAGE",
    "NO_CLUSTERS_MESSAGE",
    "NO_INSTANCES_MESSAGE",
    "RUN_COMPLETE_MESSAGE",
    "TIMESTAMP_FORMAT",
    "UNKNOWN_VALUE",
]
