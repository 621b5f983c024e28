"""All enum definitions for the TUI.

This module consolidates all enumerations used throughout the application.
"""

from enum import Enum

# =============================================================================
# Navigation Enums
# =============================================================================


class NavigationLevel(Enum):
    """States of the drill-down state machine."""

    REGION_SELECT = "region_select"
    CLUSTER_LIST = "cluster_list"
    INSTANCE_LIST = "instance_list"
    INSTANCE_DETAIL = "instance_detail"
    INFORMATIONAL = "informational"


class ViewKind(Enum):
    """Views that can hold input focus and own a key table."""

    REGIONS = "regions"
    CLUSTERS = "clusters"
    INSTANCES = "instances"
    INSTANCE_DETAIL = "instance_detail"
    INFORMATIONAL = "informational"


# =============================================================================
# Notice Enums
# =============================================================================


class Severity(Enum):
    """Severity of a user-visible notice (matches Textual notify severities)."""

    INFORMATION = "information"
    WARNING = "warning"
    ERROR = "error"


LEVEL_VIEWS: dict[NavigationLevel, ViewKind] = {
    NavigationLevel.REGION_SELECT: ViewKind.REGIONS,
    NavigationLevel.CLUSTER_LIST: ViewKind.CLUSTERS,
    NavigationLevel.INSTANCE_LIST: ViewKind.INSTANCES,
    NavigationLevel.INSTANCE_DETAIL: ViewKind.INSTANCE_DETAIL,
    NavigationLevel.INFORMATIONAL: ViewKind.INFORMATIONAL,
}

VIEW_LEVELS: dict[ViewKind, NavigationLevel] = {
    view: level for level, view in LEVEL_VIEWS.items()
}

__all__ = [
    "LEVEL_VIEWS",
    "VIEW_LEVELS",
    "NavigationLevel",
    "Severity",
    "ViewKind",
]
