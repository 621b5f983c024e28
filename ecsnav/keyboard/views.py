"""Per-view key tables.

Each table lists the keys a view resolves itself. Selection keys (enter,
arrows) are not listed: the list widgets handle them and report selections
to the navigation controller. Actions name NavigationController methods.
"""

from typing import Annotated

from ecsnav.constants.enums import ViewKind

KeyTable = list[Annotated[tuple[str, str, str], "key, action, description"]]

# ============================================================================
# Base page lists
# ============================================================================

REGION_LIST_KEYS: KeyTable = [
    ("q", "quit", "Quit"),
]

CLUSTER_LIST_KEYS: KeyTable = [
    ("escape", "back_to_regions", "Back"),
    ("q", "quit", "Quit"),
]

INSTANCE_LIST_KEYS: KeyTable = [
    ("escape", "back_to_clusters", "Back"),
    ("q", "quit", "Quit"),
]

# ============================================================================
# Overlays
# ============================================================================

INSTANCE_DETAIL_KEYS: KeyTable = [
    ("s", "connect_shell", "SSH"),
    ("c", "copy_private_ip", "Copy private IP"),
    ("p", "copy_public_ip", "Copy public IP"),
    ("escape", "close_detail", "Back"),
    ("q", "quit", "Quit"),
]

INFORMATIONAL_KEYS: KeyTable = [
    ("escape", "dismiss_informational", "OK"),
    ("q", "quit", "Quit"),
]

VIEW_KEY_TABLES: dict[ViewKind, KeyTable] = {
    ViewKind.REGIONS: REGION_LIST_KEYS,
    ViewKind.CLUSTERS: CLUSTER_LIST_KEYS,
    ViewKind.INSTANCES: INSTANCE_LIST_KEYS,
    ViewKind.INSTANCE_DETAIL: INSTANCE_DETAIL_KEYS,
    ViewKind.INFORMATIONAL: INFORMATIONAL_KEYS,
}


def key_hint(key: str, description: str) -> str:
    """Footer label for a key, e.g. ``(c) Copy private IP``."""
    label = "ESC" if key == "escape" else key
    return f"({label}) {description}"


__all__ = [
    "CLUSTER_LIST_KEYS",
    "INFORMATIONAL_KEYS",
    "INSTANCE_DETAIL_KEYS",
    "INSTANCE_LIST_KEYS",
    "REGION_LIST_KEYS",
    "VIEW_KEY_TABLES",
    "KeyTable",
    "key_hint",
]
