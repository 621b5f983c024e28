"""Keyboard bindings module.

This module provides all keyboard handling for the ecsnav TUI:

- app: App-level bindings (APP_BINDINGS)
- views: Per-view key tables (*_KEYS, VIEW_KEY_TABLES)
- dispatcher: InputDispatcher resolving keys into navigation actions
"""

from ecsnav.keyboard.app import APP_BINDINGS
from ecsnav.keyboard.dispatcher import InputDispatcher
from ecsnav.keyboard.views import (
    CLUSTER_LIST_KEYS,
    INFORMATIONAL_KEYS,
    INSTANCE_DETAIL_KEYS,
    INSTANCE_LIST_KEYS,
    REGION_LIST_KEYS,
    VIEW_KEY_TABLES,
    key_hint,
)

__all__ = [
    "APP_BINDINGS",
    "CLUSTER_LIST_KEYS",
    "INFORMATIONAL_KEYS",
    "INSTANCE_DETAIL_KEYS",
    "INSTANCE_LIST_KEYS",
    "REGION_LIST_KEYS",
    "VIEW_KEY_TABLES",
    "InputDispatcher",
    "key_hint",
]
