"""ecsnav TUI Screens.

Domain Structure:
    - finder/  - Base page: Regions | Clusters | Instances
    - detail/  - Instance detail overlay
"""

from __future__ import annotations

from ecsnav.screens.detail import InstanceDetailScreen
from ecsnav.screens.finder import FinderScreen

__all__ = [
    "FinderScreen",
    "InstanceDetailScreen",
]
