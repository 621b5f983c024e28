"""Widgets module for the ecsnav TUI.

- feedback: Informational dialog (modal with OK/Retry)
- selection: ResourceList, a list view that routes keys through the dispatcher
"""

from ecsnav.widgets.feedback import InformationalDialog
from ecsnav.widgets.selection import ResourceList

__all__ = [
    "InformationalDialog",
    "ResourceList",
]
