"""Page registry and focus memory used by the navigation controller."""

from ecsnav.navigation.focus_memory import FocusMemory
from ecsnav.navigation.page_stack import Page, PageStack

__all__ = [
    "FocusMemory",
    "Page",
    "PageStack",
]
