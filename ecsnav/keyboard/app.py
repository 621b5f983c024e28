"""App-level keyboard bindings.

This module contains Textual Binding objects for app-level bindings
that work from any view. Only quit is global; every other key belongs to
the view that has focus (see ``ecsnav.keyboard.views``).
"""

from textual.binding import Binding

# ============================================================================
# Textual Binding objects for app-level bindings
# ============================================================================

APP_BINDINGS: list[Binding] = [
    Binding("q", "quit_app", "Quit", priority=True),
]

__all__ = [
    "APP_BINDINGS",
]
