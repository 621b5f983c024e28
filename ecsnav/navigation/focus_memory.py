"""Single-slot focus memory for overlay views.

Detail views are never nested, so one remembered target is enough. If
overlays ever stack, promote the slot to a LIFO with the same
remember/restore contract.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)


class FocusMemory:
    """Remembers what had focus before an overlay opened."""

    def __init__(self, set_focus: Callable[[Any], None]) -> None:
        self._set_focus = set_focus
        self._target: Any | None = None

    @property
    def remembered(self) -> Any | None:
        return self._target

    def remember(self, current_focus: Any) -> None:
        """Capture the focus target. Call once, right before opening the overlay."""
        self._target = current_focus

    def restore(self) -> bool:
        """Refocus the remembered target and clear the slot.

        Returns:
            True if a target was restored, False when nothing was remembered.
        """
        target, self._target = self._target, None
        if target is None:
            return False
        logger.debug(f"Restoring focus to {target!r}")
        self._set_focus(target)
        return True

    def clear(self) -> None:
        self._target = None
