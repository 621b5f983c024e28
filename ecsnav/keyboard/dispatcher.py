"""Resolve key presses of the focused view into navigation actions."""

from __future__ import annotations

import logging
from collections.abc import Callable

from ecsnav.constants.enums import Severity, ViewKind
from ecsnav.controllers.navigation import NavigationController
from ecsnav.exceptions import UnsupportedOperationError
from ecsnav.keyboard.views import VIEW_KEY_TABLES, KeyTable

logger = logging.getLogger(__name__)


class InputDispatcher:
    """Per-view key dispatch onto a NavigationController.

    ``dispatch`` returns True when the key was consumed. Unknown keys return
    False so the widget can apply its own handling (cursor movement,
    selection). Once the controller has terminated, every key is consumed
    and nothing runs.
    """

    def __init__(
        self,
        controller: NavigationController,
        tables: dict[ViewKind, KeyTable] | None = None,
    ) -> None:
        self._controller = controller
        self._tables: dict[ViewKind, dict[str, str]] = {
            view: {key: action for key, action, _ in table}
            for view, table in (tables or VIEW_KEY_TABLES).items()
        }

    def action_for(self, view: ViewKind, key: str) -> str | None:
        """Name of the action ``key`` triggers in ``view``, if any."""
        return self._tables.get(view, {}).get(key)

    def dispatch(self, view: ViewKind, key: str) -> bool:
        if self._controller.state.terminated:
            return True

        action_name = self.action_for(view, key)
        if action_name is None:
            return False

        action: Callable[[], None] | None = getattr(self._controller, action_name, None)
        if action is None:
            logger.error(f"Key table for {view.value} names unknown action {action_name!r}")
            return False

        logger.debug(f"{view.value}: {key!r} -> {action_name}")
        try:
            action()
        except UnsupportedOperationError as e:
            logger.warning(str(e))
            self._controller.report_notice(str(e), Severity.WARNING)
        return True
