"""Informational dialog for the TUI application.

Standard Reactive Pattern:
- Dialogs are modal screens, inherit from ModalScreen
- No reactive state needed; the navigation controller owns their lifecycle
  (the dialog never dismisses itself, it reports the button press)

CSS Classes: widget-custom-dialog
"""

from __future__ import annotations

from collections.abc import Callable
from contextlib import suppress

from textual import events
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.screen import ModalScreen
from textual.widgets import Button, Static

from ecsnav.constants.enums import ViewKind


class InformationalDialog(ModalScreen[None]):
    """Message box with an OK button and an optional Retry button."""

    DEFAULT_CSS = """
    InformationalDialog {
        align: center middle;
    }

    InformationalDialog .dialog-container {
        width: auto;
        min-width: 36;
        max-width: 90%;
        height: auto;
        padding: 1 2;
        border: round $primary;
        background: $surface;
    }

    InformationalDialog .dialog-message {
        width: auto;
        content-align: center middle;
        text-align: center;
        margin-bottom: 1;
    }

    InformationalDialog .dialog-buttons {
        width: auto;
        height: auto;
        align-horizontal: center;
    }

    InformationalDialog .dialog-btn {
        margin: 0 1;
    }
    """

    _default_classes = "widget-custom-dialog"
    view_kind = ViewKind.INFORMATIONAL

    def __init__(
        self,
        message: str,
        on_dismiss: Callable[[], None],
        on_retry: Callable[[], None] | None = None,
    ) -> None:
        """Initialize the informational dialog.

        Args:
            message: Message to display.
            on_dismiss: Callback for OK.
            on_retry: Callback for Retry; no Retry button when None.
        """
        super().__init__(classes=self._default_classes)
        self._message = message
        self._on_dismiss = on_dismiss
        self._on_retry = on_retry

    @property
    def message(self) -> str:
        return self._message

    def compose(self) -> ComposeResult:
        with Vertical(classes="dialog-container"):
            yield Static(self._message, classes="dialog-message", markup=False)
            with Horizontal(classes="dialog-buttons"):
                if self._on_retry is not None:
                    yield Button("Retry", id="retry-btn", classes="dialog-btn")
                yield Button("OK", id="ok-btn", variant="primary", classes="dialog-btn")

    def on_mount(self) -> None:
        with suppress(NoMatches):
            self.query_one("#ok-btn", Button).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button presses."""
        event.stop()
        if event.button.id == "retry-btn" and self._on_retry is not None:
            self._on_retry()
        else:
            self._on_dismiss()

    def on_key(self, event: events.Key) -> None:
        dispatcher = getattr(self.app, "dispatcher", None)
        if dispatcher is not None and dispatcher.dispatch(self.view_kind, event.key):
            event.stop()
            event.prevent_default()
