"""List widget for regions, clusters and instances.

Keys are offered to the app's InputDispatcher first; keys the view's table
does not name (arrows, enter) fall through to ListView's own bindings.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import NamedTuple

from textual import events
from textual.widgets import Label, ListItem, ListView

from ecsnav.constants.enums import ViewKind


class ListEntry(NamedTuple):
    """One row: selection key, primary text and optional secondary text."""

    name: str
    primary: str
    secondary: str | None = None


class ResourceList(ListView):
    """Bordered, titled ListView bound to one ViewKind."""

    DEFAULT_CSS = """
    ResourceList {
        height: 1fr;
        border: round $panel;
    }

    ResourceList:focus {
        border: round $accent;
    }

    ResourceList .resource-list-secondary {
        color: $text-muted;
    }
    """

    def __init__(
        self,
        *entries: ListEntry,
        view_kind: ViewKind,
        title: str,
        initial_index: int | None = 0,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(
            *(self._build_item(entry) for entry in entries),
            initial_index=initial_index,
            id=id,
            classes=classes,
        )
        self.view_kind = view_kind
        self.border_title = title

    @staticmethod
    def _build_item(entry: ListEntry) -> ListItem:
        labels = [Label(entry.primary, markup=False)]
        if entry.secondary is not None:
            labels.append(
                Label(entry.secondary, classes="resource-list-secondary", markup=False)
            )
        return ListItem(*labels, name=entry.name)

    @property
    def entry_names(self) -> list[str]:
        """Selection keys of the current items."""
        return [item.name or "" for item in self.query(ListItem)]

    def set_entries(self, entries: Iterable[ListEntry]) -> None:
        """Replace all items and put the cursor on the first one."""
        self.clear()
        self.extend(self._build_item(entry) for entry in entries)
        self.call_after_refresh(self._reset_cursor)

    def clear_entries(self) -> None:
        self.clear()

    def _reset_cursor(self) -> None:
        self.index = 0 if len(self) else None

    def on_key(self, event: events.Key) -> None:
        dispatcher = getattr(self.app, "dispatcher", None)
        if dispatcher is not None and dispatcher.dispatch(self.view_kind, event.key):
            event.stop()
            event.prevent_default()
