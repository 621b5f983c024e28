"""Instance detail screen shown over the finder."""

from __future__ import annotations

from contextlib import suppress

from rich.text import Text
from textual import events
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.screen import Screen
from textual.widgets import DataTable, Static

from ecsnav.constants.enums import ViewKind
from ecsnav.keyboard.views import INSTANCE_DETAIL_KEYS, key_hint
from ecsnav.models.core.resources import ContainerInstanceInfo, InstanceDetailInfo
from ecsnav.screens.detail.config import DETAIL_COLUMNS, detail_row


class InstanceDetailScreen(Screen[None]):
    """EC2 attributes of one container instance."""

    DEFAULT_CSS = """
    InstanceDetailScreen #detail-frame {
        border: round $accent;
        height: 1fr;
    }

    InstanceDetailScreen #detail-header {
        height: 3;
    }

    InstanceDetailScreen .detail-header-cell {
        width: 1fr;
        content-align: center middle;
        color: $success;
    }

    InstanceDetailScreen #detail-table {
        height: 1fr;
    }

    InstanceDetailScreen #detail-footer {
        height: 1;
    }

    InstanceDetailScreen .detail-footer-cell {
        width: 1fr;
        content-align: center middle;
        color: $text-muted;
    }
    """

    BINDINGS = [Binding("enter", "scroll_details_end", "Scroll", show=False)]
    view_kind = ViewKind.INSTANCE_DETAIL

    def __init__(self, instance: ContainerInstanceInfo, detail: InstanceDetailInfo) -> None:
        super().__init__()
        self.instance = instance
        self.detail = detail

    def compose(self) -> ComposeResult:
        with Vertical(id="detail-frame") as frame:
            frame.border_title = f'Instance details "{self.instance.id}"'
            with Horizontal(id="detail-header"):
                yield Static(self.detail.availability_zone, classes="detail-header-cell", markup=False)
                yield Static(self.instance.status, classes="detail-header-cell", markup=False)
                yield Static(self.detail.instance_type, classes="detail-header-cell", markup=False)
            table: DataTable[str] = DataTable(id="detail-table", show_cursor=False)
            table.can_focus = False
            yield table
            with Horizontal(id="detail-footer"):
                for key, _, description in INSTANCE_DETAIL_KEYS:
                    yield Static(key_hint(key, description), classes="detail-footer-cell", markup=False)

    def on_mount(self) -> None:
        table = self.query_one("#detail-table", DataTable)
        table.add_columns(*DETAIL_COLUMNS)
        table.add_row(*(Text(cell) for cell in detail_row(self.detail)))

    def action_scroll_details_end(self) -> None:
        with suppress(NoMatches):
            self.query_one("#detail-table", DataTable).scroll_end(animate=False)

    def on_key(self, event: events.Key) -> None:
        dispatcher = getattr(self.app, "dispatcher", None)
        if dispatcher is not None and dispatcher.dispatch(self.view_kind, event.key):
            event.stop()
            event.prevent_default()
