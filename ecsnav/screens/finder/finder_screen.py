"""Finder screen: the base page with the three drill-down lists."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, cast

from textual import events
from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.screen import Screen
from textual.widgets import ListView

from ecsnav.constants.enums import ViewKind
from ecsnav.models.core.resources import RegionInfo
from ecsnav.widgets import ResourceList
from ecsnav.widgets.selection import ListEntry

if TYPE_CHECKING:
    from ecsnav.app import EcsNavigatorApp

logger = logging.getLogger(__name__)


class FinderScreen(Screen[None]):
    """Regions, clusters and instances side by side."""

    DEFAULT_CSS = """
    FinderScreen #finder {
        height: 1fr;
    }

    FinderScreen #regions-list {
        width: 20;
    }

    FinderScreen #clusters-list {
        width: 1fr;
    }

    FinderScreen #instances-list {
        width: 3fr;
    }
    """

    _LIST_IDS = {
        ViewKind.REGIONS: "regions-list",
        ViewKind.CLUSTERS: "clusters-list",
        ViewKind.INSTANCES: "instances-list",
    }

    def __init__(self, regions: Sequence[RegionInfo], selected_region: int = 0) -> None:
        super().__init__()
        self._regions = list(regions)
        self._selected_region = selected_region

    @property
    def app(self) -> EcsNavigatorApp:
        return cast("EcsNavigatorApp", super().app)

    def compose(self) -> ComposeResult:
        with Horizontal(id="finder"):
            yield ResourceList(
                *(ListEntry(region.code, region.code) for region in self._regions),
                view_kind=ViewKind.REGIONS,
                title="Regions",
                initial_index=self._selected_region,
                id=self._LIST_IDS[ViewKind.REGIONS],
            )
            yield ResourceList(
                view_kind=ViewKind.CLUSTERS,
                title="Clusters",
                initial_index=None,
                id=self._LIST_IDS[ViewKind.CLUSTERS],
            )
            yield ResourceList(
                view_kind=ViewKind.INSTANCES,
                title="Instances",
                initial_index=None,
                id=self._LIST_IDS[ViewKind.INSTANCES],
            )

    def on_mount(self) -> None:
        self.list_for(ViewKind.REGIONS).focus()

    def list_for(self, kind: ViewKind) -> ResourceList:
        """The list widget that represents ``kind``."""
        return self.query_one(f"#{self._LIST_IDS[kind]}", ResourceList)

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        """Feed list selections back into the navigation controller."""
        event.stop()
        list_view = event.list_view
        name = event.item.name if event.item is not None else None
        if not isinstance(list_view, ResourceList) or not name:
            return

        controller = self.app.controller
        if list_view.view_kind is ViewKind.REGIONS:
            controller.select_region(name)
        elif list_view.view_kind is ViewKind.CLUSTERS:
            controller.select_cluster(name)
        elif list_view.view_kind is ViewKind.INSTANCES:
            controller.select_instance(name)

    def on_descendant_focus(self, event: events.DescendantFocus) -> None:
        """Keep focus on the list of the current level.

        Key tables are chosen by the focused list, so focus moved by Tab or
        the mouse is sent back to the active list.
        """
        active = self.app.controller.active_view
        widget = event.widget
        if (
            isinstance(widget, ResourceList)
            and active in self._LIST_IDS
            and widget.view_kind is not active
        ):
            logger.debug(f"Refocusing {active.value} list")
            self.list_for(active).focus()
