"""Main application class for the ecsnav TUI."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

from textual.app import App
from textual.screen import Screen
from textual.widget import Widget

from ecsnav.constants import APP_TITLE
from ecsnav.constants.enums import Severity, ViewKind
from ecsnav.controllers.base import ResourceProvider
from ecsnav.controllers.navigation import NavigationController
from ecsnav.keyboard import APP_BINDINGS, InputDispatcher
from ecsnav.models.core.resources import (
    ClusterInfo,
    ContainerInstanceInfo,
    InstanceDetailInfo,
)
from ecsnav.models.state.app_settings import AppSettings
from ecsnav.navigation import Page
from ecsnav.screens import FinderScreen, InstanceDetailScreen
from ecsnav.utils.clipboard import copy_to_clipboard
from ecsnav.widgets import InformationalDialog
from ecsnav.widgets.selection import ListEntry

logger = logging.getLogger(__name__)


class EcsNavigatorApp(App[None]):
    """Textual host for the navigation controller.

    Implements the NavigationView contract: the finder is the base page,
    every other page is a screen pushed on top of it.
    """

    TITLE = APP_TITLE
    BINDINGS = APP_BINDINGS
    NOTICE_TIMEOUT = 4.0

    settings: AppSettings

    def __init__(
        self,
        provider: ResourceProvider,
        settings: AppSettings | None = None,
        clipboard: Callable[[str], bool] = copy_to_clipboard,
        *args,
        **kwargs,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.settings = settings or AppSettings()
        self.controller = NavigationController(
            provider,
            self,
            cluster_prefix=self.settings.cluster_prefix,
            ssh_key=self.settings.ssh_key,
            clipboard=clipboard,
        )
        self.dispatcher = InputDispatcher(self.controller)
        self._finder: FinderScreen | None = None

    def get_default_screen(self) -> Screen:
        """The finder is the base page."""
        self._finder = FinderScreen(
            self.controller.regions,
            self.controller.initial_region_index(self.settings.default_region),
        )
        return self._finder

    @property
    def finder(self) -> FinderScreen:
        if self._finder is None:
            raise RuntimeError("Finder screen is not mounted")
        return self._finder

    def action_quit_app(self) -> None:
        """``q`` from any view."""
        self.dispatcher.dispatch(self.controller.active_view, "q")

    # =========================================================================
    # NavigationView
    # =========================================================================

    def present_page(self, page: Page) -> None:
        if not self.is_running:
            return
        target = None if page.key == self.controller.pages.base_key else page.content
        while len(self.screen_stack) > 1 and self.screen is not target:
            self.pop_screen()
        if target is not None and self.screen is not target:
            self.push_screen(target)

    def set_clusters(self, clusters: Sequence[ClusterInfo]) -> None:
        self.finder.list_for(ViewKind.CLUSTERS).set_entries(
            ListEntry(cluster.short_name, cluster.short_name) for cluster in clusters
        )

    def clear_clusters(self) -> None:
        if self._finder is not None and self._finder.is_mounted:
            self._finder.list_for(ViewKind.CLUSTERS).clear_entries()

    def set_instances(self, instances: Sequence[ContainerInstanceInfo]) -> None:
        self.finder.list_for(ViewKind.INSTANCES).set_entries(
            ListEntry(instance.id, instance.id, f"  {instance.status_line}")
            for instance in instances
        )

    def clear_instances(self) -> None:
        if self._finder is not None and self._finder.is_mounted:
            self._finder.list_for(ViewKind.INSTANCES).clear_entries()

    def focus_view(self, kind: ViewKind) -> None:
        self.finder.list_for(kind).focus()

    def current_focus(self) -> Any:
        return self.focused

    def restore_focus(self, target: Any) -> None:
        if isinstance(target, Widget):
            target.focus()

    def build_informational(
        self,
        message: str,
        on_dismiss: Callable[[], None],
        on_retry: Callable[[], None] | None = None,
    ) -> InformationalDialog:
        return InformationalDialog(message, on_dismiss=on_dismiss, on_retry=on_retry)

    def build_instance_detail(
        self, instance: ContainerInstanceInfo, detail: InstanceDetailInfo
    ) -> InstanceDetailScreen:
        return InstanceDetailScreen(instance, detail)

    def show_notice(self, message: str, severity: Severity = Severity.INFORMATION) -> None:
        self.notify(
            message, severity=severity.value, timeout=self.NOTICE_TIMEOUT, markup=False
        )

    def stop_ui(self) -> None:
        self.exit()
