"""Rendering contract the navigation controller drives.

The controller never touches widgets directly; the Textual app implements
this protocol and tests use a recording fake.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, Protocol

from ecsnav.constants.enums import Severity, ViewKind
from ecsnav.models.core.resources import (
    ClusterInfo,
    ContainerInstanceInfo,
    InstanceDetailInfo,
)
from ecsnav.navigation.page_stack import Page


class NavigationView(Protocol):
    """List/table/modal primitives plus focus control."""

    def present_page(self, page: Page) -> None:
        """Show ``page`` as the only visible page."""
        ...

    def set_clusters(self, clusters: Sequence[ClusterInfo]) -> None: ...

    def clear_clusters(self) -> None: ...

    def set_instances(self, instances: Sequence[ContainerInstanceInfo]) -> None: ...

    def clear_instances(self) -> None: ...

    def focus_view(self, kind: ViewKind) -> None:
        """Give input focus to one of the base page lists."""
        ...

    def current_focus(self) -> Any: ...

    def restore_focus(self, target: Any) -> None: ...

    def build_informational(
        self,
        message: str,
        on_dismiss: Callable[[], None],
        on_retry: Callable[[], None] | None = None,
    ) -> Any:
        """Create a modal with an OK button (and Retry when ``on_retry`` is set)."""
        ...

    def build_instance_detail(
        self, instance: ContainerInstanceInfo, detail: InstanceDetailInfo
    ) -> Any: ...

    def show_notice(self, message: str, severity: Severity = Severity.INFORMATION) -> None: ...

    def stop_ui(self) -> None:
        """Stop the UI loop."""
        ...
