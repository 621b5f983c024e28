"""Process-wide navigation state owned by the NavigationController."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from ecsnav.constants.enums import NavigationLevel, ViewKind
from ecsnav.models.core.resources import (
    ClusterInfo,
    ContainerInstanceInfo,
    InstanceDetailInfo,
    RegionInfo,
)
from ecsnav.navigation.focus_memory import FocusMemory
from ecsnav.navigation.page_stack import PageStack


@dataclass
class InformationalContext:
    """What an open informational modal returns to when dismissed."""

    message: str
    return_to: ViewKind
    retry: Callable[[], None] | None = None


@dataclass
class NavigationState:
    """Selected region/cluster, owned collections, pages and focus memory.

    Collections are owned per level: switching region clears clusters and
    everything below, switching cluster clears instances and details.
    """

    pages: PageStack
    focus: FocusMemory
    cluster_filter_prefix: str | None = None
    level: NavigationLevel = NavigationLevel.REGION_SELECT
    selected_region: RegionInfo | None = None
    clusters: list[ClusterInfo] = field(default_factory=list)
    selected_cluster: ClusterInfo | None = None
    instances: dict[str, ContainerInstanceInfo] = field(default_factory=dict)
    details: dict[str, InstanceDetailInfo] = field(default_factory=dict)
    active_instance_id: str | None = None
    informational: InformationalContext | None = None
    terminated: bool = False

    def clear_instances(self) -> None:
        """Drop the instance collection and any detail cached for it."""
        self.instances.clear()
        self.details.clear()
        self.active_instance_id = None

    def clear_clusters(self) -> None:
        """Drop the cluster collection and every level below it."""
        self.clusters.clear()
        self.selected_cluster = None
        self.clear_instances()

    @property
    def active_detail(self) -> InstanceDetailInfo | None:
        """Detail of the instance whose detail view is open, if still cached."""
        if self.active_instance_id is None:
            return None
        return self.details.get(self.active_instance_id)
