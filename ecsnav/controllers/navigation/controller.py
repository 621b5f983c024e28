"""Navigation controller: region -> cluster -> instance -> instance detail.

This module is the state machine behind the finder. It owns the single
``NavigationState``, drives the ResourceProvider (directly, or through the
PaginatedQueryController for clusters) and tells the NavigationView what to
show. All methods run on the UI event thread; provider calls block it.

States and transitions:
    RegionSelect --select region--> ClusterList | Informational(no clusters)
    ClusterList --select cluster--> InstanceList | Informational(no instances)
    ClusterList --escape--> RegionSelect
    InstanceList --select instance--> InstanceDetail
    InstanceList --escape--> ClusterList
    InstanceDetail --escape--> previous list (focus restored)
    any --q--> terminated
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from functools import partial

from ecsnav.constants.enums import (
    LEVEL_VIEWS,
    VIEW_LEVELS,
    NavigationLevel,
    Severity,
    ViewKind,
)
from ecsnav.constants.regions import REGIONS, REGIONS_BY_CODE, region_index
from ecsnav.constants.values import (
    INFORMATIONAL_PAGE,
    MAIN_PAGE,
    NO_CLUSTERS_MESSAGE,
    NO_INSTANCES_MESSAGE,
)
from ecsnav.controllers.base import ResourceProvider
from ecsnav.controllers.navigation.view import NavigationView
from ecsnav.controllers.query import PaginatedQueryController
from ecsnav.exceptions import (
    ConsistencyError,
    ProviderError,
    UnsupportedOperationError,
)
from ecsnav.models.core.resources import (
    ClusterInfo,
    ContainerInstanceInfo,
    InstanceDetailInfo,
    RegionInfo,
)
from ecsnav.models.state.navigation_state import (
    InformationalContext,
    NavigationState,
)
from ecsnav.navigation import FocusMemory, PageStack
from ecsnav.utils.clipboard import copy_to_clipboard

logger = logging.getLogger(__name__)


class NavigationController:
    """Drill-down state machine wiring list selections to provider lookups."""

    def __init__(
        self,
        provider: ResourceProvider,
        view: NavigationView,
        *,
        cluster_prefix: str | None = None,
        ssh_key: str | None = None,
        clipboard: Callable[[str], bool] = copy_to_clipboard,
    ) -> None:
        self._provider = provider
        self._view = view
        self._clipboard = clipboard
        self._query = PaginatedQueryController(provider)
        self.ssh_key = ssh_key or None
        self.state = NavigationState(
            pages=PageStack(presenter=view.present_page),
            focus=FocusMemory(view.restore_focus),
            cluster_filter_prefix=cluster_prefix or None,
        )

    # =========================================================================
    # Queries
    # =========================================================================

    @property
    def regions(self) -> tuple[RegionInfo, ...]:
        return REGIONS

    @staticmethod
    def initial_region_index(default_region: str | None) -> int:
        """Index to pre-select in the region list (never navigates)."""
        return region_index(default_region)

    @property
    def level(self) -> NavigationLevel:
        return self.state.level

    @property
    def active_view(self) -> ViewKind:
        """The view whose key table applies right now."""
        return LEVEL_VIEWS[self.state.level]

    @property
    def pages(self) -> PageStack:
        return self.state.pages

    # =========================================================================
    # Transitions
    # =========================================================================

    def select_region(self, code: str) -> None:
        """RegionSelect -> ClusterList."""
        if self.state.terminated:
            return
        region = REGIONS_BY_CODE.get(code)
        if region is None:
            logger.warning(f"Ignoring selection of unknown region {code!r}")
            return

        self._reset_clusters()
        self.state.selected_region = region
        self._provider.set_region(region.code)

        try:
            clusters = self._query.fetch(region.code, self.state.cluster_filter_prefix)
        except ProviderError as e:
            self._show_provider_error(e, ViewKind.REGIONS, partial(self.select_region, code))
            return

        if not clusters:
            logger.info(f"No clusters in {region.code}")
            self._show_informational(NO_CLUSTERS_MESSAGE, ViewKind.REGIONS)
            return

        self.state.clusters = clusters
        self._view.set_clusters(clusters)
        self._enter(NavigationLevel.CLUSTER_LIST)

    def select_cluster(self, name: str) -> None:
        """ClusterList -> InstanceList."""
        if self.state.terminated:
            return
        try:
            cluster = self._lookup_cluster(name)
        except ConsistencyError as e:
            self._abort_to_region_select(e)
            return

        self._reset_instances()
        self.state.selected_cluster = cluster

        try:
            arns = self._provider.list_instances(cluster)
            instances = self._provider.describe_instances(cluster, arns) if arns else {}
        except ProviderError as e:
            self._show_provider_error(e, ViewKind.CLUSTERS, partial(self.select_cluster, name))
            return

        if not instances:
            # Also reached when every listed ARN failed to describe.
            logger.info(f"No container instances in {cluster.short_name}")
            self._show_informational(NO_INSTANCES_MESSAGE, ViewKind.CLUSTERS)
            return

        self.state.instances = dict(instances)
        self._view.set_instances(list(instances.values()))
        self._enter(NavigationLevel.INSTANCE_LIST)

    def select_instance(self, instance_id: str) -> None:
        """InstanceList -> InstanceDetail.

        Re-selecting an instance drops its previous detail page and cached
        detail before fetching again.
        """
        if self.state.terminated:
            return
        try:
            instance = self._lookup_instance(instance_id)
        except ConsistencyError as e:
            self._abort_to_region_select(e)
            return

        self._drop_detail_page(instance_id)

        try:
            detail = self._provider.describe_instance_detail(instance_id)
        except ProviderError as e:
            self._show_provider_error(
                e, ViewKind.INSTANCES, partial(self.select_instance, instance_id)
            )
            return

        self._open_detail(instance, detail)

    def back_to_regions(self) -> None:
        """ClusterList -> RegionSelect."""
        self._reset_clusters()
        self.state.selected_region = None
        self._enter(NavigationLevel.REGION_SELECT)

    def back_to_clusters(self) -> None:
        """InstanceList -> ClusterList."""
        self._reset_instances()
        self.state.selected_cluster = None
        self._enter(NavigationLevel.CLUSTER_LIST)

    def close_detail(self) -> None:
        """InstanceDetail -> the list that had focus before it opened."""
        instance_id = self.state.active_instance_id
        pages = self.state.pages
        pages.switch_to(MAIN_PAGE)
        if instance_id is not None:
            if pages.has_page(instance_id):
                pages.remove_page(instance_id)
            self.state.details.pop(instance_id, None)
        self.state.active_instance_id = None
        self.state.level = NavigationLevel.INSTANCE_LIST
        if not self.state.focus.restore():
            self._view.focus_view(ViewKind.INSTANCES)

    def dismiss_informational(self) -> None:
        """Close the informational modal and return to where it was raised."""
        context = self.state.informational
        pages = self.state.pages
        pages.switch_to(MAIN_PAGE)
        if pages.has_page(INFORMATIONAL_PAGE):
            pages.remove_page(INFORMATIONAL_PAGE)
        self.state.informational = None

        return_to = context.return_to if context else ViewKind.REGIONS
        if return_to is ViewKind.REGIONS:
            self.state.selected_region = None
        elif return_to is ViewKind.CLUSTERS:
            self.state.selected_cluster = None
        self._enter(VIEW_LEVELS[return_to])

    def retry_informational(self) -> None:
        """Close an error modal and re-run the navigation action that failed."""
        context = self.state.informational
        self.dismiss_informational()
        if context is not None and context.retry is not None:
            context.retry()

    def quit(self) -> None:
        """Terminate the application; later events are ignored."""
        if self.state.terminated:
            return
        logger.debug("Quit requested")
        self.state.terminated = True
        self._view.stop_ui()

    # =========================================================================
    # Detail view actions
    # =========================================================================

    def copy_private_ip(self) -> None:
        self._copy_detail_field("private IP", lambda detail: detail.private_ip)

    def copy_public_ip(self) -> None:
        self._copy_detail_field("public IP", lambda detail: detail.public_ip)

    def connect_shell(self) -> None:
        """Open a remote shell to the instance in the detail view.

        Raises:
            UnsupportedOperationError: Always; shell sessions are not available.
        """
        detail = self.state.active_detail
        if detail is None:
            logger.debug("Connect requested without an open detail view")
            return
        key_hint = f" (key: {self.ssh_key})" if self.ssh_key else ""
        raise UnsupportedOperationError(
            "SSH connect",
            f"SSH connect to {detail.instance_id} is not supported yet{key_hint}",
        )

    def report_notice(self, message: str, severity: Severity = Severity.INFORMATION) -> None:
        self._view.show_notice(message, severity)

    # =========================================================================
    # Internals
    # =========================================================================

    def _enter(self, level: NavigationLevel) -> None:
        self.state.level = level
        view = LEVEL_VIEWS[level]
        if view in (ViewKind.REGIONS, ViewKind.CLUSTERS, ViewKind.INSTANCES):
            self._view.focus_view(view)

    def _reset_clusters(self) -> None:
        self.state.clear_clusters()
        self._view.clear_clusters()
        self._view.clear_instances()

    def _reset_instances(self) -> None:
        self.state.clear_instances()
        self._view.clear_instances()

    def _lookup_cluster(self, name: str) -> ClusterInfo:
        for cluster in self.state.clusters:
            if cluster.short_name == name:
                return cluster
        raise ConsistencyError(f"Selected cluster {name!r} is not in the cluster list")

    def _lookup_instance(self, instance_id: str) -> ContainerInstanceInfo:
        instance = self.state.instances.get(instance_id)
        if instance is None:
            raise ConsistencyError(
                f"Could not look up instance details for {instance_id!r}"
            )
        return instance

    def _drop_detail_page(self, instance_id: str) -> None:
        pages = self.state.pages
        if pages.has_page(instance_id):
            pages.remove_page(instance_id, fallback=MAIN_PAGE)
        self.state.details.pop(instance_id, None)

    def _open_detail(
        self, instance: ContainerInstanceInfo, detail: InstanceDetailInfo
    ) -> None:
        self.state.details[instance.id] = detail
        self.state.active_instance_id = instance.id
        self.state.focus.remember(self._view.current_focus())
        content = self._view.build_instance_detail(instance, detail)
        self.state.pages.add_page(instance.id, content, modal=True, visible=True)
        self.state.level = NavigationLevel.INSTANCE_DETAIL

    def _copy_detail_field(
        self, label: str, field: Callable[[InstanceDetailInfo], str]
    ) -> None:
        detail = self.state.active_detail
        if detail is None:
            logger.debug(f"Copy {label} requested without an open detail view")
            return
        value = field(detail)
        if not value:
            self._view.show_notice(f"Instance has no {label}", Severity.WARNING)
            return
        if self._clipboard(value):
            self._view.show_notice(f"Copied {label} {value} to clipboard")

    def _show_informational(
        self,
        message: str,
        return_to: ViewKind,
        retry: Callable[[], None] | None = None,
    ) -> None:
        pages = self.state.pages
        if pages.has_page(INFORMATIONAL_PAGE):
            pages.remove_page(INFORMATIONAL_PAGE)
        content = self._view.build_informational(
            message,
            on_dismiss=self.dismiss_informational,
            on_retry=self.retry_informational if retry is not None else None,
        )
        self.state.informational = InformationalContext(message, return_to, retry)
        self.state.level = NavigationLevel.INFORMATIONAL
        pages.add_page(INFORMATIONAL_PAGE, content, modal=True, visible=True)

    def _show_provider_error(
        self,
        error: ProviderError,
        return_to: ViewKind,
        retry: Callable[[], None],
    ) -> None:
        logger.error(f"Navigation step failed: {error}")
        self._show_informational(str(error), return_to, retry)

    def _abort_to_region_select(self, error: ConsistencyError) -> None:
        logger.critical(f"Internal consistency error: {error}")
        pages = self.state.pages
        pages.switch_to(MAIN_PAGE)
        for key in pages.keys():
            if key != pages.base_key:
                pages.remove_page(key)
        self.state.focus.clear()
        self.state.informational = None
        self._reset_clusters()
        self.state.selected_region = None
        self._enter(NavigationLevel.REGION_SELECT)
        self._view.show_notice(str(error), Severity.ERROR)
