"""Unit tests for InputDispatcher - per-view key resolution."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from ecsnav.constants.enums import NavigationLevel, Severity, ViewKind
from ecsnav.controllers.navigation import NavigationController
from ecsnav.keyboard import InputDispatcher
from ecsnav.tests.tui.fakes import RecordingClipboard, RecordingView


def drill_to_detail(controller: NavigationController) -> None:
    controller.select_region("us-east-1")
    controller.select_cluster("prod")
    controller.select_instance("i-0aaa")


class TestActionResolution:
    """Test the key -> action lookup per view."""

    @pytest.mark.parametrize(
        ("view_kind", "key", "action"),
        [
            (ViewKind.REGIONS, "q", "quit"),
            (ViewKind.CLUSTERS, "escape", "back_to_regions"),
            (ViewKind.INSTANCES, "escape", "back_to_clusters"),
            (ViewKind.INSTANCE_DETAIL, "escape", "close_detail"),
            (ViewKind.INSTANCE_DETAIL, "c", "copy_private_ip"),
            (ViewKind.INSTANCE_DETAIL, "p", "copy_public_ip"),
            (ViewKind.INSTANCE_DETAIL, "s", "connect_shell"),
            (ViewKind.INFORMATIONAL, "escape", "dismiss_informational"),
        ],
    )
    def test_bound_keys(
        self, dispatcher: InputDispatcher, view_kind: ViewKind, key: str, action: str
    ) -> None:
        assert dispatcher.action_for(view_kind, key) == action

    @pytest.mark.parametrize(
        ("view_kind", "key"),
        [
            (ViewKind.REGIONS, "escape"),
            (ViewKind.CLUSTERS, "c"),
            (ViewKind.INSTANCES, "p"),
            (ViewKind.INSTANCE_DETAIL, "x"),
        ],
    )
    def test_unbound_keys(
        self, dispatcher: InputDispatcher, view_kind: ViewKind, key: str
    ) -> None:
        assert dispatcher.action_for(view_kind, key) is None

    def test_quit_bound_everywhere(self, dispatcher: InputDispatcher) -> None:
        for view_kind in ViewKind:
            assert dispatcher.action_for(view_kind, "q") == "quit"


class TestDispatch:
    """Test dispatching keys onto the controller."""

    def test_unknown_key_not_consumed(self, dispatcher: InputDispatcher) -> None:
        assert dispatcher.dispatch(ViewKind.REGIONS, "x") is False

    def test_escape_on_regions_not_consumed(self, dispatcher: InputDispatcher) -> None:
        assert dispatcher.dispatch(ViewKind.REGIONS, "escape") is False

    def test_escape_from_clusters(
        self, controller: NavigationController, dispatcher: InputDispatcher
    ) -> None:
        controller.select_region("us-east-1")
        assert dispatcher.dispatch(ViewKind.CLUSTERS, "escape") is True
        assert controller.level is NavigationLevel.REGION_SELECT

    def test_escape_from_detail(
        self, controller: NavigationController, dispatcher: InputDispatcher
    ) -> None:
        drill_to_detail(controller)
        assert dispatcher.dispatch(ViewKind.INSTANCE_DETAIL, "escape") is True
        assert controller.level is NavigationLevel.INSTANCE_LIST

    def test_copy_from_detail(
        self,
        controller: NavigationController,
        dispatcher: InputDispatcher,
        clipboard: RecordingClipboard,
    ) -> None:
        drill_to_detail(controller)
        dispatcher.dispatch(ViewKind.INSTANCE_DETAIL, "c")
        assert clipboard.copied == ["10.0.1.15"]

    def test_detail_key_after_close_is_noop(
        self,
        controller: NavigationController,
        dispatcher: InputDispatcher,
        clipboard: RecordingClipboard,
    ) -> None:
        drill_to_detail(controller)
        controller.close_detail()

        assert dispatcher.dispatch(ViewKind.INSTANCE_DETAIL, "c") is True
        assert clipboard.copied == []

    def test_unsupported_action_reports_warning(
        self,
        controller: NavigationController,
        dispatcher: InputDispatcher,
        view: RecordingView,
    ) -> None:
        drill_to_detail(controller)

        assert dispatcher.dispatch(ViewKind.INSTANCE_DETAIL, "s") is True
        message, severity = view.notices[-1]
        assert severity is Severity.WARNING
        assert "not supported" in message
        assert controller.level is NavigationLevel.INSTANCE_DETAIL

    def test_quit_then_everything_swallowed(
        self,
        controller: NavigationController,
        dispatcher: InputDispatcher,
        view: RecordingView,
    ) -> None:
        controller.select_region("us-east-1")
        assert dispatcher.dispatch(ViewKind.CLUSTERS, "q") is True
        assert view.stopped is True

        assert dispatcher.dispatch(ViewKind.CLUSTERS, "escape") is True
        assert dispatcher.dispatch(ViewKind.REGIONS, "x") is True
        assert controller.level is NavigationLevel.CLUSTER_LIST

    def test_custom_tables(self) -> None:
        controller = MagicMock()
        controller.state.terminated = False
        dispatcher = InputDispatcher(controller, {ViewKind.REGIONS: [("r", "refresh", "Refresh")]})

        assert dispatcher.dispatch(ViewKind.REGIONS, "r") is True
        controller.refresh.assert_called_once_with()
        assert dispatcher.dispatch(ViewKind.REGIONS, "q") is False

    def test_table_naming_missing_action(self) -> None:
        controller = MagicMock(spec=["state"])
        controller.state.terminated = False
        dispatcher = InputDispatcher(controller, {ViewKind.REGIONS: [("z", "nope", "Nope")]})

        assert dispatcher.dispatch(ViewKind.REGIONS, "z") is False
