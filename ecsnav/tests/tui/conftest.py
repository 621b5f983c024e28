"""Shared fixtures for the ecsnav test suite."""

from __future__ import annotations

import pytest

from ecsnav.controllers.navigation import NavigationController
from ecsnav.keyboard import InputDispatcher
from ecsnav.tests.tui.fakes import (
    FakeProvider,
    RecordingClipboard,
    RecordingView,
    cluster_arn,
    make_instance,
)


@pytest.fixture
def provider() -> FakeProvider:
    """Provider with two regions: us-east-1 has clusters, eu-west-1 is empty."""
    fake = FakeProvider()
    fake.cluster_pages["us-east-1"] = [[cluster_arn("prod"), cluster_arn("staging")]]
    fake.cluster_pages["eu-west-1"] = [[]]
    fake.instances["prod"] = [make_instance("i-0aaa"), make_instance("i-0bbb", "DRAINING")]
    fake.instances["staging"] = []
    return fake


@pytest.fixture
def view() -> RecordingView:
    return RecordingView()


@pytest.fixture
def clipboard() -> RecordingClipboard:
    return RecordingClipboard()


@pytest.fixture
def controller(
    provider: FakeProvider, view: RecordingView, clipboard: RecordingClipboard
) -> NavigationController:
    return NavigationController(provider, view, clipboard=clipboard, ssh_key="/home/me/.ssh/id")


@pytest.fixture
def dispatcher(controller: NavigationController) -> InputDispatcher:
    return InputDispatcher(controller)
