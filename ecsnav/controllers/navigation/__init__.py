"""Drill-down navigation state machine."""

from ecsnav.controllers.navigation.controller import NavigationController
from ecsnav.controllers.navigation.view import NavigationView

__all__ = [
    "NavigationController",
    "NavigationView",
]
