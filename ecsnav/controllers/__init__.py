"""Controllers module for ecsnav.

This module provides the resource provider contract, its boto3
implementation, the paginated cluster query and the navigation state
machine that drives the finder.
"""

from __future__ import annotations

# Base classes
from ecsnav.controllers.base import ClusterPage, ResourceProvider

# Queries
from ecsnav.controllers.query import PaginatedQueryController

# AWS backend
from ecsnav.controllers.ecs import EcsResourceProvider

# Navigation
from ecsnav.controllers.navigation import NavigationController, NavigationView

__all__ = [
    "ClusterPage",
    "EcsResourceProvider",
    "NavigationController",
    "NavigationView",
    "PaginatedQueryController",
    "ResourceProvider",
]
