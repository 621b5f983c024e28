"""Base provider contract."""

from ecsnav.controllers.base.base_provider import ClusterPage, ResourceProvider

__all__ = [
    "ClusterPage",
    "ResourceProvider",
]
