"""Data models for the ecsnav TUI."""

from ecsnav.models.core.resources import (
    ClusterInfo,
    ContainerInstanceInfo,
    InstanceDetailInfo,
    RegionInfo,
    short_name,
)

__all__ = [
    "ClusterInfo",
    "ContainerInstanceInfo",
    "InstanceDetailInfo",
    "RegionInfo",
    "short_name",
]
