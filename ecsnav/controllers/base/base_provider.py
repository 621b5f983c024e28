"""Base resource provider for the ecsnav TUI.

This module defines the contract between the navigation core and whatever
supplies ECS/EC2 data. Calls are synchronous and blocking; every failure must
surface as ``ProviderError``.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field

from ecsnav.models.core.resources import (
    ClusterInfo,
    ContainerInstanceInfo,
    InstanceDetailInfo,
)

logger = logging.getLogger(__name__)


@dataclass
class ClusterPage:
    """One page of a cluster listing."""

    arns: list[str] = field(default_factory=list)
    next_token: str | None = None


class ResourceProvider(ABC):
    """Supplies cluster/instance listings and instance detail lookups.

    Subclasses should implement the abstract methods to talk to a concrete
    backend.
    """

    def __init__(self) -> None:
        """Initialize the provider with no active region."""
        self._region: str | None = None

    @property
    def region(self) -> str | None:
        """Region the provider currently queries."""
        return self._region

    def set_region(self, region: str) -> None:
        """Point subsequent calls at ``region``."""
        logger.debug(f"Provider region set to {region}")
        self._region = region

    @abstractmethod
    def list_clusters(self, region: str, next_token: str | None = None) -> ClusterPage:
        """List one page of cluster ARNs.

        Args:
            region: Region code
            next_token: Token returned by the previous page, None for the first

        Returns:
            The page of ARNs and the token for the next page (None when done)
        """
        ...

    @abstractmethod
    def list_instances(self, cluster: ClusterInfo) -> list[str]:
        """List all container instance ARNs registered to ``cluster``."""
        ...

    @abstractmethod
    def describe_instances(
        self, cluster: ClusterInfo, arns: Sequence[str]
    ) -> dict[str, ContainerInstanceInfo]:
        """Describe container instances, keyed by EC2 instance id."""
        ...

    @abstractmethod
    def describe_instance_detail(self, instance_id: str) -> InstanceDetailInfo:
        """Describe the EC2 attributes of one instance."""
        ...
