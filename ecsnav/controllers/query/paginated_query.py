"""Paginated cluster query with optional short-name prefix filtering.

Two paths, chosen by the caller from the startup configuration:

- ``fetch_single_page``: no filter configured, one ListClusters call.
- ``fetch_matching``: walk every page, keep clusters whose short name starts
  with the prefix (exact, case-sensitive), in first-seen order.

Pages are walked with a loop, so depth does not grow with result size.
"""

from __future__ import annotations

import logging

from ecsnav.controllers.base import ResourceProvider
from ecsnav.exceptions import ProviderError
from ecsnav.models.core.resources import ClusterInfo

logger = logging.getLogger(__name__)


class PaginatedQueryController:
    """Accumulates a filtered cluster list across provider pages."""

    def __init__(self, provider: ResourceProvider) -> None:
        self._provider = provider
        self.pages_fetched = 0

    @staticmethod
    def matches(cluster: ClusterInfo, prefix: str | None) -> bool:
        if not prefix:
            return True
        return cluster.short_name.startswith(prefix)

    def fetch_single_page(self, region: str) -> list[ClusterInfo]:
        """List the first page of clusters without filtering."""
        page = self._provider.list_clusters(region)
        self.pages_fetched = 1
        if page.next_token:
            logger.debug(f"Unfiltered listing in {region} stops at the first page")
        return [ClusterInfo.from_arn(arn) for arn in page.arns]

    def fetch_matching(self, region: str, prefix: str) -> list[ClusterInfo]:
        """Walk all pages and keep clusters whose short name starts with ``prefix``.

        An empty result is a valid outcome, not an error.

        Raises:
            ProviderError: A listing call failed, or the provider returned a
                token it had already returned (the walk would never end).
        """
        accumulated: list[ClusterInfo] = []
        seen_tokens: set[str] = set()
        token: str | None = None
        self.pages_fetched = 0

        while True:
            page = self._provider.list_clusters(region, token)
            self.pages_fetched += 1
            accumulated.extend(
                cluster
                for cluster in map(ClusterInfo.from_arn, page.arns)
                if self.matches(cluster, prefix)
            )

            token = page.next_token
            if not token:
                break
            if token in seen_tokens:
                raise ProviderError(
                    operation="ListClusters",
                    service="ecs",
                    message=f"Pagination token repeated after {self.pages_fetched} pages",
                )
            seen_tokens.add(token)

        logger.debug(
            f"Matched {len(accumulated)} clusters with prefix {prefix!r} "
            f"across {self.pages_fetched} pages in {region}"
        )
        return accumulated

    def fetch(self, region: str, prefix: str | None) -> list[ClusterInfo]:
        """Dispatch to the filtered walk or the single-page listing."""
        if prefix:
            return self.fetch_matching(region, prefix)
        return self.fetch_single_page(region)
