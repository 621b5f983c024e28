"""ECS/EC2 resource provider backed by boto3.

Clients are created lazily per region from one ``boto3.Session``. Every
botocore failure is wrapped into ``ProviderError`` at this boundary.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any, TypeVar

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from ecsnav.constants.limits import DESCRIBE_CONTAINER_INSTANCES_BATCH
from ecsnav.controllers.base import ClusterPage, ResourceProvider
from ecsnav.controllers.ecs.parsers import InstanceParser
from ecsnav.exceptions import ProviderError
from ecsnav.models.core.resources import (
    ClusterInfo,
    ContainerInstanceInfo,
    InstanceDetailInfo,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class EcsResourceProvider(ResourceProvider):
    """ResourceProvider talking to the ECS and EC2 APIs."""

    def __init__(self, session: boto3.Session | None = None) -> None:
        super().__init__()
        self._session = session or boto3.Session()
        self._clients: dict[tuple[str, str], Any] = {}
        self._parser = InstanceParser()

    def _client(self, service: str, region: str | None = None) -> Any:
        """Return a cached client for ``service`` in ``region`` (default: active region)."""
        region_name = region or self._region
        if not region_name:
            raise ProviderError(
                operation="client setup",
                service=service,
                message="No region selected",
            )
        key = (service, region_name)
        client = self._clients.get(key)
        if client is None:
            try:
                client = self._session.client(service, region_name=region_name)
            except BotoCoreError as e:
                raise ProviderError(operation="client setup", service=service, cause=e) from e
            self._clients[key] = client
        return client

    def _call(self, service: str, operation: str, func: Callable[[], T]) -> T:
        logger.debug(f"Calling {service}:{operation} in {self._region}")
        try:
            return func()
        except (ClientError, BotoCoreError) as e:
            logger.error(f"{service}:{operation} failed: {e}")
            raise ProviderError(operation=operation, service=service, cause=e) from e

    # =========================================================================
    # ResourceProvider
    # =========================================================================

    def list_clusters(self, region: str, next_token: str | None = None) -> ClusterPage:
        ecs = self._client("ecs", region)
        kwargs: dict[str, Any] = {}
        if next_token:
            kwargs["nextToken"] = next_token
        response = self._call("ecs", "ListClusters", lambda: ecs.list_clusters(**kwargs))
        return ClusterPage(
            arns=list(response.get("clusterArns") or []),
            next_token=response.get("nextToken") or None,
        )

    def list_instances(self, cluster: ClusterInfo) -> list[str]:
        ecs = self._client("ecs")

        def walk() -> list[str]:
            arns: list[str] = []
            paginator = ecs.get_paginator("list_container_instances")
            for page in paginator.paginate(cluster=cluster.arn or cluster.short_name):
                arns.extend(page.get("containerInstanceArns") or [])
            return arns

        return self._call("ecs", "ListContainerInstances", walk)

    def describe_instances(
        self, cluster: ClusterInfo, arns: Sequence[str]
    ) -> dict[str, ContainerInstanceInfo]:
        ecs = self._client("ecs")
        cluster_ref = cluster.arn or cluster.short_name
        instances: dict[str, ContainerInstanceInfo] = {}
        for start in range(0, len(arns), DESCRIBE_CONTAINER_INSTANCES_BATCH):
            batch = list(arns[start : start + DESCRIBE_CONTAINER_INSTANCES_BATCH])
            response = self._call(
                "ecs",
                "DescribeContainerInstances",
                lambda batch=batch: ecs.describe_container_instances(
                    cluster=cluster_ref, containerInstances=batch
                ),
            )
            for failure in response.get("failures") or []:
                logger.warning(
                    f"Could not describe {failure.get('arn')}: {failure.get('reason')}"
                )
            instances.update(
                self._parser.parse_container_instances(
                    response.get("containerInstances") or []
                )
            )
        return instances

    def describe_instance_detail(self, instance_id: str) -> InstanceDetailInfo:
        ec2 = self._client("ec2")
        response = self._call(
            "ec2",
            "DescribeInstances",
            lambda: ec2.describe_instances(InstanceIds=[instance_id]),
        )
        payload = self._parser.first_ec2_instance(response)
        if payload is None:
            raise ProviderError(
                operation="DescribeInstances",
                service="ec2",
                message=f"Instance {instance_id} not found",
            )
        return self._parser.parse_ec2_instance(payload)
