"""Instance parser for the ECS provider - parses API responses into models."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from ecsnav.constants.values import UNKNOWN_VALUE
from ecsnav.models.core.resources import ContainerInstanceInfo, InstanceDetailInfo


class InstanceParser:
    """Parses ECS container instance and EC2 instance payloads."""

    def parse_container_instance(self, payload: dict[str, Any]) -> ContainerInstanceInfo:
        """Parse one ``containerInstances`` entry of DescribeContainerInstances.

        Args:
            payload: Raw container instance dictionary from boto3

        Returns:
            ContainerInstanceInfo keyed by the EC2 instance id.
        """
        return ContainerInstanceInfo(
            id=payload.get("ec2InstanceId") or "",
            status=payload.get("status") or UNKNOWN_VALUE,
            running_task_count=int(payload.get("runningTasksCount") or 0),
            pending_task_count=int(payload.get("pendingTasksCount") or 0),
            registered_at=payload.get("registeredAt"),
            container_instance_arn=payload.get("containerInstanceArn") or "",
        )

    def parse_container_instances(
        self, payloads: Iterable[dict[str, Any]]
    ) -> dict[str, ContainerInstanceInfo]:
        """Parse container instances into an id -> summary mapping.

        Entries without an EC2 instance id (e.g. external instances that
        are still registering) are skipped.
        """
        instances: dict[str, ContainerInstanceInfo] = {}
        for payload in payloads:
            instance = self.parse_container_instance(payload)
            if instance.id:
                instances[instance.id] = instance
        return instances

    def parse_ec2_instance(self, payload: dict[str, Any]) -> InstanceDetailInfo:
        """Parse one ``Reservations[].Instances[]`` entry of DescribeInstances."""
        placement = payload.get("Placement") or {}
        state = payload.get("State") or {}
        return InstanceDetailInfo(
            instance_id=payload.get("InstanceId") or "",
            private_ip=payload.get("PrivateIpAddress") or "",
            public_ip=payload.get("PublicIpAddress") or "",
            private_dns=payload.get("PrivateDnsName") or "",
            public_dns=payload.get("PublicDnsName") or "",
            ami_id=payload.get("ImageId") or "",
            availability_zone=placement.get("AvailabilityZone") or "",
            instance_type=str(payload.get("InstanceType") or ""),
            security_group_ids=tuple(
                group["GroupId"]
                for group in payload.get("SecurityGroups") or []
                if group.get("GroupId")
            ),
            subnet_id=payload.get("SubnetId") or "",
            vpc_id=payload.get("VpcId") or "",
            state=state.get("Name") or "",
            launch_time=payload.get("LaunchTime"),
        )

    def first_ec2_instance(self, response: dict[str, Any]) -> dict[str, Any] | None:
        """Return the first instance of a DescribeInstances response, if any."""
        for reservation in response.get("Reservations") or []:
            for instance in reservation.get("Instances") or []:
                return instance
        return None
