"""Remote resource models: regions, clusters, container instances, EC2 details."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from ecsnav.constants.values import TIMESTAMP_FORMAT, UNKNOWN_VALUE


def short_name(arn: str) -> str:
    """Return the segment after the last ``/`` of an ARN (the ARN itself if none)."""
    return arn.rsplit("/", 1)[-1]


class RegionInfo(BaseModel):
    """Entry of the static region catalog."""

    model_config = ConfigDict(frozen=True)

    code: str
    display_name: str


class ClusterInfo(BaseModel):
    """ECS cluster listed in the current region."""

    model_config = ConfigDict(frozen=True)

    short_name: str
    arn: str

    @classmethod
    def from_arn(cls, arn: str) -> ClusterInfo:
        return cls(short_name=short_name(arn), arn=arn)


class ContainerInstanceInfo(BaseModel):
    """ECS container instance summary, keyed by its EC2 instance id."""

    model_config = ConfigDict(frozen=True)

    id: str
    status: str = UNKNOWN_VALUE
    running_task_count: int = 0
    pending_task_count: int = 0
    registered_at: datetime | None = None
    container_instance_arn: str = ""

    @property
    def status_line(self) -> str:
        """Secondary text shown under the instance id in the instance list."""
        registered = (
            self.registered_at.strftime(TIMESTAMP_FORMAT)
            if self.registered_at
            else UNKNOWN_VALUE
        )
        return (
            f"({self.status}) {self.running_task_count} running "
            f"{self.pending_task_count} pending; Registered {registered}"
        )


class InstanceDetailInfo(BaseModel):
    """EC2-level attributes of a container instance."""

    model_config = ConfigDict(frozen=True)

    instance_id: str
    private_ip: str = ""
    public_ip: str = ""
    private_dns: str = ""
    public_dns: str = ""
    ami_id: str = ""
    availability_zone: str = ""
    instance_type: str = ""
    security_group_ids: tuple[str, ...] = Field(default_factory=tuple)
    subnet_id: str = ""
    vpc_id: str = ""
    state: str = ""
    launch_time: datetime | None = None
