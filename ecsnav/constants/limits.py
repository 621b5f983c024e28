"""Limit values for remote calls."""

from typing import Final

# DescribeContainerInstances accepts at most 100 ARNs per request
DESCRIBE_CONTAINER_INSTANCES_BATCH: Final = 100

__all__ = [
    "DESCRIBE_CONTAINER_INSTANCES_BATCH",
]
