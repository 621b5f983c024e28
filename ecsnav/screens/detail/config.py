"""Instance detail screen configuration - table columns and row builder."""

from __future__ import annotations

from ecsnav.models.core.resources import InstanceDetailInfo

DETAIL_COLUMNS: tuple[str, ...] = (
    "Private IP",
    "Public IP",
    "Private DNS",
    "Public DNS",
    "AMI",
    "SGs",
    "Subnet",
    "VPC",
)

EMPTY_CELL = "-"


def detail_row(detail: InstanceDetailInfo) -> tuple[str, ...]:
    """Cells of the details table, in DETAIL_COLUMNS order."""
    values = (
        detail.private_ip,
        detail.public_ip,
        detail.private_dns,
        detail.public_dns,
        detail.ami_id,
        ", ".join(detail.security_group_ids),
        detail.subnet_id,
        detail.vpc_id,
    )
    return tuple(value or EMPTY_CELL for value in values)


__all__ = [
    "DETAIL_COLUMNS",
    "EMPTY_CELL",
    "detail_row",
]
