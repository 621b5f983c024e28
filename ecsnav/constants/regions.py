"""Static catalog of AWS regions offered in the region list."""

from __future__ import annotations

from ecsnav.models.core.resources import RegionInfo

REGIONS: tuple[RegionInfo, ...] = (
    RegionInfo(code="af-south-1", display_name="Africa (Cape Town)"),
    RegionInfo(code="ap-east-1", display_name="Asia Pacific (Hong Kong)"),
    RegionInfo(code="ap-northeast-1", display_name="Asia Pacific (Tokyo)"),
    RegionInfo(code="ap-northeast-2", display_name="Asia Pacific (Seoul)"),
    RegionInfo(code="ap-south-1", display_name="Asia Pacific (Mumbai)"),
    RegionInfo(code="ap-southeast-1", display_name="Asia Pacific (Singapore)"),
    RegionInfo(code="ap-southeast-2", display_name="Asia Pacific (Sydney)"),
    RegionInfo(code="ca-central-1", display_name="Canada (Central)"),
    RegionInfo(code="eu-central-1", display_name="Europe (Frankfurt)"),
    RegionInfo(code="eu-north-1", display_name="Europe (Stockholm)"),
    RegionInfo(code="eu-south-1", display_name="Europe (Milan)"),
    RegionInfo(code="eu-west-1", display_name="Europe (Ireland)"),
    RegionInfo(code="eu-west-2", display_name="Europe (London)"),
    RegionInfo(code="eu-west-3", display_name="Europe (Paris)"),
    RegionInfo(code="me-south-1", display_name="Middle East (Bahrain)"),
    RegionInfo(code="sa-east-1", display_name="South America (Sao Paulo)"),
    RegionInfo(code="us-east-1", display_name="US East (N. Virginia)"),
    RegionInfo(code="us-east-2", display_name="US East (Ohio)"),
    RegionInfo(code="us-west-1", display_name="US West (N. California)"),
    RegionInfo(code="us-west-2", display_name="US West (Oregon)"),
)

REGIONS_BY_CODE: dict[str, RegionInfo] = {region.code: region for region in REGIONS}


def region_index(code: str | None) -> int:
    """Return the catalog position of ``code``, or 0 when unknown/unset."""
    if not code:
        return 0
    for index, region in enumerate(REGIONS):
        if region.code == code:
            return index
    return 0


__all__ = [
    "REGIONS",
    "REGIONS_BY_CODE",
    "region_index",
]
