"""Detail screen module exports."""

from ecsnav.screens.detail.config import DETAIL_COLUMNS, detail_row
from ecsnav.screens.detail.instance_detail_screen import InstanceDetailScreen

__all__ = [
    "DETAIL_COLUMNS",
    "InstanceDetailScreen",
    "detail_row",
]
