"""Selection widgets."""

from ecsnav.widgets.selection.resource_list import ListEntry, ResourceList

__all__ = [
    "ListEntry",
    "ResourceList",
]
