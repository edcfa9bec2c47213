"""Room inventory models and allocation helpers."""

from .allocator import RoomInventoryAllocator, group_by_name, validate_quantity
from .models import RoomGroup, RoomInstance, RoomSelection, RoomType

__all__ = [
    "RoomGroup",
    "RoomInstance",
    "RoomInventoryAllocator",
    "RoomSelection",
    "RoomType",
    "group_by_name",
    "validate_quantity",
]
