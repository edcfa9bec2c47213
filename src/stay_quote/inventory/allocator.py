"""Group room instances by name and guard requested quantities."""
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional

from stay_quote.errors import OverbookingError

from .models import RoomGroup, RoomInstance

logger = logging.getLogger(__name__)


def group_by_name(rooms: Iterable[RoomInstance]) -> List[RoomGroup]:
    """Merge instances that share a display name, preserving first-seen order.

    Pricing and capacity come from the first instance seen. Images and
    amenities follow the last instance that supplies a non-empty list.
    """
    pending: Dict[str, Dict[str, Any]] = {}
    for room in rooms:
        entry = pending.get(room.name)
        if entry is None:
            entry = {
                "name": room.name,
                "type": room.type,
                "max_guests": room.max_guests,
                "price": room.price,
                "available_count": 0,
                "total_count": 0,
                "sample_room_id": room.id,
                "images": list(room.images),
                "amenities": list(room.amenities),
            }
            pending[room.name] = entry
        else:
            if room.images:
                entry["images"] = list(room.images)
            if room.amenities:
                entry["amenities"] = list(room.amenities)
        entry["total_count"] += 1
        if room.available:
            entry["available_count"] += 1
    return [RoomGroup(**entry) for entry in pending.values()]


def validate_quantity(group: RoomGroup, requested: int) -> Optional[OverbookingError]:
    """Return an error when ``requested`` exceeds the group's available units."""
    if requested > group.available_count:
        return OverbookingError(group.name, requested, group.available_count)
    return None


class RoomInventoryAllocator:
    """Room groups for one property snapshot.

    Checks are advisory: availability may change before the booking is
    committed, so the commit step must validate again.
    """

    def __init__(self, rooms: Iterable[RoomInstance]) -> None:
        self._groups = {group.name: group for group in group_by_name(rooms)}

    @classmethod
    def from_payload(cls, rooms: Iterable[dict[str, Any]]) -> "RoomInventoryAllocator":
        return cls(RoomInstance.from_dict(room) for room in rooms)

    @property
    def groups(self) -> List[RoomGroup]:
        return list(self._groups.values())

    def group(self, name: str) -> Optional[RoomGroup]:
        return self._groups.get(name)

    def available_count_for(self, name: str) -> int:
        group = self._groups.get(name)
        return group.available_count if group else 0

    def validate(self, name: str, requested: int) -> Optional[OverbookingError]:
        group = self._groups.get(name)
        if group is None:
            if requested <= 0:
                return None
            logger.warning("Requested %s unit(s) of unknown room type '%s'", requested, name)
            return OverbookingError(name, requested, 0)
        error = validate_quantity(group, requested)
        if error:
            logger.warning(
                "Overbooking rejected for '%s': requested %s, available %s",
                name,
                requested,
                group.available_count,
            )
        return error
