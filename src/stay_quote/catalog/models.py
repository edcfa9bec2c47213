"""Property and package snapshots supplied by the data service."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional

from stay_quote.inventory.models import RoomInstance


@dataclass(frozen=True, slots=True)
class Package:
    """A fixed-itinerary product priced per guest."""

    id: str
    name: str
    price: float
    duration: str
    location: Optional[str] = None
    max_guests: Optional[int] = None
    property_id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Package":
        max_guests = data.get("max_guests", data.get("maxGuests"))
        return cls(
            id=str(data["id"]),
            name=str(data.get("name") or data["id"]),
            price=float(data.get("price") or 0),
            duration=str(data.get("duration") or ""),
            location=data.get("location"),
            max_guests=int(max_guests) if max_guests is not None else None,
            property_id=data.get("property_id") or data.get("propertyId"),
        )


@dataclass(frozen=True, slots=True)
class PropertySnapshot:
    id: str
    name: str
    location: Optional[str] = None
    rooms: List[RoomInstance] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PropertySnapshot":
        return cls(
            id=str(data["id"]),
            name=str(data.get("name") or data["id"]),
            location=data.get("location"),
            rooms=[RoomInstance.from_dict(room) for room in data.get("rooms") or []],
        )
