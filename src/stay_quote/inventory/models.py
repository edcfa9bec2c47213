"""Dataclasses describing room inventory snapshots and selections."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional


def _first_present(data: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        value = data.get(key)
        if value is not None:
            return value
    return default


def _string_list(value: Any) -> List[str]:
    if not value:
        return []
    if isinstance(value, str):
        return [value]
    return [str(item) for item in value if item]


_TRUE_STRINGS = {"true", "1", "yes", "y"}
_FALSE_STRINGS = {"false", "0", "no", "n", ""}


def _flag(value: Any, default: bool = True) -> bool:
    if value is None:
        return default
    if isinstance(value, str):
        cleaned = value.strip().lower()
        if cleaned in _TRUE_STRINGS:
            return True
        if cleaned in _FALSE_STRINGS:
            return False
        raise ValueError(f"Unrecognised boolean value '{value}'")
    return bool(value)


@dataclass(frozen=True, slots=True)
class RoomInstance:
    """A single bookable room as returned by the property data service."""

    id: str
    name: str
    max_guests: int
    price: float
    available: bool = True
    type: Optional[str] = None
    images: List[str] = field(default_factory=list)
    amenities: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RoomInstance":
        return cls(
            id=str(data["id"]),
            name=str(data.get("name") or data["id"]),
            max_guests=int(_first_present(data, "max_guests", "maxGuests", default=0)),
            price=float(data.get("price") or 0),
            available=_flag(data.get("available")),
            type=data.get("type"),
            images=_string_list(data.get("images")),
            amenities=_string_list(data.get("amenities")),
        )


@dataclass(frozen=True, slots=True)
class RoomType:
    """Interchangeable inventory units priced per guest per night."""

    id: str
    name: str
    max_guests: int
    price_per_night: float
    total_units: int
    available_units: int

    def __post_init__(self) -> None:
        if self.price_per_night < 0:
            raise ValueError("price_per_night must not be negative")
        if self.available_units < 0 or self.total_units < 0:
            raise ValueError("unit counts must not be negative")
        if self.available_units > self.total_units:
            raise ValueError(
                f"available_units ({self.available_units}) exceeds total_units ({self.total_units})"
            )


@dataclass(frozen=True, slots=True)
class RoomGroup:
    """Room instances sharing a display name, treated as one room type."""

    name: str
    type: Optional[str]
    max_guests: int
    price: float
    available_count: int
    total_count: int
    sample_room_id: str
    images: List[str] = field(default_factory=list)
    amenities: List[str] = field(default_factory=list)

    def as_room_type(self) -> RoomType:
        return RoomType(
            id=self.sample_room_id,
            name=self.name,
            max_guests=self.max_guests,
            price_per_night=self.price,
            total_units=self.total_count,
            available_units=self.available_count,
        )

    def to_dict(self) -> dict[str, object]:
        return {
            "name": self.name,
            "type": self.type,
            "max_guests": self.max_guests,
            "price": self.price,
            "available_count": self.available_count,
            "total_count": self.total_count,
            "sample_room_id": self.sample_room_id,
            "images": list(self.images),
            "amenities": list(self.amenities),
        }


@dataclass(frozen=True, slots=True)
class RoomSelection:
    """Requested quantity and guest count for one room type."""

    room_type: RoomType
    quantity: int
    guests: int

    def __post_init__(self) -> None:
        if self.quantity < 0:
            raise ValueError("quantity must not be negative")
        if self.guests < 0:
            raise ValueError("guests must not be negative")

    @property
    def is_active(self) -> bool:
        return self.quantity > 0
