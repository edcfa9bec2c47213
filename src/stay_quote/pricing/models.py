"""Cost breakdown records and the rates used to build them."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional

SERVICE_FEE_RATE = 0.10
STAY_TAX_RATE = 0.15
PACKAGE_TAX_RATE = 0.12


def _money(value: float) -> float:
    return round(value, 2)


@dataclass(frozen=True, slots=True)
class PricingPolicy:
    service_fee_rate: float = SERVICE_FEE_RATE
    stay_tax_rate: float = STAY_TAX_RATE
    package_tax_rate: float = PACKAGE_TAX_RATE


DEFAULT_PRICING = PricingPolicy()


@dataclass(frozen=True, slots=True)
class AmenitySelection:
    """An optional add-on chosen for the booking."""

    id: str
    unit_price: float
    quantity: int
    name: Optional[str] = None

    def __post_init__(self) -> None:
        if self.unit_price < 0:
            raise ValueError("unit_price must not be negative")
        if self.quantity < 0:
            raise ValueError("quantity must not be negative")

    @property
    def line_total(self) -> float:
        return self.unit_price * self.quantity

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AmenitySelection":
        unit_price = data.get("unit_price", data.get("price", 0))
        return cls(
            id=str(data["id"]),
            name=data.get("name"),
            unit_price=float(unit_price or 0),
            quantity=int(data.get("quantity", 1)),
        )

    def to_dict(self) -> dict[str, object]:
        return {
            "id": self.id,
            "name": self.name,
            "unit_price": self.unit_price,
            "quantity": self.quantity,
            "line_total": _money(self.line_total),
        }


@dataclass(frozen=True, slots=True)
class RoomLineCost:
    base_rate: float
    extra_guest_fee: float
    total: float


@dataclass(frozen=True, slots=True)
class RoomLineItem:
    """Priced line for one room type in a stay quote."""

    room_name: str
    quantity: int
    guests: int
    max_guests: int
    base_rate: float
    extra_guest_fee: float = 0.0
    extra_guests: int = 0

    @property
    def exceeds_capacity(self) -> bool:
        # Display only: guests beyond capacity pay the same per-person rate.
        return self.guests > self.max_guests

    def to_dict(self) -> dict[str, object]:
        return {
            "room_name": self.room_name,
            "quantity": self.quantity,
            "guests": self.guests,
            "max_guests": self.max_guests,
            "base_rate": _money(self.base_rate),
            "extra_guest_fee": _money(self.extra_guest_fee),
            "extra_guests": self.extra_guests,
            "exceeds_capacity": self.exceeds_capacity,
        }


@dataclass(frozen=True, slots=True)
class StayCostBreakdown:
    base_rate: float
    extra_guest_fees: float
    amenities_total: float
    subtotal: float
    service_fee: float
    taxes: float
    total: float
    nights: int
    room_breakdown: List[RoomLineItem] = field(default_factory=list)

    def to_dict(self) -> dict[str, object]:
        return {
            "base_rate": _money(self.base_rate),
            "extra_guest_fees": _money(self.extra_guest_fees),
            "amenities_total": _money(self.amenities_total),
            "subtotal": _money(self.subtotal),
            "service_fee": _money(self.service_fee),
            "taxes": _money(self.taxes),
            "total": _money(self.total),
            "nights": self.nights,
            "room_breakdown": [item.to_dict() for item in self.room_breakdown],
        }


@dataclass(frozen=True, slots=True)
class PackageCostBreakdown:
    base_price: float
    amenities_total: float
    subtotal: float
    service_fee: float
    taxes: float
    total: float

    def to_dict(self) -> dict[str, object]:
        return {
            "base_price": _money(self.base_price),
            "amenities_total": _money(self.amenities_total),
            "subtotal": _money(self.subtotal),
            "service_fee": _money(self.service_fee),
            "taxes": _money(self.taxes),
            "total": _money(self.total),
        }
