"""Selections submitted for quoting and the resulting quote."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional, Union

from stay_quote.catalog.models import Package
from stay_quote.errors import QuoteError, UnparseableDurationWarning
from stay_quote.payments.schedule import PaymentSchedule, PaymentTerm
from stay_quote.pricing.models import AmenitySelection, PackageCostBreakdown, StayCostBreakdown

STAY_BOOKING = "property-stay"
PACKAGE_BOOKING = "safari-package"


@dataclass(frozen=True, slots=True)
class RoomRequest:
    room_name: str
    quantity: int = 1
    guests: int = 1


@dataclass(frozen=True, slots=True)
class StaySelection:
    check_in: Optional[date]
    check_out: Optional[date]
    rooms: List[RoomRequest] = field(default_factory=list)
    property_id: Optional[str] = None


@dataclass(frozen=True, slots=True)
class PackageSelection:
    package: Optional[Package]
    start_date: Optional[date]
    guests: int = 1


@dataclass(frozen=True, slots=True)
class Quote:
    """Priced result of one selection; advisory until the booking is committed."""

    booking_type: str
    breakdown: Union[StayCostBreakdown, PackageCostBreakdown]
    schedule: Optional[PaymentSchedule]
    payment_term: PaymentTerm
    amount_due_now: float
    check_in: Optional[date]
    check_out: Optional[date]
    nights: int
    total_guests: int
    amenities: List[AmenitySelection] = field(default_factory=list)
    property_id: Optional[str] = None
    package_id: Optional[str] = None
    errors: List[QuoteError] = field(default_factory=list)
    warnings: List[UnparseableDurationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def total(self) -> float:
        return self.breakdown.total

    def to_dict(self) -> dict[str, object]:
        return {
            "booking_type": self.booking_type,
            "property_id": self.property_id,
            "package_id": self.package_id,
            "check_in": self.check_in.isoformat() if self.check_in else None,
            "check_out": self.check_out.isoformat() if self.check_out else None,
            "nights": self.nights,
            "total_guests": self.total_guests,
            "costs": self.breakdown.to_dict(),
            "amenities": [amenity.to_dict() for amenity in self.amenities],
            "payment_term": self.payment_term.value,
            "payment_schedule": self.schedule.to_dict() if self.schedule else None,
            "amount_due_now": round(self.amount_due_now, 2),
            "errors": [error.to_dict() for error in self.errors],
            "warnings": [warning.to_dict() for warning in self.warnings],
        }
