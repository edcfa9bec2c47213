"""Build stay and package quotes from selections and snapshot data.

Each call is independent: duration is resolved, room quantities are checked
against the snapshot, costs are computed and a payment plan is attached.
Every validation problem is collected so the caller can show them together.
"""
from __future__ import annotations

import logging
import math
from datetime import date
from typing import Iterable, Optional, Sequence, Tuple

from stay_quote.errors import (
    EmptySelectionError,
    InvalidDateRangeError,
    QuoteError,
    UnparseableDurationWarning,
)
from stay_quote.inventory.allocator import RoomInventoryAllocator
from stay_quote.inventory.models import RoomInstance, RoomSelection
from stay_quote.payments.schedule import (
    DEFAULT_PAYMENTS,
    PaymentPolicy,
    PaymentTerm,
    amount_due_now,
    compute_schedule,
)
from stay_quote.pricing.amenities import total_for
from stay_quote.pricing.calculator import compute_package_costs, compute_stay_costs
from stay_quote.pricing.models import DEFAULT_PRICING, AmenitySelection, PricingPolicy
from stay_quote.stays.duration import nights_for_stay, package_end_date, package_nights, parse_duration_label

from .models import PACKAGE_BOOKING, STAY_BOOKING, PackageSelection, Quote, StaySelection

logger = logging.getLogger(__name__)

CHILD_SHARE_ESTIMATE = 0.3


def estimate_guest_mix(total_guests: int) -> Tuple[int, int]:
    """Split a guest count into (adults, children) when no breakdown was given."""
    children = math.floor(total_guests * CHILD_SHARE_ESTIMATE)
    adults = max(1, total_guests - children)
    return adults, children


def _resolve_rooms(
    selection: StaySelection,
    allocator: RoomInventoryAllocator,
    errors: list[QuoteError],
) -> list[RoomSelection]:
    requested: dict[str, int] = {}
    for request in selection.rooms:
        if request.quantity > 0:
            requested[request.room_name] = requested.get(request.room_name, 0) + request.quantity

    rejected: set[str] = set()
    for room_name, quantity in requested.items():
        error = allocator.validate(room_name, quantity)
        if error:
            errors.append(error)
            rejected.add(room_name)

    resolved: list[RoomSelection] = []
    for request in selection.rooms:
        if request.quantity <= 0 or request.room_name in rejected:
            continue
        group = allocator.group(request.room_name)
        resolved.append(
            RoomSelection(room_type=group.as_room_type(), quantity=request.quantity, guests=request.guests)
        )
    return resolved


def quote_stay(
    selection: StaySelection,
    rooms: Iterable[RoomInstance] | RoomInventoryAllocator,
    amenities: Sequence[AmenitySelection] = (),
    *,
    today: date,
    payment_term: PaymentTerm | str = PaymentTerm.DEPOSIT,
    pricing: PricingPolicy = DEFAULT_PRICING,
    payments: PaymentPolicy = DEFAULT_PAYMENTS,
) -> Quote:
    allocator = rooms if isinstance(rooms, RoomInventoryAllocator) else RoomInventoryAllocator(rooms)
    errors: list[QuoteError] = []

    check_in, check_out = selection.check_in, selection.check_out
    if check_in is None or check_out is None:
        errors.append(InvalidDateRangeError("Please select check-in and check-out dates."))
    elif check_out <= check_in:
        errors.append(InvalidDateRangeError("Check-out date must be after check-in date."))
    nights = nights_for_stay(check_in, check_out)

    if not any(request.quantity > 0 for request in selection.rooms):
        errors.append(EmptySelectionError("Please select at least one room."))
    room_selections = _resolve_rooms(selection, allocator, errors)

    breakdown = compute_stay_costs(room_selections, nights, total_for(amenities), policy=pricing)
    schedule = compute_schedule(breakdown.total, check_in, today, policy=payments)
    term = PaymentTerm(payment_term)
    if errors:
        logger.info("Stay quote has %s validation error(s)", len(errors))

    return Quote(
        booking_type=STAY_BOOKING,
        breakdown=breakdown,
        schedule=schedule,
        payment_term=term,
        amount_due_now=amount_due_now(schedule, term, breakdown.total),
        check_in=check_in,
        check_out=check_out,
        nights=nights,
        total_guests=sum(request.guests for request in selection.rooms),
        amenities=list(amenities),
        property_id=selection.property_id,
        errors=errors,
    )


def quote_package(
    selection: PackageSelection,
    amenities: Sequence[AmenitySelection] = (),
    *,
    today: date,
    payment_term: PaymentTerm | str = PaymentTerm.DEPOSIT,
    pricing: PricingPolicy = DEFAULT_PRICING,
    payments: PaymentPolicy = DEFAULT_PAYMENTS,
) -> Quote:
    errors: list[QuoteError] = []
    warnings: list[UnparseableDurationWarning] = []
    package = selection.package

    if package is None:
        errors.append(EmptySelectionError("Please choose a package."))
    if selection.start_date is None:
        errors.append(InvalidDateRangeError("Please select a package start date."))

    end_date: Optional[date] = None
    nights = 0
    if package is not None:
        duration_days, warning = parse_duration_label(package.duration)
        if warning:
            warnings.append(warning)
        if selection.start_date is not None:
            end_date = package_end_date(selection.start_date, duration_days)
        nights = package_nights(selection.start_date, end_date) if end_date else duration_days

    breakdown = compute_package_costs(package, selection.guests, total_for(amenities), policy=pricing)
    schedule = compute_schedule(breakdown.total, selection.start_date, today, policy=payments)
    term = PaymentTerm(payment_term)

    return Quote(
        booking_type=PACKAGE_BOOKING,
        breakdown=breakdown,
        schedule=schedule,
        payment_term=term,
        amount_due_now=amount_due_now(schedule, term, breakdown.total),
        check_in=selection.start_date,
        check_out=end_date,
        nights=nights,
        total_guests=selection.guests,
        amenities=list(amenities),
        property_id=package.property_id if package else None,
        package_id=package.id if package else None,
        errors=errors,
        warnings=warnings,
    )


def booking_payload(
    quote: Quote,
    *,
    guest_name: str,
    guest_email: str,
    guest_phone: Optional[str] = None,
    special_requirements: Optional[str] = None,
    adults: Optional[int] = None,
    children: Optional[int] = None,
) -> dict[str, object]:
    """Shape a valid quote into the record accepted by the booking service.

    Availability must be re-checked by the service before the booking is
    confirmed; the quote only reflects the snapshot it was built from.
    """
    if not quote.is_valid:
        raise ValueError("Cannot build a booking payload from a quote with errors")
    if adults is None:
        adults, estimated_children = estimate_guest_mix(quote.total_guests)
        if children is None:
            children = estimated_children
    total = round(quote.total, 2)
    return {
        "booking_type": quote.booking_type,
        "property_id": quote.property_id,
        "package_id": quote.package_id,
        "check_in": quote.check_in.isoformat() if quote.check_in else None,
        "check_out": quote.check_out.isoformat() if quote.check_out else None,
        "total_guests": quote.total_guests,
        "adults": adults,
        "children": children or 0,
        "guest_name": guest_name,
        "guest_email": guest_email,
        "guest_phone": guest_phone,
        "special_requirements": special_requirements,
        "status": "pending",
        "total_amount": total,
        "deposit_paid": 0,
        "balance_due": total,
        "payment_schedule": quote.schedule.to_dict() if quote.schedule else None,
        "selected_amenities": [amenity.to_dict() for amenity in quote.amenities],
    }
