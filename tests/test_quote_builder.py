from __future__ import annotations

import logging
from datetime import date, datetime, timedelta

import pytest

from stay_quote.catalog import Package
from stay_quote.errors import (
    EmptySelectionError,
    InvalidDateRangeError,
    OverbookingError,
    UnparseableDurationWarning,
)
from stay_quote.inventory import RoomInstance, RoomInventoryAllocator
from stay_quote.pricing import AmenitySelection
from stay_quote.quotes import (
    PackageSelection,
    RoomRequest,
    StaySelection,
    booking_payload,
    estimate_guest_mix,
    quote_package,
    quote_stay,
)

TODAY = date(2026, 3, 1)


def _rooms() -> list[RoomInstance]:
    return [
        RoomInstance(id="t1", name="Safari Tent", max_guests=2, price=100.0),
        RoomInstance(id="t2", name="Safari Tent", max_guests=2, price=100.0),
        RoomInstance(id="t3", name="Safari Tent", max_guests=2, price=100.0, available=False),
        RoomInstance(id="v1", name="Family Villa", max_guests=4, price=150.0),
    ]


def test_stay_quote_end_to_end():
    check_in = TODAY + timedelta(days=45)
    selection = StaySelection(
        check_in=check_in,
        check_out=check_in + timedelta(days=4),
        rooms=[RoomRequest("Safari Tent", quantity=2, guests=3)],
        property_id="camp-1",
    )

    quote = quote_stay(selection, _rooms(), today=TODAY)

    assert quote.is_valid
    assert quote.booking_type == "property-stay"
    assert quote.nights == 4
    assert quote.total == pytest.approx(1500)
    assert quote.schedule is not None
    assert quote.schedule.deposit_amount == pytest.approx(450)
    assert quote.schedule.balance_due_date == check_in - timedelta(days=30)
    assert quote.amount_due_now == pytest.approx(450)


def test_stay_quote_collects_all_errors_in_one_pass():
    selection = StaySelection(check_in=None, check_out=None, rooms=[RoomRequest("Safari Tent", quantity=0)])

    quote = quote_stay(selection, _rooms(), today=TODAY)

    assert not quote.is_valid
    assert {type(error) for error in quote.errors} == {InvalidDateRangeError, EmptySelectionError}
    assert quote.schedule is None
    assert quote.total == 0


def test_stay_quote_rejects_inverted_dates():
    selection = StaySelection(
        check_in=TODAY + timedelta(days=5),
        check_out=TODAY + timedelta(days=5),
        rooms=[RoomRequest("Safari Tent", quantity=1, guests=2)],
    )

    quote = quote_stay(selection, _rooms(), today=TODAY)

    assert [type(error) for error in quote.errors] == [InvalidDateRangeError]
    assert quote.nights == 0
    assert quote.breakdown.base_rate == 0


def test_stay_quote_excludes_overbooked_lines_but_prices_the_rest():
    check_in = TODAY + timedelta(days=10)
    selection = StaySelection(
        check_in=check_in,
        check_out=check_in + timedelta(days=2),
        rooms=[
            RoomRequest("Safari Tent", quantity=3, guests=6),
            RoomRequest("Family Villa", quantity=1, guests=2),
        ],
    )
    amenities = [AmenitySelection(id="spa", unit_price=50.0, quantity=1)]

    quote = quote_stay(selection, RoomInventoryAllocator(_rooms()), amenities, today=TODAY, payment_term="full")

    (error,) = quote.errors
    assert isinstance(error, OverbookingError)
    assert error.room_name == "Safari Tent"
    assert error.available == 2
    assert [item.room_name for item in quote.breakdown.room_breakdown] == ["Family Villa"]
    assert quote.breakdown.subtotal == pytest.approx(2 * 150 * 2 + 50)
    assert quote.schedule is not None
    assert quote.schedule.balance_due_date == TODAY
    assert quote.amount_due_now == pytest.approx(quote.total)


def test_stay_quote_sums_repeated_room_requests_against_availability():
    check_in = TODAY + timedelta(days=40)
    selection = StaySelection(
        check_in=check_in,
        check_out=check_in + timedelta(days=1),
        rooms=[
            RoomRequest("Safari Tent", quantity=2, guests=2),
            RoomRequest("Safari Tent", quantity=1, guests=1),
        ],
    )

    quote = quote_stay(selection, _rooms(), today=TODAY)

    assert [type(error) for error in quote.errors] == [OverbookingError]
    assert quote.breakdown.room_breakdown == []


def test_stay_quote_accepts_check_in_with_time_of_day():
    selection = StaySelection(
        check_in=datetime(2026, 5, 1, 14, 0),
        check_out=datetime(2026, 5, 3, 10, 0),
        rooms=[RoomRequest("Safari Tent", quantity=1, guests=2)],
    )

    quote = quote_stay(selection, _rooms(), today=TODAY)

    assert quote.is_valid
    assert quote.nights == 2
    assert quote.total == pytest.approx(500)
    assert quote.schedule.deposit_due_date == date(2026, 3, 8)
    assert quote.schedule.balance_due_date == date(2026, 4, 1)


def test_package_quote_end_to_end():
    package = Package(id="mara", name="Mara Explorer", price=2000.0, duration="5 Days / 4 Nights")
    start = TODAY + timedelta(days=60)
    amenities = [
        AmenitySelection(id="balloon", unit_price=100.0, quantity=1),
        AmenitySelection(id="dinner", unit_price=25.0, quantity=2),
    ]

    quote = quote_package(PackageSelection(package, start, guests=2), amenities, today=TODAY)

    assert quote.is_valid
    assert quote.warnings == []
    assert quote.check_out == start + timedelta(days=4)
    assert quote.nights == 5
    assert quote.total == pytest.approx(5063)
    assert quote.breakdown.taxes == pytest.approx(498)
    assert quote.package_id == "mara"


def test_package_quote_warns_on_unparseable_duration():
    package = Package(id="day", name="Nairobi Park", price=150.0, duration="Full Day Tour")
    start = TODAY + timedelta(days=3)

    quote = quote_package(PackageSelection(package, start, guests=1), today=TODAY)

    assert quote.is_valid
    (warning,) = quote.warnings
    assert isinstance(warning, UnparseableDurationWarning)
    assert quote.check_out == start
    assert quote.nights == 1


def test_package_quote_without_start_date_warns_once(caplog):
    package = Package(id="day", name="Nairobi Park", price=150.0, duration="Full Day Tour")

    with caplog.at_level(logging.WARNING):
        quote = quote_package(PackageSelection(package, None, guests=1), today=TODAY)

    records = [record for record in caplog.records if record.levelno == logging.WARNING]
    assert len(records) == 1
    assert "Unparseable package duration" in records[0].getMessage()
    assert len(quote.warnings) == 1
    assert quote.nights == 1
    assert quote.check_out is None


def test_package_quote_requires_package_and_start_date():
    quote = quote_package(PackageSelection(None, None, guests=2), today=TODAY)

    assert {type(error) for error in quote.errors} == {EmptySelectionError, InvalidDateRangeError}
    assert quote.total == 0
    assert quote.schedule is None


def test_estimate_guest_mix():
    assert estimate_guest_mix(1) == (1, 0)
    assert estimate_guest_mix(4) == (3, 1)
    assert estimate_guest_mix(10) == (7, 3)
    assert estimate_guest_mix(0) == (1, 0)


def test_booking_payload_for_valid_quote():
    package = Package(id="mara", name="Mara Explorer", price=2000.0, duration="5 Days", property_id="camp-1")
    start = TODAY + timedelta(days=60)
    quote = quote_package(PackageSelection(package, start, guests=4), today=TODAY)

    payload = booking_payload(quote, guest_name="Ada Guest", guest_email="ada@example.com")

    assert payload["booking_type"] == "safari-package"
    assert payload["property_id"] == "camp-1"
    assert payload["check_in"] == start.isoformat()
    assert payload["check_out"] == (start + timedelta(days=4)).isoformat()
    assert payload["adults"] == 3
    assert payload["children"] == 1
    assert payload["status"] == "pending"
    assert payload["total_amount"] == pytest.approx(9760)
    assert payload["balance_due"] == payload["total_amount"]
    assert payload["payment_schedule"]["deposit_amount"] == pytest.approx(2928)


def test_booking_payload_rejects_invalid_quote():
    quote = quote_package(PackageSelection(None, None), today=TODAY)

    with pytest.raises(ValueError):
        booking_payload(quote, guest_name="A", guest_email="a@example.com")


def test_quote_to_dict_is_json_ready():
    check_in = TODAY + timedelta(days=45)
    selection = StaySelection(
        check_in=check_in,
        check_out=check_in + timedelta(days=4),
        rooms=[RoomRequest("Safari Tent", quantity=2, guests=3)],
    )

    data = quote_stay(selection, _rooms(), today=TODAY).to_dict()

    assert data["costs"]["total"] == 1500.0
    assert data["payment_term"] == "deposit"
    assert data["payment_schedule"]["balance_amount"] == 1050.0
    assert data["errors"] == []
