from __future__ import annotations

import pytest

from stay_quote.errors import OverbookingError
from stay_quote.inventory import (
    RoomInstance,
    RoomInventoryAllocator,
    RoomSelection,
    RoomType,
    group_by_name,
    validate_quantity,
)


def _tent(room_id: str, *, available: bool = True, images=None, amenities=None) -> RoomInstance:
    return RoomInstance(
        id=room_id,
        name="Safari Tent",
        max_guests=2,
        price=100.0,
        available=available,
        type="tent",
        images=list(images or []),
        amenities=list(amenities or []),
    )


def test_group_by_name_counts_available_and_total_units():
    rooms = [
        _tent("t1"),
        _tent("t2", available=False),
        RoomInstance(id="v1", name="Family Villa", max_guests=4, price=250.0),
        _tent("t3"),
    ]

    groups = group_by_name(rooms)

    assert [group.name for group in groups] == ["Safari Tent", "Family Villa"]
    tents = groups[0]
    assert tents.available_count == 2
    assert tents.total_count == 3
    assert tents.sample_room_id == "t1"
    assert tents.price == 100.0


def test_group_by_name_adopts_last_non_empty_metadata():
    rooms = [
        _tent("t1", images=["first.jpg"], amenities=["Fan"]),
        _tent("t2", images=["second.jpg"]),
        _tent("t3"),
    ]

    (group,) = group_by_name(rooms)

    assert group.images == ["second.jpg"]
    assert group.amenities == ["Fan"]


def test_validate_quantity_rejects_more_than_available():
    (group,) = group_by_name([_tent("t1"), _tent("t2"), _tent("t3", available=False)])

    error = validate_quantity(group, 3)

    assert isinstance(error, OverbookingError)
    assert error.requested == 3
    assert error.available == 2
    assert error.message == "Only 2 Safari Tent rooms are available."


@pytest.mark.parametrize("requested", [0, 1, 2])
def test_validate_quantity_accepts_up_to_available(requested):
    (group,) = group_by_name([_tent("t1"), _tent("t2")])
    assert validate_quantity(group, requested) is None


def test_allocator_reports_zero_for_unknown_room_types():
    allocator = RoomInventoryAllocator([_tent("t1")])

    assert allocator.available_count_for("Safari Tent") == 1
    assert allocator.available_count_for("Treehouse") == 0
    assert allocator.validate("Treehouse", 0) is None
    error = allocator.validate("Treehouse", 1)
    assert isinstance(error, OverbookingError)
    assert error.available == 0


def test_allocator_builds_from_payload_with_camel_case_capacity():
    allocator = RoomInventoryAllocator.from_payload(
        [
            {"id": "r1", "name": "Deluxe", "maxGuests": 3, "price": 80, "available": True},
            {"id": "r2", "name": "Deluxe", "max_guests": 3, "price": 80, "available": False},
        ]
    )

    group = allocator.group("Deluxe")
    assert group is not None
    assert group.max_guests == 3
    room_type = group.as_room_type()
    assert room_type.total_units == 2
    assert room_type.available_units == 1
    assert room_type.price_per_night == 80.0


@pytest.mark.parametrize(
    "raw, expected",
    [("false", False), ("False", False), ("0", False), ("no", False), ("true", True), ("1", True), (None, True), (0, False)],
)
def test_room_instance_reads_availability_flag_strings(raw, expected):
    payload = {"id": "r1", "name": "Safari Tent", "max_guests": 2, "price": 100, "available": raw}

    assert RoomInstance.from_dict(payload).available is expected


def test_room_instance_rejects_unknown_availability_string():
    payload = {"id": "r1", "name": "Safari Tent", "max_guests": 2, "price": 100, "available": "maybe"}

    with pytest.raises(ValueError, match="maybe"):
        RoomInstance.from_dict(payload)


def test_allocator_excludes_rooms_flagged_unavailable_by_string():
    allocator = RoomInventoryAllocator.from_payload(
        [
            {"id": "t1", "name": "Safari Tent", "max_guests": 2, "price": 100, "available": "true"},
            {"id": "t2", "name": "Safari Tent", "max_guests": 2, "price": 100, "available": "false"},
        ]
    )

    assert allocator.available_count_for("Safari Tent") == 1


def test_room_type_rejects_available_above_total():
    with pytest.raises(ValueError):
        RoomType(id="x", name="X", max_guests=2, price_per_night=10, total_units=1, available_units=2)


def test_room_selection_rejects_negative_quantity():
    room_type = RoomType(id="x", name="X", max_guests=2, price_per_night=10, total_units=1, available_units=1)
    with pytest.raises(ValueError):
        RoomSelection(room_type=room_type, quantity=-1, guests=1)
