"""Validation errors reported alongside a quote.

These are exceptions so that a strict caller may raise them, but the engine
itself returns them as values so every problem can be shown at once.
"""
from __future__ import annotations


class QuoteError(Exception):
    """Base class for quote validation problems."""

    code = "quote_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, object]:
        return {"code": self.code, "message": self.message}


class OverbookingError(QuoteError):
    """Requested more units of a room type than are currently available."""

    code = "overbooking"

    def __init__(self, room_name: str, requested: int, available: int) -> None:
        plural = "" if available == 1 else "s"
        verb = "is" if available == 1 else "are"
        super().__init__(f"Only {available} {room_name} room{plural} {verb} available.")
        self.room_name = room_name
        self.requested = requested
        self.available = available

    def to_dict(self) -> dict[str, object]:
        data = super().to_dict()
        data.update(
            {
                "room_name": self.room_name,
                "requested": self.requested,
                "available": self.available,
            }
        )
        return data


class InvalidDateRangeError(QuoteError):
    code = "invalid_date_range"


class EmptySelectionError(QuoteError):
    code = "empty_selection"


class UnparseableDurationWarning(UserWarning):
    """A package duration label had no leading day count; one day was assumed."""

    code = "unparseable_duration"

    def __init__(self, label: str, default_days: int = 1) -> None:
        super().__init__(
            f"Could not read a day count from duration '{label}'; assuming {default_days} day(s)"
        )
        self.label = label
        self.default_days = default_days

    def to_dict(self) -> dict[str, object]:
        return {
            "code": self.code,
            "message": str(self),
            "label": self.label,
            "default_days": self.default_days,
        }


__all__ = [
    "EmptySelectionError",
    "InvalidDateRangeError",
    "OverbookingError",
    "QuoteError",
    "UnparseableDurationWarning",
]
