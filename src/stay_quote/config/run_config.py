"""User-friendly quote request loader for manual runs."""
from __future__ import annotations

import re
import tomllib
from datetime import date, timedelta
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from stay_quote.catalog.snapshot import Catalog
from stay_quote.payments.schedule import PaymentTerm
from stay_quote.pricing.models import AmenitySelection
from stay_quote.quotes.models import PackageSelection, RoomRequest, StaySelection

if TYPE_CHECKING:  # pragma: no cover
    from stay_quote.config.settings import Settings

_RELATIVE_DATE = re.compile(r"^(?P<count>\d+)\s*(?P<unit>[dwm])$")
_UNIT_DAYS = {"d": 1, "w": 7, "m": 30}


class RoomSection(BaseModel):
    name: str
    quantity: int = Field(default=1, ge=0)
    guests: int = Field(default=1, ge=0)


class StaySection(BaseModel):
    """Property stay decoded from the request file."""

    property_id: str
    check_in: Optional[str] = Field(default=None, description="ISO date or relative offset such as '+14d'")
    check_out: Optional[str] = None
    rooms: list[RoomSection] = Field(default_factory=list)


class PackageSection(BaseModel):
    package_id: str
    start_date: Optional[str] = None
    guests: int = Field(default=1, ge=0)


class AmenitySection(BaseModel):
    id: str
    name: Optional[str] = None
    unit_price: float = Field(ge=0)
    quantity: int = Field(default=1, ge=0)


class LoggingSection(BaseModel):
    level: Optional[str] = None
    log_dir: Optional[str] = None


class QuoteRequestConfig(BaseModel):
    """Top-level quote request decoded from TOML."""

    title: Optional[str] = None
    today: Optional[str] = Field(default=None, description="Override the reference date for due dates")
    payment_term: PaymentTerm = PaymentTerm.DEPOSIT
    stay: Optional[StaySection] = None
    package: Optional[PackageSection] = None
    amenities: list[AmenitySection] = Field(default_factory=list)
    logging: Optional[LoggingSection] = None

    @field_validator("payment_term", mode="before")
    @classmethod
    def _lower_term(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @model_validator(mode="after")
    def _exactly_one_booking(self) -> "QuoteRequestConfig":
        if (self.stay is None) == (self.package is None):
            raise ValueError("quote request requires exactly one of [stay] or [package]")
        return self

    @classmethod
    def load(cls, path: Path) -> "QuoteRequestConfig":
        """Load a request from a TOML file."""
        data = tomllib.loads(path.read_text())
        return cls.model_validate(data)

    # Public API -----------------------------------------------------------------

    def apply_to(self, settings: "Settings", *, base_dir: Optional[Path] = None) -> None:
        """Apply logging overrides to an existing Settings instance."""
        section = self.logging
        if not section:
            return
        if section.level:
            settings.log_level = section.level
        if section.log_dir:
            settings.log_dir = _resolve_path(section.log_dir, base_dir)

    def reference_date(self) -> date:
        return _parse_date(self.today) if self.today else date.today()

    def amenity_selections(self) -> list[AmenitySelection]:
        return [
            AmenitySelection(id=item.id, name=item.name, unit_price=item.unit_price, quantity=item.quantity)
            for item in self.amenities
        ]

    def stay_selection(self) -> StaySelection:
        if self.stay is None:
            raise ValueError("quote request has no [stay] section")
        stay = self.stay
        return StaySelection(
            check_in=_parse_date(stay.check_in, today=self.reference_date()) if stay.check_in else None,
            check_out=_parse_date(stay.check_out, today=self.reference_date()) if stay.check_out else None,
            rooms=[RoomRequest(room_name=room.name, quantity=room.quantity, guests=room.guests) for room in stay.rooms],
            property_id=stay.property_id,
        )

    def package_selection(self, catalog: Catalog) -> PackageSelection:
        if self.package is None:
            raise ValueError("quote request has no [package] section")
        section = self.package
        start = _parse_date(section.start_date, today=self.reference_date()) if section.start_date else None
        return PackageSelection(
            package=catalog.package(section.package_id),
            start_date=start,
            guests=section.guests,
        )


def _resolve_path(raw: str, base_dir: Optional[Path]) -> Path:
    path = Path(raw).expanduser()
    if not path.is_absolute() and base_dir:
        return (base_dir / path).resolve()
    return path


def _relative_offset(spec: str, original: str) -> timedelta:
    match = _RELATIVE_DATE.match(spec)
    if not match:
        raise ValueError(
            f"Unsupported relative date format '{original}'. Use forms like '+14d', '+2w', '+1m'."
        )
    # A month counts as 30 days.
    return timedelta(days=int(match.group("count")) * _UNIT_DAYS[match.group("unit").lower()])


def _parse_date(value: str, *, today: Optional[date] = None) -> date:
    """Resolve ``today``, ``today+N<unit>``, ``+N<unit>`` or an ISO date."""
    anchor = today or date.today()
    cleaned = value.strip().lower()
    if cleaned.startswith("today"):
        cleaned = cleaned[len("today"):].strip()
        if not cleaned:
            return anchor
    if cleaned.startswith("+"):
        return anchor + _relative_offset(cleaned[1:].strip(), value)
    try:
        return date.fromisoformat(cleaned)
    except ValueError as exc:
        raise ValueError(
            f"Invalid date '{value}'. Provide ISO format (YYYY-MM-DD) or a relative offset."
        ) from exc


__all__ = ["QuoteRequestConfig"]
