"""Add-on totals shared by stay and package quotes."""
from __future__ import annotations

from typing import Iterable

from .models import AmenitySelection


def total_for(selections: Iterable[AmenitySelection]) -> float:
    return sum((selection.line_total for selection in selections), 0.0)
