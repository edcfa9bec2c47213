"""Property and package snapshots."""

from .models import Package, PropertySnapshot
from .snapshot import Catalog

__all__ = ["Catalog", "Package", "PropertySnapshot"]
