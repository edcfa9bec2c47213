"""Load property and package snapshots from disk."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable, Mapping

from .models import Package, PropertySnapshot

logger = logging.getLogger(__name__)


class Catalog:
    """Point-in-time copy of the properties and packages offered for booking."""

    def __init__(
        self,
        properties: Mapping[str, PropertySnapshot],
        packages: Mapping[str, Package],
        *,
        source: Path | None = None,
    ) -> None:
        self._properties = properties
        self._packages = packages
        self._source = source

    @property
    def source(self) -> Path | None:
        return self._source

    def property(self, property_id: str) -> PropertySnapshot:
        try:
            return self._properties[property_id]
        except KeyError as exc:
            known = ", ".join(sorted(self._properties))
            raise KeyError(f"Property '{property_id}' not found in catalog {self._source}. Known ids: {known}") from exc

    def package(self, package_id: str) -> Package:
        try:
            return self._packages[package_id]
        except KeyError as exc:
            known = ", ".join(sorted(self._packages))
            raise KeyError(f"Package '{package_id}' not found in catalog {self._source}. Known ids: {known}") from exc

    def properties(self) -> Iterable[PropertySnapshot]:
        return self._properties.values()

    def packages(self) -> Iterable[Package]:
        return self._packages.values()

    @classmethod
    def from_dict(cls, data: Mapping[str, object], *, source: Path | None = None) -> "Catalog":
        properties: dict[str, PropertySnapshot] = {}
        for entry in data.get("properties", []) or []:
            snapshot = PropertySnapshot.from_dict(entry)
            properties[snapshot.id] = snapshot
        packages: dict[str, Package] = {}
        for entry in data.get("packages", []) or []:
            package = Package.from_dict(entry)
            packages[package.id] = package
        logger.debug("Loaded %s properties and %s packages", len(properties), len(packages))
        return cls(properties, packages, source=source)

    @classmethod
    def load(cls, path: Path) -> "Catalog":
        if not path.exists():
            raise FileNotFoundError(f"Catalog snapshot not found at {path}")
        return cls.from_dict(json.loads(path.read_text()), source=path)
