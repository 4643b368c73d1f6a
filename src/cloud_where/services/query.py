"""Fluent query builder over the region catalog.

Usage::

    regions = (
        new_query()
        .in_country("Japan")
        .by_provider("aws")
        .active_only()
        .exec()
    )

A query is single-use: it snapshots the catalog when created, narrows that
snapshot step by step and is read by one terminal call. Steps that need to
resolve a region code record failures in ``errors`` instead of raising, so a
bad reference never cuts the chain short.
"""

from __future__ import annotations

from typing import Optional

from ..data.catalog_repository import RegionCatalog, resolve_catalog
from ..errors import RegionNotFoundError
from ..models.domain import Region, Status
from ..constants import (
    CONTINENT_AFRICA,
    CONTINENT_ASIA,
    CONTINENT_EUROPE,
    CONTINENT_NORTH_AMERICA,
    CONTINENT_OCEANIA,
    CONTINENT_SOUTH_AMERICA,
    PROVIDER_ALIBABA,
    PROVIDER_AWS,
    PROVIDER_AZURE,
    PROVIDER_GCP,
    PROVIDER_VK,
    PROVIDER_YANDEX,
)
from .collection import RegionPredicate, RegionSet

_AMERICAS = {CONTINENT_NORTH_AMERICA.casefold(), CONTINENT_SOUTH_AMERICA.casefold()}


class Query:
    """Chainable region query. Not safe to share between threads."""

    def __init__(self, catalog: Optional[RegionCatalog] = None) -> None:
        self._catalog = resolve_catalog(catalog)
        self._regions: RegionSet = self._catalog.all_regions()
        self._errors: list[Exception] = []

    @property
    def errors(self) -> list[Exception]:
        return list(self._errors)

    # Geography

    def in_country(self, name: str) -> Query:
        self._regions = self._regions.by_country(name)
        return self

    def in_city(self, name: str) -> Query:
        self._regions = self._regions.by_city(name)
        return self

    def in_continent(self, name: str) -> Query:
        self._regions = self._regions.by_continent(name)
        return self

    def in_asia(self) -> Query:
        return self.in_continent(CONTINENT_ASIA)

    def in_europe(self) -> Query:
        return self.in_continent(CONTINENT_EUROPE)

    def in_americas(self) -> Query:
        """North and South America, keeping the current order."""
        return self.filter(lambda region: region.continent.casefold() in _AMERICAS)

    def in_oceania(self) -> Query:
        return self.in_continent(CONTINENT_OCEANIA)

    def in_africa(self) -> Query:
        return self.in_continent(CONTINENT_AFRICA)

    # Providers

    def by_provider(self, name: str) -> Query:
        self._regions = self._regions.on_provider(name)
        return self

    def by_aws(self) -> Query:
        return self.by_provider(PROVIDER_AWS)

    def by_azure(self) -> Query:
        return self.by_provider(PROVIDER_AZURE)

    def by_gcp(self) -> Query:
        return self.by_provider(PROVIDER_GCP)

    def by_yandex(self) -> Query:
        return self.by_provider(PROVIDER_YANDEX)

    def by_vk(self) -> Query:
        return self.by_provider(PROVIDER_VK)

    def by_alibaba(self) -> Query:
        return self.by_provider(PROVIDER_ALIBABA)

    # Status

    def active_only(self) -> Query:
        self._regions = self._regions.by_status(Status.ACTIVE)
        return self

    def preview_only(self) -> Query:
        self._regions = self._regions.by_status(Status.PREVIEW)
        return self

    def deprecated_only(self) -> Query:
        self._regions = self._regions.by_status(Status.DEPRECATED)
        return self

    # Proximity

    def near(self, lat: float, lng: float, radius_km: float) -> Query:
        self._regions = self._regions.near(lat, lng, radius_km)
        return self

    def near_region(self, code: str, radius_km: float) -> Query:
        """Keep regions within ``radius_km`` of the region registered under ``code``.

        An unknown code is recorded in ``errors`` and leaves the current
        regions untouched.
        """
        matches = self._catalog.lookup(code)
        if not matches:
            self._errors.append(RegionNotFoundError(f"region not found: {code!r}", codes=[code]))
            return self
        reference = matches[0]
        return self.near(reference.latitude, reference.longitude, radius_km)

    def near_city(self, name: str, radius_km: float) -> Query:
        """Keep regions within ``radius_km`` of the first catalog region in ``name``.

        A city with no cataloged region empties the result; it is not an error.
        """
        city_regions = self._catalog.all_regions().by_city(name)
        if not city_regions:
            self._regions = RegionSet()
            return self
        reference = city_regions[0]
        return self.near(reference.latitude, reference.longitude, radius_km)

    # Generic

    def filter(self, predicate: RegionPredicate) -> Query:
        self._regions = self._regions.filter(predicate)
        return self

    def sort_by_distance(self, lat: float, lng: float) -> Query:
        self._regions.sort_by_distance(lat, lng)
        return self

    def sort_by_name(self) -> Query:
        self._regions.sort_by_name()
        return self

    def sort_by_provider(self) -> Query:
        self._regions.sort_by_provider()
        return self

    def sort_by_country(self) -> Query:
        self._regions.sort_by_country()
        return self

    def limit(self, n: int) -> Query:
        if n < len(self._regions):
            self._regions = self._regions[: max(n, 0)]
        return self

    # Terminals

    def exec(self) -> RegionSet:
        return self._regions

    def exec_with_errors(self) -> tuple[RegionSet, list[Exception]]:
        return self._regions, self.errors

    def first(self) -> Region:
        if self._errors:
            raise self._errors[0]
        return self._regions.first()

    def last(self) -> Region:
        if self._errors:
            raise self._errors[0]
        return self._regions.last()

    def count(self) -> int:
        return len(self._regions)

    def has(self) -> bool:
        return len(self._regions) > 0

    def codes(self) -> list[str]:
        return self._regions.codes()

    def names(self) -> list[str]:
        return self._regions.names()

    def providers(self) -> list[str]:
        return list({region.provider for region in self._regions})

    def countries(self) -> list[str]:
        return list({region.country for region in self._regions})

    def cities(self) -> list[str]:
        return list({region.city for region in self._regions})

    def __repr__(self) -> str:
        return f"Query(regions={len(self._regions)}, errors={len(self._errors)})"


def new_query(catalog: Optional[RegionCatalog] = None) -> Query:
    """Start a query from every region in ``catalog`` (the default catalog if omitted)."""
    return Query(catalog)
