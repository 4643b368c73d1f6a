"""Ordered region collections with filters, code-keyed set algebra and sorts."""

from __future__ import annotations

from typing import Callable, Iterable

from ..errors import RegionNotFoundError
from ..models.domain import Region, Status
from .geospatial import haversine_km

RegionPredicate = Callable[[Region], bool]


def _same_text(left: str, right: str) -> bool:
    return left.casefold() == right.casefold()


class RegionSet(list):
    """An ordered sequence of regions.

    Not a mathematical set: duplicates by code are allowed and insertion
    order is kept until one of the ``sort_by_*`` methods is called. Filters
    and the algebra methods return new sets; sorts reorder in place.
    """

    def filter(self, predicate: RegionPredicate) -> RegionSet:
        return RegionSet(region for region in self if predicate(region))

    def on_provider(self, name: str) -> RegionSet:
        return self.filter(lambda region: _same_text(region.provider, name))

    by_provider = on_provider

    def by_country(self, name: str) -> RegionSet:
        return self.filter(lambda region: _same_text(region.country, name))

    def by_city(self, name: str) -> RegionSet:
        return self.filter(lambda region: _same_text(region.city, name))

    def by_continent(self, name: str) -> RegionSet:
        return self.filter(lambda region: _same_text(region.continent, name))

    def by_status(self, status: Status) -> RegionSet:
        return self.filter(lambda region: region.status == status)

    def active_only(self) -> RegionSet:
        return self.by_status(Status.ACTIVE)

    def preview_only(self) -> RegionSet:
        return self.by_status(Status.PREVIEW)

    def deprecated_only(self) -> RegionSet:
        return self.by_status(Status.DEPRECATED)

    def near(self, lat: float, lng: float, radius_km: float) -> RegionSet:
        return self.filter(lambda region: region.is_near(lat, lng, radius_km))

    def first(self) -> Region:
        if not self:
            raise RegionNotFoundError("no regions found")
        return self[0]

    def last(self) -> Region:
        if not self:
            raise RegionNotFoundError("no regions found")
        return self[-1]

    def union(self, other: Iterable[Region]) -> RegionSet:
        seen: set[str] = set()
        result = RegionSet()
        for source in (self, other):
            for region in source:
                if region.code in seen:
                    continue
                seen.add(region.code)
                result.append(region)
        return result

    def intersect(self, other: Iterable[Region]) -> RegionSet:
        other_codes = {region.code for region in other}
        return self.filter(lambda region: region.code in other_codes)

    def difference(self, other: Iterable[Region]) -> RegionSet:
        other_codes = {region.code for region in other}
        return self.filter(lambda region: region.code not in other_codes)

    def sort_by_distance(self, lat: float, lng: float) -> None:
        self.sort(key=lambda region: haversine_km(lat, lng, region.latitude, region.longitude))

    def sort_by_name(self) -> None:
        self.sort(key=lambda region: region.name)

    def sort_by_provider(self) -> None:
        self.sort(key=lambda region: region.provider)

    def sort_by_country(self) -> None:
        self.sort(key=lambda region: region.country)

    def codes(self) -> list[str]:
        return [region.code for region in self]

    def names(self) -> list[str]:
        return [region.name for region in self]

    def __getitem__(self, index):
        result = super().__getitem__(index)
        if isinstance(index, slice):
            return RegionSet(result)
        return result

    def __repr__(self) -> str:
        return f"RegionSet({super().__repr__()})"
