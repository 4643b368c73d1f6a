"""Catalog-wide discovery and filter shortcuts.

Discovery results are de-duplicated but carry no ordering guarantee; sort
them if a stable order matters.
"""

from __future__ import annotations

from typing import Callable, Optional

from ..data.catalog_repository import RegionCatalog, resolve_catalog
from ..models.domain import Region, Status
from .collection import RegionSet


def _distinct(attribute: Callable[[Region], str], catalog: Optional[RegionCatalog]) -> list[str]:
    return list({attribute(region): None for region in resolve_catalog(catalog)})


def providers(*, catalog: Optional[RegionCatalog] = None) -> list[str]:
    return _distinct(lambda region: region.provider, catalog)


def countries(*, catalog: Optional[RegionCatalog] = None) -> list[str]:
    return _distinct(lambda region: region.country, catalog)


def cities(*, catalog: Optional[RegionCatalog] = None) -> list[str]:
    return _distinct(lambda region: region.city, catalog)


def continents(*, catalog: Optional[RegionCatalog] = None) -> list[str]:
    return _distinct(lambda region: region.continent, catalog)


def in_country(name: str, *, catalog: Optional[RegionCatalog] = None) -> RegionSet:
    return resolve_catalog(catalog).all_regions().by_country(name)


def in_city(name: str, *, catalog: Optional[RegionCatalog] = None) -> RegionSet:
    return resolve_catalog(catalog).all_regions().by_city(name)


def in_continent(name: str, *, catalog: Optional[RegionCatalog] = None) -> RegionSet:
    return resolve_catalog(catalog).all_regions().by_continent(name)


def on_provider(name: str, *, catalog: Optional[RegionCatalog] = None) -> RegionSet:
    return resolve_catalog(catalog).all_regions().on_provider(name)


by_provider = on_provider


def near(lat: float, lng: float, radius_km: float, *, catalog: Optional[RegionCatalog] = None) -> RegionSet:
    return resolve_catalog(catalog).all_regions().near(lat, lng, radius_km)


def active_regions(*, catalog: Optional[RegionCatalog] = None) -> RegionSet:
    return resolve_catalog(catalog).all_regions().by_status(Status.ACTIVE)


def preview_regions(*, catalog: Optional[RegionCatalog] = None) -> RegionSet:
    return resolve_catalog(catalog).all_regions().by_status(Status.PREVIEW)


def deprecated_regions(*, catalog: Optional[RegionCatalog] = None) -> RegionSet:
    return resolve_catalog(catalog).all_regions().by_status(Status.DEPRECATED)
