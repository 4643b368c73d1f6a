"""Grouped, read-aloud shortcuts: ``In.asia()``, ``By.aws()``, ``Proximity.city(...)``.

The classes hold no state; every method is static and forwards to the
lookup and discovery functions.
"""

from __future__ import annotations

from typing import Optional

from ..data.catalog_repository import RegionCatalog, resolve_catalog
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
from . import discovery, lookup
from .collection import RegionSet


class In:
    """Geographic queries."""

    @staticmethod
    def asia(*, catalog: Optional[RegionCatalog] = None) -> RegionSet:
        return discovery.in_continent(CONTINENT_ASIA, catalog=catalog)

    @staticmethod
    def europe(*, catalog: Optional[RegionCatalog] = None) -> RegionSet:
        return discovery.in_continent(CONTINENT_EUROPE, catalog=catalog)

    @staticmethod
    def americas(*, catalog: Optional[RegionCatalog] = None) -> RegionSet:
        """North America followed by South America."""
        americas = discovery.in_continent(CONTINENT_NORTH_AMERICA, catalog=catalog)
        americas.extend(discovery.in_continent(CONTINENT_SOUTH_AMERICA, catalog=catalog))
        return americas

    @staticmethod
    def oceania(*, catalog: Optional[RegionCatalog] = None) -> RegionSet:
        return discovery.in_continent(CONTINENT_OCEANIA, catalog=catalog)

    @staticmethod
    def africa(*, catalog: Optional[RegionCatalog] = None) -> RegionSet:
        return discovery.in_continent(CONTINENT_AFRICA, catalog=catalog)

    @staticmethod
    def country(name: str, *, catalog: Optional[RegionCatalog] = None) -> RegionSet:
        return discovery.in_country(name, catalog=catalog)

    @staticmethod
    def city(name: str, *, catalog: Optional[RegionCatalog] = None) -> RegionSet:
        return discovery.in_city(name, catalog=catalog)

    @staticmethod
    def continent(name: str, *, catalog: Optional[RegionCatalog] = None) -> RegionSet:
        return discovery.in_continent(name, catalog=catalog)


class By:
    """Provider queries."""

    @staticmethod
    def aws(*, catalog: Optional[RegionCatalog] = None) -> RegionSet:
        return discovery.on_provider(PROVIDER_AWS, catalog=catalog)

    @staticmethod
    def azure(*, catalog: Optional[RegionCatalog] = None) -> RegionSet:
        return discovery.on_provider(PROVIDER_AZURE, catalog=catalog)

    @staticmethod
    def gcp(*, catalog: Optional[RegionCatalog] = None) -> RegionSet:
        return discovery.on_provider(PROVIDER_GCP, catalog=catalog)

    @staticmethod
    def yandex(*, catalog: Optional[RegionCatalog] = None) -> RegionSet:
        return discovery.on_provider(PROVIDER_YANDEX, catalog=catalog)

    @staticmethod
    def vk(*, catalog: Optional[RegionCatalog] = None) -> RegionSet:
        return discovery.on_provider(PROVIDER_VK, catalog=catalog)

    @staticmethod
    def alibaba(*, catalog: Optional[RegionCatalog] = None) -> RegionSet:
        return discovery.on_provider(PROVIDER_ALIBABA, catalog=catalog)

    @staticmethod
    def provider(name: str, *, catalog: Optional[RegionCatalog] = None) -> RegionSet:
        return discovery.on_provider(name, catalog=catalog)


class Validation:
    """Status buckets and code validation."""

    @staticmethod
    def active(*, catalog: Optional[RegionCatalog] = None) -> RegionSet:
        return discovery.active_regions(catalog=catalog)

    @staticmethod
    def preview(*, catalog: Optional[RegionCatalog] = None) -> RegionSet:
        return discovery.preview_regions(catalog=catalog)

    @staticmethod
    def deprecated(*, catalog: Optional[RegionCatalog] = None) -> RegionSet:
        return discovery.deprecated_regions(catalog=catalog)

    @staticmethod
    def valid(code: str, *, catalog: Optional[RegionCatalog] = None) -> bool:
        return lookup.has(code, catalog=catalog)

    has = valid


class Proximity:
    """Radius queries around a point, a region or a city."""

    @staticmethod
    def location(lat: float, lng: float, radius_km: float, *, catalog: Optional[RegionCatalog] = None) -> RegionSet:
        return discovery.near(lat, lng, radius_km, catalog=catalog)

    @staticmethod
    def region(code: str, radius_km: float, *, catalog: Optional[RegionCatalog] = None) -> RegionSet:
        """Regions around the first region registered under ``code``; unknown codes raise."""
        source = resolve_catalog(catalog)
        reference = lookup.must_locate(code, catalog=source)
        return discovery.near(reference.latitude, reference.longitude, radius_km, catalog=source)

    @staticmethod
    def city(name: str, radius_km: float, *, catalog: Optional[RegionCatalog] = None) -> RegionSet:
        source = resolve_catalog(catalog)
        city_regions = discovery.in_city(name, catalog=source)
        if not city_regions:
            return RegionSet()
        reference = city_regions[0]
        return discovery.near(reference.latitude, reference.longitude, radius_km, catalog=source)
