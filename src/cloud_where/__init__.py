"""Query cloud provider regions by place, provider, status and distance."""

from __future__ import annotations

import logging

from .config import settings
from .data.catalog_repository import (
    RegionCatalog,
    clear_catalog_cache,
    get_catalog,
    load_regions,
    set_active_catalog_file,
)
from .errors import ProviderNotFoundError, RegionNotFoundError
from .models.domain import Region, Status, status_name
from .services.collection import RegionSet
from .services.discovery import (
    active_regions,
    by_provider,
    cities,
    continents,
    countries,
    deprecated_regions,
    in_city,
    in_continent,
    in_country,
    near,
    on_provider,
    preview_regions,
    providers,
)
from .services.geospatial import EARTH_RADIUS_KM, haversine_km
from .services.lookup import (
    RegionMatch,
    closest,
    distance_between,
    has,
    has_provider,
    is_active,
    locate,
    locate_all,
    must_locate,
)
from .services.namespaces import By, In, Proximity, Validation
from .services.query import Query, new_query

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


def configure_logging(level: str | None = None) -> None:
    """Set the ``cloud_where`` logger level, defaulting to ``settings.log_level``.

    Importing the package leaves the level alone so the host application's
    logging setup wins unless this is called.
    """
    logger.setLevel(level.upper() if level else settings.log_level)


__all__ = [
    "EARTH_RADIUS_KM",
    "By",
    "In",
    "Proximity",
    "ProviderNotFoundError",
    "Query",
    "Region",
    "RegionCatalog",
    "RegionMatch",
    "RegionNotFoundError",
    "RegionSet",
    "Status",
    "Validation",
    "active_regions",
    "by_provider",
    "cities",
    "clear_catalog_cache",
    "closest",
    "configure_logging",
    "continents",
    "countries",
    "deprecated_regions",
    "distance_between",
    "get_catalog",
    "has",
    "has_provider",
    "haversine_km",
    "in_city",
    "in_continent",
    "in_country",
    "is_active",
    "load_regions",
    "locate",
    "locate_all",
    "must_locate",
    "near",
    "new_query",
    "on_provider",
    "preview_regions",
    "providers",
    "set_active_catalog_file",
    "status_name",
]
