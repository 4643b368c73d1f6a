"""Identity lookups: resolve codes to regions and compute derived distances."""

from __future__ import annotations

from typing import Optional, Sequence

from ..data.catalog_repository import RegionCatalog, resolve_catalog
from ..errors import ProviderNotFoundError, RegionNotFoundError
from ..models.domain import Region
from ..constants import PROVIDER_ALIBABA, PROVIDER_AWS, PROVIDER_AZURE, PROVIDER_GCP, PROVIDER_VK, PROVIDER_YANDEX
from .collection import RegionSet


class RegionMatch:
    """Every region sharing one code, narrowed down by provider on demand.

    ``locate("us-east-1").on_aws()`` picks the AWS region when another
    provider reuses the same code.
    """

    def __init__(self, code: str, regions: Sequence[Region]):
        self.code = code
        self.regions = tuple(regions)

    def first(self) -> Region:
        if not self.regions:
            raise RegionNotFoundError(f"region not found: {self.code!r}", codes=[self.code])
        return self.regions[0]

    def all(self) -> tuple[Region, ...]:
        return self.regions

    def on_provider(self, provider: str) -> Region:
        wanted = provider.casefold()
        for region in self.regions:
            if region.provider.casefold() == wanted:
                return region
        raise ProviderNotFoundError(provider, codes=[self.code])

    def on_aws(self) -> Region:
        return self.on_provider(PROVIDER_AWS)

    def on_azure(self) -> Region:
        return self.on_provider(PROVIDER_AZURE)

    def on_gcp(self) -> Region:
        return self.on_provider(PROVIDER_GCP)

    def on_alibaba(self) -> Region:
        return self.on_provider(PROVIDER_ALIBABA)

    def on_yandex(self) -> Region:
        return self.on_provider(PROVIDER_YANDEX)

    def on_vk(self) -> Region:
        return self.on_provider(PROVIDER_VK)

    def __bool__(self) -> bool:
        return bool(self.regions)

    def __len__(self) -> int:
        return len(self.regions)

    def __repr__(self) -> str:
        return f"RegionMatch(code={self.code!r}, regions={len(self.regions)})"


def locate(code: str, *, catalog: Optional[RegionCatalog] = None) -> RegionMatch:
    """Answer "where is <code>?". Unknown codes yield an empty match, not an error."""
    return RegionMatch(code, resolve_catalog(catalog).lookup(code))


def must_locate(code: str, *, catalog: Optional[RegionCatalog] = None) -> Region:
    """Return the first region for ``code``.

    For call sites that know the code exists: the ``RegionNotFoundError`` is
    meant to propagate as a programming error rather than be handled.
    """
    return locate(code, catalog=catalog).first()


def locate_all(*codes: str, catalog: Optional[RegionCatalog] = None) -> RegionSet:
    """Resolve several codes at once.

    Every region registered under each code is returned. If any code is
    unknown a single ``RegionNotFoundError`` lists all of them, with the
    regions that did resolve attached as ``partial``.
    """
    source = resolve_catalog(catalog)
    regions = RegionSet()
    not_found: list[str] = []
    for code in codes:
        matches = source.lookup(code)
        if matches:
            regions.extend(matches)
        else:
            not_found.append(code)

    if not_found:
        raise RegionNotFoundError(
            f"region not found: {not_found}",
            codes=not_found,
            partial=regions,
        )
    return regions


def has(code: str, *, catalog: Optional[RegionCatalog] = None) -> bool:
    return code in resolve_catalog(catalog)


def is_active(code: str, *, catalog: Optional[RegionCatalog] = None) -> bool:
    """True if any region registered under ``code`` is active."""
    return any(region.is_active() for region in resolve_catalog(catalog).lookup(code))


def has_provider(name: str, *, catalog: Optional[RegionCatalog] = None) -> bool:
    wanted = name.casefold()
    return any(region.provider.casefold() == wanted for region in resolve_catalog(catalog))


def distance_between(from_code: str, to_code: str, *, catalog: Optional[RegionCatalog] = None) -> float:
    """Distance in kilometers between the first regions registered under two codes."""
    source = resolve_catalog(catalog)
    try:
        origin = locate(from_code, catalog=source).first()
    except RegionNotFoundError as exc:
        raise RegionNotFoundError(f"source {exc}", codes=exc.codes) from exc
    try:
        destination = locate(to_code, catalog=source).first()
    except RegionNotFoundError as exc:
        raise RegionNotFoundError(f"destination {exc}", codes=exc.codes) from exc
    return origin.distance(destination)


def closest(to_code: str, *, catalog: Optional[RegionCatalog] = None) -> Region:
    """Nearest region to ``to_code`` whose code differs from it."""
    source = resolve_catalog(catalog)
    target = locate(to_code, catalog=source).first()

    candidates = [region for region in source if region.code != to_code]
    if not candidates:
        raise RegionNotFoundError("no other regions found", codes=[to_code])
    return min(candidates, key=target.distance)
