"""Region catalog: a read-only code lookup plus the loaders that populate it."""

from __future__ import annotations

import csv
import functools
import logging
from pathlib import Path
from typing import Any, Iterable, Iterator, Optional

from openpyxl import load_workbook
from pydantic import ValidationError

from ..config import settings
from ..models.domain import Region
from ..schemas.catalog import RegionRow
from ..services.collection import RegionSet

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = frozenset({"code", "provider", "latitude", "longitude"})


class RegionCatalog:
    """Read-only mapping from region code to every region sharing that code.

    One code can be used by more than one provider, so lookups return a
    tuple ordered by first appearance in the source data.
    """

    def __init__(self, regions: Iterable[Region] = ()) -> None:
        grouped: dict[str, list[Region]] = {}
        for region in regions:
            grouped.setdefault(region.code, []).append(region)
        self._by_code: dict[str, tuple[Region, ...]] = {code: tuple(items) for code, items in grouped.items()}
        self._size = sum(len(items) for items in self._by_code.values())

    def lookup(self, code: str) -> tuple[Region, ...]:
        return self._by_code.get(code, ())

    def all_regions(self) -> RegionSet:
        """Return a fresh RegionSet of every cataloged region."""
        return RegionSet(region for items in self._by_code.values() for region in items)

    def codes(self) -> list[str]:
        return list(self._by_code)

    def __contains__(self, code: object) -> bool:
        return code in self._by_code

    def __iter__(self) -> Iterator[Region]:
        for items in self._by_code.values():
            yield from items

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"RegionCatalog(codes={len(self._by_code)}, regions={self._size})"


def _normalize_header(value: Any) -> str:
    return str(value or "").strip().lower().replace(" ", "_")


def _rows_from_csv(path: Path) -> Iterator[dict[str, Any]]:
    with path.open(mode="r", encoding="utf-8-sig", newline="") as handle:
        reader = csv.DictReader(handle)
        if not reader.fieldnames:
            raise ValueError(f"Catalog file '{path}' is missing a header row.")
        header = [_normalize_header(name) for name in reader.fieldnames]
        _check_columns(path, header)
        for row in reader:
            yield {_normalize_header(key): value for key, value in row.items() if key is not None}


def _rows_from_workbook(path: Path) -> Iterator[dict[str, Any]]:
    wb = load_workbook(path, data_only=True, read_only=True)
    try:
        sheet = wb.active
        rows = sheet.iter_rows(min_row=1, values_only=True)
        header = next(rows, None)
        if header is None:
            raise ValueError(f"Catalog workbook '{path}' is empty.")
        names = [_normalize_header(name) for name in header]
        _check_columns(path, names)
        for row in rows:
            if not any(cell is not None for cell in row):
                continue
            yield dict(zip(names, row))
    finally:
        wb.close()


def _check_columns(path: Path, header: Iterable[str]) -> None:
    missing_columns = REQUIRED_COLUMNS - set(header)
    if missing_columns:
        raise ValueError(f"Catalog file '{path}' missing columns: {', '.join(sorted(missing_columns))}")


def _iter_rows(path: Path) -> Iterator[dict[str, Any]]:
    if path.suffix.lower() in {".xlsx", ".xlsm"}:
        return _rows_from_workbook(path)
    return _rows_from_csv(path)


@functools.lru_cache(maxsize=4)
def load_regions(source: Optional[Path] = None) -> tuple[Region, ...]:
    """Load regions from the configured catalog file, skipping invalid rows."""

    catalog_path = (source or settings.catalog_file)
    if not catalog_path.exists():
        raise FileNotFoundError(f"Catalog file not found: {catalog_path}")

    regions: list[Region] = []
    for line_number, row in enumerate(_iter_rows(catalog_path), start=2):
        try:
            regions.append(RegionRow.model_validate(row).to_region())
        except ValidationError as exc:
            logger.warning(
                "Skipping invalid catalog row %s in %s: %s",
                line_number,
                catalog_path.name,
                exc.errors(include_url=False),
            )
    logger.info("Loaded %d regions from %s", len(regions), catalog_path)
    return tuple(regions)


@functools.lru_cache(maxsize=1)
def get_catalog() -> RegionCatalog:
    """Default catalog built from settings. Cache is cleared by ``clear_catalog_cache``."""
    regions = load_regions()
    if settings.default_providers:
        allowed = set(settings.default_providers)
        regions = tuple(region for region in regions if region.provider in allowed)
    return RegionCatalog(regions)


def resolve_catalog(catalog: Optional[RegionCatalog] = None) -> RegionCatalog:
    return catalog if catalog is not None else get_catalog()


def clear_catalog_cache() -> None:
    """Forget loaded catalog data so the next call re-reads the source file."""
    load_regions.cache_clear()
    get_catalog.cache_clear()
    logger.debug("Catalog caches cleared")


def set_active_catalog_file(path: Path) -> None:
    """Point the default catalog at another file and clear related caches."""

    settings.catalog_file = path
    clear_catalog_cache()
