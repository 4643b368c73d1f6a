import pytest

from cloud_where import RegionCatalog, clear_catalog_cache

from factories import SAMPLE_REGIONS


@pytest.fixture
def catalog() -> RegionCatalog:
    return RegionCatalog(SAMPLE_REGIONS)


@pytest.fixture(autouse=True)
def clear_default_catalog():
    clear_catalog_cache()
    yield
    clear_catalog_cache()
