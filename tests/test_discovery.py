import pytest

from cloud_where import (
    By,
    In,
    Proximity,
    RegionNotFoundError,
    Validation,
    active_regions,
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


def test_discovery_is_distinct_without_order_guarantee(catalog):
    # callers sort when they need a deterministic order
    assert sorted(providers(catalog=catalog)) == ["alibaba", "aws", "azure"]
    assert sorted(countries(catalog=catalog)) == ["Brazil", "Germany", "Ireland", "Japan", "United States"]
    assert sorted(continents(catalog=catalog)) == ["Asia", "Europe", "North America", "South America"]
    found_cities = cities(catalog=catalog)
    assert len(found_cities) == len(set(found_cities))
    assert {"Tokyo", "Osaka", "Boardman"} <= set(found_cities)


def test_filter_shortcuts(catalog):
    assert in_country("Germany", catalog=catalog).codes() == ["eu-central-1"]
    assert in_city("boardman", catalog=catalog).codes() == ["us-west-2", "us-gov-west-1"]
    assert in_continent("Asia", catalog=catalog).codes() == ["ap-northeast-1", "ap-northeast-3", "japaneast"]
    assert on_provider("alibaba", catalog=catalog).codes() == ["us-east-1"]
    assert near(53.35, -6.26, 10, catalog=catalog).codes() == ["eu-west-1"]


def test_status_shortcuts(catalog):
    total = len(active_regions(catalog=catalog)) + len(preview_regions(catalog=catalog)) + len(deprecated_regions(catalog=catalog))

    assert total == len(catalog)
    assert preview_regions(catalog=catalog).codes() == ["ap-northeast-3"]


def test_empty_results_are_not_errors(catalog):
    assert in_country("Atlantis", catalog=catalog) == []
    assert on_provider("oracle", catalog=catalog) == []


def test_bundled_discovery():
    assert {"aws", "azure", "gcp", "yandex", "vk", "alibaba"} == set(providers())
    assert "Japan" in countries()
    assert set(continents()) == {"Asia", "Europe", "North America", "South America", "Oceania", "Africa"}


def test_in_namespace(catalog):
    assert In.asia(catalog=catalog) == in_continent("Asia", catalog=catalog)
    assert In.europe(catalog=catalog).codes() == ["eu-west-1", "eu-central-1"]
    assert In.country("Japan", catalog=catalog) == in_country("Japan", catalog=catalog)
    assert In.city("Tokyo", catalog=catalog).codes() == ["ap-northeast-1", "japaneast"]
    assert In.continent("asia", catalog=catalog) == In.asia(catalog=catalog)
    assert In.oceania(catalog=catalog) == []
    assert In.africa(catalog=catalog) == []


def test_in_americas_lists_north_then_south(catalog):
    americas = In.americas(catalog=catalog)

    assert americas.last().code == "brazilsouth"
    assert len(americas) == len(in_continent("North America", catalog=catalog)) + 1


def test_by_namespace(catalog):
    assert By.aws(catalog=catalog) == on_provider("aws", catalog=catalog)
    assert By.azure(catalog=catalog).codes() == ["japaneast", "westus", "brazilsouth"]
    assert By.alibaba(catalog=catalog).codes() == ["us-east-1"]
    assert By.provider("AZURE", catalog=catalog) == By.azure(catalog=catalog)
    assert By.gcp(catalog=catalog) == []
    assert By.yandex(catalog=catalog) == []
    assert By.vk(catalog=catalog) == []


def test_validation_namespace(catalog):
    assert Validation.active(catalog=catalog) == active_regions(catalog=catalog)
    assert Validation.preview(catalog=catalog).codes() == ["ap-northeast-3"]
    assert Validation.deprecated(catalog=catalog).codes() == ["westus", "us-gov-west-1"]
    assert Validation.valid("us-east-1", catalog=catalog)
    assert Validation.has("eu-west-1", catalog=catalog)
    assert not Validation.valid("bogus", catalog=catalog)


def test_proximity_namespace(catalog):
    assert Proximity.location(35.68, 139.65, 50, catalog=catalog).codes() == ["ap-northeast-1", "japaneast"]
    assert Proximity.region("ap-northeast-1", 50, catalog=catalog).codes() == ["ap-northeast-1", "japaneast"]
    assert Proximity.city("Dublin", 1500, catalog=catalog).codes() == ["eu-west-1", "eu-central-1"]
    assert Proximity.city("Atlantis", 1500, catalog=catalog) == []


def test_proximity_region_with_unknown_code(catalog):
    with pytest.raises(RegionNotFoundError):
        Proximity.region("bogus", 100, catalog=catalog)


def test_providers_is_callable_from_package(catalog):
    import cloud_where

    assert callable(cloud_where.providers)
    assert sorted(cloud_where.providers(catalog=catalog)) == ["alibaba", "aws", "azure"]
