import pytest

from cloud_where import Query, RegionNotFoundError, RegionSet, new_query
from cloud_where.models.domain import Status


def test_new_query_starts_from_whole_catalog(catalog):
    query = new_query(catalog)

    assert query.count() == len(catalog)
    assert query.has()
    assert query.errors == []


def test_chained_filters_match_direct_set_operations(catalog):
    result = new_query(catalog).in_country("United States").by_provider("aws").active_only().exec()

    assert result
    for region in result:
        assert region.country == "United States"
        assert region.provider == "aws"
        assert region.status == Status.ACTIVE

    direct = catalog.all_regions().by_country("United States").on_provider("aws").active_only()
    assert result == direct


def test_bundled_catalog_chain():
    result = new_query().in_country("Japan").by_provider("aws").active_only().exec()

    assert sorted(result.codes()) == ["ap-northeast-1", "ap-northeast-3"]


def test_continent_shortcuts(catalog):
    assert new_query(catalog).in_asia().codes() == ["ap-northeast-1", "ap-northeast-3", "japaneast"]
    assert new_query(catalog).in_europe().codes() == ["eu-west-1", "eu-central-1"]
    assert new_query(catalog).in_oceania().count() == 0
    assert new_query(catalog).in_africa().count() == 0

    americas = new_query(catalog).in_americas().exec()
    assert "brazilsouth" in americas.codes()
    assert {region.continent for region in americas} == {"North America", "South America"}


def test_provider_shortcuts(catalog):
    assert new_query(catalog).by_azure().codes() == ["japaneast", "westus", "brazilsouth"]
    assert new_query(catalog).by_alibaba().codes() == ["us-east-1"]
    assert new_query(catalog).by_gcp().count() == 0
    assert new_query(catalog).by_aws().providers() == ["aws"]


def test_status_buckets(catalog):
    assert new_query(catalog).preview_only().codes() == ["ap-northeast-3"]
    assert new_query(catalog).deprecated_only().codes() == ["westus", "us-gov-west-1"]


def test_in_city_and_custom_filter(catalog):
    query = new_query(catalog).in_city("tokyo").filter(lambda region: region.provider == "azure")

    assert query.codes() == ["japaneast"]
    assert query.names() == ["Japan East"]


def test_near_region_with_unknown_code_does_not_short_circuit(catalog):
    regions, errors = new_query(catalog).near_region("nonexistent-code", 100).by_provider("aws").exec_with_errors()

    assert len(errors) == 1
    assert isinstance(errors[0], RegionNotFoundError)
    assert regions
    assert regions == catalog.all_regions().on_provider("aws")


def test_near_region_resolves_reference(catalog):
    query = new_query(catalog).near_region("ap-northeast-1", 50)

    assert query.codes() == ["ap-northeast-1", "japaneast"]
    assert query.errors == []


def test_near_city(catalog):
    assert new_query(catalog).near_city("Osaka", 500).codes() == ["ap-northeast-1", "ap-northeast-3", "japaneast"]


def test_near_city_without_regions_empties_result(catalog):
    regions, errors = new_query(catalog).near_city("Atlantis", 10_000).exec_with_errors()

    assert regions == RegionSet()
    assert errors == []


def test_near_point_then_sort_by_distance(catalog):
    result = new_query(catalog).near(50.11, 8.68, 2000).sort_by_distance(50.11, 8.68).exec()

    assert result.codes() == ["eu-central-1", "eu-west-1"]


def test_sorts_chain(catalog):
    names = new_query(catalog).sort_by_name().names()
    assert names == sorted(names)

    providers = [region.provider for region in new_query(catalog).sort_by_provider().exec()]
    assert providers == sorted(providers)

    countries = [region.country for region in new_query(catalog).sort_by_country().exec()]
    assert countries == sorted(countries)


@pytest.mark.parametrize("n, expected", [(0, 0), (2, 2), (11, 11), (50, 11), (-1, 0)])
def test_limit(catalog, n, expected):
    query = new_query(catalog).limit(n)

    assert query.count() == expected
    assert isinstance(query.exec(), RegionSet)


def test_limit_keeps_leading_elements(catalog):
    assert new_query(catalog).sort_by_name().limit(2).codes() == new_query(catalog).sort_by_name().codes()[:2]


def test_first_and_last(catalog):
    query = new_query(catalog).by_azure()

    assert query.first().code == "japaneast"
    assert query.last().code == "brazilsouth"


def test_first_on_empty_result(catalog):
    query = new_query(catalog).in_country("Narnia")

    assert not query.has()
    with pytest.raises(RegionNotFoundError, match="no regions found"):
        query.first()


def test_accumulated_error_takes_priority(catalog):
    query = new_query(catalog).near_region("bogus", 100).near_region("also-bogus", 100)

    assert len(query.errors) == 2
    with pytest.raises(RegionNotFoundError) as excinfo:
        query.first()
    assert excinfo.value.codes == ["bogus"]
    with pytest.raises(RegionNotFoundError) as excinfo:
        query.last()
    assert excinfo.value.codes == ["bogus"]
    # the results themselves are still available
    assert query.count() == len(catalog)


def test_distinct_projections(catalog):
    query = new_query(catalog).in_country("Japan")

    assert sorted(query.providers()) == ["aws", "azure"]
    assert query.countries() == ["Japan"]
    assert sorted(query.cities()) == ["Osaka", "Tokyo"]


def test_query_does_not_touch_catalog(catalog):
    new_query(catalog).sort_by_name()
    new_query(catalog).limit(1)

    assert len(catalog.all_regions()) == len(catalog)
    assert catalog.all_regions().first().code == "us-east-1"


def test_query_uses_default_catalog():
    query = Query()

    assert query.count() > 0
    assert "us-east-1" in query.codes()


def test_near_region_error_has_empty_partial(catalog):
    error = new_query(catalog).near_region("bogus", 10).errors[0]

    assert error.codes == ["bogus"]
    assert error.partial.codes() == []
