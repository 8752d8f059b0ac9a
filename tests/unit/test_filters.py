import pytest

from api.models import Venue
from listing.filters import (
    VenueFilters,
    apply_filters,
    contains_text,
    equals,
    filter_venues,
    sort_items,
    sort_venues,
    unique_cities,
    unique_districts,
    view_venues,
)


def venue(name, city, price, rating, district=""):
    return Venue(id=name.lower(), name=name, city=city, district=district, price_per_hour=price, average_rating=rating)


@pytest.fixture
def venues():
    return [
        venue("A", "X", 100, 4.5, district="North"),
        venue("B", "X", 50, 3.0, district="South"),
        venue("C", "Y", 75, 5.0, district="Center"),
    ]


def test_city_filter_then_price_sort(venues):
    result = view_venues(venues, VenueFilters(city="X", sort_by="price-low"))

    assert [item.name for item in result] == ["B", "A"]


def test_rating_sort_on_unfiltered_list(venues):
    result = sort_venues(venues, "rating")

    assert [item.name for item in result] == ["C", "A", "B"]


def test_filters_are_conjunctive_and_idempotent(venues):
    filters = VenueFilters(search="a", city="X", district="North")

    once = filter_venues(venues, filters)
    twice = filter_venues(once, filters)

    assert [item.name for item in once] == ["A"]
    assert once == twice


def test_empty_filters_keep_everything(venues):
    assert filter_venues(venues, VenueFilters()) == venues


def test_search_is_case_insensitive(venues):
    assert [item.name for item in filter_venues(venues, VenueFilters(search="cEnTeR"))] == ["C"]


def test_sort_is_stable_for_equal_keys():
    items = [venue("Beta", "X", 50, 4.0), venue("Alpha", "X", 50, 4.0), venue("Gamma", "X", 20, 4.0)]

    result = sort_venues(items, "price-low")

    assert [item.name for item in result] == ["Gamma", "Beta", "Alpha"]


def test_sort_items_puts_missing_keys_last():
    rows = [{"v": None, "id": 1}, {"v": 2, "id": 2}, {"v": 1, "id": 3}]

    result = sort_items(rows, lambda row: row["v"], descending=True)

    assert [row["id"] for row in result] == [2, 3, 1]


def test_unknown_sort_key_is_rejected(venues):
    with pytest.raises(ValueError):
        sort_venues(venues, "distance")


def test_changing_city_clears_district():
    filters = VenueFilters(city="X", district="North")

    assert filters.with_changes(city="Y").district == ""
    assert filters.with_changes(city="X").district == "North"
    assert filters.with_changes(search="arena").district == "North"


def test_option_lists(venues):
    assert unique_cities(venues) == ["X", "Y"]
    assert unique_districts(venues, city="X") == ["North", "South"]


def test_unset_predicates_match_everything():
    assert contains_text("  ", lambda item: item) is None
    assert equals("", lambda item: item) is None
    assert apply_filters([1, 2, 3], [None, lambda item: item > 1]) == [2, 3]


def test_price_and_rating_sorts_put_unknown_values_last():
    items = [
        venue("NoPrice", "X", None, 4.0),
        venue("Cheap", "X", 50, None),
        venue("Dear", "X", 150, 3.5),
    ]

    assert [item.name for item in sort_venues(items, "price-low")] == ["Cheap", "Dear", "NoPrice"]
    assert [item.name for item in sort_venues(items, "price-high")] == ["Dear", "Cheap", "NoPrice"]
    assert [item.name for item in sort_venues(items, "rating")] == ["NoPrice", "Dear", "Cheap"]
