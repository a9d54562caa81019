"""Unit tests for cafe search."""

import json
from unittest.mock import patch

from cafefinder.cafes.catalog import CatalogError
from cafefinder.cafes.search import (
    _cafe_get,
    _cafe_search,
    cafe_link,
    cafe_name,
    get_cafe,
    search_cafes,
)
from cafefinder.preferences.models import UserPreferences


def _ids(result):
    return [r.id for r in result.results]


class TestSearchCafes:
    """Tests for search_cafes."""

    def test_search_by_name_without_diacritics(self, cafes):
        result = search_cafes(cafes, "hai ba trung")
        assert result.total == 1
        assert _ids(result) == [1]

    def test_search_by_name_with_diacritics(self, cafes):
        result = search_cafes(cafes, "Đà Nẵng")
        assert _ids(result) == [3]

    def test_search_by_district(self, cafes):
        result = search_cafes(cafes, "quan 1")
        assert result.total == 2
        assert _ids(result) == [1, 2]

    def test_search_by_address(self, cafes):
        assert _ids(search_cafes(cafes, "ngo duc ke")) == [2]

    def test_search_by_amenity(self, cafes):
        assert _ids(search_cafes(cafes, "禁煙")) == [3]

    def test_search_accented_literal(self, cafes):
        assert _ids(search_cafes(cafes, "résumé")) == [4]

    def test_blank_query_lists_all(self, cafes):
        assert search_cafes(cafes, "").total == 4
        assert search_cafes(cafes, "   ").total == 4
        assert search_cafes(cafes, None).total == 4

    def test_no_results(self, cafes):
        result = search_cafes(cafes, "trà sữa")
        assert result.total == 0
        assert result.results == []

    def test_respects_max_results(self, cafes):
        result = search_cafes(cafes, "quan 1", max_results=1)
        assert result.total == 2
        assert _ids(result) == [1]

    def test_zero_max_results(self, cafes):
        result = search_cafes(cafes, "quan", max_results=0)
        assert result.results == []

    def test_preferences_narrow_results(self, cafes):
        prefs = UserPreferences(price_range=["moderate"])
        # Default 5 km limit drops cafe 3
        assert _ids(search_cafes(cafes, None, prefs)) == [2]

    def test_preferences_with_query(self, cafes):
        prefs = UserPreferences(
            cafe_types=["作業向き"], max_distance="any"
        )
        assert _ids(search_cafes(cafes, "hai ba trung", prefs)) == [1]
        assert _ids(search_cafes(cafes, "da nang", prefs)) == []

    def test_summary_fields(self, cafes):
        entry = search_cafes(cafes, "workshop").results[0]
        assert entry.name == "The Workshop Coffee"
        assert entry.district == "Quận 1"
        assert entry.price_range == "moderate"
        assert entry.rating == 4.7


class TestGetCafe:
    def test_found(self, cafes):
        assert get_cafe(cafes, 4).name == "Résumé Bar"

    def test_missing(self, cafes):
        assert get_cafe(cafes, 99) is None

    def test_link(self):
        assert cafe_link(12) == "/cafe/12"

    def test_name(self, cafes):
        assert cafe_name(cafes, 2) == "The Workshop Coffee"

    def test_name_unknown(self, cafes):
        assert cafe_name(cafes, 99) == "Unknown Cafe"


class TestJsonFrontEnds:
    def test_search_json(self, catalog_file):
        result = json.loads(_cafe_search(catalog_file, "hai ba trung"))
        assert result["total"] == 1
        assert result["results"][0]["name"] == "Cộng Cà Phê Hai Bà Trưng"
        assert "error" not in result

    def test_search_result_has_keys(self, catalog_file):
        entry = json.loads(_cafe_search(catalog_file, "bar"))["results"][0]
        for key in ("id", "name", "district", "price_range", "rating"):
            assert key in entry

    def test_search_missing_catalog(self, tmp_path):
        result = json.loads(_cafe_search(tmp_path / "nope.json", "x"))
        assert result["total"] == 0
        assert result["results"] == []
        assert "Catalog unavailable" in result["error"]

    def test_search_error_on_load_failure(self, catalog_file):
        with patch(
            "cafefinder.cafes.search.read_catalog",
            side_effect=CatalogError("fail"),
        ):
            result = json.loads(_cafe_search(catalog_file, "x"))
        assert result["error"] == "Catalog unavailable: fail"

    def test_get_json(self, catalog_file):
        result = json.loads(_cafe_get(catalog_file, 3))
        assert result["name"] == "Cà Phê Mèo Đà Nẵng"
        assert result["link"] == "/cafe/3"
        assert result["amenities"] == ["禁煙"]

    def test_get_unknown(self, catalog_file):
        result = json.loads(_cafe_get(catalog_file, 99))
        assert result == {"error": "Cafe not found: 99"}

    def test_get_missing_catalog(self, tmp_path):
        result = json.loads(_cafe_get(tmp_path / "nope.json", 1))
        assert "Catalog unavailable" in result["error"]
