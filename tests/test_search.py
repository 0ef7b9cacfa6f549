"""Tests for keyword component search."""

import pytest

from origen.exceptions import InvalidOptionError
from origen.search import search_components


def _names(response):
    return [r.name for r in response.results]


class TestSearchComponents:

    def test_single_term(self, component_registry):
        response = search_components("dialog", registry=component_registry)
        assert _names(response) == ["button", "modal"]
        assert all(r.score == 1.0 for r in response.results)

    def test_partial_matches_rank_below_full(self, component_registry):
        response = search_components("form input", registry=component_registry)
        assert _names(response) == ["input", "button", "card"]
        assert [r.score for r in response.results] == [1.0, 0.5, 0.5]

    def test_case_insensitive(self, component_registry):
        assert _names(search_components("DIALOG", registry=component_registry)) == ["button", "modal"]

    def test_matches_key(self, component_registry):
        assert _names(search_components("select", registry=component_registry))[0] == "select"

    def test_no_hits(self, component_registry):
        response = search_components("carousel", registry=component_registry)
        assert response.results == []
        assert response.count == 0
        assert response.has_more is False

    def test_empty_query(self, component_registry):
        assert search_components("", registry=component_registry).results == []
        assert search_components("   ", registry=component_registry).results == []

    def test_limit_and_has_more(self, component_registry):
        response = search_components("dialog", limit=1, registry=component_registry)
        assert _names(response) == ["button"]
        assert response.count == 1
        assert response.has_more is True

    def test_limit_exactly_hits(self, component_registry):
        assert search_components("dialog", limit=2, registry=component_registry).has_more is False

    @pytest.mark.parametrize("limit", [0, -1, 21])
    def test_limit_out_of_range(self, component_registry, limit):
        with pytest.raises(InvalidOptionError):
            search_components("dialog", limit=limit, registry=component_registry)

    @pytest.mark.parametrize("limit", ["5", 2.5, True])
    def test_limit_must_be_integer(self, component_registry, limit):
        with pytest.raises(InvalidOptionError) as exc_info:
            search_components("dialog", limit=limit, registry=component_registry)
        assert exc_info.value.option == "limit"

    def test_result_fields(self, component_registry):
        result = search_components("dialog", registry=component_registry).results[1]
        assert result.display_name == "Modal"
        assert result.usage == ["Confirming destructive actions", "Short focused tasks"]

    def test_wire_format(self):
        wire = search_components("dialog").to_wire()
        assert wire["query"] == "dialog"
        assert wire["hasMore"] is False
        assert wire["results"][0]["displayName"] == "Button"
