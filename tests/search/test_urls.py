"""Tests for query URL construction."""

from __future__ import annotations

from urllib.parse import parse_qs, unquote, urlsplit

import pytest

from jackett_search.search.urls import (
    AUDIO_CATEGORIES,
    MOVIE_CATEGORIES,
    TV_CATEGORIES,
    build_url,
    category_parameters,
    encode_categories,
)

BASE = "http://jackett:9117/api/v2.0/indexers/all/results"


class TestBuildUrl:
    def test_without_categories(self) -> None:
        assert build_url(BASE, "key", "tt0000001") == f"{BASE}?apikey=key&Query=tt0000001"

    def test_empty_categories_add_nothing(self) -> None:
        assert build_url(BASE, "key", "tt0000001", []) == f"{BASE}?apikey=key&Query=tt0000001"

    def test_base_url_and_api_key_are_not_encoded(self) -> None:
        url = build_url("http://host/a b", "k&y", "q")
        assert url == "http://host/a b?apikey=k&y&Query=q"

    def test_movie_categories_in_order(self) -> None:
        url = build_url(BASE, "key", "tt0000001", MOVIE_CATEGORIES)
        assert url == (
            f"{BASE}?apikey=key&Query=tt0000001"
            "&Category[]=2000&Category[]=2010&Category[]=2030&Category[]=2040&Category[]=2045"
            "&Category[]=2050&Category[]=2060&Category[]=2070&Category[]=2080"
        )

    def test_tv_categories_in_order(self) -> None:
        url = build_url(BASE, "key", "tt0000001", TV_CATEGORIES)
        assert url.endswith(
            "&Category[]=5000&Category[]=5010&Category[]=5020&Category[]=5030"
            "&Category[]=5040&Category[]=5060&Category[]=5070&Category[]=5080"
        )

    def test_audio_categories_in_order(self) -> None:
        url = build_url(BASE, "key", "tt0000001", AUDIO_CATEGORIES)
        assert url.endswith(
            "&Category[]=3000&Category[]=3010&Category[]=3020&Category[]=3030&Category[]=3040&Category[]=3050"
        )

    @pytest.mark.parametrize(
        "query",
        ["Worst Cooks in America", "a&b=c?d", "100% #1 / 2+3", "Amélie 2001", "~under_score-dot."],
    )
    def test_query_round_trips(self, query: str) -> None:
        url = build_url(BASE, "key", query)
        encoded = url.split("&Query=", 1)[1]
        assert unquote(encoded) == query
        assert parse_qs(urlsplit(url).query)["Query"] == [query]

    def test_space_is_percent_encoded(self) -> None:
        assert build_url(BASE, "key", "a b").endswith("&Query=a%20b")

    def test_unreserved_characters_stay_literal(self) -> None:
        assert build_url(BASE, "key", "A-z_0.9~").endswith("&Query=A-z_0.9~")

    def test_reserved_characters_are_escaped(self) -> None:
        assert build_url(BASE, "key", "a&b?c/d").endswith("&Query=a%26b%3Fc%2Fd")


class TestCategoryHelpers:
    def test_category_parameters_empty(self) -> None:
        assert category_parameters([]) == ""

    def test_category_parameters_repeats_key(self) -> None:
        assert category_parameters(["1", "2"]) == "&Category[]=1&Category[]=2"

    def test_encode_categories_escapes_caller_input(self) -> None:
        assert encode_categories(["5000", "a b", "1&2"]) == ["5000", "a%20b", "1%262"]

    def test_builtin_sets_sizes(self) -> None:
        assert len(MOVIE_CATEGORIES) == 9
        assert len(TV_CATEGORIES) == 8
        assert len(AUDIO_CATEGORIES) == 6
