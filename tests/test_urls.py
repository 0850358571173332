"""Tests for endpoints and URL builders."""

import urllib.parse

import pytest

from igdb_cli.core.client import EmptyIDsError, NegativeIDError, OutOfRangeError, ValidationError
from igdb_cli.core.options import SetFields, SetLimit, SetOffset, SetSearch, build_options
from igdb_cli.core.urls import (
    Endpoint,
    count_url,
    encode_url,
    index_url,
    meta_url,
    multi_url,
    search_url,
    single_url,
)

ROOT = "https://api.example.com/"


def split(url: str) -> tuple[str, dict[str, list[str]]]:
    parsed = urllib.parse.urlsplit(url)
    return parsed.path, urllib.parse.parse_qs(parsed.query)


def test_every_endpoint_path_ends_with_slash() -> None:
    for endpoint in Endpoint:
        assert endpoint.path.endswith("/")
    assert Endpoint.PULSE_SOURCES.path == "pulse_sources/"
    assert Endpoint.ENGINES.path == "game_engines/"


@pytest.mark.parametrize("name", ["games", "GAMES", "games/", " Games "])
def test_endpoint_from_name(name: str) -> None:
    assert Endpoint.from_name(name) is Endpoint.GAMES


def test_endpoint_from_unknown_name() -> None:
    with pytest.raises(ValidationError):
        Endpoint.from_name("consoles")


@pytest.mark.parametrize("entity_id", [0, 1, 296456])
def test_single_url(entity_id: int) -> None:
    assert single_url(ROOT, Endpoint.PULSES, entity_id) == f"{ROOT}pulses/{entity_id}"


def test_single_url_negative_id() -> None:
    with pytest.raises(NegativeIDError):
        single_url(ROOT, Endpoint.GAMES, -1)


def test_single_url_with_options() -> None:
    path, query = split(single_url(ROOT, Endpoint.GAMES, 1942, SetFields("name", "rating")))
    assert path == "/games/1942"
    assert query == {"fields": ["name,rating"]}


def test_single_url_invalid_option() -> None:
    with pytest.raises(OutOfRangeError):
        single_url(ROOT, Endpoint.GAMES, 1942, SetOffset(-99999))


def test_multi_url_keeps_id_order() -> None:
    url = multi_url(ROOT, Endpoint.PULSES, [296570, 714772, 124499])
    assert url == f"{ROOT}pulses/296570,714772,124499"


def test_multi_url_empty_ids() -> None:
    with pytest.raises(EmptyIDsError):
        multi_url(ROOT, Endpoint.PULSES, [])


def test_multi_url_negative_id() -> None:
    with pytest.raises(NegativeIDError) as exc_info:
        multi_url(ROOT, Endpoint.PULSES, [1, -500, -2])
    assert exc_info.value.details == {"id": -500}


def test_search_url() -> None:
    path, query = split(search_url(ROOT, Endpoint.GAMES, "zelda", SetLimit(5)))
    assert path == "/games/"
    assert query == {"limit": ["5"], "search": ["zelda"]}


def test_search_url_overrides_user_search() -> None:
    _, query = split(search_url(ROOT, Endpoint.GAMES, "zelda", SetSearch("mario")))
    assert query["search"] == ["zelda"]


def test_search_cannot_be_combined_with_id_lookup() -> None:
    with pytest.raises(ValidationError):
        single_url(ROOT, Endpoint.GAMES, 1, SetSearch("zelda"))
    with pytest.raises(ValidationError):
        multi_url(ROOT, Endpoint.GAMES, [1, 2], SetSearch("zelda"))


def test_index_and_count_urls() -> None:
    assert index_url(ROOT, Endpoint.GENRES) == f"{ROOT}genres/"
    assert count_url(ROOT, Endpoint.GENRES) == f"{ROOT}genres/count"
    path, query = split(count_url(ROOT, Endpoint.GENRES, SetFields("id")))
    assert path == "/genres/count"
    assert query == {"fields": ["id"]}


def test_meta_url() -> None:
    assert meta_url(ROOT, Endpoint.THEMES) == f"{ROOT}themes/meta"


def test_encode_url_strips_spaces() -> None:
    url = encode_url("https://api.example.com/ games /1", build_options(SetFields("name")))
    assert " " not in url
    assert url.startswith("https://api.example.com/games/1?")


def test_encode_url_without_options_has_no_query() -> None:
    assert encode_url(f"{ROOT}games/", build_options()) == f"{ROOT}games/"
