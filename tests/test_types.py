"""Tests for entity decoding helpers."""

import pytest

from igdb_cli.core.types import Company, Feed, Image, ImageSize, RawJSON, Title


def test_raw_json_wrap_and_decode() -> None:
    raw = RawJSON.wrap({"video_id": "abc", "name": "Trailer"})
    assert raw is not None
    assert raw.decode() == {"video_id": "abc", "name": "Trailer"}
    assert raw.decode(lambda v: v["video_id"]) == "abc"
    assert RawJSON.wrap(None) is None


def test_image_sized_url() -> None:
    image = Image(cloudinary_id="co1wyy")
    assert image.sized_url(ImageSize.COVER_BIG) == "https://images.igdb.com/igdb/image/upload/t_cover_big/co1wyy.jpg"
    assert image.sized_url("720p").endswith("/t_720p/co1wyy.jpg")


def test_image_sized_url_requires_id() -> None:
    with pytest.raises(ValueError):
        Image().sized_url()


def test_missing_nested_objects_are_none() -> None:
    company = Company.from_dict({"id": 70, "name": "Nintendo"})
    assert company.logo is None
    assert company.published == []


def test_feed_video_is_raw_json() -> None:
    feed = Feed.from_dict({"id": 5, "feed_video": {"video_id": "xyz"}, "games": [1, 2]})
    assert feed.feed_video == RawJSON('{"video_id": "xyz"}')
    assert feed.games == [1, 2]


def test_title_extends_named_entity() -> None:
    title = Title.from_dict({"id": 3, "name": "Lead Designer", "description": "Owns the design"})
    assert title.name == "Lead Designer"
    assert title.description == "Owns the design"
