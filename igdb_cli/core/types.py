"""
Core types for IGDB API responses.

These dataclasses provide type safety and IDE support for decoded entities.
Timestamps are Unix time in milliseconds, as returned by the API.
"""

import json
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, TypeVar

T = TypeVar("T")

IMAGE_BASE_URL = "https://images.igdb.com/igdb/image/upload"


# =============================================================================
# Shared Types
# =============================================================================


@dataclass(frozen=True)
class RawJSON:
    """An undecoded JSON value for fields whose shape is not fixed by the API."""

    raw: str

    @classmethod
    def wrap(cls, value: Any) -> "RawJSON | None":
        """Wrap a decoded JSON value, keeping None as None."""
        if value is None:
            return None
        return cls(json.dumps(value))

    def decode(self, parser: Callable[[Any], T] | None = None) -> Any:
        """Decode the payload, optionally passing it through a parser."""
        value = json.loads(self.raw)
        if parser:
            return parser(value)
        return value


class ImageSize(str, Enum):
    """Named image sizes served by the IGDB image CDN."""

    COVER_SMALL = "cover_small"
    COVER_BIG = "cover_big"
    SCREENSHOT_MED = "screenshot_med"
    SCREENSHOT_BIG = "screenshot_big"
    SCREENSHOT_HUGE = "screenshot_huge"
    LOGO_MED = "logo_med"
    THUMB = "thumb"
    MICRO = "micro"
    HD = "720p"
    FULL_HD = "1080p"


@dataclass
class Image:
    """An image hosted on the IGDB image CDN."""

    url: str = ""
    cloudinary_id: str = ""
    width: int = 0
    height: int = 0

    def sized_url(self, size: ImageSize = ImageSize.THUMB) -> str:
        """Return the URL of this image at the given size."""
        if not self.cloudinary_id:
            raise ValueError("Image has no cloudinary_id")
        return f"{IMAGE_BASE_URL}/t_{ImageSize(size).value}/{self.cloudinary_id}.jpg"

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "Image | None":
        """Create from API response dict."""
        if not data:
            return None
        return cls(
            url=data.get("url", ""),
            cloudinary_id=data.get("cloudinary_id", ""),
            width=data.get("width", 0),
            height=data.get("height", 0),
        )


@dataclass
class Video:
    """A video referenced by an entity."""

    name: str = ""
    video_id: str = ""  # YouTube slug

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Video":
        """Create from API response dict."""
        return cls(name=data.get("name", ""), video_id=data.get("video_id", ""))


@dataclass
class Website:
    """A website referenced in the IGDB."""

    category: int = 0
    url: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Website":
        """Create from API response dict."""
        return cls(category=data.get("category", 0), url=data.get("url", ""))


# =============================================================================
# Game Types
# =============================================================================


@dataclass
class AltName:
    """An alternative name for a game."""

    name: str = ""
    comment: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AltName":
        """Create from API response dict."""
        return cls(name=data.get("name", ""), comment=data.get("comment", ""))


@dataclass
class BeatTime:
    """Time to beat a game, in seconds."""

    hastly: int = 0
    normally: int = 0
    completely: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "BeatTime | None":
        """Create from API response dict."""
        if not data:
            return None
        return cls(
            hastly=data.get("hastly", 0),
            normally=data.get("normally", 0),
            completely=data.get("completely", 0),
        )


@dataclass
class AgeRating:
    """An age rating and synopsis (ESRB or PEGI)."""

    rating: int = 0
    synopsis: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "AgeRating | None":
        """Create from API response dict."""
        if not data:
            return None
        return cls(rating=data.get("rating", 0), synopsis=data.get("synopsis", ""))


@dataclass
class External:
    """IDs of a game on external services."""

    steam: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "External | None":
        """Create from API response dict."""
        if not data:
            return None
        return cls(steam=data.get("steam", ""))


@dataclass
class ReleaseDate:
    """A release of a game on a platform in a region."""

    id: int = 0
    game: int = 0
    category: int = 0
    platform: int = 0
    human: str = ""
    date: int = 0
    region: int = 0
    y: int = 0
    m: int = 0
    created_at: int = 0
    updated_at: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ReleaseDate":
        """Create from API response dict."""
        return cls(
            id=data.get("id", 0),
            game=data.get("game", 0),
            category=data.get("category", 0),
            platform=data.get("platform", 0),
            human=data.get("human", ""),
            date=data.get("date", 0),
            region=data.get("region", 0),
            y=data.get("y", 0),
            m=data.get("m", 0),
            created_at=data.get("created_at", 0),
            updated_at=data.get("updated_at", 0),
        )


@dataclass
class Game:
    """A game stored in the IGDB."""

    id: int
    name: str = ""
    slug: str = ""
    url: str = ""
    created_at: int = 0
    updated_at: int = 0
    summary: str = ""
    storyline: str = ""
    collection: int = 0
    franchise: int = 0
    franchises: list[int] = field(default_factory=list)
    hypes: int = 0
    popularity: float = 0.0
    rating: float = 0.0
    rating_count: int = 0
    aggregated_rating: float = 0.0
    aggregated_rating_count: int = 0
    total_rating: float = 0.0
    total_rating_count: int = 0
    game: int = 0
    developers: list[int] = field(default_factory=list)
    publishers: list[int] = field(default_factory=list)
    game_engines: list[int] = field(default_factory=list)
    category: int = 0
    time_to_beat: BeatTime | None = None
    player_perspectives: list[int] = field(default_factory=list)
    game_modes: list[int] = field(default_factory=list)
    keywords: list[int] = field(default_factory=list)
    themes: list[int] = field(default_factory=list)
    genres: list[int] = field(default_factory=list)
    first_release_date: int = 0
    status: int = 0
    release_dates: list[ReleaseDate] = field(default_factory=list)
    alternative_names: list[AltName] = field(default_factory=list)
    screenshots: list[Image] = field(default_factory=list)
    videos: list[Video] = field(default_factory=list)
    cover: Image | None = None
    esrb: AgeRating | None = None
    pegi: AgeRating | None = None
    websites: list[Website] = field(default_factory=list)
    tags: list[int] = field(default_factory=list)
    dlcs: list[int] = field(default_factory=list)
    expansions: list[int] = field(default_factory=list)
    standalone_expansions: list[int] = field(default_factory=list)
    bundles: list[int] = field(default_factory=list)
    similar_games: list[int] = field(default_factory=list)
    external: External | None = None
    follows: RawJSON | None = None
    pulse_count: RawJSON | None = None
    multiplayer_modes: RawJSON | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Game":
        """Create from API response dict."""
        return cls(
            id=data.get("id", 0),
            name=data.get("name", ""),
            slug=data.get("slug", ""),
            url=data.get("url", ""),
            created_at=data.get("created_at", 0),
            updated_at=data.get("updated_at", 0),
            summary=data.get("summary", ""),
            storyline=data.get("storyline", ""),
            collection=data.get("collection", 0),
            franchise=data.get("franchise", 0),
            franchises=data.get("franchises") or [],
            hypes=data.get("hypes", 0),
            popularity=data.get("popularity", 0.0),
            rating=data.get("rating", 0.0),
            rating_count=data.get("rating_count", 0),
            aggregated_rating=data.get("aggregated_rating", 0.0),
            aggregated_rating_count=data.get("aggregated_rating_count", 0),
            total_rating=data.get("total_rating", 0.0),
            total_rating_count=data.get("total_rating_count", 0),
            game=data.get("game", 0),
            developers=data.get("developers") or [],
            publishers=data.get("publishers") or [],
            game_engines=data.get("game_engines") or [],
            category=data.get("category", 0),
            time_to_beat=BeatTime.from_dict(data.get("time_to_beat")),
            player_perspectives=data.get("player_perspectives") or [],
            game_modes=data.get("game_modes") or [],
            keywords=data.get("keywords") or [],
            themes=data.get("themes") or [],
            genres=data.get("genres") or [],
            first_release_date=data.get("first_release_date", 0),
            status=data.get("status", 0),
            release_dates=[ReleaseDate.from_dict(r) for r in data.get("release_dates") or []],
            alternative_names=[AltName.from_dict(a) for a in data.get("alternative_names") or []],
            screenshots=[img for img in map(Image.from_dict, data.get("screenshots") or []) if img],
            videos=[Video.from_dict(v) for v in data.get("videos") or []],
            cover=Image.from_dict(data.get("cover")),
            esrb=AgeRating.from_dict(data.get("esrb")),
            pegi=AgeRating.from_dict(data.get("pegi")),
            websites=[Website.from_dict(w) for w in data.get("websites") or []],
            tags=data.get("tags") or [],
            dlcs=data.get("dlcs") or [],
            expansions=data.get("expansions") or [],
            standalone_expansions=data.get("standalone_expansions") or [],
            bundles=data.get("bundles") or [],
            # The API names the similar games list "games"
            similar_games=data.get("games") or [],
            external=External.from_dict(data.get("external")),
            follows=RawJSON.wrap(data.get("follows")),
            pulse_count=RawJSON.wrap(data.get("pulse_count")),
            multiplayer_modes=RawJSON.wrap(data.get("multiplayer_modes")),
        )


# =============================================================================
# Named Types
# =============================================================================


@dataclass
class NamedEntity:
    """Common shape of the simple name/slug/games collections."""

    id: int
    name: str = ""
    slug: str = ""
    url: str = ""
    created_at: int = 0
    updated_at: int = 0
    games: list[int] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]):
        """Create from API response dict."""
        return cls(
            id=data.get("id", 0),
            name=data.get("name", ""),
            slug=data.get("slug", ""),
            url=data.get("url", ""),
            created_at=data.get("created_at", 0),
            updated_at=data.get("updated_at", 0),
            games=data.get("games") or [],
        )


class Collection(NamedEntity):
    """A series of related games."""


class Franchise(NamedEntity):
    """A franchise a game belongs to."""


class GameMode(NamedEntity):
    """A game mode such as single player or co-op."""


class Genre(NamedEntity):
    """A game genre."""


class Keyword(NamedEntity):
    """A keyword describing a game."""


class Perspective(NamedEntity):
    """A player perspective such as first person."""


class Theme(NamedEntity):
    """A game theme."""


@dataclass
class Title(NamedEntity):
    """A job title used in game credits."""

    description: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Title":
        """Create from API response dict."""
        title = super().from_dict(data)
        title.description = data.get("description", "")
        return title


# =============================================================================
# People & Company Types
# =============================================================================


@dataclass
class Character:
    """A video game character."""

    id: int
    name: str = ""
    slug: str = ""
    url: str = ""
    created_at: int = 0
    updated_at: int = 0
    mug_shot: Image | None = None
    gender: int = 0
    species: int = 0
    akas: list[str] = field(default_factory=list)
    games: list[int] = field(default_factory=list)
    people: list[int] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Character":
        """Create from API response dict."""
        return cls(
            id=data.get("id", 0),
            name=data.get("name", ""),
            slug=data.get("slug", ""),
            url=data.get("url", ""),
            created_at=data.get("created_at", 0),
            updated_at=data.get("updated_at", 0),
            mug_shot=Image.from_dict(data.get("mug_shot")),
            gender=data.get("gender", 0),
            species=data.get("species", 0),
            akas=data.get("akas") or [],
            games=data.get("games") or [],
            people=data.get("people") or [],
        )


@dataclass
class Company:
    """A video game company: developer, publisher or both."""

    id: int
    name: str = ""
    slug: str = ""
    url: str = ""
    created_at: int = 0
    updated_at: int = 0
    logo: Image | None = None
    description: str = ""
    country: int = 0
    website: str = ""
    start_date: int = 0
    start_date_category: int = 0
    changed_company_id: int = 0
    parent: int = 0
    twitter: str = ""
    published: list[int] = field(default_factory=list)
    developed: list[int] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Company":
        """Create from API response dict."""
        return cls(
            id=data.get("id", 0),
            name=data.get("name", ""),
            slug=data.get("slug", ""),
            url=data.get("url", ""),
            created_at=data.get("created_at", 0),
            updated_at=data.get("updated_at", 0),
            logo=Image.from_dict(data.get("logo")),
            description=data.get("description", ""),
            country=data.get("country", 0),
            website=data.get("website", ""),
            start_date=data.get("start_date", 0),
            start_date_category=data.get("start_date_category", 0),
            changed_company_id=data.get("changed_company_id", 0),
            parent=data.get("parent", 0),
            twitter=data.get("twitter", ""),
            published=data.get("published") or [],
            developed=data.get("developed") or [],
        )


@dataclass
class Person:
    """A person involved in game development."""

    id: int
    name: str = ""
    slug: str = ""
    url: str = ""
    created_at: int = 0
    updated_at: int = 0
    dob: int = 0
    gender: int = 0
    country: int = 0
    mug_shot: Image | None = None
    bio: str = ""
    description: str = ""
    parent: int = 0
    homepage: str = ""
    twitter: str = ""
    nicknames: list[str] = field(default_factory=list)
    games: list[int] = field(default_factory=list)
    characters: list[int] = field(default_factory=list)
    vote_positive: int = 0
    vote_negative: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Person":
        """Create from API response dict."""
        return cls(
            id=data.get("id", 0),
            name=data.get("name", ""),
            slug=data.get("slug", ""),
            url=data.get("url", ""),
            created_at=data.get("created_at", 0),
            updated_at=data.get("updated_at", 0),
            dob=data.get("dob", 0),
            gender=data.get("gender", 0),
            country=data.get("country", 0),
            mug_shot=Image.from_dict(data.get("mug_shot")),
            bio=data.get("bio", ""),
            description=data.get("description", ""),
            parent=data.get("parent", 0),
            homepage=data.get("homepage", ""),
            twitter=data.get("twitter", ""),
            nicknames=data.get("nicknames") or [],
            games=data.get("games") or [],
            characters=data.get("characters") or [],
            vote_positive=data.get("vote_positive", 0),
            vote_negative=data.get("vote_negative", 0),
        )


@dataclass
class Credit:
    """A person credited for work on a game."""

    id: int
    name: str = ""
    slug: str = ""
    url: str = ""
    created_at: int = 0
    updated_at: int = 0
    game: int = 0
    category: int = 0
    title: int = 0
    country: int = 0
    credited_name: str = ""
    character_credited_name: str = ""
    person: int = 0
    character: int = 0
    company: int = 0
    position: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Credit":
        """Create from API response dict."""
        return cls(
            id=data.get("id", 0),
            name=data.get("name", ""),
            slug=data.get("slug", ""),
            url=data.get("url", ""),
            created_at=data.get("created_at", 0),
            updated_at=data.get("updated_at", 0),
            game=data.get("game", 0),
            category=data.get("category", 0),
            title=data.get("title", 0),
            country=data.get("country", 0),
            credited_name=data.get("credited_name", ""),
            character_credited_name=data.get("character_credited_name", ""),
            person=data.get("person", 0),
            character=data.get("character", 0),
            company=data.get("company", 0),
            position=data.get("position", 0),
        )


# =============================================================================
# Platform & Engine Types
# =============================================================================


@dataclass
class Engine:
    """A video game engine."""

    id: int
    name: str = ""
    slug: str = ""
    url: str = ""
    created_at: int = 0
    updated_at: int = 0
    logo: Image | None = None
    games: list[int] = field(default_factory=list)
    companies: list[int] = field(default_factory=list)
    platforms: list[int] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Engine":
        """Create from API response dict."""
        return cls(
            id=data.get("id", 0),
            name=data.get("name", ""),
            slug=data.get("slug", ""),
            url=data.get("url", ""),
            created_at=data.get("created_at", 0),
            updated_at=data.get("updated_at", 0),
            logo=Image.from_dict(data.get("logo")),
            games=data.get("games") or [],
            companies=data.get("companies") or [],
            platforms=data.get("platforms") or [],
        )


@dataclass
class Platform:
    """A hardware or software platform games run on."""

    id: int
    name: str = ""
    slug: str = ""
    url: str = ""
    created_at: int = 0
    updated_at: int = 0
    logo: Image | None = None
    website: str = ""
    summary: str = ""
    alternative_name: str = ""
    generation: int = 0
    games: list[int] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Platform":
        """Create from API response dict."""
        return cls(
            id=data.get("id", 0),
            name=data.get("name", ""),
            slug=data.get("slug", ""),
            url=data.get("url", ""),
            created_at=data.get("created_at", 0),
            updated_at=data.get("updated_at", 0),
            logo=Image.from_dict(data.get("logo")),
            website=data.get("website", ""),
            summary=data.get("summary", ""),
            alternative_name=data.get("alternative_name", ""),
            generation=data.get("generation", 0),
            games=data.get("games") or [],
        )


# =============================================================================
# Pulse & Feed Types
# =============================================================================


@dataclass
class Pulse:
    """A news article or blog post about games."""

    id: int
    pulse_source: int = 0
    category: int = 0
    title: str = ""
    summary: str = ""
    url: str = ""
    uid: str = ""
    author: str = ""
    image: str = ""
    pulse_image: Image | None = None
    created_at: int = 0
    updated_at: int = 0
    published_at: int = 0
    tags: list[int] = field(default_factory=list)
    ignored: bool = False
    videos: list[Video] = field(default_factory=list)
    website: Website | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Pulse":
        """Create from API response dict."""
        website = data.get("website")
        return cls(
            id=data.get("id", 0),
            pulse_source=data.get("pulse_source", 0),
            category=data.get("category", 0),
            title=data.get("title", ""),
            summary=data.get("summary", ""),
            url=data.get("url", ""),
            uid=data.get("uid", ""),
            author=data.get("author", ""),
            image=data.get("image", ""),
            pulse_image=Image.from_dict(data.get("pulse_image")),
            created_at=data.get("created_at", 0),
            updated_at=data.get("updated_at", 0),
            published_at=data.get("published_at", 0),
            tags=data.get("tags") or [],
            ignored=data.get("ignored", False),
            videos=[Video.from_dict(v) for v in data.get("videos") or []],
            website=Website.from_dict(website) if website else None,
        )


@dataclass
class PulseGroup:
    """A group of pulses about the same topic."""

    id: int
    name: str = ""
    url: str = ""
    created_at: int = 0
    updated_at: int = 0
    published_at: int = 0
    category: int = 0
    game: int = 0
    tags: list[int] = field(default_factory=list)
    pulses: list[int] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PulseGroup":
        """Create from API response dict."""
        return cls(
            id=data.get("id", 0),
            name=data.get("name", ""),
            url=data.get("url", ""),
            created_at=data.get("created_at", 0),
            updated_at=data.get("updated_at", 0),
            published_at=data.get("published_at", 0),
            category=data.get("category", 0),
            game=data.get("game", 0),
            tags=data.get("tags") or [],
            pulses=data.get("pulses") or [],
        )


@dataclass
class PulseSource:
    """A news source pulses are collected from."""

    id: int
    name: str = ""
    game: int = 0
    page: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PulseSource":
        """Create from API response dict."""
        return cls(
            id=data.get("id", 0),
            name=data.get("name", ""),
            game=data.get("game", 0),
            page=data.get("page", 0),
        )


@dataclass
class Feed:
    """An item in a user or game feed."""

    id: int
    name: str = ""
    url: str = ""
    slug: str = ""
    title: str = ""
    content: str = ""
    category: int = 0
    user: int = 0
    games: list[int] = field(default_factory=list)
    feed_likes_count: int = 0
    feed_video: RawJSON | None = None
    meta: str = ""
    pulse: int = 0
    uid: str = ""
    created_at: int = 0
    updated_at: int = 0
    published_at: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Feed":
        """Create from API response dict."""
        return cls(
            id=data.get("id", 0),
            name=data.get("name", ""),
            url=data.get("url", ""),
            slug=data.get("slug", ""),
            title=data.get("title", ""),
            content=data.get("content", ""),
            category=data.get("category", 0),
            user=data.get("user", 0),
            games=data.get("games") or [],
            feed_likes_count=data.get("feed_likes_count", 0),
            feed_video=RawJSON.wrap(data.get("feed_video")),
            meta=data.get("meta", ""),
            pulse=data.get("pulse", 0),
            uid=data.get("uid", ""),
            created_at=data.get("created_at", 0),
            updated_at=data.get("updated_at", 0),
            published_at=data.get("published_at", 0),
        )


# =============================================================================
# Page & Review Types
# =============================================================================


@dataclass
class Page:
    """A community page for a company, person or game."""

    id: int
    name: str = ""
    slug: str = ""
    url: str = ""
    created_at: int = 0
    updated_at: int = 0
    content: str = ""
    description: str = ""
    category: int = 0
    sub_category: int = 0
    country: int = 0
    color: int = 0
    feed: int = 0
    user: int = 0
    game: int = 0
    company: int = 0
    page_follows_count: int = 0
    logo: Image | None = None
    background: Image | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Page":
        """Create from API response dict."""
        return cls(
            id=data.get("id", 0),
            name=data.get("name", ""),
            slug=data.get("slug", ""),
            url=data.get("url", ""),
            created_at=data.get("created_at", 0),
            updated_at=data.get("updated_at", 0),
            content=data.get("content", ""),
            description=data.get("description", ""),
            category=data.get("category", 0),
            sub_category=data.get("sub_category", 0),
            country=data.get("country", 0),
            color=data.get("color", 0),
            feed=data.get("feed", 0),
            user=data.get("user", 0),
            game=data.get("game", 0),
            company=data.get("company", 0),
            page_follows_count=data.get("page_follows_count", 0),
            logo=Image.from_dict(data.get("logo")),
            background=Image.from_dict(data.get("background")),
        )


@dataclass
class Review:
    """A user review of a game."""

    id: int
    username: str = ""
    slug: str = ""
    url: str = ""
    title: str = ""
    created_at: int = 0
    updated_at: int = 0
    game: int = 0
    category: int = 0
    platform: int = 0
    rating_category: int = 0
    likes: int = 0
    views: int = 0
    video: str = ""
    introduction: str = ""
    content: str = ""
    conclusion: str = ""
    positive_points: str = ""
    negative_points: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Review":
        """Create from API response dict."""
        return cls(
            id=data.get("id", 0),
            username=data.get("username", ""),
            slug=data.get("slug", ""),
            url=data.get("url", ""),
            title=data.get("title", ""),
            created_at=data.get("created_at", 0),
            updated_at=data.get("updated_at", 0),
            game=data.get("game", 0),
            category=data.get("category", 0),
            platform=data.get("platform", 0),
            rating_category=data.get("rating_category", 0),
            likes=data.get("likes", 0),
            views=data.get("views", 0),
            video=data.get("video", ""),
            introduction=data.get("introduction", ""),
            content=data.get("content", ""),
            conclusion=data.get("conclusion", ""),
            positive_points=data.get("positive_points", ""),
            negative_points=data.get("negative_points", ""),
        )
