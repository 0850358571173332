"""
Endpoints and request URL construction.

All builders validate their inputs and options before returning a URL, so a
failed build never reaches the network.
"""

from enum import Enum

from igdb_cli.core.client import EmptyIDsError, NegativeIDError, ValidationError
from igdb_cli.core.options import Option, OptionSet, SetSearch, build_options


class Endpoint(Enum):
    """IGDB collections and their relative paths."""

    CHARACTERS = "characters"
    COLLECTIONS = "collections"
    COMPANIES = "companies"
    CREDITS = "credits"
    ENGINES = "game_engines"
    FEEDS = "feeds"
    FRANCHISES = "franchises"
    GAMES = "games"
    GAME_MODES = "game_modes"
    GENRES = "genres"
    KEYWORDS = "keywords"
    PAGES = "pages"
    PEOPLE = "people"
    PLATFORMS = "platforms"
    PERSPECTIVES = "player_perspectives"
    PULSES = "pulses"
    PULSE_GROUPS = "pulse_groups"
    PULSE_SOURCES = "pulse_sources"
    RELEASE_DATES = "release_dates"
    REVIEWS = "reviews"
    THEMES = "themes"
    TITLES = "titles"

    @property
    def path(self) -> str:
        """Relative path segment, always ending in a slash."""
        return f"{self.value}/"

    @classmethod
    def from_name(cls, name: str) -> "Endpoint":
        """Look up an endpoint by member name or path (e.g. "games" or "GAMES")."""
        key = name.strip().strip("/")
        for member in cls:
            if key.upper() == member.name or key.lower() == member.value:
                return member
        raise ValidationError(f"Unknown endpoint: {name}", {"choices": [m.value for m in cls]})


def encode_url(url: str, options: OptionSet) -> str:
    """Strip spaces from the URL and append the encoded options, if any."""
    url = url.replace(" ", "")
    query = options.encode()
    if query:
        url = f"{url}?{query}"
    return url


def _lookup_options(opts: tuple[Option, ...]) -> OptionSet:
    options = build_options(*opts)
    if options.search is not None:
        raise ValidationError("Search cannot be combined with this request")
    return options


def single_url(root: str, endpoint: Endpoint, entity_id: int, *opts: Option) -> str:
    """Build a URL for one entity identified by its ID."""
    if entity_id < 0:
        raise NegativeIDError(entity_id)
    options = _lookup_options(opts)
    return encode_url(f"{root}{endpoint.path}{entity_id}", options)


def multi_url(root: str, endpoint: Endpoint, ids: list[int], *opts: Option) -> str:
    """Build a URL for several entities identified by their IDs, in the given order."""
    if not ids:
        raise EmptyIDsError()
    for entity_id in ids:
        if entity_id < 0:
            raise NegativeIDError(entity_id)
    options = _lookup_options(opts)
    return encode_url(f"{root}{endpoint.path}{','.join(str(i) for i in ids)}", options)


def search_url(root: str, endpoint: Endpoint, query: str, *opts: Option) -> str:
    """Build a URL searching the endpoint for the query."""
    options = build_options(*opts, SetSearch(query))
    return encode_url(f"{root}{endpoint.path}", options)


def index_url(root: str, endpoint: Endpoint, *opts: Option) -> str:
    """Build a URL listing the endpoint under the given options."""
    return encode_url(f"{root}{endpoint.path}", _lookup_options(opts))


def count_url(root: str, endpoint: Endpoint, *opts: Option) -> str:
    """Build a URL counting the entities matching the given options."""
    return encode_url(f"{root}{endpoint.path}count", _lookup_options(opts))


def meta_url(root: str, endpoint: Endpoint) -> str:
    """Build a URL for the endpoint's field list."""
    return f"{root}{endpoint.path}meta"
