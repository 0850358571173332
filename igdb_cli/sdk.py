"""
IGDB SDK - High-level client with nice ergonomics.

This layer provides a clean, typed interface over every IGDB endpoint.
Built on top of the core APIClient and URL builders.
"""

import builtins
import logging
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from igdb_cli.core import urls
from igdb_cli.core.client import APIClient, InvalidJSONError, NoResultsError
from igdb_cli.core.options import Option
from igdb_cli.core.types import (
    Character,
    Collection,
    Company,
    Credit,
    Engine,
    Feed,
    Franchise,
    Game,
    GameMode,
    Genre,
    Keyword,
    Page,
    Person,
    Perspective,
    Platform,
    Pulse,
    PulseGroup,
    PulseSource,
    ReleaseDate,
    Review,
    Theme,
    Title,
)
from igdb_cli.core.urls import Endpoint

logger = logging.getLogger(__name__)

T = TypeVar("T")


class IGDBClient:
    """
    High-level IGDB API client with typed methods.

    Example:
        client = IGDBClient()

        game = client.games.get(1942, SetFields("name", "rating"))
        games = client.games.search("zelda", SetLimit(5))
        total = client.pulses.count(SetFilter("popularity", Operator.GREATER_THAN, 75))

    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float = 60,
    ):
        """
        Initialize the IGDB client.

        Args:
            api_key: IGDB API key (or IGDB_API_KEY env var)
            base_url: API root URL (or IGDB_BASE_URL env var)
            timeout: Default request timeout in seconds

        """
        self._client = APIClient(api_key=api_key, base_url=base_url, timeout=timeout)

        # One accessor family per endpoint
        self.characters = EndpointOperations(self._client, Endpoint.CHARACTERS, Character.from_dict)
        self.collections = EndpointOperations(self._client, Endpoint.COLLECTIONS, Collection.from_dict)
        self.companies = EndpointOperations(self._client, Endpoint.COMPANIES, Company.from_dict)
        self.credits = EndpointOperations(self._client, Endpoint.CREDITS, Credit.from_dict)
        self.engines = EndpointOperations(self._client, Endpoint.ENGINES, Engine.from_dict)
        self.feeds = EndpointOperations(self._client, Endpoint.FEEDS, Feed.from_dict)
        self.franchises = EndpointOperations(self._client, Endpoint.FRANCHISES, Franchise.from_dict)
        self.games = EndpointOperations(self._client, Endpoint.GAMES, Game.from_dict)
        self.game_modes = EndpointOperations(self._client, Endpoint.GAME_MODES, GameMode.from_dict)
        self.genres = EndpointOperations(self._client, Endpoint.GENRES, Genre.from_dict)
        self.keywords = EndpointOperations(self._client, Endpoint.KEYWORDS, Keyword.from_dict)
        self.pages = EndpointOperations(self._client, Endpoint.PAGES, Page.from_dict)
        self.people = EndpointOperations(self._client, Endpoint.PEOPLE, Person.from_dict)
        self.platforms = EndpointOperations(self._client, Endpoint.PLATFORMS, Platform.from_dict)
        self.perspectives = EndpointOperations(self._client, Endpoint.PERSPECTIVES, Perspective.from_dict)
        self.pulses = EndpointOperations(self._client, Endpoint.PULSES, Pulse.from_dict)
        self.pulse_groups = EndpointOperations(self._client, Endpoint.PULSE_GROUPS, PulseGroup.from_dict)
        self.pulse_sources = EndpointOperations(self._client, Endpoint.PULSE_SOURCES, PulseSource.from_dict)
        self.release_dates = EndpointOperations(self._client, Endpoint.RELEASE_DATES, ReleaseDate.from_dict)
        self.reviews = EndpointOperations(self._client, Endpoint.REVIEWS, Review.from_dict)
        self.themes = EndpointOperations(self._client, Endpoint.THEMES, Theme.from_dict)
        self.titles = EndpointOperations(self._client, Endpoint.TITLES, Title.from_dict)

    def endpoint(self, endpoint: Endpoint) -> "EndpointOperations[Any]":
        """Get the accessor family for an endpoint."""
        for ops in vars(self).values():
            if isinstance(ops, EndpointOperations) and ops.endpoint is endpoint:
                return ops
        raise KeyError(endpoint)

    def endpoint_model(self, endpoint: Endpoint, timeout: float | None = None) -> builtins.list[str]:
        """
        Get the field names that make up the model of an endpoint.

        Returns:
            Sorted list of field names

        """
        return self.endpoint(endpoint).fields(timeout=timeout)


# =============================================================================
# Endpoint Operations
# =============================================================================


class EndpointOperations(Generic[T]):
    """Get, list, index, search, count and field operations for one endpoint."""

    def __init__(self, client: APIClient, endpoint: Endpoint, parser: Callable[[dict[str, Any]], T]):
        self._client = client
        self.endpoint = endpoint
        self._parser = parser

    @property
    def _root(self) -> str:
        return self._client.root_url

    def _fetch(self, url: str, timeout: float | None) -> builtins.list[T]:
        """GET a list of entities, raising NoResultsError when it is empty."""
        data = self._client.get_list(url, timeout)
        if not data:
            raise NoResultsError(f"igdb: no results for {self.endpoint.value}")
        if not all(isinstance(item, dict) for item in data):
            raise InvalidJSONError(f"igdb: expected a list of {self.endpoint.value} objects")
        return [self._parser(item) for item in data]

    def get(self, entity_id: int, *opts: Option, timeout: float | None = None) -> T:
        """
        Get a single entity by ID.

        Args:
            entity_id: IGDB ID of the entity
            opts: Query options (fields, filters, ...)
            timeout: Request timeout override

        Returns:
            The decoded entity

        Raises:
            NegativeIDError: If the ID is negative
            OutOfRangeError: If an option is out of range
            NoResultsError: If the API returned no entity

        """
        url = urls.single_url(self._root, self.endpoint, entity_id, *opts)
        return self._fetch(url, timeout)[0]

    def list(self, ids: builtins.list[int], *opts: Option, timeout: float | None = None) -> builtins.list[T]:
        """
        Get several entities by ID.

        Raises:
            EmptyIDsError: If no IDs were given
            NegativeIDError: If any ID is negative
            NoResultsError: If the API returned no entities

        """
        url = urls.multi_url(self._root, self.endpoint, ids, *opts)
        return self._fetch(url, timeout)

    def index(self, *opts: Option, timeout: float | None = None) -> builtins.list[T]:
        """List entities constrained only by the given options."""
        url = urls.index_url(self._root, self.endpoint, *opts)
        return self._fetch(url, timeout)

    def search(self, query: str, *opts: Option, timeout: float | None = None) -> builtins.list[T]:
        """Search the endpoint for the query."""
        url = urls.search_url(self._root, self.endpoint, query, *opts)
        return self._fetch(url, timeout)

    def count(self, *opts: Option, timeout: float | None = None) -> int:
        """
        Count the entities matching the given options.

        Raises:
            NoResultsError: If the API answered with an empty list instead of a count
            InvalidJSONError: If the body is empty, malformed or has no count

        """
        url = urls.count_url(self._root, self.endpoint, *opts)
        data = self._client.get(url, timeout)
        # An empty list is how the API answers when nothing can be counted
        if data == []:
            raise NoResultsError(f"igdb: no results for {self.endpoint.value}")
        count = data.get("count") if isinstance(data, dict) else None
        if not isinstance(count, int) or isinstance(count, bool):
            raise InvalidJSONError("igdb: response has no count")
        logger.debug("%s count: %d", self.endpoint.value, count)
        return count

    def fields(self, timeout: float | None = None) -> builtins.list[str]:
        """
        List the field names available on this endpoint.

        Returns:
            Field names sorted lexically (empty if the API lists none)

        """
        url = urls.meta_url(self._root, self.endpoint)
        data = self._client.get_list(url, timeout)
        if not all(isinstance(name, str) for name in data):
            raise InvalidJSONError("igdb: expected a list of field names")
        return sorted(data)
