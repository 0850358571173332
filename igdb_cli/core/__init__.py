"""
Core layer - Raw types, query options and HTTP client.

This layer provides:
- Typed dataclasses for IGDB entities
- Query options and URL builders with input validation
- Low-level HTTP client with auth and error handling
"""

from igdb_cli.core.client import (
    APIClient,
    APIError,
    EmptyIDsError,
    IGDBError,
    InvalidJSONError,
    NegativeIDError,
    NoResultsError,
    OutOfRangeError,
    ValidationError,
)
from igdb_cli.core.options import (
    Direction,
    Operator,
    OptionSet,
    SetFields,
    SetFilter,
    SetLimit,
    SetOffset,
    SetOrder,
    build_options,
)
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
    Image,
    ImageSize,
    Keyword,
    Page,
    Person,
    Perspective,
    Platform,
    Pulse,
    PulseGroup,
    PulseSource,
    RawJSON,
    ReleaseDate,
    Review,
    Theme,
    Title,
)
from igdb_cli.core.urls import Endpoint

__all__ = [
    "APIClient",
    "APIError",
    "Character",
    "Collection",
    "Company",
    "Credit",
    "Direction",
    "EmptyIDsError",
    "Endpoint",
    "Engine",
    "Feed",
    "Franchise",
    "Game",
    "GameMode",
    "Genre",
    "IGDBError",
    "Image",
    "ImageSize",
    "InvalidJSONError",
    "Keyword",
    "NegativeIDError",
    "NoResultsError",
    "Operator",
    "OptionSet",
    "OutOfRangeError",
    "Page",
    "Person",
    "Perspective",
    "Platform",
    "Pulse",
    "PulseGroup",
    "PulseSource",
    "RawJSON",
    "ReleaseDate",
    "Review",
    "SetFields",
    "SetFilter",
    "SetLimit",
    "SetOffset",
    "SetOrder",
    "Theme",
    "Title",
    "ValidationError",
    "build_options",
]
