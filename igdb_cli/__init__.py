"""
IGDB CLI - Three-layer client for the IGDB video game database API.

Layers:
- core: Raw types, query options, URL builders and HTTP client
- sdk: High-level IGDBClient with one accessor family per endpoint
- cli: Opinionated command-line interface
"""

from igdb_cli.core import (
    Direction,
    Endpoint,
    Operator,
    SetFields,
    SetFilter,
    SetLimit,
    SetOffset,
    SetOrder,
)
from igdb_cli.sdk import IGDBClient

__version__ = "0.1.0"
__all__ = [
    "Direction",
    "Endpoint",
    "IGDBClient",
    "Operator",
    "SetFields",
    "SetFilter",
    "SetLimit",
    "SetOffset",
    "SetOrder",
]
