"""
IGDB CLI - Opinionated command-line interface.

This layer provides the user-facing CLI commands, using the SDK layer
for all operations. It handles:
- Argument parsing and conversion to query options
- TTY detection for human vs machine output
- JSON output for piping/automation
"""

import argparse
import dataclasses
import json
import logging
import sys
from typing import Any

from igdb_cli.core.client import IGDBError, ValidationError
from igdb_cli.core.options import (
    Direction,
    Operator,
    Option,
    SetFields,
    SetFilter,
    SetLimit,
    SetOffset,
    SetOrder,
)
from igdb_cli.core.types import RawJSON
from igdb_cli.core.urls import Endpoint
from igdb_cli.sdk import EndpointOperations, IGDBClient

# =============================================================================
# Output Helpers
# =============================================================================


def is_tty() -> bool:
    """Check if stdout is a TTY (human) or pipe (machine)."""
    return sys.stdout.isatty()


def json_output(data: Any, pretty: bool = False) -> None:
    """Print JSON output."""
    indent = 2 if pretty or is_tty() else None
    print(json.dumps(data, indent=indent, default=str))


def error_output(error: IGDBError) -> None:
    """Print error and exit."""
    json_output(error.to_dict())
    sys.exit(1)


def to_plain(value: Any) -> Any:
    """Convert entities to JSON-ready values, decoding raw JSON payloads."""
    if isinstance(value, RawJSON):
        return value.decode()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_plain(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, list):
        return [to_plain(v) for v in value]
    return value


# =============================================================================
# Option Parsing
# =============================================================================


def parse_operator(raw: str) -> Operator:
    """Parse an operator by wire name (gt) or member name (greater_than)."""
    for op in Operator:
        if raw.lower() in (op.value, op.name.lower()):
            return op
    raise ValidationError(f"Unknown filter operator: {raw}", {"choices": [op.value for op in Operator]})


def parse_filter(raw: str) -> SetFilter:
    """Parse FIELD:OP:VALUE into a filter option."""
    parts = raw.split(":", 2)
    if len(parts) != 3 or not parts[0]:
        raise ValidationError(f"Invalid filter (expected FIELD:OP:VALUE): {raw}")
    field, op, value = parts
    return SetFilter(field, parse_operator(op), value)


def parse_order(raw: str) -> SetOrder:
    """Parse FIELD[:asc|desc] into an order option."""
    field, _, direction = raw.partition(":")
    try:
        return SetOrder(field, Direction(direction.lower() or "asc"))
    except ValueError:
        raise ValidationError(f"Invalid sort direction: {direction}", {"choices": [d.value for d in Direction]})


def options_from_args(args: argparse.Namespace) -> list[Option]:
    """Build query options from the shared CLI flags."""
    opts: list[Option] = []
    if args.fields:
        opts.append(SetFields(*args.fields.split(",")))
    for raw in args.filter or []:
        opts.append(parse_filter(raw))
    if args.order:
        opts.append(parse_order(args.order))
    if args.limit is not None:
        opts.append(SetLimit(args.limit))
    if args.offset is not None:
        opts.append(SetOffset(args.offset))
    return opts


def endpoint_ops(client: IGDBClient, args: argparse.Namespace) -> EndpointOperations[Any]:
    """Resolve the endpoint argument to its accessor family."""
    return client.endpoint(Endpoint.from_name(args.endpoint))


# =============================================================================
# CLI Commands
# =============================================================================


def cmd_get(client: IGDBClient, args: argparse.Namespace) -> None:
    """Get a single entity by ID."""
    try:
        entity = endpoint_ops(client, args).get(args.id, *options_from_args(args))
        json_output(to_plain(entity))
    except IGDBError as e:
        error_output(e)


def cmd_list(client: IGDBClient, args: argparse.Namespace) -> None:
    """Get several entities by ID."""
    try:
        entities = endpoint_ops(client, args).list(args.ids, *options_from_args(args))
        json_output({"data": to_plain(entities), "total_count": len(entities)})
    except IGDBError as e:
        error_output(e)


def cmd_index(client: IGDBClient, args: argparse.Namespace) -> None:
    """List entities under the given options."""
    try:
        entities = endpoint_ops(client, args).index(*options_from_args(args))
        json_output({"data": to_plain(entities), "total_count": len(entities)})
    except IGDBError as e:
        error_output(e)


def cmd_search(client: IGDBClient, args: argparse.Namespace) -> None:
    """Search an endpoint."""
    try:
        entities = endpoint_ops(client, args).search(args.query, *options_from_args(args))
        json_output({"data": to_plain(entities), "total_count": len(entities)})
    except IGDBError as e:
        error_output(e)


def cmd_count(client: IGDBClient, args: argparse.Namespace) -> None:
    """Count entities matching the given options."""
    try:
        count = endpoint_ops(client, args).count(*options_from_args(args))
        json_output({"endpoint": args.endpoint, "count": count})
    except IGDBError as e:
        error_output(e)


def cmd_fields(client: IGDBClient, args: argparse.Namespace) -> None:
    """List the fields available on an endpoint."""
    try:
        fields = endpoint_ops(client, args).fields()
        if is_tty():
            for name in fields:
                print(name)
        else:
            json_output({"endpoint": args.endpoint, "fields": fields})
    except IGDBError as e:
        error_output(e)


# =============================================================================
# Parser
# =============================================================================


def _add_query_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--fields", "-f", help="Comma separated fields to return (* for all)")
    parser.add_argument(
        "--filter",
        action="append",
        metavar="FIELD:OP:VALUE",
        help="Filter clause, e.g. popularity:gt:75 (repeatable)",
    )
    parser.add_argument("--order", metavar="FIELD[:asc|desc]", help="Sort order")
    parser.add_argument("--limit", "-l", type=int, help="Max results (1-50)")
    parser.add_argument("--offset", "-o", type=int, help="Offset for pagination")


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="igdb",
        description="Query the IGDB video game database",
    )
    parser.add_argument("--api-key", help="IGDB API key (or IGDB_API_KEY env var)")
    parser.add_argument("--base-url", help="API root URL (or IGDB_BASE_URL env var)")
    parser.add_argument("--timeout", type=float, default=60, help="Request timeout in seconds")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log requests to stderr")

    subparsers = parser.add_subparsers(dest="command")
    endpoint_help = "Endpoint name, e.g. games, pulses, companies"

    get = subparsers.add_parser("get", help="Get an entity by ID")
    get.add_argument("endpoint", help=endpoint_help)
    get.add_argument("id", type=int, help="Entity ID")
    _add_query_flags(get)
    get.set_defaults(func=cmd_get)

    lst = subparsers.add_parser("list", help="Get several entities by ID")
    lst.add_argument("endpoint", help=endpoint_help)
    lst.add_argument("ids", type=int, nargs="*", help="Entity IDs")
    _add_query_flags(lst)
    lst.set_defaults(func=cmd_list)

    index = subparsers.add_parser("index", help="List entities")
    index.add_argument("endpoint", help=endpoint_help)
    _add_query_flags(index)
    index.set_defaults(func=cmd_index)

    search = subparsers.add_parser("search", help="Search an endpoint")
    search.add_argument("endpoint", help=endpoint_help)
    search.add_argument("query", help="Search term")
    _add_query_flags(search)
    search.set_defaults(func=cmd_search)

    count = subparsers.add_parser("count", help="Count entities")
    count.add_argument("endpoint", help=endpoint_help)
    _add_query_flags(count)
    count.set_defaults(func=cmd_count)

    fields = subparsers.add_parser("fields", help="List the fields of an endpoint")
    fields.add_argument("endpoint", help=endpoint_help)
    fields.set_defaults(func=cmd_fields)

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(0)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    client = IGDBClient(api_key=args.api_key, base_url=args.base_url, timeout=args.timeout)
    args.func(client, args)


if __name__ == "__main__":
    main()
