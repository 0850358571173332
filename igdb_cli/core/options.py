"""
Query options for IGDB requests.

Each option is a small directive applied to an OptionSet builder. Directives
that only make sense once (order, limit, offset, search) are last-write-wins;
fields and filters accumulate.

Example:
    opts = build_options(
        SetFields("name", "cover.url"),
        SetFilter("popularity", Operator.GREATER_THAN, 75),
        SetOrder("popularity", Direction.DESC),
        SetLimit(10),
    )
    opts.encode()

"""

import urllib.parse
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol

from igdb_cli.core.client import OutOfRangeError, ValidationError

MIN_LIMIT = 1
MAX_LIMIT = 50
MIN_OFFSET = 0

ALL_FIELDS = "*"


class Operator(str, Enum):
    """Filter operators understood by the API."""

    EQUALS = "eq"
    NOT_EQUALS = "not_eq"
    GREATER_THAN = "gt"
    GREATER_OR_EQUAL = "gte"
    LESS_THAN = "lt"
    LESS_OR_EQUAL = "lte"
    PREFIX = "prefix"


class Direction(str, Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class Filter:
    """A single filter clause."""

    field: str
    operator: Operator
    value: str

    @property
    def key(self) -> str:
        return f"filter[{self.field}][{self.operator.value}]"


@dataclass(frozen=True)
class Order:
    """A sort key and direction."""

    field: str
    direction: Direction = Direction.ASC

    def encode(self) -> str:
        return f"{self.field}:{self.direction.value}"


@dataclass
class OptionSet:
    """
    Accumulated query configuration.

    Build with directives via apply(), then call finalize() once to validate.
    """

    fields: list[str] = field(default_factory=list)
    filters: list[Filter] = field(default_factory=list)
    order: Order | None = None
    limit: int | None = None
    offset: int | None = None
    search: str | None = None

    def apply(self, *opts: "Option") -> "OptionSet":
        """Apply directives in order."""
        for opt in opts:
            opt.apply(self)
        return self

    def finalize(self) -> "OptionSet":
        """
        Validate the accumulated options.

        Raises:
            OutOfRangeError: If limit or offset is outside its allowed range

        """
        if self.limit is not None and not MIN_LIMIT <= self.limit <= MAX_LIMIT:
            raise OutOfRangeError("limit", self.limit)
        if self.offset is not None and self.offset < MIN_OFFSET:
            raise OutOfRangeError("offset", self.offset)
        return self

    def pairs(self) -> list[tuple[str, str]]:
        """Return the query parameters as ordered key/value pairs."""
        pairs: list[tuple[str, str]] = []
        if self.fields:
            names = [ALL_FIELDS] if ALL_FIELDS in self.fields else self.fields
            pairs.append(("fields", ",".join(names)))
        for f in self.filters:
            pairs.append((f.key, f.value))
        if self.order is not None:
            pairs.append(("order", self.order.encode()))
        if self.limit is not None:
            pairs.append(("limit", str(self.limit)))
        if self.offset is not None:
            pairs.append(("offset", str(self.offset)))
        if self.search is not None:
            pairs.append(("search", self.search))
        # Sorted by key only; repeated keys keep insertion order
        return sorted(pairs, key=lambda pair: pair[0])

    def encode(self) -> str:
        """Form-encode the options as a query string ("" if empty)."""
        return urllib.parse.urlencode(self.pairs())


class Option(Protocol):
    """A directive that mutates an OptionSet."""

    def apply(self, opts: OptionSet) -> None: ...


@dataclass(frozen=True, init=False)
class SetFields:
    """Select the fields to return. "*" selects every field."""

    names: tuple[str, ...]

    def __init__(self, *names: str):
        object.__setattr__(self, "names", tuple(names))

    def apply(self, opts: OptionSet) -> None:
        for name in self.names:
            name = name.strip()
            if name and name not in opts.fields:
                opts.fields.append(name)


@dataclass(frozen=True)
class SetFilter:
    """Add a filter clause. Clauses on the same field are kept separately."""

    field: str
    operator: Operator
    value: Any

    def apply(self, opts: OptionSet) -> None:
        opts.filters.append(Filter(self.field.strip(), _operator(self.operator), _stringify(self.value)))


@dataclass(frozen=True)
class SetOrder:
    """Sort results by a field."""

    field: str
    direction: Direction = Direction.ASC

    def apply(self, opts: OptionSet) -> None:
        opts.order = Order(self.field.strip(), _direction(self.direction))


@dataclass(frozen=True)
class SetLimit:
    """Limit the number of results (1 to 50)."""

    n: int

    def apply(self, opts: OptionSet) -> None:
        opts.limit = self.n


@dataclass(frozen=True)
class SetOffset:
    """Skip the first n results."""

    n: int

    def apply(self, opts: OptionSet) -> None:
        opts.offset = self.n


@dataclass(frozen=True)
class SetSearch:
    """Search term. Only added by the search URL builder."""

    query: str

    def apply(self, opts: OptionSet) -> None:
        opts.search = self.query


def build_options(*opts: Option) -> OptionSet:
    """Apply the directives to a fresh OptionSet and validate it."""
    return OptionSet().apply(*opts).finalize()


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def _operator(value: Any) -> Operator:
    try:
        return Operator(value)
    except ValueError:
        raise ValidationError(f"Unknown filter operator: {value}", {"choices": [op.value for op in Operator]})


def _direction(value: Any) -> Direction:
    try:
        return Direction(value)
    except ValueError:
        raise ValidationError(f"Invalid sort direction: {value}", {"choices": [d.value for d in Direction]})
