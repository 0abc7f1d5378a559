"""Token search over heterogeneous records."""

from __future__ import annotations

import re
from collections import UserString
from collections.abc import Iterable, Sequence
from typing import Any, TypeVar

from sortkit.core.fields import get_path
from sortkit.core.search.models import FieldSpec, parse_search_field
from sortkit.core.sort import normalize_keys
from sortkit.core.types import Undefined

T = TypeVar("T")

_SEPARATOR_RE = re.compile(r"[\s,]+")


def tokenize(query: str | None) -> list[str]:
    """Trim, lowercase and split a query on runs of commas and whitespace.

    An empty or missing query yields a single empty token, which matches
    every record under substring matching.
    """
    return _SEPARATOR_RE.split((query or "").strip().lower())


def stringify(value: Any) -> str:
    """Text a field value is matched against.

    Missing values and None become the empty string, bools become
    ``true``/``false`` and sequences join their items with commas.
    """
    if value is None or isinstance(value, Undefined):
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, UserString)):
        return str(value)
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        return ",".join(stringify(item) for item in value)
    return str(value)


def _token_matches(record: Any, token: str, fields: Sequence[FieldSpec]) -> bool:
    for spec in fields:
        text = stringify(get_path(record, spec.path)).lower()
        if spec.is_exact:
            if text == token:
                return True
        elif token in text:
            return True
    return False


def matches(
    record: Any,
    tokens: Sequence[str],
    fields: Sequence[FieldSpec],
    *,
    match_all: bool = True,
) -> bool:
    """Check whether one record satisfies a tokenized query.

    Args:
        record: Record to test.
        tokens: Lowercased query tokens, see tokenize().
        fields: Fields each token may match in.
        match_all: Require every token to match (default). When False, any
            matching token is enough.

    Returns:
        True if the record should be kept.
    """
    if match_all:
        return all(_token_matches(record, token, fields) for token in tokens)
    return any(_token_matches(record, token, fields) for token in tokens)


def search(
    records: Iterable[T],
    query: str | None,
    keys: str | Iterable[str],
    *,
    match_all: bool = True,
) -> list[T]:
    """Filter records by a free-text query over one or more fields.

    The query is split into tokens on commas and whitespace. A record is kept
    when every token matches at least one field. Fields match by substring,
    or by equality when the key carries the ``:exact`` modifier. Matching is
    case-insensitive.

    Args:
        records: Records to filter. Not modified.
        query: Free-text query. An empty query keeps every record.
        keys: A field key or list of keys, e.g. ``["name", "id:exact"]``.
        match_all: When False, keep records matching any token instead.

    Returns:
        Matching records, in input order.

    Example:
        >>> search([{"name": "Foo Bar"}, {"name": "Baz"}], "foo", "name")
        [{'name': 'Foo Bar'}]
    """
    tokens = tokenize(query)
    fields = [parse_search_field(k) for k in normalize_keys(keys)]
    return [r for r in records if matches(r, tokens, fields, match_all=match_all)]
