"""Multi-key sorting and natural-order key normalization."""

from __future__ import annotations

import functools
import re
from collections.abc import Iterable
from typing import Any, TypeVar

from sortkit.config import EngineSettings, resolve_settings
from sortkit.core.compare import compare
from sortkit.core.fields import get_path, pad_left
from sortkit.core.sort.models import SortDirective, parse_field

T = TypeVar("T")

_NON_DIGIT_RUN_RE = re.compile(r"([^0-9]+)")
_DIGIT_RUN_RE = re.compile(r"[0-9]+")


def normalize_keys(keys: str | Iterable[str]) -> list[str]:
    """Convert a key argument to a list of key tokens.

    A single string becomes a one-element list.

    Raises:
        TypeError: If keys is neither a string nor an iterable of strings.
    """
    if isinstance(keys, str):
        return [keys]
    if not isinstance(keys, Iterable):
        raise TypeError(f"Invalid keys: {keys!r}")
    tokens = list(keys)
    invalid = [k for k in tokens if not isinstance(k, str)]
    if invalid:
        raise TypeError(f"Keys must be strings, got: {invalid!r}")
    return tokens


def sort_by(
    records: Iterable[T],
    keys: str | Iterable[str],
    desc: bool = False,
    *,
    settings: EngineSettings | None = None,
) -> list[T]:
    """Sort records by one or more field paths.

    Keys are tried in order; the first one that tells a pair apart decides.
    A key's comparison is negated when ``desc`` is set, and negated again
    when the key itself ends in ``:desc``, so both together sort ascending.
    Missing fields resolve to UNDEFINED, which sorts before everything.

    The sort is stable: records that tie on every key keep their input order.

    Args:
        records: Records to sort. Not modified.
        keys: A key token or list of tokens, e.g. ``["kind", "name:desc"]``.
        desc: Reverse the whole ordering.
        settings: Engine settings. Defaults to the process-wide settings.

    Returns:
        A new list.

    Example:
        >>> sort_by([{"a": 2}, {"a": 1}], "a")
        [{'a': 1}, {'a': 2}]
    """
    directives = [parse_field(k) for k in normalize_keys(keys)]
    resolved = resolve_settings(settings)

    def _order(rec_a: T, rec_b: T) -> int:
        return _compare_records(rec_a, rec_b, directives, desc, resolved)

    return sorted(records, key=functools.cmp_to_key(_order))


def _compare_records(
    rec_a: Any,
    rec_b: Any,
    directives: list[SortDirective],
    desc: bool,
    settings: EngineSettings,
) -> int:
    for directive in directives:
        result = compare(
            get_path(rec_a, directive.path), get_path(rec_b, directive.path), settings=settings
        )
        if result:
            if desc:
                result = -result
            if directive.reverse:
                result = -result
            return result
    return 0


def sortable_numeric_suffix(value: Any, *, settings: EngineSettings | None = None) -> Any:
    """Zero-pad every digit run so plain string order matches numeric order.

    ``"foo1-bar2"`` becomes ``"foo0000000001-bar0000000002"``. Digit runs
    longer than the pad width are kept as they are. Non-string input is
    returned unchanged.

    Args:
        value: Value to normalize.
        settings: Engine settings supplying numeric_pad_width.

    Returns:
        The normalized string, or value itself if it is not a string.
    """
    if not isinstance(value, str):
        return value
    width = resolve_settings(settings).numeric_pad_width
    runs = _NON_DIGIT_RUN_RE.split(value)
    return "".join(
        pad_left(run, width, "0") if _DIGIT_RUN_RE.fullmatch(run) else run for run in runs
    ).strip()
