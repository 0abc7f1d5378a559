"""Pure comparison functions over values of unknown kind.

Values of differing kinds order by kind precedence alone. Values of the same
kind compare by content where the kind has a natural order, and compare equal
otherwise. None of these functions raise for any input.
"""

from __future__ import annotations

import datetime as dt
import functools
import locale
import math
import warnings
from collections.abc import Callable, Sequence
from decimal import Decimal
from typing import Any

from sortkit.config import EngineSettings, StringCollation, resolve_settings
from sortkit.core.kind import Kind, classify, precedence

_EPOCH = dt.datetime(1970, 1, 1, tzinfo=dt.UTC)


def _is_nan(value: Any) -> bool:
    if isinstance(value, float):
        return math.isnan(value)
    if isinstance(value, Decimal):
        return value.is_nan()
    return False


def spaceship(a: Any, b: Any) -> int:
    """Sign of ``a - b`` as -1, 0 or 1.

    Args:
        a: First number (bools count as 0/1).
        b: Second number.

    Returns:
        -1 if a < b, 1 if a > b, 0 otherwise. NaN on either side gives 0.
    """
    if _is_nan(a) or _is_nan(b):
        return 0
    return (a > b) - (a < b)


def _collate_locale(a: str, b: str) -> int:
    try:
        return spaceship(locale.strcoll(a, b), 0)
    except ValueError:
        # strcoll rejects embedded NUL characters
        return spaceship(a, b)


def _collate_casefold(a: str, b: str) -> int:
    return spaceship(a.casefold(), b.casefold()) or spaceship(a, b)


_COLLATORS: dict[StringCollation, Callable[[str, str], int]] = {
    "locale": _collate_locale,
    "casefold": _collate_casefold,
    "ordinal": spaceship,
}


def compare_strings(a: str, b: str, collation: StringCollation = "locale") -> int:
    """Compare two strings under the given collation, sign-normalized."""
    return _COLLATORS[collation](a, b)


def as_utc(value: dt.date) -> dt.datetime:
    """Aware datetime for a date or datetime. Naive values and plain dates are read as UTC."""
    if not isinstance(value, dt.datetime):
        value = dt.datetime(value.year, value.month, value.day)
    if value.tzinfo is None or value.utcoffset() is None:
        value = value.replace(tzinfo=dt.UTC)
    return value


def epoch_seconds(value: dt.date) -> float:
    """Seconds since the Unix epoch, as a float. See as_utc() for naive values."""
    return (as_utc(value) - _EPOCH).total_seconds()


def _compare_arrays(a: Sequence[Any], b: Sequence[Any], settings: EngineSettings, depth: int) -> int:
    if depth >= settings.max_compare_depth:
        warnings.warn(
            f"Array nesting exceeds max_compare_depth={settings.max_compare_depth}; "
            f"treating the values as equal.",
            RuntimeWarning,
            # two frames per nesting level, then compare() and its caller
            stacklevel=2 * depth + 4,
        )
        return 0
    for item_a, item_b in zip(a, b, strict=False):
        result = _compare(item_a, item_b, settings, depth + 1)
        if result:
            return result
    # All shared elements are equal, shorter array first
    return spaceship(len(a), len(b))


def _compare(a: Any, b: Any, settings: EngineSettings, depth: int) -> int:
    kind_a = classify(a)
    kind_b = classify(b)

    result = spaceship(precedence(kind_a), precedence(kind_b))
    if result:
        return result

    match kind_a:
        case Kind.BOOLEAN | Kind.NUMBER:
            return spaceship(a, b)
        case Kind.STRING:
            return compare_strings(str(a), str(b), settings.string_collation)
        case Kind.ARRAY:
            return _compare_arrays(a, b, settings, depth)
        case Kind.DATE:
            # exact instants, microseconds included
            return spaceship(as_utc(a), as_utc(b))
    return 0


def compare(a: Any, b: Any, *, settings: EngineSettings | None = None) -> int:
    """Compare two values of arbitrary kind.

    Kind precedence decides first, so mismatched kinds never reach value
    comparison. Same-kind pairs compare as follows:

    - boolean, number: numerically.
    - string: by the configured collation.
    - array: element-wise over the common prefix, then shorter first.
    - date: by instant, to the microsecond.
    - everything else (objects, errors, functions, None, UNDEFINED): equal.

    Args:
        a: First value.
        b: Second value.
        settings: Engine settings. Defaults to the process-wide settings.

    Returns:
        -1, 0 or 1.

    Example:
        >>> compare(5, "a")
        -1
        >>> compare([1, 2], [1, 2, 0])
        -1
    """
    return _compare(a, b, resolve_settings(settings), 0)


def compare_key(*, settings: EngineSettings | None = None) -> Callable[[Any], Any]:
    """Key function ordering values by compare(), for use with sorted()."""
    resolved = resolve_settings(settings)
    return functools.cmp_to_key(lambda a, b: _compare(a, b, resolved, 0))
