"""Value classification.

Classification looks only at the runtime shape of a value. It is a closed
dispatch: anything not recognised falls back to ``Kind.OBJECT``.
"""

from __future__ import annotations

import datetime as dt
import inspect
import numbers
import re
from collections import UserString
from collections.abc import Sequence
from decimal import Decimal
from typing import Any

from sortkit.core.kind.models import KIND_PRECEDENCE, Kind
from sortkit.core.types import Undefined

_NOT_ARRAYS = (str, bytes, bytearray)


def classify(value: Any) -> Kind:
    """Return the semantic kind of a value.

    Args:
        value: Any runtime value, including ``UNDEFINED``.

    Returns:
        Exactly one Kind. Never raises.

    Example:
        >>> classify(None)
        <Kind.NULL: 'null'>
        >>> classify([1, 2])
        <Kind.ARRAY: 'array'>
        >>> classify({"a": 1})
        <Kind.OBJECT: 'object'>
    """
    if value is None:
        return Kind.NULL
    if isinstance(value, Undefined):
        return Kind.UNDEFINED
    # bool is a subclass of int, so it must be checked first
    if isinstance(value, bool):
        return Kind.BOOLEAN
    if isinstance(value, (numbers.Real, Decimal)):
        return Kind.NUMBER
    if isinstance(value, (str, UserString)):
        return Kind.STRING
    if isinstance(value, dt.date):
        return Kind.DATE
    if isinstance(value, BaseException):
        return Kind.ERROR
    if isinstance(value, re.Pattern):
        return Kind.REGEXP
    if isinstance(value, Sequence) and not isinstance(value, _NOT_ARRAYS):
        return Kind.ARRAY
    if inspect.isroutine(value) or isinstance(value, type):
        return Kind.FUNCTION
    return Kind.OBJECT


def precedence(kind: Kind) -> int:
    """Position of a kind in the cross-kind ordering."""
    return KIND_PRECEDENCE[kind]
