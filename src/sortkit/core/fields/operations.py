"""Field-path resolution and string padding.

Paths are dotted: ``"owner.name"``, ``"tags.0"``. A segment may be quoted to
keep dots inside it: ``'labels."app.kubernetes.io/name"'``.
"""

from __future__ import annotations

import re
from collections import UserString
from collections.abc import Mapping, Sequence
from typing import Any

from sortkit.core.types import UNDEFINED, Record, Undefined

_INDEX_RE = re.compile(r"-?[0-9]+")
_STRINGS = (str, UserString, bytes, bytearray)
_SCALARS = (*_STRINGS, int, float, complex, type(None), Undefined)
_MISSING = object()


def split_path(path: str) -> list[str]:
    """Split a dotted path into segments, honouring quoted segments.

    Args:
        path: Dotted path. A single or double quote at the start of a
            segment groups it up to the matching quote. Quotes elsewhere
            are literal characters.

    Returns:
        Segments in order. An empty path yields an empty list.

    Example:
        >>> split_path('metadata.labels."app.io/name"')
        ['metadata', 'labels', 'app.io/name']
    """
    segments: list[str] = []
    current: list[str] = []
    quote: str | None = None
    for char in path:
        if quote is not None:
            if char == quote:
                quote = None
            else:
                current.append(char)
        elif char in ("'", '"') and not current:
            # quotes only group a segment when they open it
            quote = char
        elif char == ".":
            segments.append("".join(current))
            current = []
        else:
            current.append(char)
    if path:
        segments.append("".join(current))
    return segments


def _lookup_segment(container: Any, segment: str) -> Any:
    if isinstance(container, Mapping):
        if segment in container:
            return container[segment]
        if _INDEX_RE.fullmatch(segment) and int(segment) in container:
            return container[int(segment)]
        return _MISSING
    if isinstance(container, Sequence) and not isinstance(container, _STRINGS):
        if not _INDEX_RE.fullmatch(segment):
            return _MISSING
        index = int(segment)
        if -len(container) <= index < len(container):
            return container[index]
        return _MISSING
    if isinstance(container, _SCALARS) or segment.startswith("_") or not segment:
        return _MISSING
    return getattr(container, segment, _MISSING)


def _lookup(container: Any, segment: str) -> Any:
    # Records are opaque: a failing property or container hook reads as missing
    try:
        return _lookup_segment(container, segment)
    except Exception:
        return _MISSING


def get_path(record: Record, path: str, default: Any = UNDEFINED) -> Any:
    """Resolve a dotted path against a record.

    Each segment is tried as a mapping key, then a sequence index, then an
    attribute (public attributes only).

    Args:
        record: Mapping, object or sequence to read from.
        path: Dotted path. An empty path returns the record itself.
        default: Returned when any segment is missing.

    Returns:
        The resolved value, or ``default``. Never raises: a property or
        container hook that fails counts as a missing segment.
    """
    current = record
    for segment in split_path(path):
        current = _lookup(current, segment)
        if current is _MISSING:
            return default
    return current


def pad_left(text: str, width: int, char: str = " ") -> str:
    """Left-pad text with char up to width. Longer text is returned unchanged."""
    return text.rjust(width, char)
