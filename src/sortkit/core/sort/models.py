"""Sort models: per-key sort directives."""

from __future__ import annotations

from dataclasses import dataclass

DESC_SUFFIX = "desc"
"""Token suffix (after ``:``) marking a descending key."""


@dataclass(frozen=True, slots=True)
class SortDirective:
    """Parsed instruction governing one sort key.

    Attributes:
        path: Dotted field path to resolve on each record.
        reverse: Whether this key sorts descending.
    """

    path: str
    reverse: bool = False


def parse_field(token: str) -> SortDirective:
    """Parse ``"path"`` or ``"path:desc"`` into a SortDirective.

    Only an exact two-part ``path:desc`` form is treated as descending. Any
    other token, including paths that contain ``:`` for other reasons, is
    kept whole as an ascending path.

    Example:
        >>> parse_field("name:desc")
        SortDirective(path='name', reverse=True)
        >>> parse_field("a:b:desc")
        SortDirective(path='a:b:desc', reverse=False)
    """
    parts = token.split(":")
    if len(parts) == 2 and parts[1] == DESC_SUFFIX:
        return SortDirective(path=parts[0], reverse=True)
    return SortDirective(path=token, reverse=False)
