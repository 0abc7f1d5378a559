"""Search models: per-field match specs."""

from __future__ import annotations

from dataclasses import dataclass

EXACT_MODIFIER = "exact"


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """Parsed instruction governing one search field.

    Attributes:
        path: Dotted field path to resolve on each record.
        modifier: Text after the first ``:`` in the key, empty if none.
    """

    path: str
    modifier: str = ""

    @property
    def is_exact(self) -> bool:
        """True if tokens must equal the field value rather than be contained in it."""
        return self.modifier == EXACT_MODIFIER


def parse_search_field(token: str) -> FieldSpec:
    """Parse ``"path"`` or ``"path:modifier"`` into a FieldSpec.

    Example:
        >>> parse_search_field("name:exact")
        FieldSpec(path='name', modifier='exact')
    """
    path, sep, modifier = token.partition(":")
    if not sep:
        return FieldSpec(path=token)
    return FieldSpec(path=path, modifier=modifier)
