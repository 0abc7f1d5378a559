"""Search: multi-token, multi-field filtering of record collections."""

from sortkit.core.search.models import EXACT_MODIFIER, FieldSpec, parse_search_field
from sortkit.core.search.operations import matches, search, stringify, tokenize

__all__ = [
    # Models
    "FieldSpec",
    "EXACT_MODIFIER",
    "parse_search_field",
    # Operations
    "matches",
    "search",
    "stringify",
    "tokenize",
]
