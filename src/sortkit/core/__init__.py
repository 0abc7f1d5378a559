"""Core functionalities: stateless classification, comparison, sorting and search.

Architecture Note:
    core/ contains pure, stateless functions over caller-owned records.
    Nothing here mutates its inputs or keeps state between calls.
    Tunables live in config/.
"""

from sortkit.core.compare import compare, compare_key, compare_strings, epoch_seconds, spaceship
from sortkit.core.fields import get_path, pad_left, split_path
from sortkit.core.kind import KIND_PRECEDENCE, Kind, classify, precedence
from sortkit.core.search import (
    EXACT_MODIFIER,
    FieldSpec,
    matches,
    parse_search_field,
    search,
    stringify,
    tokenize,
)
from sortkit.core.sort import (
    DESC_SUFFIX,
    SortDirective,
    normalize_keys,
    parse_field,
    sort_by,
    sortable_numeric_suffix,
)
from sortkit.core.types import UNDEFINED, Record, Undefined

__all__ = [
    # Types
    "UNDEFINED",
    "Undefined",
    "Record",
    # Kind
    "Kind",
    "KIND_PRECEDENCE",
    "classify",
    "precedence",
    # Compare
    "compare",
    "compare_key",
    "compare_strings",
    "epoch_seconds",
    "spaceship",
    # Fields
    "get_path",
    "pad_left",
    "split_path",
    # Sort
    "SortDirective",
    "DESC_SUFFIX",
    "parse_field",
    "normalize_keys",
    "sort_by",
    "sortable_numeric_suffix",
    # Search
    "FieldSpec",
    "EXACT_MODIFIER",
    "parse_search_field",
    "matches",
    "search",
    "stringify",
    "tokenize",
]
