"""Sorting: sort directives, multi-key sorting and numeric-suffix keys."""

from sortkit.core.sort.models import DESC_SUFFIX, SortDirective, parse_field
from sortkit.core.sort.operations import normalize_keys, sort_by, sortable_numeric_suffix

__all__ = [
    # Models
    "SortDirective",
    "DESC_SUFFIX",
    "parse_field",
    # Operations
    "normalize_keys",
    "sort_by",
    "sortable_numeric_suffix",
]
