"""sortkit: type-aware ordering and filtering for loosely-typed records.

Usage:
    from sortkit import search, sort_by, sortable_numeric_suffix

    hosts = [
        {"name": "node10", "meta": {"zone": "b"}},
        {"name": "node2", "meta": {"zone": "a"}},
    ]

    sort_by(hosts, ["meta.zone", "name:desc"])
    search(hosts, "node zone", ["name", "meta.zone"])
    sorted(hosts, key=lambda h: sortable_numeric_suffix(h["name"]))
"""

__version__ = "0.1.0"

# Configuration
from sortkit.config import EngineSettings, get_settings, reset_settings

# Core primitives
from sortkit.core import (
    KIND_PRECEDENCE,
    UNDEFINED,
    FieldSpec,
    Kind,
    SortDirective,
    Undefined,
    classify,
    compare,
    compare_key,
    get_path,
    matches,
    pad_left,
    parse_field,
    parse_search_field,
    search,
    sort_by,
    sortable_numeric_suffix,
    tokenize,
)

__all__ = [
    # Version
    "__version__",
    # Types
    "UNDEFINED",
    "Undefined",
    # Kind
    "Kind",
    "KIND_PRECEDENCE",
    "classify",
    # Compare
    "compare",
    "compare_key",
    # Fields
    "get_path",
    "pad_left",
    # Sort
    "SortDirective",
    "parse_field",
    "sort_by",
    "sortable_numeric_suffix",
    # Search
    "FieldSpec",
    "parse_search_field",
    "matches",
    "search",
    "tokenize",
    # Config
    "EngineSettings",
    "get_settings",
    "reset_settings",
]
