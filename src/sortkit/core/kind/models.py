"""Kind models: the closed set of semantic value kinds and their ordering."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType


class Kind(Enum):
    """Semantic category a runtime value is classified into."""

    UNDEFINED = "undefined"
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"
    ERROR = "error"
    REGEXP = "regexp"
    FUNCTION = "function"
    DATE = "date"


KIND_PRECEDENCE: MappingProxyType[Kind, int] = MappingProxyType(
    {
        Kind.UNDEFINED: 0,
        Kind.NULL: 1,
        Kind.BOOLEAN: 2,
        Kind.NUMBER: 3,
        Kind.STRING: 4,
        Kind.ARRAY: 5,
        Kind.OBJECT: 6,
        Kind.ERROR: 7,
        Kind.REGEXP: 8,
        Kind.FUNCTION: 9,
        Kind.DATE: 10,
    }
)
"""Total order over kinds. Values of differing kinds compare by this table alone."""
