"""Core type definitions for sortkit."""

from __future__ import annotations

from typing import Any, Final, TypeAlias


class Undefined:
    """Marker for a value that is absent, as opposed to an explicit ``None``.

    Field lookups return ``UNDEFINED`` when a path does not resolve. The
    comparator ranks it below every other value, including ``None``.
    """

    _instance: Undefined | None = None

    def __new__(cls) -> Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Final = Undefined()

Record: TypeAlias = Any
"""An externally owned record: mapping, attribute-bearing object, or scalar.

sortkit never mutates records and never assumes a shared schema.
"""
