"""Value comparison: a total order over values of unknown kind."""

from sortkit.core.compare.operations import (
    as_utc,
    compare,
    compare_key,
    compare_strings,
    epoch_seconds,
    spaceship,
)

__all__ = [
    "as_utc",
    "compare",
    "compare_key",
    "compare_strings",
    "epoch_seconds",
    "spaceship",
]
