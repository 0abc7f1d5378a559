"""Kind classification: semantic value kinds and their precedence."""

from sortkit.core.kind.models import KIND_PRECEDENCE, Kind
from sortkit.core.kind.operations import classify, precedence

__all__ = [
    # Models
    "Kind",
    "KIND_PRECEDENCE",
    # Operations
    "classify",
    "precedence",
]
