"""Field access: dotted-path resolution against heterogeneous records."""

from sortkit.core.fields.operations import get_path, pad_left, split_path

__all__ = [
    "get_path",
    "pad_left",
    "split_path",
]
