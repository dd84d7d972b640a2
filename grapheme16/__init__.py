"""
grapheme16 - Unicode grapheme cluster segmentation using UTF-16 code unit offsets

The functionality is in :mod:`grapheme16.unicode`, with the most used
functions also available here.
"""

from __future__ import annotations

__version__ = "1.0.0"

from .unicode import (
    count_clusters,
    next_break,
    previous_break,
    split_into_clusters,
    unicode_version,
)

__all__ = (
    "__version__",
    "count_clusters",
    "next_break",
    "previous_break",
    "split_into_clusters",
    "unicode_version",
)
