"""
Grapheme cluster break property of each codepoint

The property values come from the `Unicode Technical Report #29
<https://www.unicode.org/reports/tr29/#Grapheme_Cluster_Break_Property_Values>`__
tables plus the Extended_Pictographic property from `emoji-data.txt
<https://www.unicode.org/Public/UCD/latest/ucd/emoji/emoji-data.txt>`__.
The source data is in :mod:`grapheme16._graphemedb` as one table of
ranges per category.  The tables are merged into a single sorted
lookup the first time a codepoint is classified, and are never changed
afterwards so they can be read from any number of threads.
"""

from __future__ import annotations

import bisect
import enum
import logging
import threading

from . import _graphemedb
from .codeunits import iter_code_points, to_code_units

logger = logging.getLogger(__name__)

unicode_version = _graphemedb.unicode_version

FAST_LOOKUP_LIMIT = 256
"First codepoint not part of the direct index lookup table"


class GC(enum.IntFlag):
    "Grapheme cluster break categories.  Exactly one applies to each codepoint"

    Other = 2**0
    Control = 2**1
    Extend = 2**2
    ZWJ = 2**3
    Regional_Indicator = 2**4
    Extended_Pictographic = 2**5
    SpacingMark = 2**6
    Prepend = 2**7
    L = 2**8
    V = 2**9
    T = 2**10
    LV = 2**11
    LVT = 2**12


class _Lookup:
    __slots__ = "fast", "starts", "ends", "cats"

    def __init__(self, fast: tuple[GC, ...], starts: tuple[int, ...], ends: tuple[int, ...], cats: tuple[GC, ...]):
        self.fast = fast
        self.starts = starts
        self.ends = ends
        self.cats = cats


_lookup: _Lookup | None = None
_lookup_lock = threading.Lock()


def _build_lookup() -> _Lookup:
    ranges: list[tuple[int, int, GC]] = []
    for name, table in _graphemedb.tables.items():
        cat = GC[name]
        ranges.extend((start, end, cat) for start, end in table)
    ranges.sort()

    for (_, end, cat), (start, _, next_cat) in zip(ranges, ranges[1:]):
        if start <= end:
            raise ValueError(f"Overlapping ranges for {cat.name} and {next_cat.name} at 0x{start:04X}")

    starts = tuple(r[0] for r in ranges)
    ends = tuple(r[1] for r in ranges)
    cats = tuple(r[2] for r in ranges)

    fast: list[GC] = []
    index = 0
    for codepoint in range(FAST_LOOKUP_LIMIT):
        while index < len(ranges) and ends[index] < codepoint:
            index += 1
        if index < len(ranges) and starts[index] <= codepoint:
            fast.append(cats[index])
        else:
            fast.append(GC.Other)

    logger.debug(
        "Built grapheme break lookup: %d ranges, %d direct entries, unicode %s",
        len(ranges),
        len(fast),
        unicode_version,
    )
    return _Lookup(tuple(fast), starts, ends, cats)


def _get_lookup() -> _Lookup:
    global _lookup
    if _lookup is None:
        with _lookup_lock:
            if _lookup is None:
                _lookup = _build_lookup()
    return _lookup


def grapheme_category(codepoint: int) -> GC:
    """Returns the :class:`GC` category for a codepoint

    Codepoints not in any table, including unpaired surrogates and
    values beyond the Unicode range, are :attr:`GC.Other`."""
    lookup = _lookup or _get_lookup()
    if 0 <= codepoint < FAST_LOOKUP_LIMIT:
        return lookup.fast[codepoint]
    index = bisect.bisect_right(lookup.starts, codepoint) - 1
    if index >= 0 and codepoint <= lookup.ends[index]:
        return lookup.cats[index]
    return GC.Other


def category_name(codepoint: int | str) -> str:
    "Returns the name of the grapheme cluster break category, eg ``Extend``"
    if isinstance(codepoint, str):
        if len(codepoint) != 1:
            raise ValueError(f"Expected a single character not {len(codepoint)}")
        codepoint = ord(codepoint)
    if not isinstance(codepoint, int):
        raise TypeError(f"codepoint should be int or str not {type(codepoint).__name__}")
    return grapheme_category(codepoint).name


def has_category(text: str, mask: GC) -> bool:
    "Returns True if any codepoint in text has a category in mask"
    return any(grapheme_category(codepoint) & mask for _, codepoint, _ in iter_code_points(to_code_units(text)))


def is_extended_pictographic(text: str) -> bool:
    "Returns True if any of the text has the extended pictographic property (Emoji and similar)"
    return has_category(text, GC.Extended_Pictographic)


def is_regional_indicator(text: str) -> bool:
    "Returns True if any of the text is one of the 26 `regional indicators <https://en.wikipedia.org/wiki/Regional_indicator_symbol>`__ used in pairs to represent country flags"
    return has_category(text, GC.Regional_Indicator)
