#!/usr/bin/env python3

"""
:mod:`grapheme16.unicode` - Grapheme cluster segmentation of UTF-16 indexed text

Multiple consecutive codepoints can combine into a single user
perceived character (grapheme cluster), such as combining accents,
variation selectors, `skin tone modifiers
<https://en.wikipedia.org/wiki/Fitzpatrick_scale>`__, `zero width
joiner <https://en.wikipedia.org/wiki/Zero-width_joiner>`__ emoji
sequences and pairs of `regional indicators
<https://en.wikipedia.org/wiki/Regional_indicator_symbol>`__ making
flags.  That means you can't move a cursor, split, truncate or count
text by indexes without potentially breaking them.

Offsets

    Every offset taken and returned is a UTF-16 code unit offset (see
    :mod:`grapheme16.codeunits`), which is how JavaScript, Java and
    ICU index strings.  For text where every codepoint is below
    ``U+10000`` code unit offsets are the same as :class:`str`
    indexes.  ``"😜👍🏼"`` is 3 codepoints in Python, but 6 code units
    and 2 grapheme clusters of 2 and 4 code units.

Rules

    The `Unicode Technical Report #29
    <https://www.unicode.org/reports/tr29/#Grapheme_Cluster_Boundary_Rules>`__
    rules for Latin, CJK, Hangul and emoji are implemented.  The Indic
    conjunct rule (GB9c) is not, so those clusters are split more
    finely than the full rules require.

Errors

    Nothing is raised for any :class:`str`.  Offsets outside the text
    are clamped and unpaired surrogates are treated as one codepoint
    each.  Giving something other than a :class:`str` or an :class:`int`
    offset raises :exc:`TypeError`.

Run ``python3 -m grapheme16 --help`` for command line tools.
"""

from __future__ import annotations

from typing import Iterator

from . import _breaker
from .codeunits import CodeUnitText, code_unit_length, to_code_units
from .properties import (
    category_name,
    is_extended_pictographic,
    is_regional_indicator,
    unicode_version,
)

__all__ = (
    "category_name",
    "cluster_iter",
    "cluster_iter_with_offsets",
    "code_unit_length",
    "count_clusters",
    "is_extended_pictographic",
    "is_regional_indicator",
    "next_break",
    "next_cluster",
    "previous_break",
    "previous_cluster",
    "split_into_clusters",
    "unicode_version",
)


def _check_offset(offset: int) -> int:
    if not isinstance(offset, int):
        raise TypeError(f"offset should be int not {type(offset).__name__}")
    return offset


def next_break(text: str, offset: int = 0) -> int:
    """Returns the end of the grapheme cluster containing offset

    :param text: The text to examine
    :param offset: Code unit offset to start from

    :returns: The smallest cluster boundary greater than offset.  If
      offset is at or beyond the end of the text then the length of
      the text in code units is returned.
    """
    _check_offset(offset)
    return _breaker.next_break(to_code_units(text), offset)


def previous_break(text: str, offset: int) -> int:
    """Returns the start of the grapheme cluster before offset

    :param text: The text to examine
    :param offset: Code unit offset to start from

    :returns: The largest cluster boundary less than offset.  Zero is
      returned for offsets at or before the start, and the length of
      the text for offsets beyond the end.
    """
    _check_offset(offset)
    return _breaker.previous_break(to_code_units(text), offset)


def cluster_iter_with_offsets(text: str, offset: int = 0) -> Iterator[tuple[int, int, str]]:
    "Iterator providing start, end, text of each grapheme cluster from offset"
    _check_offset(offset)
    cut = CodeUnitText(text)
    units = cut.units
    start = max(0, offset)
    for end in _breaker.boundaries(units, start):
        yield (start, end, cut.substr(start, end))
        start = end


def cluster_iter(text: str, offset: int = 0) -> Iterator[str]:
    "Iterator providing text of each grapheme cluster from offset"
    for _, _, cluster in cluster_iter_with_offsets(text, offset):
        yield cluster


def split_into_clusters(text: str) -> list[str]:
    """Returns a list of each grapheme cluster in order

    Joining the list together gives back the original text.  An empty
    text gives an empty list."""
    return list(cluster_iter(text))


def count_clusters(text: str) -> int:
    "Returns number of grapheme clusters in the text.  Unicode aware version of len"
    if not isinstance(text, str):
        raise TypeError(f"text should be str not {type(text).__name__}")
    if text.isascii():
        # only CR LF joins in ASCII
        return len(text) - text.count("\r\n")
    count = 0
    for _ in _breaker.boundaries(to_code_units(text)):
        count += 1
    return count


def next_cluster(text: str, offset: int) -> str:
    """Returns the text from offset to the next grapheme cluster boundary

    An empty string is returned if offset is at or beyond the end."""
    _check_offset(offset)
    cut = CodeUnitText(text)
    start = min(max(0, offset), len(cut))
    return cut.substr(start, _breaker.next_break(cut.units, start))


def previous_cluster(text: str, offset: int) -> str:
    """Returns the text from the previous grapheme cluster boundary up to offset

    An empty string is returned if offset is at or before the start, or
    beyond the end."""
    _check_offset(offset)
    cut = CodeUnitText(text)
    if offset > len(cut):
        return ""
    return cut.substr(_breaker.previous_break(cut.units, offset), max(0, offset))

