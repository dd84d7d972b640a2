"Grapheme cluster break calculations over UTF-16 code units"

from __future__ import annotations

from typing import Iterator, Sequence

from .codeunits import decode_at, decode_before, inside_pair
from .properties import GC, grapheme_category

CR = 0x000D
LF = 0x000A

# Categories that attach to whatever precedes them
_EXTENDING = GC.Extend | GC.ZWJ | GC.SpacingMark


def _pictographic_before(units: Sequence[int], offset: int) -> bool:
    "Scans back over Extend from offset, returning True if the run starts with Extended_Pictographic"
    while True:
        before = decode_before(units, offset)
        if before is None:
            return False
        codepoint, width = before
        cat = grapheme_category(codepoint)
        if cat & GC.Extend:
            offset -= width
            continue
        return bool(cat & GC.Extended_Pictographic)


def _regional_indicators_before(units: Sequence[int], offset: int) -> int:
    "How many consecutive regional indicators end at offset"
    count = 0
    while True:
        before = decode_before(units, offset)
        if before is None:
            return count
        codepoint, width = before
        if not grapheme_category(codepoint) & GC.Regional_Indicator:
            return count
        count += 1
        offset -= width


def _breaks(
    units: Sequence[int],
    offset: int,
    char_cp: int,
    char: GC,
    lookahead_cp: int,
    lookahead: GC,
    ri_count: int | None = None,
) -> bool:
    """Decides if there is a boundary at offset

    char is the codepoint ending at offset and lookahead the one
    starting there.  ri_count is how many regional indicators end at
    offset if the caller already knows, otherwise they are counted.
    Rules are applied in order with the first match deciding."""

    # GB3
    if char_cp == CR and lookahead_cp == LF:
        return False

    # GB4 / GB5
    if char & GC.Control or lookahead & GC.Control:
        return True

    # GB9 / GB9a - also covers not breaking before the ZWJ in GB11
    if lookahead & _EXTENDING:
        return False

    # GB9b
    if char & GC.Prepend:
        return False

    # GB6
    if char & GC.L and lookahead & (GC.L | GC.V | GC.LV | GC.LVT):
        return False

    # GB7
    if char & (GC.LV | GC.V) and lookahead & (GC.V | GC.T):
        return False

    # GB8
    if char & (GC.LVT | GC.T) and lookahead & GC.T:
        return False

    # GB11
    if char & GC.ZWJ and lookahead & GC.Extended_Pictographic:
        # the ZWJ is one code unit
        if _pictographic_before(units, offset - 1):
            return False

    # GB12 / GB13
    if char & GC.Regional_Indicator and lookahead & GC.Regional_Indicator:
        if ri_count is None:
            ri_count = _regional_indicators_before(units, offset)
        return ri_count % 2 == 0

    # GB999
    return True


def is_boundary(units: Sequence[int], offset: int) -> bool:
    "Returns True if offset is a grapheme cluster boundary"
    # GB1 / GB2
    if offset <= 0 or offset >= len(units):
        return True
    if inside_pair(units, offset):
        return False
    char_cp, _ = decode_before(units, offset)
    lookahead_cp, _ = decode_at(units, offset)
    return _breaks(
        units, offset, char_cp, grapheme_category(char_cp), lookahead_cp, grapheme_category(lookahead_cp)
    )


def next_break(units: Sequence[int], offset: int, at_boundary: bool = False) -> int:
    """Returns the first boundary after offset

    Pass at_boundary as True when offset is already known to be a
    boundary, which avoids scanning backwards through regional
    indicators."""
    end = len(units)
    if offset < 0:
        return 0
    if offset >= end:
        return end

    if inside_pair(units, offset):
        pos = offset + 1
        char_cp, _ = decode_before(units, pos)
        at_boundary = False
    else:
        char_cp, width = decode_at(units, offset)
        pos = offset + width
    char = grapheme_category(char_cp)

    # regional indicators ending at pos, None until it has to be counted
    ri_count: int | None = 0
    if char & GC.Regional_Indicator:
        # a boundary before a regional indicator always follows an even run
        ri_count = 1 if at_boundary or offset == 0 else None

    while pos < end:
        lookahead_cp, width = decode_at(units, pos)
        lookahead = grapheme_category(lookahead_cp)
        if ri_count is None and lookahead & GC.Regional_Indicator:
            ri_count = _regional_indicators_before(units, pos)
        if _breaks(units, pos, char_cp, char, lookahead_cp, lookahead, ri_count):
            break
        char_cp, char = lookahead_cp, lookahead
        if not char & GC.Regional_Indicator:
            ri_count = 0
        elif ri_count is not None:
            ri_count += 1
        pos += width

    return pos


def previous_break(units: Sequence[int], offset: int) -> int:
    "Returns the last boundary before offset"
    end = len(units)
    if offset <= 0:
        return 0
    if offset > end:
        return end

    _, width = decode_before(units, offset)
    pos = offset - width
    # decode forward again as offset may have been inside a surrogate pair
    lookahead_cp, _ = decode_at(units, pos)
    lookahead = grapheme_category(lookahead_cp)

    # regional indicators ending at pos, counted once and then carried
    ri_count: int | None = None

    while pos > 0:
        char_cp, width = decode_before(units, pos)
        char = grapheme_category(char_cp)
        if not char & GC.Regional_Indicator:
            ri_count = None
        elif ri_count is None and lookahead & GC.Regional_Indicator:
            ri_count = _regional_indicators_before(units, pos)
        if _breaks(units, pos, char_cp, char, lookahead_cp, lookahead, ri_count):
            break
        lookahead_cp, lookahead = char_cp, char
        pos -= width
        if ri_count is not None:
            ri_count -= 1

    return pos


def boundaries(units: Sequence[int], offset: int = 0) -> Iterator[int]:
    "Yields each boundary after offset up to and including the end"
    end = len(units)
    at_boundary = offset <= 0
    while offset < end:
        offset = next_break(units, offset, at_boundary)
        at_boundary = True
        yield offset
