"""
UTF-16 code units

All offsets used by this package are indexes into the UTF-16 code
unit representation of the text, the same way JavaScript, Java, C#,
Windows and ICU index strings.  Python :class:`str` is indexed by
codepoint instead, so codepoints above ``U+FFFF`` are one item in a
:class:`str` but two code units (a surrogate pair).

Unpaired surrogates are allowed in :class:`str` and are carried
through as single code units.  Adjacent high and low surrogates are
always decoded as a pair, exactly as a UTF-16 decoder does.
"""

from __future__ import annotations

import array
import sys

from typing import Iterator, Sequence

_UTF16 = "utf-16-le" if sys.byteorder == "little" else "utf-16-be"

HIGH_SURROGATE_START = 0xD800
HIGH_SURROGATE_END = 0xDBFF
LOW_SURROGATE_START = 0xDC00
LOW_SURROGATE_END = 0xDFFF


def is_high_surrogate(unit: int) -> bool:
    return HIGH_SURROGATE_START <= unit <= HIGH_SURROGATE_END


def is_low_surrogate(unit: int) -> bool:
    return LOW_SURROGATE_START <= unit <= LOW_SURROGATE_END


def combine_surrogates(high: int, low: int) -> int:
    "Returns the codepoint a surrogate pair encodes"
    return 0x10000 + (high - HIGH_SURROGATE_START) * 0x400 + (low - LOW_SURROGATE_START)


def to_code_units(text: str) -> array.array:
    "Returns the UTF-16 code units of text as an array of unsigned 16 bit ints"
    if not isinstance(text, str):
        raise TypeError(f"text should be str not {type(text).__name__}")
    units = array.array("H")
    units.frombytes(text.encode(_UTF16, "surrogatepass"))
    return units


def from_code_units(units: Sequence[int]) -> str:
    "Turns code units back into a :class:`str`, keeping unpaired surrogates"
    if not isinstance(units, array.array):
        units = array.array("H", units)
    return units.tobytes().decode(_UTF16, "surrogatepass")


def code_unit_length(text: str) -> int:
    "Returns how many UTF-16 code units text occupies"
    if not isinstance(text, str):
        raise TypeError(f"text should be str not {type(text).__name__}")
    if text.isascii():
        return len(text)
    return len(text) + sum(1 for c in text if c > "\uffff")


def decode_at(units: Sequence[int], offset: int) -> tuple[int, int] | None:
    """Decodes the codepoint starting at offset

    :returns: A tuple of codepoint and how many code units (1 or 2) it
      occupies, or None if offset is outside the units
    """
    if offset < 0 or offset >= len(units):
        return None
    unit = units[offset]
    if HIGH_SURROGATE_START <= unit <= HIGH_SURROGATE_END and offset + 1 < len(units):
        low = units[offset + 1]
        if LOW_SURROGATE_START <= low <= LOW_SURROGATE_END:
            return combine_surrogates(unit, low), 2
    return unit, 1


def decode_before(units: Sequence[int], offset: int) -> tuple[int, int] | None:
    """Decodes the codepoint ending just before offset

    :returns: A tuple of codepoint and how many code units (1 or 2) it
      occupies, or None if there is nothing before offset
    """
    if offset <= 0 or offset > len(units):
        return None
    unit = units[offset - 1]
    if LOW_SURROGATE_START <= unit <= LOW_SURROGATE_END and offset >= 2:
        high = units[offset - 2]
        if HIGH_SURROGATE_START <= high <= HIGH_SURROGATE_END:
            return combine_surrogates(high, unit), 2
    return unit, 1


def inside_pair(units: Sequence[int], offset: int) -> bool:
    "Returns True if offset points at the low half of a surrogate pair"
    return (
        0 < offset < len(units)
        and LOW_SURROGATE_START <= units[offset] <= LOW_SURROGATE_END
        and HIGH_SURROGATE_START <= units[offset - 1] <= HIGH_SURROGATE_END
    )


def iter_code_points(units: Sequence[int], offset: int = 0) -> Iterator[tuple[int, int, int]]:
    "Yields offset, codepoint, width for each codepoint from offset onwards"
    end = len(units)
    while offset < end:
        codepoint, width = decode_at(units, offset)
        yield offset, codepoint, width
        offset += width


class CodeUnitText:
    """A :class:`str` together with its code units

    Used to convert code unit offsets back into :class:`str` slices so
    that segments are always exact substrings of the original text.
    """

    __slots__ = "text", "units", "_index"

    def __init__(self, text: str):
        self.text = text
        self.units = to_code_units(text)
        # None when every codepoint is one code unit so offsets are str indexes
        self._index: list[int] | None = None
        if len(self.units) != len(text):
            # code unit offset -> str index, -1 for the second unit of a pair
            index = [-1] * (len(self.units) + 1)
            pos = 0
            for i, c in enumerate(text):
                index[pos] = i
                pos += 2 if c > "\uffff" else 1
            index[pos] = len(text)
            self._index = index

    def __len__(self) -> int:
        return len(self.units)

    def substr(self, start: int, end: int) -> str:
        "Returns the text between two code unit offsets"
        if self._index is None:
            return self.text[start:end]
        if start >= end:
            return ""
        begin, finish = self._index[start], self._index[end]
        if begin < 0 or finish < 0:
            # an offset splits a surrogate pair so only part of a str item is wanted
            return from_code_units(self.units[start:end])
        return self.text[begin:finish]
