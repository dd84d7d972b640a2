"""
Classify grapheme clusters as letters, punctuation or other, and detect CJK

This works on clusters already isolated by :func:`grapheme16.unicode.split_into_clusters`
and uses the Unicode general category from :mod:`unicodedata`.
"""

from __future__ import annotations

import bisect
import enum
import unicodedata

from typing import Iterator

from .codeunits import decode_at, to_code_units
from .unicode import cluster_iter

# Inclusive (start, end) blocks of Chinese, Japanese and Korean characters
_cjk_ranges = (
    (0x2E80, 0x2EFF),  # CJK Radicals Supplement
    (0x2F00, 0x2FDF),  # Kangxi Radicals
    (0x3040, 0x309F),  # Hiragana
    (0x30A0, 0x30FF),  # Katakana
    (0x3100, 0x312F),  # Bopomofo
    (0x3200, 0x32FF),  # Enclosed CJK Letters and Months
    (0x3400, 0x4DBF),  # CJK Unified Ideographs Extension A
    (0x4E00, 0x9FFF),  # CJK Unified Ideographs
    (0xA960, 0xA97F),  # Hangul Jamo Extended-A
    (0xAC00, 0xD7AF),  # Hangul Syllables
    (0xD7B0, 0xD7FF),  # Hangul Jamo Extended-B
    (0xF900, 0xFAFF),  # CJK Compatibility Ideographs
    (0x20000, 0x2A6DF),  # Extension B
    (0x2A700, 0x2B73F),  # Extension C
    (0x2B740, 0x2B81F),  # Extension D
    (0x2B820, 0x2CEAF),  # Extension E
    (0x2CEB0, 0x2EBEF),  # Extension F
    (0x2F800, 0x2FA1F),  # CJK Compatibility Ideographs Supplement
)
_cjk_starts = tuple(start for start, _ in _cjk_ranges)


class CharType(enum.Enum):
    letter = "letter"
    "Letters in any script including CJK, and the digits 0 through 9"
    punctuation = "punctuation"
    "Punctuation such as ``'!,;.`` and the backtick"
    other = "other"
    "Everything else such as spaces, symbols and emoji"


def char_type(cluster: str) -> CharType:
    """Returns which :class:`CharType` a cluster is

    A cluster is a letter if any codepoint in it is a letter (general
    category ``L*``) or an ASCII digit, otherwise punctuation if any
    codepoint is punctuation (general category ``P*``) or a backtick.
    """
    if not isinstance(cluster, str):
        raise TypeError(f"cluster should be str not {type(cluster).__name__}")
    if any("0" <= c <= "9" or unicodedata.category(c)[0] == "L" for c in cluster):
        return CharType.letter
    if any(c == "`" or unicodedata.category(c)[0] == "P" for c in cluster):
        return CharType.punctuation
    return CharType.other


def char_types(text: str) -> Iterator[tuple[str, CharType]]:
    "Yields each grapheme cluster in text with its :class:`CharType`"
    for cluster in cluster_iter(text):
        yield cluster, char_type(cluster)


def is_cjk(cluster: str) -> bool:
    """Returns True if the cluster starts with a Chinese, Japanese or Korean character

    Only the first codepoint is examined.  It is looked up in blocks such
    as CJK Unified Ideographs (including the supplementary plane
    extensions), Hiragana, Katakana, Bopomofo and Hangul Syllables.
    An empty cluster is not CJK.
    """
    decoded = decode_at(to_code_units(cluster), 0)
    if decoded is None:
        return False
    codepoint = decoded[0]
    index = bisect.bisect_right(_cjk_starts, codepoint) - 1
    return index >= 0 and codepoint <= _cjk_ranges[index][1]
