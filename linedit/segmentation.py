"""Unicode text segmentation: grapheme clusters and word boundaries.

Offsets are code point indices into the Python string. Grapheme clusters
follow the extended grapheme cluster rules. Word boundaries follow the
default word boundary rules of UAX #29. Character properties are derived
from :mod:`unicodedata` and a few fixed code point ranges.
"""

from __future__ import annotations

import enum
import unicodedata
from functools import lru_cache
from itertools import pairwise

import regex

__all__ = ["grapheme_indices", "word_bound_indices", "is_whitespace_str"]

_GRAPHEME = regex.compile(r"\X")

# Characters with the Unicode White_Space property.
_WHITE_SPACE = frozenset(
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


class _WB(enum.Enum):
    """Word break property values."""

    OTHER = enum.auto()
    CR = enum.auto()
    LF = enum.auto()
    NEWLINE = enum.auto()
    EXTEND = enum.auto()
    ZWJ = enum.auto()
    FORMAT = enum.auto()
    REGIONAL_INDICATOR = enum.auto()
    KATAKANA = enum.auto()
    HEBREW_LETTER = enum.auto()
    ALETTER = enum.auto()
    SINGLE_QUOTE = enum.auto()
    DOUBLE_QUOTE = enum.auto()
    MID_NUM_LET = enum.auto()
    MID_LETTER = enum.auto()
    MID_NUM = enum.auto()
    NUMERIC = enum.auto()
    EXTEND_NUM_LET = enum.auto()
    WSEG_SPACE = enum.auto()


_NEWLINES = frozenset("\x0b\x0c\x85\u2028\u2029")
_MID_LETTER = frozenset(":\xb7\u0387\u055f\u05f4\u2027\ufe13\ufe55\uff1a")
_MID_NUM = frozenset(
    ",;\u037e\u0589\u060c\u060d\u066c\u07f8\u2044\ufe10\ufe14\ufe50\ufe54\uff0c\uff1b"
)
_MID_NUM_LET = frozenset(".\u2018\u2019\u2024\ufe52\uff07\uff0e")
_WSEG_SPACE = frozenset(" \u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2008\u2009\u200a\u205f\u3000")

_KATAKANA_RANGES = (
    (0x3031, 0x3035), (0x309B, 0x309C), (0x30A0, 0x30FA), (0x30FC, 0x30FF),
    (0x31F0, 0x31FF), (0x32D0, 0x32FE), (0x3300, 0x3357), (0xFF66, 0xFF9D),
    (0x1B000, 0x1B000),
)
_HEBREW_RANGES = (
    (0x05D0, 0x05EA), (0x05EF, 0x05F2), (0xFB1D, 0xFB1D), (0xFB1F, 0xFB28),
    (0xFB2A, 0xFB4F),
)
# Ideographic, Hiragana and complex-context scripts are not ALetter.
_NOT_ALETTER_RANGES = (
    (0x0E00, 0x0EFF), (0x1000, 0x109F), (0x1780, 0x17FF), (0x1950, 0x19DF),
    (0x1A20, 0x1AAF), (0x3006, 0x3007), (0x3021, 0x3029), (0x3038, 0x303A),
    (0x3040, 0x309F), (0x3400, 0x4DBF), (0x4E00, 0x9FFF), (0xA9E0, 0xA9FF),
    (0xAA60, 0xAADF), (0xF900, 0xFAFF), (0x1B001, 0x1B11F), (0x20000, 0x3FFFF),
)
_EXTENDED_PICTOGRAPHIC_RANGES = (
    (0x00A9, 0x00A9), (0x00AE, 0x00AE), (0x203C, 0x203C), (0x2049, 0x2049),
    (0x2122, 0x2122), (0x2139, 0x2139), (0x2194, 0x2199), (0x21A9, 0x21AA),
    (0x231A, 0x231B), (0x2328, 0x2328), (0x2388, 0x2388), (0x23CF, 0x23CF),
    (0x23E9, 0x23F3), (0x23F8, 0x23FA), (0x24C2, 0x24C2), (0x25AA, 0x25AB),
    (0x25B6, 0x25B6), (0x25C0, 0x25C0), (0x25FB, 0x25FE), (0x2600, 0x27BF),
    (0x2934, 0x2935), (0x2B05, 0x2B07), (0x2B1B, 0x2B1C), (0x2B50, 0x2B50),
    (0x2B55, 0x2B55), (0x3030, 0x3030), (0x303D, 0x303D), (0x3297, 0x3297),
    (0x3299, 0x3299), (0x1F000, 0x1F1E5), (0x1F200, 0x1F3FA),
    (0x1F400, 0x1FAFF), (0x1FC00, 0x1FFFD),
)

_IGNORABLE = frozenset({_WB.EXTEND, _WB.FORMAT, _WB.ZWJ})
_LINE_BREAKS = frozenset({_WB.CR, _WB.LF, _WB.NEWLINE})
_AHLETTER = frozenset({_WB.ALETTER, _WB.HEBREW_LETTER})
_MID_LETTER_Q = frozenset({_WB.MID_LETTER, _WB.MID_NUM_LET, _WB.SINGLE_QUOTE})
_MID_NUM_Q = frozenset({_WB.MID_NUM, _WB.MID_NUM_LET, _WB.SINGLE_QUOTE})
_BEFORE_EXTEND_NUM_LET = frozenset(
    {_WB.ALETTER, _WB.HEBREW_LETTER, _WB.NUMERIC, _WB.KATAKANA, _WB.EXTEND_NUM_LET}
)
_AFTER_EXTEND_NUM_LET = frozenset(
    {_WB.ALETTER, _WB.HEBREW_LETTER, _WB.NUMERIC, _WB.KATAKANA}
)


def _in_ranges(cp: int, ranges: tuple[tuple[int, int], ...]) -> bool:
    return any(lo <= cp <= hi for lo, hi in ranges)


@lru_cache(maxsize=4096)
def _word_prop(ch: str) -> _WB:
    cp = ord(ch)
    if ch == "\r":
        return _WB.CR
    if ch == "\n":
        return _WB.LF
    if ch in _NEWLINES:
        return _WB.NEWLINE
    if cp == 0x200D:
        return _WB.ZWJ
    if 0x1F1E6 <= cp <= 0x1F1FF:
        return _WB.REGIONAL_INDICATOR
    if ch in _WSEG_SPACE:
        return _WB.WSEG_SPACE
    if ch == "'":
        return _WB.SINGLE_QUOTE
    if ch == '"':
        return _WB.DOUBLE_QUOTE
    if ch in _MID_NUM_LET:
        return _WB.MID_NUM_LET
    if ch in _MID_LETTER:
        return _WB.MID_LETTER
    if ch in _MID_NUM:
        return _WB.MID_NUM
    category = unicodedata.category(ch)
    if (
        category in ("Mn", "Me", "Mc")
        or cp == 0x200C
        or 0x1F3FB <= cp <= 0x1F3FF
        or 0xE0020 <= cp <= 0xE007F
    ):
        return _WB.EXTEND
    if category == "Cf" and cp != 0x200B:
        return _WB.FORMAT
    if _in_ranges(cp, _KATAKANA_RANGES):
        return _WB.KATAKANA
    if _in_ranges(cp, _HEBREW_RANGES):
        return _WB.HEBREW_LETTER
    if category == "Nd":
        return _WB.NUMERIC
    if category == "Pc":
        return _WB.EXTEND_NUM_LET
    if category in ("Lu", "Ll", "Lt", "Lm", "Lo", "Nl") and not _in_ranges(
        cp, _NOT_ALETTER_RANGES
    ):
        return _WB.ALETTER
    return _WB.OTHER


@lru_cache(maxsize=4096)
def _is_extended_pictographic(ch: str) -> bool:
    return _in_ranges(ord(ch), _EXTENDED_PICTOGRAPHIC_RANGES)


class _WordBreaker:
    """Decides word boundaries for one string."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.props = [_word_prop(ch) for ch in text]

    def _prev_effective(self, index: int) -> int | None:
        """Last index at or before ``index`` that is not Extend/Format/ZWJ."""
        while index >= 0:
            prop = self.props[index]
            if prop not in _IGNORABLE:
                return index
            index -= 1
        return None

    def _next_effective(self, index: int) -> int | None:
        """First index at or after ``index`` that is not Extend/Format/ZWJ."""
        while index < len(self.props):
            if self.props[index] not in _IGNORABLE:
                return index
            index += 1
        return None

    def _prop_at(self, index: int | None) -> _WB | None:
        return None if index is None else self.props[index]

    def breaks_before(self, i: int) -> bool:
        """Whether there is a word boundary between ``text[i-1]`` and ``text[i]``."""
        raw_left = self.props[i - 1]
        right = self.props[i]

        if raw_left is _WB.CR and right is _WB.LF:
            return False
        if raw_left in _LINE_BREAKS or right in _LINE_BREAKS:
            return True
        if raw_left is _WB.ZWJ and _is_extended_pictographic(self.text[i]):
            return False
        if raw_left is _WB.WSEG_SPACE and right is _WB.WSEG_SPACE:
            return False
        if right in _IGNORABLE:
            return False

        p = self._prev_effective(i - 1)
        if p is None or self.props[p] in _LINE_BREAKS:
            p = i - 1
        left = self.props[p]
        before_left = self._prop_at(self._prev_effective(p - 1)) if p > 0 else None
        after_right = self._prop_at(self._next_effective(i + 1))

        if left in _AHLETTER and right in _AHLETTER:
            return False
        if left in _AHLETTER and right in _MID_LETTER_Q and after_right in _AHLETTER:
            return False
        if before_left in _AHLETTER and left in _MID_LETTER_Q and right in _AHLETTER:
            return False
        if left is _WB.HEBREW_LETTER and right is _WB.SINGLE_QUOTE:
            return False
        if (
            left is _WB.HEBREW_LETTER
            and right is _WB.DOUBLE_QUOTE
            and after_right is _WB.HEBREW_LETTER
        ):
            return False
        if (
            before_left is _WB.HEBREW_LETTER
            and left is _WB.DOUBLE_QUOTE
            and right is _WB.HEBREW_LETTER
        ):
            return False
        if left is _WB.NUMERIC and right is _WB.NUMERIC:
            return False
        if left in _AHLETTER and right is _WB.NUMERIC:
            return False
        if left is _WB.NUMERIC and right in _AHLETTER:
            return False
        if before_left is _WB.NUMERIC and left in _MID_NUM_Q and right is _WB.NUMERIC:
            return False
        if left is _WB.NUMERIC and right in _MID_NUM_Q and after_right is _WB.NUMERIC:
            return False
        if left is _WB.KATAKANA and right is _WB.KATAKANA:
            return False
        if left in _BEFORE_EXTEND_NUM_LET and right is _WB.EXTEND_NUM_LET:
            return False
        if left is _WB.EXTEND_NUM_LET and right in _AFTER_EXTEND_NUM_LET:
            return False
        if left is _WB.REGIONAL_INDICATOR and right is _WB.REGIONAL_INDICATOR:
            return self._regional_run_length(p) % 2 == 0
        return True

    def _regional_run_length(self, index: int) -> int:
        """Number of consecutive regional indicators ending at ``index``."""
        count = 0
        current: int | None = index
        while current is not None and self.props[current] is _WB.REGIONAL_INDICATOR:
            count += 1
            current = self._prev_effective(current - 1) if current > 0 else None
        return count

    def starts(self) -> list[int]:
        return [0] + [i for i in range(1, len(self.text)) if self.breaks_before(i)]


def grapheme_indices(text: str) -> list[tuple[int, str]]:
    """Split ``text`` into extended grapheme clusters with their start offsets."""
    return [(match.start(), match.group()) for match in _GRAPHEME.finditer(text)]


def word_bound_indices(text: str) -> list[tuple[int, str]]:
    """Split ``text`` at every word boundary, giving each piece with its offset.

    Whitespace, punctuation and words all become pieces of their own; joining
    the pieces gives back ``text``.
    """
    if not text:
        return []
    starts = _WordBreaker(text).starts()
    return [(start, text[start:end]) for start, end in pairwise(starts + [len(text)])]


def is_whitespace_str(text: str) -> bool:
    """True if every character of ``text`` is Unicode white space (or it is empty)."""
    return all(ch in _WHITE_SPACE for ch in text)