"""Cursor motion targets within a text buffer.

Each function takes the buffer text and a cursor offset (code point index)
and returns the offset the corresponding motion would move to. None of them
modify anything.
"""

from __future__ import annotations

from itertools import pairwise

from linedit.segmentation import grapheme_indices, is_whitespace_str, word_bound_indices

__all__ = [
    "grapheme_right_index",
    "grapheme_left_index",
    "word_right_index",
    "big_word_right_index",
    "word_right_end_index",
    "big_word_right_end_index",
    "word_right_start_index",
    "big_word_right_start_index",
    "word_left_index",
    "big_word_left_index",
    "next_whitespace",
    "find_matching_pair",
]


def _last_grapheme_start(text: str) -> int | None:
    graphemes = grapheme_indices(text)
    return graphemes[-1][0] if graphemes else None


def _last_grapheme_fallback(text: str) -> int:
    start = _last_grapheme_start(text)
    return 0 if start is None else start


def grapheme_right_index(text: str, pos: int) -> int:
    """Offset *behind* the grapheme that starts at ``pos``."""
    graphemes = grapheme_indices(text[pos:])
    if len(graphemes) > 1:
        return pos + graphemes[1][0]
    return len(text)


def grapheme_left_index(text: str, pos: int) -> int:
    """Offset *in front of* the grapheme that ends at ``pos``."""
    start = _last_grapheme_start(text[:pos])
    return 0 if start is None else start


def word_right_index(text: str, pos: int) -> int:
    """Offset *behind* the next word to the right of ``pos``."""
    for i, word in word_bound_indices(text[pos:]):
        if not is_whitespace_str(word):
            return pos + i + len(word)
    return len(text)


def big_word_right_index(text: str, pos: int) -> int:
    """Offset *behind* the next WORD (whitespace-delimited) to the right."""
    found_ws = False
    for i, word in word_bound_indices(text[pos:]):
        blank = is_whitespace_str(word)
        found_ws = found_ws or blank
        if found_ws and not blank:
            return pos + i + len(word)
    return len(text)


def word_right_end_index(text: str, pos: int) -> int:
    """Offset *at the last grapheme of* the next word to the right."""
    for i, word in word_bound_indices(text[pos:]):
        start = _last_grapheme_start(word)
        if start is None:
            continue
        target = pos + start + i
        if not is_whitespace_str(word) and target != pos:
            return target
    return _last_grapheme_fallback(text)


def big_word_right_end_index(text: str, pos: int) -> int:
    """Offset *at the last grapheme of* the next WORD to the right."""
    for (prev_i, prev_word), (_, word) in pairwise(word_bound_indices(text[pos:])):
        if not is_whitespace_str(word):
            continue
        start = _last_grapheme_start(prev_word)
        if start is None:
            continue
        target = pos + start + prev_i
        if target != pos:
            return target
    return _last_grapheme_fallback(text)


def word_right_start_index(text: str, pos: int) -> int:
    """Offset *in front of* the next word to the right."""
    for i, word in word_bound_indices(text[pos:]):
        if i != 0 and not is_whitespace_str(word):
            return pos + i
    return len(text)


def big_word_right_start_index(text: str, pos: int) -> int:
    """Offset *in front of* the next WORD to the right."""
    found_ws = False
    for i, word in word_bound_indices(text[pos:]):
        blank = is_whitespace_str(word)
        found_ws = found_ws or (i != 0 and blank)
        if found_ws and i != 0 and not blank:
            return pos + i
    return len(text)


def word_left_index(text: str, pos: int) -> int:
    """Offset *in front of* the next word to the left of ``pos``."""
    starts = [i for i, word in word_bound_indices(text[:pos]) if not is_whitespace_str(word)]
    return starts[-1] if starts else 0


def big_word_left_index(text: str, pos: int) -> int:
    """Offset *in front of* the next WORD to the left of ``pos``."""
    last_word_index: int | None = None
    for i, word in word_bound_indices(text[:pos]):
        blank = is_whitespace_str(word)
        if last_word_index is None:
            if not blank:
                last_word_index = i
        elif blank and not is_whitespace_str(text[i:pos]):
            last_word_index = None
    return 0 if last_word_index is None else last_word_index


def next_whitespace(text: str, pos: int) -> int:
    """Offset of the next whitespace run after the piece at ``pos``."""
    for i, word in word_bound_indices(text[pos:]):
        if i != 0 and is_whitespace_str(word):
            return pos + i
    return len(text)


def _find_with_depth(
    segment: str, deep_char: str, shallow_char: str, reverse: bool
) -> int | None:
    depth = 0
    graphemes = grapheme_indices(segment)
    if reverse:
        graphemes.reverse()
    last = len(segment) - 1
    for idx, grapheme in graphemes:
        if grapheme == deep_char:
            if depth == 0:
                return idx
            depth -= 1
        elif grapheme == shallow_char:
            # A shallow char under the cursor closes the pair itself rather
            # than opening a nested one.
            if idx != last:
                depth += 1
    return None


def find_matching_pair(
    text: str, left_char: str, right_char: str, cursor: int
) -> tuple[int, int] | None:
    """Find the ``(left, right)`` offsets of the pair enclosing ``cursor``.

    Nested pairs are respected. Returns None when no enclosing pair exists.
    """
    if cursor < 0 or cursor >= len(text):
        return None
    left_index = _find_with_depth(text[: cursor + 1], left_char, right_char, True)
    if left_index is None:
        return None
    scan_start = left_index + len(left_char)
    if scan_start > len(text):
        return None
    right_offset = _find_with_depth(text[scan_start:], right_char, left_char, False)
    if right_offset is None:
        return None
    return left_index, scan_start + right_offset