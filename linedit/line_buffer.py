"""In-memory text buffer with a cursor for cursor based editing.

Offsets are code point indices into the buffer text. The cursor is expected
to sit on a grapheme cluster boundary; :meth:`LineBuffer.is_valid` checks it.
"""

from __future__ import annotations

import sys

from linedit import motions
from linedit.segmentation import grapheme_indices, is_whitespace_str

__all__ = ["LineBuffer"]


def _swap_ascii_case(ch: str) -> str:
    if "A" <= ch <= "Z":
        return ch.lower()
    if "a" <= ch <= "z":
        return ch.upper()
    return ch


class LineBuffer:
    """The entered line(s) together with the cursor position."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, text: str = "") -> None:
        self._lines = text
        self._insertion_point = len(text)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LineBuffer):
            return NotImplemented
        return (
            self._lines == other._lines
            and self._insertion_point == other._insertion_point
        )

    def __repr__(self) -> str:
        return f"LineBuffer({self._lines!r}, insertion_point={self._insertion_point})"

    def __len__(self) -> int:
        return len(self._lines)

    def is_empty(self) -> bool:
        """True if the buffer holds no text."""
        return not self._lines

    def is_valid(self) -> bool:
        """True if the cursor sits on a grapheme boundary inside the buffer."""
        point = self._insertion_point
        if point < 0 or point > len(self._lines):
            return False
        if point == len(self._lines):
            return True
        return any(start == point for start, _ in grapheme_indices(self._lines))

    def insertion_point(self) -> int:
        """The current edit position."""
        return self._insertion_point

    def set_insertion_point(self, offset: int) -> None:
        """Set the edit position; it is not checked against grapheme boundaries."""
        self._insertion_point = offset

    def get_buffer(self) -> str:
        """The whole buffer text."""
        return self._lines

    def set_buffer(self, buffer: str) -> None:
        """Replace the text and put the cursor at its end."""
        self._lines = buffer
        self._insertion_point = len(buffer)

    def line(self) -> int:
        """Zero-based number of the line the cursor is on."""
        return self._lines.count("\n", 0, self._insertion_point)

    def num_lines(self) -> int:
        """Number of lines in the buffer."""
        return self._lines.count("\n") + 1

    def ends_with(self, c: str) -> bool:
        """True if the buffer ends with ``c``."""
        return self._lines.endswith(c)

    def move_to_start(self) -> None:
        self._insertion_point = 0

    def move_to_line_start(self) -> None:
        """Move the cursor before the first character of the line."""
        self._insertion_point = self._lines.rfind("\n", 0, self._insertion_point) + 1

    def move_to_line_end(self) -> None:
        """Move the cursor onto the line terminator (or the buffer end)."""
        self._insertion_point = self.find_current_line_end()

    def move_to_end(self) -> None:
        self._insertion_point = len(self._lines)

    def find_current_line_end(self) -> int:
        """Offset of the ``\\n`` or ``\\r\\n`` ending the line, or the buffer length."""
        index = self._lines.find("\n", self._insertion_point)
        if index == -1:
            return len(self._lines)
        if index > 0 and self._lines[index - 1] == "\r":
            return index - 1
        return index

    def grapheme_right_index(self) -> int:
        return motions.grapheme_right_index(self._lines, self._insertion_point)

    def grapheme_left_index(self) -> int:
        return motions.grapheme_left_index(self._lines, self._insertion_point)

    def grapheme_right_index_from_pos(self, pos: int) -> int:
        return motions.grapheme_right_index(self._lines, pos)

    def word_right_index(self) -> int:
        return motions.word_right_index(self._lines, self._insertion_point)

    def big_word_right_index(self) -> int:
        return motions.big_word_right_index(self._lines, self._insertion_point)

    def word_right_end_index(self) -> int:
        return motions.word_right_end_index(self._lines, self._insertion_point)

    def big_word_right_end_index(self) -> int:
        return motions.big_word_right_end_index(self._lines, self._insertion_point)

    def word_right_start_index(self) -> int:
        return motions.word_right_start_index(self._lines, self._insertion_point)

    def big_word_right_start_index(self) -> int:
        return motions.big_word_right_start_index(self._lines, self._insertion_point)

    def word_left_index(self) -> int:
        return motions.word_left_index(self._lines, self._insertion_point)

    def big_word_left_index(self) -> int:
        return motions.big_word_left_index(self._lines, self._insertion_point)

    def next_whitespace(self) -> int:
        return motions.next_whitespace(self._lines, self._insertion_point)

    def move_right(self) -> None:
        self._insertion_point = self.grapheme_right_index()

    def move_left(self) -> None:
        self._insertion_point = self.grapheme_left_index()

    def move_word_left(self) -> None:
        self._insertion_point = self.word_left_index()

    def move_big_word_left(self) -> None:
        self._insertion_point = self.big_word_left_index()

    def move_word_right(self) -> None:
        self._insertion_point = self.word_right_index()

    def move_word_right_start(self) -> None:
        self._insertion_point = self.word_right_start_index()

    def move_big_word_right_start(self) -> None:
        self._insertion_point = self.big_word_right_start_index()

    def move_word_right_end(self) -> None:
        self._insertion_point = self.word_right_end_index()

    def move_big_word_right_end(self) -> None:
        self._insertion_point = self.big_word_right_end_index()

    def insert_char(self, c: str) -> None:
        """Insert a character at the cursor and move right past its grapheme."""
        point = self._insertion_point
        self._lines = self._lines[:point] + c + self._lines[point:]
        self.move_right()

    def insert_str(self, string: str) -> None:
        """Insert ``string`` at the cursor and put the cursor behind it."""
        point = self._insertion_point
        self._lines = self._lines[:point] + string + self._lines[point:]
        self._insertion_point = point + len(string)

    def insert_newline(self) -> None:
        """Insert the platform line terminator: CRLF on Windows, LF elsewhere."""
        if sys.platform == "win32":
            self.insert_str("\r\n")
        else:
            self.insert_char("\n")

    def clear(self) -> None:
        """Empty the buffer and reset the cursor."""
        self._lines = ""
        self._insertion_point = 0

    def clear_to_end(self) -> None:
        """Remove everything from the cursor to the end of the buffer."""
        self._lines = self._lines[: self._insertion_point]

    def clear_to_line_end(self) -> None:
        """Remove from the cursor to the end of the line, keeping the terminator."""
        self.clear_range(self._insertion_point, self.find_current_line_end())

    def clear_to_insertion_point(self) -> None:
        """Remove from the buffer start to the cursor and move the cursor to 0."""
        self.clear_range(0, self._insertion_point)
        self._insertion_point = 0

    def clear_range_safe(self, start: int, end: int) -> None:
        """Remove ``start..end`` and keep the cursor on the same text."""
        if start > end:
            start, end = end, start
        if self._insertion_point <= start:
            pass
        elif self._insertion_point < end:
            self._insertion_point = start
        else:
            self._insertion_point -= end - start
        self.clear_range(start, end)

    def clear_range(self, start: int, end: int) -> None:
        """Remove ``start..end`` without touching the cursor."""
        self.replace_range(start, end, "")

    def replace_range(self, start: int, end: int, replace_with: str) -> None:
        """Substitute ``start..end`` with ``replace_with`` without touching the cursor."""
        self._lines = self._lines[:start] + replace_with + self._lines[end:]

    def on_whitespace(self) -> bool:
        """True if the character under the cursor is whitespace."""
        ch = self._lines[self._insertion_point : self._insertion_point + 1]
        return bool(ch) and is_whitespace_str(ch)

    def grapheme_right(self) -> str:
        """The grapheme right of the cursor, or an empty string."""
        return self._lines[self._insertion_point : self.grapheme_right_index()]

    def grapheme_left(self) -> str:
        """The grapheme left of the cursor, or an empty string."""
        return self._lines[self.grapheme_left_index() : self._insertion_point]

    def current_word_range(self) -> tuple[int, int]:
        """``(start, end)`` of the word under or after the cursor."""
        right_index = self.word_right_index()
        left_index = motions.word_left_index(self._lines, right_index)
        return left_index, right_index

    def current_line_range(self) -> tuple[int, int]:
        """``(start, end)`` of the current line, the end past its terminator."""
        left_index = self._lines.rfind("\n", 0, self._insertion_point) + 1
        newline = self._lines.find("\n", self._insertion_point)
        right_index = len(self._lines) if newline == -1 else newline + 1
        return left_index, right_index

    def _transform_word(self, change) -> None:
        start, end = self.current_word_range()
        self.replace_range(start, end, change(self._lines[start:end]))
        self.move_word_right()

    def uppercase_word(self) -> None:
        self._transform_word(str.upper)

    def lowercase_word(self) -> None:
        self._transform_word(str.lower)

    def switchcase_char(self) -> None:
        """Switch the ASCII case of the grapheme under the cursor and move right."""
        start = self._insertion_point
        end = self.grapheme_right_index()
        if end > start:
            swapped = "".join(_swap_ascii_case(ch) for ch in self._lines[start:end])
            self.replace_range(start, end, swapped)
            self.move_right()

    def capitalize_char(self) -> None:
        """Uppercase the grapheme under the cursor (or after whitespace) and move right."""
        if self.on_whitespace():
            self.move_word_right()
            self.move_word_left()
        start = self._insertion_point
        end = self.grapheme_right_index()
        if end > start:
            self.replace_range(start, end, self._lines[start:end].upper())
            self.move_right()

    def delete_left_grapheme(self) -> None:
        left_index = self.grapheme_left_index()
        if left_index < self._insertion_point:
            self.clear_range(left_index, self._insertion_point)
            self._insertion_point = left_index

    def delete_right_grapheme(self) -> None:
        right_index = self.grapheme_right_index()
        if right_index > self._insertion_point:
            self.clear_range(self._insertion_point, right_index)

    def delete_word_left(self) -> None:
        left_index = self.word_left_index()
        self.clear_range(left_index, self._insertion_point)
        self._insertion_point = left_index

    def delete_word_right(self) -> None:
        self.clear_range(self._insertion_point, self.word_right_index())

    def swap_words(self) -> None:
        """Swap the current word with the word to its right."""
        first = self.current_word_range()
        self.move_word_right()
        second = self.current_word_range()
        if first != second:
            self.move_word_left()
            word_1 = self._lines[first[0] : first[1]]
            word_2 = self._lines[second[0] : second[1]]
            self.replace_range(second[0], second[1], word_1)
            self.replace_range(first[0], first[1], word_2)

    def swap_graphemes(self) -> None:
        """Swap the graphemes left and right of the cursor."""
        initial = self._insertion_point
        if initial == 0:
            self.move_right()
        elif initial == len(self._lines):
            self.move_left()

        updated = self._insertion_point
        first_start = self.grapheme_left_index()
        second_end = self.grapheme_right_index()

        if first_start < updated < second_end:
            first = self._lines[first_start:updated]
            second = self._lines[updated:second_end]
            self.replace_range(updated, second_end, first)
            self.replace_range(first_start, updated, second)
            self._insertion_point = second_end
        else:
            self._insertion_point = updated

    def _grapheme_column(self, line_start: int) -> int:
        return len(grapheme_indices(self._lines[line_start : self._insertion_point]))

    def move_line_up(self) -> None:
        """Move to the same grapheme column on the previous line."""
        if self.is_cursor_at_first_line():
            return
        old_start, _ = self.current_line_range()
        column = self._grapheme_column(old_start)

        self._insertion_point = old_start
        self.move_left()

        new_start, new_end = self.current_line_range()
        graphemes = grapheme_indices(self._lines[new_start:new_end])[: column + 1]
        self._insertion_point = new_start + graphemes[-1][0] if graphemes else new_start

    def move_line_down(self) -> None:
        """Move to the same grapheme column on the next line."""
        if self.is_cursor_at_last_line():
            return
        old_start, old_end = self.current_line_range()
        column = self._grapheme_column(old_start)

        self._insertion_point = old_end

        new_start, new_end = self.current_line_range()
        graphemes = grapheme_indices(self._lines[new_start:new_end])
        if column < len(graphemes):
            self._insertion_point = new_start + graphemes[column][0]
        else:
            self._insertion_point = self.find_current_line_end()

    def is_cursor_at_first_line(self) -> bool:
        return "\n" not in self._lines[: self._insertion_point]

    def is_cursor_at_last_line(self) -> bool:
        return "\n" not in self._lines[self._insertion_point :]

    def find_char_right(self, c: str, current_line: bool) -> int | None:
        """Offset of the first ``c`` after the grapheme under the cursor."""
        start = self.grapheme_right_index()
        end = self.current_line_range()[1] if current_line else len(self._lines)
        index = self._lines.find(c, start, end)
        return None if index == -1 else index

    def find_char_left(self, c: str, current_line: bool) -> int | None:
        """Offset of the last ``c`` before the cursor."""
        start = self.current_line_range()[0] if current_line else 0
        index = self._lines.rfind(c, start, self._insertion_point)
        return None if index == -1 else index

    def move_right_until(self, c: str, current_line: bool) -> int:
        index = self.find_char_right(c, current_line)
        if index is not None:
            self._insertion_point = index
        return self._insertion_point

    def move_right_before(self, c: str, current_line: bool) -> int:
        index = self.find_char_right(c, current_line)
        if index is not None:
            self._insertion_point = index
            self._insertion_point = self.grapheme_left_index()
        return self._insertion_point

    def move_left_until(self, c: str, current_line: bool) -> int:
        index = self.find_char_left(c, current_line)
        if index is not None:
            self._insertion_point = index
        return self._insertion_point

    def move_left_before(self, c: str, current_line: bool) -> int:
        index = self.find_char_left(c, current_line)
        if index is not None:
            self._insertion_point = index + len(c)
        return self._insertion_point

    def delete_right_until_char(self, c: str, current_line: bool) -> None:
        index = self.find_char_right(c, current_line)
        if index is not None:
            self.clear_range(self._insertion_point, index + len(c))

    def delete_right_before_char(self, c: str, current_line: bool) -> None:
        index = self.find_char_right(c, current_line)
        if index is not None:
            self.clear_range(self._insertion_point, index)

    def delete_left_until_char(self, c: str, current_line: bool) -> None:
        index = self.find_char_left(c, current_line)
        if index is not None:
            self.clear_range(index, self._insertion_point)
            self._insertion_point = index

    def delete_left_before_char(self, c: str, current_line: bool) -> None:
        index = self.find_char_left(c, current_line)
        if index is not None:
            self.clear_range(index + len(c), self._insertion_point)
            self._insertion_point = index + len(c)

    def find_matching_pair(
        self, left_char: str, right_char: str, cursor: int
    ) -> tuple[int, int] | None:
        """Offsets of the nesting-aware pair enclosing ``cursor``, if any."""
        return motions.find_matching_pair(self._lines, left_char, right_char, cursor)