# linedit

`linedit` provides the building blocks of a line editor. It contains a text
buffer with a cursor, motions that respect Unicode grapheme clusters and word
boundaries, a linear undo/redo history, and an in-application clipboard.

All offsets are code point indices into the Python string. The buffer expects
the cursor to sit on a grapheme cluster boundary, so an emoji or a letter
followed by a combining mark counts as one unit when the cursor moves.

## Installation

```
pip install linedit
```

The only runtime dependency is `regex`, which is used for grapheme cluster
segmentation.

## Modules

- `linedit.segmentation` provides `grapheme_indices(text)`,
  `word_bound_indices(text)` (Unicode default word boundaries, where
  whitespace and punctuation are separate pieces) and
  `is_whitespace_str(text)`.
- `linedit.motions` provides plain functions on `(text, pos)` that return a
  target offset. The functions are `grapheme_right_index`,
  `grapheme_left_index`, `word_right_index`, `big_word_right_index`,
  `word_right_end_index`, `big_word_right_end_index`,
  `word_right_start_index`, `big_word_right_start_index`,
  `word_left_index`, `big_word_left_index` and `next_whitespace`. It also
  provides `find_matching_pair(text, left_char, right_char, cursor)`, which
  takes nesting into account.
- `linedit.line_buffer.LineBuffer` holds the text and the cursor. It offers:
  - cursor moves by grapheme, word, WORD, line start and end, and up and
    down a line while keeping the grapheme column;
  - insertion and deletion;
  - range clearing (`clear_range`, `clear_range_safe`, `replace_range`);
  - case changes (`uppercase_word`, `lowercase_word`, `switchcase_char`,
    `capitalize_char`);
  - `swap_words` and `swap_graphemes`;
  - character searches (`find_char_right`, `find_char_left`,
    `move_right_until`, `move_left_before`, `delete_left_until_char`, ...).
- `linedit.edit_stack.EditStack` is an undo/redo history. If you insert a new
  entry after undoing, the entries that had been undone are discarded.
- `linedit.clipboard` provides `ClipboardMode` (`NORMAL` or `LINES`), the
  abstract `Clipboard`, `LocalClipboard` and `get_local_clipboard()`.

## Examples

```python
from linedit.line_buffer import LineBuffer

buf = LineBuffer("line 1\nline 2")     # cursor starts at the end
buf.set_insertion_point(8)
buf.move_line_up()
buf.insertion_point()                  # 1

buf = LineBuffer("This is a test")
buf.set_insertion_point(10)
buf.uppercase_word()
buf.get_buffer()                       # "This is a TEST"
buf.insertion_point()                  # 14

LineBuffer("((abc))").find_matching_pair("(", ")", 1)   # (1, 5)
```

```python
from linedit.motions import word_right_end_index
from linedit.segmentation import word_bound_indices

word_bound_indices("abc def")          # [(0, "abc"), (3, " "), (4, "def")]
word_right_end_index("abc def ghi", 0) # 2
```

```python
from linedit.edit_stack import EditStack

stack = EditStack.from_entries([1, 2, 3], 1)
stack.insert(4)
stack == EditStack.from_entries([1, 2, 4], 2)   # True
stack.undo()                                    # 2
stack.redo()                                    # 4
```

```python
from linedit.clipboard import ClipboardMode, get_local_clipboard

cb = get_local_clipboard()
cb.set("test", ClipboardMode.NORMAL)
len(cb)                                # 4
cb.clear()
cb.get()                               # ("", ClipboardMode.NORMAL)
```

## What is not included

This package does not provide a stateful editor object. There is nothing that
connects the buffer, the undo history and the clipboard, tracks a selection,
or carries out cut, copy and paste commands on the buffer. To get those
behaviours, combine `LineBuffer`, `EditStack` and `Clipboard` in your own
code. The package also does not read keys, render a prompt or drive a
terminal, and it offers no command-line program.

## Running the tests

```
pip install -e ".[test]"
pytest
```