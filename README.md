# lineedit

`lineedit` provides the building blocks for the editing core of an
interactive line editor. It keeps a text buffer and a cursor, and moves and
edits them with awareness of Unicode graphemes and word boundaries. It also
provides an undo/redo history and a process-local clipboard. It does no
terminal I/O.

## Installation

```
pip install lineedit
```

To also install what the test suite needs:

```
pip install "lineedit[test]"
```

## Modules

- `lineedit.line_buffer.LineBuffer` holds the text (`lines`) and a cursor
  (`insertion_point`). The cursor is a UTF-8 byte offset. Its operations:
  - move the cursor by grapheme, by word (`word_left_index`,
    `word_right_end_index`, ...) or by whitespace-delimited WORD
    (`big_word_left_index`, ...);
  - move between lines (`move_line_up`, `move_line_down`);
  - change case (`uppercase_word`, `lowercase_word`, `capitalize_char`,
    `switchcase_char`);
  - swap words or graphemes (`swap_words`, `swap_graphemes`);
  - search for a character, or delete up to or before it
    (`find_char_right`, `delete_left_until_char`, ...);
  - find the enclosing bracket or quote pair (`find_matching_pair`).

  Create a buffer with `LineBuffer.from_text`, which puts the cursor at the
  end of the text.
- `lineedit.words` holds the same word motions as plain functions. Each one
  takes a text and a byte position.
- `lineedit.text` holds the segmentation helpers these build on:
  - `grapheme_indices` and `graphemes`;
  - `split_word_bound_indices` for Unicode word boundaries;
  - `is_whitespace_str`;
  - `find_with_depth` for nested pairs.
- `lineedit.clipboard` holds:
  - the abstract `Clipboard` base, with `set`, `get`, `clear` and `len()`,
    where `len()` counts UTF-8 bytes;
  - `LocalClipboard`;
  - `get_local_clipboard()`;
  - `ClipboardMode` (`NORMAL` or `LINES`).
- `lineedit.edit_stack.EditStack` is a linear undo/redo history. It provides
  `undo`, `redo`, `insert`, `reset` and `current`. Inserting a value after an
  undo drops the entries that were undone.

## Example

```python
from lineedit.line_buffer import LineBuffer
from lineedit.edit_stack import EditStack
from lineedit.clipboard import ClipboardMode, get_local_clipboard
from lineedit import words

buf = LineBuffer.from_text("This is a test")
buf.move_word_left()
buf.delete_word_right()
assert buf.get_buffer() == "This is a "

assert LineBuffer.from_text("(abc)").find_matching_pair("(", ")", 2) == (0, 4)
assert words.word_right_end_index("abc def", 2) == 6

history = EditStack(LineBuffer)
history.insert(LineBuffer.from_text("a"))
assert history.undo().get_buffer() == ""
assert history.redo().get_buffer() == "a"

clipboard = get_local_clipboard()
clipboard.set("test", ClipboardMode.NORMAL)
assert len(clipboard) == 4
assert clipboard.get() == ("test", ClipboardMode.NORMAL)
```

## What it does not do

The package has no editor object that ties these pieces together. Such an
object would provide:

- selections;
- grouping of edits into undo points;
- cut, copy and paste commands between a `LineBuffer` and a `Clipboard`.

These have to be built on top of `LineBuffer`, `EditStack` and `Clipboard`.
The package also has no terminal handling and no system clipboard.

## Running the tests

```
pytest
```