"""An editable text buffer with a byte-offset cursor."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from itertools import islice
from typing import Optional

from lineedit import words
from lineedit.text import find_with_depth, grapheme_indices, graphemes, is_whitespace_str

__all__ = ["LineBuffer"]

_ENCODING = "utf-8"
_ERRORS = "surrogatepass"


def _encode(text: str) -> bytes:
    return text.encode(_ENCODING, _ERRORS)


def _decode(data: bytes) -> str:
    return data.decode(_ENCODING, _ERRORS)


def _nth_index(text: str, n: int) -> Optional[int]:
    """Byte offset of the ``n``-th grapheme of ``text``, or None."""
    for index, _ in islice(grapheme_indices(text), n, n + 1):
        return index
    return None


def _last_index(text: str) -> Optional[int]:
    last = None
    for index, _ in grapheme_indices(text):
        last = index
    return last


@dataclass
class LineBuffer:
    """Text of one or more lines plus a cursor.

    ``insertion_point`` is a UTF-8 byte offset into ``lines``. Setting it
    directly is not checked; an offset off a character boundary makes later
    operations raise ``ValueError``.
    """

    lines: str = ""
    insertion_point: int = 0

    @classmethod
    def from_text(cls, text: str) -> "LineBuffer":
        """Create a buffer holding ``text`` with the cursor at its end."""
        buffer = cls()
        buffer.insert_str(text)
        return buffer

    # -- internal byte helpers -------------------------------------------

    def _data(self) -> bytes:
        return _encode(self.lines)

    def _slice(self, start: int, end: Optional[int] = None) -> str:
        data = self._data()
        if end is None:
            end = len(data)
        if not 0 <= start <= end <= len(data):
            raise ValueError(
                f"byte range {start}..{end} is outside the buffer (length {len(data)})"
            )
        return _decode(data[start:end])

    def _get(self, start: int, end: int) -> Optional[str]:
        try:
            return self._slice(start, end)
        except ValueError:
            return None

    # -- basic state -----------------------------------------------------

    def is_empty(self) -> bool:
        """True when the buffer holds no text."""
        return not self.lines

    def is_valid(self) -> bool:
        """True when the cursor sits on a grapheme boundary inside the text."""
        length = len(self)
        if not 0 <= self.insertion_point <= length:
            return False
        if self.insertion_point == length:
            return True
        return any(i == self.insertion_point for i, _ in grapheme_indices(self.lines))

    def get_buffer(self) -> str:
        """The whole text."""
        return self.lines

    def set_buffer(self, buffer: str) -> None:
        """Replace the text and put the cursor at its end."""
        self.lines = buffer
        self.insertion_point = len(self)

    def line(self) -> int:
        """Zero-based number of the line the cursor is on."""
        return self._data()[: self.insertion_point].count(b"\n")

    def num_lines(self) -> int:
        """Number of lines in the buffer."""
        return self.lines.count("\n") + 1

    def ends_with(self, c: str) -> bool:
        """True when the text ends with ``c``."""
        return self.lines.endswith(c)

    def __len__(self) -> int:
        return len(self._data())

    # -- cursor positions ------------------------------------------------

    def move_to_start(self) -> None:
        self.insertion_point = 0

    def move_to_line_start(self) -> None:
        """Move the cursor in front of the first character of its line."""
        self.insertion_point = self._data().rfind(b"\n", 0, self.insertion_point) + 1

    def move_to_line_end(self) -> None:
        """Move the cursor onto the line terminator (or the buffer end)."""
        self.insertion_point = self.find_current_line_end()

    def move_to_end(self) -> None:
        self.insertion_point = len(self)

    def find_current_line_end(self) -> int:
        """Offset of the ``\\n`` (or the ``\\r`` of ``\\r\\n``) ending the line."""
        data = self._data()
        index = data.find(b"\n", self.insertion_point)
        if index < 0:
            return len(data)
        if index > 0 and data[index - 1] == ord("\r"):
            return index - 1
        return index

    def grapheme_right_index(self) -> int:
        """Offset *behind* the grapheme right of the cursor."""
        return self.grapheme_right_index_from_pos(self.insertion_point)

    def grapheme_left_index(self) -> int:
        """Offset *in front of* the grapheme left of the cursor."""
        last = _last_index(self._slice(0, self.insertion_point))
        return 0 if last is None else last

    def grapheme_right_index_from_pos(self, pos: int) -> int:
        """Offset *behind* the grapheme that starts at ``pos``."""
        second = _nth_index(self._slice(pos), 1)
        return len(self) if second is None else pos + second

    def word_right_index(self) -> int:
        return words.word_right_index(self.lines, self.insertion_point)

    def big_word_right_index(self) -> int:
        return words.big_word_right_index(self.lines, self.insertion_point)

    def word_right_end_index(self) -> int:
        return words.word_right_end_index(self.lines, self.insertion_point)

    def big_word_right_end_index(self) -> int:
        return words.big_word_right_end_index(self.lines, self.insertion_point)

    def word_right_start_index(self) -> int:
        return words.word_right_start_index(self.lines, self.insertion_point)

    def big_word_right_start_index(self) -> int:
        return words.big_word_right_start_index(self.lines, self.insertion_point)

    def word_left_index(self) -> int:
        return words.word_left_index(self.lines, self.insertion_point)

    def big_word_left_index(self) -> int:
        return words.big_word_left_index(self.lines, self.insertion_point)

    def next_whitespace(self) -> int:
        return words.next_whitespace(self.lines, self.insertion_point)

    # -- cursor movement -------------------------------------------------

    def move_right(self) -> None:
        self.insertion_point = self.grapheme_right_index()

    def move_left(self) -> None:
        self.insertion_point = self.grapheme_left_index()

    def move_word_left(self) -> None:
        self.insertion_point = self.word_left_index()

    def move_big_word_left(self) -> None:
        self.insertion_point = self.big_word_left_index()

    def move_word_right(self) -> None:
        self.insertion_point = self.word_right_index()

    def move_word_right_start(self) -> None:
        self.insertion_point = self.word_right_start_index()

    def move_big_word_right_start(self) -> None:
        self.insertion_point = self.big_word_right_start_index()

    def move_word_right_end(self) -> None:
        self.insertion_point = self.word_right_end_index()

    def move_big_word_right_end(self) -> None:
        self.insertion_point = self.big_word_right_end_index()

    # -- insertion and deletion ------------------------------------------

    def insert_char(self, c: str) -> None:
        """Insert ``c`` at the cursor and move right over the grapheme."""
        self.replace_range(self.insertion_point, self.insertion_point, c)
        self.move_right()

    def insert_str(self, string: str) -> None:
        """Insert ``string`` at the cursor and move the cursor behind it."""
        self.replace_range(self.insertion_point, self.insertion_point, string)
        self.insertion_point += len(_encode(string))

    def insert_newline(self) -> None:
        """Insert the platform's line terminator."""
        if sys.platform == "win32":
            self.insert_str("\r\n")
        else:
            self.insert_char("\n")

    def clear(self) -> None:
        """Empty the buffer and reset the cursor."""
        self.lines = ""
        self.insertion_point = 0

    def clear_to_end(self) -> None:
        """Drop everything from the cursor onward."""
        self.lines = self._slice(0, self.insertion_point)

    def clear_to_line_end(self) -> None:
        """Drop text from the cursor up to, not including, the line terminator."""
        self.clear_range(self.insertion_point, self.find_current_line_end())

    def clear_to_insertion_point(self) -> None:
        """Drop everything before the cursor and move it to the start."""
        self.clear_range(0, self.insertion_point)
        self.insertion_point = 0

    def clear_range_safe(self, start: int, end: int) -> None:
        """Drop ``start..end`` and keep the cursor on the same text."""
        start, end = min(start, end), max(start, end)
        if self.insertion_point <= start:
            pass
        elif self.insertion_point < end:
            self.insertion_point = start
        else:
            self.insertion_point -= end - start
        self.clear_range(start, end)

    def clear_range(self, start: int, end: int) -> None:
        """Drop ``start..end``; the cursor is left untouched."""
        self.replace_range(start, end, "")

    def replace_range(self, start: int, end: int, replace_with: str) -> None:
        """Replace ``start..end`` by ``replace_with``; the cursor is left untouched."""
        data = self._data()
        if not 0 <= start <= end <= len(data):
            raise ValueError(
                f"byte range {start}..{end} is outside the buffer (length {len(data)})"
            )
        self.lines = _decode(data[:start]) + replace_with + _decode(data[end:])

    # -- inspection ------------------------------------------------------

    def on_whitespace(self) -> bool:
        """True when the character right of the cursor is whitespace."""
        tail = self._slice(self.insertion_point)
        return bool(tail) and is_whitespace_str(tail[0])

    def grapheme_right(self) -> str:
        return self._slice(self.insertion_point, self.grapheme_right_index())

    def grapheme_left(self) -> str:
        return self._slice(self.grapheme_left_index(), self.insertion_point)

    def current_word_range(self) -> tuple[int, int]:
        """Byte range ``(start, end)`` of the word at the cursor."""
        return words.current_word_range(self.lines, self.insertion_point)

    def current_line_range(self) -> tuple[int, int]:
        """Byte range ``(start, end)`` of the cursor's line, terminator included."""
        data = self._data()
        start = data.rfind(b"\n", 0, self.insertion_point) + 1
        newline = data.find(b"\n", self.insertion_point)
        end = len(data) if newline < 0 else newline + 1
        return start, end

    # -- case and swapping -----------------------------------------------

    def _transform_word(self, transform) -> None:
        start, end = self.current_word_range()
        self.replace_range(start, end, transform(self._slice(start, end)))
        self.move_word_right()

    def uppercase_word(self) -> None:
        self._transform_word(str.upper)

    def lowercase_word(self) -> None:
        self._transform_word(str.lower)

    def switchcase_char(self) -> None:
        """Switch the ASCII case of the grapheme right of the cursor."""
        start, end = self.insertion_point, self.grapheme_right_index()
        if end > start:
            swapped = "".join(
                ch.lower() if "A" <= ch <= "Z" else ch.upper() if "a" <= ch <= "z" else ch
                for ch in self._slice(start, end)
            )
            self.replace_range(start, end, swapped)
            self.move_right()

    def capitalize_char(self) -> None:
        """Uppercase the grapheme at the cursor (skipping whitespace) and move right."""
        if self.on_whitespace():
            self.move_word_right()
            self.move_word_left()
        start, end = self.insertion_point, self.grapheme_right_index()
        if end > start:
            self.replace_range(start, end, self._slice(start, end).upper())
            self.move_right()

    def delete_left_grapheme(self) -> None:
        left = self.grapheme_left_index()
        if left < self.insertion_point:
            self.clear_range(left, self.insertion_point)
            self.insertion_point = left

    def delete_right_grapheme(self) -> None:
        right = self.grapheme_right_index()
        if right > self.insertion_point:
            self.clear_range(self.insertion_point, right)

    def delete_word_left(self) -> None:
        left = self.word_left_index()
        self.clear_range(left, self.insertion_point)
        self.insertion_point = left

    def delete_word_right(self) -> None:
        self.clear_range(self.insertion_point, self.word_right_index())

    def swap_words(self) -> None:
        """Swap the word at the cursor with the word to its right."""
        first = self.current_word_range()
        self.move_word_right()
        second = self.current_word_range()
        if first != second:
            self.move_word_left()
            word_1 = self._slice(*first)
            word_2 = self._slice(*second)
            self.replace_range(*second, word_1)
            self.replace_range(*first, word_2)

    def swap_graphemes(self) -> None:
        """Swap the graphemes on either side of the cursor."""
        if self.insertion_point == 0:
            self.move_right()
        elif self.insertion_point == len(self):
            self.move_left()
        middle = self.insertion_point
        start = self.grapheme_left_index()
        end = self.grapheme_right_index()
        if start < middle < end:
            first = self._slice(start, middle)
            second = self._slice(middle, end)
            self.replace_range(middle, end, first)
            self.replace_range(start, middle, second)
            self.insertion_point = end
        else:
            self.insertion_point = middle

    # -- line movement ---------------------------------------------------

    def _grapheme_column(self, line_start: int) -> int:
        return sum(1 for _ in graphemes(self._slice(line_start, self.insertion_point)))

    def move_line_up(self) -> None:
        """Move to the same grapheme column on the previous line."""
        if self.is_cursor_at_first_line():
            return
        old_start, _ = self.current_line_range()
        column = self._grapheme_column(old_start)
        self.insertion_point = old_start
        self.move_left()
        new_start, new_end = self.current_line_range()
        new_line = self._slice(new_start, new_end)
        last = _last_index(islice(grapheme_indices(new_line), column + 1) and new_line)
        target = None
        for index, _ in islice(grapheme_indices(new_line), column + 1):
            target = index
        del last
        self.insertion_point = new_start if target is None else new_start + target

    def move_line_down(self) -> None:
        """Move to the same grapheme column on the next line."""
        if self.is_cursor_at_last_line():
            return
        old_start, old_end = self.current_line_range()
        column = self._grapheme_column(old_start)
        self.insertion_point = old_end
        new_start, new_end = self.current_line_range()
        target = _nth_index(self._slice(new_start, new_end), column)
        if target is None:
            self.insertion_point = self.find_current_line_end()
        else:
            self.insertion_point = new_start + target

    def is_cursor_at_first_line(self) -> bool:
        return b"\n" not in self._data()[: self.insertion_point]

    def is_cursor_at_last_line(self) -> bool:
        return b"\n" not in self._data()[self.insertion_point :]

    # -- character search ------------------------------------------------

    def find_char_right(self, c: str, current_line: bool) -> Optional[int]:
        """Offset of the first ``c`` after the grapheme at the cursor."""
        start = self.grapheme_right_index()
        end = self.current_line_range()[1] if current_line else len(self)
        index = self._data().find(_encode(c), start, end)
        return None if index < 0 else index

    def find_char_left(self, c: str, current_line: bool) -> Optional[int]:
        """Offset of the last ``c`` before the cursor."""
        start = self.current_line_range()[0] if current_line else 0
        index = self._data().rfind(_encode(c), start, self.insertion_point)
        return None if index < 0 else index

    def move_right_until(self, c: str, current_line: bool) -> int:
        index = self.find_char_right(c, current_line)
        if index is not None:
            self.insertion_point = index
        return self.insertion_point

    def move_right_before(self, c: str, current_line: bool) -> int:
        index = self.find_char_right(c, current_line)
        if index is not None:
            self.insertion_point = index
            self.insertion_point = self.grapheme_left_index()
        return self.insertion_point

    def move_left_until(self, c: str, current_line: bool) -> int:
        index = self.find_char_left(c, current_line)
        if index is not None:
            self.insertion_point = index
        return self.insertion_point

    def move_left_before(self, c: str, current_line: bool) -> int:
        index = self.find_char_left(c, current_line)
        if index is not None:
            self.insertion_point = index + len(_encode(c))
        return self.insertion_point

    def delete_right_until_char(self, c: str, current_line: bool) -> None:
        index = self.find_char_right(c, current_line)
        if index is not None:
            self.clear_range(self.insertion_point, index + len(_encode(c)))

    def delete_right_before_char(self, c: str, current_line: bool) -> None:
        index = self.find_char_right(c, current_line)
        if index is not None:
            self.clear_range(self.insertion_point, index)

    def delete_left_until_char(self, c: str, current_line: bool) -> None:
        index = self.find_char_left(c, current_line)
        if index is not None:
            self.clear_range(index, self.insertion_point)
            self.insertion_point = index

    def delete_left_before_char(self, c: str, current_line: bool) -> None:
        index = self.find_char_left(c, current_line)
        if index is not None:
            start = index + len(_encode(c))
            self.clear_range(start, self.insertion_point)
            self.insertion_point = start

    def find_matching_pair(
        self, left_char: str, right_char: str, cursor: int
    ) -> Optional[tuple[int, int]]:
        """Find the ``(left, right)`` offsets of the pair enclosing ``cursor``.

        Nested pairs are respected. Returns None when there is no such pair.
        """
        to_cursor = self._get(0, cursor + 1)
        if to_cursor is None:
            return None
        left_index = find_with_depth(to_cursor, left_char, right_char, True)
        if left_index is None:
            return None
        scan_start = left_index + len(_encode(left_char))
        after_left = self._get(scan_start, len(self))
        if after_left is None:
            return None
        right_offset = find_with_depth(after_left, right_char, left_char, False)
        if right_offset is None:
            return None
        return left_index, scan_start + right_offset