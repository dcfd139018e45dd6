"""Word-motion offsets within a text, measured in UTF-8 bytes.

A *word* is a Unicode word-boundary segment that is not pure whitespace.
A *WORD* (the ``big_`` variants) is a run of segments up to the next
whitespace, so ``abc-def`` counts as one WORD but three words.
"""

from __future__ import annotations

from itertools import pairwise
from typing import Optional

from lineedit.text import grapheme_indices, is_whitespace_str, split_word_bound_indices

__all__ = [
    "word_right_index",
    "big_word_right_index",
    "word_right_end_index",
    "big_word_right_end_index",
    "word_right_start_index",
    "big_word_right_start_index",
    "word_left_index",
    "big_word_left_index",
    "next_whitespace",
    "current_word_range",
]


def _encode(text: str) -> bytes:
    return text.encode("utf-8", "surrogatepass")


def _decode(data: bytes) -> str:
    return data.decode("utf-8", "surrogatepass")


def _split_at(text: str, pos: int) -> tuple[str, str, int]:
    """Split ``text`` at byte offset ``pos`` into head, tail and total byte length."""
    data = _encode(text)
    if not 0 <= pos <= len(data):
        raise ValueError(f"byte offset {pos} is outside the text (length {len(data)})")
    try:
        return _decode(data[:pos]), _decode(data[pos:]), len(data)
    except UnicodeDecodeError as exc:
        raise ValueError(f"byte offset {pos} is not on a character boundary") from exc


def _last_grapheme_index(text: str) -> Optional[int]:
    last = None
    for index, _ in grapheme_indices(text):
        last = index
    return last


def _last_grapheme_fallback(text: str) -> int:
    last = _last_grapheme_index(text)
    return 0 if last is None else last


def word_right_index(text: str, pos: int) -> int:
    """Offset *behind* the next word to the right of ``pos``."""
    _, tail, total = _split_at(text, pos)
    for i, word in split_word_bound_indices(tail):
        if not is_whitespace_str(word):
            return pos + i + len(_encode(word))
    return total


def big_word_right_index(text: str, pos: int) -> int:
    """Offset *behind* the next WORD to the right of ``pos``."""
    _, tail, total = _split_at(text, pos)
    found_ws = False
    for i, word in split_word_bound_indices(tail):
        blank = is_whitespace_str(word)
        found_ws = found_ws or blank
        if found_ws and not blank:
            return pos + i + len(_encode(word))
    return total


def word_right_end_index(text: str, pos: int) -> int:
    """Offset *at the end of* (on the last grapheme of) the next word to the right."""
    _, tail, _ = _split_at(text, pos)
    for i, word in split_word_bound_indices(tail):
        last = _last_grapheme_index(word)
        if last is None:
            continue
        candidate = pos + i + last
        if not is_whitespace_str(word) and candidate != pos:
            return candidate
    return _last_grapheme_fallback(text)


def big_word_right_end_index(text: str, pos: int) -> int:
    """Offset *at the end of* (on the last grapheme of) the next WORD to the right."""
    _, tail, _ = _split_at(text, pos)
    for (prev_i, prev_word), (_, word) in pairwise(split_word_bound_indices(tail)):
        if not is_whitespace_str(word):
            continue
        last = _last_grapheme_index(prev_word)
        if last is None:
            continue
        candidate = pos + prev_i + last
        if candidate != pos:
            return candidate
    return _last_grapheme_fallback(text)


def word_right_start_index(text: str, pos: int) -> int:
    """Offset *in front of* the next word to the right of ``pos``."""
    _, tail, total = _split_at(text, pos)
    for i, word in split_word_bound_indices(tail):
        if i != 0 and not is_whitespace_str(word):
            return pos + i
    return total


def big_word_right_start_index(text: str, pos: int) -> int:
    """Offset *in front of* the next WORD to the right of ``pos``."""
    _, tail, total = _split_at(text, pos)
    found_ws = False
    for i, word in split_word_bound_indices(tail):
        blank = is_whitespace_str(word)
        found_ws = found_ws or (i != 0 and blank)
        if found_ws and i != 0 and not blank:
            return pos + i
    return total


def word_left_index(text: str, pos: int) -> int:
    """Offset *in front of* the next word to the left of ``pos``."""
    head, _, _ = _split_at(text, pos)
    result = 0
    for i, word in split_word_bound_indices(head):
        if not is_whitespace_str(word):
            result = i
    return result


def big_word_left_index(text: str, pos: int) -> int:
    """Offset *in front of* the next WORD to the left of ``pos``."""
    head, _, _ = _split_at(text, pos)
    head_bytes = _encode(head)
    start: Optional[int] = None
    for i, word in split_word_bound_indices(head):
        if is_whitespace_str(word):
            if start is not None and not is_whitespace_str(_decode(head_bytes[i:])):
                start = None
        elif start is None:
            start = i
    return 0 if start is None else start


def next_whitespace(text: str, pos: int) -> int:
    """Offset of the next whitespace segment after the one at ``pos``."""
    _, tail, total = _split_at(text, pos)
    for i, word in split_word_bound_indices(tail):
        if i != 0 and is_whitespace_str(word):
            return pos + i
    return total


def current_word_range(text: str, pos: int) -> tuple[int, int]:
    """Byte range ``(start, end)`` of the word that ``pos`` points into."""
    right = word_right_index(text, pos)
    return word_left_index(text, right), right