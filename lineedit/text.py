"""Unicode text segmentation helpers.

Every offset produced here is a UTF-8 byte offset into the given text, so
results line up with a cursor that counts bytes rather than code points.
"""

from __future__ import annotations

import enum
import unicodedata
from functools import lru_cache
from itertools import pairwise
from typing import Iterator, Optional

import regex

__all__ = [
    "grapheme_indices",
    "graphemes",
    "split_word_bound_indices",
    "is_whitespace_str",
    "find_with_depth",
]

_GRAPHEME = regex.compile(r"\X")

_WHITESPACE = frozenset(
    "\t\n\x0b\x0c\r \x85\xa0\u1680\u2028\u2029\u202f\u205f\u3000"
    + "".join(map(chr, range(0x2000, 0x200B)))
)


def _utf8_len(text: str) -> int:
    return len(text.encode("utf-8", "surrogatepass"))


def grapheme_indices(text: str) -> Iterator[tuple[int, str]]:
    """Yield ``(byte_offset, cluster)`` for each extended grapheme cluster."""
    offset = 0
    for match in _GRAPHEME.finditer(text):
        cluster = match.group()
        yield offset, cluster
        offset += _utf8_len(cluster)


def graphemes(text: str) -> Iterator[str]:
    """Yield the extended grapheme clusters of ``text``."""
    for match in _GRAPHEME.finditer(text):
        yield match.group()


def is_whitespace_str(text: str) -> bool:
    """True when every character is whitespace (so also for the empty string)."""
    return all(ch in _WHITESPACE for ch in text)


class _WB(enum.Enum):
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
    OTHER = enum.auto()


_LINE_BREAKS = frozenset({_WB.CR, _WB.LF, _WB.NEWLINE})
_IGNORABLE = frozenset({_WB.EXTEND, _WB.FORMAT, _WB.ZWJ})
_AHLETTER = frozenset({_WB.ALETTER, _WB.HEBREW_LETTER})
_MID_LETTERISH = frozenset({_WB.MID_LETTER, _WB.MID_NUM_LET, _WB.SINGLE_QUOTE})
_MID_NUMISH = frozenset({_WB.MID_NUM, _WB.MID_NUM_LET, _WB.SINGLE_QUOTE})
_NUMLET_LEFT = _AHLETTER | {_WB.NUMERIC, _WB.KATAKANA, _WB.EXTEND_NUM_LET}
_NUMLET_RIGHT = _AHLETTER | {_WB.NUMERIC, _WB.KATAKANA}

_WSEG = frozenset(
    [0x20, 0x1680, 0x205F, 0x3000, *range(0x2000, 0x2007), *range(0x2008, 0x200B)]
)
_MID_NUM_LET_CHARS = frozenset(".\u2018\u2019\u2024\ufe52\uff07\uff0e")
_MID_LETTER_CHARS = frozenset(":\u00b7\u0387\u055f\u05f4\u2027\ufe13\ufe55\uff1a")
_MID_NUM_CHARS = frozenset(
    ",;\u037e\u0589\u060c\u060d\u066c\u07f8\u2044\ufe10\ufe14\ufe50\ufe54\uff0c\uff1b"
)

_KATAKANA_RANGES = (
    (0x3031, 0x3035), (0x309B, 0x309C), (0x30A0, 0x30FA), (0x30FC, 0x30FF),
    (0x31F0, 0x31FF), (0x32D0, 0x32FE), (0x3300, 0x3357), (0xFF66, 0xFF9D),
    (0x1B000, 0x1B000),
)
_HEBREW_RANGES = (
    (0x05D0, 0x05EA), (0x05EF, 0x05F2), (0xFB1D, 0xFB1D), (0xFB1F, 0xFB28),
    (0xFB2A, 0xFB4F),
)
# Letters that word segmentation does not treat as ALetter: ideographs,
# kana and the scripts written without spaces between words.
_NON_ALETTER_RANGES = (
    (0x0E00, 0x0EFF), (0x1000, 0x109F), (0x1780, 0x17FF), (0x1950, 0x19DF),
    (0x1A20, 0x1AAF), (0x3005, 0x3007), (0x3021, 0x3029), (0x3038, 0x303C),
    (0x3040, 0x309F), (0x3400, 0x4DBF), (0x4E00, 0x9FFF), (0xA9E0, 0xA9FF),
    (0xAA60, 0xAADF), (0xF900, 0xFAFF), (0x20000, 0x3FFFF),
)
_EXTENDED_PICTOGRAPHIC_RANGES = (
    (0x00A9, 0x00A9), (0x00AE, 0x00AE), (0x203C, 0x203C), (0x2049, 0x2049),
    (0x2122, 0x2122), (0x2139, 0x2139), (0x2194, 0x2199), (0x21A9, 0x21AA),
    (0x231A, 0x231B), (0x2328, 0x2328), (0x23CF, 0x23CF), (0x23E9, 0x23F3),
    (0x23F8, 0x23FA), (0x24C2, 0x24C2), (0x25AA, 0x25AB), (0x25B6, 0x25B6),
    (0x25C0, 0x25C0), (0x25FB, 0x25FE), (0x2600, 0x27BF), (0x2934, 0x2935),
    (0x2B05, 0x2B07), (0x2B1B, 0x2B1C), (0x2B50, 0x2B50), (0x2B55, 0x2B55),
    (0x3030, 0x3030), (0x303D, 0x303D), (0x3297, 0x3297), (0x3299, 0x3299),
    (0x1F000, 0x1F0FF), (0x1F10D, 0x1F10F), (0x1F12F, 0x1F12F),
    (0x1F16C, 0x1F171), (0x1F17E, 0x1F17F), (0x1F18E, 0x1F18E),
    (0x1F191, 0x1F19A), (0x1F1AD, 0x1F1E5), (0x1F201, 0x1F20F),
    (0x1F21A, 0x1F21A), (0x1F22F, 0x1F22F), (0x1F232, 0x1F23A),
    (0x1F23C, 0x1F23F), (0x1F249, 0x1F3FA), (0x1F400, 0x1F53D),
    (0x1F546, 0x1F64F), (0x1F680, 0x1F6FF), (0x1F774, 0x1F77F),
    (0x1F7D5, 0x1F7FF), (0x1F80C, 0x1F80F), (0x1F848, 0x1F84F),
    (0x1F85A, 0x1F85F), (0x1F888, 0x1F88F), (0x1F8AE, 0x1F8FF),
    (0x1F90C, 0x1F93A), (0x1F93C, 0x1F945), (0x1F947, 0x1FAFF),
    (0x1FC00, 0x1FFFD),
)


def _in_ranges(cp: int, ranges: tuple[tuple[int, int], ...]) -> bool:
    return any(low <= cp <= high for low, high in ranges)


def _is_extended_pictographic(ch: str) -> bool:
    return _in_ranges(ord(ch), _EXTENDED_PICTOGRAPHIC_RANGES)


@lru_cache(maxsize=4096)
def _word_break(ch: str) -> _WB:
    cp = ord(ch)
    if ch == "\r":
        return _WB.CR
    if ch == "\n":
        return _WB.LF
    if ch in "\x0b\x0c\x85\u2028\u2029":
        return _WB.NEWLINE
    if cp == 0x200D:
        return _WB.ZWJ
    if ch == "'":
        return _WB.SINGLE_QUOTE
    if ch == '"':
        return _WB.DOUBLE_QUOTE
    if cp in _WSEG:
        return _WB.WSEG_SPACE
    if 0x1F1E6 <= cp <= 0x1F1FF:
        return _WB.REGIONAL_INDICATOR
    if ch in _MID_NUM_LET_CHARS:
        return _WB.MID_NUM_LET
    if ch in _MID_LETTER_CHARS:
        return _WB.MID_LETTER
    if ch in _MID_NUM_CHARS:
        return _WB.MID_NUM
    category = unicodedata.category(ch)
    if (
        category in ("Mn", "Me", "Mc")
        or cp == 0x200C
        or 0x1F3FB <= cp <= 0x1F3FF
        or 0xFF9E <= cp <= 0xFF9F
        or 0xE0020 <= cp <= 0xE007F
    ):
        return _WB.EXTEND
    if category == "Cf" and cp != 0x200B:
        return _WB.FORMAT
    if _in_ranges(cp, _KATAKANA_RANGES):
        return _WB.KATAKANA
    if _in_ranges(cp, _HEBREW_RANGES):
        return _WB.HEBREW_LETTER
    if category == "Nd" and not 0xFF10 <= cp <= 0xFF19:
        return _WB.NUMERIC
    if category == "Pc" or cp == 0x202F:
        return _WB.EXTEND_NUM_LET
    if category in ("Lu", "Ll", "Lt", "Lm", "Lo", "Nl") and not _in_ranges(
        cp, _NON_ALETTER_RANGES
    ):
        return _WB.ALETTER
    return _WB.OTHER


def _previous(props: list[_WB], index: int) -> Optional[int]:
    """Index of the nearest non-ignorable property at or before ``index``."""
    while index >= 0 and props[index] in _IGNORABLE:
        index -= 1
    return index if index >= 0 else None


def _following(props: list[_WB], index: int) -> Optional[int]:
    """Index of the nearest non-ignorable property at or after ``index``."""
    while index < len(props) and props[index] in _IGNORABLE:
        index += 1
    return index if index < len(props) else None


def _keeps_together(chars: str, props: list[_WB], i: int) -> bool:
    """Whether there is no word boundary between ``chars[i - 1]`` and ``chars[i]``."""
    raw_left, right = props[i - 1], props[i]
    if raw_left is _WB.CR and right is _WB.LF:
        return True
    if raw_left in _LINE_BREAKS or right in _LINE_BREAKS:
        return False
    if raw_left is _WB.ZWJ and _is_extended_pictographic(chars[i]):
        return True
    if raw_left is _WB.WSEG_SPACE and right is _WB.WSEG_SPACE:
        return True
    if right in _IGNORABLE:
        return True

    left_index = _previous(props, i - 1)
    if left_index is None:
        return False
    left = props[left_index]
    if left in _LINE_BREAKS:
        return False
    left2_index = _previous(props, left_index - 1)
    left2 = props[left2_index] if left2_index is not None else None
    next_index = _following(props, i + 1)
    after = props[next_index] if next_index is not None else None

    if left in _AHLETTER and right in _AHLETTER:
        return True
    if left in _AHLETTER and right in _MID_LETTERISH and after in _AHLETTER:
        return True
    if left2 in _AHLETTER and left in _MID_LETTERISH and right in _AHLETTER:
        return True
    if left is _WB.HEBREW_LETTER and right is _WB.SINGLE_QUOTE:
        return True
    if (
        left is _WB.HEBREW_LETTER
        and right is _WB.DOUBLE_QUOTE
        and after is _WB.HEBREW_LETTER
    ):
        return True
    if (
        left2 is _WB.HEBREW_LETTER
        and left is _WB.DOUBLE_QUOTE
        and right is _WB.HEBREW_LETTER
    ):
        return True
    if left is _WB.NUMERIC and right is _WB.NUMERIC:
        return True
    if left in _AHLETTER and right is _WB.NUMERIC:
        return True
    if left is _WB.NUMERIC and right in _AHLETTER:
        return True
    if left2 is _WB.NUMERIC and left in _MID_NUMISH and right is _WB.NUMERIC:
        return True
    if left is _WB.NUMERIC and right in _MID_NUMISH and after is _WB.NUMERIC:
        return True
    if left is _WB.KATAKANA and right is _WB.KATAKANA:
        return True
    if left in _NUMLET_LEFT and right is _WB.EXTEND_NUM_LET:
        return True
    if left is _WB.EXTEND_NUM_LET and right in _NUMLET_RIGHT:
        return True
    if left is _WB.REGIONAL_INDICATOR and right is _WB.REGIONAL_INDICATOR:
        run = 0
        cursor: Optional[int] = left_index
        while cursor is not None and props[cursor] is _WB.REGIONAL_INDICATOR:
            run += 1
            cursor = _previous(props, cursor - 1)
        return run % 2 == 1
    return False


def split_word_bound_indices(text: str) -> Iterator[tuple[int, str]]:
    """Yield ``(byte_offset, segment)`` for each Unicode word-boundary segment.

    Words, runs of horizontal whitespace, line breaks and single punctuation
    marks each form their own segment; concatenated they give back ``text``.
    """
    if not text:
        return
    props = [_word_break(ch) for ch in text]
    inner = (i for i in range(1, len(text)) if not _keeps_together(text, props, i))
    offset = 0
    for start, end in pairwise([0, *inner, len(text)]):
        segment = text[start:end]
        yield offset, segment
        offset += _utf8_len(segment)


def find_with_depth(
    text: str, deep_char: str, shallow_char: str, reverse: bool
) -> Optional[int]:
    """Find the byte offset of ``deep_char`` at nesting depth zero.

    Graphemes are scanned forward, or backward when ``reverse`` is set; each
    ``shallow_char`` opens a nested level that a ``deep_char`` must close
    first. A ``shallow_char`` at the very last byte of ``text`` is ignored, so
    a cursor resting on a closing bracket counts as inside that pair.
    Returns ``None`` when no such grapheme exists.
    """
    depth = 0
    last_byte = _utf8_len(text) - 1
    indices = list(grapheme_indices(text))
    if reverse:
        indices.reverse()
    for index, cluster in indices:
        if cluster == deep_char:
            if depth == 0:
                return index
            depth -= 1
        elif cluster == shallow_char and index != last_byte:
            depth += 1
    return None