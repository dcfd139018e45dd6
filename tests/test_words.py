import pytest

from lineedit.words import (
    big_word_left_index,
    big_word_right_end_index,
    big_word_right_index,
    big_word_right_start_index,
    current_word_range,
    next_whitespace,
    word_left_index,
    word_right_end_index,
    word_right_index,
    word_right_start_index,
)


@pytest.mark.parametrize(
    "text, pos, expected",
    [
        ("abc def ghi", 10, 8),
        ("abc def-ghi", 10, 8),
        ("abc def.ghi", 10, 4),
    ],
)
def test_word_left_index(text, pos, expected):
    assert word_left_index(text, pos) == expected


@pytest.mark.parametrize(
    "text, pos, expected",
    [
        ("abc def ghi", 10, 8),
        ("abc def-ghi", 10, 4),
        ("abc def.ghi", 10, 4),
        ("abc def   i", 10, 4),
    ],
)
def test_big_word_left_index(text, pos, expected):
    assert big_word_left_index(text, pos) == expected


@pytest.mark.parametrize(
    "text, pos, expected",
    [
        ("abc def ghi", 0, 4),
        ("abc-def ghi", 0, 3),
        ("abc.def ghi", 0, 8),
    ],
)
def test_word_right_start_index(text, pos, expected):
    assert word_right_start_index(text, pos) == expected


@pytest.mark.parametrize(
    "text, pos, expected",
    [
        ("abc def ghi", 0, 4),
        ("abc-def ghi", 0, 8),
        ("abc.def ghi", 0, 8),
    ],
)
def test_big_word_right_start_index(text, pos, expected):
    assert big_word_right_start_index(text, pos) == expected


@pytest.mark.parametrize(
    "text, pos, expected",
    [
        ("abc def ghi", 0, 2),
        ("abc-def ghi", 0, 2),
        ("abc.def ghi", 0, 6),
        ("abc", 1, 2),
        ("abc", 2, 2),
        ("abc def", 2, 6),
    ],
)
def test_word_right_end_index(text, pos, expected):
    assert word_right_end_index(text, pos) == expected


@pytest.mark.parametrize(
    "text, pos, expected",
    [
        ("", 0, 0),
        ("word", 0, 3),
        ("word and another one", 0, 3),
        ("word and another one", 3, 7),
        ("word and another one", 4, 7),
        ("word\nline two", 0, 3),
        ("word\nline two", 3, 8),
        ("weirdö characters", 0, 5),
        ("weirdö characters", 5, 17),
        ("weirdö", 0, 5),
        ("weirdö", 5, 5),
        ("word😇 with emoji", 0, 3),
        ("word😇 with emoji", 3, 4),
        ("😇", 0, 0),
    ],
)
def test_move_word_right_end_cases(text, pos, expected):
    assert word_right_end_index(text, pos) == expected


@pytest.mark.parametrize(
    "text, pos, expected",
    [
        ("abc def ghi", 0, 2),
        ("abc-def ghi", 0, 6),
        ("abc-def ghi", 5, 6),
        ("abc-def ghi", 6, 10),
        ("abc.def ghi", 0, 6),
        ("abc", 1, 2),
        ("abc", 2, 2),
        ("abc def", 2, 6),
        ("abc-def", 6, 6),
    ],
)
def test_big_word_right_end_index(text, pos, expected):
    assert big_word_right_end_index(text, pos) == expected


@pytest.mark.parametrize(
    "text, pos, expected",
    [
        ("abc def", 0, 3),
        ("abc def ghi", 3, 7),
        ("abc", 1, 3),
    ],
)
def test_next_whitespace(text, pos, expected):
    assert next_whitespace(text, pos) == expected


@pytest.mark.parametrize(
    "text, pos, expected",
    [
        ("This is a test", 10, 14),
        ("This is a test", 14, 14),
        ("abc def", 3, 7),
        ("", 0, 0),
    ],
)
def test_word_right_index(text, pos, expected):
    assert word_right_index(text, pos) == expected


@pytest.mark.parametrize(
    "text, pos, expected",
    [
        ("abc def", 0, 7),
        ("abc-def ghi", 0, 11),
        ("abc", 0, 3),
        ("", 0, 0),
    ],
)
def test_big_word_right_index(text, pos, expected):
    assert big_word_right_index(text, pos) == expected


@pytest.mark.parametrize(
    "text, pos, expected",
    [
        ("This is a test", 13, (10, 14)),
        ("This is a test", 10, (10, 14)),
        ("This", 0, (0, 4)),
        ("This", 4, (0, 4)),
        ("", 0, (0, 0)),
    ],
)
def test_current_word_range(text, pos, expected):
    assert current_word_range(text, pos) == expected


def test_word_left_is_not_after_position():
    text = "alpha beta gamma"
    for pos in (0, 3, 6, 11, 16):
        assert word_left_index(text, pos) <= pos


def test_offset_inside_multibyte_character_is_rejected():
    with pytest.raises(ValueError):
        word_right_index("😇", 1)


def test_offset_past_end_is_rejected():
    with pytest.raises(ValueError):
        word_left_index("abc", 4)