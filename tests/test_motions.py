import pytest

from linedit.motions import (
    big_word_left_index,
    big_word_right_end_index,
    big_word_right_index,
    big_word_right_start_index,
    find_matching_pair,
    grapheme_left_index,
    grapheme_right_index,
    next_whitespace,
    word_left_index,
    word_right_end_index,
    word_right_index,
    word_right_start_index,
)


@pytest.mark.parametrize(
    "text, pos, expected",
    [
        ("abc", 0, 1),
        ("abc", 1, 2),
        ("abc", 2, 3),
        ("abc", 3, 3),
        ("\U0001f980rust", 0, 1),
        ("\U0001f980rust", 1, 2),
        ("\u00e9\u0301", 0, 2),
    ],
)
def test_grapheme_right_index(text, pos, expected):
    assert grapheme_right_index(text, pos) == expected


@pytest.mark.parametrize(
    "text, pos, expected",
    [
        ("This is a test", 14, 13),
        ("This is a test \U0001f60a", 16, 15),
        ("", 0, 0),
        ("abc", 0, 0),
    ],
)
def test_grapheme_left_index(text, pos, expected):
    assert grapheme_left_index(text, pos) == expected


def test_word_right_index_from_word_start():
    assert word_right_index("This is a test", 10) == 14


def test_word_right_index_without_words():
    assert word_right_index("abc   ", 3) == 6


@pytest.mark.parametrize(
    "text, pos, expected",
    [
        ("abc def", 0, 7),
        ("abc", 0, 3),
    ],
)
def test_big_word_right_index(text, pos, expected):
    assert big_word_right_index(text, pos) == expected


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
        ("weird\u00f6 characters", 0, 5),
        ("weird\u00f6 characters", 5, 16),
        ("weird\u00f6", 0, 5),
        ("weird\u00f6", 5, 5),
        ("word\U0001f607 with emoji", 0, 3),
        ("word\U0001f607 with emoji", 3, 4),
        ("\U0001f607", 0, 0),
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
        ("abc def ghi", 10, 8),
        ("abc def-ghi", 10, 8),
        ("abc def.ghi", 10, 4),
        ("This is a test", 14, 10),
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
        ("abc def", 0, 3),
        ("abc def ghi", 3, 7),
        ("abc", 1, 3),
    ],
)
def test_next_whitespace(text, pos, expected):
    assert next_whitespace(text, pos) == expected


@pytest.mark.parametrize(
    "text, cursor, left, right, expected",
    [
        ("(abc)", 0, "(", ")", (0, 4)),
        ("(abc)", 4, "(", ")", (0, 4)),
        ("(abc)", 2, "(", ")", (0, 4)),
        ("((abc))", 0, "(", ")", (0, 6)),
        ("((abc))", 1, "(", ")", (1, 5)),
        ("(abc)(def)", 0, "(", ")", (0, 4)),
        ("(abc)(def)", 5, "(", ")", (5, 9)),
        ("(abc", 0, "(", ")", None),
        ("abc)", 3, "(", ")", None),
        ("()", 0, "(", ")", (0, 1)),
        ("()", 1, "(", ")", (0, 1)),
        ("(\u03b1\u03b2\u03b3)", 0, "(", ")", (0, 4)),
        ("([)]", 0, "(", ")", (0, 2)),
        ('"abc"', 0, '"', '"', (0, 4)),
    ],
)
def test_find_matching_pair(text, cursor, left, right, expected):
    assert find_matching_pair(text, left, right, cursor) == expected


def test_find_matching_pair_cursor_past_end():
    assert find_matching_pair("(abc)", 5, "(", ")") is None


def test_find_matching_pair_nested_from_inner():
    assert find_matching_pair("foo(bar(baz)qux)quux", 8, "(", ")") == (7, 11)