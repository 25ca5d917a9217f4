import pytest

from linedit.segmentation import grapheme_indices, is_whitespace_str, word_bound_indices

SAMPLES = [
    "",
    "abc def ghi",
    "abc def-ghi",
    "abc.def ghi",
    "abc def   i",
    "line 1\nline 2",
    "line\r\nsecond",
    "weirdö characters",
    "word😇 with emoji",
    "🦀rust",
    "(αβγ)",
    "e\u0301\u0301x",
    "3.14 and 1,000",
    "snake_case_name",
]


def _check_pieces(text, pieces):
    assert "".join(piece for _, piece in pieces) == text
    offset = 0
    for start, piece in pieces:
        assert start == offset
        assert piece
        assert text[start : start + len(piece)] == piece
        offset += len(piece)


@pytest.mark.parametrize("text", SAMPLES)
def test_grapheme_pieces_cover_text(text):
    _check_pieces(text, grapheme_indices(text))


@pytest.mark.parametrize("text", SAMPLES)
def test_word_pieces_cover_text(text):
    _check_pieces(text, word_bound_indices(text))


def test_empty_text_has_no_pieces():
    assert grapheme_indices("") == []
    assert word_bound_indices("") == []


def test_ascii_graphemes_are_single_chars():
    text = "abc"
    assert [piece for _, piece in grapheme_indices(text)] == list(text)


def test_combining_marks_form_one_grapheme():
    text = "\u00e9\u0301"
    assert grapheme_indices(text) == [(0, text)]


def test_crlf_is_one_grapheme():
    pieces = [piece for _, piece in grapheme_indices("a\r\nb")]
    assert "\r\n" in pieces
    assert len(pieces) == 3


def test_zwj_emoji_sequence_is_one_grapheme():
    family = "\U0001F468\u200d\U0001F469\u200d\U0001F467"
    assert grapheme_indices(family) == [(0, family)]


def test_words_and_spaces_alternate():
    text = "abc def ghi"
    pieces = [piece for _, piece in word_bound_indices(text)]
    assert pieces == text.replace(" ", "| |").split("|")


def test_hyphen_separates_words():
    pieces = [piece for _, piece in word_bound_indices("abc def-ghi")]
    assert "-" in pieces
    assert "def" in pieces
    assert "ghi" in pieces


def test_period_between_letters_joins_word():
    pieces = [piece for _, piece in word_bound_indices("abc.def ghi")]
    assert "abc.def" in pieces


def test_runs_of_spaces_stay_together():
    pieces = [piece for _, piece in word_bound_indices("abc def   i")]
    assert "   " in pieces


def test_emoji_is_separate_word():
    pieces = [piece for _, piece in word_bound_indices("word😇 with emoji")]
    assert "word" in pieces
    assert "😇" in pieces


def test_crlf_stays_one_word_piece():
    pieces = [piece for _, piece in word_bound_indices("line\r\nsecond")]
    assert "\r\n" in pieces
    assert "line" in pieces
    assert "second" in pieces


def test_numbers_with_separators_are_one_word():
    pieces = [piece for _, piece in word_bound_indices("3.14 and 1,000")]
    assert "3.14" in pieces
    assert "1,000" in pieces


def test_underscore_joins_word():
    text = "snake_case_name"
    assert word_bound_indices(text) == [(0, text)]


def test_non_latin_letters_form_word():
    pieces = [piece for _, piece in word_bound_indices("(αβγ)")]
    assert "αβγ" in pieces


def test_accented_letter_inside_word():
    pieces = [piece for _, piece in word_bound_indices("weirdö characters")]
    assert "weirdö" in pieces


def test_word_pieces_are_whitespace_or_not():
    for _, piece in word_bound_indices("abc  def\tghi"):
        assert is_whitespace_str(piece) or not any(c.isspace() for c in piece)


@pytest.mark.parametrize("text", ["", " ", " \t\n", "\r\n", "\u00a0", "\u3000\u2028"])
def test_whitespace_strings(text):
    assert is_whitespace_str(text) is True


@pytest.mark.parametrize("text", ["a", " a ", "\x1c", "-", "😇"])
def test_non_whitespace_strings(text):
    assert is_whitespace_str(text) is False