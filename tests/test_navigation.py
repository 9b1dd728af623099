import pytest

from linekit.navigation import LineNavigation


def nav(text, position=None):
    return LineNavigation(text, len(text) if position is None else position)


def test_empty_and_length():
    empty = LineNavigation()
    assert empty.is_empty()
    assert len(nav("abc")) == 3
    assert not nav("abc").is_empty()


def test_ends_with():
    assert nav("line\n").ends_with("\n")
    assert not nav("line").ends_with("\n")


@pytest.mark.parametrize(
    "text,position,expected",
    [
        ("ab", 2, True),
        ("ab", 0, True),
        ("a\r\nb", 2, False),
        ("ab", 5, False),
        ("a\ud800", 0, False),
    ],
)
def test_is_valid(text, position, expected):
    assert nav(text, position).is_valid() is expected


@pytest.mark.parametrize(
    "text,position,expected",
    [
        ("line", 0, 4),
        ("line\nline", 1, 4),
        ("line\nline", 7, 9),
        ("line\n", 4, 4),
        ("line\n", 5, 5),
        ("\n", 0, 0),
        ("\r\n", 0, 0),
        ("line\r\nword", 1, 4),
        ("line\r\nword", 7, 10),
    ],
)
def test_find_current_line_end(text, position, expected):
    assert nav(text, position).find_current_line_end() == expected


@pytest.mark.parametrize(
    "text,position,expected",
    [
        ("", 0, 0),
        ("\n", 0, 0),
        ("\n", 1, 1),
        ("a\nb", 0, 0),
        ("a\nb", 1, 0),
        ("a\nb", 2, 1),
        ("a\nbc", 3, 1),
        ("a\r\nb", 3, 1),
        ("a\r\nbc", 4, 1),
    ],
)
def test_current_line_num(text, position, expected):
    assert nav(text, position).line() == expected


@pytest.mark.parametrize(
    "text,expected",
    [("", 1), ("line", 1), ("\n", 2), ("line\n", 2), ("a\nb", 2)],
)
def test_num_lines(text, expected):
    assert nav(text, 0).num_lines() == expected


@pytest.mark.parametrize(
    "text,position,expected",
    [
        ("", 0, (0, 0)),
        ("line", 0, (0, 4)),
        ("line\n", 0, (0, 5)),
        ("line\n", 4, (0, 5)),
        ("line\r\n", 0, (0, 6)),
        ("line\r\n", 4, (0, 6)),
        ("line\nsecond", 5, (5, 11)),
        ("line\r\nsecond", 7, (6, 12)),
    ],
)
def test_current_line_range(text, position, expected):
    assert nav(text, position).current_line_range() == expected


@pytest.mark.parametrize(
    "text,position,expected",
    [("abc def ghi", 10, 8), ("abc def-ghi", 10, 8), ("abc def.ghi", 10, 4)],
)
def test_word_left_index(text, position, expected):
    assert nav(text, position).word_left_index() == expected


@pytest.mark.parametrize(
    "text,position,expected",
    [("abc def ghi", 10, 8), ("abc def-ghi", 10, 4), ("abc def.ghi", 10, 4)],
)
def test_big_word_left_index(text, position, expected):
    assert nav(text, position).big_word_left_index() == expected


@pytest.mark.parametrize(
    "text,position,expected",
    [("abc def ghi", 0, 4), ("abc-def ghi", 0, 3), ("abc.def ghi", 0, 8)],
)
def test_word_right_start_index(text, position, expected):
    assert nav(text, position).word_right_start_index() == expected


@pytest.mark.parametrize(
    "text,position,expected",
    [("abc def ghi", 0, 4), ("abc-def ghi", 0, 8), ("abc.def ghi", 0, 8)],
)
def test_big_word_right_start_index(text, position, expected):
    assert nav(text, position).big_word_right_start_index() == expected


@pytest.mark.parametrize(
    "text,position,expected",
    [
        ("abc def ghi", 0, 2),
        ("abc-def ghi", 0, 2),
        ("abc.def ghi", 0, 6),
        ("abc", 1, 2),
        ("abc", 2, 2),
        ("abc def", 2, 6),
        ("", 0, 0),
        ("word", 0, 3),
        ("word and another one", 0, 3),
        ("word and another one", 3, 7),
        ("word and another one", 4, 7),
        ("word\nline two", 0, 3),
        ("word\nline two", 3, 8),
        ("weirdö characters", 0, 5),
        ("weirdö characters", 5, 16),
        ("weirdö", 0, 5),
        ("weirdö", 5, 5),
        ("word😇 with emoji", 0, 3),
        ("word😇 with emoji", 3, 4),
        ("😇", 0, 0),
    ],
)
def test_word_right_end_index(text, position, expected):
    assert nav(text, position).word_right_end_index() == expected


@pytest.mark.parametrize(
    "text,position,expected",
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
def test_big_word_right_end_index(text, position, expected):
    assert nav(text, position).big_word_right_end_index() == expected


@pytest.mark.parametrize(
    "text,position,expected",
    [("abc def", 0, 3), ("abc def ghi", 3, 7), ("abc", 1, 3)],
)
def test_next_whitespace(text, position, expected):
    assert nav(text, position).next_whitespace() == expected


@pytest.mark.parametrize(
    "text,position,expected",
    [("This is a test", 0, 4), ("This is a test", 10, 14), ("abc-def ghi", 0, 3)],
)
def test_word_right_index(text, position, expected):
    assert nav(text, position).word_right_index() == expected


def test_big_word_right_index():
    assert nav("abc-def ghi", 0).big_word_right_index() == 11
    assert nav("abc", 0).big_word_right_index() == 3


@pytest.mark.parametrize(
    "text,position,expected",
    [
        ("line", 4, True),
        ("line 1\nline 2\nline 3", 0, True),
        ("line 1\nline 2\nline 3", 6, True),
        ("line 1\nline 2\nline 3", 8, False),
    ],
)
def test_first_line_detection(text, position, expected):
    assert nav(text, position).is_cursor_at_first_line() is expected


@pytest.mark.parametrize(
    "text,position,expected",
    [
        ("line", 4, True),
        ("line\nline", 9, True),
        ("line 1\nline 2\nline 3", 8, False),
        ("line 1\nline 2\nline 3", 13, False),
        ("line 1\nline 2\nline 3", 14, True),
        ("line 1\nline 2\nline 3", 20, True),
        ("line 1\nline 2\nline 3\n", 20, False),
        ("line 1\nline 2\nline 3\n", 21, True),
    ],
)
def test_last_line_detection(text, position, expected):
    assert nav(text, position).is_cursor_at_last_line() is expected


def test_grapheme_indices_around_cursor():
    assert nav("a😇c", 1).grapheme_right_index() == 2
    assert nav("\r\n", 0).grapheme_right_index() == 2
    assert nav("\r\n", 2).grapheme_left_index() == 0
    assert nav("abc", 3).grapheme_right_index() == 3
    assert nav("abc", 0).grapheme_left_index() == 0


def test_grapheme_left_and_right():
    buffer = nav("This is a test 😊")
    assert buffer.grapheme_left() == "😊"
    assert buffer.grapheme_right() == ""
    start = nav("\r\nx", 0)
    assert start.grapheme_right() == "\r\n"
    assert start.grapheme_left() == ""


def test_on_whitespace():
    assert nav("a b", 1).on_whitespace() is True
    assert nav("a b", 0).on_whitespace() is False
    assert nav("ab", 2).on_whitespace() is False


def test_current_word_range():
    assert nav("This is a test", 10).current_word_range() == (10, 14)
    assert nav("This is a test", 8).current_word_range() == (8, 9)
    assert nav("", 0).current_word_range() == (0, 0)


@pytest.mark.parametrize(
    "text,position,c,current_line,expected",
    [
        ("abc def ghi", 0, "c", True, 2),
        ("abc def ghi", 0, "a", True, None),
        ("abc def ghi", 0, "z", True, None),
        ("a😇c", 0, "c", True, 2),
        ("😇bc", 0, "c", True, 2),
        ("abc\ndef", 0, "f", True, None),
        ("abc\ndef", 3, "f", True, None),
        ("abc\ndef", 0, "f", False, 6),
        ("abc\ndef", 3, "f", False, 6),
    ],
)
def test_find_char_right(text, position, c, current_line, expected):
    assert nav(text, position).find_char_right(c, current_line) == expected


@pytest.mark.parametrize(
    "text,position,c,current_line,expected",
    [
        ("abc def ghi", 4, "c", True, 2),
        ("abc def ghi", 0, "a", True, None),
        ("abc def ghi", 6, "a", True, 0),
        ("z\nabc def ghi", 10, "z", True, None),
        ("z\nabc def ghi", 12, "z", False, 0),
    ],
)
def test_find_char_left(text, position, c, current_line, expected):
    assert nav(text, position).find_char_left(c, current_line) == expected