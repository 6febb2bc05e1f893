import io

import pytest

from minishell.text import LineReader, find_char, split, strncmp, substr


def test_split_drops_empty_words():
    assert split("  hello  world ", " ") == ["hello", "world"]


def test_split_empty_and_only_separators():
    assert split("", ",") == []
    assert split(",,,", ",") == []


def test_split_without_separator_present():
    assert split("word", ",") == ["word"]


def test_split_empty_separator_keeps_whole_text():
    assert split("a b", "") == ["a b"]


@pytest.mark.parametrize("text", ["a:b:c", "::x::y", "no-sep", "/usr/bin:/bin"])
def test_split_rejoin_invariant(text):
    words = split(text, ":")
    assert all(words)
    assert "".join(words) == text.replace(":", "")


def test_substr_basic():
    assert substr("hello", 1, 3) == "ell"


def test_substr_clamps_length():
    assert substr("hello", 3, 100) == "lo"


def test_substr_start_past_end():
    assert substr("hello", 5, 2) == ""
    assert substr("hello", 50, 2) == ""


def test_substr_negative_rejected():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


@pytest.mark.parametrize("char", ["P", "=", "/"])
def test_find_char_points_at_char(char):
    text = "PATH=/usr/bin"
    index = find_char(text, char)
    assert text[index] == char
    assert char not in text[:index]


def test_find_char_missing_and_terminator():
    assert find_char("abc", "z") is None
    assert find_char("abc", "") == 3
    assert find_char(None, "a") is None


def test_strncmp_equal_prefix():
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("-n", "-n", 2) == 0
    assert strncmp("-nnn", "-n", 2) == 0


def test_strncmp_signs():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("a", "ab", 5) < 0
    assert strncmp("x", "y", 0) == 0


@pytest.mark.parametrize("size", [1, 2, 3, 1024])
def test_line_reader_text_round_trip(size):
    content = "first line\nsecond\n\nlast without newline"
    lines = list(LineReader(io.StringIO(content), size))
    assert "".join(lines) == content
    assert all(line.endswith("\n") for line in lines[:-1])
    assert lines[-1] == "last without newline"


def test_line_reader_bytes():
    reader = LineReader(io.BytesIO(b"one\ntwo\n"), 2)
    assert reader.read_line() == b"one\n"
    assert reader.read_line() == b"two\n"
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_line_reader_empty_stream():
    assert LineReader(io.StringIO(""), 4).read_line() is None


def test_line_reader_rejects_bad_buffer():
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), 0)