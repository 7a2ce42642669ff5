import io

import pytest

from stackadt.console_input import (
    InputFormatError,
    read_char,
    read_double,
    read_integer,
    read_string,
    split_string,
)


@pytest.mark.parametrize("text, expected", [("42\n", 42), ("-7\n", -7), ("123", 123)])
def test_read_integer_valid(text, expected):
    assert read_integer(io.StringIO(text)) == expected


@pytest.mark.parametrize("text", ["4a\n", "--1\n", "1-\n", " 5\n", "5 \n", "1.0\n"])
def test_read_integer_invalid(text):
    with pytest.raises(InputFormatError):
        read_integer(io.StringIO(text))


def test_read_integer_empty_line_is_zero():
    assert read_integer(io.StringIO("\n")) == 0


def test_read_integer_eof():
    with pytest.raises(EOFError):
        read_integer(io.StringIO(""))


def test_read_integer_reads_limited_chunk():
    digits = "1" * 25
    stream = io.StringIO(digits + "\n")
    assert read_integer(stream) == int(digits[:19])
    assert stream.read() == digits[19:] + "\n"


def test_read_integer_consumes_one_line():
    stream = io.StringIO("3\n4\n")
    assert read_integer(stream) == 3
    assert read_integer(stream) == 4


@pytest.mark.parametrize("text, expected", [("3.5\n", 3.5), ("-0.25\n", -0.25), ("8\n", 8.0)])
def test_read_double_valid(text, expected):
    assert read_double(io.StringIO(text)) == expected


def test_read_double_lone_point_is_zero():
    assert read_double(io.StringIO(".\n")) == 0.0


def test_read_double_eof():
    with pytest.raises(EOFError):
        read_double(io.StringIO(""))


def test_read_char_takes_first():
    stream = io.StringIO("xyz\nq\n")
    assert read_char(stream) == "x"
    assert read_char(stream) == "q"


def test_read_char_empty_line():
    with pytest.raises(InputFormatError):
        read_char(io.StringIO("\n"))


def test_read_char_eof():
    with pytest.raises(EOFError):
        read_char(io.StringIO(""))


def test_read_string_strips_newline():
    assert read_string(80, io.StringIO("abc\n")) == "abc"


def test_read_string_truncates():
    text = "hello world"
    stream = io.StringIO(text + "\n")
    assert read_string(10, stream) == text[:9]
    assert stream.read() == text[9:] + "\n"


def test_read_string_rejects_bad_size():
    with pytest.raises(ValueError):
        read_string(0, io.StringIO("abc\n"))


def test_read_string_eof():
    with pytest.raises(EOFError):
        read_string(10, io.StringIO(""))


def test_split_string_basic():
    assert split_string("a;b;c\n", 3, ";") == ["a", "b", "c"]


def test_split_string_crlf():
    assert split_string("a,b\r\n", 2, ",") == ["a", "b"]


def test_split_string_pads_with_none():
    assert split_string("a;b", 4, ";") == ["a", "b", None, None]


def test_split_string_trailing_delimiter():
    assert split_string("a;b;", 3, ";") == ["a", "b", ""]


def test_split_string_uses_first_delim_char():
    assert split_string("a;b,c", 2, ";,") == ["a", "b,c"]


def test_split_string_too_many_tokens():
    with pytest.raises(ValueError):
        split_string("a;b;c", 2, ";")


def test_split_string_empty_delim():
    with pytest.raises(ValueError):
        split_string("a;b", 2, "")


def test_split_string_rejoin_round_trip():
    text = "one|two|three|four"
    tokens = split_string(text, 4, "|")
    assert "|".join(tokens) == text