"""Line-oriented reading of integers, doubles, characters and strings."""

from __future__ import annotations

import sys
from typing import TextIO

__all__ = [
    "InputFormatError",
    "read_integer",
    "read_double",
    "read_char",
    "read_string",
    "split_string",
]

_LINE_BUFFER = 20
_DIGITS = frozenset("0123456789")


class InputFormatError(ValueError):
    """Raised when a line does not hold a value of the requested form."""


def _read_line(stream: TextIO | None, max_chars: int) -> str:
    """Read at most ``max_chars - 1`` characters, stopping after a newline."""
    source = stream if stream is not None else sys.stdin
    line = source.readline(max_chars - 1)
    if line == "" and max_chars > 1:
        raise EOFError("end of input")
    return line[:-1] if line.endswith("\n") else line


def _is_integer(text: str) -> bool:
    body = text[1:] if text.startswith("-") else text
    return all(ch in _DIGITS for ch in body)


def _is_double(text: str) -> bool:
    body = text[1:] if text.startswith("-") else text
    if body.count(".") > 1:
        return False
    return all(ch in _DIGITS or ch == "." for ch in body)


def read_integer(stream: TextIO | None = None) -> int:
    """Read one line and return it as an integer.

    An optional leading minus sign followed by digits is accepted; an empty
    line reads as zero.
    """
    text = _read_line(stream, _LINE_BUFFER)
    if not _is_integer(text):
        raise InputFormatError(f"not an integer: {text!r}")
    digits = text.lstrip("-")
    value = int(digits) if digits else 0
    return -value if text.startswith("-") else value


def read_double(stream: TextIO | None = None) -> float:
    """Read one line and return it as a float.

    An optional leading minus sign, digits and at most one decimal point are
    accepted; missing digits read as zero.
    """
    text = _read_line(stream, _LINE_BUFFER)
    if not _is_double(text):
        raise InputFormatError(f"not a number: {text!r}")
    negative = text.startswith("-")
    whole, _, fraction = text.lstrip("-").partition(".")
    value = float(f"{whole or '0'}.{fraction or '0'}")
    return -value if negative else value


def read_char(stream: TextIO | None = None) -> str:
    """Read one line and return its first character."""
    text = _read_line(stream, _LINE_BUFFER)
    if not text:
        raise InputFormatError("no character was read")
    return text[0]


def read_string(max_chars: int, stream: TextIO | None = None) -> str:
    """Read up to ``max_chars - 1`` characters of a line, without its newline."""
    if max_chars < 1:
        raise ValueError("max_chars must be at least 1")
    return _read_line(stream, max_chars)


def split_string(string: str, n_tokens: int, delim: str) -> list[str | None]:
    """Split ``string`` on the first character of ``delim``.

    A trailing newline and carriage return are discarded first. The result
    always holds ``n_tokens`` entries, missing tokens being None.
    """
    if not delim:
        raise ValueError("delimiter must not be empty")
    if n_tokens < 1:
        raise ValueError("n_tokens must be at least 1")
    if string.endswith("\n"):
        string = string[:-1]
    if string.endswith("\r"):
        string = string[:-1]
    tokens: list[str | None] = list(string.split(delim[0]))
    if len(tokens) > n_tokens:
        raise ValueError(
            f"expected at most {n_tokens} tokens, found {len(tokens)}"
        )
    tokens.extend([None] * (n_tokens - len(tokens)))
    return tokens