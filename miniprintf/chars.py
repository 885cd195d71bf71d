"""Character classification, case mapping, integer parsing and stream output."""

from __future__ import annotations

import sys
from typing import TextIO, Union

CharLike = Union[str, int]

_WHITESPACE = frozenset(" \t\n\v\f\r")


def _code(c: CharLike) -> int:
    """Return the code point of a one-character string, or an int unchanged."""
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code, got bool")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def is_alpha(c: CharLike) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: CharLike) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """True for an ASCII letter or decimal digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for a code in the range 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for a printable ASCII character (space through tilde)."""
    return 32 <= _code(c) <= 126


def to_upper(c: CharLike) -> CharLike:
    """Map an ASCII lower-case letter to upper case; other input is returned as is.

    The result has the same type as the argument.
    """
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code


def to_lower(c: CharLike) -> CharLike:
    """Map an ASCII upper-case letter to lower case; other input is returned as is.

    The result has the same type as the argument.
    """
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, one optional sign is accepted, and digits
    are read until the first non-digit. Text with no digits gives 0.
    """
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    start = pos
    while pos < len(text) and is_digit(text[pos]):
        pos += 1
    digits = text[start:pos]
    return sign * int(digits) if digits else 0


def _stream(file: TextIO | None) -> TextIO:
    return sys.stdout if file is None else file


def put_char(c: str, file: TextIO | None = None) -> None:
    """Write one character to ``file`` (standard output by default)."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _stream(file).write(c)


def put_str(s: str, file: TextIO | None = None) -> None:
    """Write a string to ``file`` (standard output by default)."""
    _stream(file).write(s)


def put_endl(s: str, file: TextIO | None = None) -> None:
    """Write a string followed by a newline to ``file``."""
    out = _stream(file)
    out.write(s)
    out.write("\n")


def put_nbr(n: int, file: TextIO | None = None) -> None:
    """Write an integer in decimal to ``file``."""
    _stream(file).write(str(int(n)))