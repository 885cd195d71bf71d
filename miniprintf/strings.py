"""String and byte-buffer helpers: searching, comparing, slicing and splitting.

Search functions return an index into their argument, or ``None`` when
nothing is found.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Union

CharLike = Union[str, int]
BytesLike = Union[bytes, bytearray, memoryview]


def _char(c: CharLike) -> str:
    """Return ``c`` as a one-character string; an int is reduced to a byte."""
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code, got bool")
    if isinstance(c, int):
        return chr(c & 0xFF)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def _byte(c: Union[int, bytes]) -> int:
    if isinstance(c, bool):
        raise TypeError("expected a byte value, got bool")
    if isinstance(c, int):
        return c & 0xFF
    if isinstance(c, (bytes, bytearray)) and len(c) == 1:
        return c[0]
    raise TypeError(f"expected a byte value, got {c!r}")


def _non_negative(value: int, name: str) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def split(s: str, sep: CharLike) -> List[str]:
    """Split ``s`` on the character ``sep``, dropping empty pieces."""
    return [piece for piece in s.split(_char(sep)) if piece]


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``s``.

    Searching for ``"\\0"`` finds the end of the string when ``s`` holds none.
    """
    ch = _char(c)
    index = s.find(ch)
    if index == -1:
        return len(s) if ch == "\0" else None
    return index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``s``; ``"\\0"`` always finds the end."""
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index == -1 else index


def iter_indexed(s: str, f: Callable[[int, str], object]) -> None:
    """Call ``f(index, character)`` for every character of ``s``."""
    for index, ch in enumerate(s):
        f(index, ch)


def map_indexed(s: str, f: Callable[[int, str], str]) -> str:
    """Return the string built from ``f(index, character)`` for each character."""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the first differing character codes, the end of
    a string counting as code 0, or 0 when the compared parts are equal.
    """
    for index in range(n):
        a = ord(s1[index]) if index < len(s1) else 0
        b = ord(s2[index]) if index < len(s2) else 0
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters."""
    if len(needle) > len(haystack):
        return None
    if not needle:
        return 0
    end = min(length, len(haystack))
    if end < len(needle):
        return None
    index = haystack.find(needle, 0, end)
    return None if index == -1 else index


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    return s.strip(charset) if charset else s


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` from ``start``; empty past the end."""
    _non_negative(start, "start")
    _non_negative(length, "length")
    if start >= len(s):
        return ""
    return s[start:start + length]


def memchr(data: BytesLike, c: Union[int, bytes], n: int) -> Optional[int]:
    """Index of the first byte equal to ``c`` among the first ``n`` bytes."""
    _non_negative(n, "n")
    if n > len(data):
        raise ValueError(f"n ({n}) exceeds the buffer size ({len(data)})")
    index = bytes(data[:n]).find(_byte(c))
    return None if index == -1 else index


def memcmp(a: BytesLike, b: BytesLike, n: int) -> int:
    """Compare the first ``n`` bytes; return the first difference, or 0."""
    _non_negative(n, "n")
    if n > len(a) or n > len(b):
        raise ValueError(f"n ({n}) exceeds a buffer size")
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0