"""Text produced by each conversion specifier of the formatter.

Every function returns the exact text a conversion prints. The integer
conversions reduce their argument to the width of the C type the specifier
reads, so out-of-range values wrap the way they would in a 32- or 64-bit
machine word.
"""

from __future__ import annotations

from typing import Optional, Union

_INT_BITS = 32
_LONG_BITS = 64
_CHAR_BITS = 8

NULL_STRING = "(null)"
POINTER_PREFIX = "0x"


def _require_int(n: object) -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    return n


def _wrap_unsigned(n: int, bits: int) -> int:
    return n & ((1 << bits) - 1)


def _wrap_signed(n: int, bits: int) -> int:
    value = _wrap_unsigned(n, bits)
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _hex_digits(n: int, caps: bool) -> str:
    return format(n, "X" if caps else "x")


def char(c: Union[str, int]) -> str:
    """Text of ``%c``: one character.

    An integer argument is taken as a character code and reduced to a byte.
    """
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(_wrap_unsigned(_require_int(c), _CHAR_BITS))


def decimal(n: int) -> str:
    """Decimal text of an integer, with a leading minus sign when negative."""
    return str(_require_int(n))


def signed_int(n: int) -> str:
    """Text of ``%d`` and ``%i``: ``n`` as a 32-bit signed integer."""
    return decimal(_wrap_signed(_require_int(n), _INT_BITS))


def unsigned(n: int) -> str:
    """Text of ``%u``: ``n`` as a 32-bit unsigned integer."""
    return decimal(_wrap_unsigned(_require_int(n), _INT_BITS))


def hexadecimal(n: int, caps: bool = False) -> str:
    """Text of ``%x`` (or ``%X`` when ``caps``): ``n`` as 32-bit unsigned hex."""
    return _hex_digits(_wrap_unsigned(_require_int(n), _INT_BITS), bool(caps))


def pointer(address: int) -> str:
    """Text of ``%p``: ``0x`` followed by the 64-bit address in lower-case hex."""
    value = _wrap_unsigned(_require_int(address), _LONG_BITS)
    return POINTER_PREFIX + _hex_digits(value, False)


def string(s: Optional[str]) -> str:
    """Text of ``%s``: the string itself, or ``(null)`` for ``None``."""
    if s is None:
        return NULL_STRING
    if not isinstance(s, str):
        raise TypeError(f"expected a string or None, got {type(s).__name__}")
    return s


def percent() -> str:
    """Text of ``%%``: a single percent sign."""
    return "%"