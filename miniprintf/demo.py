"""Demonstration that prints each conversion next to a reference rendering."""

from __future__ import annotations

import sys
from typing import Any, Sequence

from miniprintf.printf import printf

_POINTEE = "hello u"

_C = "a"
_S = None
_I = 2147483647
_D = -2147483648
_X_LOWER = 2147483647
_X_UPPER = -2147483648
_U = 4294967295


def _reference(spec: str, value: Any) -> str:
    """Render one conversion with the language's own formatting operator."""
    if spec == "%":
        return "%"
    if spec == "s" and value is None:
        return "(null)"
    if spec == "p":
        return hex(value)
    if spec in "xXu":
        value &= 0xFFFFFFFF
    if spec == "u":
        spec = "d"
    return ("%" + spec) % value


def _write(text: str) -> int:
    sys.stdout.write(text)
    return len(text)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the conversion table and compare returned lengths."""
    pointer = id(_POINTEE)
    cases = [
        ("c", "c", _C),
        ("i", "i", _I),
        ("d", "d", _D),
        ("s", "s", _S),
        ("x", "x", _X_LOWER),
        ("X", "X", _X_UPPER),
        ("p", "p", pointer),
        ("u", "u", _U),
    ]

    printf("*********TEST RESULT*********\n")
    printf(
        "c = %c\ni = %i\nd = %d\ns = %s\nx = %x\nX = %X\np = %p\nu = %u\n%% = %%\n\n",
        _C, _I, _D, _S, _X_LOWER, _X_UPPER, pointer, _U,
    )
    for label, spec, value in cases:
        _write(f"real {label} = {_reference(spec, value)}\n")
    _write("real % = %\n\n")

    _write("*****printf returns the length of what it prints*****\n")
    return_cases = [
        ("char", "c", _C),
        ("hexa", "x", _X_LOWER),
        ("HEXA", "X", _X_UPPER),
        ("pointer", "p", pointer),
        ("string", "s", _S),
        ("int", "i", _I),
        ("d", "d", _D),
        ("percent", "%", None),
        ("u", "u", _U),
    ]
    for title, spec, value in return_cases:
        real_len = _write(f"({title}) {_reference(spec, value)}\n")
        fmt = f"({title}) %{spec}\n"
        my_len = printf(fmt) if spec == "%" else printf(fmt, value)
        _write(f"real return = {real_len}\n")
        printf("my return = %i\n\n", my_len)
    return 0


if __name__ == "__main__":
    sys.exit(main())