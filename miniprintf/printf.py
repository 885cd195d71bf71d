"""A small printf: formats ``%c %s %p %d %i %u %x %X %%`` and writes the result."""

from __future__ import annotations

import re
import sys
from typing import Any, Callable, Iterable, Iterator, TextIO

from miniprintf import conversions

SPECIFIERS = "cspdiuxX%"

_DIRECTIVE = re.compile(r"%([cspdiuxX%])?")

_CONVERTERS: dict[str, Callable[[Any], str]] = {
    "c": conversions.char,
    "s": conversions.string,
    "p": conversions.pointer,
    "d": conversions.signed_int,
    "i": conversions.signed_int,
    "u": conversions.unsigned,
    "x": lambda n: conversions.hexadecimal(n, False),
    "X": lambda n: conversions.hexadecimal(n, True),
}


def convert(spec: str, args: Iterable[Any]) -> str:
    """Return the text of one conversion, taking its argument from ``args``.

    ``args`` should be an iterator shared between calls; ``%%`` takes no
    argument. Raises ``ValueError`` for an unknown specifier and
    ``TypeError`` when no argument is left.
    """
    if spec == "%":
        return conversions.percent()
    try:
        converter = _CONVERTERS[spec]
    except KeyError:
        raise ValueError(f"unknown conversion specifier {spec!r}") from None
    try:
        value = next(iter(args))
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    return converter(value)


def format_string(fmt: str, *args: Any) -> str:
    """Return the text ``printf`` would write for ``fmt`` and ``args``.

    A ``%`` not followed by a known specifier is dropped and the character
    after it is kept as plain text. Extra arguments are ignored.
    """
    remaining: Iterator[Any] = iter(args)

    def _replace(match: re.Match[str]) -> str:
        spec = match.group(1)
        return "" if spec is None else convert(spec, remaining)

    return _DIRECTIVE.sub(_replace, fmt)


def printf(fmt: str, *args: Any, file: TextIO | None = None) -> int:
    """Format and write to ``file`` (standard output by default).

    Returns the number of characters written.
    """
    text = format_string(fmt, *args)
    (sys.stdout if file is None else file).write(text)
    return len(text)