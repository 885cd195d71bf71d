# miniprintf

A small `printf` that understands exactly these conversions:

| Spec | Output |
|------|--------|
| `%c` | a single character (an integer is taken as a character code, reduced to a byte) |
| `%s` | a string, or `(null)` for `None` |
| `%p` | `0x` followed by the address as a 64-bit value in lower-case hex |
| `%d`, `%i` | the integer as a signed 32-bit value in decimal |
| `%u` | the integer as an unsigned 32-bit value in decimal |
| `%x`, `%X` | the integer as an unsigned 32-bit value in lower- or upper-case hex |
| `%%` | a literal percent sign |

Integers outside the range of the type a specifier reads wrap around, as they would in a 32- or 64-bit machine word.

A `%` followed by any other character is dropped and the character after it is kept as plain text; a `%` at the very end of the format is dropped. No flags, widths or precisions are supported. Extra arguments are ignored; too few arguments raise `TypeError`.

## Install

```
pip install .
```

## Use

```python
from miniprintf.printf import printf, format_string

count = printf("%s has %d items (%x)\n", "cart", 42, 255)
# prints "cart has 42 items (ff)" and a newline, and returns 23

text = format_string("%u %X %p %%", -1, -2147483648, 4096)
# "4294967295 80000000 0x1000 %"
```

`printf` writes to standard output by default and returns the number of characters written. Pass `file=` to send the output to another text stream. `format_string` returns the text without writing it, and `convert(spec, args)` renders a single conversion, taking its argument from the iterator `args`.

Each conversion is also available on its own in `miniprintf.conversions`: `char`, `decimal`, `signed_int`, `unsigned`, `hexadecimal`, `pointer`, `string` and `percent`.

## Helpers

- `miniprintf.chars`: ASCII character tests `is_alpha`, `is_digit`, `is_alnum`, `is_ascii` and `is_print` (taking a one-character string or an integer code); `to_upper` and `to_lower`, which return the same type they are given; `atoi`, which skips leading whitespace, accepts one sign and reads digits up to the first non-digit (0 if there are none); and `put_char`, `put_str`, `put_endl` and `put_nbr`, which write to a text stream (standard output by default).
- `miniprintf.strings`: `split` (dropping empty pieces), `strchr`, `strrchr`, `strnstr`, `strncmp`, `strtrim`, `substr`, `iter_indexed`, `map_indexed`, and for byte buffers `memchr` and `memcmp`. The search functions return an index, or `None` when nothing is found.
- `miniprintf.lists`: a singly linked `LinkedList` of `Node`s with `add_front`, `add_back`, `last`, `iter`, `map`, `clear`, `len()` and iteration over the contents.

## Demo

```
miniprintf-demo
```

This prints every conversion once with `printf`, then the same values rendered with Python's own formatting. It then goes through each conversion, printing a line with the reference rendering and the same line with `printf`, followed by the number of characters each of the two took.

## Tests

```
pip install .[test]
pytest
```