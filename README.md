# ftkit

A small toolkit of string and byte helpers. It also reads lines from file descriptors and renders single printf-style conversions with exact field-width and precision rules.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

### `ftkit.strings`

These helpers follow the classic C string routines. Positions come back as indexes, or `None` when nothing is found. Routines that fill a buffer in C return the result instead.

- `split(s, sep)` splits on runs of a single separator character and drops empty pieces.
- `strchr(s, c)` and `strrchr(s, c)` return the first or last index of `c`. `"\0"` matches at `len(s)`.
- `strnstr(haystack, needle, length)` finds `needle` only where it lies wholly within the first `length` characters. An empty needle gives `0`.
- `strncmp(s1, s2, n)` compares at most `n` characters. It returns the code-point difference.
- `strjoin(s1, s2)` concatenates two strings. If one side is `None`, it returns the other side.
- `strtrim(s, charset)` and `substr(s, start, length)` trim and slice. `substr` returns `""` when `start` is past the end.
- `strmapi(s, func)` builds a string from `func(index, char)`.
- `strlcpy(src, size)` returns `(copy, len(src))`.
- `strlcat(dst, src, size)` returns `(result, would_be_length)`.
- `tolower(c)` and `toupper(c)` change ASCII letters only.

Negative sizes, and separators or characters that are not a single character, raise `ValueError`.

### `ftkit.buffers`

- `memcpy(dst, src, n)` works on writable buffers such as `bytearray` and `memoryview`. It returns `dst`.
- `memmove(dst, src, n)` does the same and handles overlapping regions.
- `memset(buf, value, n)` fills with `value & 0xFF`.

A byte count that is negative or larger than a buffer raises `ValueError`.

### `ftkit.fdio`

- `putchar_fd(c, fd)`, `putstr_fd(s, fd)` and `putendl_fd(s, fd)` write UTF-8 text to a file descriptor. `None` writes nothing.
- `LineReader(fd)` reads in chunks of `BUFFER_SIZE` (1024) bytes.
  - `readline()` returns the next line with its newline. The final line may have no newline. `""` means end of input.
  - Iterating over the reader yields lines without their newline.

### `ftkit.radix`

- `to_base(value, base, lowercase=True)` gives the digits of `abs(value)` in bases 2 to 36.
- `conversion_base(conversion)` returns 16 for `x`, `X` and `p`, and 10 otherwise.
- `digit_case(conversion)` is false only for `X`.
- `pad_spaces(count)` and `pad_zeros(count)` return padding runs. They return an empty string for non-positive counts.

### `ftkit.spec`

`FormatSpec` is a dataclass describing one conversion. Its fields are `left`, `zero`, `width`, `precision`, `has_precision`, `dot`, `conversion` and `length`.

- `length` must be one of `""`, `"hh"`, `"h"`, `"l"` or `"ll"`.
- `conversion` must be empty, `%`, `S`, or one of `cspdiuxXnl`.

`is_conversion(c)` and `is_flag(c)` classify specifier characters.

### `ftkit.conversions`

These functions render `%`, strings and wide strings, pointers, and hexadecimal values:

- `render_percent`
- `render_string`, `render_wide_string`
- `render_pointer`
- `render_hex`, `render_hex_long`, `render_hex_long_long`

They return text and never modify the spec. A `None` string renders as `NULL_STRING` (`"(null)"`).

### `ftkit.numbers`

- `render_signed`, `render_unsigned` and `render_unsigned_long` render decimal integers.
- `render_conversion(spec, value)` picks the renderer for a spec. It narrows the value to the integer width that the length modifier implies.
  - The `n` conversion produces no text.
  - The `c` conversion raises `ValueError`.

## Examples

```python
from ftkit.strings import split, strtrim
from ftkit.spec import FormatSpec
from ftkit.numbers import render_conversion
from ftkit.fdio import LineReader

split("  a  bc d ", " ")     # ['a', 'bc', 'd']
strtrim("xxhixx", "x")       # 'hi'

render_conversion(FormatSpec(width=6, conversion="x"), 255)   # '    ff'

with open("notes.txt") as fh:
    for line in LineReader(fh.fileno()):
        print(line)
```

## What it does not do

There is no function that takes a whole format string and its arguments. Each conversion is rendered from a `FormatSpec` you build yourself, and the result is returned as a string rather than written out. Character conversions (`c`) are not rendered. The `n` conversion stores nothing.