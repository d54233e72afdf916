# ftkit

A small library of low-level text and buffer helpers. It covers ASCII
character classification, byte-buffer operations, bounded string routines,
conversion between decimal text and 32-bit integers, and a minimal `printf`.
It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `ftkit.chars`

`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper` and
`to_lower`. Each one takes an integer character code or a one-character string.
Classification is ASCII only: `is_ascii` is true for codes 0 to 127, and
`is_print` for codes 32 to 126. `to_upper` and `to_lower` change only ASCII
letters, and they return the same kind of value they were given (an `int` for
an `int`, a `str` for a `str`). A string longer than one character raises
`ValueError`. A `bool` or any other type raises `TypeError`.

### `ftkit.memory`

These functions work on `bytes`, `bytearray` and `memoryview` buffers.

- `memset(buf, value, n)` fills the first `n` bytes with the low byte of
  `value` and returns `buf`.
- `bzero(buf, n)` zeroes the first `n` bytes.
- `calloc(nmemb, size)` returns a zero-filled `bytearray` of `nmemb * size`
  bytes.
- `memchr(buf, value, n)` returns the index of the first matching byte within
  the first `n` bytes, or `None`.
- `memcmp(a, b, n)` returns the difference of the first unequal pair of bytes,
  or `0` if there is none.
- `memcpy(dest, src, n)` copies `n` bytes and returns `dest`. If both buffers
  are `None` it returns `None`. If only one is `None` it raises `TypeError`.
- `memmove(dest, src, n, dest_offset=0, src_offset=0)` copies `n` bytes between
  offsets and returns `dest`. The two regions may overlap.

A negative count, or a count or span larger than the buffer, raises
`ValueError`.

### `ftkit.output`

- `put_char(c, stream=None)` writes one character.
- `put_str(s, stream=None)` writes a string. `None` writes nothing.
- `put_endl(s, stream=None)` writes a string followed by a newline.
- `put_nbr(n, stream=None)` writes a 32-bit signed integer in decimal. A value
  outside that range raises `OverflowError`.

When `stream` is omitted, the output goes to standard output.

### `ftkit.strings`

- `strlen(s)` gives the length up to the first NUL. It accepts a `str` or
  bytes.
- `strlcpy(dst, src, size)` works on NUL-terminated byte buffers: `dst` is a
  `bytearray`. It returns the length of `src`.
- `strlcat(dst, src, size)` also works on NUL-terminated byte buffers, with
  `dst` a `bytearray`. It returns the length it tried to create.
- `strchr(s, c)` and `strrchr(s, c)` return the index of the first or the last
  occurrence, or `None`. Searching for NUL returns `len(s)`.
- `strncmp(s1, s2, n)` returns the code difference at the first mismatch within
  `n` characters, or `0`.
- `strnstr(big, little, length)` returns the index of `little` when it lies
  wholly within the first `length` characters of `big`, or `None`. An empty
  `little` gives `0`.
- `strdup(s)` returns a copy of the string.
- `substr(s, start, length)` returns a slice. It returns `""` when `start` is
  past the end.
- `strjoin(s1, s2)` concatenates two strings.
- `strtrim(s, charset)` strips the characters in `charset` from both ends.
- `split(s, sep)` returns the non-empty words between runs of `sep`.
- `strmapi(s, func)` builds a new string from `func(index, char)`.
- `striteri(buf, func)` calls `func(index, item)` on a mutable sequence up to a
  NUL and stores every non-`None` result in place.

`substr`, `strjoin`, `strtrim`, `split` and `strmapi` return `None` when given
`None`.

### `ftkit.conversion`

- `atoi(s)` skips leading whitespace and accepts one optional sign. It then
  reads digits up to the first non-digit. Text with no digits gives `0`. The
  result wraps to a 32-bit signed integer.
- `itoa(n)` returns the decimal text of a 32-bit signed integer. A value
  outside that range raises `OverflowError`.

### `ftkit.printf`

`sprintf(fmt, *args)` returns the rendered text. `printf(fmt, *args,
stream=None)` writes that text and returns the number of characters written.

The supported conversions are:

| Conversion | Output |
|---|---|
| `%c` | one character |
| `%s` | a string (`None` gives `(null)`) |
| `%d`, `%i` | 32-bit signed decimal |
| `%u` | 32-bit unsigned decimal |
| `%x`, `%X` | 32-bit hexadecimal, lower or upper case |
| `%p` | `0x` followed by lower-case hex (`None` or `0` gives `(nil)`) |
| `%%` | a literal `%` |

Other rules for the format string:

- The format ends at its first NUL.
- An unknown conversion is written as the character after the `%` and uses no
  argument.
- Extra arguments are ignored.
- A missing argument raises `FormatError`, a subclass of `ValueError`.
- A format that ends in a lone `%` also raises `FormatError`.

Each conversion is also available on its own: `format_char`, `format_str`,
`format_int`, `format_unsigned`, `format_hex(n, spec)` and `format_ptr`.

## Examples

```python
from ftkit.strings import split, strtrim
from ftkit.conversion import atoi, itoa
from ftkit.printf import sprintf

split("  hello  world ", " ")            # ['hello', 'world']
strtrim("xxhixx", "x")                   # 'hi'
atoi("   -42abc")                        # -42
itoa(-2147483648)                        # '-2147483648'
sprintf("%s is %d (%x)", "n", 255, 255)  # 'n is 255 (ff)'
```

## Limitations

The `printf` functions take no flags, field widths, precisions or length
modifiers. Only the conversions listed above are recognised. The package is a
library only and provides no command-line program.