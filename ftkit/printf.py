"""Formatted output with the conversions c, s, d, i, u, x, X, p and %."""

import sys
from typing import Any, Callable, Dict, Iterator, Optional, TextIO, Union

_NUL = "\0"
_UINT32_MASK = 0xFFFFFFFF
_ULONG_MASK = 0xFFFFFFFFFFFFFFFF


class FormatError(ValueError):
    """Raised when a format string cannot be rendered."""


def _require_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer, got {type(value).__name__}")
    return value


def _wrap_int32(value: int) -> int:
    value &= _UINT32_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def _until_nul(text: str) -> str:
    return text.split(_NUL, 1)[0]


def format_char(c: Union[str, int]) -> str:
    """One character; an integer contributes its low byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(_require_int(c) & 0xFF)


def format_str(s: Optional[str]) -> str:
    """The string up to its first NUL; None gives "(null)"."""
    if s is None:
        return "(null)"
    if not isinstance(s, str):
        raise TypeError(f"expected a string, got {type(s).__name__}")
    return _until_nul(s)


def format_int(n: int) -> str:
    """Signed decimal of *n* taken as a 32-bit integer."""
    return str(_wrap_int32(_require_int(n)))


def format_unsigned(n: int) -> str:
    """Unsigned decimal of *n* taken as a 32-bit integer."""
    return str(_require_int(n) & _UINT32_MASK)


def format_hex(n: int, spec: str) -> str:
    """Hexadecimal of *n* taken as a 32-bit unsigned integer; *spec* 'x'
    gives lower-case digits, 'X' upper-case."""
    if spec not in ("x", "X"):
        raise ValueError(f"hex conversion must be 'x' or 'X', got {spec!r}")
    return format(_require_int(n) & _UINT32_MASK, spec)


def format_ptr(address: Optional[int]) -> str:
    """An address as "0x" and lower-case hex; a null address gives "(nil)"."""
    if address is None:
        return "(nil)"
    value = _require_int(address) & _ULONG_MASK
    if value == 0:
        return "(nil)"
    return "0x" + format(value, "x")


_CONVERSIONS: Dict[str, Callable[[Any], str]] = {
    "c": format_char,
    "s": format_str,
    "d": format_int,
    "i": format_int,
    "p": format_ptr,
    "u": format_unsigned,
    "x": lambda value: format_hex(value, "x"),
    "X": lambda value: format_hex(value, "X"),
}


def _next_arg(args: Iterator[Any], spec: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise FormatError(f"missing argument for '%{spec}'") from None


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    converter = _CONVERSIONS.get(spec)
    if converter is None:
        return spec
    return converter(_next_arg(args, spec))


def sprintf(fmt: str, *args: Any) -> str:
    """Render *fmt* with *args*.

    The format ends at its first NUL. An unknown conversion renders as its
    own letter and takes no argument. Extra arguments are ignored.
    """
    if fmt is None:
        raise TypeError("a format string is required")
    if not isinstance(fmt, str):
        raise TypeError(f"expected a string, got {type(fmt).__name__}")
    remaining = iter(args)
    chars = iter(_until_nul(fmt))
    pieces = []
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            raise FormatError("format string ends with a lone '%'")
        pieces.append(_convert(spec, remaining))
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the rendered format to *stream* (standard output by default)
    and return the number of characters written."""
    text = sprintf(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)