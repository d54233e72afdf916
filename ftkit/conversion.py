"""Conversion between decimal text and 32-bit signed integers."""

from itertools import takewhile

_WHITESPACE = " \t\n\v\f\r"
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _wrap_int32(value: int) -> int:
    """Reduce *value* to a 32-bit two's complement signed integer."""
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def _is_ascii_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def atoi(s: str) -> int:
    """Parse a leading decimal integer from *s*.

    Leading whitespace is skipped, one optional sign is accepted, and
    parsing stops at the first non-digit. Text without digits gives 0.
    The result is reduced to a 32-bit signed integer.
    """
    if not isinstance(s, str):
        raise TypeError(f"expected a string, got {type(s).__name__}")
    text = s.lstrip(_WHITESPACE)
    sign = 1
    if text[:1] in ("-", "+"):
        if text[0] == "-":
            sign = -1
        text = text[1:]
    digits = "".join(takewhile(_is_ascii_digit, text))
    value = int(digits) if digits else 0
    return _wrap_int32(sign * value)


def itoa(n: int) -> str:
    """Decimal text of a 32-bit signed integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)