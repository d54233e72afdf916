"""Character classification and case conversion in the ASCII range.

Every function takes either an integer character code or a one-character
string. Case conversion hands back the same kind of value it was given.
"""

from typing import Union

Char = Union[int, str]

_LOWER_A, _LOWER_Z = ord("a"), ord("z")
_UPPER_A, _UPPER_Z = ord("A"), ord("Z")
_DIGIT_0, _DIGIT_9 = ord("0"), ord("9")
_CASE_OFFSET = _LOWER_A - _UPPER_A


def _code(c: Char) -> int:
    """Return the integer code of *c*, validating its type."""
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code, got bool")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    raise TypeError(
        f"expected a character or an integer code, got {type(c).__name__}"
    )


def _like(original: Char, code: int) -> Char:
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: Char) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return _LOWER_A <= code <= _LOWER_Z or _UPPER_A <= code <= _UPPER_Z


def is_digit(c: Char) -> bool:
    """True for an ASCII decimal digit."""
    return _DIGIT_0 <= _code(c) <= _DIGIT_9


def is_alnum(c: Char) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: Char) -> bool:
    """True for a code in the range 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: Char) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def to_upper(c: Char) -> Char:
    """Map an ASCII lower-case letter to upper case; leave anything else."""
    code = _code(c)
    if _LOWER_A <= code <= _LOWER_Z:
        return _like(c, code - _CASE_OFFSET)
    return c


def to_lower(c: Char) -> Char:
    """Map an ASCII upper-case letter to lower case; leave anything else."""
    code = _code(c)
    if _UPPER_A <= code <= _UPPER_Z:
        return _like(c, code + _CASE_OFFSET)
    return c