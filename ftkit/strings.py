"""String measuring, searching, copying, slicing and splitting.

The text functions take and return Python ``str`` values. ``strlen`` treats
a NUL character as the end of the string. ``strlcpy`` and ``strlcat`` work
on NUL-terminated byte buffers. ``striteri`` changes a mutable sequence in
place.
"""

from collections.abc import MutableSequence
from itertools import islice, zip_longest
from typing import Any, Callable, List, Optional, Union

ByteSource = Union[bytes, bytearray, memoryview]
CharLike = Union[str, int]

_NUL = "\0"


def _terminated_length(s: Union[str, ByteSource]) -> int:
    """Length of *s* up to its first NUL, or its whole length."""
    if isinstance(s, str):
        end = s.find(_NUL)
    elif isinstance(s, (bytes, bytearray, memoryview)):
        end = bytes(s).find(0)
    else:
        raise TypeError(f"expected a string or bytes, got {type(s).__name__}")
    return len(s) if end == -1 else end


def _c_bytes(src: ByteSource) -> bytes:
    if not isinstance(src, (bytes, bytearray, memoryview)):
        raise TypeError(f"expected bytes, got {type(src).__name__}")
    data = bytes(src)
    return data[:_terminated_length(data)]


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")


def _as_char(c: CharLike) -> str:
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code, got bool")
    if isinstance(c, int):
        return chr(c & 0xFF)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    raise TypeError(
        f"expected a character or an integer code, got {type(c).__name__}"
    )


def _require_str(s: Any, name: str) -> str:
    if not isinstance(s, str):
        raise TypeError(f"{name} must be a string, got {type(s).__name__}")
    return s


def strlen(s: Union[str, ByteSource]) -> int:
    """Number of characters before the first NUL."""
    if s is None:
        raise TypeError("a string is required")
    return _terminated_length(s)


def strlcpy(dst: bytearray, src: ByteSource, size: int) -> int:
    """Copy *src* into *dst*, writing at most *size* bytes including the
    terminating NUL. Return the length of *src*."""
    data = _c_bytes(src)
    _check_size(size)
    if size == 0:
        return len(data)
    count = min(len(data), size - 1)
    if count + 1 > len(dst):
        raise ValueError(
            f"destination of {len(dst)} bytes cannot hold {count + 1} bytes"
        )
    dst[:count] = data[:count]
    dst[count] = 0
    return len(data)


def strlcat(dst: bytearray, src: ByteSource, size: int) -> int:
    """Append *src* to the NUL-terminated string in *dst*, keeping the
    whole within *size* bytes. Return the length it tried to create."""
    data = _c_bytes(src)
    _check_size(size)
    end = bytes(dst[:size]).find(0)
    if end == -1:
        if size > len(dst):
            raise ValueError("destination is not terminated within its buffer")
        return size + len(data)
    count = min(len(data), size - end - 1)
    if end + count + 1 > len(dst):
        raise ValueError(
            f"destination of {len(dst)} bytes cannot hold "
            f"{end + count + 1} bytes"
        )
    dst[end:end + count] = data[:count]
    dst[end + count] = 0
    return end + len(data)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of *c* in *s*, or None.

    Searching for NUL finds the end of the string.
    """
    _require_str(s, "s")
    char = _as_char(c)
    if char == _NUL:
        return len(s)
    index = s.find(char)
    return None if index == -1 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of *c* in *s*, or None.

    Searching for NUL finds the end of the string.
    """
    _require_str(s, "s")
    char = _as_char(c)
    if char == _NUL:
        return len(s)
    index = s.rfind(char)
    return None if index == -1 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most *n* characters; return the code difference at the
    first mismatch or end of either string, or 0."""
    _require_str(s1, "s1")
    _require_str(s2, "s2")
    _check_size(n)
    for a, b in islice(zip_longest(s1, s2, fillvalue=_NUL), n):
        if a != b or a == _NUL or b == _NUL:
            return ord(a) - ord(b)
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of the first *little* lying wholly within the first *length*
    characters of *big*, or None. An empty *little* is found at 0."""
    _require_str(big, "big")
    _require_str(little, "little")
    _check_size(length)
    if not little:
        return 0
    index = big[:length].find(little)
    return None if index == -1 else index


def strdup(s: str) -> str:
    """Return a copy of *s*."""
    return str(_require_str(s, "s"))


def substr(s: Optional[str], start: int, length: int) -> Optional[str]:
    """Up to *length* characters of *s* from *start*; empty when *start*
    is past the end. None gives None."""
    if s is None:
        return None
    _require_str(s, "s")
    if start < 0:
        raise ValueError(f"start must not be negative, got {start}")
    _check_size(length)
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: Optional[str], s2: Optional[str]) -> Optional[str]:
    """Concatenate two strings; None if either is None."""
    if s1 is None or s2 is None:
        return None
    return _require_str(s1, "s1") + _require_str(s2, "s2")


def strtrim(s: Optional[str], charset: Optional[str]) -> Optional[str]:
    """Strip characters in *charset* from both ends of *s*; None if either
    is None."""
    if s is None or charset is None:
        return None
    return _require_str(s, "s").strip(_require_str(charset, "charset"))


def split(s: Optional[str], sep: CharLike) -> Optional[List[str]]:
    """Words of *s* delimited by runs of *sep*; None gives None."""
    if s is None:
        return None
    _require_str(s, "s")
    return [word for word in s.split(_as_char(sep)) if word]


def strmapi(
    s: Optional[str], func: Optional[Callable[[int, str], str]]
) -> Optional[str]:
    """New string of ``func(index, char)`` for each character of *s*;
    None if either argument is None."""
    if s is None or func is None:
        return None
    _require_str(s, "s")
    return "".join(func(index, char) for index, char in enumerate(s))


def striteri(
    buf: Optional[MutableSequence],
    func: Optional[Callable[[int, Any], Any]],
) -> None:
    """Call ``func(index, item)`` on each item of *buf* up to a NUL,
    storing any non-None result back in place."""
    if buf is None or func is None:
        return
    for index, item in enumerate(list(buf)):
        if item == 0 or item == _NUL:
            break
        result = func(index, item)
        if result is not None:
            buf[index] = result