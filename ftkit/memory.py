"""Byte-buffer filling, searching, comparing and copying."""

from typing import Optional, Union

ReadableBuffer = Union[bytes, bytearray, memoryview]
WritableBuffer = Union[bytearray, memoryview]


def _check_count(n: int, *buffers: ReadableBuffer) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(
                f"byte count {n} exceeds buffer of {len(buf)} bytes"
            )


def _check_span(buf: ReadableBuffer, offset: int, n: int) -> None:
    if offset < 0:
        raise ValueError(f"offset must not be negative, got {offset}")
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if offset + n > len(buf):
        raise ValueError(
            f"span of {n} bytes at offset {offset} exceeds buffer "
            f"of {len(buf)} bytes"
        )


def memset(buf: WritableBuffer, value: int, n: int) -> WritableBuffer:
    """Fill the first *n* bytes of *buf* with the low byte of *value*."""
    _check_count(n, buf)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: WritableBuffer, n: int) -> None:
    """Zero the first *n* bytes of *buf*."""
    memset(buf, 0, n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zero-filled buffer of *nmemb* elements of *size* bytes."""
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    return bytearray(nmemb * size)


def memchr(buf: ReadableBuffer, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to the low byte of *value* in the
    first *n* bytes of *buf*, or None."""
    _check_count(n, buf)
    index = bytes(memoryview(buf)[:n]).find(value & 0xFF)
    return None if index == -1 else index


def memcmp(a: ReadableBuffer, b: ReadableBuffer, n: int) -> int:
    """Compare the first *n* bytes; return the difference of the first
    unequal pair, or 0."""
    _check_count(n, a, b)
    for x, y in zip(bytes(memoryview(a)[:n]), bytes(memoryview(b)[:n])):
        if x != y:
            return x - y
    return 0


def memcpy(
    dest: Optional[WritableBuffer], src: Optional[ReadableBuffer], n: int
) -> Optional[WritableBuffer]:
    """Copy the first *n* bytes of *src* into *dest*."""
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise TypeError("both buffers are required")
    _check_count(n, dest, src)
    dest[:n] = bytes(memoryview(src)[:n])
    return dest


def memmove(
    dest: Optional[WritableBuffer],
    src: Optional[ReadableBuffer],
    n: int,
    dest_offset: int = 0,
    src_offset: int = 0,
) -> Optional[WritableBuffer]:
    """Copy *n* bytes from *src* at *src_offset* into *dest* at
    *dest_offset*; the regions may overlap."""
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise TypeError("both buffers are required")
    _check_span(dest, dest_offset, n)
    _check_span(src, src_offset, n)
    chunk = bytes(memoryview(src)[src_offset:src_offset + n])
    dest[dest_offset:dest_offset + n] = chunk
    return dest