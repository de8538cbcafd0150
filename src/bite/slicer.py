"""
Remove or extract leading and trailing bytes.

Raw input (`bytes` or `str`) is sliced positionally. A `ByteValue` is
sliced by significance: `drop` removes its most significant tokens, which
sit at the front of a big endian value and at the back of a little endian
one.
"""

from __future__ import annotations

import logging
from typing import TypeVar, overload

from .parser import RawInput, consume, to_raw_bytes
from .types import (
    BiteValueError,
    ByteValue,
    Endian,
    FlagsLike,
    NegativeArgumentError,
    render_source,
)

logger = logging.getLogger(__name__)

BYTE_RADIX = 256

Padded = TypeVar("Padded", bytes, str)


@overload
def drop(data: ByteValue, n: int) -> ByteValue: ...


@overload
def drop(data: str, n: int) -> str: ...


@overload
def drop(data: bytes | bytearray, n: int) -> bytes: ...


def drop(data: ByteValue | RawInput, n: int) -> ByteValue | bytes | str:
    """
    Remove `n` leading bytes, or the `n` most significant tokens of a value.

    Dropping more than is available gives an empty result.

    Raises:
        NegativeArgumentError: If `n` is negative.
    """
    _check_count("drop", n)

    if isinstance(data, ByteValue):
        return _drop_most_significant(data, n)
    if isinstance(data, bytearray):
        return bytes(data[n:])
    return data[n:]


def _drop_most_significant(value: ByteValue, n: int) -> ByteValue:
    """Drop from the front when big endian, from the back when little endian."""
    count = min(n, len(value.digits))
    if value.endian is Endian.BIG:
        digits = value.digits[count:]
    else:
        digits = value.digits[: len(value.digits) - count]

    logger.debug("Dropped %d of %d %s endian tokens", count, len(value), value.endian.value)
    return value.copy(digits=digits, source_text=render_source(digits, value.base))


def take(text: RawInput, n: int, flags: FlagsLike = ()) -> ByteValue:
    """
    Parse the first `n` raw bytes of `text` with `flags`.

    Bytes are counted on the raw input, before any hex interpretation and
    regardless of endianness. Shorter input is taken whole.

    Raises:
        NegativeArgumentError: If `n` is negative.
        UnsupportedFormatError: If a flag is not supported.
    """
    _check_count("take", n)
    return consume(to_raw_bytes(text)[:n], flags)


def from_integer(n: int) -> bytes:
    """
    Encode a non-negative integer as minimal big endian bytes.

    Zero encodes as the empty byte string.

    Raises:
        NegativeArgumentError: If `n` is negative.
    """
    _check_count("from_integer", n)

    out = bytearray()
    while n > 0:
        n, byte = divmod(n, BYTE_RADIX)
        out.append(byte)
    out.reverse()
    return bytes(out)


def pad_length(data: Padded, n: int, pad_unit: Padded) -> Padded:
    """
    Left-pad `data` with copies of `pad_unit` until it is at least `n` long.

    Raises:
        NegativeArgumentError: If `n` is negative.
        BiteValueError: If padding is needed and `pad_unit` is empty.
    """
    _check_count("pad_length", n)

    if len(data) >= n:
        return data
    if not pad_unit:
        raise BiteValueError("pad_length needs a non-empty pad_unit")

    while len(data) < n:
        data = pad_unit + data
    return data


@overload
def reverse(data: str) -> str: ...


@overload
def reverse(data: bytes | bytearray) -> bytes: ...


def reverse(data: RawInput) -> bytes | str:
    """Reverse the order of bytes (or characters)."""
    if isinstance(data, bytearray):
        return bytes(data[::-1])
    return data[::-1]


def _check_count(operation: str, n: int) -> None:
    if n < 0:
        raise NegativeArgumentError(operation, n)
