"""
Normalize byte values and project them to integers or text.

Every projection first funnels the value through the same two steps:

1. `to_big_endian_view`: reverse the digits of a little endian value.
2. `to_base10`:          replace digit strings by raw byte values.

`to_integer` then adds the byte values together. This is a plain sum, not
positional decoding: `b0 00 00 00` (little endian) and `00 00 00 b0` both
give 176, and so does `58 58`.
"""

from __future__ import annotations

import logging

from .parser import RawInput
from .types import ByteValue, DigitParseError, Endian, flags_for, render_source

logger = logging.getLogger(__name__)

DIGIT_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"
"""Digit characters in order of value; a base uses the first `base` of them."""

BYTE_MAX = 0xFF


def to_big_endian_view(value: ByteValue) -> ByteValue:
    """
    Return `value` with its most significant digit first.

    Big endian values are returned unchanged. Little endian values are
    copied with their digits reversed and tagged as big endian.
    """
    if value.endian is Endian.BIG:
        return value

    digits = value.digits[::-1]
    return value.copy(
        endian=Endian.BIG,
        digits=digits,
        format_flags=flags_for(value.base, Endian.BIG),
        source_text=render_source(digits, value.base),
    )


def to_base10(value: ByteValue) -> ByteValue:
    """
    Return `value` with every digit-token replaced by its byte value.

    Base 10 values are returned unchanged.

    Raises:
        DigitParseError: If a token contains a character that is not a digit
            of the value's base, or does not fit in one byte.
    """
    if value.base == 10:
        return value

    digits = tuple(_parse_digit(str(token), value.base) for token in value.digits)
    logger.debug("Normalized %d tokens from base %d to base 10", len(digits), value.base)
    return value.copy(
        digits=digits,
        base=10,
        format_flags=flags_for(10, value.endian),
        source_text=render_source(digits, 10),
    )


def to_integer(value: ByteValue) -> int:
    """
    Sum the byte values of `value` after normalizing it.

    Each byte contributes its own magnitude regardless of position.

    Raises:
        DigitParseError: If a digit-token is invalid in the value's base.
    """
    match (value.endian, value.base == 10):
        case (Endian.LITTLE, _):
            return to_integer(to_big_endian_view(value))
        case (Endian.BIG, False):
            return to_integer(to_base10(value))
        case _:
            return sum(int(byte) for byte in value.digits)


def to_text(value: ByteValue | RawInput) -> str:
    """
    Interpret the byte values of `value` as characters, one per byte.

    Raw bytes are decoded as latin-1 and strings are returned as-is.

    Raises:
        DigitParseError: If a digit-token is invalid in the value's base.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("latin-1")

    match (value.endian, value.base == 10):
        case (Endian.LITTLE, _):
            return to_text(to_big_endian_view(value))
        case (Endian.BIG, False):
            return to_text(to_base10(value))
        case _:
            return "".join(chr(int(byte)) for byte in value.digits)


def _parse_digit(token: str, base: int) -> int:
    """Parse one digit-token in `base` into a byte value."""
    alphabet = DIGIT_ALPHABET[:base]
    result = 0
    for ch in token.lower():
        digit = alphabet.find(ch)
        if digit == -1:
            raise DigitParseError(token, base, detail=f"{ch!r} is not a base {base} digit")
        result = result * base + digit

    if result > BYTE_MAX:
        raise DigitParseError(token, base, detail=f"value {result} does not fit in one byte")
    return result
