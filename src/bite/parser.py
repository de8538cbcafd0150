"""
Parse textual or raw byte input into a `ByteValue`.

Without the hex flag, input is raw binary: every byte becomes one digit-token.

With the hex flag, the shape of the input decides how it is split into
hexadecimal digit-tokens. Shapes are tried in priority order:

1. Whitespace-delimited:  "6d 65 73"      -> ["6d", "65", "73"]
2. Backslash-escaped:     "\\6d\\65\\73"  -> ["6d", "65", "73"]
3. Plain printable text:  "6d6573"        -> ["6d", "65", "73"]
4. Anything else is binary; each byte is written as two hex digits and
   the source text is synthesized as backslash-delimited groups so that
   it parses back under rule 2.

The little endian flag only tags the value; it never reorders digits.
"""

from __future__ import annotations

import logging

from .types import ByteValue, Endian, Flag, FlagsLike, InvalidInputError, parse_flags
from .types.text import ESCAPE, WHITESPACE, has_escape, has_whitespace, is_plain_text

logger = logging.getLogger(__name__)

RawInput = bytes | bytearray | str
"""Input accepted by the parser and the slicer."""

HEX_GROUP_WIDTH = 2
"""Number of hex characters that write one byte."""

_WHITESPACE_TO_SPACE = str.maketrans({ch: " " for ch in WHITESPACE})


def to_raw_bytes(text: RawInput) -> bytes:
    """
    Map input to raw bytes, one byte per character for strings.

    Raises:
        InvalidInputError: If a character does not fit in a single byte.
    """
    if isinstance(text, (bytes, bytearray)):
        return bytes(text)
    try:
        return text.encode("latin-1")
    except UnicodeEncodeError as e:
        raise InvalidInputError(
            f"character {text[e.start]!r} at index {e.start} does not fit in one byte"
        ) from None


def consume(text: RawInput, flags: FlagsLike = ()) -> ByteValue:
    """
    Parse `text` into a `ByteValue`.

    Args:
        text: Raw bytes or text. Strings map one character to one byte.
        flags: Flag characters ("h", "l") or `Flag` members.

    Returns:
        A new value tagged with the base, endianness and flags used.

    Raises:
        UnsupportedFormatError: If a flag is not supported.
        InvalidInputError: If a string character does not fit in one byte.
    """
    flag_set = parse_flags(flags)
    raw = to_raw_bytes(text)

    if Flag.HEX in flag_set:
        digits, source_text = _split_hex(raw)
        base = 16
    else:
        digits, source_text = tuple(raw), raw.decode("latin-1")
        base = 10

    endian = Endian.LITTLE if Flag.LITTLE_ENDIAN in flag_set else Endian.BIG

    return ByteValue(
        endian=endian,
        digits=digits,
        base=base,
        format_flags=flag_set,
        source_text=source_text,
    )


def _split_hex(raw: bytes) -> tuple[tuple[str, ...], str]:
    """Split hex input into digit-tokens and return them with the source text."""
    text = raw.decode("latin-1")

    if has_whitespace(text):
        tokens = _split_on_whitespace(text)
        logger.debug("Whitespace-delimited hex input: %d tokens", len(tokens))
        return tokens, text

    if has_escape(text):
        tokens = tuple(token for token in text.split(ESCAPE) if token)
        logger.debug("Backslash-escaped hex input: %d tokens", len(tokens))
        return tokens, text

    if is_plain_text(text):
        tokens = _split_into_groups(text)
        logger.debug("Plain-text hex input: %d tokens", len(tokens))
        return tokens, text

    tokens = tuple(f"{byte:02x}" for byte in raw)
    logger.debug("Binary hex input: %d bytes, synthesizing escaped source", len(tokens))
    return tokens, ESCAPE.join(tokens)


def _split_on_whitespace(text: str) -> tuple[str, ...]:
    """Split on runs of whitespace, dropping empty tokens."""
    return tuple(token for token in text.translate(_WHITESPACE_TO_SPACE).split(" ") if token)


def _split_into_groups(text: str) -> tuple[str, ...]:
    """Split text into byte-wide hex groups; an odd last character forms its own group."""
    return tuple(text[i : i + HEX_GROUP_WIDTH] for i in range(0, len(text), HEX_GROUP_WIDTH))
