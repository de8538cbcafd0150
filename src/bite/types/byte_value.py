"""
The structured byte value and its literal display form.

A `ByteValue` records how a byte sequence was written down:

- `digits`: the digit-tokens, in the order they were parsed
- `base`:   the radix the tokens are written in (10 means raw bytes)
- `endian`: whether the first token is the most or least significant one

Display contract
----------------

Every value renders as `~b(<source_text>)<flags>`. Parsing the rendered
form again with the same flags gives a value with the same digits, base and
endianness. `render_source` produces a `source_text` satisfying this for any
digit sequence in base 10 or 16.
"""

from __future__ import annotations

from typing import Sequence

from pydantic import Field, model_validator

from .base import StrictBaseModel
from .flags import Endian, Flag, render_flags
from .text import is_plain_text

LITERAL_OPEN = "~b("
"""Marker that opens a literal."""

LITERAL_CLOSE = ")"
"""Marker that closes the source part of a literal."""

Digit = int | str
"""A digit-token: a raw byte value in base 10, a digit string otherwise."""

MIN_BASE = 2
MAX_BASE = 36
"""Bases are limited to the `0-9a-z` digit alphabet."""


class ByteValue(StrictBaseModel):
    """An immutable, parsed byte sequence with its base and endianness."""

    endian: Endian = Endian.BIG
    """Interpretation order of `digits`; never changes their storage order."""

    digits: tuple[Digit, ...] = ()
    """Digit-tokens in parse order."""

    base: int = Field(default=10, ge=MIN_BASE, le=MAX_BASE)
    """Radix of the digit-tokens."""

    format_flags: frozenset[Flag] = frozenset()
    """Flags the value was parsed with, kept for display."""

    source_text: str = ""
    """Textual form the value was parsed from, kept for display."""

    @model_validator(mode="after")
    def _validate_digit_kinds(self) -> ByteValue:
        """Base 10 holds raw byte values; other bases hold non-empty digit strings."""
        for index, digit in enumerate(self.digits):
            if self.base == 10:
                if not isinstance(digit, int) or not 0 <= digit <= 0xFF:
                    raise ValueError(
                        f"digit {index} must be a byte value in base 10, got {digit!r}"
                    )
            elif not isinstance(digit, str) or not digit:
                raise ValueError(
                    f"digit {index} must be a non-empty digit string in base "
                    f"{self.base}, got {digit!r}"
                )
        return self

    @property
    def is_little_endian(self) -> bool:
        """Whether the first digit-token is the least significant one."""
        return self.endian is Endian.LITTLE

    def to_literal(self) -> str:
        """Render the value as `~b(<source_text>)<flags>`."""
        return f"{LITERAL_OPEN}{self.source_text}{LITERAL_CLOSE}{render_flags(self.format_flags)}"

    def __len__(self) -> int:
        """Return the number of digit-tokens."""
        return len(self.digits)

    def __repr__(self) -> str:
        """Return the literal form of the value."""
        return self.to_literal()


def render_source(digits: Sequence[Digit], base: int) -> str:
    """
    Synthesize a source text that parses back to exactly `digits`.

    - Base 10: the bytes as latin-1 text, one character per byte.
    - Other bases: tokens separated by single spaces. A lone token is
      written as-is when it reads back as plain text, and is otherwise
      followed by a space so it is still split on whitespace.
    """
    if base == 10:
        return bytes(int(digit) for digit in digits).decode("latin-1")

    tokens = [str(digit) for digit in digits]
    if len(tokens) == 1:
        (token,) = tokens
        if len(token) <= 2 and is_plain_text(token):
            return token
        return f"{token} "
    return " ".join(tokens)


def flags_for(base: int, endian: Endian) -> frozenset[Flag]:
    """Return the flags that reproduce `base` and `endian` when parsing."""
    flags: set[Flag] = set()
    if base == 16:
        flags.add(Flag.HEX)
    if endian is Endian.LITTLE:
        flags.add(Flag.LITTLE_ENDIAN)
    return frozenset(flags)
