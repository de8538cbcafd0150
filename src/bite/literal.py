"""
Runtime front end for `~b(...)` literals.

`sigil_b` builds a value from a source text and modifier characters, the way
an inline `~b(<source>)<modifiers>` literal would. `parse_literal` reads the
rendered form of a value back, so that `parse_literal(v.to_literal())` gives
a value with the same digits, base and endianness as `v`.
"""

from __future__ import annotations

from .parser import RawInput, consume
from .types import LITERAL_CLOSE, LITERAL_OPEN, ByteValue, LiteralSyntaxError


def sigil_b(text: RawInput, modifiers: str = "") -> ByteValue:
    """Parse `text` with the flag characters in `modifiers`."""
    return consume(text, modifiers)


def parse_literal(literal: str) -> ByteValue:
    """
    Parse a rendered `~b(<source>)<flags>` literal.

    The source runs up to the last closing parenthesis, so it may itself
    contain parentheses.

    Raises:
        LiteralSyntaxError: If the literal markers are missing.
        UnsupportedFormatError: If a trailing flag character is not supported.
    """
    if not literal.startswith(LITERAL_OPEN):
        raise LiteralSyntaxError(literal, f"expected it to start with {LITERAL_OPEN!r}")

    body = literal[len(LITERAL_OPEN) :]
    source, close, modifiers = body.rpartition(LITERAL_CLOSE)
    if not close:
        raise LiteralSyntaxError(literal, f"missing closing {LITERAL_CLOSE!r}")

    return sigil_b(source, modifiers)
