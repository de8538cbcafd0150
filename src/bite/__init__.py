"""
Byte-wise convenience library.

Parse textual byte sequences into immutable values and convert them back::

    from bite import consume, to_integer, to_text

    to_text(consume("6d 65 73 73 61 67 65", "h"))   # "message"
    to_text(consume("6d 65 73 73 61 67 65", "hl"))  # "egassem"
    to_integer(consume("b0 00 00 00", "hl"))        # 176
"""

from .converter import to_base10, to_big_endian_view, to_integer, to_text
from .literal import parse_literal, sigil_b
from .parser import consume
from .slicer import drop, from_integer, pad_length, reverse, take
from .types import (
    BiteError,
    BiteFormatError,
    BiteValueError,
    ByteValue,
    DigitParseError,
    Endian,
    Flag,
    InvalidInputError,
    LiteralSyntaxError,
    NegativeArgumentError,
    UnsupportedFormatError,
    parse_flags,
    render_source,
)

__all__ = [
    # Parser
    "consume",
    # Converter
    "to_big_endian_view",
    "to_base10",
    "to_integer",
    "to_text",
    # Slicer
    "drop",
    "take",
    "from_integer",
    "pad_length",
    "reverse",
    # Literals
    "parse_literal",
    "sigil_b",
    # Types
    "ByteValue",
    "Endian",
    "Flag",
    "parse_flags",
    "render_source",
    # Exceptions
    "BiteError",
    "BiteFormatError",
    "BiteValueError",
    "DigitParseError",
    "InvalidInputError",
    "LiteralSyntaxError",
    "NegativeArgumentError",
    "UnsupportedFormatError",
]
