"""Value types, flags and exceptions shared by the bite modules."""

from .base import StrictBaseModel
from .byte_value import (
    LITERAL_CLOSE,
    LITERAL_OPEN,
    ByteValue,
    Digit,
    flags_for,
    render_source,
)
from .exceptions import (
    BiteError,
    BiteFormatError,
    BiteValueError,
    DigitParseError,
    InvalidInputError,
    LiteralSyntaxError,
    NegativeArgumentError,
    UnsupportedFormatError,
)
from .flags import Endian, Flag, FlagsLike, parse_flags, render_flags

__all__ = [
    # Core types
    "ByteValue",
    "Digit",
    "Endian",
    "Flag",
    "FlagsLike",
    "StrictBaseModel",
    # Display
    "LITERAL_OPEN",
    "LITERAL_CLOSE",
    "flags_for",
    "parse_flags",
    "render_flags",
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
