"""Format flags and byte order tags."""

from __future__ import annotations

from enum import Enum
from typing import Iterable

from .exceptions import UnsupportedFormatError


class Flag(Enum):
    """
    Format flags accepted by the parser.

    The value of each member is the single character used for it in
    the literal form (`~b(...)hl`).
    """

    HEX = "h"
    """Digit-tokens are hexadecimal text rather than raw bytes."""

    LITTLE_ENDIAN = "l"
    """The first digit-token is the least significant one."""


class Endian(Enum):
    """Interpretation order of digit-tokens."""

    BIG = "big"
    LITTLE = "little"


FLAG_ORDER: tuple[Flag, ...] = (Flag.HEX, Flag.LITTLE_ENDIAN)
"""Order in which flags are rendered in the literal form."""


FlagsLike = str | Iterable[Flag | str]
"""Anything `parse_flags` accepts: a string of flag characters or an iterable of flags."""


def parse_flags(flags: FlagsLike = ()) -> frozenset[Flag]:
    """
    Normalize a flag description into a set of `Flag` members.

    Accepts:
      - a string of flag characters, e.g. "hl"
      - an iterable mixing `Flag` members and flag characters

    Raises:
        UnsupportedFormatError: If any flag is not a supported flag.
    """
    result: set[Flag] = set()
    for flag in flags:
        if isinstance(flag, Flag):
            result.add(flag)
            continue
        try:
            result.add(Flag(flag))
        except ValueError:
            raise UnsupportedFormatError(flag) from None
    return frozenset(result)


def render_flags(flags: Iterable[Flag]) -> str:
    """Render flags as their characters, hex before little endian."""
    present = set(flags)
    return "".join(flag.value for flag in FLAG_ORDER if flag in present)
