"""Character-class scans used to recognize the shape of textual byte input."""

from __future__ import annotations

WHITESPACE = frozenset(" \t\n\r\f\v")
"""Characters that separate whitespace-delimited digit-tokens."""

ESCAPE = "\\"
"""Delimiter of backslash-escaped digit groups."""

PRINTABLE_MIN = 0x20
PRINTABLE_MAX = 0x7E

HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def has_whitespace(text: str) -> bool:
    """Return True if any character of `text` is whitespace."""
    return any(ch in WHITESPACE for ch in text)


def has_escape(text: str) -> bool:
    """
    Return True if `text` contains a backslash-escaped digit group.

    An escape is a backslash followed by at least two hex digits. This covers
    both the three-decimal-digit form (`\\101`) and the two-hex-digit groups
    the parser synthesizes for binary input (`\\ff`).
    """
    start = text.find(ESCAPE)
    while start != -1:
        following = text[start + 1 : start + 3]
        if len(following) == 2 and all(ch in HEX_DIGITS for ch in following):
            return True
        start = text.find(ESCAPE, start + 1)
    return False


def is_printable(text: str) -> bool:
    """Return True if every character of `text` is printable ASCII."""
    return all(PRINTABLE_MIN <= ord(ch) <= PRINTABLE_MAX for ch in text)


def is_plain_text(text: str) -> bool:
    """Return True if `text` is printable and carries no whitespace or escape markers."""
    return is_printable(text) and not has_whitespace(text) and not has_escape(text)
