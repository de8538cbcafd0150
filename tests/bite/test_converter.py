"""Tests for endianness and base normalization and the integer/text projections."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from bite.converter import to_base10, to_big_endian_view, to_integer, to_text
from bite.literal import parse_literal
from bite.parser import consume
from bite.types import ByteValue, DigitParseError, Endian, Flag


class TestToBigEndianView:
    """Tests for the endianness normalization step."""

    def test_big_endian_unchanged(self) -> None:
        """A big endian value is returned as-is."""
        v = consume("01 02", "h")
        assert to_big_endian_view(v) is v

    def test_little_endian_reversed(self) -> None:
        """A little endian value is reversed and retagged as big endian."""
        v = consume("01 02 03", "hl")
        w = to_big_endian_view(v)
        assert w.digits == ("03", "02", "01")
        assert w.endian is Endian.BIG
        assert w.base == 16

    def test_original_not_mutated(self) -> None:
        """Storage order of the input value is untouched."""
        v = consume("01 02 03", "hl")
        to_big_endian_view(v)
        assert v.digits == ("01", "02", "03")
        assert v.endian is Endian.LITTLE

    def test_view_keeps_display_contract(self) -> None:
        """The reversed value renders as a literal that parses back to it."""
        w = to_big_endian_view(consume("01 02 03", "hl"))
        assert w.format_flags == frozenset({Flag.HEX})
        again = parse_literal(w.to_literal())
        assert (again.digits, again.base, again.endian) == (w.digits, w.base, w.endian)


class TestToBase10:
    """Tests for the base normalization step."""

    def test_base10_unchanged(self) -> None:
        """A base 10 value is returned as-is."""
        v = consume("ab")
        assert to_base10(v) is v

    def test_hex_tokens_become_bytes(self) -> None:
        """Hex digit strings become raw byte values."""
        v = to_base10(consume("6d FF 0 00", "h"))
        assert v.digits == (0x6D, 0xFF, 0, 0)
        assert v.base == 10
        assert v.format_flags == frozenset()

    def test_endian_preserved(self) -> None:
        """Base normalization does not touch endianness or order."""
        v = to_base10(consume("01 02", "hl"))
        assert v.digits == (1, 2)
        assert v.endian is Endian.LITTLE
        assert v.format_flags == frozenset({Flag.LITTLE_ENDIAN})

    def test_other_bases(self) -> None:
        """Any base up to 36 uses the 0-9a-z alphabet."""
        v = ByteValue(digits=("101", "11111111"), base=2)
        assert to_base10(v).digits == (5, 255)
        assert to_base10(ByteValue(digits=("73",), base=36)).digits == (255,)

    @pytest.mark.parametrize("token", ["zz", "0x", "+1", "-1", "1_0", " 1"])
    def test_invalid_digit(self, token: str) -> None:
        """Characters outside the base alphabet fail."""
        v = ByteValue(digits=(token,), base=16)
        with pytest.raises(DigitParseError) as exc_info:
            to_base10(v)
        assert exc_info.value.token == token
        assert exc_info.value.base == 16

    def test_value_above_one_byte(self) -> None:
        """A token worth more than 255 is not one byte."""
        with pytest.raises(DigitParseError, match="does not fit in one byte"):
            to_base10(consume("\\255", "h"))

    def test_leading_zero_escapes(self) -> None:
        """Three-digit escapes with a leading zero fit in a byte."""
        assert to_base10(consume("\\001\\099", "h")).digits == (1, 0x99)


class TestToInteger:
    """Tests for the integer projection."""

    def test_little_endian_hex(self) -> None:
        """b0 00 00 00 in little endian sums to 0xb0."""
        assert to_integer(consume("b0 00 00 00", "hl")) == 176

    def test_sum_not_positional(self) -> None:
        """Bytes are summed, not decoded by place value."""
        assert to_integer(consume("01 00", "h")) == 1
        assert to_integer(consume("58 58", "h")) == 176
        assert to_integer(consume("00 00 00 b0", "h")) == 176

    def test_raw_input(self) -> None:
        """Raw bytes sum their values."""
        assert to_integer(consume(b"\x01\x02\x03")) == 6

    def test_empty(self) -> None:
        """An empty value sums to zero."""
        assert to_integer(consume("", "h")) == 0

    def test_invalid_digit_propagates(self) -> None:
        """Digit errors surface from the projection."""
        with pytest.raises(DigitParseError):
            to_integer(consume("gg", "h"))


class TestToText:
    """Tests for the text projection."""

    def test_hex_big_endian(self) -> None:
        """Hex bytes read as characters in order."""
        assert to_text(consume("6d 65 73 73 61 67 65", "h")) == "message"

    def test_hex_little_endian(self) -> None:
        """Little endian values read most significant byte first."""
        assert to_text(consume("6d 65 73 73 61 67 65", "hl")) == "egassem"

    def test_raw_little_endian(self) -> None:
        """Raw little endian values are reversed too."""
        assert to_text(consume("abc", "l")) == "cba"

    def test_bytes_pass_through(self) -> None:
        """Raw bytes decode as latin-1."""
        assert to_text(b"hi\xe9") == "hi\xe9"

    def test_str_pass_through(self) -> None:
        """Strings are returned unchanged."""
        assert to_text("already text") == "already text"


@given(st.text(alphabet=st.characters(min_codepoint=0x20, max_codepoint=0x7E)))
def test_printable_text_round_trip(s: str) -> None:
    """Raw printable text survives parse and text projection."""
    assert to_text(consume(s)) == s


@given(st.binary(), st.sampled_from(["", "l", "h", "hl"]))
def test_big_endian_view_idempotent(data: bytes, flags: str) -> None:
    """Normalizing twice gives the same value as normalizing once."""
    v = consume(data, flags)
    once = to_big_endian_view(v)
    assert to_big_endian_view(once) == once


@given(st.lists(st.integers(min_value=0, max_value=255)), st.sampled_from(["h", "hl"]))
def test_base10_idempotent(values: list[int], flags: str) -> None:
    """Normalizing the base twice gives the same value as once."""
    v = consume(" ".join(f"{b:02x}" for b in values) + " ", flags)
    once = to_base10(v)
    assert once.digits == tuple(values)
    assert to_base10(once) == once


@given(st.binary(min_size=1))
def test_integer_is_sum_of_bytes(data: bytes) -> None:
    """The projection equals the plain byte sum for either endianness."""
    assert to_integer(consume(data.hex(" "), "h")) == sum(data)
    assert to_integer(consume(data.hex(" "), "hl")) == sum(data)
