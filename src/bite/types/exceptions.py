"""Exception hierarchy for byte parsing and conversion."""

from __future__ import annotations


class BiteError(Exception):
    """
    Base exception for all bite errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class BiteFormatError(BiteError):
    """Base class for errors in how an input is described (flags, literal syntax)."""


class UnsupportedFormatError(BiteFormatError):
    """
    Raised when a format flag is not one of the supported flags.

    Attributes:
        flag: The offending flag, as given by the caller.
    """

    def __init__(self, flag: object) -> None:
        self.flag = flag
        super().__init__(f"Unsupported format flag: {flag!r} (supported: 'h', 'l')")


class LiteralSyntaxError(BiteFormatError):
    """
    Raised when a string is not a well-formed `~b(...)` literal.

    Attributes:
        literal: The rejected literal (may be truncated for display).
        detail: Description of what is wrong.
    """

    def __init__(self, literal: str, detail: str) -> None:
        self.literal = literal
        self.detail = detail

        literal_repr = repr(literal)
        if len(literal_repr) > 50:
            literal_repr = literal_repr[:47] + "..."

        super().__init__(f"Invalid literal {literal_repr}: {detail}")


class BiteValueError(BiteError):
    """
    Base class for value-related errors.

    Raised when a value is invalid for an operation, even if its type is correct.
    """


class DigitParseError(BiteValueError):
    """
    Raised when a digit-token is not one byte written in its declared base.

    Attributes:
        token: The digit-token that failed to parse.
        base: The radix the token was read in.
        detail: Optional description of the failure.
    """

    def __init__(self, token: str, base: int, *, detail: str | None = None) -> None:
        self.token = token
        self.base = base
        self.detail = detail

        msg = f"Cannot parse digit-token {token!r} in base {base}"
        if detail:
            msg = f"{msg}: {detail}"

        super().__init__(msg)


class NegativeArgumentError(BiteValueError):
    """
    Raised when an operation receives a negative count or integer.

    Attributes:
        operation: Name of the operation that rejected the value.
        value: The negative value.
    """

    def __init__(self, operation: str, value: int) -> None:
        self.operation = operation
        self.value = value
        super().__init__(f"{operation} expects a non-negative integer, got {value}")


class InvalidInputError(BiteValueError):
    """
    Raised when input text cannot be mapped to raw bytes.

    Attributes:
        detail: Description of what went wrong.
    """

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Invalid input: {detail}")
