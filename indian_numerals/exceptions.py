"""
Custom exception hierarchy for numeral conversion.

Each exception type maps to one kind of conversion failure. The message of
every exception is the exact human-readable string the string entry points
return, so callers that pattern-match on text keep working.
"""

from __future__ import annotations


class ConversionError(Exception):
    """Base exception for all conversion failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InvalidNumberError(ConversionError):
    """The numeral is empty, malformed, or outside the unsigned 64-bit range."""

    def __init__(self, details: dict | None = None):
        super().__init__("INVALID_NUMBER", "Invalid number", details)


class InvalidWordError(ConversionError):
    """A word outside the digit/multiplier vocabulary appeared in the integer part."""

    def __init__(self, token: str):
        super().__init__("INVALID_WORD", f"Invalid word: {token}", {"token": token})


class InvalidDecimalWordError(ConversionError):
    """A word outside the digit vocabulary appeared after "point"."""

    def __init__(self, token: str):
        super().__init__(
            "INVALID_DECIMAL_WORD",
            f"Invalid word in decimal part: {token}",
            {"token": token},
        )


class NumberTooLargeError(ConversionError):
    """The value cannot be expressed with the supported place-value groups."""

    def __init__(self, details: dict | None = None):
        super().__init__("NUMBER_TOO_LARGE", "Number too large", details)
