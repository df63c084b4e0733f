"""
Pydantic models for conversion values — strict typing at every boundary.

Nothing here is persisted. These are the transient values the converters
pass around: the parsed numeral, its Indian place-value groups, the
classified word tokens, and the tagged result handed back to callers.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from .exceptions import ConversionError, InvalidNumberError, NumberTooLargeError

# ─── Place-Value Constants ──────────────────────────────────────────

U64_MAX = 2**64 - 1

# Ascending: hundreds, thousand, lakh, crore, arab, kharab
PLACE_VALUES: tuple[int, ...] = (
    1,
    1_000,
    1_00_000,
    1_00_00_000,
    1_00_00_00_000,
    1_00_00_00_00_000,
)
GROUP_LABELS: tuple[str, ...] = ("", "Thousand", "Lakh", "Crore", "Arab", "Kharab")

# Largest value whose kharab group still fits in two digits
MAX_MAGNITUDE = 10**13 - 1

# More significant digits than this can never fit in 64 bits
_MAX_DIGITS = len(str(U64_MAX))

_DIGITS = re.compile(r"[0-9]+")


# ─── Numeric Value ──────────────────────────────────────────────────


class NumericValue(BaseModel):
    """An unsigned integer magnitude plus the raw fraction digits after the point."""

    integer: int = Field(ge=0, le=U64_MAX)
    fraction: str = Field(default="", pattern=r"^[0-9]*$")

    @classmethod
    def parse(cls, text: str) -> NumericValue:
        """Parse '1234', '1234.05' or '1234.' into a NumericValue.

        Raises:
            InvalidNumberError: empty or non-digit integer part, a non-digit
                fraction, more than one '.', or an integer beyond 64 bits.
        """
        integer_text, dot, fraction = text.partition(".")
        if "." in fraction:
            raise InvalidNumberError({"input": text, "reason": "multiple decimal points"})
        if not _DIGITS.fullmatch(integer_text):
            raise InvalidNumberError({"input": text, "reason": "integer part is not a number"})
        if fraction and not _DIGITS.fullmatch(fraction):
            raise InvalidNumberError({"input": text, "reason": "fraction part is not a number"})

        significant = integer_text.lstrip("0") or "0"
        if len(significant) > _MAX_DIGITS:
            raise InvalidNumberError({"input": text, "reason": "exceeds 64-bit range"})

        integer = int(significant)
        if integer > U64_MAX:
            raise InvalidNumberError({"input": text, "reason": "exceeds 64-bit range"})
        return cls(integer=integer, fraction=fraction)

    @property
    def has_fraction(self) -> bool:
        return bool(self.fraction)

    def numeral(self) -> str:
        """Ungrouped numeral string, e.g. '1234567.05'."""
        if self.fraction:
            return f"{self.integer}.{self.fraction}"
        return str(self.integer)


# ─── Magnitude Groups ───────────────────────────────────────────────


class MagnitudeGroups(BaseModel):
    """An integer split into the six Indian place-value groups."""

    hundreds: int = Field(ge=0, le=999)
    thousand: int = Field(ge=0, le=99)
    lakh: int = Field(ge=0, le=99)
    crore: int = Field(ge=0, le=99)
    arab: int = Field(ge=0, le=99)
    kharab: int = Field(ge=0, le=99)

    @classmethod
    def from_int(cls, n: int) -> MagnitudeGroups:
        """Decompose n; values above MAX_MAGNITUDE are rejected, not wrapped."""
        if n > MAX_MAGNITUDE:
            raise NumberTooLargeError({"value": str(n), "max": str(MAX_MAGNITUDE)})
        _, thousand, lakh, crore, arab, kharab = PLACE_VALUES
        return cls(
            hundreds=n % 1000,
            thousand=(n // thousand) % 100,
            lakh=(n // lakh) % 100,
            crore=(n // crore) % 100,
            arab=(n // arab) % 100,
            kharab=(n // kharab) % 100,
        )

    def as_list(self) -> list[int]:
        """Group values in ascending place order, aligned with GROUP_LABELS."""
        return [self.hundreds, self.thousand, self.lakh, self.crore, self.arab, self.kharab]

    def value(self) -> int:
        return sum(g * p for g, p in zip(self.as_list(), PLACE_VALUES))


# ─── Word Tokens ────────────────────────────────────────────────────


class TokenKind(str, Enum):
    """Kind of a recognised number word."""

    DIGIT = "DIGIT"  # zero..nineteen, twenty..ninety
    MULTIPLIER = "MULTIPLIER"  # hundred..kharab
    POINT = "POINT"  # the decimal separator word


class WordToken(BaseModel):
    """A single classified word from the input text."""

    text: str
    kind: TokenKind
    value: int = 0


# ─── Tagged Conversion Result ───────────────────────────────────────


class ErrorKind(str, Enum):
    """Machine-readable failure codes, one per ConversionError subclass."""

    INVALID_NUMBER = "INVALID_NUMBER"
    INVALID_WORD = "INVALID_WORD"
    INVALID_DECIMAL_WORD = "INVALID_DECIMAL_WORD"
    NUMBER_TOO_LARGE = "NUMBER_TOO_LARGE"


class ConversionResult(BaseModel):
    """Either a converted display string or a structured failure."""

    ok: bool
    value: Optional[str] = None
    error: Optional[ErrorKind] = None
    message: Optional[str] = None
    details: dict = Field(default_factory=dict)

    @classmethod
    def success(cls, value: str) -> ConversionResult:
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, exc: ConversionError) -> ConversionResult:
        return cls(
            ok=False,
            error=ErrorKind(exc.code),
            message=exc.message,
            details=exc.details,
        )

    def display(self) -> str:
        """The legacy single-string form: the value on success, the message otherwise."""
        if self.ok:
            return self.value or ""
        return self.message or ""
