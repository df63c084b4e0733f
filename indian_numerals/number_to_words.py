"""
Convert a decimal numeral to spoken English using Indian place values.

Supported patterns:
    "1234567"    → "Twelve Lakh Thirty Four Thousand Five Hundred Sixty Seven (12,34,567)"
    "100.05"     → "One Hundred  Point Zero Five (100.05)"
    "2500000000" → "Two Arab Fifty Crore (2,50,00,00,000)"
    "0"          → " (0)"

Groups are rendered top-down (Kharab, Arab, Crore, Lakh, Thousand, hundreds)
and zero groups are skipped entirely, so "100000" reads "One Lakh".
"""

from __future__ import annotations

from .grouping import format_indian
from .models import GROUP_LABELS, MagnitudeGroups, NumericValue

# ─── Word Lookup Tables ──────────────────────────────────────────────

# Index = value; 0 renders as nothing inside a group
_UNITS: tuple[str, ...] = (
    "",
    "One",
    "Two",
    "Three",
    "Four",
    "Five",
    "Six",
    "Seven",
    "Eight",
    "Nine",
    "Ten",
    "Eleven",
    "Twelve",
    "Thirteen",
    "Fourteen",
    "Fifteen",
    "Sixteen",
    "Seventeen",
    "Eighteen",
    "Nineteen",
)

# Index = tens digit
_TENS: tuple[str, ...] = (
    "",
    "",
    "Twenty",
    "Thirty",
    "Forty",
    "Fifty",
    "Sixty",
    "Seventy",
    "Eighty",
    "Ninety",
)

# Spoken names for fraction digits; unlike _UNITS, zero is said aloud
_DIGIT_NAMES: tuple[str, ...] = ("Zero",) + _UNITS[1:10]


# ─── Group Renderers ─────────────────────────────────────────────────


def _two_digits(value: int) -> str:
    if value < 20:
        return _UNITS[value]
    ones = value % 10
    if ones == 0:
        return _TENS[value // 10]
    return f"{_TENS[value // 10]} {_UNITS[ones]}"


def _three_digits(value: int) -> str:
    if value < 100:
        return _two_digits(value)
    hundreds = f"{_UNITS[value // 100]} Hundred"
    remainder = value % 100
    if remainder == 0:
        return hundreds
    return f"{hundreds} {_two_digits(remainder)}"


def integer_words(value: int) -> str:
    """Spell out an integer up to 10^13 - 1; zero yields an empty string.

    Raises:
        NumberTooLargeError: if value has more than six Indian groups.
    """
    groups = MagnitudeGroups.from_int(value).as_list()

    words = ""
    for index in reversed(range(len(groups))):
        group = groups[index]
        if group == 0:
            continue
        rendered = _three_digits(group) if index == 0 else _two_digits(group)
        words += f"{rendered} {GROUP_LABELS[index]} "
    return words


def fraction_words(digits: str) -> str:
    """'05' → 'Point Zero Five'."""
    return " ".join(["Point"] + [_DIGIT_NAMES[int(d)] for d in digits])


# ─── Main Converter ─────────────────────────────────────────────────


def number_to_words(text: str) -> str:
    """Convert a numeral string to "{words} ({grouped numeral})".

    Args:
        text: e.g. "1234567" or "100.05"

    Returns:
        "Twelve Lakh Thirty Four Thousand Five Hundred Sixty Seven (12,34,567)"

    Raises:
        InvalidNumberError: malformed numeral (see NumericValue.parse).
        NumberTooLargeError: integer part of 10^13 or more.
    """
    number = NumericValue.parse(text)

    words = integer_words(number.integer)
    if number.has_fraction:
        words += fraction_words(number.fraction)

    # An all-zero integer with no fraction leaves the words empty; the
    # separating space before the parenthesis is kept regardless.
    return f"{words.strip()} ({format_indian(number.numeral())})"
