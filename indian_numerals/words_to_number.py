"""
Convert written-out English number words to an Indian-grouped numeral.

Supported patterns:
    "Twelve Lakh Thirty Four Thousand Five Hundred Sixty Seven" → "12,34,567"
    "One Thousand Five"                                         → "1,005"
    "Hundred"                                                   → "100"
    "Seven Point One Two"                                       → "7.12"
    "Twenty-One Crore"                                          → "21,00,00,000"
    "One Kharab"                                                → "1,00,00,00,00,000"

Every multiplier word (hundred included) flushes the running group into the
total, so "two hundred thousand" reads as 200 + 1000, not 200,000.
"""

from __future__ import annotations

from .exceptions import InvalidDecimalWordError, InvalidWordError, NumberTooLargeError
from .grouping import format_indian
from .models import GROUP_LABELS, PLACE_VALUES, U64_MAX, TokenKind, WordToken

# ─── Word Lookup Tables ──────────────────────────────────────────────

_NUMBER_WORDS: dict[str, int] = {
    "zero": 0,
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
    "ten": 10,
    "eleven": 11,
    "twelve": 12,
    "thirteen": 13,
    "fourteen": 14,
    "fifteen": 15,
    "sixteen": 16,
    "seventeen": 17,
    "eighteen": 18,
    "nineteen": 19,
    "twenty": 20,
    "thirty": 30,
    "forty": 40,
    "fifty": 50,
    "sixty": 60,
    "seventy": 70,
    "eighty": 80,
    "ninety": 90,
}

# hundred, then thousand..kharab with the same place values the groups use
_MULTIPLIERS: dict[str, int] = {
    "hundred": 100,
    **{label.lower(): value for label, value in zip(GROUP_LABELS[1:], PLACE_VALUES[1:])},
}

_POINT = "point"


# ─── Tokenizer ───────────────────────────────────────────────────────


def tokenize(text: str) -> list[str]:
    """Lowercase, turn hyphens into spaces, split on whitespace."""
    return text.lower().replace("-", " ").split()


def classify(word: str) -> WordToken:
    """Classify a lowercase word as a digit word, multiplier, or "point".

    Raises:
        InvalidWordError: If the word is not part of the vocabulary.
    """
    if word == _POINT:
        return WordToken(text=word, kind=TokenKind.POINT)
    if word in _NUMBER_WORDS:
        return WordToken(text=word, kind=TokenKind.DIGIT, value=_NUMBER_WORDS[word])
    if word in _MULTIPLIERS:
        return WordToken(text=word, kind=TokenKind.MULTIPLIER, value=_MULTIPLIERS[word])
    raise InvalidWordError(word)


# ─── Main Converter ─────────────────────────────────────────────────


def parse_words(text: str) -> str:
    """Convert number words to an ungrouped numeral string.

    Args:
        text: e.g. "one thousand five point two"

    Returns:
        "1005.2"

    Raises:
        InvalidWordError: unknown word before "point".
        InvalidDecimalWordError: unknown word after "point".
        NumberTooLargeError: the total exceeds the unsigned 64-bit range.

    Algorithm:
        - `total`: value flushed by multiplier words
        - `current`: the group being built since the last multiplier

        digit word      → add to `current`
        multiplier word → `total += (current or 1) * multiplier`, reset `current`
        "point"         → every later word is a fraction digit word

        At the end, `total + current` is the integer value.
    """
    total = 0
    current = 0
    in_fraction = False
    fraction = ""

    for word in tokenize(text):
        if in_fraction and word != _POINT:
            if word not in _NUMBER_WORDS:
                raise InvalidDecimalWordError(word)
            # "fifteen" contributes two fraction digits
            fraction += str(_NUMBER_WORDS[word])
            continue

        token = classify(word)
        if token.kind is TokenKind.POINT:
            in_fraction = True
        elif token.kind is TokenKind.DIGIT:
            current += token.value
        else:
            total += (current or 1) * token.value
            current = 0

    total += current
    if total > U64_MAX:
        raise NumberTooLargeError({"value": str(total), "max": str(U64_MAX)})

    return f"{total}.{fraction}" if fraction else str(total)


def words_to_number(text: str) -> str:
    """Convert number words to an Indian-grouped numeral, e.g. "12,34,567"."""
    return format_indian(parse_words(text))
