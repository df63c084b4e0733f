"""
Conversion entry points — what front ends call with raw user text.

Two flavours of each direction:
  - convert_number / convert_words return a tagged ConversionResult
    (ok + value, or error kind + message + details).
  - convert_to_indian_words / convert_words_to_indian_number return a single
    display string: the converted value, or the human-readable error
    message ("Invalid number", "Invalid word: banana", ...).

Only ConversionError is turned into a failure result; anything else is a
bug and propagates.
"""

from __future__ import annotations

import logging
from typing import Callable

from .exceptions import ConversionError
from .models import ConversionResult
from .number_to_words import number_to_words
from .words_to_number import words_to_number

logger = logging.getLogger(__name__)


def _run(convert: Callable[[str], str], text: str) -> ConversionResult:
    try:
        value = convert(text)
    except ConversionError as e:
        logger.info("Rejected %r: [%s] %s", text, e.code, e.message)
        return ConversionResult.failure(e)

    logger.debug("Converted %r -> %r", text, value)
    return ConversionResult.success(value)


def convert_number(text: str) -> ConversionResult:
    """Numeral → words, e.g. "1234" → "One Thousand Two Hundred Thirty Four (1,234)"."""
    return _run(number_to_words, text)


def convert_words(text: str) -> ConversionResult:
    """Words → numeral, e.g. "one lakh" → "1,00,000"."""
    return _run(words_to_number, text)


def convert_to_indian_words(text: str) -> str:
    return convert_number(text).display()


def convert_words_to_indian_number(text: str) -> str:
    return convert_words(text).display()
