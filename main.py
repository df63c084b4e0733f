#!/usr/bin/env python3
"""
Indian Numerals — Entry Point
==============================

Converts between numerals and spoken English using Indian place values.

Usage:
    python main.py                                   # Demo over sample inputs
    python main.py words 1234567.05                  # Numeral -> words
    python main.py number twelve lakh thirty four    # Words -> numeral
    LOG_LEVEL=DEBUG python main.py words 100         # Show conversion logs
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

from indian_numerals.converter import convert_number, convert_words
from indian_numerals.models import ConversionResult

# ─── Load .env if available (optional dependency) ────────────────────
try:
    from dotenv import load_dotenv

    load_dotenv()
except ImportError:
    pass


# ─── Demo Inputs ─────────────────────────────────────────────────────

SAMPLE_NUMBERS = ["0", "7", "1001", "100000", "1234567", "100.05", "1234567890123", "abc"]
SAMPLE_WORDS = [
    "twelve lakh thirty four thousand five hundred sixty seven",
    "one thousand five",
    "hundred",
    "seven point one two",
    "Twenty-One Crore",
    "banana",
]


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_GREEN = "\033[92m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 72


# ─── Pretty Printer ─────────────────────────────────────────────────


def print_result(text: str, result: ConversionResult) -> int:
    """Print one conversion.

    Returns:
        0 if the conversion succeeded, 1 if it failed.
    """
    print(f"  {_DIM}{text}{_RESET}")
    if result.ok:
        print(f"    {_GREEN}{result.value}{_RESET}")
        return 0
    print(f"    {_RED}[{result.error.value}]{_RESET} {result.message}")
    return 1


def run_demo() -> int:
    """Convert every sample input in both directions and print the results."""
    print(f"\n{'=' * _WIDTH}")
    print(f"{_BOLD}{_CYAN}  NUMBER -> WORDS{_RESET}")
    print(f"{'─' * _WIDTH}")
    for text in SAMPLE_NUMBERS:
        print_result(text, convert_number(text))

    print(f"\n{'=' * _WIDTH}")
    print(f"{_BOLD}{_CYAN}  WORDS -> NUMBER{_RESET}")
    print(f"{'─' * _WIDTH}")
    for text in SAMPLE_WORDS:
        print_result(text, convert_words(text))
    print(f"{'=' * _WIDTH}\n")
    return 0


# ─── Main ────────────────────────────────────────────────────────────


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="indian-numerals",
        description="Convert between numerals and Indian-system English words.",
    )
    sub = parser.add_subparsers(dest="command")

    words = sub.add_parser("words", help="numeral -> words, e.g. 1234567.05")
    words.add_argument("numeral")

    number = sub.add_parser("number", help="words -> numeral, e.g. one lakh five")
    number.add_argument("words", nargs="+")
    return parser


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "WARNING").upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    args = build_parser().parse_args(argv)

    if args.command == "words":
        return print_result(args.numeral, convert_number(args.numeral))
    if args.command == "number":
        text = " ".join(args.words)
        return print_result(text, convert_words(text))
    return run_demo()


if __name__ == "__main__":
    sys.exit(main())
