"""
Indian digit grouping: 1234567 → 12,34,567.

The last three integer digits form one group; every group to their left
holds two digits. Any fraction after the first '.' is carried through
unchanged. Both conversion directions format their numerals here.
"""

from __future__ import annotations


def format_indian(numeral: str) -> str:
    """Insert Indian-style commas into an ungrouped numeral string.

    Args:
        numeral: "{digits}" or "{digits}.{digits}", e.g. "123456789.5"

    Returns:
        "12,34,56,789.5"

    No digit validation is done: characters are chunked by position.
    """
    integer_part, dot, fraction = numeral.partition(".")
    suffix = f".{fraction}" if dot else ""

    if len(integer_part) <= 3:
        return integer_part + suffix

    last_three = integer_part[-3:]
    remainder = integer_part[:-3]

    # Chunk the leading digits in pairs from the right
    reversed_rest = remainder[::-1]
    chunks = [reversed_rest[i : i + 2] for i in range(0, len(reversed_rest), 2)]
    grouped = ",".join(chunks)[::-1]

    return f"{grouped},{last_three}{suffix}"
