"""Decimal parsing for fixed-width integer fields."""

import re

from fntxml.domain import I16_MAX, I16_MIN, U16_MAX, U16_MIN

# ASCII digits only; int() alone would also accept "1_000" and non-ASCII digits
_DECIMAL_RE = re.compile(r"[+-]?[0-9]+")


def parse_int(text: str, low: int, high: int) -> int:
    """Parse surrounding-whitespace-tolerant decimal text within a range.

    Args:
        text: Decimal text, optionally signed
        low: Smallest accepted value
        high: Largest accepted value

    Returns:
        Parsed integer

    Raises:
        ValueError: If the text is not decimal or the value is out of range
    """
    stripped = text.strip()
    if not _DECIMAL_RE.fullmatch(stripped):
        raise ValueError(f"'{text}' is not a decimal integer")
    value = int(stripped)
    if not low <= value <= high:
        raise ValueError(f"{value} out of range [{low}, {high}]")
    return value


def parse_u16(text: str) -> int:
    """Parse an unsigned 16-bit decimal field."""
    return parse_int(text, U16_MIN, U16_MAX)


def parse_i16(text: str) -> int:
    """Parse a signed 16-bit decimal field."""
    return parse_int(text, I16_MIN, I16_MAX)
