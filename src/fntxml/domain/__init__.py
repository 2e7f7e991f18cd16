"""Domain models for fntxml.

This module contains the font descriptor model shared by both codecs. Models
are plain dataclasses that validate their field widths on construction, so a
constructed model can always be encoded.

Key classes:
- FontHeader: The six 16-bit header fields
- Glyph: One glyph table record
- FontModel: Header, glyph table and trailing bytes
"""

from fntxml.domain.font import (
    I16_MAX,
    I16_MIN,
    U16_MAX,
    U16_MIN,
    FontHeader,
    FontModel,
    Glyph,
)

__all__: list[str] = [
    # Field limits
    "U16_MIN",
    "U16_MAX",
    "I16_MIN",
    "I16_MAX",
    # Core types
    "FontHeader",
    "Glyph",
    "FontModel",
]
