"""Shared fixtures for fntxml tests."""

import pytest

from fntxml.domain import FontHeader, FontModel, Glyph

# Header: unknown1=1, widths and heights 16, one glyph.
# Glyph: 'A', unknown1=0, y_offset=5, x_offset=3, remaining fields 0.
SCENARIO_FNT = bytes.fromhex(
    "0100 1000 1000 1000 1000 0100"
    "4100 0000 0500 0300 0000 0000 0000 0000"
)


@pytest.fixture
def scenario_fnt() -> bytes:
    """Binary file with a single 'A' glyph at x=3, y=5."""
    return SCENARIO_FNT


@pytest.fixture
def sample_model() -> FontModel:
    """Model exercising literal, escaped and signed values plus trailing bytes."""
    return FontModel(
        header=FontHeader(
            unknown1=7,
            glyph_width1=16,
            glyph_width2=12,
            glyph_height1=24,
            glyph_height2=20,
            glyph_count=5,
        ),
        glyphs=[
            Glyph(code_unit=ord("A"), x_offset=3, y_offset=5),
            Glyph(code_unit=0x0009, x_offset=0, y_offset=0, unknown1=-1),
            Glyph(code_unit=ord(" "), x_offset=65535, y_offset=1, unknown2=32767),
            Glyph(code_unit=ord("é"), unknown3=-32768, unknown_padding1=12),
            Glyph(code_unit=0x0645, unknown_padding2=-2),
        ],
        trailing_bytes=b"\x00\xffTAIL",
    )
