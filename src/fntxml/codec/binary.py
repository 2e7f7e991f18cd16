"""Binary FNT codec.

Layout, all integers little-endian:

    offset 0          header, six u16: unknown1, glyph_width1, glyph_width2,
                      glyph_height1, glyph_height2, glyph_count
    offset 12 + i*16  glyph record i: code_unit u16, unknown1 i16, y_offset u16,
                      x_offset u16, unknown2 i16, unknown3 i16,
                      unknown_padding1 i16, unknown_padding2 i16
    after the table   trailing bytes, kept as an opaque blob
"""

import struct

from fntxml.domain import FontHeader, FontModel, Glyph
from fntxml.exceptions import TooSmallError, TruncatedError

HEADER_STRUCT = struct.Struct("<6H")
GLYPH_STRUCT = struct.Struct("<HhHHhhhh")

HEADER_SIZE = HEADER_STRUCT.size
GLYPH_SIZE = GLYPH_STRUCT.size


def required_size(glyph_count: int) -> int:
    """Return the minimum file size for a header declaring glyph_count glyphs."""
    return HEADER_SIZE + glyph_count * GLYPH_SIZE


def decode_binary(data: bytes) -> FontModel:
    """Decode an FNT byte sequence.

    Args:
        data: Complete file contents

    Returns:
        Decoded font model

    Raises:
        TooSmallError: If data is shorter than the header
        TruncatedError: If data is shorter than the declared glyph table
    """
    data = bytes(data)
    if len(data) < HEADER_SIZE:
        raise TooSmallError(len(data))

    header = FontHeader(*HEADER_STRUCT.unpack_from(data, 0))

    table_end = required_size(header.glyph_count)
    if len(data) < table_end:
        raise TruncatedError(header.glyph_count, table_end, len(data))

    glyphs = []
    for (
        code_unit,
        unknown1,
        y_offset,
        x_offset,
        unknown2,
        unknown3,
        padding1,
        padding2,
    ) in GLYPH_STRUCT.iter_unpack(data[HEADER_SIZE:table_end]):
        glyphs.append(
            Glyph(
                code_unit=code_unit,
                x_offset=x_offset,
                y_offset=y_offset,
                unknown1=unknown1,
                unknown2=unknown2,
                unknown3=unknown3,
                unknown_padding1=padding1,
                unknown_padding2=padding2,
            )
        )

    return FontModel(header=header, glyphs=glyphs, trailing_bytes=data[table_end:])


def encode_binary(model: FontModel) -> bytes:
    """Encode a font model as FNT bytes.

    The header glyph count is recomputed from the glyph list first. More than
    65535 glyphs wrap in the 16-bit field.

    Args:
        model: Font model to encode

    Returns:
        Complete file contents
    """
    model.sync_glyph_count()

    header = model.header
    parts = [
        HEADER_STRUCT.pack(
            header.unknown1,
            header.glyph_width1,
            header.glyph_width2,
            header.glyph_height1,
            header.glyph_height2,
            header.glyph_count,
        )
    ]
    for glyph in model.glyphs:
        parts.append(
            GLYPH_STRUCT.pack(
                glyph.code_unit,
                glyph.unknown1,
                glyph.y_offset,
                glyph.x_offset,
                glyph.unknown2,
                glyph.unknown3,
                glyph.unknown_padding1,
                glyph.unknown_padding2,
            )
        )
    parts.append(model.trailing_bytes)

    return b"".join(parts)
