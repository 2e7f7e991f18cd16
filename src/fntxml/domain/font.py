"""Font descriptor domain model.

This module defines the in-memory representation shared by the binary and
XML codecs: a header, an ordered glyph table and an opaque trailing blob.
"""

from dataclasses import dataclass, field, fields

import structlog

U16_MIN = 0
U16_MAX = 0xFFFF
I16_MIN = -0x8000
I16_MAX = 0x7FFF


def _check_range(owner: object, names: tuple[str, ...], low: int, high: int) -> None:
    for name in names:
        value = getattr(owner, name)
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(
                f"{type(owner).__name__}.{name} must be an int, got {type(value).__name__}"
            )
        if not low <= value <= high:
            raise ValueError(
                f"{type(owner).__name__}.{name}={value} out of range [{low}, {high}]"
            )


@dataclass
class FontHeader:
    """Fixed 12-byte descriptor header.

    Attributes:
        unknown1: Header field with no known meaning
        glyph_width1: First glyph width field
        glyph_width2: Second glyph width field
        glyph_height1: First glyph height field
        glyph_height2: Second glyph height field
        glyph_count: Number of glyph records; recomputed before every encode
    """

    unknown1: int = 0
    glyph_width1: int = 0
    glyph_width2: int = 0
    glyph_height1: int = 0
    glyph_height2: int = 0
    glyph_count: int = 0

    def __post_init__(self) -> None:
        _check_range(self, tuple(f.name for f in fields(self)), U16_MIN, U16_MAX)


@dataclass
class Glyph:
    """One entry of the glyph table.

    The unknown fields are kept as plain signed integers and written back
    unchanged.

    Attributes:
        code_unit: UTF-16 code unit, possibly a lone surrogate half
        x_offset: Horizontal offset
        y_offset: Vertical offset
        unknown1: Opaque signed field
        unknown2: Opaque signed field
        unknown3: Opaque signed field
        unknown_padding1: Opaque signed padding field
        unknown_padding2: Opaque signed padding field
    """

    code_unit: int
    x_offset: int = 0
    y_offset: int = 0
    unknown1: int = 0
    unknown2: int = 0
    unknown3: int = 0
    unknown_padding1: int = 0
    unknown_padding2: int = 0

    def __post_init__(self) -> None:
        _check_range(self, ("code_unit", "x_offset", "y_offset"), U16_MIN, U16_MAX)
        _check_range(
            self,
            ("unknown1", "unknown2", "unknown3", "unknown_padding1", "unknown_padding2"),
            I16_MIN,
            I16_MAX,
        )


@dataclass
class FontModel:
    """A complete font descriptor.

    Attributes:
        header: Descriptor header
        glyphs: Glyph table in file order
        trailing_bytes: Bytes following the glyph table, preserved verbatim
    """

    header: FontHeader = field(default_factory=FontHeader)
    glyphs: list[Glyph] = field(default_factory=list)
    trailing_bytes: bytes = b""

    def __post_init__(self) -> None:
        self.trailing_bytes = bytes(self.trailing_bytes)

    def sync_glyph_count(self) -> int:
        """Recompute the header glyph count from the glyph list.

        The count wraps modulo 65536 to fit the 16-bit header field; a warning
        is logged when it does.

        Returns:
            The stored glyph count
        """
        if self.glyph_count_overflows:
            # looked up per call so the current structlog configuration applies
            structlog.get_logger(__name__).warning(
                "Glyph count does not fit in 16 bits and will wrap",
                glyphs=len(self.glyphs),
                stored_count=len(self.glyphs) & U16_MAX,
            )
        self.header.glyph_count = len(self.glyphs) & U16_MAX
        return self.header.glyph_count

    @property
    def glyph_count_overflows(self) -> bool:
        """Check whether the glyph list is too long for the header field."""
        return len(self.glyphs) > U16_MAX
