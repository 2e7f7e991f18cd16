"""Binary and XML codecs for font descriptors.

Both codecs map to and from the FontModel domain model and never call each
other. The escaping module is shared by the XML side only.

Key functions:
- decode_binary / encode_binary: Fixed-layout little-endian FNT files
- decode_xml / encode_xml: FfntFile XML documents
- decode_character / encode_character: Character attribute text
"""

from fntxml.codec.binary import GLYPH_SIZE, HEADER_SIZE, decode_binary, encode_binary
from fntxml.codec.escaping import decode_character, encode_character
from fntxml.codec.xmldoc import decode_xml, encode_xml

__all__ = [
    "GLYPH_SIZE",
    "HEADER_SIZE",
    "decode_binary",
    "decode_character",
    "decode_xml",
    "encode_binary",
    "encode_character",
    "encode_xml",
]
