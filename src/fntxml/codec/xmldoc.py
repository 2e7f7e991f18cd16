"""XML codec for font descriptors.

Document shape::

    <FfntFile xmlns:xsi="..." xmlns:xsd="...">
      <Entries>
        <FfntEntry xsi:type="GlyphMap">
          <Header Unknown1="" GlyphWidth1="" GlyphWidth2="" GlyphHeight1=""
                  GlyphHeight2="" GlyphCount="" />
          <Glyphs>
            <Glyph Character="" XOffset="" YOffset="" Unknown1="" Unknown2=""
                   Unknown3="" UnknownPadding1="" UnknownPadding2="" />
          </Glyphs>
          <TrailingBytesBase64>...</TrailingBytesBase64>
        </FfntEntry>
      </Entries>
    </FfntFile>

GlyphCount is written for readers of the document but ignored on import;
the count always follows the Glyph elements actually present.
"""

import base64
import binascii
import xml.etree.ElementTree as ET
from collections.abc import Callable

from fntxml.codec.escaping import decode_character, encode_character
from fntxml.codec.fields import parse_i16, parse_u16
from fntxml.domain import FontHeader, FontModel, Glyph
from fntxml.exceptions import (
    CharacterEscapeError,
    InvalidFormatError,
    TrailingBytesDecodeError,
)

XSI_NAMESPACE = "http://www.w3.org/2001/XMLSchema-instance"
XSD_NAMESPACE = "http://www.w3.org/2001/XMLSchema"
XSI_TYPE = f"{{{XSI_NAMESPACE}}}type"

ROOT_TAG = "FfntFile"
ENTRIES_TAG = "Entries"
ENTRY_TAG = "FfntEntry"
GLYPH_MAP_TYPE = "GlyphMap"
HEADER_TAG = "Header"
GLYPHS_TAG = "Glyphs"
GLYPH_TAG = "Glyph"
TRAILING_BYTES_TAG = "TrailingBytesBase64"

# (attribute, model field) in document order
HEADER_ATTRIBUTES: list[tuple[str, str]] = [
    ("Unknown1", "unknown1"),
    ("GlyphWidth1", "glyph_width1"),
    ("GlyphWidth2", "glyph_width2"),
    ("GlyphHeight1", "glyph_height1"),
    ("GlyphHeight2", "glyph_height2"),
]
GLYPH_COUNT_ATTRIBUTE = "GlyphCount"

GLYPH_OFFSET_ATTRIBUTES: list[tuple[str, str]] = [
    ("XOffset", "x_offset"),
    ("YOffset", "y_offset"),
]
GLYPH_UNKNOWN_ATTRIBUTES: list[tuple[str, str]] = [
    ("Unknown1", "unknown1"),
    ("Unknown2", "unknown2"),
    ("Unknown3", "unknown3"),
    ("UnknownPadding1", "unknown_padding1"),
    ("UnknownPadding2", "unknown_padding2"),
]


def encode_xml(model: FontModel, indent: str = "  ") -> bytes:
    """Encode a font model as a UTF-8 XML document.

    Args:
        model: Font model to encode
        indent: Indentation per nesting level; empty for a single line

    Returns:
        Serialized document including the XML declaration
    """
    model.sync_glyph_count()

    # ElementTree only declares prefixes it sees in use, and xsd is never used
    root = ET.Element(ROOT_TAG, {"xmlns:xsi": XSI_NAMESPACE, "xmlns:xsd": XSD_NAMESPACE})
    entries = ET.SubElement(root, ENTRIES_TAG)
    entry = ET.SubElement(entries, ENTRY_TAG, {"xsi:type": GLYPH_MAP_TYPE})

    header = ET.SubElement(entry, HEADER_TAG)
    for attribute, name in HEADER_ATTRIBUTES:
        header.set(attribute, str(getattr(model.header, name)))
    header.set(GLYPH_COUNT_ATTRIBUTE, str(model.header.glyph_count))

    glyphs = ET.SubElement(entry, GLYPHS_TAG)
    for glyph in model.glyphs:
        element = ET.SubElement(glyphs, GLYPH_TAG)
        element.set("Character", encode_character(glyph.code_unit))
        for attribute, name in GLYPH_OFFSET_ATTRIBUTES + GLYPH_UNKNOWN_ATTRIBUTES:
            element.set(attribute, str(getattr(glyph, name)))

    trailing = ET.SubElement(entry, TRAILING_BYTES_TAG)
    trailing.text = base64.b64encode(model.trailing_bytes).decode("ascii")

    if indent:
        ET.indent(root, space=indent)

    return ET.tostring(root, encoding="utf-8", xml_declaration=True) + b"\n"


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _require(parent: ET.Element, tag: str, description: str) -> ET.Element:
    element = parent.find(tag)
    if element is None:
        raise InvalidFormatError(f"{description} missing <{tag}>")
    return element


def _read_attribute(
    element: ET.Element,
    attribute: str,
    parse: Callable[[str], int],
) -> int:
    text = element.get(attribute)
    if text is None:
        raise InvalidFormatError(f"<{element.tag}> missing attribute {attribute}")
    try:
        return parse(text)
    except ValueError as e:
        raise InvalidFormatError(f"<{element.tag}> attribute {attribute}: {e}") from e


def _find_glyph_map(root: ET.Element) -> ET.Element:
    if _local_name(root.tag) != ROOT_TAG:
        raise InvalidFormatError(f"expected <{ROOT_TAG}> root, found <{root.tag}>")

    entries = _require(root, ENTRIES_TAG, f"<{ROOT_TAG}>")
    for entry in entries.findall(ENTRY_TAG):
        if entry.get(XSI_TYPE) == GLYPH_MAP_TYPE:
            return entry

    raise InvalidFormatError(f'missing <{ENTRY_TAG} xsi:type="{GLYPH_MAP_TYPE}">')


def _decode_glyph(element: ET.Element, index: int) -> Glyph:
    text = element.get("Character")
    if text is None:
        raise InvalidFormatError(f"Glyph {index} missing Character attribute")
    if text == "":
        raise InvalidFormatError(f"Glyph {index} Character is empty")

    try:
        code_unit = decode_character(text)
    except CharacterEscapeError as e:
        raise InvalidFormatError(f"Glyph {index}: {e}") from e

    values = {"code_unit": code_unit}
    for attribute, name in GLYPH_OFFSET_ATTRIBUTES:
        values[name] = _read_attribute(element, attribute, parse_u16)
    for attribute, name in GLYPH_UNKNOWN_ATTRIBUTES:
        values[name] = _read_attribute(element, attribute, parse_i16)

    return Glyph(**values)


def _decode_trailing_bytes(element: ET.Element | None) -> bytes:
    if element is None:
        return b""

    # Base64 may be wrapped across lines; whitespace carries no data
    text = "".join("".join(element.itertext()).split())
    if not text:
        return b""

    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as e:
        raise TrailingBytesDecodeError(str(e)) from e


def decode_xml(data: bytes | str) -> FontModel:
    """Decode an XML document into a font model.

    Args:
        data: Complete document, as bytes or text

    Returns:
        Decoded font model

    Raises:
        InvalidFormatError: If the document is malformed or a required
            element or attribute is missing or unparseable
        TrailingBytesDecodeError: If the trailing bytes are not valid base64
    """
    try:
        root = ET.fromstring(data)
    except ET.ParseError as e:
        raise InvalidFormatError(f"malformed document: {e}") from e

    glyph_map = _find_glyph_map(root)
    header_element = _require(glyph_map, HEADER_TAG, GLYPH_MAP_TYPE)

    header = FontHeader(
        **{
            name: _read_attribute(header_element, attribute, parse_u16)
            for attribute, name in HEADER_ATTRIBUTES
        }
    )

    glyphs_element = _require(glyph_map, GLYPHS_TAG, GLYPH_MAP_TYPE)
    glyphs = [
        _decode_glyph(element, index)
        for index, element in enumerate(glyphs_element.findall(GLYPH_TAG))
    ]

    model = FontModel(
        header=header,
        glyphs=glyphs,
        trailing_bytes=_decode_trailing_bytes(glyph_map.find(TRAILING_BYTES_TAG)),
    )
    model.sync_glyph_count()
    return model
