"""Character escaping between 16-bit code units and XML attribute text.

Printable characters are written literally so the XML stays readable;
control characters, surrogate halves and the XML-forbidden noncharacters
get a canonical escaped form so nothing is lost.

Decoding accepts, in order of precedence:

1. A single literal character
2. A named escape: ``\\t``, ``\\n``, ``\\r``
3. ``\\uXXXX`` (``\\U`` also accepted)
4. ``U+XXXX`` (``u+`` also accepted)
5. ``0x`` followed by 1 to 4 hex digits
6. A decimal value between 0 and 65535

Surrogate code units are never accepted back from text, whichever rule
produced them. A glyph holding a lone surrogate therefore exports to XML but
cannot be imported again.
"""

import re
import unicodedata

from fntxml.codec.fields import parse_u16
from fntxml.exceptions import CharacterEscapeError

SURROGATE_MIN = 0xD800
SURROGATE_MAX = 0xDFFF

NAMED_ESCAPES: dict[int, str] = {
    0x0009: "\\t",
    0x000A: "\\n",
    0x000D: "\\r",
}
_NAMED_ESCAPES_REVERSED = {text: code for code, text in NAMED_ESCAPES.items()}

# Not control characters, but never legal in an XML 1.0 document
_XML_FORBIDDEN = frozenset({0xFFFE, 0xFFFF})

_HEX4_RE = re.compile(r"[0-9A-Fa-f]{4}")
_HEX1_4_RE = re.compile(r"[0-9A-Fa-f]{1,4}")


def is_surrogate(code_unit: int) -> bool:
    """Check if a code unit is a UTF-16 surrogate half."""
    return SURROGATE_MIN <= code_unit <= SURROGATE_MAX


def is_control(code_unit: int) -> bool:
    """Check if a code unit is a control character (category Cc)."""
    return unicodedata.category(chr(code_unit)) == "Cc"


def _unicode_escape(code_unit: int) -> str:
    return f"\\u{code_unit:04X}"


def encode_character(code_unit: int) -> str:
    """Render a code unit as Character attribute text.

    Args:
        code_unit: Value between 0 and 65535

    Returns:
        The literal character, a named escape or a ``\\uXXXX`` escape

    Raises:
        ValueError: If the code unit does not fit in 16 bits
    """
    if not 0 <= code_unit <= 0xFFFF:
        raise ValueError(f"Code unit {code_unit} out of range [0, 65535]")

    if is_surrogate(code_unit):
        return _unicode_escape(code_unit)

    if is_control(code_unit):
        return NAMED_ESCAPES.get(code_unit, _unicode_escape(code_unit))

    if code_unit in _XML_FORBIDDEN:
        return _unicode_escape(code_unit)

    return chr(code_unit)


def _accept(text: str, code_unit: int) -> int:
    if is_surrogate(code_unit):
        raise CharacterEscapeError(
            text, f"U+{code_unit:04X} is a surrogate and not a valid standalone character"
        )
    return code_unit


def decode_character(text: str) -> int:
    """Parse Character attribute text back into a code unit.

    Args:
        text: Attribute text as read from the document

    Returns:
        Code unit between 0 and 65535, never a surrogate

    Raises:
        CharacterEscapeError: If the text matches no rule or names a surrogate
    """
    # Python strings hold code points, so astral characters are one character
    # long here but do not fit a single code unit.
    if len(text) == 1 and ord(text) <= 0xFFFF:
        return _accept(text, ord(text))

    stripped = text.strip()

    if stripped in _NAMED_ESCAPES_REVERSED:
        return _NAMED_ESCAPES_REVERSED[stripped]

    if len(stripped) == 6 and stripped[:2].lower() in ("\\u", "u+"):
        digits = stripped[2:]
        if _HEX4_RE.fullmatch(digits):
            return _accept(text, int(digits, 16))

    if stripped[:2].lower() == "0x":
        digits = stripped[2:]
        if _HEX1_4_RE.fullmatch(digits):
            return _accept(text, int(digits, 16))

    try:
        value = parse_u16(stripped)
    except ValueError:
        raise CharacterEscapeError(text, "not a character, escape or code unit value") from None
    return _accept(text, value)
