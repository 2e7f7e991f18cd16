"""fntxml - Convert FNT bitmap-font descriptors to XML and back.

fntxml is a CLI tool that turns the fixed-layout binary glyph tables of .fnt
font descriptors into editable, diffable XML documents, and rebuilds the
binary files from that XML without losing any data: unknown fields and any
bytes following the glyph table are carried through unchanged.

Example:
    $ fntxml arabia.fnt

This will create arabia.xml next to the input. Running fntxml on arabia.xml
rebuilds arabia.fnt.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
