"""File I/O layer for fntxml.

This module handles reading and writing font descriptor files and turning
command-line inputs into file lists. Decoding and encoding are delegated to
the codec package.

Key responsibilities:
- Load FNT/XML files into the domain model
- Write converted files atomically next to their input
- Expand files, directories and glob patterns

Key classes:
- FontFileReader: Load and decode a file
- FontFileWriter: Encode and save a model
"""

from fntxml.io.paths import expand_inputs
from fntxml.io.reader import FontFileReader
from fntxml.io.writer import FontFileWriter

__all__ = [
    "FontFileReader",
    "FontFileWriter",
    "expand_inputs",
]
