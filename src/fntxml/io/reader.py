"""Font descriptor reader.

This module provides the FontFileReader class for loading FNT or XML files
into the domain model.
"""

from pathlib import Path

from fntxml.codec import decode_binary, decode_xml
from fntxml.config import FontFormat, FormatConfig
from fntxml.domain import FontModel
from fntxml.exceptions import FontLoadError, FormatError


class FontFileReader:
    """Loads FNT or XML font descriptors.

    Example:
        reader = FontFileReader(Path("font.fnt"))
        model = reader.load()
        print(reader.glyph_count)
    """

    def __init__(self, path: Path, formats: FormatConfig | None = None) -> None:
        """Initialize the reader.

        Args:
            path: Path to an FNT or XML file
            formats: Extension configuration (defaults if None)
        """
        self._path = path
        self._formats = formats or FormatConfig()
        self._model: FontModel | None = None

    @property
    def format(self) -> FontFormat:
        """Return the file format detected from the extension.

        Raises:
            ValueError: If the extension is not supported
        """
        font_format = self._formats.detect_format(self._path)
        if font_format is None:
            raise ValueError(f"Unsupported extension: {self._path.suffix or '(none)'}")
        return font_format

    def load(self) -> FontModel:
        """Read and decode the file.

        Returns:
            Decoded font model

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the extension is not supported
            FontLoadError: If the contents cannot be decoded
        """
        if not self._path.exists():
            raise FileNotFoundError(f"Font file not found: {self._path}")

        font_format = self.format
        data = self._path.read_bytes()

        try:
            if font_format is FontFormat.FNT:
                self._model = decode_binary(data)
            else:
                self._model = decode_xml(data)
        except FormatError as e:
            raise FontLoadError(str(self._path), str(e)) from e

        return self._model

    @property
    def model(self) -> FontModel:
        """Return the loaded model.

        Raises:
            RuntimeError: If the file has not been loaded yet
        """
        if self._model is None:
            raise RuntimeError("Font not loaded. Call load() first.")
        return self._model

    @property
    def glyph_count(self) -> int:
        """Return the number of glyphs in the loaded model."""
        return len(self.model.glyphs)

    def close(self) -> None:
        """Drop the loaded model."""
        self._model = None

    def __enter__(self) -> "FontFileReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
