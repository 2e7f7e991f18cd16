"""Font descriptor writer.

This module provides the FontFileWriter class. Output is encoded completely
in memory and then moved into place, so a failed conversion never leaves a
partial file behind.
"""

import os
import tempfile
from pathlib import Path

from fntxml.codec import encode_binary, encode_xml
from fntxml.config import FontFormat, FormatConfig
from fntxml.domain import FontModel
from fntxml.exceptions import FontSaveError


class FontFileWriter:
    """Writes a font model as FNT or XML.

    Example:
        writer = FontFileWriter(model, Path("font.xml"), FontFormat.XML)
        writer.save()
    """

    def __init__(
        self,
        model: FontModel,
        output_path: Path,
        target_format: FontFormat,
        formats: FormatConfig | None = None,
    ) -> None:
        """Initialize the writer.

        Args:
            model: Model to write
            output_path: Destination path
            target_format: Format to encode as
            formats: Format configuration (defaults if None)
        """
        self._model = model
        self._output_path = output_path
        self._target_format = target_format
        self._formats = formats or FormatConfig()

    def encode(self) -> bytes:
        """Encode the model in the target format."""
        if self._target_format is FontFormat.FNT:
            return encode_binary(self._model)
        return encode_xml(self._model, indent=self._formats.xml_indent)

    def save(self) -> int:
        """Encode and atomically write the output file.

        Returns:
            Number of bytes written

        Raises:
            FontSaveError: If the file cannot be written
        """
        data = self.encode()
        directory = self._output_path.parent

        try:
            fd, temp_name = tempfile.mkstemp(
                prefix=f".{self._output_path.name}.", suffix=".tmp", dir=directory
            )
        except OSError as e:
            raise FontSaveError(str(self._output_path), str(e)) from e

        try:
            with os.fdopen(fd, "wb") as handle:
                handle.write(data)
            # mkstemp creates 0600 files
            os.chmod(temp_name, _target_mode(self._output_path))
            os.replace(temp_name, self._output_path)
        except OSError as e:
            Path(temp_name).unlink(missing_ok=True)
            raise FontSaveError(str(self._output_path), str(e)) from e

        return len(data)

    @staticmethod
    def get_output_path(input_path: Path, formats: FormatConfig | None = None) -> Path:
        """Generate the sibling output path for an input file.

        Converts: font.fnt -> font.xml
                  /path/to/font.xml -> /path/to/font.fnt

        Args:
            input_path: Input file path
            formats: Extension configuration (defaults if None)

        Returns:
            Path with the other format's extension

        Raises:
            ValueError: If the input extension is not supported
        """
        output_path = (formats or FormatConfig()).output_path(input_path)
        if output_path is None:
            raise ValueError(f"Unsupported extension: {input_path.suffix or '(none)'}")
        return output_path


def _target_mode(path: Path) -> int:
    """Keep the mode of a file being replaced, else use 0644."""
    try:
        return path.stat().st_mode & 0o777
    except OSError:
        return 0o644
