"""Exception hierarchy for fntxml."""


class FntXmlError(Exception):
    """Base exception for all fntxml errors."""

    pass


class FormatError(FntXmlError):
    """Errors related to decoding binary or XML font descriptors."""

    pass


class TooSmallError(FormatError):
    """Binary input is shorter than the fixed header."""

    def __init__(self, actual_size: int) -> None:
        self.actual_size = actual_size
        super().__init__(f"File too small ({actual_size} bytes)")


class TruncatedError(FormatError):
    """Binary input is shorter than the glyph table its header declares."""

    def __init__(self, glyph_count: int, required_size: int, actual_size: int) -> None:
        self.glyph_count = glyph_count
        self.required_size = required_size
        self.actual_size = actual_size
        super().__init__(
            f"Truncated or format mismatch: glyph_count={glyph_count} requires at least "
            f"{required_size} bytes, file is {actual_size}"
        )


class InvalidFormatError(FormatError):
    """Structural or attribute-level problem in an XML document."""

    def __init__(self, details: str) -> None:
        self.details = details
        super().__init__(f"Invalid XML: {details}")


class TrailingBytesDecodeError(FormatError):
    """Trailing-bytes text is not valid base64."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid TrailingBytesBase64: {reason}")


class CharacterEscapeError(FntXmlError, ValueError):
    """Text cannot be mapped back to a single 16-bit code unit."""

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"Invalid Glyph Character '{text}': {reason}")


class FontFileError(FntXmlError):
    """Errors related to reading or writing font descriptor files."""

    pass


class FontLoadError(FontFileError):
    """Error loading a font descriptor file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load '{path}': {reason}")


class FontSaveError(FontFileError):
    """Error saving a font descriptor file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save '{path}': {reason}")
