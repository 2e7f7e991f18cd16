"""Configuration settings for fntxml."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, field_validator, model_validator


class FontFormat(str, Enum):
    """Font descriptor file format."""

    FNT = "fnt"
    XML = "xml"


class FormatConfig(BaseModel):
    """Configuration for file formats and output naming."""

    binary_extension: str = Field(
        default=".fnt",
        description="Extension of binary font descriptors",
    )
    xml_extension: str = Field(
        default=".xml",
        description="Extension of XML font descriptors",
    )
    xml_indent: str = Field(
        default="  ",
        description="Indentation per XML nesting level (empty for single-line output)",
    )

    @field_validator("binary_extension", "xml_extension")
    @classmethod
    def _normalize_extension(cls, value: str) -> str:
        value = value.strip().lower()
        if len(value) < 2 or not value.startswith(".") or "." in value[1:]:
            raise ValueError(f"extension must look like '.ext', got '{value}'")
        return value

    @field_validator("xml_indent")
    @classmethod
    def _check_indent(cls, value: str) -> str:
        if value.strip(" \t"):
            raise ValueError("indent may only contain spaces and tabs")
        return value

    @model_validator(mode="after")
    def _check_distinct(self) -> "FormatConfig":
        if self.binary_extension == self.xml_extension:
            raise ValueError("binary and XML extensions must differ")
        return self

    def detect_format(self, path: Path) -> FontFormat | None:
        """Detect a file's format from its extension (case-insensitive).

        Args:
            path: File path

        Returns:
            The format, or None for unsupported extensions
        """
        suffix = path.suffix.lower()
        if suffix == self.binary_extension:
            return FontFormat.FNT
        if suffix == self.xml_extension:
            return FontFormat.XML
        return None

    def extension_for(self, font_format: FontFormat) -> str:
        """Get the configured extension for a format."""
        if font_format is FontFormat.FNT:
            return self.binary_extension
        return self.xml_extension

    @staticmethod
    def target_format(source_format: FontFormat) -> FontFormat:
        """Get the format a file of the given format converts to."""
        if source_format is FontFormat.FNT:
            return FontFormat.XML
        return FontFormat.FNT

    def output_path(self, path: Path) -> Path | None:
        """Get the sibling output path for an input file.

        Converts: font.fnt -> font.xml
                  font.xml -> font.fnt

        Args:
            path: Input file path

        Returns:
            Output path, or None for unsupported extensions
        """
        source_format = self.detect_format(path)
        if source_format is None:
            return None
        return path.with_suffix(self.extension_for(self.target_format(source_format)))


class ProcessingConfig(BaseModel):
    """Configuration for batch processing."""

    max_workers: int | None = Field(
        default=1,
        ge=1,
        description="Max worker processes (1 = sequential, None = auto)",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str | None = Field(
        default=None,
        description="Console log level (None = no console logging)",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )

    @field_validator("log_level", "file_log_level")
    @classmethod
    def _check_level(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.upper()
        if value not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level '{value}'")
        return value


class FntXmlSettings(BaseModel):
    """Main application settings."""

    formats: FormatConfig = Field(default_factory=FormatConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> FntXmlSettings:
    """Get default application settings."""
    return FntXmlSettings()
