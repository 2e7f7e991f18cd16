"""Tests for configuration settings."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from fntxml.config import (
    FntXmlSettings,
    FontFormat,
    FormatConfig,
    LoggingConfig,
    ProcessingConfig,
    get_default_settings,
)


class TestFormatConfig:
    """Tests for FormatConfig."""

    def test_defaults(self):
        """Test default extensions and indent."""
        config = FormatConfig()
        assert config.binary_extension == ".fnt"
        assert config.xml_extension == ".xml"
        assert config.xml_indent == "  "

    def test_extension_normalized(self):
        """Test extensions are lower-cased and trimmed."""
        assert FormatConfig(binary_extension=" .FNT ").binary_extension == ".fnt"

    @pytest.mark.parametrize("extension", ["fnt", ".", "", ".tar.gz"])
    def test_invalid_extension(self, extension):
        """Test malformed extensions are rejected."""
        with pytest.raises(ValidationError):
            FormatConfig(binary_extension=extension)

    def test_extensions_must_differ(self):
        """Test identical extensions are rejected."""
        with pytest.raises(ValidationError, match="must differ"):
            FormatConfig(binary_extension=".xml")

    def test_invalid_indent(self):
        """Test indentation must be whitespace."""
        with pytest.raises(ValidationError):
            FormatConfig(xml_indent="--")

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("font.fnt", FontFormat.FNT),
            ("FONT.FNT", FontFormat.FNT),
            ("font.xml", FontFormat.XML),
            ("font.Xml", FontFormat.XML),
            ("font.txt", None),
            ("font", None),
            ("font.fnt.bak", None),
        ],
    )
    def test_detect_format(self, name, expected):
        """Test case-insensitive format detection."""
        assert FormatConfig().detect_format(Path(name)) is expected

    def test_target_format(self):
        """Test each format converts to the other."""
        assert FormatConfig.target_format(FontFormat.FNT) is FontFormat.XML
        assert FormatConfig.target_format(FontFormat.XML) is FontFormat.FNT

    def test_output_path(self):
        """Test sibling output paths."""
        config = FormatConfig()
        assert config.output_path(Path("/a/b/font.fnt")) == Path("/a/b/font.xml")
        assert config.output_path(Path("font.XML")) == Path("font.fnt")
        assert config.output_path(Path("notes.txt")) is None

    def test_custom_extensions(self):
        """Test custom extensions drive detection and naming."""
        config = FormatConfig(binary_extension=".ffnt", xml_extension=".ffxml")
        assert config.detect_format(Path("a.ffnt")) is FontFormat.FNT
        assert config.detect_format(Path("a.fnt")) is None
        assert config.output_path(Path("a.ffnt")) == Path("a.ffxml")


class TestSettings:
    """Tests for the remaining settings models."""

    def test_default_settings(self):
        """Test default settings are sequential without console logging."""
        settings = get_default_settings()
        assert isinstance(settings, FntXmlSettings)
        assert settings.processing.max_workers == 1
        assert settings.logging.log_file is None
        assert settings.logging.log_level is None
        assert settings.logging.file_log_level == "DEBUG"

    def test_auto_workers(self):
        """Test None selects automatic worker count."""
        assert ProcessingConfig(max_workers=None).max_workers is None

    def test_invalid_workers(self):
        """Test zero workers is rejected."""
        with pytest.raises(ValidationError):
            ProcessingConfig(max_workers=0)

    def test_log_level_normalized(self):
        """Test log levels are upper-cased."""
        assert LoggingConfig(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        """Test unknown log levels are rejected."""
        with pytest.raises(ValidationError):
            LoggingConfig(log_level="LOUD")

    def test_serialization(self):
        """Test format config survives model_dump for worker processes."""
        config = FormatConfig(xml_indent="\t")
        assert FormatConfig(**config.model_dump()) == config
