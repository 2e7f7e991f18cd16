"""Unit tests for the file I/O layer.

Tests for FontFileReader, FontFileWriter and expand_inputs.
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from fntxml.codec import decode_binary, encode_xml
from fntxml.config import FontFormat, FormatConfig
from fntxml.domain import FontModel, Glyph
from fntxml.exceptions import FontLoadError, FontSaveError, TooSmallError
from fntxml.io import FontFileReader, FontFileWriter, expand_inputs


class TestFontFileReader:
    """Tests for FontFileReader class."""

    def test_load_fnt(self, tmp_path, scenario_fnt):
        """Test loading a binary file."""
        path = tmp_path / "font.fnt"
        path.write_bytes(scenario_fnt)

        reader = FontFileReader(path)
        model = reader.load()

        assert reader.format is FontFormat.FNT
        assert model.glyphs[0].code_unit == 0x41
        assert reader.glyph_count == 1
        assert reader.model is model

    def test_load_xml(self, tmp_path, sample_model):
        """Test loading an XML file."""
        path = tmp_path / "font.XML"
        path.write_bytes(encode_xml(sample_model))

        model = FontFileReader(path).load()

        assert model == sample_model

    def test_load_nonexistent_file(self, tmp_path):
        """Test loading a nonexistent file raises FileNotFoundError."""
        reader = FontFileReader(tmp_path / "missing.fnt")
        with pytest.raises(FileNotFoundError):
            reader.load()

    def test_unsupported_extension(self, tmp_path):
        """Test unsupported extensions raise ValueError."""
        path = tmp_path / "notes.txt"
        path.write_text("hello")
        with pytest.raises(ValueError, match="Unsupported extension"):
            FontFileReader(path).load()

    def test_decode_error_names_path(self, tmp_path):
        """Test codec errors are wrapped with the file path."""
        path = tmp_path / "short.fnt"
        path.write_bytes(bytes(10))

        with pytest.raises(FontLoadError) as exc_info:
            FontFileReader(path).load()

        assert exc_info.value.path == str(path)
        assert "too small" in exc_info.value.reason
        assert isinstance(exc_info.value.__cause__, TooSmallError)

    def test_model_before_load(self):
        """Test accessing the model before loading raises RuntimeError."""
        reader = FontFileReader(Path("font.fnt"))
        with pytest.raises(RuntimeError, match="Font not loaded"):
            _ = reader.model

    def test_context_manager(self, tmp_path, scenario_fnt):
        """Test FontFileReader as context manager."""
        path = tmp_path / "font.fnt"
        path.write_bytes(scenario_fnt)

        with FontFileReader(path) as reader:
            assert reader.glyph_count == 1

        with pytest.raises(RuntimeError):
            _ = reader.model


class TestFontFileWriter:
    """Tests for FontFileWriter class."""

    def test_save_fnt(self, tmp_path, scenario_fnt):
        """Test writing binary output."""
        output = tmp_path / "out.fnt"
        written = FontFileWriter(decode_binary(scenario_fnt), output, FontFormat.FNT).save()

        assert output.read_bytes() == scenario_fnt
        assert written == len(scenario_fnt)

    def test_save_xml(self, tmp_path, sample_model):
        """Test writing XML output with the configured indent."""
        output = tmp_path / "out.xml"
        formats = FormatConfig(xml_indent="\t")
        FontFileWriter(sample_model, output, FontFormat.XML, formats).save()

        data = output.read_bytes()
        assert data.startswith(b"<?xml")
        assert b"\n\t<Entries>" in data

    def test_overwrites_existing(self, tmp_path, scenario_fnt):
        """Test an existing output file is replaced."""
        output = tmp_path / "out.fnt"
        output.write_bytes(b"old contents")
        FontFileWriter(decode_binary(scenario_fnt), output, FontFormat.FNT).save()
        assert output.read_bytes() == scenario_fnt

    @pytest.mark.skipif(os.name != "posix", reason="POSIX file modes")
    def test_file_mode(self, tmp_path, scenario_fnt):
        """Test new files get 0644 and replaced files keep their mode."""
        model = decode_binary(scenario_fnt)
        created = tmp_path / "new.fnt"
        FontFileWriter(model, created, FontFormat.FNT).save()
        assert created.stat().st_mode & 0o777 == 0o644

        existing = tmp_path / "old.fnt"
        existing.write_bytes(b"old")
        existing.chmod(0o640)
        FontFileWriter(model, existing, FontFormat.FNT).save()
        assert existing.stat().st_mode & 0o777 == 0o640

    def test_no_temporary_files_left(self, tmp_path, scenario_fnt):
        """Test only the output file remains after saving."""
        output = tmp_path / "out.fnt"
        FontFileWriter(decode_binary(scenario_fnt), output, FontFormat.FNT).save()
        assert os.listdir(tmp_path) == ["out.fnt"]

    def test_failed_replace_keeps_original(self, tmp_path, scenario_fnt):
        """Test a failed commit leaves the destination untouched."""
        output = tmp_path / "out.fnt"
        output.write_bytes(b"original")

        with patch("fntxml.io.writer.os.replace", side_effect=OSError("disk full")):
            with pytest.raises(FontSaveError, match="disk full") as exc_info:
                FontFileWriter(decode_binary(scenario_fnt), output, FontFormat.FNT).save()

        assert exc_info.value.path == str(output)
        assert output.read_bytes() == b"original"
        assert os.listdir(tmp_path) == ["out.fnt"]

    def test_missing_directory(self, tmp_path):
        """Test writing into a missing directory fails cleanly."""
        output = tmp_path / "missing" / "out.fnt"
        with pytest.raises(FontSaveError):
            FontFileWriter(FontModel(), output, FontFormat.FNT).save()

    def test_encode(self):
        """Test encode returns the bytes without writing."""
        model = FontModel(glyphs=[Glyph(code_unit=0x41)])
        data = FontFileWriter(model, Path("unused.xml"), FontFormat.XML).encode()
        assert b'Character="A"' in data

    def test_get_output_path(self):
        """Test get_output_path static method."""
        test_cases = [
            (Path("font.fnt"), Path("font.xml")),
            (Path("arabia.xml"), Path("arabia.fnt")),
            (Path("/path/to/Font.FNT"), Path("/path/to/Font.xml")),
        ]
        for input_path, expected in test_cases:
            assert FontFileWriter.get_output_path(input_path) == expected

    def test_get_output_path_unsupported(self):
        """Test unsupported inputs have no output path."""
        with pytest.raises(ValueError):
            FontFileWriter.get_output_path(Path("notes.txt"))


class TestExpandInputs:
    """Tests for expand_inputs."""

    @pytest.fixture
    def font_dir(self, tmp_path):
        """Directory with mixed files and a subdirectory."""
        for name in ["b.xml", "a.xml", "b.fnt", "a.FNT", "notes.txt"]:
            (tmp_path / name).write_bytes(b"")
        (tmp_path / "sub").mkdir()
        (tmp_path / "sub" / "c.fnt").write_bytes(b"")
        return tmp_path

    def test_explicit_files(self, font_dir):
        """Test explicit files are kept in order, whatever their extension."""
        result = expand_inputs([font_dir / "b.xml", str(font_dir / "notes.txt")])
        assert result == [font_dir / "b.xml", font_dir / "notes.txt"]

    def test_directory(self, font_dir):
        """Test directories yield binary files first, then XML, top level only."""
        result = expand_inputs([font_dir])
        assert [p.name for p in result] == ["a.FNT", "b.fnt", "a.xml", "b.xml"]

    def test_glob(self, font_dir):
        """Test glob patterns yield matching supported files."""
        result = expand_inputs([str(font_dir / "*")])
        assert [p.name for p in result] == ["a.FNT", "a.xml", "b.fnt", "b.xml"]

    def test_glob_filters_unsupported(self, font_dir):
        """Test globs skip unsupported extensions."""
        assert expand_inputs([str(font_dir / "*.txt")]) == []

    def test_nonexistent(self, tmp_path):
        """Test missing paths contribute nothing."""
        assert expand_inputs([tmp_path / "missing.fnt", "", "  "]) == []

    def test_duplicates_removed(self, font_dir):
        """Test repeated inputs appear once, at their first position."""
        result = expand_inputs([font_dir / "b.xml", font_dir, str(font_dir / "b.xml")])
        assert [p.name for p in result] == ["b.xml", "a.FNT", "b.fnt", "a.xml"]

    def test_quoted_path(self, font_dir):
        """Test surrounding quotes are stripped."""
        assert expand_inputs([f'"{font_dir / "a.xml"}"']) == [font_dir / "a.xml"]

    def test_paths_absolute(self, font_dir, monkeypatch):
        """Test relative inputs are returned as absolute paths."""
        monkeypatch.chdir(font_dir)
        assert expand_inputs(["a.xml"]) == [font_dir / "a.xml"]

    def test_custom_extensions(self, tmp_path):
        """Test directories honour configured extensions."""
        (tmp_path / "a.ffnt").write_bytes(b"")
        (tmp_path / "a.fnt").write_bytes(b"")
        formats = FormatConfig(binary_extension=".ffnt")
        assert [p.name for p in expand_inputs([tmp_path], formats)] == ["a.ffnt"]
