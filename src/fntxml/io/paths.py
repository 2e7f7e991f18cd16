"""Input expansion for batch conversion."""

import glob
import os
from collections.abc import Iterable
from pathlib import Path

from fntxml.config import FontFormat, FormatConfig


def _has_glob_magic(text: str) -> bool:
    return any(char in text for char in "*?[")


def _supported(path: Path, formats: FormatConfig) -> bool:
    return path.is_file() and formats.detect_format(path) is not None


def _directory_files(directory: Path, formats: FormatConfig) -> list[Path]:
    files = sorted(entry for entry in directory.iterdir() if _supported(entry, formats))
    # binary files first, then XML
    return [p for p in files if formats.detect_format(p) is FontFormat.FNT] + [
        p for p in files if formats.detect_format(p) is FontFormat.XML
    ]


def expand_inputs(raw_inputs: Iterable[str | Path], formats: FormatConfig | None = None) -> list[Path]:
    """Expand command-line inputs into a list of files to process.

    Existing files are kept whatever their extension, so unsupported ones can be
    reported as skipped. Directories contribute their top-level FNT files and
    then their XML files. Glob patterns contribute matching supported files.
    Anything else contributes nothing.

    Args:
        raw_inputs: Files, directories or glob patterns
        formats: Extension configuration (defaults if None)

    Returns:
        Absolute paths in input order, without duplicates
    """
    formats = formats or FormatConfig()
    results: list[Path] = []
    seen: set[str] = set()

    def add(path: Path) -> None:
        path = path.absolute()
        key = os.path.normcase(os.path.normpath(path))
        if key not in seen:
            seen.add(key)
            results.append(path)

    for raw in raw_inputs:
        text = str(raw).strip().strip('"')
        if not text:
            continue
        path = Path(text)

        if path.is_file():
            add(path)
        elif path.is_dir():
            for entry in _directory_files(path, formats):
                add(entry)
        elif _has_glob_magic(text):
            for match in sorted(glob.glob(text)):
                match_path = Path(match)
                if _supported(match_path, formats):
                    add(match_path)

    return results
