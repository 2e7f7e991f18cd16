"""Batch conversion orchestration.

Each input file is an independent unit of work: it is decoded, re-encoded in
the other format and written, or it fails on its own without affecting the
rest of the batch. Files are processed sequentially by default and across a
ProcessPoolExecutor when more workers are requested.

Key components:
- convert_file: Top-level picklable function converting one file
- BatchConverter: Runs a list of files and collects statistics
"""

import time
import traceback
from collections.abc import Callable, Sequence
from concurrent.futures import ProcessPoolExecutor, as_completed
from pathlib import Path
from typing import Any

import structlog

from fntxml.config import FntXmlSettings, FormatConfig
from fntxml.io import FontFileReader, FontFileWriter
from fntxml.utils import ConversionLogger, ConversionStats, FileResult


def convert_file(path: str, format_dict: dict[str, Any]) -> dict[str, Any]:
    """Convert a single file to the other format.

    Top-level function designed to be picklable for use with ProcessPoolExecutor.

    Args:
        path: Input file path
        format_dict: Serialized format configuration

    Returns:
        Serialized FileResult with status "converted", "skipped" or "failed"
    """
    start_time = time.time()
    formats = FormatConfig(**format_dict)
    input_path = Path(path)

    source_format = formats.detect_format(input_path)
    if source_format is None:
        return FileResult(
            input_path=path,
            status="skipped",
            error=f"unsupported extension '{input_path.suffix or '(none)'}'",
        ).to_dict()

    try:
        model = FontFileReader(input_path, formats).load()
        output_path = FontFileWriter.get_output_path(input_path, formats)
        FontFileWriter(
            model,
            output_path,
            formats.target_format(source_format),
            formats,
        ).save()

        return FileResult(
            input_path=path,
            status="converted",
            source_format=source_format.value,
            output_path=str(output_path),
            glyph_count=len(model.glyphs),
            trailing_bytes=len(model.trailing_bytes),
            duration_ms=(time.time() - start_time) * 1000,
        ).to_dict()

    except Exception as e:
        return FileResult(
            input_path=path,
            status="failed",
            source_format=source_format.value,
            error=str(e),
            error_type=type(e).__name__,
            traceback=traceback.format_exc(),
            duration_ms=(time.time() - start_time) * 1000,
        ).to_dict()


class BatchConverter:
    """Converts a batch of FNT/XML files.

    Example:
        converter = BatchConverter(FntXmlSettings())
        stats = converter.convert([Path("a.fnt"), Path("b.xml")])
        if not stats.succeeded:
            ...
    """

    def __init__(self, config: FntXmlSettings, logger: Any | None = None) -> None:
        """Initialize the converter.

        Args:
            config: Application settings
            logger: Bound structlog logger (module logger if None)
        """
        self.config = config
        self.logger = logger or structlog.get_logger("fntxml")

    def convert(
        self,
        paths: Sequence[Path],
        max_workers: int | None = None,
        progress_callback: Callable[[FileResult], None] | None = None,
    ) -> ConversionStats:
        """Convert every file in the batch.

        Args:
            paths: Files to convert, in reporting order
            max_workers: Worker processes (None = config value; 1 = sequential)
            progress_callback: Optional callback invoked with each FileResult,
                in input order

        Returns:
            ConversionStats with per-file results, counts and timing
        """
        if max_workers is None:
            max_workers = self.config.processing.max_workers

        conversion_logger = ConversionLogger(self.logger)
        stats = conversion_logger.stats
        stats.start_time = time.time()

        format_dict = self.config.formats.model_dump()
        self.logger.info("Starting conversion", files=len(paths), max_workers=max_workers)

        def finish(result: FileResult) -> None:
            conversion_logger.record(result)
            if progress_callback is not None:
                progress_callback(result)

        if max_workers == 1 or len(paths) <= 1:
            for path in paths:
                conversion_logger.log_file_start(str(path), self._format_name(path))
                finish(FileResult.from_dict(convert_file(str(path), format_dict)))
        else:
            for result in self._convert_parallel(
                paths, format_dict, max_workers, conversion_logger
            ):
                finish(result)

        stats.end_time = time.time()
        self.logger.info(
            "Conversion complete",
            converted=stats.converted_count,
            skipped=stats.skipped_count,
            errors=stats.error_count,
            duration_seconds=round(stats.duration_seconds, 2),
        )
        return stats

    def _convert_parallel(
        self,
        paths: Sequence[Path],
        format_dict: dict[str, Any],
        max_workers: int | None,
        conversion_logger: ConversionLogger,
    ) -> list[FileResult]:
        """Convert files in worker processes, returning results in input order."""
        results: dict[int, FileResult] = {}

        with ProcessPoolExecutor(max_workers=max_workers) as executor:
            pending = {}
            for index, path in enumerate(paths):
                conversion_logger.log_file_start(str(path), self._format_name(path))
                pending[executor.submit(convert_file, str(path), format_dict)] = index

            try:
                for future in as_completed(pending):
                    index = pending[future]
                    try:
                        results[index] = FileResult.from_dict(future.result())
                    except Exception as e:
                        # Executor-level error
                        results[index] = FileResult(
                            input_path=str(paths[index]),
                            status="failed",
                            error=str(e),
                            error_type=type(e).__name__,
                            traceback=traceback.format_exc(),
                        )
            except KeyboardInterrupt:
                self.logger.info("Cancellation requested by user")
                executor.shutdown(wait=True, cancel_futures=True)
                raise

        return [results[index] for index in range(len(paths))]

    def _format_name(self, path: Path) -> str | None:
        font_format = self.config.formats.detect_format(path)
        return font_format.value if font_format else None
