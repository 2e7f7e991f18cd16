"""Logging utilities for fntxml."""

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import structlog

# Handlers installed by configure_logging carry this attribute so a second
# call replaces them instead of duplicating output.
_HANDLER_MARK = "_fntxml_handler"


@dataclass
class FileResult:
    """Outcome of converting one input file.

    Attributes:
        input_path: File that was processed
        status: "converted", "skipped" or "failed"
        source_format: Format of the input ("fnt"/"xml"), None when skipped
        output_path: File written, None unless converted
        glyph_count: Glyphs in the converted model
        trailing_bytes: Number of preserved trailing bytes
        error: Error message for failed files, skip reason for skipped ones
        error_type: Exception class name for failed files
        traceback: Formatted traceback for failed files
        duration_ms: Time spent on the file
    """

    input_path: str
    status: str
    source_format: str | None = None
    output_path: str | None = None
    glyph_count: int = 0
    trailing_bytes: int = 0
    error: str | None = None
    error_type: str | None = None
    traceback: str | None = None
    duration_ms: float = 0.0

    @property
    def succeeded(self) -> bool:
        """True unless the conversion failed; skipped files count as success."""
        return self.status != "failed"

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {
            "input_path": self.input_path,
            "status": self.status,
            "source_format": self.source_format,
            "output_path": self.output_path,
            "glyph_count": self.glyph_count,
            "trailing_bytes": self.trailing_bytes,
            "error": self.error,
            "error_type": self.error_type,
            "traceback": self.traceback,
            "duration_ms": self.duration_ms,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FileResult":
        """Deserialize from dictionary."""
        return cls(**data)


@dataclass
class ConversionStats:
    """Statistics from a conversion run."""

    converted_count: int = 0
    skipped_count: int = 0
    error_count: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    results: list[FileResult] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate processing duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def succeeded(self) -> bool:
        """True if no file failed."""
        return self.error_count == 0


def configure_logging(
    log_file: Path | None = None,
    console_level: str | None = None,
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    The CLI reports results through Rich, so structured logs only reach the
    console when a console level is requested.

    Args:
        log_file: Path to log file (no file logging if None)
        console_level: Logging level for stderr output (no console logging if None)
        file_level: Logging level for file output
        quiet: If True, suppress console logging

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if getattr(handler, _HANDLER_MARK, False):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        setattr(file_handler, _HANDLER_MARK, True)
        root_logger.addHandler(file_handler)

    if console_level is not None and not quiet:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        setattr(console_handler, _HANDLER_MARK, True)
        root_logger.addHandler(console_handler)

    if log_file is None and (console_level is None or quiet):
        # keeps logging's last-resort stderr handler from printing events
        null_handler = logging.NullHandler()
        setattr(null_handler, _HANDLER_MARK, True)
        root_logger.addHandler(null_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("fntxml")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class ConversionLogger:
    """Logger for tracking conversion progress and statistics."""

    def __init__(self, logger: Any) -> None:
        self._logger = logger
        self._stats = ConversionStats()

    def log_file_start(self, path: str, source_format: str | None) -> None:
        """Log start of file conversion."""
        self._logger.debug("Converting file", path=path, format=source_format)

    def log_file_converted(self, result: FileResult) -> None:
        """Log successful file conversion."""
        self._logger.info(
            "File converted",
            path=result.input_path,
            output=result.output_path,
            format=result.source_format,
            glyphs=result.glyph_count,
            trailing_bytes=result.trailing_bytes,
            duration_ms=round(result.duration_ms, 2),
        )
        self._stats.converted_count += 1

    def log_file_skipped(self, result: FileResult) -> None:
        """Log skipped file."""
        self._logger.info("File skipped", path=result.input_path, reason=result.error)
        self._stats.skipped_count += 1

    def log_file_error(self, result: FileResult) -> None:
        """Log file conversion error."""
        self._logger.error(
            "File conversion failed",
            path=result.input_path,
            error=result.error,
            error_type=result.error_type,
            traceback=result.traceback,
        )
        self._stats.error_count += 1
        self._stats.errors.append((result.input_path, result.error or ""))

    def record(self, result: FileResult) -> None:
        """Log a file result according to its status and keep it."""
        if result.status == "converted":
            self.log_file_converted(result)
        elif result.status == "skipped":
            self.log_file_skipped(result)
        else:
            self.log_file_error(result)
        self._stats.results.append(result)

    @property
    def stats(self) -> ConversionStats:
        """Get current conversion statistics."""
        return self._stats
