"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with formatted per-file messages and a run summary.
"""

from rich.console import Console
from rich.text import Text

from fntxml.utils import ConversionStats, FileResult

console = Console()
error_console = Console(stderr=True)

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_SKIP = "-"  # Skipped
SYM_DOT = "·"  # Separator/secondary info

DIRECTION_LABELS = {
    "fnt": "FNT -> XML",
    "xml": "XML -> FNT",
}


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]fntxml[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_processing_info(file_count: int, workers: int, is_auto: bool = False) -> None:
    """Print batch configuration.

    Args:
        file_count: Number of input files
        workers: Number of parallel workers
        is_auto: Whether the count was auto-detected
    """
    auto_suffix = " (auto)" if is_auto else ""
    plural = "file" if file_count == 1 else "files"
    console.print(f"  {file_count} {plural} {SYM_DOT} {workers} workers{auto_suffix}")


def print_file_result(result: FileResult, verbose: bool = False) -> None:
    """Print the outcome of one file.

    Args:
        result: File result to report
        verbose: Show glyph counts and timing for converted files
    """
    if result.status == "converted":
        line = Text("  ")
        line.append(SYM_OK, style="green")
        line.append(f" {DIRECTION_LABELS.get(result.source_format or '', '')}: ")
        line.append(result.input_path)
        console.print(line)

        target = Text("    -> Wrote: ")
        target.append(result.output_path or "", style="bold")
        console.print(target)

        if result.trailing_bytes:
            verb = "Preserved" if result.source_format == "fnt" else "Wrote"
            console.print(f"    (Note) {verb} trailing bytes: {result.trailing_bytes}")
        if verbose:
            console.print(
                f"    {result.glyph_count} glyphs {SYM_DOT} {result.duration_ms:.1f}ms"
            )

    elif result.status == "skipped":
        line = Text("  ")
        line.append(SYM_SKIP, style="yellow")
        line.append(" Skipped: ")
        line.append(result.input_path)
        if result.error:
            line.append(f" ({result.error})", style="dim")
        console.print(line)

    else:
        line = Text("  ")
        line.append(SYM_ERR, style="bold red")
        line.append(" Failed: ")
        line.append(result.input_path)
        error_console.print(line)
        error_console.print(Text(f"    {result.error_type}: {result.error}"))


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_summary(stats: ConversionStats) -> None:
    """Print run summary.

    Args:
        stats: Statistics of the finished run
    """
    time_str = _format_time(stats.duration_seconds)

    if stats.succeeded:
        console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")
    else:
        console.print(f"\n[bold red]{SYM_ERR} Completed with errors[/bold red] in {time_str}")

    error_style = "red" if stats.error_count > 0 else "green"
    console.print(
        f"  {stats.converted_count} converted {SYM_DOT} {stats.skipped_count} skipped {SYM_DOT} "
        f"[{error_style}]{stats.error_count} errors[/{error_style}]"
    )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    error_console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        error_console.print(f"  {details}")


def print_cancellation_notice() -> None:
    """Print cancellation acknowledgment."""
    console.print(f"\n{SYM_DOT} Cancelled, waiting for in-progress files")
