"""CLI application entry point for fntxml.

This module provides the main CLI interface using Typer.
"""

import os
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from fntxml import __version__
from fntxml.cli.output import (
    console,
    print_cancellation_notice,
    print_error,
    print_file_result,
    print_header,
    print_processing_info,
    print_step,
    print_summary,
)
from fntxml.config import FntXmlSettings, LoggingConfig, ProcessingConfig
from fntxml.core import BatchConverter
from fntxml.io import expand_inputs
from fntxml.utils import FileResult, configure_logging

# Exit codes
EXIT_OK = 0
EXIT_FAILED = 1
EXIT_NO_INPUTS = 2
EXIT_INTERRUPTED = 130

# Create the Typer app
app = typer.Typer(
    name="fntxml",
    help="Convert FNT bitmap-font descriptors to XML and back.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]fntxml[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def convert(
    inputs: Annotated[
        list[str],
        typer.Argument(
            help="FNT/XML files, directories or glob patterns",
            show_default=False,
        ),
    ],
    workers: Annotated[
        int,
        typer.Option(
            "--workers",
            "-j",
            help="Number of parallel workers (1 = sequential, 0 = one per CPU)",
            min=0,
        ),
    ] = 1,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str | None,
        typer.Option(
            "--log-level",
            help="Log to stderr at this level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Only report failures",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Convert .fnt files to .xml and .xml files back to .fnt.

    Each output is written next to its input with the other extension. Files
    with any other extension are skipped. A failed file does not stop the
    rest of the batch.

    Example:
        fntxml fonts/ extra/*.xml

    Exits with status 1 if any file failed, 2 if no inputs were found.
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=EXIT_FAILED)

    try:
        settings = FntXmlSettings(
            processing=ProcessingConfig(
                max_workers=workers or None,
            ),
            logging=LoggingConfig(
                log_file=log_file,
                log_level=log_level,
            ),
        )
    except ValidationError as e:
        print_error("Invalid options", details=str(e))
        raise typer.Exit(code=EXIT_FAILED) from None

    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    paths = expand_inputs(inputs, settings.formats)
    if not paths:
        print_error(
            "No .fnt or .xml files found in the provided inputs.",
            details=f"Looked at: {', '.join(inputs)}",
        )
        raise typer.Exit(code=EXIT_NO_INPUTS)

    if not quiet:
        print_header(__version__)
        actual_workers = settings.processing.max_workers or os.cpu_count() or 1
        print_step("Converting")
        print_processing_info(
            len(paths), actual_workers, is_auto=settings.processing.max_workers is None
        )

    def report(result: FileResult) -> None:
        if not quiet or not result.succeeded:
            print_file_result(result, verbose=verbose)

    converter = BatchConverter(settings, logger=logger)
    try:
        stats = converter.convert(paths, progress_callback=report)
    except KeyboardInterrupt:
        if not quiet:
            print_cancellation_notice()
        raise typer.Exit(code=EXIT_INTERRUPTED) from None  # Standard Unix SIGINT exit code

    if not quiet:
        print_summary(stats)

    if not stats.succeeded:
        raise typer.Exit(code=EXIT_FAILED)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
