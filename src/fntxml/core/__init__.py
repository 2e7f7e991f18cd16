"""Batch processing for fntxml.

Key functions:
- convert_file: Convert one file; safe to run in a worker process

Key classes:
- BatchConverter: Convert many files, collecting per-file results
"""

from fntxml.core.processor import BatchConverter, convert_file

__all__ = [
    "BatchConverter",
    "convert_file",
]
