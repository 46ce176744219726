"""Markdown to standalone HTML conversion helpers."""

from .document import assemble
from .errors import (
    ArgumentError,
    ConversionError,
    InputReadError,
    OutputWriteError,
)
from .models import (
    DEFAULT_CHUNK_SIZE,
    ConversionJob,
    ConversionOptions,
    ConversionSummary,
    JobResult,
    WriteProgress,
)
from .parser import markdown_to_html
from .pipeline import build_jobs, convert_file, run_batch
from .preview import open_in_default_viewer, resolve_launcher
from .writer import write_with_progress

__version__ = "1.0.0"

__all__ = [
    "DEFAULT_CHUNK_SIZE",
    "ArgumentError",
    "ConversionError",
    "ConversionJob",
    "ConversionOptions",
    "ConversionSummary",
    "InputReadError",
    "JobResult",
    "OutputWriteError",
    "WriteProgress",
    "assemble",
    "build_jobs",
    "convert_file",
    "markdown_to_html",
    "open_in_default_viewer",
    "resolve_launcher",
    "run_batch",
    "write_with_progress",
]
