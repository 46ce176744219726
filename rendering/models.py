"""Shared dataclasses for Markdown conversion runs."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

DEFAULT_CHUNK_SIZE = 8192


@dataclass(slots=True)
class ConversionOptions:
    """Options shared by every job in a single invocation."""

    title: Optional[str] = None
    css_path: Optional[str] = None
    preview: bool = False
    chunk_size: int = DEFAULT_CHUNK_SIZE
    show_progress: bool = True


@dataclass(slots=True)
class ConversionJob:
    """One input/output pair, kept exactly as supplied on the command line."""

    input_path: str
    output_path: str
    options: ConversionOptions

    @property
    def effective_title(self) -> str:
        if self.options.title is not None:
            return self.options.title
        return self.input_path

    @property
    def output_file(self) -> Path:
        return Path(self.output_path)


@dataclass(slots=True)
class WriteProgress:
    """Bytes written so far for a single destination file."""

    written: int
    total: int

    @property
    def percent(self) -> int:
        if self.total <= 0:
            return 100
        return max(0, min(100, self.written * 100 // self.total))


@dataclass(slots=True)
class JobResult:
    """Outcome of a successfully converted job."""

    job: ConversionJob
    bytes_written: int
    preview_launched: bool = False


@dataclass(slots=True)
class ConversionSummary:
    """Ordered results of a batch run."""

    results: List[JobResult] = field(default_factory=list)

    @property
    def output_paths(self) -> List[Path]:
        return [result.job.output_file for result in self.results]
