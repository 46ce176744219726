"""High-level orchestration for batch Markdown conversion."""

from __future__ import annotations

from typing import Callable, ContextManager, Iterable, List, Optional, Sequence

from .document import assemble
from .errors import ArgumentError, InputReadError, OutputWriteError
from .models import ConversionJob, ConversionOptions, ConversionSummary, JobResult
from .parser import markdown_to_html
from .preview import Launcher, preview_file, resolve_launcher
from .progress import TerminalProgress
from .writer import ProgressCallback, write_with_progress

ProgressFactory = Callable[[ConversionJob], ContextManager[ProgressCallback]]
Echo = Callable[[str], None]


def _terminal_progress(job: ConversionJob) -> TerminalProgress:
    return TerminalProgress(enabled=job.options.show_progress)


def build_jobs(
    inputs: Sequence[str],
    outputs: Sequence[str],
    options: ConversionOptions,
) -> List[ConversionJob]:
    """Pair inputs with outputs by position."""

    if not inputs:
        raise ArgumentError("At least one input file is required.")
    if len(inputs) != len(outputs):
        raise ArgumentError(
            "Number of input and output files must match"
            f" ({len(inputs)} inputs, {len(outputs)} outputs)."
        )
    return [
        ConversionJob(input_path=str(src), output_path=str(dest), options=options)
        for src, dest in zip(inputs, outputs)
    ]


def read_markdown(path: str) -> str:
    """Read an input file as UTF-8 text, raising ``InputReadError``."""

    try:
        with open(path, "r", encoding="utf-8", newline="") as handle:
            return handle.read()
    except UnicodeDecodeError as exc:
        raise InputReadError(path, "not valid UTF-8 text") from exc
    except OSError as exc:
        raise InputReadError(path, exc.strerror or str(exc)) from exc


def render_document(job: ConversionJob, markdown_text: str) -> str:
    """Return the complete HTML document for ``job``."""

    body = markdown_to_html(markdown_text)
    return assemble(body, job.effective_title, job.options.css_path)


def convert_file(
    job: ConversionJob,
    *,
    launcher: Optional[Launcher] = None,
    progress_factory: Optional[ProgressFactory] = None,
    echo: Echo = print,
) -> JobResult:
    """Read, render and write a single job, then optionally preview it."""

    markdown_text = read_markdown(job.input_path)
    payload = render_document(job, markdown_text).encode("utf-8")

    factory = progress_factory or _terminal_progress
    try:
        with factory(job) as on_progress:
            bytes_written = write_with_progress(
                job.output_file,
                payload,
                chunk_size=job.options.chunk_size,
                on_progress=on_progress,
            )
    except OSError as exc:
        raise OutputWriteError(
            job.output_path, exc.strerror or str(exc)
        ) from exc

    echo(f"Conversion successful: {job.input_path} -> {job.output_path}")

    preview_launched = False
    if job.options.preview:
        preview_launched = preview_file(job.output_path, launcher)

    return JobResult(
        job=job,
        bytes_written=bytes_written,
        preview_launched=preview_launched,
    )


def run_batch(
    jobs: Iterable[ConversionJob],
    *,
    launcher: Optional[Launcher] = None,
    progress_factory: Optional[ProgressFactory] = None,
    echo: Echo = print,
) -> ConversionSummary:
    """Convert ``jobs`` in order, stopping at the first read or write error."""

    jobs = list(jobs)
    if launcher is None and any(job.options.preview for job in jobs):
        launcher = resolve_launcher()

    summary = ConversionSummary()
    for job in jobs:
        result = convert_file(
            job,
            launcher=launcher,
            progress_factory=progress_factory,
            echo=echo,
        )
        summary.results.append(result)
    return summary


__all__ = [
    "build_jobs",
    "convert_file",
    "read_markdown",
    "render_document",
    "run_batch",
]
