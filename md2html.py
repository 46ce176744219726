"""Convert Markdown files into standalone HTML documents."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from config_loader import ConfigError, resolve_options
from rendering import (
    ArgumentError,
    ConversionSummary,
    InputReadError,
    OutputWriteError,
    __version__,
    build_jobs,
    run_batch,
)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Return CLI arguments for the Markdown conversion tool."""

    parser = argparse.ArgumentParser(
        prog="md2html",
        description="Convert Markdown files to HTML.",
    )
    parser.add_argument(
        "inputs",
        nargs="+",
        metavar="INPUT",
        help="Input Markdown file(s).",
    )
    parser.add_argument(
        "-o",
        "--output",
        dest="outputs",
        nargs="+",
        required=True,
        metavar="OUTPUT",
        help="Output HTML file(s), paired with the inputs by position.",
    )
    parser.add_argument(
        "--css",
        help="CSS file to include (inlined when readable, linked otherwise).",
    )
    parser.add_argument(
        "--title",
        help="Title of the HTML document (defaults to the input path).",
    )
    parser.add_argument(
        "--preview",
        action="store_true",
        help="Open the output HTML file(s) in the default viewer.",
    )
    parser.add_argument(
        "--config",
        help="Path to a JSON config file supplying option defaults.",
    )
    parser.add_argument(
        "--no-progress",
        dest="show_progress",
        action="store_const",
        const=False,
        default=None,
        help="Do not draw a progress bar while writing.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser.parse_args(argv)


def convert(args: argparse.Namespace) -> ConversionSummary:
    """Resolve options from ``args`` and run the batch."""

    options = resolve_options(
        args.config,
        title=args.title,
        css_path=args.css,
        preview=args.preview,
        show_progress=args.show_progress,
    )
    jobs = build_jobs(args.inputs, args.outputs, options)
    return run_batch(jobs)


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Entry point for the ``md2html`` CLI."""

    args = parse_args(argv)
    try:
        convert(args)
    except ConfigError as exc:
        raise SystemExit(f"Config error: {exc}") from exc
    except ArgumentError as exc:
        raise SystemExit(f"Argument error: {exc}") from exc
    except InputReadError as exc:
        raise SystemExit(f"Input error: {exc}") from exc
    except OutputWriteError as exc:
        raise SystemExit(f"Output error: {exc}") from exc


__all__ = ["convert", "main", "parse_args"]


if __name__ == "__main__":
    main()
