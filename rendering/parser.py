"""Markdown to HTML fragment conversion backed by markdown-it-py."""

from __future__ import annotations

try:
    from markdown_it import MarkdownIt  # type: ignore[import-not-found]
except ImportError as exc:  # pragma: no cover - surfaced at runtime
    raise SystemExit(
        "Missing dependency 'markdown-it-py'. Install with pip install"
        " markdown-it-py"
    ) from exc

_PARSER = MarkdownIt("commonmark").enable("strikethrough")


def markdown_to_html(markdown_text: str) -> str:
    """Render CommonMark plus ``~~strikethrough~~`` into an HTML fragment."""

    return _PARSER.render(markdown_text)


__all__ = ["markdown_to_html"]
