"""Wrap rendered HTML fragments into standalone documents."""

from __future__ import annotations

from typing import Optional

DOCUMENT_HEAD = (
    "<!DOCTYPE html>\n"
    '<html lang="en">\n'
    "<head>\n"
    '<meta charset="UTF-8">\n'
)
DOCUMENT_FOOT = "\n</body>\n</html>\n"


def _read_stylesheet(css_path: str) -> Optional[str]:
    """Return the stylesheet text unchanged, or None when it cannot be read."""

    try:
        with open(css_path, "r", encoding="utf-8", newline="") as handle:
            return handle.read()
    except (OSError, UnicodeDecodeError):
        return None


def style_markup(css_path: Optional[str]) -> str:
    """Return an inline ``<style>`` block, a ``<link>`` fallback, or ''."""

    if css_path is None:
        return ""
    css_content = _read_stylesheet(css_path)
    if css_content is None:
        return f'<link rel="stylesheet" href="{css_path}">\n'
    return f"<style>\n{css_content}\n</style>\n"


def assemble(body: str, title: str, css_path: Optional[str] = None) -> str:
    """Build a complete HTML document around ``body``.

    The title is inserted as-is and the body is trusted parser output, so
    neither is escaped. An unreadable ``css_path`` degrades to a stylesheet
    link instead of raising.
    """

    parts = [
        DOCUMENT_HEAD,
        f"<title>{title}</title>\n",
        style_markup(css_path),
        "</head>\n<body>\n",
        body,
        DOCUMENT_FOOT,
    ]
    return "".join(parts)


__all__ = ["assemble", "style_markup"]
