"""Terminal progress bar fed by ``WriteProgress`` callbacks."""

from __future__ import annotations

from types import TracebackType
from typing import Any, Optional, TextIO

try:
    from tqdm import tqdm  # type: ignore[import-not-found]
except ImportError as exc:  # pragma: no cover - surfaced at runtime
    raise SystemExit(
        "Missing dependency 'tqdm'. Install with pip install tqdm"
    ) from exc

from .models import WriteProgress

BAR_FORMAT = "[{bar:40}] {n_fmt}%"


class TerminalProgress:
    """Percentage bar for one file write, closed when the write finishes."""

    def __init__(
        self,
        *,
        description: Optional[str] = None,
        enabled: bool = True,
        stream: Optional[TextIO] = None,
    ) -> None:
        self._bar: Any = tqdm(
            total=100,
            desc=description,
            bar_format=BAR_FORMAT,
            ascii=" =",
            disable=not enabled,
            file=stream,
            leave=True,
        )
        self.last_percent = 0

    def __call__(self, progress: WriteProgress) -> None:
        percent = progress.percent
        if percent > self.last_percent:
            self._bar.update(percent - self.last_percent)
            self.last_percent = percent

    def close(self) -> None:
        self._bar.close()

    def __enter__(self) -> "TerminalProgress":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()


__all__ = ["BAR_FORMAT", "TerminalProgress"]
