"""Shared fixtures for md2html tests."""

from contextlib import nullcontext
from pathlib import Path
from typing import List

import pytest

from rendering.models import WriteProgress


class RecordingLauncher:
    """Stands in for a platform launcher and remembers what it opened."""

    def __init__(self, result: bool = True) -> None:
        self.opened: List[str] = []
        self.result = result

    def open(self, path) -> bool:
        self.opened.append(str(path))
        return self.result


class ProgressRecorder:
    def __init__(self) -> None:
        self.percents: List[int] = []

    def __call__(self, progress: WriteProgress) -> None:
        self.percents.append(progress.percent)


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Run every test from an empty directory with no config override."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("MD2HTML_CONFIG", raising=False)
    return tmp_path


@pytest.fixture
def launcher():
    return RecordingLauncher()


@pytest.fixture
def progress_recorder():
    return ProgressRecorder()


@pytest.fixture
def quiet_progress(progress_recorder):
    """Progress factory that records percentages instead of drawing a bar."""
    return lambda job: nullcontext(progress_recorder)


@pytest.fixture
def write_markdown(tmp_path):
    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write
