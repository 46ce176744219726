"""Open written documents in the platform's default viewer."""

from __future__ import annotations

import os
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, Tuple

# Keyed by ``sys.platform`` prefix. An empty command hands the path to
# ``os.startfile`` so it never passes through cmd.exe parsing.
LAUNCHERS: Dict[str, Tuple[str, ...]] = {
    "linux": ("xdg-open",),
    "freebsd": ("xdg-open",),
    "openbsd": ("xdg-open",),
    "darwin": ("open",),
    "win32": (),
    "cygwin": ("cygstart",),
}


@dataclass(slots=True, frozen=True)
class Launcher:
    """Command prefix that hands a file to the desktop's default handler."""

    command: Tuple[str, ...]

    def argv(self, path: Path | str) -> list[str]:
        return [*self.command, str(path)]

    def _spawn(self, path: Path | str) -> None:
        if not self.command:
            os.startfile(str(path))  # type: ignore[attr-defined]
            return
        popen_kwargs: Dict[str, object] = {
            "stdin": subprocess.DEVNULL,
            "stdout": subprocess.DEVNULL,
            "stderr": subprocess.DEVNULL,
        }
        if os.name == "posix":
            popen_kwargs["start_new_session"] = True
        # The handle is dropped without waiting; CPython may emit a
        # ResourceWarning for the still-running child under -W default.
        subprocess.Popen(self.argv(path), **popen_kwargs)

    def open(self, path: Path | str) -> bool:
        """Spawn the viewer without waiting on it; report whether it started."""

        try:
            self._spawn(path)
        except (OSError, AttributeError) as exc:
            print(f"⚠️ Unable to open preview for {path}: {exc}", file=sys.stderr)
            return False
        return True


def resolve_launcher(platform: Optional[str] = None) -> Optional[Launcher]:
    """Return the launcher registered for ``platform`` (default: this host)."""

    platform = platform or sys.platform
    for prefix, command in LAUNCHERS.items():
        if platform.startswith(prefix):
            return Launcher(command=command)
    return None


def preview_file(path: Path | str, launcher: Optional[Launcher]) -> bool:
    """Open ``path`` with ``launcher``, warning when there is none."""

    if launcher is None:
        print(
            f"⚠️ Preview is not supported on {sys.platform}; skipping {path}",
            file=sys.stderr,
        )
        return False
    return launcher.open(path)


def open_in_default_viewer(path: Path | str) -> None:
    """Best-effort preview of ``path``; never raises."""

    preview_file(path, resolve_launcher())


__all__ = [
    "LAUNCHERS",
    "Launcher",
    "open_in_default_viewer",
    "preview_file",
    "resolve_launcher",
]
