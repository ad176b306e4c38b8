"""Best-effort file emission.

Every generated file goes through :class:`FileEmitter`.  A write either
succeeds or is reported on stderr and recorded as failed; it never raises, so
one bad path does not stop the remaining artifacts of a request.  There is no
locking and no atomic rename: two concurrent writers to the same path race
and the last one wins.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from ..utils import print_error
from .models import GenerationReport


class FileEmitter:
    """Writes rendered content to disk and keeps a :class:`GenerationReport`."""

    def __init__(self, dir_mode: int = 0o755, report: GenerationReport | None = None) -> None:
        self.dir_mode = dir_mode
        self.report = report if report is not None else GenerationReport()

    def reset(self) -> GenerationReport:
        """Start a fresh report and return the previous one."""
        previous = self.report
        self.report = GenerationReport()
        return previous

    async def emit(self, path: str | Path, content: str) -> bool:
        """Create parent directories, then create or truncate *path* and write.

        Returns ``True`` on success.  On ``OSError`` the failure is printed
        with the offending path, recorded, and ``False`` is returned.
        """
        out = Path(path)
        self.report.record_attempt(out)
        try:
            await asyncio.to_thread(_write_file, out, content, self.dir_mode)
        except OSError as exc:
            reason = exc.strerror or str(exc)
            print_error(f"Error writing {out}: {reason}")
            self.report.record_failure(out, reason)
            return False
        return True

    async def emit_if_absent(self, path: str | Path, content: str) -> bool:
        """Write *path* only when nothing exists there yet.

        Returns ``True`` when the file was created, ``False`` when it already
        existed or the write failed.
        """
        out = Path(path)
        if await asyncio.to_thread(out.exists):
            return False
        return await self.emit(out, content)

    async def make_dirs(self, path: str | Path) -> bool:
        """Create a directory tree, reporting (not raising) failures."""
        target = Path(path)
        try:
            await asyncio.to_thread(_make_tree, target, self.dir_mode)
        except OSError as exc:
            reason = exc.strerror or str(exc)
            print_error(f"Error creating directory {target}: {reason}")
            self.report.record_dir_failure(target, reason)
            return False
        return True


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _make_tree(path: Path, dir_mode: int) -> None:
    """Create *path* and every missing ancestor with *dir_mode*."""
    for directory in (*reversed(path.parents), path):
        if not directory.is_dir():
            directory.mkdir(mode=dir_mode, exist_ok=True)


def _write_file(path: Path, content: str, dir_mode: int) -> None:
    """Synchronous helper: create parent dirs and write content."""
    _make_tree(path.parent, dir_mode)
    path.write_text(content, encoding="utf-8")
