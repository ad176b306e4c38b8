"""Shared utility functions for goney.

Provides async command execution, Go module discovery, file-system helpers
and Rich-based console reporting.  Progress and manifests go to stdout;
errors always go to stderr so that a caller can tell an unconditional
success summary apart from the individual failures behind it.
"""

from __future__ import annotations

import asyncio
import os
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.rule import Rule

console = Console()
err_console = Console(stderr=True)

# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


async def run_command(
    cmd: list[str],
    cwd: str | Path | None = None,
    timeout: int | None = 120,
    capture: bool = True,
    env: dict[str, str] | None = None,
) -> tuple[int, str, str]:
    """Run a command asynchronously without a shell.

    Args:
        cmd: Program and arguments.
        cwd: Working directory for the child process.
        timeout: Maximum wall-clock seconds before the process is killed.
            ``None`` waits for the process however long it runs.
        capture: Whether to capture stdout/stderr (if ``False`` they inherit
            the parent's streams).
        env: Optional extra environment variables merged on top of ``os.environ``.

    Returns:
        A ``(returncode, stdout, stderr)`` tuple.  If *capture* is ``False``
        the stdout/stderr strings will be empty.
    """
    merged_env: dict[str, str] | None = None
    if env:
        merged_env = {**os.environ, **env}

    stdout_pipe = asyncio.subprocess.PIPE if capture else None
    stderr_pipe = asyncio.subprocess.PIPE if capture else None

    process = await asyncio.create_subprocess_exec(
        *cmd,
        stdout=stdout_pipe,
        stderr=stderr_pipe,
        cwd=str(cwd) if cwd else None,
        env=merged_env,
    )

    try:
        stdout_bytes, stderr_bytes = await asyncio.wait_for(
            process.communicate(), timeout=timeout
        )
    except asyncio.TimeoutError:
        process.kill()
        await process.wait()
        return (
            -1,
            "",
            f"Command timed out after {timeout}s: {' '.join(cmd)}",
        )

    stdout_str = (stdout_bytes or b"").decode("utf-8", errors="replace").strip()
    stderr_str = (stderr_bytes or b"").decode("utf-8", errors="replace").strip()
    return (process.returncode or 0, stdout_str, stderr_str)


# ---------------------------------------------------------------------------
# Go module discovery
# ---------------------------------------------------------------------------


def read_go_module_name(root: str | Path, default: str = "myapp") -> str:
    """Return the module path declared on the first line of ``root/go.mod``.

    Falls back to *default* when the file is missing, unreadable, or its first
    line is not a ``module`` directive.

    Examples::

        module shop          -> "shop"
        module github.com/a/b -> "github.com/a/b"
    """
    go_mod = Path(root) / "go.mod"
    try:
        content = go_mod.read_text(encoding="utf-8")
    except OSError:
        return default

    lines = content.split("\n")
    if lines and lines[0].startswith("module "):
        return lines[0][len("module "):].strip()
    return default


# ---------------------------------------------------------------------------
# Path helpers
# ---------------------------------------------------------------------------


def display_path(path: str | Path, root: str | Path) -> str:
    """Render *path* relative to *root* when possible, POSIX-style."""
    p = Path(path)
    try:
        return p.relative_to(root).as_posix()
    except ValueError:
        return p.as_posix()


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_header(title: str, color: str = "bright_green") -> None:
    """Print a full-width rule announcing a generation run."""
    console.print(Rule(f"[bold {color}] {escape(title)} [/bold {color}]", style=color))


def print_file_list(title: str, files: list[str]) -> None:
    """Print a titled, indented list of file names."""
    console.print(f"[bold]{title}[/bold]")
    for name in files:
        console.print(f"   - {escape(name)}", highlight=False, soft_wrap=True)


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]", soft_wrap=True)


def print_info(message: str) -> None:
    """Print a cyan informational message."""
    console.print(f"[cyan]{escape(message)}[/cyan]", soft_wrap=True)


def print_error(message: str) -> None:
    """Print a red error message to stderr."""
    err_console.print(f"[bold red]{escape(message)}[/bold red]", soft_wrap=True)
