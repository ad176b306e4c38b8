"""``goney start``: tidy, build and run the Go project in the current directory.

The three steps run in sequence through :func:`goney.utils.run_command`.  The
first failing step raises :class:`DevServerError`; the built binary runs in
the foreground with inherited stdio until it exits.
"""

from __future__ import annotations

from pathlib import Path

from .config import Config
from .utils import console, print_info, run_command

BINARY_NAME = "app"


class DevServerError(Exception):
    """Raised when a step of the start pipeline fails."""

    def __init__(self, step: str, message: str) -> None:
        self.step = step
        super().__init__(f"{step}: {message}")


class DevServer:
    """Builds and runs the project rooted at ``config.project_root``."""

    def __init__(self, config: Config) -> None:
        self.config = config

    @property
    def binary_path(self) -> Path:
        return self.config.project_root / BINARY_NAME

    async def tidy(self) -> None:
        print_info("Installing dependencies...")
        await self._step("go mod tidy", [self.config.go_binary, "mod", "tidy"], timeout=300)

    async def build(self) -> None:
        print_info("Building application...")
        await self._step(
            "go build", [self.config.go_binary, "build", "-o", BINARY_NAME, "."], timeout=600
        )

    async def run(self) -> int:
        """Run the built binary in the foreground and return its exit code."""
        console.print(f"[bold green]Starting {BINARY_NAME}...[/bold green]")
        try:
            rc, _, _ = await run_command(
                [str(self.binary_path)],
                cwd=self.config.project_root,
                timeout=None,
                capture=False,
            )
        except FileNotFoundError as exc:
            raise DevServerError(f"./{BINARY_NAME}", "binary not found") from exc
        if rc != 0:
            raise DevServerError(f"./{BINARY_NAME}", f"exited with status {rc}")
        return rc

    async def start(self) -> int:
        if not self.config.go_mod_path.exists():
            raise DevServerError("start", f"no go.mod in {self.config.project_root}")
        await self.tidy()
        await self.build()
        return await self.run()

    async def _step(self, name: str, cmd: list[str], timeout: int) -> None:
        try:
            rc, _, stderr = await run_command(cmd, cwd=self.config.project_root, timeout=timeout)
        except FileNotFoundError as exc:
            raise DevServerError(name, f"{cmd[0]} not found") from exc
        if rc != 0:
            raise DevServerError(name, stderr or f"exited with status {rc}")
