"""goney configuration.

Centralised, typed configuration for the CLI.  Settings use Pydantic v2
models so they are validated at construction time and can be overridden
from environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


class Config(BaseModel):
    """Global goney configuration.

    Created once by the CLI entry point and passed to every generator and
    to the dev-server runner.
    """

    project_root: Path = Field(
        default_factory=Path.cwd,
        description="Directory commands run against (the Go project root)",
    )
    default_go_module: str = Field(
        default="myapp",
        min_length=1,
        description="Module path used when go.mod is missing or unreadable",
    )
    go_binary: str = Field(default="go", description="Go toolchain executable")
    dir_mode: int = Field(
        default=0o755, ge=0, le=0o777, description="Permission bits for created directories"
    )
    default_port: str = Field(default="8080", description="HTTP port baked into generated files")
    go_version: str = Field(default="1.23", description="Go version declared in go.mod")

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def go_mod_path(self) -> Path:
        """Path to the project's ``go.mod``."""
        return self.project_root / "go.mod"

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            GONEY_PROJECT_ROOT, GONEY_DEFAULT_MODULE, GONEY_GO_BINARY,
            GONEY_DEFAULT_PORT.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("GONEY_PROJECT_ROOT"):
            kwargs["project_root"] = Path(os.environ["GONEY_PROJECT_ROOT"])
        if os.environ.get("GONEY_DEFAULT_MODULE"):
            kwargs["default_go_module"] = os.environ["GONEY_DEFAULT_MODULE"]
        if os.environ.get("GONEY_GO_BINARY"):
            kwargs["go_binary"] = os.environ["GONEY_GO_BINARY"]
        if os.environ.get("GONEY_DEFAULT_PORT"):
            kwargs["default_port"] = os.environ["GONEY_DEFAULT_PORT"]
        return cls(**kwargs)
