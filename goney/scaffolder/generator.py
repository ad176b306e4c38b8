"""Project scaffolding for ``goney new``.

Takes a ``ProjectConfig`` and generates a runnable Go project: a gin-based
core application with a welcome page and health check, environment-driven
configuration, an application module, Docker files and the empty NestJS-style
directory tree that ``generate crud`` fills in later.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from .. import __version__
from ..utils import print_info, print_success
from .emitter import FileEmitter
from .models import GenerationReport
from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Project layout
# ---------------------------------------------------------------------------

PROJECT_DIRS: tuple[str, ...] = (
    "src/modules",
    "src/common/dto",
    "src/common/guards",
    "src/common/interceptors",
    "src/common/decorators",
    "src/common/enums",
    "src/common/middleware",
    "src/common/models",
    "src/config",
    "pkg/core",
    "docs",
    "tests",
)

# (template, output path relative to the project root), in emission order.
PROJECT_FILES: tuple[tuple[str, str], ...] = (
    ("project/main.go.j2", "main.go"),
    ("project/config.go.j2", "src/config/config.go"),
    ("project/application.go.j2", "pkg/core/application.go"),
    ("project/go.mod.j2", "go.mod"),
    ("project/env.j2", ".env"),
    ("project/env.j2", ".env.example"),
    ("project/Dockerfile.j2", "Dockerfile"),
    ("project/docker-compose.yml.j2", "docker-compose.yml"),
    ("project/app.module.go.j2", "src/app.module.go"),
)


# ---------------------------------------------------------------------------
# Configuration model
# ---------------------------------------------------------------------------


class ProjectConfig(BaseModel):
    """Pydantic model describing the project to scaffold."""

    name: str = Field(..., min_length=1, description="Project directory and Go module name")
    port: str = Field(default="8080", description="Default HTTP port")
    go_version: str = Field(default="1.23", description="Go version for go.mod and the Dockerfile")


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Creates ``<output_dir>/<name>/`` with the directory tree and base files.

    Every step is best-effort: a directory or file that cannot be written is
    reported on stderr and the remaining steps still run.
    """

    def __init__(self, config: ProjectConfig, renderer: TemplateRenderer | None = None) -> None:
        self.config = config
        self.renderer = renderer or TemplateRenderer(emitter=FileEmitter())
        self.report = GenerationReport()

    # -- Public API --------------------------------------------------------

    async def generate(self, output_dir: str | Path) -> Path:
        """Generate the project and print the getting-started hint.

        Args:
            output_dir: Parent directory.  A subdirectory named after the
                project is created inside it.

        Returns:
            Path to the generated project root.
        """
        project_root = Path(output_dir) / self.config.name
        emitter = self.renderer.emitter
        emitter.reset()

        context = self._build_context()

        await self._create_directory_structure(project_root)

        for template, rel in PROJECT_FILES:
            ctx = context
            if rel == ".env.example":
                ctx = {**context, "db_name": f"{self.config.name}_example"}
            await self.renderer.render_to_file(template, project_root / rel, ctx)

        self.report = emitter.reset()
        self._print_next_steps()
        return project_root

    # -- Context building --------------------------------------------------

    def _build_context(self) -> dict[str, Any]:
        """Build the Jinja2 template context from the project config."""
        return {
            "project_name": self.config.name,
            "go_module": self.config.name,
            "db_name": self.config.name,
            "port": self.config.port,
            "go_version": self.config.go_version,
            "goney_version": __version__,
        }

    # -- Directory structure -----------------------------------------------

    async def _create_directory_structure(self, root: Path) -> None:
        """Create the NestJS-style project directory tree."""
        for d in PROJECT_DIRS:
            await self.renderer.emitter.make_dirs(root / d)

    # -- Output ------------------------------------------------------------

    def _print_next_steps(self) -> None:
        name = self.config.name
        print_success(f"Project {name} created")
        print_info(f"To start: cd {name} && goney start")
        print_info(f"Default port: {self.config.port}")
        print_info("Environment variables: .env")
        print_info("Modules go in src/modules/ (goney generate crud <name>)")
