"""Jinja2 template rendering for Go code generation.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``goney/scaffolder/templates/`` directory and renders them with a flat
mapping of placeholder bindings.  Templates only substitute values: any
conditional content (an import line, a type prefix) is chosen by the caller
and bound as a plain string.

Rendering is strict.  A placeholder without a binding raises
:class:`TemplateRenderError` instead of leaking into the generated source.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateNotFound,
    UndefinedError,
)

from .emitter import FileEmitter


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


class TemplateRenderError(Exception):
    """Raised when a template is missing or references an unbound placeholder."""

    def __init__(self, template: str, message: str) -> None:
        self.template = template
        super().__init__(f"{template}: {message}")


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for Go scaffolding.

    The renderer discovers ``.j2`` template files under a configurable
    template directory.  Written output goes through a :class:`FileEmitter`
    so that filesystem failures are reported rather than raised.
    """

    def __init__(
        self,
        template_dir: str | Path | None = None,
        emitter: FileEmitter | None = None,
    ) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.emitter = emitter or FileEmitter()
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=False,
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        # Register custom filters
        self.env.filters["slugify"] = _slugify_filter

    # -- Single template rendering -----------------------------------------

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided bindings.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"module/controller.go.j2"``).
            context: Placeholder bindings available inside the template.

        Returns:
            The rendered template content as a string.

        Raises:
            TemplateRenderError: If the template does not exist or uses a
                placeholder missing from *context*.
        """
        try:
            template = self.env.get_template(template_path)
        except TemplateNotFound as exc:
            raise TemplateRenderError(template_path, "template not found") from exc
        try:
            return template.render(**context)
        except UndefinedError as exc:
            raise TemplateRenderError(template_path, f"unbound placeholder ({exc.message})") from exc

    # -- File-based rendering (async) --------------------------------------

    async def render_to_file(
        self,
        template_path: str,
        output_path: str | Path,
        context: dict[str, Any],
    ) -> Path:
        """Render a template and write the result to *output_path*.

        Parent directories are created automatically.  A failed write is
        reported by the emitter; the output path is returned either way.
        """
        content = self.render(template_path, context)
        out = Path(output_path)
        await self.emitter.emit(out, content)
        return out


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------

def _slugify_filter(value: str) -> str:
    """Convert a string to a URL/filename-safe slug."""
    slug = re.sub(r"[^a-z0-9]+", "-", value.lower().strip())
    return slug.strip("-")

