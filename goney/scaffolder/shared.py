"""Project-wide DTO and model files referenced by global-mode modules.

Both files are singletons: they are written the first time a global-mode
generation runs in a project and never touched again, so hand edits survive
later runs.
"""

from __future__ import annotations

from pathlib import Path

from .models import GenerationContext
from .templates import TemplateRenderer

SHARED_FILES: tuple[tuple[str, str], ...] = (
    ("shared/dto_base.go.j2", "src/common/dto/base.go"),
    ("shared/model_base.go.j2", "src/common/models/base.go"),
)


class SharedArtifacts:
    """Creates the shared ``src/common`` files when they are missing."""

    def __init__(self, renderer: TemplateRenderer, context: GenerationContext) -> None:
        self.renderer = renderer
        self.context = context

    def paths(self) -> list[Path]:
        return [self.context.root / rel for _, rel in SHARED_FILES]

    async def ensure(self) -> list[Path]:
        """Write each shared file that does not exist yet.

        Returns the paths that were created by this call; existing files are
        left byte-for-byte untouched.
        """
        created: list[Path] = []
        for template, rel in SHARED_FILES:
            out = self.context.root / rel
            content = self.renderer.render(template, {"go_module": self.context.go_module})
            if await self.renderer.emitter.emit_if_absent(out, content):
                created.append(out)
        return created
