"""Generators for the legacy flat layout.

Artifacts go into shared top-level directories (``controllers/``,
``services/``, ``repositories/``, ``models/``, ``dto/``, ``enums/``), one Go
package per directory.  The repository is gorm-backed and the test suite
drives the service against a testify mock.
"""

from __future__ import annotations

from pathlib import Path

from ..utils import display_path, print_file_list, print_header, print_success
from .components import ComponentGenerator
from .emitter import FileEmitter
from .models import GenerationContext, GenerationReport, OptionSet, Strategy
from .names import derive_names
from .shared import SharedArtifacts
from .templates import TemplateRenderer


class LegacyGenerator:
    """Single-artifact and CRUD generation into the legacy directories."""

    strategy = Strategy.LEGACY_FLAT

    def __init__(
        self,
        context: GenerationContext,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.context = context
        self.renderer = renderer or TemplateRenderer(emitter=FileEmitter())
        self.components = ComponentGenerator(self.renderer, context)
        self.shared = SharedArtifacts(self.renderer, context)

    # -- Single artifacts ----------------------------------------------------

    async def generate_controller(self, name: str) -> list[Path]:
        """Controller plus the DTO file it references."""
        names = derive_names(name, self.strategy)
        options = OptionSet()
        paths = [
            await self.components.generate_controller(names, options, self.strategy),
            await self.components.generate_dto(names, options, self.strategy),
        ]
        print_success(f"Controller {names.class_name} created")
        return paths

    async def generate_service(self, name: str) -> list[Path]:
        """Service plus the model file it references."""
        names = derive_names(name, self.strategy)
        options = OptionSet()
        paths = [
            await self.components.generate_service(names, options, self.strategy),
            await self.components.generate_model(names, options, self.strategy),
        ]
        print_success(f"Service {names.class_name} created")
        return paths

    async def generate_repository(self, name: str) -> list[Path]:
        names = derive_names(name, self.strategy)
        paths = [await self.components.generate_repository(names, OptionSet(), self.strategy)]
        print_success(f"Repository {names.class_name} created")
        return paths

    # -- CRUD ----------------------------------------------------------------

    async def generate_crud(self, name: str, options: OptionSet | None = None) -> GenerationReport:
        """Full CRUD set in the legacy layout, then print the manifest."""
        options = options or OptionSet(crud=True)
        emitter = self.renderer.emitter
        emitter.reset()

        names = derive_names(name, self.strategy)
        print_header(f"Generating CRUD for {names.class_name}")

        if options.global_mode:
            await self.shared.ensure()

        gen = self.components
        await gen.generate_controller(names, options, self.strategy)
        await gen.generate_service(names, options, self.strategy)
        await gen.generate_repository(names, options, self.strategy)
        if options.emit_model:
            await gen.generate_model(names, options, self.strategy)
        if options.emit_dto:
            await gen.generate_dto(names, options, self.strategy)
        await gen.generate_enum(names, options, self.strategy)
        await gen.generate_test(names, options, self.strategy)

        report = emitter.reset()
        print_success(f"CRUD for {names.class_name} generated")
        print_file_list(
            "Files:",
            [display_path(p, self.context.root) for p in report.attempted],
        )
        return report
