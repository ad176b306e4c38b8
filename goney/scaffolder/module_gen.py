"""``generate crud`` for the flat module layout.

Every file of a module lands in ``src/modules/<package>/`` and shares one Go
package, so the controller, service and repository reference each other's
types unqualified.
"""

from __future__ import annotations

from ..utils import display_path, print_file_list, print_header, print_success
from .components import ComponentGenerator
from .emitter import FileEmitter
from .models import GenerationContext, GenerationReport, OptionSet, Strategy
from .names import derive_names
from .shared import SharedArtifacts
from .templates import TemplateRenderer


class ModuleOrchestrator:
    """Generates a complete CRUD module into ``src/modules/<package>/``.

    Steps run strictly in order and a failed write never rolls back the
    files written before it:

    1. shared DTO/model files (global mode only, create-if-absent)
    2. module directory
    3. controller, service, repository, module wiring
    4. model (unless global or ``--no-model``), DTO (unless global or
       ``--no-dto``)
    5. smoke test
    """

    strategy = Strategy.FLAT_MODULE

    def __init__(
        self,
        context: GenerationContext,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.context = context
        self.renderer = renderer or TemplateRenderer(emitter=FileEmitter())
        self.components = ComponentGenerator(self.renderer, context)
        self.shared = SharedArtifacts(self.renderer, context)

    async def generate(self, module_name: str, options: OptionSet | None = None) -> GenerationReport:
        """Generate every file of *module_name* and print the manifest.

        Returns the :class:`GenerationReport` of this run.  Write failures are
        already on stderr; the manifest lists every file that was attempted.
        """
        options = options or OptionSet(crud=True)
        emitter = self.renderer.emitter
        emitter.reset()

        names = derive_names(module_name, self.strategy)
        print_header(f"Generating module {names.package_name}")

        if options.global_mode:
            await self.shared.ensure()

        await emitter.make_dirs(self.components.module_dir(names))

        gen = self.components
        await gen.generate_controller(names, options, self.strategy)
        await gen.generate_service(names, options, self.strategy)
        await gen.generate_repository(names, options, self.strategy)
        await gen.generate_module(names, options, self.strategy)
        if options.emit_model:
            await gen.generate_model(names, options, self.strategy)
        if options.emit_dto:
            await gen.generate_dto(names, options, self.strategy)
        await gen.generate_test(names, options, self.strategy)

        report = emitter.reset()
        print_success(f"Module {names.package_name} generated in {display_path(gen.module_dir(names), self.context.root)}")
        print_file_list(
            "Files:",
            [display_path(p, self.context.root) for p in report.attempted],
        )
        return report
