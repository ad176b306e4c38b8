"""Per-artifact Go file generators.

:class:`ComponentGenerator` owns one coroutine per artifact kind.  Each one
picks the template for the requested :class:`Strategy`, binds the derived
names plus the type/import strings selected by the global-vs-per-module rule,
and emits exactly one file.

Type selection rule:

============================  =====================  ======================
mode                          DTO types              entity type
============================  =====================  ======================
global (either strategy)      ``dto.Base*``          ``models.NamedModel``
per-module, ``legacy_flat``   ``dto.<Class>*``       ``models.<Class>``
per-module, ``flat_module``   ``<Class>*``           ``<Class>``
============================  =====================  ======================
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from .models import EmittedFile, GenerationContext, GenerationKind, OptionSet, Strategy
from .names import DerivedNames
from .templates import TemplateRenderer


# Template file per (strategy, kind).  Kinds missing for a strategy are not
# produced by that generator family.
TEMPLATES: dict[Strategy, dict[GenerationKind, str]] = {
    Strategy.FLAT_MODULE: {
        GenerationKind.CONTROLLER: "module/controller.go.j2",
        GenerationKind.SERVICE: "module/service.go.j2",
        GenerationKind.REPOSITORY: "module/repository.go.j2",
        GenerationKind.MODULE: "module/module.go.j2",
        GenerationKind.MODEL: "module/model.go.j2",
        GenerationKind.DTO: "module/dto.go.j2",
        GenerationKind.TEST: "module/module_test.go.j2",
    },
    Strategy.LEGACY_FLAT: {
        GenerationKind.CONTROLLER: "legacy/controller.go.j2",
        GenerationKind.SERVICE: "legacy/service.go.j2",
        GenerationKind.REPOSITORY: "legacy/repository.go.j2",
        GenerationKind.MODEL: "legacy/model.go.j2",
        GenerationKind.DTO: "legacy/dto.go.j2",
        GenerationKind.ENUM: "legacy/enum.go.j2",
        GenerationKind.TEST: "legacy/service_test.go.j2",
    },
}

# File suffix per kind for the flat module layout: src/modules/<pkg>/<pkg><suffix>
_MODULE_SUFFIXES: dict[GenerationKind, str] = {
    GenerationKind.CONTROLLER: ".controller.go",
    GenerationKind.SERVICE: ".service.go",
    GenerationKind.REPOSITORY: ".repository.go",
    GenerationKind.MODULE: ".module.go",
    GenerationKind.MODEL: ".model.go",
    GenerationKind.DTO: ".dto.go",
    GenerationKind.TEST: "_test.go",
}

# (directory, file suffix) per kind for the legacy layout: <dir>/<pkg><suffix>
_LEGACY_LOCATIONS: dict[GenerationKind, tuple[str, str]] = {
    GenerationKind.CONTROLLER: ("controllers", "_controller.go"),
    GenerationKind.SERVICE: ("services", "_service.go"),
    GenerationKind.REPOSITORY: ("repositories", "_repository.go"),
    GenerationKind.MODEL: ("models", "_model.go"),
    GenerationKind.DTO: ("dto", "_dto.go"),
    GenerationKind.ENUM: ("enums", "_enum.go"),
    GenerationKind.TEST: ("services", "_service_test.go"),
}

SHARED_DTO_PACKAGE = "src/common/dto"
SHARED_MODELS_PACKAGE = "src/common/models"


class ComponentGenerator:
    """Renders and emits single Go artifacts for one project root."""

    def __init__(self, renderer: TemplateRenderer, context: GenerationContext) -> None:
        self.renderer = renderer
        self.context = context

    # -- Locations ---------------------------------------------------------

    def module_dir(self, names: DerivedNames) -> Path:
        """Directory holding every file of a flat module."""
        return self.context.root / "src" / "modules" / names.package_name

    def output_path(self, kind: GenerationKind, names: DerivedNames, strategy: Strategy) -> Path:
        """Where the artifact of *kind* is written for *strategy*."""
        if strategy is Strategy.FLAT_MODULE:
            suffix = _MODULE_SUFFIXES[kind]
            return self.module_dir(names) / f"{names.package_name}{suffix}"
        directory, suffix = _LEGACY_LOCATIONS[kind]
        return self.context.root / directory / f"{names.package_name}{suffix}"

    # -- Bindings ----------------------------------------------------------

    def bindings(self, names: DerivedNames, options: OptionSet, strategy: Strategy) -> dict[str, Any]:
        """Build the flat placeholder map shared by every template of a request."""
        go_module = self.context.go_module
        cls = names.class_name

        if options.global_mode:
            dto_pkg: str | None = f"{go_module}/{SHARED_DTO_PACKAGE}"
            models_pkg: str | None = f"{go_module}/{SHARED_MODELS_PACKAGE}"
            response_type = "dto.BaseResponse"
            create_type = "dto.BaseCreateRequest"
            update_type = "dto.BaseUpdateRequest"
            entity_type = "models.NamedModel"
        elif strategy is Strategy.LEGACY_FLAT:
            dto_pkg = f"{go_module}/dto"
            models_pkg = f"{go_module}/models"
            response_type = f"dto.{cls}Response"
            create_type = f"dto.Create{cls}Request"
            update_type = f"dto.Update{cls}Request"
            entity_type = f"models.{cls}"
        else:
            dto_pkg = None
            models_pkg = None
            response_type = f"{cls}Response"
            create_type = f"Create{cls}Request"
            update_type = f"Update{cls}Request"
            entity_type = cls

        return {
            **names.model_dump(),
            "go_module": go_module,
            "response_type": response_type,
            "create_request_type": create_type,
            "update_request_type": update_type,
            "entity_type": entity_type,
            "dto_import": _import_line(dto_pkg),
            "model_import": _import_line(models_pkg),
            "imports": _import_block(dto_pkg, models_pkg),
            "model_imports": _import_block(models_pkg),
        }

    # -- Generators --------------------------------------------------------

    def build(
        self,
        kind: GenerationKind,
        names: DerivedNames,
        options: OptionSet,
        strategy: Strategy,
    ) -> EmittedFile:
        """Render the template for (*strategy*, *kind*) without writing it.

        Raises:
            ValueError: If *strategy* has no template for *kind*.
        """
        template = TEMPLATES[strategy].get(kind)
        if template is None:
            raise ValueError(f"{strategy.value} does not generate {kind.value} files")
        ctx = self.bindings(names, options, strategy)
        if kind is GenerationKind.REPOSITORY and strategy is Strategy.FLAT_MODULE:
            ctx["imports"] = ctx["model_imports"]
        content = self.renderer.render(template, ctx)
        return EmittedFile(path=self.output_path(kind, names, strategy), content=content)

    async def generate(
        self,
        kind: GenerationKind,
        names: DerivedNames,
        options: OptionSet,
        strategy: Strategy,
    ) -> Path:
        """Build the artifact of *kind* and emit it. Returns the output path."""
        artifact = self.build(kind, names, options, strategy)
        await self.renderer.emitter.emit(artifact.path, artifact.content)
        return artifact.path

    async def generate_controller(self, names: DerivedNames, options: OptionSet, strategy: Strategy) -> Path:
        return await self.generate(GenerationKind.CONTROLLER, names, options, strategy)

    async def generate_service(self, names: DerivedNames, options: OptionSet, strategy: Strategy) -> Path:
        return await self.generate(GenerationKind.SERVICE, names, options, strategy)

    async def generate_repository(self, names: DerivedNames, options: OptionSet, strategy: Strategy) -> Path:
        return await self.generate(GenerationKind.REPOSITORY, names, options, strategy)

    async def generate_module(self, names: DerivedNames, options: OptionSet, strategy: Strategy) -> Path:
        return await self.generate(GenerationKind.MODULE, names, options, strategy)

    async def generate_model(self, names: DerivedNames, options: OptionSet, strategy: Strategy) -> Path:
        return await self.generate(GenerationKind.MODEL, names, options, strategy)

    async def generate_dto(self, names: DerivedNames, options: OptionSet, strategy: Strategy) -> Path:
        return await self.generate(GenerationKind.DTO, names, options, strategy)

    async def generate_test(self, names: DerivedNames, options: OptionSet, strategy: Strategy) -> Path:
        return await self.generate(GenerationKind.TEST, names, options, strategy)

    async def generate_enum(self, names: DerivedNames, options: OptionSet, strategy: Strategy) -> Path:
        return await self.generate(GenerationKind.ENUM, names, options, strategy)


# ---------------------------------------------------------------------------
# Import helpers
# ---------------------------------------------------------------------------

def _import_line(package: str | None) -> str:
    """A tab-indented quoted import for use inside an existing import block."""
    return f'\t"{package}"' if package else ""


def _import_block(*packages: str | None) -> str:
    """A standalone import block, or an empty string when nothing is imported."""
    present = [p for p in packages if p]
    if not present:
        return ""
    lines = "\n".join(_import_line(p) for p in present)
    return f"\nimport (\n{lines}\n)\n"
