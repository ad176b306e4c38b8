"""goney scaffolder -- renders Go source files from Jinja2 templates.

Two generator families share the same templates engine and naming rules:

* :class:`ModuleOrchestrator` writes a whole CRUD module into
  ``src/modules/<name>/``.
* :class:`LegacyGenerator` writes single artifacts (or a CRUD set) into the
  top-level ``controllers/``, ``services/`` ... directories.

:class:`ProjectGenerator` creates a new project from scratch.

Quick usage::

    from goney.scaffolder import GenerationContext, ModuleOrchestrator, OptionSet

    context = GenerationContext(root=Path("."), go_module="shop")
    report = await ModuleOrchestrator(context).generate("users", OptionSet(crud=True))
"""

from .components import ComponentGenerator
from .emitter import FileEmitter
from .generator import ProjectConfig, ProjectGenerator
from .legacy_gen import LegacyGenerator
from .models import (
    GenerationContext,
    GenerationKind,
    GenerationReport,
    GenerationRequest,
    OptionSet,
    Strategy,
)
from .module_gen import ModuleOrchestrator
from .names import DerivedNames, derive_names
from .shared import SharedArtifacts
from .templates import TemplateRenderer, TemplateRenderError

__all__ = [
    "ComponentGenerator",
    "DerivedNames",
    "FileEmitter",
    "GenerationContext",
    "GenerationKind",
    "GenerationReport",
    "GenerationRequest",
    "LegacyGenerator",
    "ModuleOrchestrator",
    "OptionSet",
    "ProjectConfig",
    "ProjectGenerator",
    "SharedArtifacts",
    "Strategy",
    "TemplateRenderError",
    "TemplateRenderer",
    "derive_names",
]
