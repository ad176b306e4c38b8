"""Pydantic v2 models for the goney code-generation engine.

Defines the immutable request/option values that drive generation, the
strategy tag that selects between the two generator families, and the
report accumulated while files are written.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class GenerationKind(str, Enum):
    """Artifact kinds the engine knows how to emit."""
    CONTROLLER = "controller"
    SERVICE = "service"
    REPOSITORY = "repository"
    DTO = "dto"
    MODEL = "model"
    MODULE = "module"
    TEST = "test"
    ENUM = "enum"
    PROJECT = "project"


class Strategy(str, Enum):
    """Generator family.

    ``LEGACY_FLAT`` writes into shared top-level directories (``controllers/``,
    ``services/`` ...) with a gorm-backed repository and a mock-based test
    suite.  ``FLAT_MODULE`` writes every file of a module into
    ``src/modules/<name>/`` with an in-memory repository stub and a smoke test.
    """
    LEGACY_FLAT = "legacy_flat"
    FLAT_MODULE = "flat_module"


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------

class OptionSet(BaseModel):
    """Boolean switches accepted by ``generate crud``.

    ``global_mode`` overrides ``no_dto``/``no_model``: shared DTO/model files
    are referenced and no per-module DTO or model is ever emitted.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    global_mode: bool = Field(default=False, alias="global")
    no_dto: bool = False
    no_model: bool = False
    crud: bool = False

    @property
    def emit_dto(self) -> bool:
        return not self.global_mode and not self.no_dto

    @property
    def emit_model(self) -> bool:
        return not self.global_mode and not self.no_model


class GenerationRequest(BaseModel):
    """One invocation of the engine for a single name."""
    model_config = ConfigDict(frozen=True)

    kind: GenerationKind
    raw_name: str = Field(..., min_length=1, description="User-supplied module/entity name")
    options: OptionSet = Field(default_factory=OptionSet)
    strategy: Strategy = Strategy.FLAT_MODULE


class GenerationContext(BaseModel):
    """Where generation happens and which Go module the imports refer to."""
    model_config = ConfigDict(frozen=True)

    root: Path
    go_module: str = Field(..., min_length=1)


# ---------------------------------------------------------------------------
# Output models
# ---------------------------------------------------------------------------

class EmittedFile(BaseModel):
    """A rendered file and the path it is written to."""
    path: Path
    content: str


class FailedFile(BaseModel):
    """A file whose write was attempted and failed."""
    path: Path
    reason: str


class GenerationReport(BaseModel):
    """Files a run attempted to write, and which of them failed.

    Directories that could not be created are kept apart in ``failed_dirs``
    so that ``failed`` is always a subset of ``attempted``.
    """
    attempted: list[Path] = Field(default_factory=list)
    failed: list[FailedFile] = Field(default_factory=list)
    failed_dirs: list[FailedFile] = Field(default_factory=list)

    @property
    def succeeded(self) -> list[Path]:
        failed = {f.path for f in self.failed}
        return [p for p in self.attempted if p not in failed]

    @property
    def ok(self) -> bool:
        return not self.failed and not self.failed_dirs

    def record_attempt(self, path: Path) -> None:
        self.attempted.append(path)

    def record_failure(self, path: Path, reason: str) -> None:
        self.failed.append(FailedFile(path=path, reason=reason))

    def record_dir_failure(self, path: Path, reason: str) -> None:
        self.failed_dirs.append(FailedFile(path=path, reason=reason))
