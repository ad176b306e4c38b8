"""Shared pytest fixtures for the goney test suite.

Provides reusable fixtures for:
- Temporary Go project roots (with and without go.mod)
- Generation contexts, renderers and emitters wired together
- Mock subprocess helpers for the dev-server runner
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from goney.config import Config
from goney.scaffolder.emitter import FileEmitter
from goney.scaffolder.models import GenerationContext
from goney.scaffolder.templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def tmp_project_dir(tmp_path: Path) -> Path:
    """Empty project root with no go.mod (auto-cleanup)."""
    project_dir = tmp_path / "test-project"
    project_dir.mkdir()
    yield project_dir


@pytest.fixture
def go_project(tmp_project_dir: Path) -> Path:
    """Project root whose go.mod declares ``module shop``."""
    (tmp_project_dir / "go.mod").write_text("module shop\n\ngo 1.23\n", encoding="utf-8")
    return tmp_project_dir


# ---------------------------------------------------------------------------
# Engine wiring
# ---------------------------------------------------------------------------

@pytest.fixture
def context(go_project: Path) -> GenerationContext:
    return GenerationContext(root=go_project, go_module="shop")


@pytest.fixture
def emitter() -> FileEmitter:
    return FileEmitter()


@pytest.fixture
def renderer(emitter: FileEmitter) -> TemplateRenderer:
    return TemplateRenderer(emitter=emitter)


@pytest.fixture
def config(go_project: Path) -> Config:
    return Config(project_root=go_project)


# ---------------------------------------------------------------------------
# Mock subprocess
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_subprocess():
    """Patch ``goney.runner.run_command`` with an AsyncMock.

    Every call succeeds with ``(0, "", "")`` unless the test changes
    ``side_effect`` or ``return_value``.

    Usage:
        def test_something(mock_subprocess):
            mock_subprocess.return_value = (1, "", "boom")
    """
    mock = AsyncMock(return_value=(0, "", ""))
    with patch("goney.runner.run_command", mock):
        yield mock
