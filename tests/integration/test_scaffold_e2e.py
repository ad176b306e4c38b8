"""Integration tests for the new-then-generate workflow.

These tests scaffold a real project on disk, generate modules inside it the
way a user would (reading the module path from the generated go.mod), and
verify that the generated configuration and Go sources are well formed.

No Go toolchain is required; the gofmt syntax check is skipped without one.
"""

from __future__ import annotations

import shutil
from pathlib import Path

import pytest
import yaml

from goney.scaffolder import (
    GenerationContext,
    LegacyGenerator,
    ModuleOrchestrator,
    OptionSet,
    ProjectConfig,
    ProjectGenerator,
)
from goney.utils import read_go_module_name, run_command


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

async def _new_project(output_dir: Path, name: str = "shop") -> Path:
    return await ProjectGenerator(ProjectConfig(name=name)).generate(output_dir)


def _context(root: Path) -> GenerationContext:
    return GenerationContext(root=root, go_module=read_go_module_name(root))


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------

@pytest.mark.integration
class TestScaffoldValidation:
    """Generated projects are internally consistent."""

    async def test_docker_compose_is_valid_yaml(self, tmp_path: Path):
        root = await _new_project(tmp_path, "My Shop")
        compose = yaml.safe_load((root / "docker-compose.yml").read_text(encoding="utf-8"))

        assert set(compose["services"]) == {"my-shop", "postgres", "redis", "nats"}
        app = compose["services"]["my-shop"]
        assert app["ports"] == ["8080:8080"]
        assert "DB_NAME=My Shop" in app["environment"]
        assert compose["services"]["postgres"]["environment"]["POSTGRES_DB"] == "My Shop"
        assert "postgres_data" in compose["volumes"]

    async def test_generated_modules_use_project_module_path(self, tmp_path: Path):
        root = await _new_project(tmp_path)
        ctx = _context(root)
        assert ctx.go_module == "shop"

        await ModuleOrchestrator(ctx).generate("users")
        await ModuleOrchestrator(ctx).generate("products", OptionSet(global_mode=True))

        controller = (root / "src/modules/products/products.controller.go").read_text(encoding="utf-8")
        assert '"shop/src/common/dto"' in controller
        assert (root / "src/common/dto/base.go").is_file()
        assert (root / "src/modules/users/users.dto.go").is_file()

    async def test_both_layouts_coexist(self, tmp_path: Path):
        root = await _new_project(tmp_path)
        ctx = _context(root)

        module_report = await ModuleOrchestrator(ctx).generate("users")
        legacy_report = await LegacyGenerator(ctx).generate_crud("User")

        assert module_report.ok
        assert legacy_report.ok
        assert (root / "src/modules/users/users.repository.go").is_file()
        assert (root / "repositories/user_repository.go").is_file()

    @pytest.mark.skipif(shutil.which("gofmt") is None, reason="gofmt not installed")
    async def test_generated_go_parses(self, tmp_path: Path):
        root = await _new_project(tmp_path)
        ctx = _context(root)
        await ModuleOrchestrator(ctx).generate("users")
        await ModuleOrchestrator(ctx).generate("products", OptionSet(global_mode=True))
        await ModuleOrchestrator(ctx).generate("orders", OptionSet(no_dto=True))
        await LegacyGenerator(ctx).generate_crud("User")

        go_files = sorted(str(p) for p in root.rglob("*.go"))
        returncode, stdout, stderr = await run_command(["gofmt", "-e", "-l", *go_files], timeout=60)
        assert returncode == 0, stderr
