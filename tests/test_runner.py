"""Unit tests for the dev-server runner (goney.runner)."""

from __future__ import annotations

from pathlib import Path

import pytest

from goney.config import Config
from goney.runner import BINARY_NAME, DevServer, DevServerError


pytestmark = pytest.mark.unit


@pytest.fixture
def server(config) -> DevServer:
    return DevServer(config)


class TestDevServerError:
    def test_message_includes_step(self):
        err = DevServerError("go mod tidy", "network unreachable")
        assert err.step == "go mod tidy"
        assert str(err) == "go mod tidy: network unreachable"


class TestStart:
    async def test_runs_steps_in_order(self, server, go_project, mock_subprocess):
        rc = await server.start()
        assert rc == 0
        commands = [call.args[0] for call in mock_subprocess.await_args_list]
        assert commands == [
            ["go", "mod", "tidy"],
            ["go", "build", "-o", BINARY_NAME, "."],
            [str(go_project / BINARY_NAME)],
        ]
        for call in mock_subprocess.await_args_list:
            assert call.kwargs["cwd"] == go_project

    async def test_binary_runs_in_foreground(self, server, mock_subprocess):
        await server.start()
        run_call = mock_subprocess.await_args_list[-1]
        assert run_call.kwargs["capture"] is False
        assert run_call.kwargs["timeout"] is None

    async def test_custom_go_binary(self, go_project: Path, mock_subprocess):
        server = DevServer(Config(project_root=go_project, go_binary="/opt/go/bin/go"))
        await server.start()
        assert mock_subprocess.await_args_list[0].args[0][0] == "/opt/go/bin/go"

    async def test_tidy_failure_stops_pipeline(self, server, mock_subprocess):
        mock_subprocess.return_value = (1, "", "missing module")
        with pytest.raises(DevServerError) as exc_info:
            await server.start()
        assert exc_info.value.step == "go mod tidy"
        assert "missing module" in str(exc_info.value)
        assert mock_subprocess.await_count == 1

    async def test_build_failure(self, server, mock_subprocess):
        mock_subprocess.side_effect = [(0, "", ""), (2, "", "undefined: Foo")]
        with pytest.raises(DevServerError) as exc_info:
            await server.start()
        assert exc_info.value.step == "go build"

    async def test_app_nonzero_exit(self, server, mock_subprocess):
        mock_subprocess.side_effect = [(0, "", ""), (0, "", ""), (1, "", "")]
        with pytest.raises(DevServerError, match="exited with status 1"):
            await server.start()

    async def test_missing_go_toolchain(self, server, mock_subprocess):
        mock_subprocess.side_effect = FileNotFoundError("go")
        with pytest.raises(DevServerError, match="go not found"):
            await server.start()

    async def test_requires_go_mod(self, tmp_project_dir: Path, mock_subprocess):
        server = DevServer(Config(project_root=tmp_project_dir))
        with pytest.raises(DevServerError, match="no go.mod"):
            await server.start()
        assert mock_subprocess.await_count == 0
