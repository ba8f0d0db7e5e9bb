"""Shared pytest fixtures for the backend-scaffold test suite.

Provides reusable fixtures for:
- A temporary working directory to scaffold into
- A recording fake command runner that emulates ``npm init -y``
- A default ``ScaffoldConfig``
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from backend_scaffold.config import ScaffoldConfig


# ---------------------------------------------------------------------------
# Fake package manager
# ---------------------------------------------------------------------------


class FakeRunner:
    """Records every command and emulates the package manager.

    ``init`` writes the manifest npm would produce, including its placeholder
    ``test`` script.  ``fail_on`` makes the first command containing that
    argument return *fail_code* instead of 0.
    """

    def __init__(self, fail_on: str | None = None, fail_code: int = 1) -> None:
        self.calls: list[tuple[list[str], Path]] = []
        self.fail_on = fail_on
        self.fail_code = fail_code

    async def __call__(self, command: list[str], cwd: Path) -> int:
        self.calls.append((list(command), Path(cwd)))
        if self.fail_on is not None and self.fail_on in command:
            return self.fail_code
        if command[1:2] == ["init"]:
            manifest = {
                "name": Path(cwd).name,
                "version": "1.0.0",
                "description": "",
                "main": "index.js",
                "scripts": {
                    "test": 'echo "Error: no test specified" && exit 1',
                },
                "keywords": [],
                "author": "",
                "license": "ISC",
            }
            (Path(cwd) / "package.json").write_text(
                json.dumps(manifest, indent=2), encoding="utf-8"
            )
        return 0

    @property
    def commands(self) -> list[list[str]]:
        return [command for command, _ in self.calls]


@pytest.fixture
def fake_runner() -> FakeRunner:
    """A fake runner where every command succeeds."""
    return FakeRunner()


@pytest.fixture
def make_runner() -> type[FakeRunner]:
    """The ``FakeRunner`` class, for tests that need a failing step."""
    return FakeRunner


@pytest.fixture
def workdir(tmp_path: Path) -> Path:
    """Empty directory used as the scaffold's current working directory."""
    cwd = tmp_path / "workspace"
    cwd.mkdir()
    return cwd


@pytest.fixture
def config() -> ScaffoldConfig:
    return ScaffoldConfig()


@pytest.fixture(autouse=True)
def _clean_scaffold_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's SCAFFOLD_* variables out of the tests."""
    for var in (
        "SCAFFOLD_DEFAULT_NAME",
        "SCAFFOLD_PACKAGE_MANAGER",
        "SCAFFOLD_DEPENDENCIES",
        "SCAFFOLD_DEV_DEPENDENCIES",
        "SCAFFOLD_COMMAND_TIMEOUT",
    ):
        monkeypatch.delenv(var, raising=False)
