"""Exceptions raised by the scaffolding run."""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for errors that abort a scaffolding run."""


class ProjectExistsError(ScaffoldError):
    """Raised when the target folder is already present on disk."""

    def __init__(self, project_name: str, root: Path) -> None:
        self.project_name = project_name
        self.root = root
        super().__init__(f'Folder "{project_name}" already exists.')


class ProvisioningError(ScaffoldError):
    """Raised when an external provisioning command exits non-zero."""

    def __init__(self, step: str, command: list[str], returncode: int) -> None:
        self.step = step
        self.command = command
        self.returncode = returncode
        super().__init__(
            f"{step} failed (exit {returncode}): {' '.join(command)}"
        )
