"""Scaffolding configuration.

Typed settings for a scaffolding run. The defaults reproduce the fixed
Express + npm setup; environment variables may override the package manager,
the installed packages and the subprocess timeout.
"""

from __future__ import annotations

import os
from typing import Any

from pydantic import BaseModel, Field, PositiveFloat


DEFAULT_PROJECT_NAME = "backend"


class ScaffoldConfig(BaseModel):
    """Settings for a single scaffolding run.

    Instances are created once by the CLI entry point (usually through
    :meth:`from_env`) and handed to the pipeline.
    """

    default_project_name: str = Field(default=DEFAULT_PROJECT_NAME, min_length=1)
    package_manager: str = Field(default="npm", min_length=1)
    dependencies: list[str] = Field(
        default_factory=lambda: ["express", "cors", "dotenv"],
        description="Runtime packages installed into the generated project",
    )
    dev_dependencies: list[str] = Field(
        default_factory=lambda: ["nodemon"],
        description="Development-only packages installed into the generated project",
    )
    scripts: dict[str, str] = Field(
        default_factory=lambda: {
            "start": "node server.js",
            "dev": "nodemon server.js",
        },
        description="Replacement for the manifest's scripts map",
    )
    command_timeout: PositiveFloat | None = Field(
        default=None,
        description="Per-command timeout in seconds; None waits indefinitely",
    )

    # ------------------------------------------------------------------
    # Command builders
    # ------------------------------------------------------------------

    def init_command(self) -> list[str]:
        """Return the argv that creates a default ``package.json``."""
        return [self.package_manager, "init", "-y"]

    def install_command(self) -> list[str]:
        """Return the argv that installs the runtime dependencies."""
        return [self.package_manager, "install", *self.dependencies]

    def install_dev_command(self) -> list[str]:
        """Return the argv that installs the development dependencies."""
        return [self.package_manager, "install", "-D", *self.dev_dependencies]

    # ------------------------------------------------------------------
    # Environment loading
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls) -> "ScaffoldConfig":
        """Build a ``ScaffoldConfig`` from environment variables.

        Recognised variables (all optional):
            SCAFFOLD_DEFAULT_NAME, SCAFFOLD_PACKAGE_MANAGER,
            SCAFFOLD_DEPENDENCIES, SCAFFOLD_DEV_DEPENDENCIES,
            SCAFFOLD_COMMAND_TIMEOUT.

        Package lists are comma-separated.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("SCAFFOLD_DEFAULT_NAME"):
            kwargs["default_project_name"] = os.environ["SCAFFOLD_DEFAULT_NAME"]
        if os.environ.get("SCAFFOLD_PACKAGE_MANAGER"):
            kwargs["package_manager"] = os.environ["SCAFFOLD_PACKAGE_MANAGER"]
        if os.environ.get("SCAFFOLD_DEPENDENCIES"):
            kwargs["dependencies"] = _split_list(os.environ["SCAFFOLD_DEPENDENCIES"])
        if os.environ.get("SCAFFOLD_DEV_DEPENDENCIES"):
            kwargs["dev_dependencies"] = _split_list(os.environ["SCAFFOLD_DEV_DEPENDENCIES"])
        if os.environ.get("SCAFFOLD_COMMAND_TIMEOUT"):
            kwargs["command_timeout"] = float(os.environ["SCAFFOLD_COMMAND_TIMEOUT"])
        return cls(**kwargs)


def _split_list(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]
