"""External provisioning: manifest init, script patch, dependency installs.

Every command goes through a single injectable runner,
``runner(argv, cwd) -> returncode``, so the ordering and the
fatal-on-non-zero policy can be exercised without a package manager.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from pathlib import Path

from ..config import ScaffoldConfig
from ..exceptions import ProvisioningError
from ..utils import print_step, run_command
from .manifest import patch_manifest_scripts

CommandRunner = Callable[[list[str], Path], Awaitable[int]]


class Provisioner:
    """Runs the provisioning steps against a freshly generated project."""

    def __init__(
        self,
        config: ScaffoldConfig | None = None,
        runner: CommandRunner | None = None,
    ) -> None:
        self.config = config or ScaffoldConfig()
        self.runner = runner or self._run_inherited

    async def provision(self, root: Path) -> None:
        """Initialise the manifest, patch its scripts and install packages.

        Steps run strictly in order and each must exit 0 before the next
        starts.

        Raises:
            ProvisioningError: On the first non-zero exit.  Later steps are
                not attempted and nothing is rolled back.
        """
        pm = self.config.package_manager

        print_step(f"Initializing {pm}...")
        await self._run("manifest init", self.config.init_command(), root)
        await patch_manifest_scripts(root, self.config.scripts)

        print_step("Installing dependencies...")
        await self._run("dependency install", self.config.install_command(), root)
        await self._run("dev dependency install", self.config.install_dev_command(), root)

    async def _run(self, step: str, command: list[str], cwd: Path) -> None:
        returncode = await self.runner(command, cwd)
        if returncode != 0:
            raise ProvisioningError(step, command, returncode)

    async def _run_inherited(self, command: list[str], cwd: Path) -> int:
        """Default runner: child output goes straight to the terminal."""
        returncode, _, _ = await run_command(
            command,
            cwd=cwd,
            timeout=self.config.command_timeout,
            capture=False,
        )
        return returncode
