"""Scaffolding run orchestrator and CLI entry point.

A run is strictly linear:

1. Resolve ``<cwd>/<project_name>`` and refuse to continue if it exists.
2. Render every template.
3. Create the directory tree and write the files.
4. ``npm init -y``, patch the ``scripts`` map, install runtime and dev
   dependencies.
5. Print next-step hints.

Usage::

    create-backend my-api
    python -m backend_scaffold.pipeline my-api
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

from rich.markup import escape

from backend_scaffold.config import ScaffoldConfig
from backend_scaffold.exceptions import ProjectExistsError, ScaffoldError
from backend_scaffold.scaffolder import (
    CommandRunner,
    ProjectGenerator,
    Provisioner,
    plan_layout,
    render_templates,
)
from backend_scaffold.utils import (
    print_error,
    print_next_steps,
    print_step,
    print_success,
    print_warning,
)


class ScaffoldPipeline:
    """Drives a single scaffolding run.

    Attributes:
        config: Run configuration (package manager, packages, scripts).
        cwd: Directory the project folder is created in.
        generator: Writes the rendered file set.
        provisioner: Runs the package-manager steps.
        root: Resolved project root once the layout is planned.
    """

    def __init__(
        self,
        config: ScaffoldConfig | None = None,
        cwd: str | Path | None = None,
        runner: CommandRunner | None = None,
    ) -> None:
        self.config = config or ScaffoldConfig()
        self.cwd = Path(cwd) if cwd is not None else Path.cwd()
        self.generator = ProjectGenerator()
        self.provisioner = Provisioner(self.config, runner=runner)
        self.root: Path | None = None

    async def run(self, project_name: str | None = None) -> Path:
        """Scaffold and provision *project_name* under ``self.cwd``.

        Returns:
            The project root.

        Raises:
            ProjectExistsError: Target already present; nothing was touched.
            ProvisioningError: A package-manager step exited non-zero.
        """
        name = project_name or self.config.default_project_name
        plan = plan_layout(name, self.cwd)
        self.root = plan.root

        print_step(f"Creating backend project: {escape(plan.project_name)}")
        templates = render_templates(plan.project_name, self.generator.renderer)
        await self.generator.materialize(plan, templates)

        await self.provisioner.provision(plan.root)

        print_success("Backend setup complete!")
        print_next_steps([
            f"cd {escape(plan.root.relative_to(self.cwd.resolve()).as_posix())}",
            "npm run dev",
        ])
        return plan.root


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``create-backend``."""
    import argparse

    config = ScaffoldConfig.from_env()

    parser = argparse.ArgumentParser(
        prog="create-backend",
        description="Scaffold a minimal Express backend and install its dependencies",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  create-backend\n"
            "  create-backend my-api\n"
        ),
    )
    parser.add_argument(
        "project_name",
        nargs="?",
        default=config.default_project_name,
        help=f"Folder to create in the current directory (default: {config.default_project_name})",
    )
    args = parser.parse_args(argv)

    pipeline = ScaffoldPipeline(config)
    try:
        asyncio.run(pipeline.run(args.project_name))
    except ProjectExistsError as exc:
        print_error(escape(str(exc)))
        sys.exit(1)
    except ScaffoldError as exc:
        print_error(escape(str(exc)))
        print_warning(
            f"{escape(str(pipeline.root))} was left partially "
            "provisioned; remove it before retrying."
        )
        sys.exit(1)


if __name__ == "__main__":
    main()
