"""Project materialisation.

Creates the planned directory tree and writes the rendered template files.
Directories and files are created one at a time, in plan and registry order.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from ..utils import print_created
from .layout import LayoutPlan
from .templates import TemplateRenderer, render_templates


class ProjectGenerator:
    """Writes a rendered Express skeleton to disk.

    Filesystem errors (permissions, disk full, ...) are not caught; a failed
    run leaves whatever was already written in place.
    """

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self.renderer = renderer or TemplateRenderer()

    # -- Public API --------------------------------------------------------

    async def generate(self, plan: LayoutPlan) -> list[Path]:
        """Render all templates for the plan's project, then materialise them."""
        templates = render_templates(plan.project_name, self.renderer)
        return await self.materialize(plan, templates)

    async def materialize(
        self, plan: LayoutPlan, templates: list[tuple[str, str]]
    ) -> list[Path]:
        """Create ``plan.root`` and its directories, then write *templates*.

        Args:
            plan: Target root and directory list from ``plan_layout``.
            templates: ``(relative_path, content)`` pairs, fully rendered.

        Returns:
            Paths of the written files, in write order.
        """
        await self._create_directory_structure(plan)

        written: list[Path] = []
        for relative_path, content in templates:
            out = plan.root / relative_path
            await asyncio.to_thread(_write_file, out, content)
            print_created(Path(plan.project_name) / relative_path)
            written.append(out)
        return written

    # -- Directory structure -----------------------------------------------

    async def _create_directory_structure(self, plan: LayoutPlan) -> None:
        await asyncio.to_thread(plan.root.mkdir, parents=True, exist_ok=True)
        for directory in plan.directory_paths():
            await asyncio.to_thread(directory.mkdir, parents=True, exist_ok=True)


def _write_file(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
