"""Target root resolution and the fixed directory plan."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ..config import DEFAULT_PROJECT_NAME
from ..exceptions import ProjectExistsError


PROJECT_DIRECTORIES: tuple[str, ...] = (
    "src",
    "src/routes",
    "src/controllers",
    "src/services",
    "src/models",
    "src/config",
    "src/middlewares",
)


@dataclass(frozen=True)
class LayoutPlan:
    """Where the project goes and which folders it needs."""

    project_name: str
    root: Path
    directories: tuple[str, ...] = field(default=PROJECT_DIRECTORIES)

    def directory_paths(self) -> list[Path]:
        """Absolute paths for every planned directory, in creation order."""
        return [self.root / d for d in self.directories]


def plan_layout(project_name: str | None, cwd: str | Path) -> LayoutPlan:
    """Resolve ``cwd / project_name`` and verify nothing is there yet.

    An empty or missing name falls back to ``DEFAULT_PROJECT_NAME``.  Leading
    separators are dropped, so an absolute name such as ``/tmp/x`` still lands
    under *cwd* (``<cwd>/tmp/x``).

    Raises:
        ProjectExistsError: If the target path exists (file or directory).
    """
    name = project_name or DEFAULT_PROJECT_NAME
    root = Path(cwd).resolve() / name.lstrip("/\\")
    if root.exists():
        raise ProjectExistsError(name, root)
    return LayoutPlan(project_name=name, root=root)
