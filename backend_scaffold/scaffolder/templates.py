"""Jinja2 template registry for the generated Express project.

``TEMPLATE_FILES`` is the complete, ordered table of files the scaffolder
emits: output path (relative to the project root) -> template name under
``backend_scaffold/scaffolder/templates/``.  The only context variable is
``project_name``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape


_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# Output path -> template name.  Dotfiles are stored without the leading dot
# so they survive packaging.
TEMPLATE_FILES: dict[str, str] = {
    "src/app.js": "src/app.js.j2",
    "server.js": "server.js.j2",
    "src/routes/example.routes.js": "src/routes/example.routes.js.j2",
    "src/controllers/example.controller.js": "src/controllers/example.controller.js.j2",
    "src/services/example.service.js": "src/services/example.service.js.j2",
    "src/models/example.model.js": "src/models/example.model.js.j2",
    "src/middlewares/error.middleware.js": "src/middlewares/error.middleware.js.j2",
    ".env": "env.j2",
    ".gitignore": "gitignore.j2",
    "README.md": "README.md.j2",
}


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders the scaffold's Jinja2 templates.

    Output is source code and config, never HTML, so autoescaping is off.
    Undefined variables raise instead of rendering as empty strings.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"src/app.js.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)

    def render_all(
        self,
        context: dict[str, Any],
        files: dict[str, str] | None = None,
    ) -> list[tuple[str, str]]:
        """Render every entry of *files* (default: ``TEMPLATE_FILES``).

        Returns ``(relative_output_path, content)`` pairs in table order.
        Nothing is written to disk.
        """
        table = TEMPLATE_FILES if files is None else files
        return [
            (output_path, self.render(template_name, context))
            for output_path, template_name in table.items()
        ]


def render_templates(
    project_name: str, renderer: TemplateRenderer | None = None
) -> list[tuple[str, str]]:
    """Render the full file set for *project_name*."""
    renderer = renderer or TemplateRenderer()
    return renderer.render_all({"project_name": project_name})
