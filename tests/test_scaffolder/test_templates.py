"""Tests for the template registry and renderer.

Covers:
- Registry order and completeness
- Project-name substitution (README only)
- Content of each generated Express file
"""

from __future__ import annotations

from pathlib import Path

import pytest
from jinja2 import UndefinedError

from backend_scaffold.scaffolder.templates import (
    TEMPLATE_FILES,
    TemplateRenderer,
    render_templates,
)

pytestmark = pytest.mark.unit


EXPECTED_PATHS = [
    "src/app.js",
    "server.js",
    "src/routes/example.routes.js",
    "src/controllers/example.controller.js",
    "src/services/example.service.js",
    "src/models/example.model.js",
    "src/middlewares/error.middleware.js",
    ".env",
    ".gitignore",
    "README.md",
]


@pytest.fixture(scope="module")
def rendered() -> dict[str, str]:
    return dict(render_templates("demo"))


class TestRegistry:
    def test_order(self):
        assert [path for path, _ in render_templates("demo")] == EXPECTED_PATHS

    def test_every_template_exists(self):
        template_dir = TemplateRenderer().template_dir
        for template_name in TEMPLATE_FILES.values():
            assert (template_dir / template_name).is_file(), template_name

    def test_only_readme_depends_on_name(self):
        a = dict(render_templates("alpha"))
        b = dict(render_templates("beta"))
        differing = [path for path in EXPECTED_PATHS if a[path] != b[path]]
        assert differing == ["README.md"]

    def test_deterministic(self):
        assert render_templates("demo") == render_templates("demo")

    def test_files_end_with_newline(self, rendered):
        for path, content in rendered.items():
            assert content.endswith("\n"), path


class TestRenderer:
    def test_render_all_custom_table(self, tmp_path: Path):
        (tmp_path / "hello.txt.j2").write_text("Hello {{ project_name }}\n", encoding="utf-8")
        renderer = TemplateRenderer(tmp_path)
        result = renderer.render_all({"project_name": "x"}, {"hello.txt": "hello.txt.j2"})
        assert result == [("hello.txt", "Hello x\n")]

    def test_undefined_variable_raises(self, tmp_path: Path):
        (tmp_path / "bad.j2").write_text("{{ missing }}", encoding="utf-8")
        with pytest.raises(UndefinedError):
            TemplateRenderer(tmp_path).render("bad.j2", {})

    def test_no_html_escaping(self):
        content = TemplateRenderer().render("README.md.j2", {"project_name": "a&b<c>"})
        assert content.startswith("# a&b<c>\n")


class TestContent:
    def test_app_wiring(self, rendered):
        app = rendered["src/app.js"]
        assert "app.use(cors());" in app
        assert "app.use(express.json());" in app
        assert 'app.use("/api/examples", exampleRoutes);' in app
        assert "app.use(errorHandler);" in app
        assert app.index("exampleRoutes);") < app.index("app.use(errorHandler);")

    def test_server_entry(self, rendered):
        server = rendered["server.js"]
        assert 'require("dotenv").config();' in server
        assert "process.env.PORT || 5000" in server
        assert "app.listen(PORT" in server

    def test_routes(self, rendered):
        routes = rendered["src/routes/example.routes.js"]
        assert 'router.get("/", exampleController.getExamples);' in routes
        assert 'router.post("/", exampleController.createExample);' in routes

    def test_controller_forwards_errors(self, rendered):
        controller = rendered["src/controllers/example.controller.js"]
        assert controller.count("next(err);") == 2
        assert "res.status(200).json({ success: true, data });" in controller
        assert "res.status(201).json({ success: true, data: result });" in controller

    def test_service(self, rendered):
        service = rendered["src/services/example.service.js"]
        assert '{ id: 1, name: "Example One" }' in service
        assert '{ id: 2, name: "Example Two" }' in service
        assert 'new Error("Name is required")' in service
        assert "err.statusCode = 400;" in service
        assert "id: Date.now()" in service
        assert "if (!data || !data.name)" in service

    def test_model_placeholder(self, rendered):
        assert "module.exports = {};" in rendered["src/models/example.model.js"]

    def test_error_middleware(self, rendered):
        middleware = rendered["src/middlewares/error.middleware.js"]
        assert "err.statusCode || 500" in middleware
        assert 'err.message || "Internal Server Error"' in middleware
        assert "success: false" in middleware

    def test_env_and_gitignore(self, rendered):
        assert rendered[".env"] == "PORT=5000\n"
        assert rendered[".gitignore"].splitlines() == ["node_modules", ".env"]

    def test_readme(self, rendered):
        readme = rendered["README.md"]
        assert readme.startswith("# demo\n")
        assert "- GET  /api/examples" in readme
        assert "- POST /api/examples" in readme
