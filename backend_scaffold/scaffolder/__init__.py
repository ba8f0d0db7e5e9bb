"""Express backend scaffolder.

Plans the target layout, renders the Jinja2 file set, writes it to disk and
provisions ``package.json`` plus dependencies through the package manager.

Quick usage::

    from backend_scaffold.scaffolder import ProjectGenerator, Provisioner, plan_layout

    plan = plan_layout("my-api", Path.cwd())
    await ProjectGenerator().generate(plan)
    await Provisioner().provision(plan.root)
"""

from backend_scaffold.scaffolder.generator import ProjectGenerator
from backend_scaffold.scaffolder.layout import PROJECT_DIRECTORIES, LayoutPlan, plan_layout
from backend_scaffold.scaffolder.manifest import patch_manifest_scripts
from backend_scaffold.scaffolder.provisioner import CommandRunner, Provisioner
from backend_scaffold.scaffolder.templates import (
    TEMPLATE_FILES,
    TemplateRenderer,
    render_templates,
)

__all__ = [
    "CommandRunner",
    "LayoutPlan",
    "PROJECT_DIRECTORIES",
    "ProjectGenerator",
    "Provisioner",
    "TEMPLATE_FILES",
    "TemplateRenderer",
    "patch_manifest_scripts",
    "plan_layout",
    "render_templates",
]
