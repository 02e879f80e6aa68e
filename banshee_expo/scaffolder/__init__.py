"""banshee-expo scaffolder -- plans and writes Expo project trees.

Quick usage::

    from banshee_expo.scaffolder import ProjectGenerator, plan_project

    plan = plan_project(config, "my-app")        # pure, no writes
    root = await ProjectGenerator(config).generate("/tmp/output", "my-app")
"""

from banshee_expo.scaffolder.entities import (
    EntityKind,
    add_entity,
    normalize_hook_name,
    plan_single_entity,
)
from banshee_expo.scaffolder.generator import ProjectGenerator, plan_project
from banshee_expo.scaffolder.plan import DirOp, FileOp, GenerationPlan
from banshee_expo.scaffolder.templates import TemplateRenderer
from banshee_expo.scaffolder.writer import realize

__all__ = [
    "DirOp",
    "EntityKind",
    "FileOp",
    "GenerationPlan",
    "ProjectGenerator",
    "TemplateRenderer",
    "add_entity",
    "normalize_hook_name",
    "plan_project",
    "plan_single_entity",
    "realize",
]
