"""Single-entity generators.

Adds one component, screen, service, or hook file, or one module folder
tree, to an already-scaffolded project.  An existing target is never
overwritten.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from banshee_expo.errors import TargetExistsError
from banshee_expo.utils import validate_name

from .plan import GenerationPlan
from .templates import TemplateRenderer
from .writer import apply_plan


class EntityKind(str, Enum):
    """Things that can be added to an existing project."""
    COMPONENT = "component"
    SCREEN = "screen"
    SERVICE = "service"
    HOOK = "hook"
    MODULE = "module"

    @property
    def label(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True)
class _FileEntity:
    directory: str
    extension: str
    template: str


_FILE_ENTITIES: dict[EntityKind, _FileEntity] = {
    EntityKind.COMPONENT: _FileEntity("src/components", ".tsx", "entities/component.tsx.j2"),
    EntityKind.SCREEN: _FileEntity("src/screens", ".tsx", "entities/screen.tsx.j2"),
    EntityKind.SERVICE: _FileEntity("src/services", ".ts", "entities/service.ts.j2"),
    EntityKind.HOOK: _FileEntity("src/hooks", ".ts", "entities/hook.ts.j2"),
}

MODULES_DIR = "src/modules"
MODULE_SUB_ROLES: tuple[str, ...] = ("screens", "controllers", "navigations")

HOOK_PREFIX = "use"


def normalize_hook_name(name: str) -> str:
    """``"Auth"`` -> ``"useAuth"``; names already starting with ``use`` are kept."""
    return name if name.startswith(HOOK_PREFIX) else f"{HOOK_PREFIX}{name}"


def entity_name(kind: EntityKind, name: str) -> str:
    """Validate *name* and apply the kind's naming convention."""
    cleaned = validate_name(name)
    if kind is EntityKind.HOOK:
        return normalize_hook_name(cleaned)
    return cleaned


def entity_target(kind: EntityKind, name: str) -> str:
    """Relative path whose existence blocks adding this entity."""
    resolved = entity_name(kind, name)
    if kind is EntityKind.MODULE:
        return f"{MODULES_DIR}/{resolved}"
    entity = _FILE_ENTITIES[kind]
    return f"{entity.directory}/{resolved}{entity.extension}"


def plan_single_entity(
    kind: EntityKind,
    name: str,
    renderer: TemplateRenderer | None = None,
) -> GenerationPlan:
    """Plan the operations that add one entity called *name*."""
    resolved = entity_name(kind, name)
    target = entity_target(kind, resolved)
    plan = GenerationPlan()

    if kind is EntityKind.MODULE:
        plan.add_dir(target)
        for role in MODULE_SUB_ROLES:
            plan.add_dir(f"{target}/{role}")
            plan.add_file(f"{target}/{role}/index.ts")
        plan.add_file(f"{target}/index.ts")
        return plan

    renderer = renderer or TemplateRenderer()
    content = renderer.render(_FILE_ENTITIES[kind].template, {"name": resolved})
    plan.add_file(target, content)
    return plan


async def add_entity(
    kind: EntityKind,
    name: str,
    project_root: str | Path,
    renderer: TemplateRenderer | None = None,
) -> Path:
    """Write a new entity into *project_root* and return its path.

    Raises:
        InvalidNameError: If *name* is empty or contains path separators.
        TargetExistsError: If the file or module directory already exists.
        FileOperationError: If writing fails.
    """
    root = Path(project_root)
    resolved = entity_name(kind, name)
    target = root / entity_target(kind, resolved)
    if target.exists():
        raise TargetExistsError(f"{kind.label} {resolved}", target)

    plan = plan_single_entity(kind, resolved, renderer)
    await apply_plan(plan, root)
    return target
