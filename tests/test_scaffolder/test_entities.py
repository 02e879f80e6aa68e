"""Tests for single-entity generators (banshee_expo.scaffolder.entities).

Covers:
- Hook name normalisation (idempotent ``use`` prefix)
- Target paths and templates per entity kind
- Module sub-tree plan
- add_entity writes the plan and refuses existing targets
"""

from __future__ import annotations

from pathlib import Path

import pytest

from banshee_expo.errors import InvalidNameError, TargetExistsError
from banshee_expo.scaffolder.entities import (
    MODULE_SUB_ROLES,
    EntityKind,
    add_entity,
    entity_target,
    normalize_hook_name,
    plan_single_entity,
)
from banshee_expo.scaffolder.plan import DirOp, FileOp


# ---------------------------------------------------------------------------
# Naming
# ---------------------------------------------------------------------------


class TestHookNames:
    @pytest.mark.unit
    def test_adds_prefix(self):
        assert normalize_hook_name("Foo") == "useFoo"

    @pytest.mark.unit
    def test_keeps_existing_prefix(self):
        assert normalize_hook_name("useFoo") == "useFoo"

    @pytest.mark.unit
    @pytest.mark.parametrize("name", ["Foo", "useFoo", "Auth", "user"])
    def test_idempotent(self, name):
        once = normalize_hook_name(name)
        assert normalize_hook_name(once) == once

    @pytest.mark.unit
    def test_plan_uses_normalised_name(self):
        plan = plan_single_entity(EntityKind.HOOK, "Foo")
        assert plan.files == ["src/hooks/useFoo.ts"]
        assert "export const useFoo = () => {" in plan.file_map["src/hooks/useFoo.ts"]

    @pytest.mark.unit
    def test_plan_prefixed_name_unchanged(self):
        plan = plan_single_entity(EntityKind.HOOK, "useFoo")
        assert plan.files == ["src/hooks/useFoo.ts"]
        assert "useuseFoo" not in plan.file_map["src/hooks/useFoo.ts"]


class TestEntityTargets:
    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("kind", "name", "target"),
        [
            (EntityKind.COMPONENT, "Button", "src/components/Button.tsx"),
            (EntityKind.SCREEN, "Profile", "src/screens/Profile.tsx"),
            (EntityKind.SERVICE, "UserService", "src/services/UserService.ts"),
            (EntityKind.HOOK, "Auth", "src/hooks/useAuth.ts"),
            (EntityKind.MODULE, "auth", "src/modules/auth"),
        ],
    )
    def test_target(self, kind, name, target):
        assert entity_target(kind, name) == target

    @pytest.mark.unit
    @pytest.mark.parametrize("kind", list(EntityKind))
    def test_invalid_names(self, kind):
        with pytest.raises(InvalidNameError):
            plan_single_entity(kind, "nested/Name")
        with pytest.raises(InvalidNameError):
            plan_single_entity(kind, "  ")


# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------


class TestFileEntityPlans:
    @pytest.mark.unit
    def test_component(self):
        plan = plan_single_entity(EntityKind.COMPONENT, "Button")
        assert len(plan) == 1
        content = plan.file_map["src/components/Button.tsx"]
        assert "interface ButtonProps {" in content
        assert "export default function Button({ title }: ButtonProps) {" in content
        assert "{title || 'Button'}" in content

    @pytest.mark.unit
    def test_screen(self):
        content = plan_single_entity(EntityKind.SCREEN, "Profile").file_map[
            "src/screens/Profile.tsx"
        ]
        assert "export default function Profile() {" in content
        assert "fontWeight: '600'" in content

    @pytest.mark.unit
    def test_service_uses_lowercase_resource(self):
        content = plan_single_entity(EntityKind.SERVICE, "UserService").file_map[
            "src/services/UserService.ts"
        ]
        assert content.startswith("const API_URL = 'https://api.example.com';")
        assert "export const UserService = {" in content
        assert "fetch(`${API_URL}/userservice`)" in content
        assert "fetch(`${API_URL}/userservice/${id}`, {" in content
        assert "method: 'DELETE'" in content


class TestModulePlan:
    @pytest.mark.unit
    def test_structure(self):
        plan = plan_single_entity(EntityKind.MODULE, "auth")
        expected = [DirOp("src/modules/auth")]
        for role in MODULE_SUB_ROLES:
            expected.append(DirOp(f"src/modules/auth/{role}"))
            expected.append(FileOp(f"src/modules/auth/{role}/index.ts", ""))
        expected.append(FileOp("src/modules/auth/index.ts", ""))
        assert plan.operations == expected

    @pytest.mark.unit
    def test_sub_roles(self):
        assert MODULE_SUB_ROLES == ("screens", "controllers", "navigations")


# ---------------------------------------------------------------------------
# add_entity
# ---------------------------------------------------------------------------


class TestAddEntity:
    @pytest.mark.unit
    async def test_writes_component(self, project_dir: Path):
        target = await add_entity(EntityKind.COMPONENT, "Button", project_dir)
        assert target == project_dir / "src" / "components" / "Button.tsx"
        assert "function Button" in target.read_text(encoding="utf-8")

    @pytest.mark.unit
    async def test_writes_hook_with_prefix(self, project_dir: Path):
        target = await add_entity(EntityKind.HOOK, "Auth", project_dir)
        assert target.name == "useAuth.ts"
        assert target.is_file()

    @pytest.mark.unit
    async def test_writes_module_tree(self, project_dir: Path):
        target = await add_entity(EntityKind.MODULE, "auth", project_dir)
        assert target == project_dir / "src" / "modules" / "auth"
        assert (target / "index.ts").read_text() == ""
        for role in MODULE_SUB_ROLES:
            assert (target / role / "index.ts").is_file()

    @pytest.mark.unit
    async def test_refuses_existing_file(self, project_dir: Path):
        existing = project_dir / "src" / "screens" / "Profile.tsx"
        existing.parent.mkdir(parents=True)
        existing.write_text("keep me", encoding="utf-8")

        with pytest.raises(TargetExistsError, match="Screen Profile already exists!"):
            await add_entity(EntityKind.SCREEN, "Profile", project_dir)
        assert existing.read_text(encoding="utf-8") == "keep me"

    @pytest.mark.unit
    async def test_refuses_existing_hook_by_normalised_name(self, project_dir: Path):
        await add_entity(EntityKind.HOOK, "useAuth", project_dir)
        with pytest.raises(TargetExistsError, match="Hook useAuth"):
            await add_entity(EntityKind.HOOK, "Auth", project_dir)

    @pytest.mark.unit
    async def test_refuses_existing_module(self, project_dir: Path):
        module = project_dir / "src" / "modules" / "auth"
        module.mkdir(parents=True)

        with pytest.raises(TargetExistsError) as excinfo:
            await add_entity(EntityKind.MODULE, "auth", project_dir)
        assert excinfo.value.path == module
        assert list(module.iterdir()) == []
