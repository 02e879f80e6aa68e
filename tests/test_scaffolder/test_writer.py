"""Tests for plan execution (banshee_expo.scaffolder.writer).

Covers:
- realize refuses an existing root and writes nothing
- Operations run in order; DirOp is idempotent, FileOp creates parents
- OSError is surfaced as FileOperationError naming the path, without rollback
"""

from __future__ import annotations

from pathlib import Path

import pytest

from banshee_expo.errors import FileOperationError, TargetExistsError
from banshee_expo.scaffolder.plan import GenerationPlan
from banshee_expo.scaffolder.writer import apply_plan, realize


pytestmark = pytest.mark.unit


def _small_plan() -> GenerationPlan:
    plan = GenerationPlan()
    plan.add_dir("src/components")
    plan.add_dir("src/components")
    plan.add_file("src/deep/nested/file.ts", "export {};\n")
    plan.add_file("README.md", "first")
    plan.add_file("README.md", "second")
    return plan


class TestRealize:
    async def test_creates_tree(self, tmp_path: Path):
        root = await realize(_small_plan(), tmp_path / "app")
        assert root == tmp_path / "app"
        assert (root / "src" / "components").is_dir()
        assert (root / "src" / "deep" / "nested" / "file.ts").read_text() == "export {};\n"

    async def test_later_write_wins(self, tmp_path: Path):
        root = await realize(_small_plan(), tmp_path / "app")
        assert (root / "README.md").read_text() == "second"

    async def test_existing_root_is_refused(self, tmp_path: Path):
        root = tmp_path / "app"
        root.mkdir()
        (root / "keep.txt").write_text("original", encoding="utf-8")

        with pytest.raises(TargetExistsError, match="Directory app already exists!") as excinfo:
            await realize(_small_plan(), root)

        assert excinfo.value.path == root
        assert sorted(p.name for p in root.iterdir()) == ["keep.txt"]
        assert (root / "keep.txt").read_text() == "original"

    async def test_existing_file_root_is_refused(self, tmp_path: Path):
        root = tmp_path / "app"
        root.write_text("not a dir", encoding="utf-8")
        with pytest.raises(TargetExistsError):
            await realize(_small_plan(), root)
        assert root.read_text() == "not a dir"

    async def test_empty_plan_creates_root(self, tmp_path: Path):
        root = await realize(GenerationPlan(), tmp_path / "nested" / "app")
        assert root.is_dir()
        assert list(root.iterdir()) == []


class TestFailures:
    async def test_failure_names_path_and_keeps_partial_tree(self, tmp_path: Path):
        plan = GenerationPlan()
        plan.add_file("src/first.ts", "ok")
        plan.add_file("blocker", "i am a file")
        plan.add_file("blocker/child.ts", "cannot exist")
        plan.add_file("src/never.ts", "not reached")

        with pytest.raises(FileOperationError) as excinfo:
            await realize(plan, tmp_path / "app")

        root = tmp_path / "app"
        assert excinfo.value.path == root / "blocker" / "child.ts"
        assert str(root / "blocker" / "child.ts") in str(excinfo.value)
        assert (root / "src" / "first.ts").read_text() == "ok"
        assert not (root / "src" / "never.ts").exists()

    async def test_dir_over_file_fails(self, tmp_path: Path):
        (tmp_path / "taken").write_text("", encoding="utf-8")
        plan = GenerationPlan()
        plan.add_dir("taken")
        with pytest.raises(FileOperationError):
            await apply_plan(plan, tmp_path)

    async def test_apply_plan_on_existing_root(self, tmp_path: Path):
        (tmp_path / "src").mkdir()
        plan = GenerationPlan()
        plan.add_dir("src")
        plan.add_file("src/index.ts")
        await apply_plan(plan, tmp_path)
        assert (tmp_path / "src" / "index.ts").read_text() == ""
