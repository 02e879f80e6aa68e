"""File writer for generation plans.

Executes a ``GenerationPlan`` against the filesystem.  Operations run one at
a time in plan order, each in a worker thread.  There is no rollback: if an
operation fails the tree created so far stays on disk.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from banshee_expo.errors import FileOperationError, TargetExistsError

from .plan import DirOp, FileOp, GenerationPlan, Operation


async def realize(plan: GenerationPlan, root: str | Path) -> Path:
    """Create *root* and write every operation of *plan* beneath it.

    Raises:
        TargetExistsError: If *root* already exists.  Nothing is written.
        FileOperationError: If a directory or file cannot be created.
    """
    root_path = Path(root)
    if root_path.exists():
        raise TargetExistsError(f"Directory {root_path.name}", root_path)

    await asyncio.to_thread(_make_root, root_path)
    await apply_plan(plan, root_path)
    return root_path


async def apply_plan(plan: GenerationPlan, root: Path) -> None:
    """Execute *plan* beneath an existing *root*, in order."""
    for operation in plan:
        await asyncio.to_thread(_apply, root, operation)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _make_root(root: Path) -> None:
    try:
        root.mkdir(parents=True)
    except OSError as exc:
        raise FileOperationError(root, exc) from exc


def _apply(root: Path, operation: Operation) -> None:
    target = root / operation.target_path
    try:
        if isinstance(operation, DirOp):
            target.mkdir(parents=True, exist_ok=True)
        elif isinstance(operation, FileOp):
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(operation.content, encoding="utf-8")
        else:
            raise TypeError(f"unsupported plan operation: {operation!r}")
    except OSError as exc:
        raise FileOperationError(target, exc) from exc
