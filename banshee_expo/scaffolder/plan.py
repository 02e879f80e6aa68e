"""Generation plan model.

A ``GenerationPlan`` is an ordered list of directory and file operations,
computed without touching the filesystem and executed later by
:mod:`banshee_expo.scaffolder.writer`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class DirOp:
    """Ensure a directory exists (relative POSIX path)."""

    target_path: str


@dataclass(frozen=True)
class FileOp:
    """Write a file, creating parent directories as needed."""

    target_path: str
    content: str = ""


Operation = Union[DirOp, FileOp]


@dataclass
class GenerationPlan:
    """Ordered directory/file operations for one invocation."""

    operations: list[Operation] = field(default_factory=list)

    def add_dir(self, target_path: str) -> None:
        self.operations.append(DirOp(target_path))

    def add_file(self, target_path: str, content: str = "") -> None:
        self.operations.append(FileOp(target_path, content))

    @property
    def directories(self) -> list[str]:
        """Directory targets in plan order."""
        return [op.target_path for op in self.operations if isinstance(op, DirOp)]

    @property
    def files(self) -> list[str]:
        """File targets in plan order."""
        return [op.target_path for op in self.operations if isinstance(op, FileOp)]

    @property
    def file_map(self) -> dict[str, str]:
        """``{path: content}`` for every file; a later write to the same path wins."""
        return {
            op.target_path: op.content
            for op in self.operations
            if isinstance(op, FileOp)
        }

    def __len__(self) -> int:
        return len(self.operations)

    def __iter__(self):
        return iter(self.operations)
