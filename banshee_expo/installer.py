"""Dependency installation for a freshly generated project."""

from __future__ import annotations

from pathlib import Path

from banshee_expo.config import ToolSettings
from banshee_expo.errors import InstallError
from banshee_expo.utils import run_command


async def install_dependencies(project_root: str | Path, settings: ToolSettings) -> None:
    """Run the package manager's install command inside *project_root*.

    Output is streamed straight to the terminal.

    Raises:
        InstallError: If the command is missing, times out, or exits non-zero.
    """
    command = settings.install_command
    returncode, _, stderr = await run_command(
        command,
        cwd=project_root,
        timeout=settings.install_timeout,
        capture=False,
    )
    if returncode != 0:
        raise InstallError(command, returncode, stderr)
