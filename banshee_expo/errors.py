"""Exception hierarchy for banshee-expo.

Library code raises these; only the CLI entry point catches them, prints the
message, and terminates with a non-zero exit status.
"""

from __future__ import annotations

from pathlib import Path

PROJECT_ROOT_HINT = "Make sure you are in the project root directory."


class ScaffoldError(Exception):
    """Base class for every error the CLI reports to the user."""

    hint: str | None = None


class TargetExistsError(ScaffoldError):
    """Raised when a project root or entity target is already on disk."""

    def __init__(self, subject: str, path: Path) -> None:
        self.subject = subject
        self.path = Path(path)
        super().__init__(f"{subject} already exists!")


class FileOperationError(ScaffoldError):
    """Raised when creating a directory or writing a file fails."""

    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = Path(path)
        self.cause = cause
        reason = cause.strerror or str(cause)
        super().__init__(f"Failed to create {self.path}: {reason}")


class MissingProjectStateError(ScaffoldError):
    """Raised when a reporting command cannot find the state it reads."""

    hint = PROJECT_ROOT_HINT

    def __init__(self, label: str, path: Path) -> None:
        self.label = label
        self.path = Path(path)
        super().__init__(f"{label} not found!")


class ManifestError(ScaffoldError):
    """Raised when ``package.json`` exists but cannot be interpreted."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = Path(path)
        super().__init__(f"Failed to read project info from {self.path}: {reason}")


class ConfigError(ScaffoldError):
    """Raised when a saved answers file cannot be loaded."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = Path(path)
        super().__init__(f"Invalid answers file {self.path}: {reason}")


class SettingsError(ScaffoldError):
    """Raised when a ``BANSHEE_*`` environment variable has an unusable value."""

    def __init__(self, variable: str, value: str, reason: str) -> None:
        self.variable = variable
        self.value = value
        super().__init__(f"Invalid {variable}={value!r}: {reason}")


class InstallError(ScaffoldError):
    """Raised when the package manager exits with a non-zero status."""

    def __init__(self, command: list[str], returncode: int, detail: str = "") -> None:
        self.command = command
        self.returncode = returncode
        message = f"'{' '.join(command)}' exited with status {returncode}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class InvalidNameError(ScaffoldError):
    """Raised for project or entity names that cannot be used as a path segment."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        super().__init__(f"Invalid name {name!r}: {reason}")


class DependencyConflictError(ScaffoldError):
    """Raised when two dependency groups declare the same package."""

    def __init__(self, keys: set[str]) -> None:
        self.keys = sorted(keys)
        super().__init__(
            "Dependency groups overlap on: " + ", ".join(self.keys)
        )
