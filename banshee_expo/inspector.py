"""Read-only reports about an existing generated project.

Backs the ``info`` and ``list-modules`` commands: reading is separated from
printing so the reads can be tested without capturing console output.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, Field
from rich.markup import escape

from banshee_expo.config import Navigation, StateManagement
from banshee_expo.errors import ManifestError, MissingProjectStateError
from banshee_expo.utils import console, load_json, print_info


NOT_CONFIGURED = "Not configured"

# Libraries reported by ``info`` when present, in display order
WATCHED_LIBRARIES: tuple[str, ...] = (
    "expo",
    "react",
    "react-native",
    "expo-router",
    "@react-navigation/native",
    "@reduxjs/toolkit",
    "zustand",
    "@tanstack/react-query",
)

# Marker dependency -> label; first match wins
NAVIGATION_MARKERS: tuple[tuple[str, str], ...] = (
    ("expo-router", Navigation.EXPO_ROUTER.value),
    ("@react-navigation/native", Navigation.REACT_NAVIGATION.value),
)

STATE_MANAGEMENT_MARKERS: tuple[tuple[str, str], ...] = (
    ("@reduxjs/toolkit", StateManagement.REDUX_TOOLKIT.value),
    ("zustand", StateManagement.ZUSTAND.value),
)

QUERY_CACHE_MARKER = "@tanstack/react-query"


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------

class ModuleInfo(BaseModel):
    """A folder under ``src/modules`` and its immediate sub-folders."""
    name: str
    sub_folders: list[str] = Field(default_factory=list)


class ProjectInfo(BaseModel):
    """Summary of a generated project's ``package.json``."""
    name: str = ""
    version: str = ""
    navigation: str = NOT_CONFIGURED
    state_management: str = StateManagement.NONE.value
    query_cache: bool = False
    libraries: dict[str, str] = Field(
        default_factory=dict, description="Watched libraries present, with versions"
    )


# ---------------------------------------------------------------------------
# Reads
# ---------------------------------------------------------------------------

def list_modules(project_root: str | Path) -> list[ModuleInfo]:
    """List module folders under ``src/modules``, sorted by name.

    Raises:
        MissingProjectStateError: If ``src/modules`` does not exist.
    """
    modules_path = Path(project_root) / "src" / "modules"
    if not modules_path.is_dir():
        raise MissingProjectStateError("src/modules directory", modules_path)

    return [
        ModuleInfo(name=entry.name, sub_folders=_sub_directories(entry))
        for entry in _sub_directories_paths(modules_path)
    ]


def read_project_info(project_root: str | Path) -> ProjectInfo:
    """Summarise the ``package.json`` in *project_root*.

    Raises:
        MissingProjectStateError: If there is no ``package.json``.
        ManifestError: If the manifest is not a JSON object.
    """
    manifest_path = Path(project_root) / "package.json"
    if not manifest_path.is_file():
        raise MissingProjectStateError("package.json", manifest_path)

    try:
        manifest = load_json(manifest_path)
    except (OSError, json.JSONDecodeError, ValueError) as exc:
        raise ManifestError(manifest_path, str(exc)) from exc

    dependencies = manifest.get("dependencies") or {}
    if not isinstance(dependencies, dict):
        raise ManifestError(manifest_path, "'dependencies' is not an object")

    return ProjectInfo(
        name=str(manifest.get("name", "")),
        version=str(manifest.get("version", "")),
        navigation=_first_marker(dependencies, NAVIGATION_MARKERS, NOT_CONFIGURED),
        state_management=_first_marker(
            dependencies, STATE_MANAGEMENT_MARKERS, StateManagement.NONE.value
        ),
        query_cache=bool(dependencies.get(QUERY_CACHE_MARKER)),
        libraries={
            lib: str(dependencies[lib])
            for lib in WATCHED_LIBRARIES
            if dependencies.get(lib)
        },
    )


def _first_marker(
    dependencies: dict[str, object],
    markers: tuple[tuple[str, str], ...],
    default: str,
) -> str:
    for package, label in markers:
        if dependencies.get(package):
            return label
    return default


def _sub_directories_paths(path: Path) -> list[Path]:
    return sorted((p for p in path.iterdir() if p.is_dir()), key=lambda p: p.name)


def _sub_directories(path: Path) -> list[str]:
    return [p.name for p in _sub_directories_paths(path)]


# ---------------------------------------------------------------------------
# Printing
# ---------------------------------------------------------------------------

def print_modules(modules: list[ModuleInfo]) -> None:
    if not modules:
        print_info("No modules found.")
        print_info("Create one with: banshee-expo add-module <module-name>")
        return

    console.print("\n[blue]Available Modules:[/blue]\n")
    for index, module in enumerate(modules, start=1):
        console.print(f"  {index}. [green]{escape(module.name)}[/green]", highlight=False)
        if module.sub_folders:
            console.print(f"     [dim]└─[/dim] {escape(', '.join(module.sub_folders))}", highlight=False)
    console.print()


def print_project_info(info: ProjectInfo) -> None:
    console.print("\n[blue]📦 Project Information:[/blue]\n")
    console.print(f"  [bold]Name:[/bold] {escape(info.name)}", highlight=False)
    console.print(f"  [bold]Version:[/bold] {escape(info.version)}", highlight=False)
    console.print(f"  [bold]Navigation:[/bold] {info.navigation}", highlight=False)
    console.print(f"  [bold]State Management:[/bold] {info.state_management}", highlight=False)
    console.print(
        f"  [bold]TanStack Query:[/bold] {'Yes' if info.query_cache else 'No'}",
        highlight=False,
    )

    console.print("\n[blue]📚 Installed Libraries:[/blue]\n")
    for lib, version in info.libraries.items():
        console.print(f"  [green]✓[/green] {escape(lib)} [dim]{escape(version)}[/dim]", highlight=False)
    console.print()
