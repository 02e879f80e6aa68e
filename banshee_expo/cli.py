"""banshee-expo command-line interface.

Usage::

    banshee-expo my-app                      # interactive project generator
    banshee-expo my-app --navigation expo-router --state zustand --query
    banshee-expo add-module auth
    banshee-expo add-screen Profile
    banshee-expo add-component Button
    banshee-expo add-service UserService
    banshee-expo add-hook Auth               # creates src/hooks/useAuth.ts
    banshee-expo list-modules
    banshee-expo info
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from collections.abc import Awaitable, Callable, Sequence
from enum import Enum
from pathlib import Path

from rich.prompt import Confirm, IntPrompt

from banshee_expo import __version__
from banshee_expo.config import (
    Navigation,
    ScaffoldConfig,
    StateManagement,
    ToolSettings,
    parse_choice,
)
from banshee_expo.errors import ScaffoldError, TargetExistsError
from banshee_expo.inspector import (
    list_modules,
    print_modules,
    print_project_info,
    read_project_info,
)
from banshee_expo.installer import install_dependencies
from banshee_expo.scaffolder import EntityKind, ProjectGenerator, add_entity
from banshee_expo.scaffolder.entities import entity_name
from banshee_expo.utils import (
    console,
    create_progress,
    print_error,
    print_info,
    print_success,
    print_summary_table,
    print_warning,
    validate_name,
)

Handler = Callable[[argparse.Namespace], Awaitable[None]]

CREATE_COMMAND = "create"

_ENTITY_COMMANDS: dict[str, EntityKind] = {
    "add-module": EntityKind.MODULE,
    "add-screen": EntityKind.SCREEN,
    "add-component": EntityKind.COMPONENT,
    "add-service": EntityKind.SERVICE,
    "add-hook": EntityKind.HOOK,
}

_ENTITY_HELP: dict[EntityKind, str] = {
    EntityKind.MODULE: "Generate a new module with screens, controllers, and navigations",
    EntityKind.SCREEN: "Generate a new screen in src/screens",
    EntityKind.COMPONENT: "Generate a new component in src/components",
    EntityKind.SERVICE: "Generate a new service in src/services",
    EntityKind.HOOK: "Generate a new custom hook in src/hooks",
}

_COMMAND_NAMES = {CREATE_COMMAND, *_ENTITY_COMMANDS, "list-modules", "info"}


# ---------------------------------------------------------------------------
# Prompts
# ---------------------------------------------------------------------------


def _choose(message: str, options: Sequence[Enum]) -> Enum:
    """Ask the user to pick one of *options* by number."""
    console.print(f"[bold]{message}[/bold]")
    for index, option in enumerate(options, start=1):
        console.print(f"  {index}. {option.value}")
    picked = IntPrompt.ask(
        "Enter a number",
        choices=[str(i) for i in range(1, len(options) + 1)],
        default=1,
        console=console,
    )
    return options[picked - 1]


def resolve_scaffold_config(args: argparse.Namespace) -> ScaffoldConfig:
    """Build answers from ``--answers``, explicit flags, then prompts.

    Flags given alongside ``--answers`` override the loaded values.
    """
    if args.answers:
        overrides = {
            field_name: value
            for field_name, value in (
                ("navigation", args.navigation),
                ("state_management", args.state),
                ("include_query_cache", args.query),
            )
            if value is not None
        }
        return ScaffoldConfig.load(Path(args.answers)).model_copy(update=overrides)

    navigation = args.navigation
    if navigation is None:
        navigation = _choose("Choose navigation library:", list(Navigation))
    state_management = args.state
    if state_management is None:
        state_management = _choose(
            "Choose state management library:",
            [StateManagement.REDUX_TOOLKIT, StateManagement.ZUSTAND, StateManagement.NONE],
        )
    include_query_cache = args.query
    if include_query_cache is None:
        include_query_cache = Confirm.ask("Add TanStack Query?", default=True, console=console)

    return ScaffoldConfig(
        navigation=navigation,
        state_management=state_management,
        include_query_cache=include_query_cache,
    )


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------


async def cmd_create(args: argparse.Namespace) -> None:
    project_name = validate_name(args.project_name)
    project_path = Path(args.directory) / project_name
    # Fail before prompting; realize() repeats the check
    if project_path.exists():
        raise TargetExistsError(f"Directory {project_name}", project_path)

    settings = ToolSettings.from_env()
    if args.skip_install:
        settings = settings.model_copy(update={"skip_install": True})

    print_info(f"Creating a new Expo app: {project_name}")
    config = resolve_scaffold_config(args)

    with create_progress() as progress:
        progress.add_task("Creating project structure...", total=None)
        await ProjectGenerator(config).generate(args.directory, project_name)
    print_success("Project structure created!")

    if settings.skip_install:
        print_warning("Skipping dependency installation.")
    else:
        print_info(f"Installing dependencies with {settings.package_manager}...")
        await install_dependencies(project_path, settings)
        print_success("Dependencies installed!")

    console.print()
    print_summary_table(
        {
            "Project": project_name,
            "Location": str(project_path),
            "Navigation": config.navigation.value,
            "State Management": config.state_management.value,
            "TanStack Query": "Yes" if config.include_query_cache else "No",
        },
        title=f"✨ Project {project_name} created successfully!",
    )
    print_info("To get started:")
    console.print(f"  cd {project_name}", highlight=False)
    if settings.skip_install:
        console.print(f"  {' '.join(settings.install_command)}", highlight=False)
    console.print("  npx expo start\n", highlight=False)


def _entity_handler(kind: EntityKind) -> Handler:
    async def handler(args: argparse.Namespace) -> None:
        root = Path(args.project_dir)
        name = entity_name(kind, args.name)
        print_info(f"Creating {kind.value}: {name}")
        target = await add_entity(kind, name, root)
        print_success(f"{kind.label} {name} created successfully!")
        print_info(f"Location: {target.relative_to(root).as_posix()}")

    return handler


async def cmd_list_modules(args: argparse.Namespace) -> None:
    print_modules(list_modules(Path(args.project_dir)))


async def cmd_info(args: argparse.Namespace) -> None:
    print_project_info(read_project_info(Path(args.project_dir)))


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


def _enum_type(enum_cls: type[Enum]) -> Callable[[str], Enum]:
    def convert(value: str) -> Enum:
        try:
            return parse_choice(enum_cls, value)
        except ValueError as exc:
            raise argparse.ArgumentTypeError(str(exc)) from exc

    convert.__name__ = enum_cls.__name__
    return convert


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="banshee-expo",
        description="CLI to generate Expo React Native projects",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  banshee-expo my-app\n"
            "  banshee-expo add-module auth\n"
            "  banshee-expo add-hook Auth\n"
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", metavar="<command>")

    create = subparsers.add_parser(
        CREATE_COMMAND,
        help="Create a new project (the default when the first argument is a name)",
    )
    create.add_argument("project_name", metavar="project-name", help="Name of the project")
    create.add_argument(
        "--directory", "-d",
        default=".",
        help="Parent directory for the new project (default: current directory)",
    )
    create.add_argument(
        "--navigation",
        type=_enum_type(Navigation),
        default=None,
        help="expo-router or react-navigation (prompted if omitted)",
    )
    create.add_argument(
        "--state",
        type=_enum_type(StateManagement),
        default=None,
        help="redux-toolkit, zustand, or none (prompted if omitted)",
    )
    create.add_argument(
        "--query",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Add TanStack Query (prompted if omitted)",
    )
    create.add_argument(
        "--answers",
        default=None,
        help="JSON answers file; skips all prompts (explicit flags override it)",
    )
    create.add_argument(
        "--skip-install",
        action="store_true",
        help="Do not run the package manager after generating",
    )
    create.set_defaults(handler=cmd_create)

    for command, kind in _ENTITY_COMMANDS.items():
        sub = subparsers.add_parser(command, help=_ENTITY_HELP[kind])
        sub.add_argument("name", metavar=f"{kind.value}-name")
        _add_project_dir(sub)
        sub.set_defaults(handler=_entity_handler(kind))

    modules = subparsers.add_parser("list-modules", help="List all available modules")
    _add_project_dir(modules)
    modules.set_defaults(handler=cmd_list_modules)

    info = subparsers.add_parser("info", help="Show project information")
    _add_project_dir(info)
    info.set_defaults(handler=cmd_info)

    return parser


def _add_project_dir(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--project-dir", "-C",
        default=".",
        help="Root of the generated project (default: current directory)",
    )


def _normalise_argv(argv: list[str]) -> list[str]:
    """Treat ``banshee-expo <name> ...`` as ``banshee-expo create <name> ...``."""
    if not argv or argv[0].startswith("-") or argv[0] in _COMMAND_NAMES:
        return argv
    return [CREATE_COMMAND, *argv]


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point for ``banshee-expo`` and ``python -m banshee_expo``."""
    parser = build_parser()
    raw_args = list(sys.argv[1:] if argv is None else argv)
    if not raw_args:
        parser.print_help()
        return

    args = parser.parse_args(_normalise_argv(raw_args))
    if getattr(args, "handler", None) is None:
        parser.print_help()
        return

    try:
        asyncio.run(args.handler(args))
    except ScaffoldError as exc:
        print_error(f"Error: {exc}")
        if exc.hint:
            print_info(exc.hint)
        sys.exit(1)
    except KeyboardInterrupt:
        print_warning("Aborted.")
        sys.exit(130)


if __name__ == "__main__":
    main()
