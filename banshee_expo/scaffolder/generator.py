"""Main scaffolding orchestrator.

Takes a ``ScaffoldConfig`` and a project name and plans a complete Expo
starter project: folder skeleton, manifests, root layout for the chosen
navigation library, API client, optional QueryClient, and store files for the
chosen state-management library.  Planning is pure; ``generate`` hands the
plan to :func:`banshee_expo.scaffolder.writer.realize`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from banshee_expo.config import Navigation, ScaffoldConfig, StateManagement
from banshee_expo.utils import dump_json

from .dependencies import compute_dependencies, compute_dev_dependencies
from .plan import GenerationPlan
from .templates import TemplateRenderer
from .writer import realize


# ---------------------------------------------------------------------------
# Project layout
# ---------------------------------------------------------------------------

BASE_DIRECTORIES: tuple[str, ...] = (
    "app",
    "src/components",
    "src/screens",
    "src/modules",
    "src/utils",
    "src/services",
    "src/constants",
    "src/types",
    "src/hooks",
    "src/assets",
    "src/store",
)

# Folders that would otherwise be empty in a fresh checkout
PLACEHOLDER_FILES: tuple[str, ...] = (
    "src/modules/.gitkeep",
    "src/assets/.gitkeep",
)

INDEX_FOLDERS: tuple[str, ...] = (
    "src/components",
    "src/screens",
    "src/utils",
    "src/services",
    "src/constants",
    "src/types",
    "src/hooks",
)

QUERY_CLIENT_DIR = "src/config"

# Navigation choice -> root layout template
LAYOUT_TEMPLATES: dict[Navigation, str] = {
    Navigation.EXPO_ROUTER: "project/app/_layout.expo-router.tsx.j2",
    Navigation.REACT_NAVIGATION: "project/app/_layout.react-navigation.tsx.j2",
}

# State-management choice -> (template, output path) pairs, in write order
STORE_TEMPLATES: dict[StateManagement, tuple[tuple[str, str], ...]] = {
    StateManagement.REDUX_TOOLKIT: (
        ("project/src/store/redux/authSlice.ts.j2", "src/store/authSlice.ts"),
        ("project/src/store/redux/store.ts.j2", "src/store/store.ts"),
        ("project/src/store/redux/hooks.ts.j2", "src/store/hooks.ts"),
        ("project/src/store/redux/index.ts.j2", "src/store/index.ts"),
    ),
    StateManagement.ZUSTAND: (
        ("project/src/store/zustand/authStore.ts.j2", "src/store/authStore.ts"),
        ("project/src/store/zustand/index.ts.j2", "src/store/index.ts"),
    ),
    StateManagement.NONE: (),
}


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Plans and writes a new Expo project.

    Given a ``ScaffoldConfig``, the plan contains:
    - The ``app/`` and ``src/*`` folder skeleton with barrel files
    - package.json, tsconfig.json, app.json, .gitignore, ESLint and Prettier configs
    - A root layout for Expo Router or React Navigation
    - An axios API client with auth and error-toast interceptors
    - A TanStack QueryClient (optional)
    - Redux Toolkit or Zustand auth store (optional)
    """

    def __init__(
        self, config: ScaffoldConfig, renderer: TemplateRenderer | None = None
    ) -> None:
        self.config = config
        self.renderer = renderer or TemplateRenderer()

    # -- Public API --------------------------------------------------------

    def plan(self, project_name: str) -> GenerationPlan:
        """Return the ordered operations for a project called *project_name*.

        Performs no I/O beyond reading the bundled templates.
        """
        plan = GenerationPlan()
        self._plan_directory_structure(plan)
        self._plan_manifests(plan, project_name)
        self._plan_layout(plan)
        self._plan_index_files(plan)
        self._plan_api_client(plan)
        if self.config.include_query_cache:
            self._plan_query_client(plan)
        self._plan_store(plan)
        return plan

    async def generate(self, output_dir: str | Path, project_name: str) -> Path:
        """Plan the project and write it to ``output_dir/project_name``.

        Returns:
            Path to the generated project root.

        Raises:
            TargetExistsError: If the project directory already exists.
            FileOperationError: If any directory or file cannot be created.
        """
        project_root = Path(output_dir) / project_name
        await realize(self.plan(project_name), project_root)
        return project_root

    # -- Directory structure -----------------------------------------------

    def _plan_directory_structure(self, plan: GenerationPlan) -> None:
        for directory in BASE_DIRECTORIES:
            plan.add_dir(directory)
        for placeholder in PLACEHOLDER_FILES:
            plan.add_file(placeholder)

    # -- Manifests ---------------------------------------------------------

    def _plan_manifests(self, plan: GenerationPlan, project_name: str) -> None:
        plan.add_file("package.json", dump_json(build_package_json(self.config, project_name)))
        plan.add_file("tsconfig.json", dump_json(build_tsconfig()))
        plan.add_file("app.json", dump_json(build_app_json(project_name)))
        plan.add_file(".gitignore", self.renderer.render("project/gitignore.j2"))
        plan.add_file(".eslintrc.js", self.renderer.render("project/eslintrc.js.j2"))
        plan.add_file(".prettierrc", dump_json(PRETTIER_CONFIG))
        plan.add_file(".prettierignore", self.renderer.render("project/prettierignore.j2"))

    # -- Navigation --------------------------------------------------------

    def _plan_layout(self, plan: GenerationPlan) -> None:
        navigation = self.config.navigation
        plan.add_file("app/_layout.tsx", self.renderer.render(LAYOUT_TEMPLATES[navigation]))
        # File-based routing needs an index route; React Navigation registers screens in code
        if navigation is Navigation.EXPO_ROUTER:
            plan.add_file("app/index.tsx", self.renderer.render("project/app/index.tsx.j2"))

    def _plan_index_files(self, plan: GenerationPlan) -> None:
        for folder in INDEX_FOLDERS:
            plan.add_file(f"{folder}/index.ts")

    # -- Services ----------------------------------------------------------

    def _plan_api_client(self, plan: GenerationPlan) -> None:
        plan.add_file(
            "src/services/api.ts",
            self.renderer.render("project/src/services/api.ts.j2"),
        )

    def _plan_query_client(self, plan: GenerationPlan) -> None:
        plan.add_dir(QUERY_CLIENT_DIR)
        plan.add_file(
            f"{QUERY_CLIENT_DIR}/queryClient.ts",
            self.renderer.render("project/src/config/queryClient.ts.j2"),
        )

    # -- State management --------------------------------------------------

    def _plan_store(self, plan: GenerationPlan) -> None:
        for template_name, output_path in STORE_TEMPLATES[self.config.state_management]:
            plan.add_file(output_path, self.renderer.render(template_name))


def plan_project(
    config: ScaffoldConfig,
    project_name: str,
    renderer: TemplateRenderer | None = None,
) -> GenerationPlan:
    """Convenience wrapper around :meth:`ProjectGenerator.plan`."""
    return ProjectGenerator(config, renderer).plan(project_name)


# ---------------------------------------------------------------------------
# Manifest builders
# ---------------------------------------------------------------------------

PACKAGE_SCRIPTS: dict[str, str] = {
    "start": "expo start",
    "android": "expo start --android",
    "ios": "expo start --ios",
    "web": "expo start --web",
    "lint": "eslint .",
    "lint:fix": "eslint . --fix",
    "format": 'prettier --write "**/*.{js,jsx,ts,tsx,json,md}"',
    "format:check": 'prettier --check "**/*.{js,jsx,ts,tsx,json,md}"',
}

PRETTIER_CONFIG: dict[str, Any] = {
    "semi": True,
    "trailingComma": "es5",
    "singleQuote": True,
    "printWidth": 100,
    "tabWidth": 2,
    "useTabs": False,
    "arrowParens": "always",
    "endOfLine": "lf",
}

# tsconfig alias -> source folder
PATH_ALIASES: dict[str, str] = {
    "@/*": "src/*",
    "@components/*": "src/components/*",
    "@screens/*": "src/screens/*",
    "@modules/*": "src/modules/*",
    "@utils/*": "src/utils/*",
    "@services/*": "src/services/*",
    "@constants/*": "src/constants/*",
    "@types/*": "src/types/*",
    "@hooks/*": "src/hooks/*",
    "@assets/*": "src/assets/*",
    "@store/*": "src/store/*",
}


def build_package_json(config: ScaffoldConfig, project_name: str) -> dict[str, Any]:
    """Build the ``package.json`` payload for *config*."""
    return {
        "name": project_name,
        "version": "1.0.0",
        "main": "expo-router/entry",
        "scripts": dict(PACKAGE_SCRIPTS),
        "dependencies": compute_dependencies(config),
        "devDependencies": compute_dev_dependencies(),
        "private": True,
    }


def build_tsconfig() -> dict[str, Any]:
    return {
        "extends": "expo/tsconfig.base",
        "compilerOptions": {
            "strict": True,
            "baseUrl": ".",
            "paths": {alias: [target] for alias, target in PATH_ALIASES.items()},
        },
    }


def build_app_json(project_name: str) -> dict[str, Any]:
    return {
        "expo": {
            "name": project_name,
            "slug": project_name,
            "version": "1.0.0",
            "orientation": "portrait",
            "icon": "./src/assets/icon.png",
            "userInterfaceStyle": "light",
            "splash": {
                "image": "./src/assets/splash.png",
                "resizeMode": "contain",
                "backgroundColor": "#ffffff",
            },
            "ios": {"supportsTablet": True},
            "android": {
                "adaptiveIcon": {
                    "foregroundImage": "./src/assets/adaptive-icon.png",
                    "backgroundColor": "#ffffff",
                },
            },
            "web": {"favicon": "./src/assets/favicon.png"},
        },
    }
