"""Shared pytest fixtures for the banshee-expo test suite.

Provides reusable fixtures for:
- Every ScaffoldConfig combination (2 navigation x 3 state x 2 query = 12)
- A shared TemplateRenderer
- Temporary project directories and package.json manifests
"""

from __future__ import annotations

import itertools
import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from banshee_expo.config import Navigation, ScaffoldConfig, StateManagement
from banshee_expo.scaffolder.templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Scaffold configurations
# ---------------------------------------------------------------------------

ALL_CONFIGS: list[ScaffoldConfig] = [
    ScaffoldConfig(
        navigation=navigation,
        state_management=state,
        include_query_cache=query,
    )
    for navigation, state, query in itertools.product(
        Navigation, StateManagement, (True, False)
    )
]


def _config_id(config: ScaffoldConfig) -> str:
    query = "query" if config.include_query_cache else "no-query"
    return f"{config.navigation.slug}-{config.state_management.slug}-{query}"


@pytest.fixture(params=ALL_CONFIGS, ids=_config_id)
def any_config(request: pytest.FixtureRequest) -> ScaffoldConfig:
    """Parametrised over all twelve answer combinations."""
    return request.param


@pytest.fixture
def expo_router_config() -> ScaffoldConfig:
    return ScaffoldConfig(
        navigation=Navigation.EXPO_ROUTER,
        state_management=StateManagement.REDUX_TOOLKIT,
        include_query_cache=True,
    )


@pytest.fixture
def react_navigation_config() -> ScaffoldConfig:
    return ScaffoldConfig(
        navigation=Navigation.REACT_NAVIGATION,
        state_management=StateManagement.NONE,
        include_query_cache=False,
    )


# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------

@pytest.fixture(scope="session")
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """An existing (empty) generated-project root."""
    root = tmp_path / "existing-app"
    root.mkdir()
    return root


@pytest.fixture
def write_manifest(project_dir: Path) -> Callable[..., Path]:
    """Write a package.json into ``project_dir`` and return its path."""

    def _write(dependencies: dict[str, str] | None = None, **fields: Any) -> Path:
        manifest = {"name": "existing-app", "version": "1.0.0", **fields}
        if dependencies is not None:
            manifest["dependencies"] = dependencies
        path = project_dir / "package.json"
        path.write_text(json.dumps(manifest, indent=2), encoding="utf-8")
        return path

    return _write
