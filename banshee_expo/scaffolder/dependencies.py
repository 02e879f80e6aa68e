"""Dependency sets for the generated ``package.json``.

The final ``dependencies`` map is the union of a fixed base map, one map per
navigation choice, one per state-management choice, and the TanStack Query
entry.  Every group introduces its own keys only, so the union does not
depend on merge order; :func:`merge_dependency_maps` enforces that.
"""

from __future__ import annotations

from collections.abc import Mapping

from banshee_expo.config import Navigation, ScaffoldConfig, StateManagement
from banshee_expo.errors import DependencyConflictError


BASE_DEPENDENCIES: dict[str, str] = {
    "expo": "~52.0.0",
    "react": "18.3.1",
    "react-native": "0.76.9",
    "expo-status-bar": "~2.0.0",
    "expo-asset": "~11.0.1",
    "expo-font": "~13.0.1",
    "expo-splash-screen": "~0.29.16",
    "react-native-web": "0.19.13",
    "axios": "^1.6.5",
    "react-native-toast-message": "^2.2.0",
    "@react-native-async-storage/async-storage": "1.23.1",
    # Native peers required by both navigation libraries
    "react-native-safe-area-context": "4.12.0",
    "react-native-screens": "~4.4.0",
}

NAVIGATION_DEPENDENCIES: dict[Navigation, dict[str, str]] = {
    Navigation.EXPO_ROUTER: {
        "expo-router": "~4.0.0",
        "expo-linking": "~7.0.0",
        "expo-constants": "~17.0.0",
    },
    Navigation.REACT_NAVIGATION: {
        "@react-navigation/native": "^6.1.9",
        "@react-navigation/native-stack": "^6.9.17",
    },
}

STATE_MANAGEMENT_DEPENDENCIES: dict[StateManagement, dict[str, str]] = {
    StateManagement.REDUX_TOOLKIT: {
        "@reduxjs/toolkit": "^2.0.1",
        "react-redux": "^9.0.4",
    },
    StateManagement.ZUSTAND: {
        "zustand": "^4.4.7",
    },
    StateManagement.NONE: {},
}

QUERY_CACHE_DEPENDENCIES: dict[str, str] = {
    "@tanstack/react-query": "^5.17.19",
}

DEV_DEPENDENCIES: dict[str, str] = {
    "@babel/core": "^7.25.2",
    "@types/react": "~18.3.12",
    "typescript": "^5.3.3",
    "eslint": "^8.57.0",
    "eslint-config-expo": "^7.1.2",
    "eslint-config-prettier": "^9.1.0",
    "eslint-plugin-prettier": "^5.1.3",
    "prettier": "^3.2.4",
}


def merge_dependency_maps(*groups: Mapping[str, str]) -> dict[str, str]:
    """Union *groups* into one map, sorted by package name.

    Raises:
        DependencyConflictError: If any package appears in more than one group.
    """
    merged: dict[str, str] = {}
    for group in groups:
        overlap = merged.keys() & group.keys()
        if overlap:
            raise DependencyConflictError(set(overlap))
        merged.update(group)
    return dict(sorted(merged.items()))


def dependency_groups(config: ScaffoldConfig) -> list[dict[str, str]]:
    """Return the option groups that apply to *config*, base map first."""
    groups = [
        BASE_DEPENDENCIES,
        NAVIGATION_DEPENDENCIES[config.navigation],
        STATE_MANAGEMENT_DEPENDENCIES[config.state_management],
    ]
    if config.include_query_cache:
        groups.append(QUERY_CACHE_DEPENDENCIES)
    return groups


def compute_dependencies(config: ScaffoldConfig) -> dict[str, str]:
    """Compute the runtime ``dependencies`` map for *config*."""
    return merge_dependency_maps(*dependency_groups(config))


def compute_dev_dependencies() -> dict[str, str]:
    return dict(sorted(DEV_DEPENDENCIES.items()))
