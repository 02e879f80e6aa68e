"""banshee-expo configuration.

Two Pydantic v2 models live here:

* ``ScaffoldConfig`` -- the user's answers (navigation, state management,
  TanStack Query).  Frozen once built; every branch of project generation
  reads from it.  Can be saved to and loaded from a JSON answers file so the
  initializer can run without prompting.
* ``ToolSettings`` -- knobs for the tool itself (package manager, install
  timeout), usually built from environment variables.
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from banshee_expo.errors import ConfigError, SettingsError


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class Navigation(str, Enum):
    """Navigation library used by the generated app."""
    EXPO_ROUTER = "Expo Router"
    REACT_NAVIGATION = "React Navigation"

    @property
    def slug(self) -> str:
        return self.value.lower().replace(" ", "-")


class StateManagement(str, Enum):
    """State management library, or none at all."""
    REDUX_TOOLKIT = "Redux Toolkit"
    ZUSTAND = "Zustand"
    NONE = "None"

    @property
    def slug(self) -> str:
        return self.value.lower().replace(" ", "-")


def parse_choice(enum_cls: type[Enum], value: str) -> Enum:
    """Resolve *value* against an enum's display labels or slugs.

    ``"Expo Router"``, ``"expo-router"`` and ``"EXPO_ROUTER"`` all resolve to
    ``Navigation.EXPO_ROUTER``.
    """
    wanted = value.strip().lower().replace("_", "-").replace(" ", "-")
    for member in enum_cls:
        if wanted in (member.slug, member.name.lower().replace("_", "-")):
            return member
    raise ValueError(f"unknown {enum_cls.__name__} choice: {value!r}")


# ---------------------------------------------------------------------------
# Scaffold answers
# ---------------------------------------------------------------------------

class ScaffoldConfig(BaseModel):
    """The choices that drive project generation."""

    model_config = ConfigDict(frozen=True)

    navigation: Navigation = Field(default=Navigation.EXPO_ROUTER)
    state_management: StateManagement = Field(default=StateManagement.NONE)
    include_query_cache: bool = Field(
        default=True, description="Add TanStack Query and a shared QueryClient"
    )

    def save(self, path: Path) -> Path:
        """Persist the answers to a JSON file and return its path."""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "ScaffoldConfig":
        """Load answers previously written by :meth:`save`.

        Raises:
            ConfigError: If the file is missing or does not validate.
        """
        source = Path(path)
        try:
            raw = source.read_text(encoding="utf-8")
            return cls.model_validate_json(raw)
        except OSError as exc:
            raise ConfigError(source, exc.strerror or str(exc)) from exc
        except ValidationError as exc:
            raise ConfigError(source, f"{exc.error_count()} validation error(s)") from exc


# ---------------------------------------------------------------------------
# Tool settings
# ---------------------------------------------------------------------------

_TRUTHY = {"1", "true", "yes", "on"}


class ToolSettings(BaseModel):
    """Settings for the CLI itself rather than the generated project."""

    package_manager: str = Field(default="npm")
    install_timeout: int = Field(
        default=600, ge=30, description="Seconds before the install step is killed"
    )
    skip_install: bool = Field(default=False)

    @property
    def install_command(self) -> list[str]:
        return [self.package_manager, "install"]

    @classmethod
    def from_env(cls) -> "ToolSettings":
        """Build settings from environment variables.

        Recognised variables (all optional):
            BANSHEE_PACKAGE_MANAGER, BANSHEE_INSTALL_TIMEOUT, BANSHEE_SKIP_INSTALL.

        Raises:
            SettingsError: If a variable does not convert or validate.
        """
        kwargs: dict[str, object] = {}
        if os.environ.get("BANSHEE_PACKAGE_MANAGER"):
            kwargs["package_manager"] = os.environ["BANSHEE_PACKAGE_MANAGER"]
        timeout = os.environ.get("BANSHEE_INSTALL_TIMEOUT")
        if timeout:
            try:
                kwargs["install_timeout"] = int(timeout)
            except ValueError as exc:
                raise SettingsError(
                    "BANSHEE_INSTALL_TIMEOUT", timeout, "expected a whole number of seconds"
                ) from exc
        if os.environ.get("BANSHEE_SKIP_INSTALL"):
            kwargs["skip_install"] = os.environ["BANSHEE_SKIP_INSTALL"].lower() in _TRUTHY

        try:
            return cls(**kwargs)
        except ValidationError as exc:
            error = exc.errors()[0]
            field_name = str(error["loc"][0]) if error["loc"] else ""
            variable = f"BANSHEE_{field_name.upper()}"
            raise SettingsError(
                variable, os.environ.get(variable, ""), error["msg"]
            ) from exc
