"""banshee-expo -- scaffolding CLI for Expo React Native projects.

Generates a starter project from a handful of choices (navigation library,
state management, optional TanStack Query) and adds boilerplate modules,
screens, components, services, and hooks to an existing generated project.

Quick usage::

    from banshee_expo.config import Navigation, ScaffoldConfig, StateManagement
    from banshee_expo.scaffolder import ProjectGenerator

    config = ScaffoldConfig(
        navigation=Navigation.EXPO_ROUTER,
        state_management=StateManagement.ZUSTAND,
        include_query_cache=True,
    )
    project_path = await ProjectGenerator(config).generate("/tmp/output", "my-app")
"""

__version__ = "1.0.0"
