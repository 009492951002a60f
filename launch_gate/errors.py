"""Launcher error types."""
from __future__ import annotations


class LauncherError(Exception):
    """Base class for fatal launcher configuration errors."""


class ExecutableNotFound(LauncherError):
    """The running binary could not be located on disk, so no relaunch is possible."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Executable not found: {path}")
        self.path = path


class MalformedResolution(LauncherError):
    """The persisted resolution label could not be parsed."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Malformed resolution: {value!r}")
        self.value = value


class SceneLoadError(LauncherError):
    """The configured main scene reference could not be imported."""

    def __init__(self, scene: str, reason: object) -> None:
        super().__init__(f"Cannot load main scene {scene!r}: {reason}")
        self.scene = scene
