"""Side effects the launch engine asks the host to perform."""
from __future__ import annotations

import importlib
import logging
import sys
from typing import Callable, Sequence

import pygame

from ..display.host import DisplayHost
from ..errors import SceneLoadError
from .relaunch import spawn_detached


class LaunchEffects:
    """Sink for everything that changes the outside world.

    Each effect is a separate call so callers can observe them independently.
    """

    def apply_resolution(self, width: int, height: int, fullscreen: bool) -> None:
        raise NotImplementedError

    def load_scene(self, scene: str) -> None:
        raise NotImplementedError

    def request_relaunch(self, command: Sequence[str]) -> None:
        raise NotImplementedError

    def request_termination(self) -> None:
        raise NotImplementedError


def load_entry_point(scene: str) -> Callable:
    """Resolve a 'package.module:callable' reference."""
    module_name, _, attr = scene.partition(":")
    if not module_name or not attr:
        raise ValueError(f"Scene must look like 'module:callable', got {scene!r}")
    module = importlib.import_module(module_name)
    return getattr(module, attr)


class ProcessLaunchEffects(LaunchEffects):
    """Real effects: pygame display, scene entry points, OS processes."""

    def __init__(self, host: DisplayHost) -> None:
        self.host = host
        self._log = logging.getLogger("launcher.effects")

    def apply_resolution(self, width: int, height: int, fullscreen: bool) -> None:
        self.host.apply_resolution(width, height, fullscreen)

    def load_scene(self, scene: str) -> None:
        try:
            entry = load_entry_point(scene)
        except (ImportError, AttributeError, ValueError) as exc:
            raise SceneLoadError(scene, exc) from exc
        self._log.info(f"Starting main scene {scene}")
        entry(pygame.display.get_surface())

    def request_relaunch(self, command: Sequence[str]) -> None:
        # Fire-and-forget: no handle to the child is kept
        spawn_detached(command)

    def request_termination(self) -> None:
        self._log.info("Exiting launcher process")
        pygame.quit()
        sys.exit(0)
