"""Host display environment: mode enumeration, capabilities, mode switching."""
from __future__ import annotations

import logging
import os
from typing import Dict, List, Optional, Tuple

import pygame

from ..graphics.backend import GraphicsBackend, HostCapabilities


class DisplayHost:
    """Interface to the windowing environment the launcher runs in."""

    def current_resolution(self) -> Tuple[int, int]:
        raise NotImplementedError

    def list_modes(self) -> List[Tuple[int, int]]:
        raise NotImplementedError

    def capabilities(self) -> HostCapabilities:
        raise NotImplementedError

    def apply_resolution(self, width: int, height: int, fullscreen: bool):  # type: ignore[no-untyped-def]
        raise NotImplementedError


def select_render_driver(backend: GraphicsBackend, render_drivers: Dict[str, str]) -> Optional[str]:
    """Hint SDL towards the render driver for `backend`.

    Must run before pygame.init(); the backend cannot change while the process is live.
    """
    driver = render_drivers.get(backend.value)
    if driver:
        os.environ["SDL_RENDER_DRIVER"] = driver
    return driver


class PygameDisplayHost(DisplayHost):
    """pygame-backed display host."""

    def __init__(
        self,
        active_backend: GraphicsBackend,
        display_index: int = 0,
        shader_level_override: Optional[int] = None,
    ) -> None:
        self.active_backend = active_backend
        self.display_index = display_index
        self.shader_level_override = shader_level_override
        self._log = logging.getLogger("display.host")
        self.screen: Optional[pygame.Surface] = None

    def current_resolution(self) -> Tuple[int, int]:
        """Desktop resolution the monitor currently reports."""
        try:
            sizes = pygame.display.get_desktop_sizes()
            if sizes and self.display_index < len(sizes):
                return tuple(sizes[self.display_index])  # type: ignore[return-value]
        except (AttributeError, pygame.error) as exc:
            self._log.debug(f"Desktop size query failed: {exc}")
        info = pygame.display.Info()
        return (info.current_w, info.current_h)

    def list_modes(self) -> List[Tuple[int, int]]:
        """Fullscreen modes supported by the monitor, in SDL order (largest first)."""
        try:
            modes = pygame.display.list_modes(0, pygame.FULLSCREEN, self.display_index)
        except pygame.error as exc:
            self._log.warning(f"Could not enumerate display modes: {exc}")
            return []
        # -1 means "any size"; nothing concrete to offer
        if modes == -1 or not modes:
            return []
        return [(int(w), int(h)) for w, h in modes]

    def capabilities(self) -> HostCapabilities:
        """Shader level from the GL context version, e.g. GL 4.5 -> 45."""
        if self.shader_level_override is not None:
            return HostCapabilities(shader_level=self.shader_level_override, device_family=self.active_backend)
        try:
            major = pygame.display.gl_get_attribute(pygame.GL_CONTEXT_MAJOR_VERSION)
            minor = pygame.display.gl_get_attribute(pygame.GL_CONTEXT_MINOR_VERSION)
            shader_level = major * 10 + minor
        except (AttributeError, pygame.error) as exc:
            self._log.debug(f"GL version unavailable: {exc}")
            shader_level = 0
        return HostCapabilities(shader_level=shader_level, device_family=self.active_backend)

    def open_window(self, size: Tuple[int, int], caption: str = "Launcher") -> pygame.Surface:
        """Open the small windowed surface the chooser is drawn on."""
        pygame.display.set_caption(caption)
        self.screen = pygame.display.set_mode(size)
        return self.screen

    def apply_resolution(self, width: int, height: int, fullscreen: bool) -> pygame.Surface:
        flags = pygame.FULLSCREEN if fullscreen else 0
        self.screen = pygame.display.set_mode((width, height), flags)
        self._log.info(f"Applied {width}x{height} ({'fullscreen' if fullscreen else 'windowed'})")
        return self.screen
