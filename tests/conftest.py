"""
Shared fixtures: an in-memory display host and a recording effects sink.
"""
from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence, Tuple

import pytest

from launch_gate.display.host import DisplayHost
from launch_gate.graphics.backend import GraphicsBackend, HostCapabilities
from launch_gate.launcher.effects import LaunchEffects
from launch_gate.persistence.settings_store import SettingsStore


class FakeHost(DisplayHost):
    """Display host with a fixed monitor and a query counter."""

    def __init__(
        self,
        current: Tuple[int, int] = (2560, 1440),
        modes: Optional[List[Tuple[int, int]]] = None,
        shader_level: int = 50,
        device_family: Optional[GraphicsBackend] = GraphicsBackend.PRIMARY,
    ) -> None:
        self.current = current
        self.modes = modes if modes is not None else [(2560, 1440), (1920, 1080), (1280, 720)]
        self.caps = HostCapabilities(shader_level=shader_level, device_family=device_family)
        self.mode_queries = 0
        self.applied: List[Tuple[int, int, bool]] = []

    def current_resolution(self) -> Tuple[int, int]:
        return self.current

    def list_modes(self) -> List[Tuple[int, int]]:
        self.mode_queries += 1
        return list(self.modes)

    def capabilities(self) -> HostCapabilities:
        return self.caps

    def apply_resolution(self, width: int, height: int, fullscreen: bool) -> None:
        self.applied.append((width, height, fullscreen))


class RecordingEffects(LaunchEffects):
    """Records every effect in call order instead of performing it."""

    def __init__(self) -> None:
        self.calls: List[tuple] = []

    def apply_resolution(self, width: int, height: int, fullscreen: bool) -> None:
        self.calls.append(("apply_resolution", width, height, fullscreen))

    def load_scene(self, scene: str) -> None:
        self.calls.append(("load_scene", scene))

    def request_relaunch(self, command: Sequence[str]) -> None:
        self.calls.append(("request_relaunch", list(command)))

    def request_termination(self) -> None:
        self.calls.append(("request_termination",))

    def names(self) -> List[str]:
        return [call[0] for call in self.calls]


@pytest.fixture
def settings_path(tmp_path: Path) -> Path:
    return tmp_path / "data" / "launcher_prefs.json"


@pytest.fixture
def store(settings_path: Path) -> SettingsStore:
    return SettingsStore(settings_path)


@pytest.fixture
def host() -> FakeHost:
    return FakeHost()


@pytest.fixture
def effects() -> RecordingEffects:
    return RecordingEffects()
