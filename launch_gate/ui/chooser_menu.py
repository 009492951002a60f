"""Launcher chooser state and navigation."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional

from ..display.negotiator import ResolutionNegotiator
from ..graphics.backend import GraphicsBackend
from ..launcher.engine import ChooserState
from ..persistence.settings_store import SettingsStore


class ChooserRow(Enum):
    """Rows of the chooser."""
    RESOLUTION = auto()
    WINDOWED = auto()
    GRAPHICS_API = auto()
    PLAY = auto()
    QUIT = auto()


class ChooserAction(Enum):
    """What the main loop should do after a select."""
    NONE = auto()
    PLAY = auto()
    QUIT = auto()


@dataclass
class MenuItem:
    """A single chooser row."""
    label: str
    row: ChooserRow
    value: Optional[str] = None  # Current value shown on the right


class ChooserMenu:
    """Manages chooser selection and writes each change straight to the store."""

    def __init__(self, state: ChooserState, store: SettingsStore, negotiator: ResolutionNegotiator):
        self.state = state
        self.store = store
        self.negotiator = negotiator
        self.selected_index = 0
        self.rows: List[ChooserRow] = [
            ChooserRow.RESOLUTION,
            ChooserRow.WINDOWED,
            ChooserRow.GRAPHICS_API,
            ChooserRow.PLAY,
            ChooserRow.QUIT,
        ]

    @property
    def selected_row(self) -> ChooserRow:
        return self.rows[self.selected_index]

    def items(self) -> List[MenuItem]:
        """Rows with their current values, for rendering."""
        mode = self.state.catalog[self.state.selected_index]
        return [
            MenuItem("Resolution", ChooserRow.RESOLUTION, mode.label),
            MenuItem("Windowed", ChooserRow.WINDOWED, "On" if not self.state.fullscreen else "Off"),
            MenuItem("Graphics API", ChooserRow.GRAPHICS_API, self.state.selected_backend.value),
            MenuItem("Play", ChooserRow.PLAY),
            MenuItem("Quit", ChooserRow.QUIT),
        ]

    def navigate(self, delta: int) -> None:
        """Move the focus, wrapping at both ends."""
        self.selected_index = (self.selected_index + delta) % len(self.rows)

    def adjust(self, delta: int) -> None:
        """Change the value of the focused row."""
        row = self.selected_row
        if row is ChooserRow.RESOLUTION:
            self.set_resolution((self.state.selected_index + delta) % len(self.state.catalog))
        elif row is ChooserRow.WINDOWED:
            self.set_windowed(self.state.fullscreen)
        elif row is ChooserRow.GRAPHICS_API:
            backends = self.state.backends
            if self.state.selected_backend in backends:
                position = backends.index(self.state.selected_backend)
            else:
                position = 0
            self.set_graphics_backend(backends[(position + delta) % len(backends)])

    def activate(self) -> ChooserAction:
        """Handle select on the focused row."""
        row = self.selected_row
        if row is ChooserRow.PLAY:
            return ChooserAction.PLAY
        if row is ChooserRow.QUIT:
            return ChooserAction.QUIT
        self.adjust(1)
        return ChooserAction.NONE

    def set_resolution(self, index: int) -> None:
        self.state.selected_index = index
        self.negotiator.select(self.state.catalog, index)

    def set_windowed(self, windowed: bool) -> None:
        self.state.fullscreen = not windowed
        self.store.set_fullscreen(self.state.fullscreen)

    def set_graphics_backend(self, backend: GraphicsBackend) -> None:
        # Only offered backends can be picked
        if backend not in self.state.backends:
            return
        self.state.selected_backend = backend
        self.store.set_graphics_backend(backend)
