"""Startup policy: show the chooser, or apply stored settings and hand off."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Callable, List, Optional, Tuple, Union

from ..display.catalog import DisplayModeCatalog
from ..display.host import DisplayHost
from ..display.modes import DisplayMode, parse_resolution_label
from ..display.negotiator import ResolutionNegotiator
from ..graphics.backend import (
    BackendCompatibilityChecker,
    GraphicsBackend,
    backend_argument,
)
from ..persistence.settings_store import GRAPHICS_API_KEY, SettingsStore
from .effects import LaunchEffects
from .relaunch import resolve_executable


class StartupPath(Enum):
    SHOW_CHOOSER = auto()
    APPLY_AND_PROCEED = auto()


@dataclass(frozen=True)
class ProceedInProcess:
    """Continue into the main scene in this process."""


@dataclass(frozen=True)
class RelaunchWithArgs:
    """Start `command` with `args` appended, then exit this process."""
    args: str
    command: Tuple[str, ...] = ()

    def argv(self) -> List[str]:
        return [*self.command, self.args]


ConfirmOutcome = Union[ProceedInProcess, RelaunchWithArgs]


@dataclass
class ChooserState:
    """What the chooser shows when it opens."""
    catalog: List[DisplayMode]
    selected_index: int
    fullscreen: bool
    backends: List[GraphicsBackend] = field(default_factory=list)
    selected_backend: GraphicsBackend = GraphicsBackend.PRIMARY


def decide_startup_path(store: SettingsStore) -> StartupPath:
    """Skip the chooser only after an explicit confirmation."""
    if store.is_chooser_confirmed():
        return StartupPath.APPLY_AND_PROCEED
    return StartupPath.SHOW_CHOOSER


class LaunchDecisionEngine:
    """Top-level launch policy.

    All state lives in the settings store; the engine reads and writes only the
    resolution, fullscreen, graphics backend and chooser-confirmed entries.
    """

    def __init__(
        self,
        store: SettingsStore,
        host: DisplayHost,
        effects: LaunchEffects,
        main_scene: str,
        is_interactive_development_host: bool = False,
        checker: Optional[BackendCompatibilityChecker] = None,
        executable_resolver: Callable[[], List[str]] = resolve_executable,
        rearm_chooser: bool = True,
    ) -> None:
        self.store = store
        self.host = host
        self.effects = effects
        self.main_scene = main_scene
        self.is_interactive_development_host = is_interactive_development_host
        self.catalog = DisplayModeCatalog(host)
        self.negotiator = ResolutionNegotiator(store)
        self.checker = checker or BackendCompatibilityChecker()
        self.executable_resolver = executable_resolver
        self.rearm_chooser = rearm_chooser
        self._log = logging.getLogger("launcher")

    def start(self) -> StartupPath:
        """Run the startup decision.

        Confirmed settings are applied and the main scene started; otherwise the
        chooser state is prepared and the caller shows the chooser.
        """
        path = self.decide_startup_path()
        if path is StartupPath.APPLY_AND_PROCEED:
            self._log.info("Settings already confirmed; starting main scene")
            self.apply_and_proceed()
        else:
            self._log.info("Showing launcher chooser")
        return path

    def decide_startup_path(self) -> StartupPath:
        return decide_startup_path(self.store)

    def prepare_chooser(self) -> ChooserState:
        """Populate chooser defaults, writing first-run values back to the store."""
        catalog = self.catalog.build()
        negotiation = self.negotiator.negotiate(catalog, self.store.get_resolution())

        fullscreen = self.store.get_fullscreen()
        self.store.set_fullscreen(fullscreen)

        if not self.store.has(GRAPHICS_API_KEY):
            self.store.set_graphics_backend(GraphicsBackend.PRIMARY)

        capabilities = self.host.capabilities()
        return ChooserState(
            catalog=catalog,
            selected_index=negotiation.selected_index,
            fullscreen=fullscreen,
            backends=self.checker.available_backends(capabilities),
            selected_backend=self.checker.effective_backend(
                self.store.get_graphics_backend(), capabilities
            ),
        )

    def effective_backend(self) -> GraphicsBackend:
        return self.checker.effective_backend(
            self.store.get_graphics_backend(), self.host.capabilities()
        )

    def on_confirm(self) -> ConfirmOutcome:
        """Handle Play: commit the confirmation, then decide how to continue.

        Raises:
            ExecutableNotFound: if a relaunch is needed but the binary is missing
        """
        # Committed even if the relaunch below fails
        self.store.set_chooser_confirmed(True)

        if self.is_interactive_development_host:
            self._log.info("Development host: continuing in process")
            return ProceedInProcess()

        command = self.executable_resolver()

        token = backend_argument(self.effective_backend())
        return RelaunchWithArgs(args=token, command=tuple(command))

    def relaunch(self, outcome: RelaunchWithArgs) -> None:
        """Start the new process, then ask for this one to end."""
        self.effects.request_relaunch(outcome.argv())
        self.effects.request_termination()

    def apply_and_proceed(self) -> None:
        """Apply stored display settings and hand control to the main scene.

        Raises:
            MalformedResolution: before any display change, if the stored label is corrupt
        """
        label = self.store.get_resolution()
        if label is None:
            # Nothing stored yet: derive the current-monitor default
            label = self.negotiator.negotiate(self.catalog.build(), None).resolved_label

        width, height = parse_resolution_label(label)
        fullscreen = self.store.get_fullscreen()
        self.effects.apply_resolution(width, height, fullscreen)

        if self.rearm_chooser:
            self.store.set_chooser_confirmed(False)

        self.effects.load_scene(self.main_scene)
