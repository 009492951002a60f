from __future__ import annotations

import argparse
import functools
import logging
import sys
from typing import List, Optional

import pygame

from .config import AppConfig
from .display.host import PygameDisplayHost, select_render_driver
from .errors import LauncherError
from .graphics.backend import BACKEND_ARGUMENTS, BackendCompatibilityChecker, GraphicsBackend
from .inputs.abstraction import InputEvent
from .inputs.keyboard import KeyboardInputProvider
from .launcher.effects import ProcessLaunchEffects
from .launcher.engine import LaunchDecisionEngine, RelaunchWithArgs, StartupPath
from .launcher.relaunch import resolve_executable
from .logging_setup import setup_logging
from .persistence.settings_store import SettingsStore
from .ui.chooser_menu import ChooserAction, ChooserMenu
from .ui.chooser_renderer import ChooserRenderer
from .ui.theme import Theme


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="launch-gate", description="Pre-launch display and graphics chooser")
    backend = parser.add_mutually_exclusive_group()
    backend.add_argument(
        BACKEND_ARGUMENTS[GraphicsBackend.PRIMARY], dest="forced_backend",
        action="store_const", const=GraphicsBackend.PRIMARY, help="start on the primary graphics backend",
    )
    backend.add_argument(
        BACKEND_ARGUMENTS[GraphicsBackend.ALTERNATE], dest="forced_backend",
        action="store_const", const=GraphicsBackend.ALTERNATE, help="start on the alternate graphics backend",
    )
    parser.add_argument("--reset-settings", action="store_true", help="forget stored choices and show the chooser")
    parser.add_argument("--dev", action="store_true", help="development session: never relaunch the process")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser.parse_args(argv)


def run(argv: Optional[List[str]] = None) -> None:
    if argv is None:
        argv = sys.argv[1:]
    args = parse_args(argv)

    config = AppConfig()
    setup_logging(config, verbose=args.verbose)
    log = logging.getLogger("launch_gate.main")

    store = SettingsStore(config.settings_file)
    if args.reset_settings:
        store.reset()

    # The backend is fixed for the life of this process
    active_backend = args.forced_backend or GraphicsBackend.PRIMARY
    driver = select_render_driver(active_backend, config.render_drivers())
    log.info(f"Active graphics backend: {active_backend.value} (render driver {driver})")

    pygame.init()
    host = PygameDisplayHost(active_backend, shader_level_override=config.shader_level_override)
    engine = LaunchDecisionEngine(
        store,
        host,
        ProcessLaunchEffects(host),
        main_scene=config.main_scene,
        is_interactive_development_host=args.dev or config.dev_host,
        checker=BackendCompatibilityChecker(config.min_shader_level),
        executable_resolver=functools.partial(resolve_executable, config.executable_override),
        rearm_chooser=config.rearm_chooser,
    )

    try:
        try:
            if engine.start() is StartupPath.APPLY_AND_PROCEED:
                return
        except LauncherError as exc:
            # Stay in the chooser rather than starting in a wrong mode
            log.error(f"Could not start with stored settings: {exc}")
        run_chooser(engine, host, config)
    finally:
        pygame.quit()


def run_chooser(engine: LaunchDecisionEngine, host: PygameDisplayHost, config: AppConfig) -> None:
    """Chooser loop: runs until Quit, or until Play hands off or relaunches."""
    log = logging.getLogger("launch_gate.main")

    screen = host.open_window(config.chooser_resolution, caption=config.product_title)
    state = engine.prepare_chooser()
    menu = ChooserMenu(state, engine.store, engine.negotiator)
    renderer = ChooserRenderer(screen.get_width(), screen.get_height(), title=config.product_title)
    theme = Theme()
    keyboard = KeyboardInputProvider()
    clock = pygame.time.Clock()
    message: Optional[str] = None

    while True:
        for raw_event in pygame.event.get():
            event = keyboard.translate(raw_event)
            if event is None:
                continue
            if event.type == InputEvent.Type.QUIT:
                log.info("Launcher closed")
                return
            if event.type == InputEvent.Type.NAVIGATE:
                menu.navigate(event.delta)
            elif event.type == InputEvent.Type.ADJUST:
                menu.adjust(event.delta)
            elif event.type == InputEvent.Type.SELECT:
                action = menu.activate()
                if action is ChooserAction.QUIT:
                    log.info("Launcher closed")
                    return
                if action is ChooserAction.PLAY:
                    try:
                        outcome = engine.on_confirm()
                        if isinstance(outcome, RelaunchWithArgs):
                            engine.relaunch(outcome)
                        else:
                            engine.apply_and_proceed()
                        return
                    except LauncherError as exc:
                        log.error(f"Launch aborted: {exc}")
                        message = str(exc)
                    except OSError as exc:
                        # Settings stay confirmed; the user has to restart manually
                        log.error(f"Relaunch failed: {exc}")
                        message = "Relaunch failed, please restart"

        renderer.render(screen, menu, theme, message)
        pygame.display.flip()
        clock.tick(30)


if __name__ == "__main__":
    try:
        run()
    except KeyboardInterrupt:
        sys.exit(0)
