from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml


class AppConfig:
    """Centralized runtime configuration.

    Defaults may be overridden by an optional launcher.yaml in the data directory,
    and environment variables override both to simplify dev/testing.
    """

    def __init__(self) -> None:
        if sys.platform == "darwin":
            self.platform = "macos"
        elif sys.platform == "win32":
            self.platform = "windows"
        else:
            self.platform = "linux"

        # Root of the repository (one level up from the package)
        self.repo_root = Path(__file__).resolve().parents[1]

        # Data directories: per-user share dir on Linux, ./dev_data elsewhere
        if self.platform == "linux":
            default_data_dir = Path.home() / ".local" / "share" / "launch_gate"
        else:
            default_data_dir = self.repo_root / "dev_data"
        self.data_dir = Path(os.getenv("LAUNCH_GATE_DATA_DIR", str(default_data_dir))).resolve()
        self.logs_dir = self.data_dir / "logs"

        # Settings file location
        self.settings_file = self.data_dir / "launcher_prefs.json"
        self.launcher_file = self.data_dir / "launcher.yaml"

        overrides = self._load_launcher_file()

        # Scene handed control once settings are applied ("module:callable")
        self.main_scene = os.getenv(
            "LAUNCH_GATE_MAIN_SCENE",
            str(overrides.get("main_scene", "launch_gate.ui.main_scene:run")),
        )

        # Alternate backend needs shader level 4.5 (reported as 45)
        self.min_shader_level = int(os.getenv(
            "LAUNCH_GATE_MIN_SHADER_LEVEL",
            str(overrides.get("min_shader_level", 45)),
        ))

        # Reported shader level when the GL context cannot be queried
        shader_level = os.getenv("LAUNCH_GATE_SHADER_LEVEL", overrides.get("shader_level"))
        self.shader_level_override: Optional[int] = int(shader_level) if shader_level is not None else None

        # Branding
        self.product_title = os.getenv("LAUNCH_GATE_TITLE", str(overrides.get("title", "Launcher")))

        # Chooser window is always opened small and windowed
        self.chooser_resolution = self._parse_resolution(
            str(overrides.get("chooser_resolution", "640x480"))
        )

        # SDL render drivers for the two backends
        if self.platform == "windows":
            primary_driver, alternate_driver = "direct3d11", "direct3d12"
        else:
            primary_driver, alternate_driver = "opengl", "opengles2"
        self.primary_render_driver = os.getenv(
            "LAUNCH_GATE_PRIMARY_DRIVER",
            str(overrides.get("primary_render_driver", primary_driver)),
        )
        self.alternate_render_driver = os.getenv(
            "LAUNCH_GATE_ALTERNATE_DRIVER",
            str(overrides.get("alternate_render_driver", alternate_driver)),
        )

        # Running inside an interactive dev session: never relaunch
        self.dev_host = os.getenv("LAUNCH_GATE_DEV_HOST", "0") == "1"
        self.executable_override: Optional[str] = os.getenv("LAUNCH_GATE_EXECUTABLE") or None

        # Show the chooser again on the next cold start after a confirmed launch
        default_rearm = "1" if overrides.get("rearm_chooser", True) else "0"
        self.rearm_chooser = os.getenv("LAUNCH_GATE_REARM_CHOOSER", default_rearm) != "0"

    def _load_launcher_file(self) -> Dict[str, Any]:
        """Read launcher.yaml overrides, or an empty mapping if absent or unreadable."""
        if not self.launcher_file.exists():
            return {}
        try:
            with self.launcher_file.open("r", encoding="utf-8") as fh:
                data = yaml.safe_load(fh) or {}
        except (OSError, yaml.YAMLError) as exc:
            logging.getLogger(__name__).warning("Failed to load %s: %s", self.launcher_file, exc)
            return {}
        if not isinstance(data, dict):
            logging.getLogger(__name__).warning("Ignoring %s: expected a mapping", self.launcher_file)
            return {}
        return data

    def _parse_resolution(self, res_string: str) -> Tuple[int, int]:
        """Parse resolution string like '640x480' to tuple (640, 480).

        Args:
            res_string: Resolution in format 'WIDTHxHEIGHT'

        Returns:
            Tuple of (width, height), or (640, 480) if parsing fails
        """
        try:
            parts = res_string.lower().split("x")
            return (int(parts[0]), int(parts[1]))
        except (ValueError, IndexError):
            return (640, 480)

    def render_drivers(self) -> Dict[str, str]:
        """Map of backend label to SDL render driver name."""
        return {
            "Primary": self.primary_render_driver,
            "Alternate": self.alternate_render_driver,
        }

    def ensure_data_dirs(self) -> None:
        """Create data directories if writable."""
        for path in (self.data_dir, self.logs_dir):
            try:
                path.mkdir(parents=True, exist_ok=True)
            except OSError:
                # Logging setup falls back to console when this fails
                pass
