"""Persistent launcher preferences."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from ..graphics.backend import GraphicsBackend

# Persisted keys
RESOLUTION_KEY = "Resolution"
FULLSCREEN_KEY = "FullScreenMode"
GRAPHICS_API_KEY = "GraphicsAPI"
CHOOSER_KEY = "Luncher"  # 1 = chooser pending, 0 = confirmed


class SettingsStore:
    """Manages persistent launcher settings stored as JSON.

    Absent keys are distinct from stored false/zero values; the typed accessors
    fall back to their defaults only when a key is missing.
    """

    def __init__(self, settings_file: Path):
        """Initialize settings store.

        Args:
            settings_file: Path to settings JSON file
        """
        self.settings_file = Path(settings_file)
        self._log = logging.getLogger("settings")
        self._settings: Dict[str, Any] = {}
        self.load()

    def load(self) -> None:
        """Load settings from file."""
        if not self.settings_file.exists():
            self._log.info("No settings file found, using defaults")
            self._settings = {}
            return

        try:
            with self.settings_file.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            self._log.warning(f"Failed to load settings: {e}, using defaults")
            self._settings = {}
            return

        if not isinstance(data, dict):
            self._log.warning("Settings file does not hold an object, using defaults")
            data = {}
        self._settings = data
        self._log.info(f"Loaded settings from {self.settings_file}")

    def save(self) -> None:
        """Save settings to file."""
        try:
            # Ensure parent directory exists
            self.settings_file.parent.mkdir(parents=True, exist_ok=True)

            with self.settings_file.open("w", encoding="utf-8") as f:
                json.dump(self._settings, f, indent=2)
            self._log.debug(f"Saved settings to {self.settings_file}")
        except OSError as e:
            self._log.warning(f"Failed to save settings: {e}")

    def has(self, key: str) -> bool:
        return key in self._settings

    def get(self, key: str, default: Any = None) -> Any:
        """Get a setting value.

        Args:
            key: Setting key
            default: Default value if key doesn't exist

        Returns:
            Setting value or default
        """
        return self._settings.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Set a setting value and save.

        Args:
            key: Setting key
            value: Setting value
        """
        self._settings[key] = value
        self.save()

    def _get_flag(self, key: str, default: int) -> int:
        """Read a 0/1 flag, treating unreadable values as the default."""
        try:
            return int(self.get(key, default))
        except (TypeError, ValueError):
            self._log.warning("Ignoring bad value for %s: %r", key, self.get(key))
            return default

    def reset(self) -> None:
        """Forget every stored choice; the next start behaves like a first run."""
        self._settings = {}
        self.save()
        self._log.info("Settings reset")

    def get_resolution(self) -> Optional[str]:
        """Get stored resolution label, or None on first run."""
        value = self.get(RESOLUTION_KEY)
        return None if value is None else str(value)

    def set_resolution(self, label: str) -> None:
        self.set(RESOLUTION_KEY, label)

    def get_fullscreen(self) -> bool:
        """Get fullscreen flag (defaults to fullscreen)."""
        return self._get_flag(FULLSCREEN_KEY, 1) == 1

    def set_fullscreen(self, fullscreen: bool) -> None:
        self.set(FULLSCREEN_KEY, 1 if fullscreen else 0)

    def get_graphics_backend(self) -> GraphicsBackend:
        """Get stored graphics backend (defaults to Primary)."""
        return GraphicsBackend.from_label(self.get(GRAPHICS_API_KEY))

    def set_graphics_backend(self, backend: GraphicsBackend) -> None:
        self.set(GRAPHICS_API_KEY, backend.value)

    def is_chooser_confirmed(self) -> bool:
        """True once the user pressed Play; absent means the chooser must show."""
        return self._get_flag(CHOOSER_KEY, 1) == 0

    def set_chooser_confirmed(self, confirmed: bool) -> None:
        self.set(CHOOSER_KEY, 0 if confirmed else 1)
