"""Catalog of display modes offered by the chooser."""
from __future__ import annotations

import logging
from typing import List, Optional, Set, Tuple

from .host import DisplayHost
from .modes import DisplayMode, format_resolution_label


class DisplayModeCatalog:
    """Builds the ordered list of selectable modes for the current monitor.

    Index 0 is always the synthetic current-monitor entry; the monitor's other
    supported modes follow in the order the host reports them, without duplicates.
    """

    def __init__(self, host: DisplayHost, fallback_size: Tuple[int, int] = (640, 480)) -> None:
        self.host = host
        self.fallback_size = fallback_size
        self._log = logging.getLogger("display.catalog")
        self._snapshot: Optional[List[DisplayMode]] = None

    def build(self) -> List[DisplayMode]:
        """Return the catalog, querying the host only on first use."""
        if self._snapshot is not None:
            return list(self._snapshot)

        supported: List[Tuple[int, int]] = []
        seen: Set[Tuple[int, int]] = set()
        for width, height in self.host.list_modes():
            if width <= 0 or height <= 0 or (width, height) in seen:
                continue
            seen.add((width, height))
            supported.append((width, height))

        current_w, current_h = self._current_size(supported)
        modes = [
            DisplayMode(
                width=current_w,
                height=current_h,
                is_current_monitor_mode=True,
                label=format_resolution_label(current_w, current_h, monitor=True),
            )
        ]
        modes.extend(
            DisplayMode(width=width, height=height, label=format_resolution_label(width, height))
            for width, height in supported
        )

        self._log.info(f"Display catalog: current {current_w}x{current_h}, {len(supported)} supported modes")
        self._snapshot = modes
        return list(modes)

    def _current_size(self, supported: List[Tuple[int, int]]) -> Tuple[int, int]:
        """Desktop size, or a usable stand-in when the host cannot report one."""
        width, height = self.host.current_resolution()
        if width > 0 and height > 0:
            return width, height
        fallback = supported[0] if supported else self.fallback_size
        self._log.warning(f"Monitor reported {width}x{height}; using {fallback[0]}x{fallback[1]}")
        return fallback

    def refresh(self) -> List[DisplayMode]:
        """Drop the cached snapshot and query the host again."""
        self._snapshot = None
        return self.build()
