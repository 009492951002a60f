"""Display mode records and resolution label helpers."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Tuple

from ..errors import MalformedResolution

MONITOR_SUFFIX = "(Monitor)"

# Any "(...)" decoration such as "(Monitor)"
_DECORATION_RE = re.compile(r"\([^)]*\)")


@dataclass(frozen=True)
class DisplayMode:
    """A selectable screen resolution."""
    width: int
    height: int
    is_current_monitor_mode: bool = False
    label: str = ""


def format_resolution_label(width: int, height: int, monitor: bool = False) -> str:
    """Format a resolution label, e.g. '1920 x 1080' or '1920 x 1080 (Monitor)'."""
    label = f"{width} x {height}"
    if monitor:
        label = f"{label} {MONITOR_SUFFIX}"
    return label


def parse_resolution_label(label: str) -> Tuple[int, int]:
    """Parse a stored resolution label to (width, height).

    Decorations like '(Monitor)' and whitespace are ignored; the separator is 'x'
    in either case.

    Raises:
        MalformedResolution: if the label does not hold exactly two positive integers
    """
    if not isinstance(label, str):
        raise MalformedResolution(label)

    stripped = "".join(_DECORATION_RE.sub("", label).split())
    parts = stripped.lower().split("x")
    if len(parts) != 2 or not all(part.isascii() and part.isdigit() for part in parts):
        raise MalformedResolution(label)

    width, height = int(parts[0]), int(parts[1])
    if width <= 0 or height <= 0:
        raise MalformedResolution(label)
    return width, height
