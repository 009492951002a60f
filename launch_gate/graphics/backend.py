"""Graphics backend selection and compatibility checks."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional


class GraphicsBackend(Enum):
    """Selectable rendering backends."""
    PRIMARY = "Primary"
    ALTERNATE = "Alternate"

    @classmethod
    def from_label(cls, label: Optional[str]) -> "GraphicsBackend":
        """Parse a stored label, falling back to PRIMARY for anything unknown."""
        for backend in cls:
            if backend.value == label:
                return backend
        return cls.PRIMARY


# Command-line tokens passed to a relaunched process
BACKEND_ARGUMENTS = {
    GraphicsBackend.PRIMARY: "--force-primary-backend",
    GraphicsBackend.ALTERNATE: "--force-alternate-backend",
}


def backend_argument(backend: GraphicsBackend) -> str:
    """Return the relaunch argument token selecting `backend`."""
    return BACKEND_ARGUMENTS[backend]


@dataclass(frozen=True)
class HostCapabilities:
    """Snapshot of the running graphics device."""
    shader_level: int  # e.g. 45 for shader model / GL 4.5
    device_family: Optional[GraphicsBackend] = None  # backend currently driving the display


class BackendCompatibilityChecker:
    """Decides whether the Alternate backend can be offered on this machine.

    The check only looks at the live device: Alternate counts as compatible when it
    is already the active backend and reports a high enough shader level. A machine
    that could start Alternate from a cold Primary session is not detected.
    """

    def __init__(self, min_shader_level: int = 45) -> None:
        self.min_shader_level = min_shader_level
        self._log = logging.getLogger("backend")

    def is_alternate_compatible(self, capabilities: HostCapabilities) -> bool:
        return (
            capabilities.shader_level >= self.min_shader_level
            and capabilities.device_family is GraphicsBackend.ALTERNATE
        )

    def available_backends(self, capabilities: HostCapabilities) -> List[GraphicsBackend]:
        """Backends the chooser may offer, Primary always first."""
        if self.is_alternate_compatible(capabilities):
            return [GraphicsBackend.PRIMARY, GraphicsBackend.ALTERNATE]
        return [GraphicsBackend.PRIMARY]

    def effective_backend(
        self, stored: GraphicsBackend, capabilities: HostCapabilities
    ) -> GraphicsBackend:
        """Downgrade a stored Alternate preference when Alternate is unusable.

        The stored value itself is left untouched.
        """
        if stored is GraphicsBackend.ALTERNATE and not self.is_alternate_compatible(capabilities):
            self._log.info(
                "Alternate backend requested but unavailable (shader level %d, device %s); using Primary",
                capabilities.shader_level,
                capabilities.device_family.value if capabilities.device_family else "unknown",
            )
            return GraphicsBackend.PRIMARY
        return stored
