"""Reconciles a stored resolution with the modes the monitor offers today."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from ..persistence.settings_store import SettingsStore
from .modes import DisplayMode


@dataclass(frozen=True)
class Negotiation:
    selected_index: int
    resolved_label: str


class ResolutionNegotiator:
    """Picks the catalog entry to preselect and writes it back to the store."""

    def __init__(self, store: SettingsStore) -> None:
        self.store = store
        self._log = logging.getLogger("display.negotiator")

    def negotiate(self, catalog: Sequence[DisplayMode], persisted_label: Optional[str]) -> Negotiation:
        """Select the first entry whose label equals `persisted_label`.

        A missing label, or one the current monitor no longer offers, selects the
        current-monitor entry at index 0. The stored resolution is always
        overwritten with the resolved label.
        """
        selected = 0
        if persisted_label is not None:
            for index, mode in enumerate(catalog):
                if mode.label == persisted_label:
                    selected = index
                    break
            else:
                self._log.info(
                    f"Stored resolution '{persisted_label}' not offered by this monitor; using current mode"
                )

        resolved = catalog[selected].label
        self.store.set_resolution(resolved)
        return Negotiation(selected_index=selected, resolved_label=resolved)

    def select(self, catalog: Sequence[DisplayMode], index: int) -> str:
        """Store the entry the user picked in the chooser and return its label."""
        label = catalog[index].label
        self.store.set_resolution(label)
        return label
