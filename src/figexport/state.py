# FigExport
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Per-figure export state (last editable and image filenames)."""

from __future__ import annotations

import logging
import weakref
from dataclasses import dataclass

from matplotlib.figure import Figure

__all__ = ["FigureExportState", "FigureStateRegistry"]

log = logging.getLogger(__name__)


@dataclass
class FigureExportState:
    """Filenames remembered for one figure between export calls."""

    editable_path: str = ""
    image_path: str = ""

    def clear(self) -> None:
        self.editable_path = ""
        self.image_path = ""


class FigureStateRegistry:
    """Associates a :class:`FigureExportState` with each live figure.

    Entries are held weakly, so a state disappears together with its figure.
    """

    def __init__(self) -> None:
        self._states: weakref.WeakKeyDictionary[Figure, FigureExportState] = (
            weakref.WeakKeyDictionary()
        )

    def __len__(self) -> int:
        return len(self._states)

    def __contains__(self, figure: object) -> bool:
        try:
            return figure in self._states
        except TypeError:
            return False

    def state_for(self, figure: Figure) -> FigureExportState:
        state = self._states.get(figure)
        if state is None:
            state = FigureExportState()
            self._states[figure] = state
            log.debug("Created export state for figure %s", id(figure))
        return state

    def forget(self, figure: Figure) -> None:
        self._states.pop(figure, None)
