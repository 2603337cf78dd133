# FigExport
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Rendering primitives: page sizing, image output and editable figure files."""

from __future__ import annotations

import logging
import os
import pickle
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from matplotlib.figure import Figure
from PyQt5.QtWidgets import QWidget

from figexport.errors import InvalidHandleError

__all__ = [
    "RenderRequest",
    "Renderer",
    "savefig_renderer",
    "screen_size_inches",
    "sync_paper_size",
    "save_editable",
    "open_figure",
]

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderRequest:
    """Everything the render primitive needs to write one image."""

    figure: Figure
    path: str
    render_flag: str
    dpi: int | float

    @property
    def resolution_flag(self) -> str:
        return f"-r{self.dpi}"


Renderer = Callable[[RenderRequest], None]


def savefig_renderer(request: RenderRequest) -> None:
    """Write ``request.figure`` with matplotlib's ``savefig``.

    The page is the full figure: no tight bounding box and no padding, so the
    output has the same framing as the figure on screen.
    """
    request.figure.savefig(
        request.path,
        format=request.render_flag,
        dpi=request.dpi,
        bbox_inches=None,
        pad_inches=0,
        facecolor="auto",
        edgecolor="auto",
    )


def screen_size_inches(figure: Figure) -> tuple[float, float]:
    """Return the on-screen size of ``figure`` in inches.

    For figures shown in a Qt canvas this is the widget size; otherwise the
    figure's own size is used.
    """
    canvas = figure.canvas
    if isinstance(canvas, QWidget) and canvas.width() > 0 and canvas.height() > 0:
        ratio = float(getattr(canvas, "device_pixel_ratio", 1.0) or 1.0)
        logical_dpi = figure.dpi / ratio
        return canvas.width() / logical_dpi, canvas.height() / logical_dpi
    width, height = figure.get_size_inches()
    return float(width), float(height)


def sync_paper_size(figure: Figure) -> tuple[float, float]:
    """Pin the figure's page size to its on-screen size and return it."""
    width, height = screen_size_inches(figure)
    figure.set_size_inches(width, height, forward=False)
    log.debug("Paper size set to %.3f x %.3f in", width, height)
    return width, height


def save_editable(figure: Figure, path: str | os.PathLike[str]) -> Path:
    """Pickle ``figure`` so it can be reopened and edited with :func:`open_figure`."""
    target = Path(path)
    with target.open("wb") as fh:
        pickle.dump(figure, fh, protocol=pickle.HIGHEST_PROTOCOL)
    log.info("Saved editable figure to %s", target)
    return target


def open_figure(path: str | os.PathLike[str]) -> Figure:
    """Load a figure written by :func:`save_editable`.

    Only open files from trusted sources; they are unpickled.
    """
    with Path(path).open("rb") as fh:
        figure = pickle.load(fh)
    if not isinstance(figure, Figure):
        raise InvalidHandleError(f"{path} does not contain a matplotlib figure")
    return figure
