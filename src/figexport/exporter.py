# FigExport
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Export a matplotlib figure as an editable ``.mplfig`` file plus an image.

The image is sized exactly like the figure on screen. Filenames used for a
figure are remembered and reused on the next call for the same figure, and
the last directory used is kept as a process-wide preference.

Usage::

    fig, ax = plt.subplots()
    ax.plot(np.random.rand(10), np.random.randn(10))
    export_figure(fig)                               # prompts for both files
    export_figure(fig, "plot.mplfig", "plot.png", 300)
    export_figure(fig, "clear")                      # forget cached names
"""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from PyQt5.QtWidgets import QApplication

from figexport.config import ExportSettings
from figexport.errors import InvalidHandleError, InvalidOptionError, UnsupportedFormatError
from figexport.formats import IMAGE_FILTERS, RENDER_FLAGS, FormatTable, build_format_table
from figexport.options import ExportOptions, resolve_options
from figexport.preferences import PreferenceStore, QSettingsPreferenceStore
from figexport.prompts import HeadlessPromptProvider, PromptProvider, QtPromptProvider
from figexport.render import (
    RenderRequest,
    Renderer,
    save_editable,
    savefig_renderer,
    sync_paper_size,
)
from figexport.state import FigureExportState, FigureStateRegistry

__all__ = [
    "ExportResult",
    "FigureExporter",
    "default_prompts",
    "export_figure",
    "exportfig",
    "get_default_exporter",
    "resolve_figure",
]

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExportResult:
    editable_path: str
    image_path: str
    render_flag: str
    dpi: int | float

    @property
    def resolution_flag(self) -> str:
        return f"-r{self.dpi}"


def resolve_figure(handle: Any) -> Figure:
    """Return the figure referred to by ``handle`` (a Figure or pyplot number)."""
    if isinstance(handle, Figure):
        return handle
    if isinstance(handle, int) and not isinstance(handle, bool) and plt.fignum_exists(handle):
        return plt.figure(handle)
    raise InvalidHandleError(f"Input figure handle was invalid: {handle!r}")


def _same_path(a: str, b: str) -> bool:
    return Path(a).resolve() == Path(b).resolve()


def default_prompts() -> PromptProvider:
    """Qt dialogs when a ``QApplication`` is running, headless prompts otherwise."""
    if isinstance(QApplication.instance(), QApplication):
        return QtPromptProvider()
    return HeadlessPromptProvider()


class FigureExporter:
    """Saves figures as an editable file plus a rendered image.

    Args:
        filters: ``(pattern, description)`` pairs offered in the image dialog.
        render_flags: savefig format for each entry of ``filters``, same order.
        preferences: store for the last-used directory.
        prompts: dialogs used when a path is missing; chosen per call when ``None``.
        renderer: render primitive, :func:`savefig_renderer` by default.
        registry: per-figure filename cache.
        settings: exporter settings.

    Raises:
        ConfigMismatchError: if ``filters`` and ``render_flags`` differ in length.
    """

    def __init__(
        self,
        filters: Sequence[tuple[str, str]] = IMAGE_FILTERS,
        render_flags: Sequence[str] = RENDER_FLAGS,
        *,
        preferences: PreferenceStore | None = None,
        prompts: PromptProvider | None = None,
        renderer: Renderer = savefig_renderer,
        registry: FigureStateRegistry | None = None,
        settings: ExportSettings | None = None,
    ) -> None:
        self.formats: FormatTable = build_format_table(filters, render_flags)
        self.settings = settings or ExportSettings()
        if preferences is None:
            preferences = QSettingsPreferenceStore(
                self.settings.settings_organization,
                self.settings.settings_application,
                self.settings.settings_file,
            )
        self.preferences: PreferenceStore = preferences
        self.prompts = prompts
        self.renderer = renderer
        self.registry = registry if registry is not None else FigureStateRegistry()

    # ------------------------------------------------------------------
    def state_for(self, handle: Any) -> FigureExportState:
        return self.registry.state_for(resolve_figure(handle))

    def resolve_options(self, *options: Any) -> ExportOptions:
        return resolve_options(
            options,
            self.formats,
            self.settings.editable_suffix,
            default_resolution=self.settings.resolution,
        )

    # ------------------------------------------------------------------
    def export(
        self,
        handle: Any,
        *options: Any,
        state: FigureExportState | None = None,
    ) -> ExportResult | None:
        """Export ``handle`` and return the written paths.

        Returns ``None`` when the user cancels a dialog or declines to create
        the image directory. Render errors are logged and re-raised unchanged.
        """
        figure = resolve_figure(handle)
        opts = self.resolve_options(*options)
        if state is None:
            state = self.registry.state_for(figure)
        if opts.clear:
            log.debug("Clearing cached export filenames")
            state.clear()

        prompts = self.prompts or default_prompts()
        last_dir = self.preferences.get(self.settings.lastdir_key, "")

        editable_path = self._resolve_editable_path(opts, state, prompts, last_dir)
        if editable_path is None:
            return None
        self._write_editable(figure, editable_path, state)

        image_path = self._resolve_image_path(opts, state, prompts, editable_path)
        if image_path is None:
            return None
        if _same_path(image_path, editable_path):
            raise InvalidOptionError(
                f"The image path must differ from the editable figure path: {image_path}"
            )
        fmt = self.formats.lookup(image_path)
        if fmt is None:
            raise UnsupportedFormatError(
                f"Unsupported image type '{Path(image_path).suffix}'; "
                f"expected one of {', '.join(self.formats.extensions)}"
            )
        state.image_path = image_path

        sync_paper_size(figure)

        image_dir = Path(image_path).parent
        if str(image_dir) not in ("", ".") and not image_dir.is_dir():
            create = prompts.confirm(
                "Create directory?",
                f"Directory does not exist, would you like to create this directory?\n{image_dir}",
            )
            if not create:
                state.image_path = ""
                return None
            image_dir.mkdir(parents=True, exist_ok=True)

        target = Path(image_path)
        if target.is_file():
            target.unlink()

        request = RenderRequest(figure, image_path, fmt.render_flag, opts.resolution)
        try:
            self.renderer(request)
        except Exception:
            log.error(
                "Failed to write %s, make sure the file is not open elsewhere.",
                image_path,
                exc_info=True,
            )
            raise
        log.info("Exported figure to %s (%s, %s)", image_path, fmt.render_flag, opts.resolution_flag)
        return ExportResult(editable_path, image_path, fmt.render_flag, opts.resolution)

    __call__ = export

    # ------------------------------------------------------------------
    def _resolve_editable_path(
        self,
        opts: ExportOptions,
        state: FigureExportState,
        prompts: PromptProvider,
        last_dir: str,
    ) -> str | None:
        suffix = self.settings.editable_suffix
        path = opts.editable_path or state.editable_path
        if not path:
            path = prompts.ask_save_path("Save as...", last_dir, f"Matplotlib figure (*{suffix})")
        if not path:
            return None
        # Enforce the editable extension regardless of what was typed
        path_obj = Path(path)
        if path_obj.suffix.lower() != suffix:
            path_obj = path_obj.with_suffix(suffix)
        return str(path_obj)

    def _write_editable(self, figure: Figure, path: str, state: FigureExportState) -> None:
        parent = Path(path).parent
        if str(parent) not in ("", ".") and not parent.is_dir():
            parent.mkdir(parents=True, exist_ok=True)
        self.preferences.set(self.settings.lastdir_key, str(parent.resolve()))
        save_editable(figure, path)
        state.editable_path = path

    def _resolve_image_path(
        self,
        opts: ExportOptions,
        state: FigureExportState,
        prompts: PromptProvider,
        editable_path: str,
    ) -> str | None:
        path = opts.image_path or state.image_path
        if path:
            return path
        seed = Path(editable_path).with_suffix(self.formats.default.extension)
        return prompts.ask_save_path("Save file as...", os.fspath(seed), self.formats.dialog_filter())


@lru_cache(maxsize=1)
def get_default_exporter() -> FigureExporter:
    """Process-wide exporter configured from the environment."""
    return FigureExporter(settings=ExportSettings.from_env())


def export_figure(handle: Any, *options: Any, **kwargs: Any) -> ExportResult | None:
    """Export ``handle`` with the default exporter; see :meth:`FigureExporter.export`."""
    return get_default_exporter().export(handle, *options, **kwargs)


exportfig = export_figure
