# FigExport
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Interactive prompts used while resolving export paths."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Protocol

from PyQt5.QtWidgets import QFileDialog, QMessageBox, QWidget

from figexport.errors import MissingPathError

__all__ = ["PromptProvider", "QtPromptProvider", "HeadlessPromptProvider"]

log = logging.getLogger(__name__)

_FILTER_SUFFIX = re.compile(r"\(\*(\.[^\s;)]+)")


class PromptProvider(Protocol):
    def ask_save_path(self, title: str, seed: str, filters: str) -> str | None:
        """Return the chosen path, or ``None`` when the user cancels."""
        ...

    def confirm(self, title: str, message: str) -> bool: ...


def _suffix_for_filter(selected_filter: str) -> str | None:
    match = _FILTER_SUFFIX.search(selected_filter or "")
    return match.group(1) if match else None


class QtPromptProvider:
    """Prompts implemented with ``QFileDialog`` and ``QMessageBox``."""

    def __init__(self, parent: QWidget | None = None) -> None:
        self._parent = parent

    def ask_save_path(self, title: str, seed: str, filters: str) -> str | None:
        path, selected_filter = QFileDialog.getSaveFileName(self._parent, title, seed, filters)
        if not path:
            log.debug("Save dialog '%s' cancelled", title)
            return None

        # Enforce extension based on selected filter
        path_obj = Path(path).expanduser()
        if not path_obj.suffix:
            suffix = _suffix_for_filter(selected_filter)
            if suffix:
                path_obj = path_obj.with_suffix(suffix)
        return str(path_obj)

    def confirm(self, title: str, message: str) -> bool:
        resp = QMessageBox.question(
            self._parent,
            title,
            message,
            QMessageBox.Yes | QMessageBox.No,
            QMessageBox.No,
        )
        return resp == QMessageBox.Yes


class HeadlessPromptProvider:
    """Non-interactive prompts: missing paths fail fast instead of blocking."""

    def __init__(self, create_directories: bool = True) -> None:
        self.create_directories = create_directories

    def ask_save_path(self, title: str, seed: str, filters: str) -> str | None:
        raise MissingPathError(
            f"{title}: no output path was given and no interactive prompt is available"
        )

    def confirm(self, title: str, message: str) -> bool:
        log.info("%s: %s -> %s", title, message, "yes" if self.create_directories else "no")
        return self.create_directories
