# FigExport
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Process-wide preference stores (last-used export directory)."""

from __future__ import annotations

import logging
import os
from typing import Protocol

from PyQt5.QtCore import QSettings

__all__ = ["PreferenceStore", "QSettingsPreferenceStore", "InMemoryPreferenceStore"]

log = logging.getLogger(__name__)


class PreferenceStore(Protocol):
    def get(self, key: str, default: str = "") -> str: ...

    def set(self, key: str, value: str) -> None: ...


class QSettingsPreferenceStore:
    """Preference store backed by ``QSettings``.

    Uses the platform's native store unless ``path`` is given, in which case
    values are kept in that INI file.
    """

    def __init__(
        self,
        organization: str = "FigExport",
        application: str = "figexport",
        path: str | os.PathLike[str] | None = None,
    ) -> None:
        if path is not None:
            self._settings = QSettings(os.fspath(path), QSettings.IniFormat)
        else:
            self._settings = QSettings(organization, application)

    @property
    def settings(self) -> QSettings:
        return self._settings

    def get(self, key: str, default: str = "") -> str:
        value = self._settings.value(key, default, type=str)
        return value if value is not None else default

    def set(self, key: str, value: str) -> None:
        self._settings.setValue(key, value)
        self._settings.sync()
        log.debug("Stored preference %s=%r", key, value)


class InMemoryPreferenceStore:
    """Dictionary-backed store for tests and headless sessions."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def get(self, key: str, default: str = "") -> str:
        return self._values.get(key, default)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def as_dict(self) -> dict[str, str]:
        return dict(self._values)
