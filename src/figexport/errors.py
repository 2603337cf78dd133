# FigExport
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Exception types raised by the figure exporter."""

from __future__ import annotations

__all__ = [
    "FigureExportError",
    "InvalidHandleError",
    "ConfigMismatchError",
    "InvalidOptionError",
    "OptionConflictError",
    "UnsupportedFormatError",
    "MissingPathError",
    "ExportOptionWarning",
]


class FigureExportError(Exception):
    """Base class for all exporter errors."""


class InvalidHandleError(FigureExportError, TypeError):
    """The figure handle does not refer to a live matplotlib figure."""


class ConfigMismatchError(FigureExportError):
    """The format filter table and the render flag table are not aligned."""


class InvalidOptionError(FigureExportError, ValueError):
    """An export option has an unusable value (e.g. a non-positive DPI)."""


class OptionConflictError(InvalidOptionError):
    """Two options of the same kind were given with different values."""


class UnsupportedFormatError(FigureExportError, ValueError):
    """The image path has an extension missing from the format table."""


class MissingPathError(FigureExportError):
    """A required output path is missing and no interactive prompt is available."""


class ExportOptionWarning(UserWarning):
    """Emitted for export options that were not recognised and are ignored."""
