# FigExport
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Public package interface for figexport."""

from figexport.config import ExportSettings
from figexport.errors import (
    ConfigMismatchError,
    ExportOptionWarning,
    FigureExportError,
    InvalidHandleError,
    InvalidOptionError,
    MissingPathError,
    OptionConflictError,
    UnsupportedFormatError,
)
from figexport.exporter import (
    ExportResult,
    FigureExporter,
    export_figure,
    exportfig,
    get_default_exporter,
)
from figexport.formats import IMAGE_FILTERS, RENDER_FLAGS, FormatTable, ImageFormat
from figexport.options import CLEAR, ExportOptions
from figexport.preferences import InMemoryPreferenceStore, QSettingsPreferenceStore
from figexport.prompts import HeadlessPromptProvider, QtPromptProvider
from figexport.render import open_figure
from figexport.state import FigureExportState, FigureStateRegistry

__version__ = "1.0.0"

__all__ = [
    "CLEAR",
    "IMAGE_FILTERS",
    "RENDER_FLAGS",
    "ConfigMismatchError",
    "ExportOptionWarning",
    "ExportOptions",
    "ExportResult",
    "ExportSettings",
    "FigureExportError",
    "FigureExportState",
    "FigureExporter",
    "FigureStateRegistry",
    "FormatTable",
    "HeadlessPromptProvider",
    "ImageFormat",
    "InMemoryPreferenceStore",
    "InvalidHandleError",
    "InvalidOptionError",
    "MissingPathError",
    "OptionConflictError",
    "QSettingsPreferenceStore",
    "QtPromptProvider",
    "UnsupportedFormatError",
    "export_figure",
    "exportfig",
    "get_default_exporter",
    "open_figure",
]
