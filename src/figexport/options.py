# FigExport
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Classification of the loosely typed options accepted by ``export``.

Options may be given in any order. Each value is classified on its own:
numbers set the resolution, ``"clear"`` resets cached filenames, and strings
or paths are told apart by their extension.
"""

from __future__ import annotations

import logging
import math
import numbers
import os
import warnings
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Union

from figexport.errors import ExportOptionWarning, InvalidOptionError, OptionConflictError
from figexport.formats import FormatTable

__all__ = [
    "CLEAR",
    "DEFAULT_RESOLUTION",
    "Resolution",
    "ClearFlag",
    "EditablePath",
    "ImagePath",
    "Unrecognized",
    "ExportOption",
    "ExportOptions",
    "classify_option",
    "resolve_options",
]

log = logging.getLogger(__name__)

CLEAR = "clear"
DEFAULT_RESOLUTION = 600


@dataclass(frozen=True)
class Resolution:
    dpi: int | float


@dataclass(frozen=True)
class ClearFlag:
    pass


@dataclass(frozen=True)
class EditablePath:
    path: str


@dataclass(frozen=True)
class ImagePath:
    path: str


@dataclass(frozen=True)
class Unrecognized:
    value: Any


ExportOption = Union[Resolution, ClearFlag, EditablePath, ImagePath, Unrecognized]


@dataclass(frozen=True)
class ExportOptions:
    """Resolved options for a single export call."""

    editable_path: str = ""
    image_path: str = ""
    resolution: int | float = DEFAULT_RESOLUTION
    clear: bool = False

    @property
    def resolution_flag(self) -> str:
        return f"-r{self.resolution}"


def _normalise_dpi(value: numbers.Real) -> int | float:
    dpi = float(value)
    if not (math.isfinite(dpi) and dpi > 0):
        raise InvalidOptionError(f"Resolution must be a positive number, got {value!r}")
    return int(dpi) if dpi.is_integer() else dpi


def classify_option(value: Any, formats: FormatTable, editable_suffix: str) -> ExportOption:
    """Return the tagged variant describing ``value``."""
    if isinstance(value, numbers.Real) and not isinstance(value, bool):
        return Resolution(_normalise_dpi(value))
    if isinstance(value, str) and value.strip().lower() == CLEAR:
        return ClearFlag()
    if isinstance(value, (str, os.PathLike)):
        path = os.fspath(value)
        if not path:
            return Unrecognized(value)
        suffix = Path(path).suffix.lower()
        if suffix == editable_suffix.lower():
            return EditablePath(path)
        if formats.lookup(path) is not None:
            return ImagePath(path)
    return Unrecognized(value)


def _merge(current: Any, new: Any, kind: str) -> Any:
    if current is None or current == new:
        return new
    raise OptionConflictError(f"Conflicting {kind} options: {current!r} and {new!r}")


def resolve_options(
    values: Iterable[Any],
    formats: FormatTable,
    editable_suffix: str,
    *,
    default_resolution: int | float = DEFAULT_RESOLUTION,
) -> ExportOptions:
    """Fold ``values`` into an :class:`ExportOptions`.

    The result does not depend on the order of ``values``. Two options of the
    same kind with different values raise :class:`OptionConflictError`, and
    unrecognised values trigger an :class:`ExportOptionWarning`.
    """
    editable: str | None = None
    image: str | None = None
    resolution: int | float | None = None
    clear = False

    for value in values:
        option = classify_option(value, formats, editable_suffix)
        if isinstance(option, Resolution):
            resolution = _merge(resolution, option.dpi, "resolution")
        elif isinstance(option, ClearFlag):
            clear = True
        elif isinstance(option, EditablePath):
            editable = _merge(editable, option.path, "editable figure path")
        elif isinstance(option, ImagePath):
            image = _merge(image, option.path, "image path")
        else:
            log.debug("Ignoring unrecognised export option %r", option.value)
            warnings.warn(
                f"An input was not recognized and is ignored: {option.value!r}",
                ExportOptionWarning,
                stacklevel=3,
            )

    return ExportOptions(
        editable_path=editable or "",
        image_path=image or "",
        resolution=default_resolution if resolution is None else resolution,
        clear=clear,
    )
