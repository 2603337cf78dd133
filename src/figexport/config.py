# FigExport
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Exporter settings, optionally overridden from ``FIGEXPORT_*`` environment variables."""

from __future__ import annotations

import math
import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, field_validator

from figexport.options import DEFAULT_RESOLUTION

__all__ = ["ExportSettings", "ENV_PREFIX"]

ENV_PREFIX = "FIGEXPORT_"


class ExportSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    default_dpi: float = DEFAULT_RESOLUTION
    editable_suffix: str = ".mplfig"
    settings_organization: str = "FigExport"
    settings_application: str = "figexport"
    settings_file: str | None = None
    lastdir_key: str = "exportfig/lastdir"

    @field_validator("default_dpi")
    def _dpi_positive(cls, value: float) -> float:
        if not (math.isfinite(value) and value > 0):
            raise ValueError("default_dpi must be a finite number > 0")
        return value

    @field_validator("editable_suffix")
    def _normalise_suffix(cls, value: str) -> str:
        clean = value.strip().lower()
        if not clean or clean == ".":
            raise ValueError("editable_suffix must be a non-empty extension")
        return clean if clean.startswith(".") else f".{clean}"

    @property
    def resolution(self) -> int | float:
        dpi = float(self.default_dpi)
        return int(dpi) if dpi.is_integer() else dpi

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ExportSettings:
        """Build settings from ``FIGEXPORT_DPI``, ``FIGEXPORT_EDITABLE_SUFFIX``
        and ``FIGEXPORT_SETTINGS_FILE``; blank values are ignored."""
        env = os.environ if environ is None else environ
        overrides: dict[str, str] = {}
        for field in ("dpi", "editable_suffix", "settings_file"):
            raw = env.get(f"{ENV_PREFIX}{field.upper()}", "").strip()
            if raw:
                overrides["default_dpi" if field == "dpi" else field] = raw
        return cls(**overrides)
