# FigExport
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Logging configuration with file rotation for export sessions."""

from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

__all__ = ["setup_export_logging", "get_log_directory"]


def setup_export_logging(
    app_name: str = "FigExport",
    console_level: int = logging.INFO,
    log_dir: Path | None = None,
) -> Path:
    """
    Configure logging for the ``figexport`` package.

    Creates two log files:
    - figexport.log: DEBUG+ messages from the package (2 MB per file, 3 rotations)
    - errors.log: ERROR+ messages from any logger (1 MB per file, 2 rotations)

    Args:
        app_name: Application name for the log directory
        console_level: Minimum level for console output (default: INFO)
        log_dir: Explicit log directory, overriding the platform default

    Returns:
        Path to the log directory
    """
    log_dir = Path(log_dir) if log_dir is not None else _get_log_directory(app_name)
    log_dir.mkdir(parents=True, exist_ok=True)

    detailed_formatter = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    simple_formatter = logging.Formatter("%(levelname)-8s | %(name)s | %(message)s")

    pkg_logger = logging.getLogger("figexport")
    pkg_logger.setLevel(logging.DEBUG)
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
        handler.close()

    app_log_path = log_dir / "figexport.log"
    app_handler = RotatingFileHandler(
        app_log_path,
        maxBytes=2 * 1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )
    app_handler.setLevel(logging.DEBUG)
    app_handler.setFormatter(detailed_formatter)
    pkg_logger.addHandler(app_handler)

    # Error-only log (easier to scan for failed renders)
    root_logger = logging.getLogger()
    error_log_path = log_dir / "errors.log"
    for handler in list(root_logger.handlers):
        if isinstance(handler, RotatingFileHandler) and Path(handler.baseFilename) == error_log_path:
            root_logger.removeHandler(handler)
            handler.close()
    error_handler = RotatingFileHandler(
        error_log_path,
        maxBytes=1024 * 1024,
        backupCount=2,
        encoding="utf-8",
    )
    error_handler.setLevel(logging.ERROR)
    error_handler.setFormatter(detailed_formatter)
    root_logger.addHandler(error_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(simple_formatter)
    pkg_logger.addHandler(console_handler)

    # matplotlib font discovery is chatty at DEBUG
    logging.getLogger("matplotlib").setLevel(logging.WARNING)

    log = logging.getLogger(__name__)
    log.debug("%s logging initialized in %s", app_name, log_dir)
    return log_dir


def _get_log_directory(app_name: str) -> Path:
    """
    Get platform-specific log directory.

    - Windows: %LOCALAPPDATA%\\AppName\\logs
    - macOS: ~/Library/Logs/AppName
    - Linux: ~/.local/share/AppName/logs
    """
    home = Path.home()

    if sys.platform == "win32":
        base = Path(os.environ.get("LOCALAPPDATA", home / "AppData" / "Local"))
        return base / app_name / "logs"

    elif sys.platform == "darwin":
        return home / "Library" / "Logs" / app_name

    else:
        xdg_data_home = os.environ.get("XDG_DATA_HOME", home / ".local" / "share")
        return Path(xdg_data_home) / app_name / "logs"


def get_log_directory(app_name: str = "FigExport") -> Path:
    """Get the log directory path without setting up logging."""
    return _get_log_directory(app_name)
