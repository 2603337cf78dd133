#!/usr/bin/env python3
"""Plot a 3D helix and export it as an editable figure plus a PDF."""

from __future__ import annotations

import argparse
import logging

import matplotlib.pyplot as plt
import numpy as np

from figexport import ExportSettings, FigureExporter, HeadlessPromptProvider
from figexport.logging_config import setup_export_logging

log = logging.getLogger(__name__)


def plot_helix():
    t = np.arange(0.0, 10 * np.pi + np.pi / 100, np.pi / 50)
    fig = plt.figure()
    ax = fig.add_subplot(projection="3d")
    ax.plot(np.sin(t), np.cos(t), t)
    ax.set_xlabel("sin(t)")
    ax.set_ylabel("cos(t)")
    ax.set_zlabel("t")
    ax.grid(True)
    ax.set_box_aspect((1, 1, 1))
    return fig


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Export a 3D helix plot.")
    parser.add_argument("--figure", default="test.mplfig", help="Editable figure file.")
    parser.add_argument("--image", default="test.pdf", help="Image file (pdf, png, ...).")
    parser.add_argument("--dpi", type=float, default=None, help="Export resolution.")
    parser.add_argument(
        "--log-dir",
        default=None,
        help="Directory for log files (defaults to the platform log directory).",
    )
    args = parser.parse_args(argv)

    setup_export_logging(console_level=logging.INFO, log_dir=args.log_dir)

    fig = plot_helix()
    exporter = FigureExporter(prompts=HeadlessPromptProvider(), settings=ExportSettings.from_env())
    options = [args.figure, args.image]
    if args.dpi is not None:
        options.append(args.dpi)
    result = exporter.export(fig, *options)
    plt.close(fig)

    if result is None:
        log.warning("Export cancelled")
        return 1
    log.info("Wrote %s and %s", result.editable_path, result.image_path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
