# FigExport
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Image format table mapping file extensions to savefig formats.

To support more image types, add a ``(pattern, description)`` pair to
``IMAGE_FILTERS`` and the matching matplotlib format name to ``RENDER_FLAGS``.
Both sequences are index-aligned.
"""

from __future__ import annotations

import os
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path

from figexport.errors import ConfigMismatchError

__all__ = [
    "IMAGE_FILTERS",
    "RENDER_FLAGS",
    "ImageFormat",
    "FormatTable",
    "build_format_table",
    "default_format_table",
]

IMAGE_FILTERS: tuple[tuple[str, str], ...] = (
    ("*.pdf", "PDF vector"),
    ("*.jpg", "JPEG bitmap"),
    ("*.png", "Portable Network Graphics"),
    ("*.emf", "Enhanced metafile"),
    ("*.eps", "Encapsulated PostScript"),
    ("*.tiff", "Tagged Image File Format"),
)

# matplotlib has no native EMF writer; "emf" only works with a registered backend
RENDER_FLAGS: tuple[str, ...] = ("pdf", "jpeg", "png", "emf", "eps", "tiff")


@dataclass(frozen=True)
class ImageFormat:
    """One selectable image type."""

    extension: str
    description: str
    render_flag: str

    @property
    def pattern(self) -> str:
        return f"*{self.extension}"

    @property
    def filter_label(self) -> str:
        return f"{self.description} ({self.pattern})"


class FormatTable:
    """Ordered collection of :class:`ImageFormat` entries.

    The first entry is the default format offered in the save dialog.
    """

    def __init__(self, formats: Sequence[ImageFormat]) -> None:
        if not formats:
            raise ConfigMismatchError("The image format table is empty")
        self._formats = tuple(formats)
        self._by_ext = {fmt.extension.lower(): fmt for fmt in self._formats}

    def __iter__(self) -> Iterator[ImageFormat]:
        return iter(self._formats)

    def __len__(self) -> int:
        return len(self._formats)

    @property
    def default(self) -> ImageFormat:
        return self._formats[0]

    @property
    def extensions(self) -> tuple[str, ...]:
        return tuple(fmt.extension for fmt in self._formats)

    def lookup(self, path: str | os.PathLike[str]) -> ImageFormat | None:
        """Return the format matching the suffix of ``path``, ignoring case."""
        return self._by_ext.get(Path(path).suffix.lower())

    def dialog_filter(self) -> str:
        return ";;".join(fmt.filter_label for fmt in self._formats)


def _extension_from_pattern(pattern: str) -> str:
    ext = pattern.strip()
    if ext.startswith("*"):
        ext = ext[1:]
    if not ext.startswith("."):
        ext = f".{ext}"
    return ext.lower()


def build_format_table(
    filters: Sequence[tuple[str, str]],
    render_flags: Sequence[str],
) -> FormatTable:
    """Zip the dialog filters and render flags into a :class:`FormatTable`.

    Raises:
        ConfigMismatchError: if the two sequences differ in length.
    """
    if len(filters) != len(render_flags):
        raise ConfigMismatchError(
            "The file filters and render flags are mismatched "
            f"({len(filters)} filters, {len(render_flags)} flags)"
        )
    return FormatTable(
        [
            ImageFormat(
                extension=_extension_from_pattern(pattern),
                description=description,
                render_flag=flag,
            )
            for (pattern, description), flag in zip(filters, render_flags)
        ]
    )


def default_format_table() -> FormatTable:
    return build_format_table(IMAGE_FILTERS, RENDER_FLAGS)
