import itertools
from pathlib import Path

import pytest

from figexport.errors import ExportOptionWarning, InvalidOptionError, OptionConflictError
from figexport.formats import default_format_table
from figexport.options import (
    ClearFlag,
    EditablePath,
    ImagePath,
    Resolution,
    Unrecognized,
    classify_option,
    resolve_options,
)

FORMATS = default_format_table()


def _resolve(*values):
    return resolve_options(values, FORMATS, ".mplfig")


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (300, Resolution(300)),
        (150.0, Resolution(150)),
        ("clear", ClearFlag()),
        ("Clear", ClearFlag()),
        ("out/plot.mplfig", EditablePath("out/plot.mplfig")),
        ("out/plot.PNG", ImagePath("out/plot.PNG")),
        (Path("a.tiff"), ImagePath("a.tiff")),
        ("notes.txt", Unrecognized("notes.txt")),
        (True, Unrecognized(True)),
    ],
)
def test_classify_option(value, expected):
    assert classify_option(value, FORMATS, ".mplfig") == expected


def test_resolution_is_order_independent():
    values = ["fig.mplfig", "fig.png", 300, "clear"]
    results = {_resolve(*perm) for perm in itertools.permutations(values)}

    assert len(results) == 1
    (opts,) = results
    assert opts.editable_path == "fig.mplfig"
    assert opts.image_path == "fig.png"
    assert opts.resolution_flag == "-r300"
    assert opts.clear is True


def test_defaults():
    opts = _resolve()

    assert opts.editable_path == ""
    assert opts.image_path == ""
    assert opts.resolution_flag == "-r600"
    assert opts.clear is False


def test_unrecognized_values_warn_and_are_ignored():
    with pytest.warns(ExportOptionWarning):
        opts = _resolve("plot.png", "notes.txt")

    assert opts.image_path == "plot.png"


def test_conflicting_options_raise():
    with pytest.raises(OptionConflictError):
        _resolve("a.png", "b.pdf")
    with pytest.raises(OptionConflictError):
        _resolve(300, 600)


def test_identical_duplicates_are_allowed():
    assert _resolve(300, 300.0, "a.png", "a.png").resolution == 300


@pytest.mark.parametrize("value", [0, -72, float("nan"), float("inf")])
def test_invalid_resolution(value):
    with pytest.raises(InvalidOptionError):
        _resolve(value)
