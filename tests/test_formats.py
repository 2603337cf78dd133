import pytest

from figexport.errors import ConfigMismatchError
from figexport.formats import (
    IMAGE_FILTERS,
    RENDER_FLAGS,
    FormatTable,
    build_format_table,
    default_format_table,
)


def test_default_tables_are_aligned():
    assert len(IMAGE_FILTERS) == len(RENDER_FLAGS)
    table = default_format_table()
    assert table.extensions == (".pdf", ".jpg", ".png", ".emf", ".eps", ".tiff")
    assert [fmt.render_flag for fmt in table] == list(RENDER_FLAGS)
    assert table.default.extension == ".pdf"


def test_lookup_ignores_case():
    table = default_format_table()
    assert table.lookup("figure.EPS").render_flag == "eps"
    assert table.lookup("figure.bmp") is None


def test_dialog_filter():
    table = build_format_table([("*.png", "PNG"), ("svg", "Scalable")], ["png", "svg"])
    assert table.dialog_filter() == "PNG (*.png);;Scalable (*.svg)"


def test_mismatched_tables():
    with pytest.raises(ConfigMismatchError, match="mismatched"):
        build_format_table(IMAGE_FILTERS, RENDER_FLAGS + ("svg",))


def test_empty_table():
    with pytest.raises(ConfigMismatchError):
        FormatTable([])
