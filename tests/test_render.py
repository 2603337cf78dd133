import pytest
from matplotlib.figure import Figure

from figexport.errors import InvalidHandleError
from figexport.render import (
    RenderRequest,
    open_figure,
    save_editable,
    savefig_renderer,
    sync_paper_size,
)


def test_sync_paper_size_without_screen_canvas():
    fig = Figure(figsize=(5.5, 2.25))
    assert sync_paper_size(fig) == pytest.approx((5.5, 2.25))
    assert tuple(fig.get_size_inches()) == pytest.approx((5.5, 2.25))


def test_savefig_renderer_writes_requested_format(tmp_path):
    fig = Figure(figsize=(2, 1))
    fig.add_subplot().plot([0, 1], [1, 0])
    path = tmp_path / "plot.pdf"

    savefig_renderer(RenderRequest(fig, str(path), "pdf", 72))

    assert path.read_bytes().startswith(b"%PDF")


def test_savefig_renderer_rejects_unknown_backend(tmp_path):
    fig = Figure()
    with pytest.raises(ValueError):
        savefig_renderer(RenderRequest(fig, str(tmp_path / "plot.emf"), "emf", 72))


def test_open_figure_rejects_other_pickles(tmp_path):
    import pickle

    path = tmp_path / "not_a_figure.mplfig"
    path.write_bytes(pickle.dumps({"figure": None}))

    with pytest.raises(InvalidHandleError):
        open_figure(path)


def test_save_editable_round_trip(tmp_path):
    fig = Figure(figsize=(3, 2))
    fig.add_subplot().set_title("helix")

    restored = open_figure(save_editable(fig, tmp_path / "f.mplfig"))

    assert restored.axes[0].get_title() == "helix"


@pytest.fixture(scope="module")
def qapp():
    from PyQt5.QtWidgets import QApplication

    return QApplication.instance() or QApplication([])


def test_sync_paper_size_follows_qt_canvas(qapp):
    from matplotlib.backends.backend_qt5agg import FigureCanvasQTAgg

    fig = Figure(figsize=(2, 2), dpi=100)
    canvas = FigureCanvasQTAgg(fig)
    canvas.resize(500, 250)

    width, height = sync_paper_size(fig)

    assert (width, height) == pytest.approx((5.0, 2.5))
    assert tuple(fig.get_size_inches()) == pytest.approx((5.0, 2.5))
    canvas.deleteLater()
