import gc

from matplotlib.figure import Figure

from figexport.state import FigureExportState, FigureStateRegistry


def test_state_is_created_once_per_figure():
    registry = FigureStateRegistry()
    fig = Figure()

    state = registry.state_for(fig)
    state.image_path = "plot.png"

    assert registry.state_for(fig) is state
    assert fig in registry


def test_state_clear():
    state = FigureExportState("a.mplfig", "a.png")
    state.clear()
    assert state == FigureExportState()


def test_state_dies_with_figure():
    registry = FigureStateRegistry()
    fig = Figure()
    registry.state_for(fig)
    assert len(registry) == 1

    del fig
    gc.collect()

    assert len(registry) == 0


def test_forget():
    registry = FigureStateRegistry()
    fig = Figure()
    registry.state_for(fig).image_path = "x.png"
    registry.forget(fig)
    assert registry.state_for(fig).image_path == ""
