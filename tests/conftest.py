import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import matplotlib

matplotlib.use("Agg", force=True)

import matplotlib.pyplot as plt
import pytest

from figexport.exporter import FigureExporter
from figexport.preferences import InMemoryPreferenceStore


class FakePrompts:
    """Records prompt calls and replays scripted answers."""

    def __init__(self, paths=None, confirm=True):
        self.paths = list(paths or [])
        self.confirm_answer = confirm
        self.save_calls = []
        self.confirm_calls = []

    def ask_save_path(self, title, seed, filters):
        self.save_calls.append((title, seed, filters))
        if not self.paths:
            raise AssertionError(f"Unexpected save prompt: {title}")
        return self.paths.pop(0)

    def confirm(self, title, message):
        self.confirm_calls.append((title, message))
        return self.confirm_answer


class RecordingRenderer:
    def __init__(self, error=None):
        self.error = error
        self.requests = []

    def __call__(self, request):
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        with open(request.path, "wb") as fh:
            fh.write(b"rendered")


@pytest.fixture
def fig():
    figure, ax = plt.subplots(figsize=(4, 3))
    ax.plot([0, 1, 2], [0, 1, 4])
    yield figure
    plt.close(figure)


@pytest.fixture
def prefs():
    return InMemoryPreferenceStore()


@pytest.fixture
def make_exporter(prefs):
    def _make(prompts=None, renderer=None, **kwargs):
        extra = {}
        if renderer is not None:
            extra["renderer"] = renderer
        return FigureExporter(
            preferences=prefs,
            prompts=prompts if prompts is not None else FakePrompts(),
            **extra,
            **kwargs,
        )

    return _make
