import logging

import pytest

import demo_helix


@pytest.fixture
def isolated_logging():
    pkg = logging.getLogger("figexport")
    root = logging.getLogger()
    saved = (list(pkg.handlers), list(root.handlers))
    yield
    for logger, handlers in ((pkg, saved[0]), (root, saved[1])):
        for handler in list(logger.handlers):
            if handler not in handlers:
                logger.removeHandler(handler)
                handler.close()


def test_demo_exports_helix(tmp_path, monkeypatch, isolated_logging):
    monkeypatch.setenv("FIGEXPORT_SETTINGS_FILE", str(tmp_path / "prefs.ini"))
    figure = tmp_path / "test.mplfig"
    image = tmp_path / "test.pdf"

    code = demo_helix.main(
        ["--figure", str(figure), "--image", str(image), "--log-dir", str(tmp_path / "logs")]
    )

    assert code == 0
    assert figure.is_file()
    assert image.read_bytes().startswith(b"%PDF")
