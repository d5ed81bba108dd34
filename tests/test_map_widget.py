import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
QtWidgets = pytest.importorskip("PyQt5.QtWidgets")

from volcano_map.gui.map_widget import MainWindow, MapWidget  # noqa: E402
from volcano_map.render.frame import build_frame  # noqa: E402


@pytest.fixture(scope="module")
def qapp():
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app


def test_paint_hover_and_clear(qapp, dataset, ctx):
    widget = MapWidget(dataset, ctx)
    widget.resize(1200, 800)
    events = []
    widget.record_hovered.connect(events.append)

    frame = build_frame(dataset, ctx, widget.viewport_geometry())
    row, target = frame.symbols[0]
    widget.set_pointer((target.x, target.y))
    widget.grab()

    expected = build_frame(
        dataset, ctx, widget.viewport_geometry(), (target.x, target.y)
    ).hover.row
    assert widget.hovered_row == expected
    assert widget.last_frame is not None
    assert len(widget.last_frame.symbols) == 5

    widget.set_pointer(None)
    widget.grab()
    assert widget.hovered_row == -1
    assert events == [expected, -1]


def test_main_window_builds(qapp, dataset, ctx):
    win = MainWindow(dataset, ctx)
    assert win.map.hovered_row == -1
    win.close()
