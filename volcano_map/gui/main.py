"""
Volcano Map — desktop entry point.

    python -m volcano_map.gui.main --data data/volcanoes.csv

Loads the dataset once, derives the normalization ranges and colour
tables, then hands them to the map window.  Nothing is recomputed after
start-up except the per-frame symbols.
"""
from __future__ import annotations

import argparse
import logging
import signal
import sys
from pathlib import Path

from PyQt5 import QtCore, QtGui, QtWidgets

from .. import config
from ..geo.ranges import compute_ranges
from ..ingest.dataset import DatasetError, load_dataset
from ..logger import setup_logging
from ..render.encoding import EncodingContext
from .map_widget import MainWindow

log = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(description="Volcano Map — world volcanoes atlas")
    parser.add_argument(
        "--data",
        type=Path,
        default=config.DEFAULT_DATA_PATH,
        help="CSV file with one volcano per row (default: %(default)s)",
    )
    parser.add_argument(
        "--fullscreen",
        action="store_true",
        default=config.KIOSK,
        help="Open the window full screen (also enabled by VOLCANO_MAP_KIOSK)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging verbosity (default: %(default)s)",
    )
    args, remaining = parser.parse_known_args()

    setup_logging(getattr(logging, args.log_level))

    try:
        dataset = load_dataset(args.data)
    except DatasetError as exc:
        log.error("%s", exc)
        sys.exit(1)

    ranges = compute_ranges(dataset)
    context = EncodingContext.from_ranges(ranges)
    log.info("%d categories, |elevation| %.0f–%.0f m",
             len(context.palette), ranges.elevation.min_abs, ranges.elevation.max_abs)

    sys.argv = sys.argv[:1] + remaining
    app = QtWidgets.QApplication(sys.argv)
    app.setStyle("Fusion")

    palette = QtGui.QPalette()
    palette.setColor(QtGui.QPalette.Window, QtGui.QColor("#000000"))
    palette.setColor(QtGui.QPalette.WindowText, QtGui.QColor("#ffffff"))
    palette.setColor(QtGui.QPalette.Base, QtGui.QColor("#000000"))
    palette.setColor(QtGui.QPalette.Text, QtGui.QColor("#ffffff"))
    palette.setColor(QtGui.QPalette.Highlight, QtGui.QColor(config.HINT_COLOR))
    app.setPalette(palette)

    win = MainWindow(dataset, context)
    if args.fullscreen:
        win.showFullScreen()
    else:
        win.show()

    # Qt's event loop blocks Python signal delivery; a no-op timer lets
    # the handler run.
    def _sigint_handler(*_args):
        log.info("SIGINT received, closing")
        win.close()

    signal.signal(signal.SIGINT, _sigint_handler)
    _sig_timer = QtCore.QTimer()
    _sig_timer.timeout.connect(lambda: None)
    _sig_timer.start(200)

    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
