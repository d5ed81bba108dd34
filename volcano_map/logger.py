from __future__ import annotations

import logging
from pathlib import Path

LOG_DIR = Path("logs")


def setup_logging(level: int = logging.INFO) -> None:
    LOG_DIR.mkdir(exist_ok=True)
    logfile = LOG_DIR / "volcano_map.log"
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=[
            logging.FileHandler(logfile),
            logging.StreamHandler(),
        ],
    )
