# volcano_map/config.py
from __future__ import annotations

import os
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent.parent

# ---------- Dataset ----------
DEFAULT_DATA_PATH = Path(
    os.environ.get("VOLCANO_MAP_DATA", str(ROOT_DIR / "data" / "volcanoes.csv"))
)

LAT_COL = "Latitude"
LON_COL = "Longitude"
ELEV_COL = "Elevation (m)"
CATEGORY_COL = "TypeCategory"
RECENCY_COL = "Last Known Eruption"

REQUIRED_COLUMNS = (LAT_COL, LON_COL, ELEV_COL, CATEGORY_COL, RECENCY_COL)

# Used when no record has a usable latitude/longitude pair
FALLBACK_BOUNDS = (-90.0, 90.0, -180.0, 180.0)   # min_lat, max_lat, min_lon, max_lon

# ---------- Layout (pixels) ----------
OUTER_MARGIN = 100
LEFT_OFFSET = 250     # room for the legend column
TOP_OFFSET = 120      # room for the title block

MIN_RADIUS = 5.0
MAX_RADIUS = 80.0

TOOLTIP_OFFSET = (15.0, -15.0)
TOOLTIP_PADDING = 8.0
TOOLTIP_LINE_HEIGHT = 18.0
TOOLTIP_FONT_PX = 14

LEGEND_X = 100.0
LEGEND_Y_OFFSET = 70.0      # below OUTER_MARGIN
LEGEND_SPACING = 25.0
LEGEND_SWATCH = 15.0
LEGEND_FONT_PX = 14
LEGEND_RECENCY_FONT_PX = 12

FONT_FAMILY = "Helvetica"

# ---------- Title block ----------
TITLE = "Volcanoes of the World"
SUBTITLE = "Holocene volcanoes by type, elevation and last known eruption"
HOVER_HINT = "Hover over a circle to see its details"

# ---------- Colours ----------
# #RRGGBB or #RRGGBBAA; category colours are assigned in first-seen order
PALETTE = (
    "#cf0808ff", "#FF6347", "#FF7F50", "#FF8C00", "#FFA500",
    "#FFB347", "#FF6A00", "#FF3300", "#ffbeb4ff",
)
FALLBACK_COLOR = "#ffffff"
HINT_COLOR = "#FFB347"
RECENCY_SWATCH_RGB = (200, 200, 200)

# ---------- Window ----------
KIOSK = bool(os.environ.get("VOLCANO_MAP_KIOSK"))
WINDOW_SIZE = (1600, 1000)
