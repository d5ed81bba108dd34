"""
Normalization ranges derived from the dataset.

One pass over the records produces:
  - the geographic bounding box of every record with a usable lat/lon pair
  - the min/max absolute elevation of every record with a usable elevation
  - the distinct category labels in first-seen order

The three contributions are gated independently: a record with a bad
longitude still widens the elevation range, and a record with a bad
elevation still widens the bounding box.

Example
-------
    ranges = compute_ranges(dataset)
    ranges.bounds.min_lat, ranges.elevation.max_abs, ranges.categories
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Mapping, Tuple

import numpy as np

from ..config import CATEGORY_COL, ELEV_COL, FALLBACK_BOUNDS, LAT_COL, LON_COL
from ..ingest.dataset import parse_float

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeoBounds:
    """Lat/lon bounding box in degrees."""
    min_lat: float
    max_lat: float
    min_lon: float
    max_lon: float

    @classmethod
    def fallback(cls) -> "GeoBounds":
        return cls(*FALLBACK_BOUNDS)


@dataclass(frozen=True)
class ElevationRange:
    """Min/max of |elevation| in metres."""
    min_abs: float = 0.0
    max_abs: float = 0.0


@dataclass(frozen=True)
class DatasetRanges:
    bounds: GeoBounds
    elevation: ElevationRange
    categories: Tuple[str, ...]
    # True when no record had a usable lat/lon pair
    bounds_fallback: bool = False


def compute_ranges(records: Iterable[Mapping[str, str]]) -> DatasetRanges:
    """Scan *records* once and return their normalization ranges.

    If no record has a parseable latitude and longitude the bounding box
    falls back to the whole globe; if no record has a parseable elevation
    the elevation range is (0, 0).
    """
    lats: List[float] = []
    lons: List[float] = []
    elevs: List[float] = []
    categories: List[str] = []
    seen = set()

    for rec in records:
        lat = parse_float(rec.get(LAT_COL))
        lon = parse_float(rec.get(LON_COL))
        if lat is not None and lon is not None:
            lats.append(lat)
            lons.append(lon)

        elev = parse_float(rec.get(ELEV_COL))
        if elev is not None:
            elevs.append(abs(elev))

        cat = rec.get(CATEGORY_COL)
        if cat and cat not in seen:
            seen.add(cat)
            categories.append(cat)

    if lats:
        lat_arr = np.asarray(lats)
        lon_arr = np.asarray(lons)
        bounds = GeoBounds(
            min_lat=float(lat_arr.min()),
            max_lat=float(lat_arr.max()),
            min_lon=float(lon_arr.min()),
            max_lon=float(lon_arr.max()),
        )
    else:
        log.warning("No record has a usable latitude/longitude; using world bounds")
        bounds = GeoBounds.fallback()

    if elevs:
        elev_arr = np.asarray(elevs)
        elevation = ElevationRange(float(elev_arr.min()), float(elev_arr.max()))
    else:
        elevation = ElevationRange()

    log.debug(
        "Ranges: lat %.3f..%.3f  lon %.3f..%.3f  |elev| %.0f..%.0f m  %d categories",
        bounds.min_lat, bounds.max_lat, bounds.min_lon, bounds.max_lon,
        elevation.min_abs, elevation.max_abs, len(categories),
    )
    return DatasetRanges(
        bounds=bounds,
        elevation=elevation,
        categories=tuple(categories),
        bounds_fallback=not lats,
    )
