"""
Equirectangular screen projection.

Longitude maps linearly onto the horizontal span right of the legend
column; latitude maps linearly onto the vertical span below the title
block, inverted so north is up.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from ..config import LEFT_OFFSET, OUTER_MARGIN, TOP_OFFSET
from .ranges import GeoBounds


def map_range(
    value: float,
    src_lo: float,
    src_hi: float,
    dst_lo: float,
    dst_hi: float,
) -> float:
    """Linearly map *value* from [src_lo, src_hi] to [dst_lo, dst_hi].

    Not clamped. A zero-width source range maps every value to the
    midpoint of the destination range.
    """
    span = src_hi - src_lo
    if span == 0:
        return (dst_lo + dst_hi) / 2.0
    return dst_lo + (value - src_lo) / span * (dst_hi - dst_lo)


@dataclass(frozen=True)
class Viewport:
    """Drawable area in pixels plus the fixed layout margins."""
    width: float
    height: float
    outer_margin: float = OUTER_MARGIN
    left_offset: float = LEFT_OFFSET
    top_offset: float = TOP_OFFSET

    @property
    def x_span(self) -> Tuple[float, float]:
        return self.outer_margin + self.left_offset, self.width - self.outer_margin

    @property
    def y_span(self) -> Tuple[float, float]:
        # south edge first: higher latitude -> smaller y
        return self.height - self.outer_margin, self.outer_margin + self.top_offset


def project(
    lat: float,
    lon: float,
    bounds: GeoBounds,
    viewport: Viewport,
) -> Tuple[float, float]:
    """Project (lat, lon) in degrees to (x, y) pixels inside *viewport*."""
    x0, x1 = viewport.x_span
    y0, y1 = viewport.y_span
    x = map_range(lon, bounds.min_lon, bounds.max_lon, x0, x1)
    y = map_range(lat, bounds.min_lat, bounds.max_lat, y0, y1)
    return x, y
