"""
Record → circle symbol encoding.

A record is plotted only when latitude, longitude and elevation all parse
as finite numbers; anything else produces no symbol at all.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Mapping, Optional, Tuple

from ..config import (
    CATEGORY_COL,
    ELEV_COL,
    LAT_COL,
    LON_COL,
    MAX_RADIUS,
    MIN_RADIUS,
    RECENCY_COL,
)
from ..geo.projection import Viewport, map_range, project
from ..ingest.dataset import parse_float
from .encoding import Color, EncodingContext, lookup_opacity


@dataclass(frozen=True)
class Symbol:
    """One circle for one frame."""
    x: float
    y: float
    radius: float
    color: Color      # alpha already replaced by the recency opacity

    @property
    def alpha(self) -> int:
        return self.color.a


def symbol_radius(elevation_m: float, ctx: EncodingContext) -> float:
    return map_range(
        abs(elevation_m),
        ctx.elevation.min_abs,
        ctx.elevation.max_abs,
        MIN_RADIUS,
        MAX_RADIUS,
    )


def encode_symbol(
    record: Mapping[str, str],
    ctx: EncodingContext,
    viewport: Viewport,
) -> Optional[Symbol]:
    """Encode *record* as a Symbol, or None if it cannot be plotted."""
    lat = parse_float(record.get(LAT_COL))
    lon = parse_float(record.get(LON_COL))
    elev = parse_float(record.get(ELEV_COL))
    if lat is None or lon is None or elev is None:
        return None

    x, y = project(lat, lon, ctx.bounds, viewport)
    base = ctx.palette.color_for(record.get(CATEGORY_COL))
    alpha = lookup_opacity(record.get(RECENCY_COL))
    return Symbol(
        x=x,
        y=y,
        radius=symbol_radius(elev, ctx),
        color=base.with_alpha(alpha),
    )


def encode_symbols(
    records: Iterable[Mapping[str, str]],
    ctx: EncodingContext,
    viewport: Viewport,
) -> Iterator[Tuple[int, Symbol]]:
    """Yield (row index, symbol) for every plottable record, in order."""
    for row, record in enumerate(records):
        sym = encode_symbol(record, ctx, viewport)
        if sym is not None:
            yield row, sym
