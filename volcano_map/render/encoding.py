"""
Encoding tables — category colours and eruption-recency opacity.

Both lookups are total: an unknown category resolves to white and an
unknown (or missing) recency code resolves to DEFAULT_ALPHA.  The tables
are built once after the dataset is loaded and never change afterwards.
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterator, NamedTuple, Optional, Sequence, Tuple

from ..config import FALLBACK_COLOR, PALETTE
from ..geo.ranges import DatasetRanges, ElevationRange, GeoBounds


class Color(NamedTuple):
    r: int
    g: int
    b: int
    a: int = 255

    def with_alpha(self, alpha: int) -> "Color":
        """Replace the alpha channel (the old value is discarded)."""
        return self._replace(a=int(alpha))


def parse_hex(text: str) -> Color:
    """Parse ``#RRGGBB`` or ``#RRGGBBAA`` into a Color."""
    h = text.lstrip("#")
    if len(h) not in (6, 8):
        raise ValueError(f"Bad colour literal: {text!r}")
    r, g, b = int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)
    a = int(h[6:8], 16) if len(h) == 8 else 255
    return Color(r, g, b, a)


WHITE = parse_hex(FALLBACK_COLOR)
DEFAULT_ALPHA = 150

# Smithsonian GVP "Last Known Eruption" codes, most recent first
RECENCY_CODES: Tuple[str, ...] = ("D1", "D2", "D3", "D4", "D5", "D6", "D7", "U", "Q", "?")

RECENCY_OPACITY = MappingProxyType({
    "D1": 255, "D2": 220, "D3": 190, "D4": 140, "D5": 110,
    "D6": 80, "D7": 40, "U": 120, "Q": 100, "?": 80,
})

RECENCY_PERIODS = MappingProxyType({
    "D1": "1964 or later",
    "D2": "1900–1963",
    "D3": "1800–1899",
    "D4": "1700–1799",
    "D5": "1500–1699",
    "D6": "1–1499 CE",
    "D7": "BCE (Holocene)",
    "U": "Undated (Holocene)",
    "Q": "Quaternary hydrothermal",
    "?": "Uncertain",
})


def lookup_opacity(code: Optional[str]) -> int:
    """Alpha (0–255) for a recency code; exact match only."""
    if code in RECENCY_OPACITY:
        return RECENCY_OPACITY[code]
    return DEFAULT_ALPHA


@dataclass(frozen=True)
class CategoryPalette:
    """Category label → colour, in first-seen order."""

    entries: Tuple[Tuple[str, Color], ...]

    @classmethod
    def build(
        cls,
        categories: Sequence[str],
        palette: Sequence[str] = PALETTE,
    ) -> "CategoryPalette":
        colors = [parse_hex(c) for c in palette]
        return cls(tuple(
            (cat, colors[i % len(colors)]) for i, cat in enumerate(categories)
        ))

    def color_for(self, category: Optional[str]) -> Color:
        for label, color in self.entries:
            if label == category:
                return color
        return WHITE

    def as_dict(self) -> Dict[str, Color]:
        return dict(self.entries)

    def __iter__(self) -> Iterator[Tuple[str, Color]]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


@dataclass(frozen=True)
class EncodingContext:
    """Everything the per-frame pipeline reads; built once after load."""

    bounds: GeoBounds
    elevation: ElevationRange
    palette: CategoryPalette

    @classmethod
    def from_ranges(
        cls,
        ranges: DatasetRanges,
        palette: Sequence[str] = PALETTE,
    ) -> "EncodingContext":
        return cls(
            bounds=ranges.bounds,
            elevation=ranges.elevation,
            palette=CategoryPalette.build(ranges.categories, palette),
        )
