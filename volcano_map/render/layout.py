"""
Legend and tooltip layout.

Pure geometry: positions, sizes and strings for the painter.  Text
widths come from a caller-supplied ``measure`` function so the layout
does not depend on a particular font backend.

Legend (left column)
--------------------
    Legend: TypeCategory          <- heading, 30 px above the first row
    (o) Stratovolcano             <- one row per category, palette order
    (o) Caldera
    ...
    Opacity = last eruption       <- heading, 25 px above the recency block
    (o) D1: 1964 or later         <- one row per fixed recency code
    ...
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Mapping, Sequence, Tuple

from ..config import (
    LEGEND_FONT_PX,
    LEGEND_RECENCY_FONT_PX,
    LEGEND_SPACING,
    LEGEND_SWATCH,
    LEGEND_X,
    LEGEND_Y_OFFSET,
    RECENCY_SWATCH_RGB,
    TOOLTIP_LINE_HEIGHT,
    TOOLTIP_OFFSET,
    TOOLTIP_PADDING,
)
from ..geo.projection import Viewport
from .encoding import (
    RECENCY_CODES,
    RECENCY_PERIODS,
    CategoryPalette,
    Color,
    lookup_opacity,
)
from .symbols import Symbol

CATEGORY_HEADING = "Legend: TypeCategory"
RECENCY_HEADING = "Opacity = last known eruption"


@dataclass(frozen=True)
class TextItem:
    text: str
    x: float
    y: float              # top of the text line
    font_px: int = LEGEND_FONT_PX
    bold: bool = False


@dataclass(frozen=True)
class LegendRow:
    kind: str             # "category" or "recency"
    key: str              # category label or recency code
    swatch_center: Tuple[float, float]
    swatch_diameter: float
    color: Color
    label: TextItem


@dataclass(frozen=True)
class Legend:
    headings: Tuple[TextItem, ...]
    rows: Tuple[LegendRow, ...]

    def rows_of(self, kind: str) -> List[LegendRow]:
        return [r for r in self.rows if r.kind == kind]


def _row(kind: str, key: str, y: float, color: Color, text: str, font_px: int) -> LegendRow:
    return LegendRow(
        kind=kind,
        key=key,
        swatch_center=(LEGEND_X + 10, y + 10),
        swatch_diameter=LEGEND_SWATCH,
        color=color,
        label=TextItem(text, LEGEND_X + 30, y, font_px=font_px),
    )


def layout_legend(palette: CategoryPalette, viewport: Viewport) -> Legend:
    """Lay out the category block followed by the fixed recency block."""
    start_y = viewport.outer_margin + LEGEND_Y_OFFSET
    headings = [TextItem(CATEGORY_HEADING, LEGEND_X, start_y - 30, bold=True)]
    rows: List[LegendRow] = []

    for i, (label, color) in enumerate(palette):
        y = start_y + i * LEGEND_SPACING
        rows.append(_row("category", label, y, color, label, LEGEND_FONT_PX))

    recency_y = start_y + len(palette) * LEGEND_SPACING + 40
    headings.append(TextItem(RECENCY_HEADING, LEGEND_X, recency_y - 25, bold=True))

    gray = Color(*RECENCY_SWATCH_RGB)
    for j, code in enumerate(RECENCY_CODES):
        y = recency_y + j * LEGEND_SPACING
        rows.append(_row(
            "recency", code, y,
            gray.with_alpha(lookup_opacity(code)),
            f"{code}: {RECENCY_PERIODS[code]}",
            LEGEND_RECENCY_FONT_PX,
        ))

    return Legend(headings=tuple(headings), rows=tuple(rows))


@dataclass(frozen=True)
class Tooltip:
    x: float
    y: float
    width: float
    height: float
    lines: Tuple[TextItem, ...]


def tooltip_lines(record: Mapping[str, str], field_names: Sequence[str]) -> List[str]:
    return [f"{name}: {record.get(name, '')}" for name in field_names]


def layout_tooltip(
    record: Mapping[str, str],
    field_names: Sequence[str],
    symbol: Symbol,
    measure: Callable[[str], float],
) -> Tooltip:
    """Size and place the detail box for the hovered record.

    The box is anchored up and to the right of the circle centre and is
    not clamped to the viewport.
    """
    x = symbol.x + TOOLTIP_OFFSET[0]
    y = symbol.y + TOOLTIP_OFFSET[1]
    texts = tooltip_lines(record, field_names)
    widest = max((measure(t) for t in texts), default=0.0)
    pad = TOOLTIP_PADDING
    items = tuple(
        TextItem(t, x + pad, y + pad + i * TOOLTIP_LINE_HEIGHT)
        for i, t in enumerate(texts)
    )
    return Tooltip(
        x=x,
        y=y,
        width=widest + pad * 2,
        height=len(texts) * TOOLTIP_LINE_HEIGHT + pad * 2,
        lines=items,
    )
