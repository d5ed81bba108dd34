"""Per-frame pass: symbols for every plottable record plus the hover target."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping, Optional, Tuple

from ..geo.projection import Viewport
from .encoding import EncodingContext
from .hit_test import Hit, hit_test
from .symbols import Symbol, encode_symbols


@dataclass(frozen=True)
class Frame:
    viewport: Viewport
    symbols: Tuple[Tuple[int, Symbol], ...]
    hover: Optional[Hit] = None


def build_frame(
    records: Iterable[Mapping[str, str]],
    ctx: EncodingContext,
    viewport: Viewport,
    pointer: Optional[Tuple[float, float]] = None,
) -> Frame:
    """Recompute all symbols and the hover target from scratch."""
    placed = tuple(encode_symbols(records, ctx, viewport))
    return Frame(viewport=viewport, symbols=placed, hover=hit_test(pointer, placed))
