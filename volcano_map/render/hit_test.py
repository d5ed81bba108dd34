"""
Pointer hit testing against the circles of one frame.

A pointer is over a circle when its distance to the centre is strictly
less than half the circle's radius.  Circles overlap a lot in dense
regions, so when several match the LAST one in dataset order wins; it is
also the one painted on top.

Every frame tests every symbol.  For datasets much larger than the
Smithsonian Holocene list a spatial index would be the next step.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import numpy as np

from .symbols import Symbol


@dataclass(frozen=True)
class Hit:
    row: int          # index of the record in the dataset
    symbol: Symbol


def hit_test(
    pointer: Optional[Tuple[float, float]],
    placed: Sequence[Tuple[int, Symbol]],
) -> Optional[Hit]:
    """Return the hovered record for *pointer*, or None.

    Parameters
    ----------
    pointer : (x, y) or None
        Pointer position in widget pixels; None when the pointer is
        outside the widget.
    placed : sequence of (row, Symbol)
        Symbols in dataset order, as produced by ``encode_symbols``.
    """
    if pointer is None or not placed:
        return None

    px, py = pointer
    xs = np.fromiter((s.x for _, s in placed), dtype=float, count=len(placed))
    ys = np.fromiter((s.y for _, s in placed), dtype=float, count=len(placed))
    radii = np.fromiter((s.radius for _, s in placed), dtype=float, count=len(placed))

    inside = np.flatnonzero(np.hypot(xs - px, ys - py) < radii / 2.0)
    if inside.size == 0:
        return None
    row, sym = placed[int(inside[-1])]
    return Hit(row=row, symbol=sym)
