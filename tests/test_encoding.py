import pytest

from volcano_map.config import PALETTE
from volcano_map.render.encoding import (
    DEFAULT_ALPHA,
    RECENCY_CODES,
    RECENCY_PERIODS,
    WHITE,
    CategoryPalette,
    Color,
    lookup_opacity,
    parse_hex,
)


def test_parse_hex_with_and_without_alpha():
    assert parse_hex("#FF6347") == Color(255, 99, 71, 255)
    assert parse_hex("#cf0808ff") == Color(207, 8, 8, 255)
    assert parse_hex("#00000080").a == 128
    with pytest.raises(ValueError):
        parse_hex("#fff")


def test_palette_follows_first_seen_order():
    pal = CategoryPalette.build(["A", "B", "C"])
    colors = [pal.color_for(c) for c in ["A", "B", "A", "C"]]
    p = [parse_hex(h) for h in PALETTE]
    assert colors == [p[0], p[1], p[0], p[2]]


def test_palette_cycles():
    cats = [f"cat{i}" for i in range(len(PALETTE) + 2)]
    pal = CategoryPalette.build(cats)
    assert pal.color_for(cats[len(PALETTE)]) == parse_hex(PALETTE[0])
    assert pal.color_for(cats[len(PALETTE) + 1]) == parse_hex(PALETTE[1])
    assert [label for label, _ in pal] == cats


def test_unknown_category_is_white():
    pal = CategoryPalette.build(["Shield"])
    assert pal.color_for("Maar") == WHITE
    assert pal.color_for(None) == WHITE
    assert pal.color_for("") == WHITE


def test_opacity_exact_match_only():
    assert lookup_opacity("D3") == 190
    assert lookup_opacity("D1") == 255
    assert lookup_opacity("?") == 80
    assert lookup_opacity("X") == DEFAULT_ALPHA == 150
    assert lookup_opacity("d3") == 150
    assert lookup_opacity("") == 150
    assert lookup_opacity(None) == 150


def test_recency_table_is_complete():
    assert len(RECENCY_CODES) == 10
    assert set(RECENCY_PERIODS) == set(RECENCY_CODES)


def test_with_alpha_replaces_channel():
    assert Color(1, 2, 3, 10).with_alpha(200) == Color(1, 2, 3, 200)
