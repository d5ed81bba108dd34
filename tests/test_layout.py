from volcano_map.render.encoding import CategoryPalette, RECENCY_CODES
from volcano_map.render.layout import layout_legend, layout_tooltip, tooltip_lines
from volcano_map.render.symbols import Symbol


def measure(text):
    return 7.0 * len(text)


def test_legend_row_count_and_order(ctx, viewport):
    legend = layout_legend(ctx.palette, viewport)
    assert len(legend.rows) == len(ctx.palette) + 10
    assert [r.key for r in legend.rows_of("category")] == [
        "Stratovolcano", "Shield", "Caldera", "Submarine"
    ]
    assert [r.key for r in legend.rows_of("recency")] == list(RECENCY_CODES)


def test_legend_geometry(viewport):
    pal = CategoryPalette.build(["A", "B", "C"])
    legend = layout_legend(pal, viewport)
    first = legend.rows[0]
    assert first.swatch_center == (110.0, 180.0)
    assert (first.label.x, first.label.y) == (130.0, 170.0)
    assert [h.y for h in legend.headings] == [140.0, 260.0]

    recency = legend.rows_of("recency")
    assert recency[0].label.y == 285.0
    assert recency[0].label.text == "D1: 1964 or later"
    assert recency[2].color.a == 190
    assert recency[2].color[:3] == (200, 200, 200)


def test_legend_size_does_not_depend_on_dataset(viewport):
    assert len(layout_legend(CategoryPalette.build([]), viewport).rows) == 10


def test_tooltip_lines_follow_field_order(dataset):
    lines = tooltip_lines(dataset[0], dataset.field_names)
    assert len(lines) == len(dataset.field_names)
    assert lines[0] == "Volcano Name: Etna"
    assert lines[-1] == "Last Known Eruption: D1"


def test_tooltip_box_geometry(dataset):
    s = Symbol(x=400.0, y=300.0, radius=20.0, color=None)
    tip = layout_tooltip(dataset[0], dataset.field_names, s, measure)
    texts = tooltip_lines(dataset[0], dataset.field_names)
    assert (tip.x, tip.y) == (415.0, 285.0)
    assert tip.width == max(7.0 * len(t) for t in texts) + 16.0
    assert tip.height == len(texts) * 18.0 + 16.0
    assert (tip.lines[1].x, tip.lines[1].y) == (423.0, 311.0)


def test_tooltip_is_not_clamped(dataset, viewport):
    s = Symbol(x=viewport.width - 5.0, y=5.0, radius=20.0, color=None)
    tip = layout_tooltip(dataset[0], dataset.field_names, s, measure)
    assert tip.x + tip.width > viewport.width
    assert tip.y < 0
