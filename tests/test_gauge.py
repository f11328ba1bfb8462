from termui.attributes import ATTR_REVERSE, COLOR_BLACK, COLOR_BLUE, COLOR_RED
from termui.gauge import COLOR_UNDEF, Gauge
from termui.geometry import Align


def _row(buf, y, x0, x1):
    return "".join(buf.at(x, y).ch for x in range(x0, x1))


def _label_row(g):
    inner = g.inner_area
    return inner.y0 + inner.dy() // 2


def test_label_shows_percent():
    g = Gauge()
    g.percent = 50
    buf = g.buffer()
    inner = g.inner_area
    assert "50%" in _row(buf, _label_row(g), inner.x0, inner.x1 + 1)


def test_default_bar_is_reversed_and_half_filled():
    g = Gauge()
    g.height = 5
    g.percent = 50
    buf = g.buffer()
    inner = g.inner_area
    top = [buf.at(x, inner.y0).bg for x in range(inner.x0, inner.x1)]
    assert top[0] == ATTR_REVERSE
    assert top.count(ATTR_REVERSE) == 5


def test_full_bar_colours_every_inner_cell():
    g = Gauge()
    g.bar_color = COLOR_RED
    g.percent = 100
    buf = g.buffer()
    inner = g.inner_area
    for y in range(inner.y0, inner.y1):
        for x in range(inner.x0, inner.x1):
            assert buf.at(x, y).bg == COLOR_RED


def test_highlight_colour_applies_over_bar():
    g = Gauge()
    g.bar_color = COLOR_RED
    g.percent_color = COLOR_BLUE
    g.percent_color_highlighted = COLOR_BLACK
    g.percent = 100
    buf = g.buffer()
    row = _label_row(g)
    label_cells = [buf.at(x, row) for x in range(g.inner_area.x0, g.inner_area.x1)
                   if buf.at(x, row).ch in "100%"]
    assert label_cells
    assert all(c.fg == COLOR_BLACK for c in label_cells)


def test_without_highlight_label_uses_percent_colour():
    g = Gauge()
    assert g.percent_color_highlighted == COLOR_UNDEF
    g.percent_color = COLOR_BLUE
    g.percent = 100
    buf = g.buffer()
    row = _label_row(g)
    label = [buf.at(x, row) for x in range(g.inner_area.x0, g.inner_area.x1)
             if buf.at(x, row).ch == "%"]
    assert label and label[0].fg == COLOR_BLUE


def test_empty_bar_label_uses_block_background():
    g = Gauge()
    g.bg = COLOR_BLUE
    g.percent = 0
    buf = g.buffer()
    row = _label_row(g)
    percent_cells = [buf.at(x, row) for x in range(g.inner_area.x0, g.inner_area.x1 + 1)
                     if buf.at(x, row).ch == "%"]
    assert percent_cells and percent_cells[0].bg == COLOR_BLUE


def test_custom_label_left_aligned():
    g = Gauge()
    g.width = 20
    g.label = "{{percent}} done"
    g.label_align = Align.LEFT
    g.percent = 5
    buf = g.buffer()
    inner = g.inner_area
    assert _row(buf, _label_row(g), inner.x0 + 1, inner.x0 + 7) == "5 done"