from termui.attributes import COLOR_GREEN, COLOR_RED
from termui.sparkline import SPARKS, Sparkline, Sparklines


def _widget(*lines, width=10, height=4):
    sls = Sparklines(*lines)
    sls.width = width
    sls.height = height
    return sls


def test_title_and_full_bar():
    line = Sparkline(data=[0, 8], title="t", line_color=COLOR_GREEN)
    sls = _widget(line)
    buf = sls.buffer()
    inner = sls.inner_area
    assert buf.at(inner.x0, inner.y0).ch == "t"
    full = buf.at(inner.x0 + 1, inner.y0 + 1)
    assert full.ch == " " and full.bg == COLOR_GREEN
    assert buf.at(inner.x0, inner.y0 + 1).bg != COLOR_GREEN


def test_partial_bar_uses_spark_glyph():
    line = Sparkline(data=[4, 8], title="t", line_color=COLOR_RED)
    sls = _widget(line)
    buf = sls.buffer()
    inner = sls.inner_area
    cell = buf.at(inner.x0, inner.y0 + 1)
    assert cell.ch in SPARKS
    assert cell.fg == COLOR_RED


def test_display_height_counts_title():
    assert Sparkline(height=3).display_height == 3
    assert Sparkline(height=3, title="x").display_height == 4


def test_lines_that_do_not_fit_are_hidden():
    first = Sparkline(data=[1], title="a")
    second = Sparkline(data=[1], title="b")
    sls = _widget(first, second)
    buf = sls.buffer()
    inner = sls.inner_area
    assert buf.at(inner.x0, inner.y0).ch == "a"
    drawn = {c.ch for c in buf.cells.values()}
    assert "b" not in drawn


def test_add_appends_line():
    sls = _widget(height=6)
    sls.add(Sparkline(data=[1], title="q"))
    buf = sls.buffer()
    assert len(sls.lines) == 1
    assert buf.at(sls.inner_area.x0, sls.inner_area.y0).ch == "q"


def test_long_data_keeps_most_recent_values():
    line = Sparkline(data=list(range(20)), title="t", line_color=COLOR_GREEN)
    sls = _widget(line)
    buf = sls.buffer()
    inner = sls.inner_area
    last = buf.at(inner.x1 - 1, inner.y0 + 1)
    assert last.bg == COLOR_GREEN and last.ch == " "


def test_all_zero_data_draws_no_bars():
    line = Sparkline(data=[0, 0, 0], title="z", line_color=COLOR_RED)
    sls = _widget(line)
    buf = sls.buffer()
    inner = sls.inner_area
    assert buf.at(inner.x0, inner.y0).ch == "z"
    coloured = [c for c in buf.cells.values() if COLOR_RED in (c.bg, c.fg)]
    assert len(coloured) == 0


def test_negative_values_draw_nothing():
    line = Sparkline(data=[-5, 4], title="n", line_color=COLOR_RED)
    sls = _widget(line)
    buf = sls.buffer()
    inner = sls.inner_area
    first_column = buf.at(inner.x0, inner.y0 + 1)
    assert first_column.ch == " "
    assert first_column.bg == sls.bg
    assert buf.at(inner.x0 + 1, inner.y0 + 1).bg == COLOR_RED