from termui.attributes import COLOR_BLUE, COLOR_RED, DOT
from termui.par import Paragraph


def _row(buf, y, x0, x1):
    return "".join(buf.at(x, y).ch for x in range(x0, x1))


def test_no_border_background():
    par = Paragraph("a")
    par.border = False
    par.bg = COLOR_BLUE
    par.text_bg_color = COLOR_BLUE
    par.width = 2
    par.height = 2
    buf = par.buffer()
    assert buf.cells
    for cell in buf.cells.values():
        assert cell.bg == par.bg


def test_newlines_start_new_rows():
    par = Paragraph("ab\ncd")
    par.width = 6
    par.height = 4
    buf = par.buffer()
    inner = par.inner_area
    assert _row(buf, inner.y0, inner.x0, inner.x0 + 2) == "ab"
    assert _row(buf, inner.y0 + 1, inner.x0, inner.x0 + 2) == "cd"


def test_overflow_ends_with_ellipsis():
    par = Paragraph("abcdef")
    par.width = 4
    par.height = 3
    buf = par.buffer()
    inner = par.inner_area
    assert buf.at(inner.x0, inner.y0).ch == "a"
    assert buf.at(inner.x1 - 1, inner.y1 - 1).ch == DOT


def test_markup_colours_text():
    par = Paragraph("[hi](fg-red) x")
    par.width = 10
    par.height = 3
    buf = par.buffer()
    inner = par.inner_area
    assert _row(buf, inner.y0, inner.x0, inner.x0 + 4) == "hi x"
    assert buf.at(inner.x0, inner.y0).fg == COLOR_RED
    assert buf.at(inner.x0 + 3, inner.y0).fg == par.text_fg_color


def test_wrap_length_breaks_at_words():
    par = Paragraph("aaa bbb")
    par.width = 10
    par.height = 5
    par.wrap_length = 3
    buf = par.buffer()
    inner = par.inner_area
    assert _row(buf, inner.y0, inner.x0, inner.x0 + 3) == "aaa"
    assert _row(buf, inner.y0 + 1, inner.x0, inner.x0 + 3) == "bbb"