import pytest

from termui.attributes import (
    COLOR_DEFAULT,
    COLOR_RED,
    COLOR_WHITE,
    HORIZONTAL_LINE,
    cells_to_str,
)
from termui.geometry import Align
from termui.table import Table

ROWS = [["ab", "c"], ["d", "efg"]]


def make_table(rows, separator=True):
    table = Table()
    table.rows = [list(r) for r in rows]
    table.separator = separator
    table.analysis()
    table.set_size()
    return table


def row_text(buf, y, x0, x1):
    return "".join(buf.at(x, y).ch for x in range(x0, x1))


def test_analysis_cells_and_widths():
    table = Table()
    table.rows = [list(r) for r in ROWS]
    cells = table.analysis()
    assert [cells_to_str(c) for c in cells] == ["ab", "c", "d", "efg"]
    assert table.cell_width == [len("ab"), len("efg")]
    assert table.fg_colors == [COLOR_WHITE, COLOR_WHITE]
    assert table.bg_colors == [COLOR_DEFAULT, COLOR_DEFAULT]


def test_analysis_reads_markup():
    table = Table()
    table.rows = [["[x](fg-red)"]]
    cells = table.analysis()
    assert cells_to_str(cells[0]) == "x"
    assert cells[0][0].fg == COLOR_RED
    assert table.cell_width == [len("x")]


def test_analysis_of_empty_table():
    table = Table()
    assert table.analysis() == []
    assert table.cell_width == []


def test_analysis_rejects_row_wider_than_first():
    table = Table()
    table.rows = [["a"], ["b", "c"]]
    with pytest.raises(IndexError):
        table.analysis()


def test_set_size_with_separator():
    table = make_table(ROWS)
    assert table.height == 5
    assert table.width == 13


def test_set_size_without_separator():
    table = make_table(ROWS, separator=False)
    assert table.height == len(ROWS) + 2
    assert table.width == make_table(ROWS).width


def positions(table, y):
    table.align()
    cx0, cy0, start0 = table.calculate_position(0, y, 0)
    cx1, cy1, start1 = table.calculate_position(1, y, start0)
    return (cx0, cy0, start0), (cx1, cy1, start1)


def test_left_alignment_offset_is_constant():
    table = make_table([["abcd", "x"], ["y", "zz"]])
    (cx0, _, s0), (cx1, _, s1) = positions(table, 0)
    assert cx0 - s0 == cx1 - s1
    assert s0 == table.inner_area.x0


def test_right_alignment_ends_text_together():
    table = make_table([["abcd", "x"], ["y", "zz"]])
    table.text_align = Align.RIGHT
    (a0, _, _), _ = positions(table, 0)
    (b0, _, _), _ = positions(table, 1)
    assert a0 + len("abcd") == b0 + len("y")


def test_center_alignment_lies_between():
    table = make_table([["abcd", "x"], ["y", "zz"]])
    (left, _, _), _ = positions(table, 1)
    table.text_align = Align.RIGHT
    (right, _, _), _ = positions(table, 1)
    table.text_align = Align.CENTER
    (center, _, _), _ = positions(table, 1)
    assert left < center < right


def test_separator_doubles_row_spacing():
    spaced = make_table(ROWS)
    (_, a0, _), _ = positions(spaced, 0)
    (_, a1, _), _ = positions(spaced, 1)
    tight = make_table(ROWS, separator=False)
    (_, b0, _), _ = positions(tight, 0)
    (_, b1, _), _ = positions(tight, 1)
    assert a1 - a0 == 2 * (b1 - b0)


def test_buffer_draws_rows_and_separator():
    table = make_table(ROWS)
    buf = table.buffer()
    inner = table.inner_area
    first = row_text(buf, inner.y0, inner.x0, inner.x1)
    assert "ab" in first and "c" in first and "|" in first
    assert set(row_text(buf, inner.y0 + 1, inner.x0, inner.x1)) == {HORIZONTAL_LINE}
    assert "efg" in row_text(buf, inner.y0 + 2, inner.x0, inner.x1)


def test_buffer_without_separator():
    table = make_table(ROWS, separator=False)
    buf = table.buffer()
    inner = table.inner_area
    assert "efg" in row_text(buf, inner.y0 + 1, inner.x0, inner.x1)
    assert HORIZONTAL_LINE not in row_text(buf, inner.y0 + 1, inner.x0, inner.x1)


def test_row_background_color():
    table = make_table(ROWS)
    table.bg_colors = [0, COLOR_RED]
    buf = table.buffer()
    inner = table.inner_area
    assert buf.at(inner.x0, inner.y0 + 2).bg == COLOR_RED
    assert buf.at(inner.x0, inner.y0).bg == COLOR_DEFAULT
    assert table.bg_colors == [COLOR_DEFAULT, COLOR_RED]