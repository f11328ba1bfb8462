import pytest

from termui.attributes import TOP_LEFT
from termui.block import Block
from termui.grid import Grid, Row, new_col, new_row


def block(height):
    b = Block()
    b.height = height
    return b


@pytest.fixture
def tree():
    p0, p1, p2, p3 = (block(1) for _ in range(4))
    r = new_row(
        new_col(6, 0, p0),
        new_col(6, 0, new_row(new_col(6, 0, p1), new_col(6, 0, p2, p3))),
    )
    r.assign_width(100)
    return r, (p0, p1, p2, p3)


def test_row_width(tree):
    r, _ = tree
    assert r.width == 100
    assert r.cols[0].width == 50
    assert r.cols[1].width == 50
    assert r.cols[1].cols[0].width == 25
    assert r.cols[1].cols[1].width == 25
    assert r.cols[1].cols[1].cols[0].width == 25
    assert r.cols[1].cols[1].cols[0].cols[0].width == 25


def test_widget_widths_follow_rows(tree):
    _, (p0, p1, p2, p3) = tree
    assert (p0.width, p1.width, p2.width, p3.width) == (50, 25, 25, 25)


def test_row_height(tree):
    r, _ = tree
    assert r.solve_height() == 2
    assert r.cols[1].cols[1].height == 2
    assert r.cols[1].cols[1].cols[0].height == 2
    assert r.cols[1].cols[0].height == 1


def test_assign_xy(tree):
    r, _ = tree
    r.solve_height()
    r.assign_x(0)
    r.assign_y(0)
    assert r.cols[0].x == 0
    assert r.cols[1].cols[0].x == 50
    assert r.cols[1].cols[1].x == 75
    assert r.cols[1].cols[1].cols[0].x == 75
    assert r.cols[1].cols[0].y == 0
    assert r.cols[1].cols[1].cols[0].y == 0
    assert r.cols[1].cols[1].cols[0].cols[0].y == 1


def test_stacked_widgets_positions(tree):
    r, (_, _, p2, p3) = tree
    r.solve_height()
    r.assign_x(0)
    r.assign_y(0)
    assert (p2.x, p2.y) == (75, 0)
    assert (p3.x, p3.y) == (75, 1)


def test_new_col_with_single_widget():
    b = block(1)
    col = new_col(4, 2, b)
    assert col.widget is b
    assert (col.span, col.offset) == (4, 2)
    assert col.cols == []


def test_new_col_adopts_row_columns():
    inner = new_row(new_col(6, 0, block(1)), new_col(6, 0, block(1)))
    col = new_col(6, 0, inner)
    assert col.cols is inner.cols
    assert col.widget is None


def test_new_row_spans_full_width():
    assert new_row().span == 12


def test_offset_shifts_column():
    b = block(1)
    r = new_row(new_col(6, 6, b))
    r.assign_width(120)
    r.assign_x(0)
    assert b.x == 60
    assert b.width == 60


def test_grid_align_stacks_rows():
    top, bottom = block(3), block(4)
    grid = Grid(new_row(new_col(12, 0, top)))
    grid.add_rows(new_row(new_col(12, 0, bottom)))
    grid.width = 40
    grid.align()
    assert (top.x, top.y, top.width) == (0, 0, 40)
    assert (bottom.x, bottom.y, bottom.width) == (0, 3, 40)


def test_grid_buffer_merges_widgets():
    left, right = block(3), block(3)
    grid = Grid(new_row(new_col(6, 0, left), new_col(6, 0, right)))
    grid.width = 20
    grid.align()
    buf = grid.buffer()
    assert buf.at(0, 0).ch == TOP_LEFT
    assert buf.at(10, 0).ch == TOP_LEFT


def test_leaf_without_widget_is_empty():
    assert Row().buffer().cells == {}
    assert Row().solve_height() == 0


def test_row_setters_propagate_to_widget():
    b = block(1)
    r = Row(widget=b)
    r.x, r.y, r.width = 3, 4, 5
    assert (b.x, b.y, b.width) == (3, 4, 5)