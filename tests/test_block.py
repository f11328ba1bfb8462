from types import SimpleNamespace

import pytest

from termui.attributes import (
    BOTTOM_LEFT,
    BOTTOM_RIGHT,
    COLOR_GREEN,
    COLOR_WHITE,
    DOT,
    HORIZONTAL_LINE,
    TOP_LEFT,
    TOP_RIGHT,
    VERTICAL_LINE,
)
from termui.block import Block, HLine, VLine
from termui.geometry import Align, Rectangle, set_term_size, term_rect
from termui.widget import DEFAULT_WIDGET_MANAGER


@pytest.fixture
def term_size():
    previous = term_rect()
    yield set_term_size
    set_term_size(previous.x1, previous.y1)


def test_block_float(term_size):
    term_size(100, 50)
    b = Block()
    b.x = 10
    b.y = 20
    b.float_align = Align.CENTER
    b.align()
    assert b.area == Rectangle(59, 44, 61, 46)


def _bounds(b):
    area = b.inner_bounds()
    return area.x0, area.y0, area.dx(), area.dy()


def test_block_inner_bounds():
    b = Block()
    b.x = 10
    b.y = 11
    b.width = 12
    b.height = 13

    b.border = False
    assert _bounds(b) == (10, 11, 12, 13)

    b.border = True
    assert _bounds(b) == (11, 12, 10, 11)

    b.padding_bottom = 2
    assert _bounds(b) == (11, 12, 10, 9)

    b.padding_top = 3
    assert _bounds(b) == (11, 15, 10, 6)

    b.padding_left = 4
    assert _bounds(b) == (15, 15, 6, 6)

    b.padding_right = 5
    assert _bounds(b) == (15, 15, 1, 6)


def test_inner_properties_follow_inner_area():
    b = Block()
    b.width = 12
    b.height = 13
    b.align()
    assert (b.inner_x, b.inner_y, b.inner_width, b.inner_height) == (
        b.inner_area.x0,
        b.inner_area.y0,
        b.inner_area.dx(),
        b.inner_area.dy(),
    )


def test_theme_defaults():
    b = Block()
    assert b.border_fg == COLOR_WHITE
    assert b.border_label_fg == COLOR_GREEN
    assert b.bg == 0


def test_lines():
    assert HLine(0, 0, 0).buffer().cells == {}
    assert VLine(0, 0, -1).buffer().cells == {}
    h = HLine(1, 2, 3).buffer()
    assert [h.at(x, 2).ch for x in range(1, 4)] == [HORIZONTAL_LINE] * 3
    assert len(h.cells) == 3
    v = VLine(1, 2, 2).buffer()
    assert [v.at(1, y).ch for y in (2, 3)] == [VERTICAL_LINE] * 2
    assert len(v.cells) == 2


def test_buffer_draws_border():
    b = Block()
    b.width = 4
    b.height = 3
    buf = b.buffer()
    assert buf.area == Rectangle(0, 0, 4, 3)
    assert buf.at(0, 0).ch == TOP_LEFT
    assert buf.at(3, 0).ch == TOP_RIGHT
    assert buf.at(0, 2).ch == BOTTOM_LEFT
    assert buf.at(3, 2).ch == BOTTOM_RIGHT
    assert buf.at(1, 0).ch == HORIZONTAL_LINE
    assert buf.at(0, 1).ch == VERTICAL_LINE
    assert buf.at(1, 1).ch == " "


def test_buffer_without_border_is_background_only():
    b = Block()
    b.border = False
    b.width = 3
    b.height = 2
    buf = b.buffer()
    assert {c.ch for c in buf.cells.values()} == {" "}
    assert len(buf.cells) == 6


def test_border_label():
    b = Block()
    b.width = 6
    b.height = 3
    b.border_label = "ab"
    buf = b.buffer()
    assert buf.at(1, 0).ch == "a"
    assert buf.at(2, 0).ch == "b"
    assert buf.at(1, 0).fg == b.border_label_fg
    assert buf.at(3, 0).ch == HORIZONTAL_LINE


def test_long_border_label_is_trimmed():
    b = Block()
    b.width = 6
    b.height = 3
    b.border_label = "abcdef"
    buf = b.buffer()
    assert "".join(buf.at(x, 0).ch for x in range(1, 5)) == "abc" + DOT
    assert buf.at(5, 0).ch == TOP_RIGHT


def test_handle_registers_with_default_manager():
    b = Block()
    calls = []
    b.handle("/timer", calls.append)
    try:
        assert b.id in DEFAULT_WIDGET_MANAGER
        event = SimpleNamespace(path="/timer/1s")
        DEFAULT_WIDGET_MANAGER.handlers_hook()(event)
        assert calls == [event]
    finally:
        DEFAULT_WIDGET_MANAGER.remove_widget(b)
    assert b.id not in DEFAULT_WIDGET_MANAGER


def test_blocks_get_consecutive_ids():
    first = Block()
    second = Block()
    assert int(second.id) == int(first.id) + 1