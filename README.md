# termui

Build terminal dashboards out of small widgets: bordered blocks, paragraphs,
lists, gauges, sparklines, bar charts, stacked bar charts, line charts,
tables, tab panes and a braille dot canvas. Widgets can be placed freely or
laid out on a 12-column grid.

Every widget turns itself into a `Buffer` of styled cells with `buffer()`.
Buffers are plain data (`Buffer.cells` maps `Point` to `Cell`), so widgets
can be tested and composed without a terminal. The `termui.render` module
draws buffers to the real terminal using `blessed`.

## Installation

```
pip install termui
```

## A first dashboard

```python
from termui import render
from termui.gauge import Gauge
from termui.par import Paragraph
from termui.events import handle, loop, stop_loop

with render.session():
    g = Gauge()
    g.percent = 50
    g.width = 50
    g.height = 3
    g.border_label = "Gauge"

    p = Paragraph("Press q to quit. [Colored](fg-red) text works too.")
    p.width = 50
    p.height = 3
    p.y = 3

    render.render(g, p)

    handle("/sys/kbd/q", lambda event: stop_loop())
    loop()
```

`render.session()` calls `render.init()` on entry and `render.close()` on
exit; the two can also be called directly. `render.render(*widgets)` draws
the widgets in order, later ones on top of earlier ones. `render.clear()`
and `render.clear_area(rect, bg)` blank the screen or a rectangle, and
`render.term_width()` / `render.term_height()` report the terminal size.

## Widgets

All widgets derive from `termui.block.Block`, which has a position (`x`,
`y`), a size (`width`, `height`), padding, a border with optional
`border_label`, and colours. `Block.inner_bounds()` returns the area left
for content.

- `termui.par.Paragraph(text)` — text, optionally word-wrapped with `wrap_length`
- `termui.listwidget.List` — `items`, with `overflow` set to `"hidden"` or `"wrap"`
- `termui.gauge.Gauge` — `percent` and a `label` in which `{{percent}}` is replaced
- `termui.sparkline.Sparklines(*lines)` — a stack of `Sparkline` objects
- `termui.barchart.BarChart` — `data` with `data_labels`; `set_max()` fixes the top
- `termui.barchart.MultiBarChart` — up to eight stacked series in `data`
- `termui.linechart.LineChart` — float `data`, `mode` `"braille"` or `"dot"`
- `termui.table.Table` — `rows` of strings, with `separator` and `text_align`
- `termui.tabpane.Tabpane` — `Tab` pages set with `set_tabs()`, switched with
  `set_active_left()` and `set_active_right()`
- `termui.canvas.Canvas` — braille dots turned on and off with `set()` and `unset()`

## Text markup

Text in paragraphs, lists, tables and border labels accepts a small markup:
`[text](fg-red,bg-white,fg-bold)` colours the bracketed text. Colours are
`black`, `red`, `green`, `yellow`, `blue`, `magenta`, `cyan`, `white` and
`default`; styles are `bold`, `underline` and `reverse`. The parser is
available as `termui.textbuilder.parse_markdown`, and
`termui.attributes.string_to_attribute("red, bold")` turns names into an
attribute value.

## Layout with the grid

```python
from termui import render
from termui.grid import Grid, new_row, new_col

body = Grid()
body.width = 100
body.add_rows(
    new_row(new_col(6, 0, left_widget), new_col(6, 0, right_widget)),
    new_row(new_col(12, 0, bottom_widget)),
)
body.align()
render.render(body)
```

Columns span a number of the twelve grid columns, with an optional offset;
passing several widgets to `new_col` stacks them vertically.

## Events

Handlers are registered by path with `termui.events.handle(path, handler)`
and receive an `Event`. The longest registered path that is a prefix of the
event's path wins. After `render.init()` these events arrive:

- `/sys/kbd/<key>` — keyboard input, such as `/sys/kbd/q`, `/sys/kbd/C-c` or
  `/sys/kbd/<enter>`; `event.data` is a `KeyboardEvent`
- `/sys/wnd/resize` — terminal resized; `event.data` is a `WindowEvent`
- `/timer/1s` — the built-in one-second timer; `event.data` is a `TimerEvent`
- paths sent with `termui.events.send_custom_event(path, data)`

`loop()` dispatches events until `stop_loop()` is called from any handler.
`Block.handle(path, handler)` attaches a handler to a single widget.
Custom sources can be added with `termui.events.merge(name, source)`, where
the source is an iterable of events or a queue ended by `None`.

## Themes

Default colours come from `termui.theme.COLOR_MAP`, looked up by dotted
names such as `border.fg` or `gauge.bar.bg` with `termui.theme.theme_attr`.
A missing name falls back to ever shorter dotted suffixes. Changing the map
before creating widgets changes their defaults.

## Limitations

- Mouse input is not read; only keyboard and resize events come from the
  terminal, and only when standard input is a terminal.
- Border and axis glyphs are always the Unicode box-drawing characters.