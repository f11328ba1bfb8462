"""Widgets, grid layout, event dispatch and terminal rendering for dashboards."""

__version__ = "0.1.0"

__all__ = [
    "attributes",
    "barchart",
    "block",
    "buffer",
    "canvas",
    "events",
    "gauge",
    "geometry",
    "grid",
    "linechart",
    "listwidget",
    "par",
    "paths",
    "render",
    "sparkline",
    "table",
    "tabpane",
    "textbuilder",
    "theme",
    "widget",
]