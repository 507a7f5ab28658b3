"""
Positioned HTML markup for page text.

Each page becomes a relatively-positioned container sized to its viewport;
each text item becomes an absolutely-positioned child at its top-left
coordinates.  Text and font names are HTML-escaped.
"""

import html
from typing import Iterable

from core.page.models import TextItem, Viewport


def css_number(value: float) -> str:
    """Format a coordinate without losing precision (``10.0`` -> ``10``)."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def css_string(value: str) -> str:
    """Quote *value* as a CSS string literal."""
    return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'


def item_position(item: TextItem, viewport: Viewport):
    """
    Return ``(x, y, font_size)`` for *item* in top-left page space.

    PDF space has its origin at the bottom-left with y increasing upward;
    markup space has it at the top-left with y increasing downward.
    Transform values are in PDF units and are multiplied by the viewport
    scale so they match the page box.
    """
    scale = viewport.scale
    x = item.transform[4] * scale
    y = viewport.height - item.transform[5] * scale
    font_size = item.transform[0] * scale
    return x, y, font_size


def render_item(item: TextItem, viewport: Viewport) -> str:
    x, y, font_size = item_position(item, viewport)
    style = (
        f"position: absolute; left: {css_number(x)}px; top: {css_number(y)}px; "
        f"font-size: {css_number(font_size)}px;"
    )
    if item.font_name:
        style += f" font-family: {css_string(item.font_name)};"
    style = html.escape(style, quote=True)
    return f'<div style="{style}">{html.escape(item.text, quote=False)}</div>'


def render_page(
    page_number: int, viewport: Viewport, items: Iterable[TextItem]
) -> str:
    """Render one page container with all its items, in source order."""
    style = (
        f"position: relative; width: {css_number(viewport.width)}px; "
        f"height: {css_number(viewport.height)}px;"
    )
    body = "".join(render_item(item, viewport) for item in items)
    return (
        f'<div class="pdf-page" data-page="{page_number}" style="{style}">'
        f"{body}</div>"
    )
