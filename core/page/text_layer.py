"""
Span-level text extraction for PDF pages.
Produces engine-neutral text items with PDF-space transforms.
"""

import logging
from typing import List

import fitz

from .models import TextContent, TextItem, Transform

logger = logging.getLogger(__name__)

DEFAULT_FLAGS = fitz.TEXT_PRESERVE_WHITESPACE | fitz.TEXT_PRESERVE_LIGATURES


def span_transform(
    span: dict, direction: tuple, page_height: float
) -> Transform:
    """
    Build the ``[a, b, c, d, e, f]`` matrix for a span.

    PyMuPDF reports origins with the y axis pointing down from the top
    edge; the matrix is expressed in PDF space (y up from the bottom edge).
    """
    size = float(span.get("size", 0.0))
    dx, dy = direction
    ox, oy = span.get("origin", (0.0, 0.0))
    return (
        size * dx,
        -size * dy,
        size * dy,
        size * dx,
        float(ox),
        page_height - float(oy),
    )


class PageTextLayer:
    """
    Extracts the ordered text items of a PDF page.

    Items follow PyMuPDF's block, line and span order, one item per
    non-empty span.  Image blocks are skipped.
    """

    def __init__(self, page: fitz.Page, flags: int = DEFAULT_FLAGS):
        self.page = page
        self.flags = flags
        self.items: List[TextItem] = []

        self._extract_items()

    def _extract_items(self):
        """Walk the page's text dictionary and collect span items."""
        page_height = self.page.rect.height
        text_dict = self.page.get_text("dict", flags=self.flags)

        for block_data in text_dict.get("blocks", []):
            if block_data.get("type") != 0:
                continue

            for line_data in block_data.get("lines", []):
                direction = tuple(line_data.get("dir", (1.0, 0.0)))

                for span_data in line_data.get("spans", []):
                    text = span_data.get("text", "")
                    if not text:
                        continue

                    self.items.append(
                        TextItem(
                            text=text,
                            transform=span_transform(
                                span_data, direction, page_height
                            ),
                            font_name=span_data.get("font", ""),
                        )
                    )

        logger.debug(
            "Page %d: %d text items", self.page.number + 1, len(self.items)
        )

    def to_content(self) -> TextContent:
        return TextContent(items=list(self.items))
