"""
Page model for text extraction.
Provides viewport geometry and text content for one page of a document.
"""

from typing import Optional

import fitz

from .models import TextContent, Viewport
from .text_layer import DEFAULT_FLAGS, PageTextLayer


class PageModel:
    """
    Lightweight page handle.

    ``page_number`` is 1-based.  The underlying fitz page and its text
    layer are loaded lazily so a document can be walked page by page
    without holding every page in memory.
    """

    def __init__(
        self, doc: fitz.Document, page_number: int, flags: int = DEFAULT_FLAGS
    ):
        self._doc = doc
        self.page_number = page_number
        self.flags = flags
        self._page: Optional[fitz.Page] = None

        # Lazy-loaded text layer
        self._text_layer: Optional[PageTextLayer] = None

    @property
    def page(self) -> fitz.Page:
        """Get the underlying fitz page, loading if necessary."""
        if self._page is None:
            self._page = self._doc.load_page(self.page_number - 1)
        return self._page

    @property
    def text_layer(self) -> PageTextLayer:
        """Get text layer, creating if necessary."""
        if self._text_layer is None:
            self._text_layer = PageTextLayer(self.page, flags=self.flags)
        return self._text_layer

    def get_viewport(self, scale: float = 1.0) -> Viewport:
        """Page rectangle multiplied by *scale*."""
        rect = self.page.rect
        return Viewport(width=rect.width * scale, height=rect.height * scale, scale=scale)

    def get_text_content(self) -> TextContent:
        """Ordered text items for this page."""
        return self.text_layer.to_content()

    def __repr__(self) -> str:
        return (
            f"PageModel(page={self.page_number}, "
            f"size={self.page.rect.width:.0f}x{self.page.rect.height:.0f})"
        )
