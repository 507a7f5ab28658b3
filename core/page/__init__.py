"""
Page text extraction for PDF documents.
Text items, viewport geometry and the lazy page model.
"""

from .models import TextContent, TextItem, Viewport
from .page_model import PageModel
from .text_layer import PageTextLayer

__all__ = [
    "PageTextLayer",
    "TextItem",
    "TextContent",
    "Viewport",
    "PageModel",
]
