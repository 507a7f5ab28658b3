"""
Core backend for PDF text extraction.
Engine wrapper, document handle and page text model.
"""

from .document import EngineConfig, PDFDocumentReader, PyMuPDFEngine, create_engine
from .errors import (
    DocumentLoadFailure,
    EngineLoadFailure,
    ExtractionCanceled,
    ExtractionError,
    PageFetchFailure,
)
from .page import PageModel, PageTextLayer, TextContent, TextItem, Viewport

__all__ = [
    "EngineConfig",
    "PDFDocumentReader",
    "PyMuPDFEngine",
    "create_engine",
    "ExtractionError",
    "EngineLoadFailure",
    "DocumentLoadFailure",
    "PageFetchFailure",
    "ExtractionCanceled",
    "PageModel",
    "PageTextLayer",
    "TextContent",
    "TextItem",
    "Viewport",
]
