"""
PDF page text extraction.

Projects the text of a PDF either as plain text or as positioned HTML
that mirrors the page layout.
"""

from .pipeline import ExtractionConfig, ExtractionPipeline, ExtractionResult
from .projector import ExtractionMode, PageTextProjector, project
from .session import ExtractionSession, Notification

__all__ = [
    "ExtractionConfig",
    "ExtractionMode",
    "ExtractionPipeline",
    "ExtractionResult",
    "ExtractionSession",
    "Notification",
    "PageTextProjector",
    "project",
]
