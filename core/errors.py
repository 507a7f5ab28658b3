"""
Error taxonomy for PDF text extraction.

Every failure carries the underlying engine exception as ``cause`` (and
as ``__cause__`` when raised with ``from``) plus the 1-based page index
when the failure is tied to a specific page.
"""

from typing import Optional


class ExtractionError(Exception):
    """Base class for all extraction failures."""

    def __init__(
        self,
        message: str,
        cause: Optional[BaseException] = None,
        page_index: Optional[int] = None,
    ):
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.page_index = page_index

    def __str__(self) -> str:
        text = self.message
        if self.page_index is not None:
            text = f"Page {self.page_index}: {text}"
        if self.cause is not None:
            text = f"{text} ({self.cause})"
        return text


class EngineLoadFailure(ExtractionError):
    """The PDF engine is unavailable or unknown."""


class DocumentLoadFailure(ExtractionError):
    """The byte buffer or file could not be opened as a PDF."""


class PageFetchFailure(ExtractionError):
    """A page or its text content could not be retrieved."""


class ExtractionCanceled(ExtractionError):
    """Extraction was canceled by the caller between pages."""
