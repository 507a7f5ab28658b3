"""
PDF document handle for text extraction.
Wraps an open fitz document behind 1-based page access.
"""

import logging
from typing import Optional

import fitz  # PyMuPDF

from core.errors import DocumentLoadFailure
from core.page.page_model import PageModel
from core.page.text_layer import DEFAULT_FLAGS

logger = logging.getLogger(__name__)


def open_pdf(
    data: bytes, filetype: str = "pdf", password: Optional[str] = None
) -> fitz.Document:
    """
    Open a PDF document from an in-memory byte buffer.

    Args:
        data:     Raw file content.
        filetype: Format hint passed to PyMuPDF.
        password: Password for encrypted documents.

    Returns:
        A fitz.Document instance.

    Raises:
        DocumentLoadFailure: If the buffer is empty, malformed, locked
            with a password we don't have, or has no pages.
    """
    if not data:
        raise DocumentLoadFailure("Document is empty")

    try:
        doc = fitz.open(stream=data, filetype=filetype)
    except Exception as e:
        raise DocumentLoadFailure("Failed to open PDF", cause=e) from e

    if doc.needs_pass:
        if not password or not doc.authenticate(password):
            doc.close()
            raise DocumentLoadFailure(
                "Document is encrypted and the password is missing or wrong"
            )

    if doc.page_count < 1:
        doc.close()
        raise DocumentLoadFailure("Document has no pages")

    return doc


class PDFDocumentReader:
    """
    An open PDF document.

    Exposes ``page_count`` and ``get_page(index)`` with 1-based indices.
    The reader owns the fitz document and closes it on ``close()`` or at
    the end of a ``with`` block.
    """

    def __init__(self, doc: fitz.Document, flags: int = DEFAULT_FLAGS, source: str = "<bytes>"):
        self.doc: Optional[fitz.Document] = doc
        self.flags = flags
        self.source = source
        self.page_count: int = doc.page_count

    @classmethod
    def from_bytes(
        cls,
        data: bytes,
        filetype: str = "pdf",
        password: Optional[str] = None,
        flags: int = DEFAULT_FLAGS,
        source: str = "<bytes>",
    ) -> "PDFDocumentReader":
        doc = open_pdf(data, filetype=filetype, password=password)
        logger.debug("Opened %s: %d pages", source, doc.page_count)
        return cls(doc, flags=flags, source=source)

    def get_page(self, index: int) -> PageModel:
        """
        Get a page handle.

        Args:
            index: 1-based page number

        Raises:
            IndexError: If *index* is outside ``1..page_count``.
            RuntimeError: If the document has been closed.
        """
        if self.doc is None:
            raise RuntimeError("Document is closed")
        if index < 1 or index > self.page_count:
            raise IndexError(
                f"Page {index} out of range (document has {self.page_count} pages)"
            )
        return PageModel(self.doc, index, flags=self.flags)

    def close(self) -> None:
        """Close the underlying fitz document."""
        if self.doc:
            self.doc.close()
            self.doc = None

    def __enter__(self):
        """Context manager support."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Close document on context exit."""
        self.close()
        return False

    def __repr__(self):
        return f"PDFDocumentReader('{self.source}', pages={self.page_count})"
