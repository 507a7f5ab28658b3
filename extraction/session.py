"""
Upload session: the state behind a "drop a PDF, see its text" widget.

Holds the loading flag and the last extracted text, validates that the
selected file is a PDF, and turns failures into user-facing
notifications instead of exceptions.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, Union

from core.errors import EngineLoadFailure, ExtractionError

from .pipeline import ExtractionPipeline

logger = logging.getLogger(__name__)

PDF_CONTENT_TYPE = "application/pdf"


@dataclass(frozen=True)
class Notification:
    title: str
    message: str
    variant: str = "info"


def is_pdf_file(path: Union[str, Path], content_type: Optional[str] = None) -> bool:
    """Accept by declared content type when given, else by file suffix."""
    if content_type is not None:
        return content_type == PDF_CONTENT_TYPE
    return Path(path).suffix.lower() == ".pdf"


class ExtractionSession:
    """
    One user's upload session.

    Attributes:
        is_loading:     True while an extraction is running.
        extracted_text: Text of the last successful extraction.
        notifications:  Every notification issued, oldest first.
    """

    def __init__(
        self,
        pipeline: Optional[ExtractionPipeline] = None,
        notify: Optional[Callable[[Notification], None]] = None,
    ):
        self.pipeline = pipeline or ExtractionPipeline()
        self._notify = notify
        self.is_loading = False
        self.extracted_text = ""
        self.notifications: List[Notification] = []

    def initialize(self) -> bool:
        """Load the PDF engine.  Returns False (and notifies) on failure."""
        try:
            self.pipeline.ensure_engine()
        except EngineLoadFailure as e:
            logger.error("Error loading PDF engine: %s", e)
            self.show_notification("Error", "Failed to load PDF library", "error")
            return False
        return True

    def handle_file(
        self, path: Union[str, Path], content_type: Optional[str] = None
    ) -> bool:
        """
        Extract text from the selected or dropped file.

        Returns:
            True if text was extracted, False if the file was rejected or
            extraction failed.
        """
        if not is_pdf_file(path, content_type):
            self.show_notification("Error", "Please upload a PDF file", "error")
            return False

        if not self.pipeline.engine_ready:
            self.show_notification(
                "Error", "PDF library not loaded yet. Please try again.", "error"
            )
            return False

        self.is_loading = True
        self.extracted_text = ""

        try:
            result = self.pipeline.extract(path)
            self.extracted_text = result.text
            return True
        except ExtractionError as e:
            logger.error("Error extracting text: %s", e)
            self.show_notification(
                "Error", f"Failed to extract text from PDF. {e}", "error"
            )
            return False
        finally:
            self.is_loading = False

    def show_notification(self, title: str, message: str, variant: str) -> None:
        notification = Notification(title=title, message=message, variant=variant)
        self.notifications.append(notification)
        if self._notify is not None:
            self._notify(notification)
