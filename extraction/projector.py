"""
Page text projection: document → plain text or positioned markup.

:class:`PageTextProjector` walks every page of an open document in
ascending order, fetches its viewport and text items, and folds them into
a single string.  Pages are fetched strictly one after another; the first
failing page aborts the whole call with :class:`PageFetchFailure`.

Usage::

    from core.document.engine import create_engine
    from extraction.projector import PageTextProjector

    engine = create_engine()
    with engine.load_file("input.pdf") as doc:
        html = PageTextProjector().project(doc, "layout")
"""

import logging
from enum import Enum
from typing import List, Tuple, Union

from tqdm import tqdm

from core.errors import ExtractionCanceled, PageFetchFailure
from core.page.models import TextContent, Viewport

from .markup import render_page

logger = logging.getLogger(__name__)

PAGE_SEPARATOR = "\n\n"


class ExtractionMode(Enum):
    """Output format of a projection."""

    TEXT = "text"
    LAYOUT = "layout"


class PageTextProjector:
    """
    Projects a document's text into a single string.

    The projector holds configuration only: no state survives between
    :meth:`project` calls and the document is never modified or closed.
    """

    def __init__(self, viewport_scale: float = 1.0, show_progress: bool = False):
        self.viewport_scale = viewport_scale
        self.show_progress = show_progress

    def project(
        self,
        document,
        mode: Union[ExtractionMode, str] = ExtractionMode.TEXT,
        cancel_event=None,
    ) -> str:
        """
        Extract the text of every page of *document*.

        Args:
            document:     Object with ``page_count`` and 1-based
                          ``get_page(index)``.
            mode:         ``"text"`` for space-joined items with pages
                          separated by a blank line, ``"layout"`` for
                          positioned HTML.
            cancel_event: Optional object with ``is_set()``, checked
                          before each page.

        Returns:
            The projected string.

        Raises:
            ValueError:         Unknown *mode*.
            PageFetchFailure:   A page or its text content couldn't be
                                fetched.
            ExtractionCanceled: *cancel_event* was set.
        """
        mode = ExtractionMode(mode)
        page_count = document.page_count
        chunks: List[str] = []

        with tqdm(
            range(1, page_count + 1),
            desc="Extracting text",
            unit="page",
            disable=not self.show_progress,
        ) as pbar:
            for index in pbar:
                if cancel_event is not None and cancel_event.is_set():
                    raise ExtractionCanceled(
                        "Extraction canceled", page_index=index
                    )

                viewport, content = self._fetch_page(document, index)

                if mode is ExtractionMode.TEXT:
                    chunks.append(content.text)
                else:
                    chunks.append(render_page(index, viewport, content.items))

                logger.debug("Page %d/%d: %d items", index, page_count, len(content.items))

        separator = PAGE_SEPARATOR if mode is ExtractionMode.TEXT else ""
        return separator.join(chunks)

    def _fetch_page(self, document, index: int) -> Tuple[Viewport, TextContent]:
        """Fetch viewport and text content for page *index* (1-based)."""
        try:
            page = document.get_page(index)
            viewport = page.get_viewport(self.viewport_scale)
            content = page.get_text_content()
        except PageFetchFailure:
            raise
        except Exception as e:
            raise PageFetchFailure(
                "Failed to fetch page text", cause=e, page_index=index
            ) from e
        return viewport, content


def project(
    document,
    mode: Union[ExtractionMode, str] = ExtractionMode.TEXT,
    viewport_scale: float = 1.0,
    cancel_event=None,
) -> str:
    """Shortcut for ``PageTextProjector(viewport_scale).project(...)``."""
    return PageTextProjector(viewport_scale=viewport_scale).project(
        document, mode, cancel_event=cancel_event
    )
