"""
Extraction pipeline orchestrator: PDF file → engine → projected text.

Usage::

    from extraction.pipeline import ExtractionConfig, ExtractionPipeline

    pipeline = ExtractionPipeline(ExtractionConfig(mode="layout"))
    result = pipeline.extract("input.pdf")
    print(result.summary())
"""

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from core.document.engine import BasePDFEngine, EngineConfig, create_engine
from core.errors import DocumentLoadFailure

from .projector import ExtractionMode, PageTextProjector

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------
# Configuration
# ------------------------------------------------------------------


@dataclass
class ExtractionConfig:
    """
    All tuneable parameters for the extraction pipeline.

    Attributes:
        mode:                ``"text"`` or ``"layout"``.
        engine:              Registered engine name.
        viewport_scale:      Scale factor for page viewports.
        password:            Password for encrypted documents.
        preserve_whitespace: Keep whitespace inside text spans.
        preserve_ligatures:  Keep ligature glyphs unexpanded.
        disable_tqdm:        Suppress progress bars.
    """

    mode: str = ExtractionMode.TEXT.value
    engine: str = "pymupdf"
    viewport_scale: float = 1.0
    password: Optional[str] = None
    preserve_whitespace: bool = True
    preserve_ligatures: bool = True
    disable_tqdm: bool = False

    def engine_config(self) -> EngineConfig:
        return EngineConfig(
            password=self.password,
            preserve_whitespace=self.preserve_whitespace,
            preserve_ligatures=self.preserve_ligatures,
        )


# ------------------------------------------------------------------
# Result
# ------------------------------------------------------------------


@dataclass
class ExtractionResult:
    """Projected text plus the metadata of the run that produced it."""

    text: str = ""
    mode: str = ExtractionMode.TEXT.value
    source: str = ""
    total_pages: int = 0
    elapsed_seconds: float = 0.0

    @property
    def char_count(self) -> int:
        return len(self.text)

    def summary(self) -> str:
        """Format a human-readable summary of the extraction run."""
        return (
            f"{'=' * 60}\n"
            f"EXTRACTION COMPLETE\n"
            f"{'=' * 60}\n"
            f"  Source:     {self.source}\n"
            f"  Mode:       {self.mode}\n"
            f"  Pages:      {self.total_pages}\n"
            f"  Characters: {self.char_count}\n"
            f"  Wall time:  {self.elapsed_seconds:.2f}s\n"
            f"{'=' * 60}"
        )


# ------------------------------------------------------------------
# Pipeline
# ------------------------------------------------------------------


class ExtractionPipeline:
    """
    Loads a PDF through the configured engine and projects its text.

    The engine is created lazily on first use; :meth:`ensure_engine` can
    be called up front to surface :class:`EngineLoadFailure` early.
    """

    def __init__(
        self,
        config: Optional[ExtractionConfig] = None,
        engine: Optional[BasePDFEngine] = None,
    ):
        self.config = config or ExtractionConfig()
        self._engine = engine

    @property
    def engine_ready(self) -> bool:
        return self._engine is not None

    def ensure_engine(self) -> BasePDFEngine:
        """Create the PDF engine if not already initialised."""
        if self._engine is None:
            logger.info("Loading PDF engine: %s", self.config.engine)
            self._engine = create_engine(
                self.config.engine, self.config.engine_config()
            )
            logger.info("Engine ready: %s", self._engine.engine_name)
        return self._engine

    def extract(self, pdf_path: Union[str, Path], cancel_event=None) -> ExtractionResult:
        """
        Extract text from the PDF at *pdf_path*.

        Raises:
            DocumentLoadFailure: The file couldn't be read or opened.
            PageFetchFailure:    A page failed mid-extraction.
        """
        path = Path(pdf_path)
        try:
            data = path.read_bytes()
        except OSError as e:
            raise DocumentLoadFailure("Failed to read file", cause=e) from e
        return self.extract_bytes(data, source=str(path), cancel_event=cancel_event)

    def extract_bytes(
        self, data: bytes, source: str = "<bytes>", cancel_event=None
    ) -> ExtractionResult:
        """Extract text from an in-memory PDF."""
        t0 = time.perf_counter()
        cfg = self.config
        mode = ExtractionMode(cfg.mode)
        engine = self.ensure_engine()

        projector = PageTextProjector(
            viewport_scale=cfg.viewport_scale,
            show_progress=not cfg.disable_tqdm,
        )

        with engine.load_document(data, source=source) as document:
            logger.info("Extracting %s (%d pages, mode=%s)", source, document.page_count, mode.value)
            text = projector.project(document, mode, cancel_event=cancel_event)
            result = ExtractionResult(
                text=text,
                mode=mode.value,
                source=source,
                total_pages=document.page_count,
            )

        result.elapsed_seconds = time.perf_counter() - t0
        logger.info(
            "Extraction complete: %d pages, %d chars in %.2fs",
            result.total_pages,
            result.char_count,
            result.elapsed_seconds,
        )
        return result
