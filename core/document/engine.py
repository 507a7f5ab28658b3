"""
PDF engine interface.

The projector never talks to PyMuPDF directly: callers pass it a document
produced by an engine, and engines are configured explicitly through
:class:`EngineConfig` instead of module-level state.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, Optional, Union

import fitz

from core.errors import DocumentLoadFailure, EngineLoadFailure

from .pdf_reader import PDFDocumentReader

logger = logging.getLogger(__name__)


@dataclass
class EngineConfig:
    """
    Engine initialisation options.

    Attributes:
        filetype:            Format hint for the byte stream.
        password:            Password for encrypted documents.
        preserve_whitespace: Keep spaces and tabs inside spans.
        preserve_ligatures:  Keep ligature glyphs (``ﬁ``) unexpanded.
    """

    filetype: str = "pdf"
    password: Optional[str] = None
    preserve_whitespace: bool = True
    preserve_ligatures: bool = True

    @property
    def text_flags(self) -> int:
        flags = 0
        if self.preserve_whitespace:
            flags |= fitz.TEXT_PRESERVE_WHITESPACE
        if self.preserve_ligatures:
            flags |= fitz.TEXT_PRESERVE_LIGATURES
        return flags


class BasePDFEngine(ABC):
    """
    Common interface for PDF engines.

    Subclasses must implement :meth:`load_document` and expose
    ``engine_name``.
    """

    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config or EngineConfig()

    @property
    @abstractmethod
    def engine_name(self) -> str:
        """Human-readable engine identifier."""

    @abstractmethod
    def load_document(self, data: bytes, source: str = "<bytes>"):
        """
        Open *data* as a document.

        Returns:
            An object with ``page_count`` and 1-based ``get_page(index)``.

        Raises:
            DocumentLoadFailure: If the bytes can't be opened.
        """

    def load_file(self, path: Union[str, Path]):
        """Read *path* and open it with :meth:`load_document`."""
        path = Path(path)
        try:
            data = path.read_bytes()
        except OSError as e:
            raise DocumentLoadFailure("Failed to read file", cause=e) from e
        return self.load_document(data, source=str(path))

    def __repr__(self):
        return f"{type(self).__name__}(filetype={self.config.filetype!r})"


class PyMuPDFEngine(BasePDFEngine):
    """PDF engine backed by PyMuPDF."""

    @property
    def engine_name(self) -> str:
        return f"PyMuPDF {fitz.VersionBind}"

    def load_document(self, data: bytes, source: str = "<bytes>") -> PDFDocumentReader:
        cfg = self.config
        return PDFDocumentReader.from_bytes(
            data,
            filetype=cfg.filetype,
            password=cfg.password,
            flags=cfg.text_flags,
            source=source,
        )


ENGINES: Dict[str, Callable[[EngineConfig], BasePDFEngine]] = {
    "pymupdf": PyMuPDFEngine,
}


def create_engine(
    name: str = "pymupdf", config: Optional[EngineConfig] = None
) -> BasePDFEngine:
    """
    Instantiate a registered engine.

    Raises:
        EngineLoadFailure: If *name* is unknown or the engine fails to
            initialise.
    """
    factory = ENGINES.get(name.lower())
    if factory is None:
        raise EngineLoadFailure(
            f"Unknown PDF engine '{name}' (available: {', '.join(sorted(ENGINES))})"
        )
    try:
        engine = factory(config or EngineConfig())
    except Exception as e:
        raise EngineLoadFailure(f"Failed to initialise PDF engine '{name}'", cause=e) from e
    logger.debug("Engine ready: %s", engine)
    return engine
