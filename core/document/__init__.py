from .engine import BasePDFEngine, EngineConfig, PyMuPDFEngine, create_engine
from .pdf_reader import PDFDocumentReader, open_pdf

__all__ = [
    "BasePDFEngine",
    "EngineConfig",
    "PyMuPDFEngine",
    "create_engine",
    "PDFDocumentReader",
    "open_pdf",
]
