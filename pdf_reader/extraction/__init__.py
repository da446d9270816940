"""
PDF extraction module for the PDF Reader Server.

Provides text extraction from raw PDF bytes with multiple backends
(pypdf and pdfplumber) and automatic fallback support.
"""

from .models import ExtractedText, TextExtractor
from .pypdf_backend import PyPDFBackend
from .pdfplumber_backend import PDFPlumberBackend
from .extractor import PDFExtractor

__all__ = [
    "ExtractedText",
    "TextExtractor",
    "PyPDFBackend",
    "PDFPlumberBackend",
    "PDFExtractor"
]
