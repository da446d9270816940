"""
Data models for PDF text extraction.

Defines the result type every extraction backend returns and the
protocol the document loader depends on.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Protocol


@dataclass
class ExtractedText:
    """
    Flat text extracted from a PDF.

    Attributes:
        text: Page texts joined with a blank line.
        page_count: Number of pages in the PDF, including empty ones.
        info: Document information dictionary reported by the parser.
        backend: Name of the backend that produced the result.
    """
    text: str
    page_count: int
    info: Dict[str, Any] = field(default_factory=dict)
    backend: str = ""


class TextExtractor(Protocol):
    """Anything that turns raw PDF bytes into ExtractedText."""

    def extract(self, data: bytes, source: str = None) -> ExtractedText:
        ...
