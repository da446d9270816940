"""
pdfplumber-based text extraction backend.

Better handling of complex layouts, tables, and multi-column documents.
Slower than pypdf but more accurate for difficult PDFs.
"""

import io
from typing import List

import pdfplumber

from ..core import get_logger, ExtractionError
from .models import ExtractedText
from .pypdf_backend import PAGE_SEPARATOR, normalize_info

logger = get_logger(__name__)


class PDFPlumberBackend:
    """
    PDF text extraction using pdfplumber library.

    Provides more accurate extraction for complex layouts
    at the cost of slower processing.
    """

    name = "pdfplumber"

    def extract(self, data: bytes, source: str = None) -> ExtractedText:
        """
        Extract the text of every page of a PDF.

        Args:
            data: Raw PDF bytes.
            source: Label used in log and error messages.

        Returns:
            ExtractedText with pages joined by a blank line.

        Raises:
            ExtractionError: If extraction fails completely.
        """
        source = source or "<bytes>"
        page_texts: List[str] = []

        try:
            with pdfplumber.open(io.BytesIO(data)) as pdf:
                total_pages = len(pdf.pages)
                logger.debug(f"Processing {total_pages} pages: {source}")

                for page_num, page in enumerate(pdf.pages, start=1):
                    try:
                        text = page.extract_text() or ""

                        if text.strip():
                            page_texts.append(text)
                        else:
                            logger.debug(f"Empty page {page_num} in {source}")

                    except Exception as e:
                        logger.warning(
                            f"Failed to extract page {page_num} from {source}: {e}"
                        )

                info = normalize_info(pdf.metadata)

        except Exception as e:
            raise ExtractionError(
                f"pdfplumber extraction failed: {e}",
                filepath=source
            )

        return ExtractedText(
            text=PAGE_SEPARATOR.join(page_texts),
            page_count=total_pages,
            info=info,
            backend=self.name
        )


if __name__ == "__main__":
    import sys
    from pathlib import Path

    if len(sys.argv) < 2:
        print("Usage: python pdfplumber_backend.py <pdf_file>")
        sys.exit(1)

    pdf_path = Path(sys.argv[1])
    if not pdf_path.exists():
        print(f"File not found: {pdf_path}")
        sys.exit(1)

    backend = PDFPlumberBackend()

    try:
        result = backend.extract(pdf_path.read_bytes(), source=pdf_path.name)
        print(f"Extracted {result.page_count} pages from {pdf_path.name}")
        print("-" * 50)
        print(result.text[:500])

    except ExtractionError as e:
        print(f"Extraction error: {e.message}")
