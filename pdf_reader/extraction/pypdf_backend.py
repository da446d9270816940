"""
pypdf-based text extraction backend.

Fast extraction suitable for most standard PDF files.
Handles encryption detection and empty password decryption.
"""

import io
from typing import Any, Dict, List

from pypdf import PdfReader

from ..core import get_logger, ExtractionError
from .models import ExtractedText

logger = get_logger(__name__)


PAGE_SEPARATOR = "\n\n"


def normalize_info(raw_info) -> Dict[str, Any]:
    """
    Convert a parser metadata dictionary into plain JSON-friendly values.

    Leading slashes on PDF name keys are dropped; scalar values are kept
    and anything else is rendered as a string.
    """
    info = {}

    for key, value in dict(raw_info or {}).items():
        name = str(key).lstrip("/")
        if value is None or isinstance(value, (bool, int, float)):
            info[name] = value
        else:
            info[name] = str(value)

    return info


class PyPDFBackend:
    """
    PDF text extraction using the pypdf library.

    Provides fast extraction for standard PDFs with basic
    encryption handling.
    """

    name = "pypdf"

    def extract(self, data: bytes, source: str = None) -> ExtractedText:
        """
        Extract the text of every page of a PDF.

        Args:
            data: Raw PDF bytes.
            source: Label used in log and error messages (usually the path).

        Returns:
            ExtractedText with pages joined by a blank line.

        Raises:
            ExtractionError: If the PDF cannot be parsed at all.
        """
        source = source or "<bytes>"
        page_texts: List[str] = []

        try:
            reader = PdfReader(io.BytesIO(data))

            if reader.is_encrypted:
                try:
                    reader.decrypt("")
                except Exception:
                    raise ExtractionError(
                        "PDF is encrypted and cannot be decrypted",
                        filepath=source
                    )

            total_pages = len(reader.pages)
            logger.debug(f"Processing {total_pages} pages: {source}")

            for page_num, page in enumerate(reader.pages, start=1):
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

            info = normalize_info(reader.metadata)
            header = getattr(reader, "pdf_header", "")
            if header:
                info.setdefault("PDFFormatVersion", header.replace("%PDF-", ""))

        except ExtractionError:
            raise
        except Exception as e:
            raise ExtractionError(
                f"pypdf extraction failed: {e}",
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
        print("Usage: python pypdf_backend.py <pdf_file>")
        sys.exit(1)

    pdf_path = Path(sys.argv[1])
    if not pdf_path.exists():
        print(f"File not found: {pdf_path}")
        sys.exit(1)

    backend = PyPDFBackend()

    try:
        result = backend.extract(pdf_path.read_bytes(), source=pdf_path.name)
        print(f"Extracted {result.page_count} pages from {pdf_path.name}")
        print(f"Metadata: {result.info}")
        print("-" * 50)
        print(result.text[:500])

    except ExtractionError as e:
        print(f"Extraction error: {e.message}")
