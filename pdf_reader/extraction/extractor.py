"""
Unified PDF extraction interface with automatic fallback.

Wraps multiple extraction backends and attempts fallback when
the primary backend fails or returns empty text.
"""

from ..core import get_config, get_logger, ExtractionError
from .models import ExtractedText
from .pypdf_backend import PyPDFBackend
from .pdfplumber_backend import PDFPlumberBackend

logger = get_logger(__name__)


BACKENDS = {
    "pypdf": PyPDFBackend,
    "pdfplumber": PDFPlumberBackend
}


class PDFExtractor:
    """
    Unified PDF extraction with automatic backend fallback.

    Tries the primary backend first, falls back to secondary
    if extraction fails or produces empty text.
    """

    def __init__(
        self,
        primary_backend: str = None,
        fallback_backend: str = None
    ):
        """
        Initialize the extractor with configured backends.

        Args:
            primary_backend: Name of primary backend ("pypdf" or "pdfplumber").
            fallback_backend: Name of fallback backend.
        """
        config = get_config()

        primary_name = primary_backend or config.extraction.primary_backend
        fallback_name = fallback_backend or config.extraction.fallback_backend

        if primary_name not in BACKENDS:
            raise ExtractionError(f"Unknown backend: {primary_name}")

        self.primary = BACKENDS[primary_name]()
        self.fallback = None
        if fallback_name and fallback_name != primary_name:
            self.fallback = BACKENDS.get(fallback_name, lambda: None)()

        logger.debug(
            f"Initialized extractor: primary={primary_name}, fallback={fallback_name}"
        )

    def extract(self, data: bytes, source: str = None) -> ExtractedText:
        """
        Extract text from PDF bytes using available backends.

        Tries primary backend first, falls back if needed.

        Args:
            data: Raw PDF bytes.
            source: Label used in log and error messages.

        Returns:
            ExtractedText from the first backend that produced text.

        Raises:
            ExtractionError: If all backends fail.
        """
        primary_error = None
        empty_result = None

        try:
            result = self.primary.extract(data, source)

            if result.text.strip():
                return result

            empty_result = result
            logger.debug(f"Primary backend returned empty text: {source}")

        except ExtractionError as e:
            primary_error = e
            logger.debug(f"Primary backend failed: {e.message}")

        if self.fallback:
            try:
                logger.debug(f"Trying fallback backend for: {source}")
                result = self.fallback.extract(data, source)

                if result.text.strip():
                    return result

            except ExtractionError as e:
                logger.debug(f"Fallback backend also failed: {e.message}")

        if primary_error:
            raise primary_error

        raise ExtractionError(
            "All backends returned empty text",
            filepath=source,
            details={"page_count": empty_result.page_count if empty_result else 0}
        )


if __name__ == "__main__":
    import sys
    from pathlib import Path

    if len(sys.argv) < 2:
        print("Usage: python extractor.py <pdf_file>")
        sys.exit(1)

    pdf_path = Path(sys.argv[1])
    if not pdf_path.exists():
        print(f"File not found: {pdf_path}")
        sys.exit(1)

    extractor = PDFExtractor()

    try:
        result = extractor.extract(pdf_path.read_bytes(), source=pdf_path.name)
        print(f"Extracted {result.page_count} pages from {pdf_path.name} ({result.backend})")
        print(f"Total characters: {len(result.text):,}")

        preview = result.text[:300] + "..." if len(result.text) > 300 else result.text
        print("\n=== Preview ===")
        print(preview)

    except ExtractionError as e:
        print(f"Extraction failed: {e.message}")
