"""
Document loader for the PDF Reader Server.

Reads the configured PDF once at startup and hands the bytes to a
TextExtractor. Failures leave the server running without a document.
"""

from pathlib import Path
from typing import Optional, Union

from ..core import (
    get_logger,
    DocumentLoadError,
    DocumentNotFoundError,
    DocumentParseError,
    ExtractionError
)
from ..extraction import PDFExtractor, TextExtractor
from ..utils import get_file_size_mb, is_readable_file
from .models import LoadedDocument

logger = get_logger(__name__)


class DocumentLoader:
    """
    Loads a single PDF into an immutable LoadedDocument.

    The extractor is injected so alternative backends or test
    doubles can be substituted.
    """

    def __init__(self, extractor: TextExtractor = None):
        """
        Initialize the loader.

        Args:
            extractor: Text extraction capability. Defaults to PDFExtractor.
        """
        self.extractor = extractor or PDFExtractor()

    def load(self, path: Union[str, Path]) -> LoadedDocument:
        """
        Load and extract a PDF.

        Args:
            path: Filesystem path of the PDF.

        Returns:
            Fully populated LoadedDocument.

        Raises:
            DocumentNotFoundError: If the path is missing or unreadable.
            DocumentParseError: If text extraction fails or yields no text.
        """
        path = Path(path)

        if not is_readable_file(path):
            raise DocumentNotFoundError(
                f"PDF file not found at: {path}",
                path=str(path)
            )

        try:
            data = path.read_bytes()
        except OSError as e:
            raise DocumentNotFoundError(
                f"Cannot read PDF file {path}: {e}",
                path=str(path)
            )

        logger.debug(f"Read {get_file_size_mb(path)} MB from {path.name}")

        try:
            extracted = self.extractor.extract(data, source=path.name)
        except ExtractionError as e:
            raise DocumentParseError(
                f"Failed to parse PDF: {e.message}",
                path=str(path),
                details=e.details
            )

        if not extracted.text:
            raise DocumentParseError(
                "No text could be extracted from the PDF",
                path=str(path),
                details={"page_count": extracted.page_count}
            )

        return LoadedDocument(
            text=extracted.text,
            page_count=extracted.page_count,
            filename=path.name,
            info=extracted.info,
            source_path=path
        )


def load_document(
    path: Union[str, Path],
    extractor: TextExtractor = None
) -> Optional[LoadedDocument]:
    """
    Load the served document, logging instead of raising on failure.

    Args:
        path: Filesystem path of the PDF.
        extractor: Optional text extraction capability.

    Returns:
        The LoadedDocument, or None if it could not be loaded.
    """
    try:
        document = DocumentLoader(extractor).load(path)
    except DocumentNotFoundError as e:
        logger.error(e.message)
        logger.error("Please set PDF_PATH or document.pdf_path to point to your PDF file.")
        return None
    except DocumentLoadError as e:
        logger.error(f"Failed to load PDF: {e.message}")
        logger.error("Make sure the PDF file exists and is readable.")
        return None

    logger.info(f"PDF loaded: {document.filename} ({document.page_count} pages)")
    return document


if __name__ == "__main__":
    import sys

    if len(sys.argv) < 2:
        print("Usage: python loader.py <pdf_file>")
        sys.exit(1)

    document = load_document(sys.argv[1])

    if document is None:
        sys.exit(1)

    print(f"Loaded {document.filename}: {document.page_count} pages")
    print(f"Characters: {document.character_count:,}")
    print(f"Words: {document.word_count:,}")
