"""
Pytest fixtures and configuration for the test suite.

Provides temporary directories, sample PDFs, in-memory documents and
a fake extractor to keep tests isolated and deterministic.
"""

import json
import pytest
import tempfile
import shutil
from pathlib import Path
from typing import Generator

import sys
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from pdf_reader.core.exceptions import ExtractionError
from pdf_reader.document.models import LoadedDocument
from pdf_reader.extraction.models import ExtractedText


FOX_TEXT = "The quick brown fox. The fox jumps."


class FakeExtractor:
    """Test double for the text extraction capability."""

    def __init__(self, result: ExtractedText = None, error: Exception = None):
        self.result = result
        self.error = error
        self.calls = []

    def extract(self, data: bytes, source: str = None) -> ExtractedText:
        self.calls.append((data, source))
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """
    Create a temporary directory for test files.

    Yields:
        Path to temporary directory, cleaned up after test.
    """
    tmp = tempfile.mkdtemp(prefix="pdf_reader_test_")
    yield Path(tmp)
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def temp_config(temp_dir: Path) -> Generator[Path, None, None]:
    """
    Create a temporary config.json for testing.

    Args:
        temp_dir: Temporary directory fixture.

    Yields:
        Path to temporary config file.
    """
    config_dir = temp_dir / "config"
    config_dir.mkdir()

    logs_dir = temp_dir / "logs"
    logs_dir.mkdir()

    config_data = {
        "document": {
            "pdf_path": "pdf/test.pdf"
        },
        "extraction": {
            "primary_backend": "pypdf",
            "fallback_backend": "pdfplumber"
        },
        "query": {
            "context_radius": 20,
            "default_excerpt_length": 500
        },
        "server": {
            "name": "test-pdf-server",
            "version": "0.1.0",
            "resource_uri": "pdf://document",
            "structured_errors": True
        },
        "logging": {
            "level": "DEBUG",
            "format": "%(levelname)s - %(message)s",
            "logs_directory": str(logs_dir),
            "max_file_size_mb": 1,
            "backup_count": 1
        }
    }

    config_path = config_dir / "config.json"
    with open(config_path, "w", encoding="utf-8") as f:
        json.dump(config_data, f)

    yield config_path


@pytest.fixture
def sample_pdf_content() -> bytes:
    """
    Create minimal valid PDF content for testing.

    Returns:
        Bytes representing a minimal PDF with text.
    """
    # Minimal PDF with "Hello World" text
    pdf_content = b"""%PDF-1.4
1 0 obj
<< /Type /Catalog /Pages 2 0 R >>
endobj
2 0 obj
<< /Type /Pages /Kids [3 0 R] /Count 1 >>
endobj
3 0 obj
<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792]
   /Contents 4 0 R /Resources << /Font << /F1 5 0 R >> >> >>
endobj
4 0 obj
<< /Length 44 >>
stream
BT /F1 12 Tf 100 700 Td (Hello World) Tj ET
endstream
endobj
5 0 obj
<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>
endobj
xref
0 6
0000000000 65535 f
0000000009 00000 n
0000000058 00000 n
0000000115 00000 n
0000000266 00000 n
0000000359 00000 n
trailer
<< /Size 6 /Root 1 0 R >>
startxref
434
%%EOF"""
    return pdf_content


@pytest.fixture
def sample_pdf(temp_dir: Path, sample_pdf_content: bytes) -> Path:
    """
    Create a sample PDF file for testing.

    Args:
        temp_dir: Temporary directory fixture.
        sample_pdf_content: PDF content fixture.

    Returns:
        Path to the created PDF file.
    """
    pdf_path = temp_dir / "sample.pdf"
    pdf_path.write_bytes(sample_pdf_content)
    return pdf_path


@pytest.fixture
def fox_document() -> LoadedDocument:
    """A small loaded document with two 'fox' occurrences."""
    return LoadedDocument(
        text=FOX_TEXT,
        page_count=1,
        filename="fox.pdf",
        info={"Title": "Foxes", "Author": "Test Suite"}
    )


@pytest.fixture
def long_document() -> LoadedDocument:
    """A 500-character single-line document."""
    return LoadedDocument(
        text="abcdefghij" * 50,
        page_count=3,
        filename="long.pdf"
    )


@pytest.fixture
def fake_extractor() -> FakeExtractor:
    """Extractor returning the fox text as a two-page PDF."""
    return FakeExtractor(result=ExtractedText(
        text=FOX_TEXT,
        page_count=2,
        info={"Title": "Foxes", "PDFFormatVersion": "1.4"},
        backend="fake"
    ))


@pytest.fixture
def failing_extractor() -> FakeExtractor:
    """Extractor that always fails to parse."""
    return FakeExtractor(error=ExtractionError("corrupt xref table", filepath="broken.pdf"))


@pytest.fixture
def reset_config_singleton():
    """
    Reset the config singleton between tests.

    This ensures each test gets a fresh config instance.
    """
    from pdf_reader.core import config_loader
    config_loader._config_instance = None
    yield
    config_loader._config_instance = None


@pytest.fixture
def reset_logger_singleton():
    """
    Reset the logger initialization flag between tests.
    """
    import logging
    from pdf_reader.core import logger
    logger._logger_initialized = False
    yield
    for handler in logger._installed_handlers:
        logging.getLogger().removeHandler(handler)
        handler.close()
    logger._installed_handlers.clear()
    logger._logger_initialized = False


@pytest.fixture
def make_extractor():
    """Factory for FakeExtractor instances with a custom result or error."""
    return FakeExtractor
