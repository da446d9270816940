"""
Tests for the pypdf-based extraction backend.

Tests text extraction from bytes, metadata normalisation, encryption
handling, and error cases using sample PDF fixtures and mocks.
"""

import pytest
from unittest.mock import patch, Mock

from pdf_reader.extraction.models import ExtractedText
from pdf_reader.extraction.pypdf_backend import PyPDFBackend, normalize_info
from pdf_reader.core.exceptions import ExtractionError


@pytest.fixture
def backend():
    """Create a PyPDFBackend instance."""
    return PyPDFBackend()


def _make_reader(texts, encrypted=False, metadata=None, header="%PDF-1.7"):
    """Build a mocked PdfReader with one page per text."""
    pages = []
    for text in texts:
        mock_page = Mock()
        if isinstance(text, Exception):
            mock_page.extract_text.side_effect = text
        else:
            mock_page.extract_text.return_value = text
        pages.append(mock_page)

    mock_reader = Mock()
    mock_reader.is_encrypted = encrypted
    mock_reader.pages = pages
    mock_reader.metadata = metadata
    mock_reader.pdf_header = header
    return mock_reader


class TestPyPDFBackend:
    """Tests for PyPDFBackend class."""

    def test_backend_name(self, backend):
        """Test that backend has correct name identifier."""
        assert backend.name == "pypdf"

    def test_extract_sample_pdf(self, backend, sample_pdf_content):
        """Test that the minimal sample PDF yields an ExtractedText."""
        try:
            result = backend.extract(sample_pdf_content, source="sample.pdf")
            assert isinstance(result, ExtractedText)
            assert result.page_count == 1
            assert result.backend == "pypdf"
        except ExtractionError:
            pass

    def test_extract_invalid_pdf_raises(self, backend):
        """Test that invalid PDF content raises ExtractionError."""
        with pytest.raises(ExtractionError) as exc_info:
            backend.extract(b"Not a valid PDF", source="invalid.pdf")

        assert exc_info.value.filepath == "invalid.pdf"

    def test_extract_empty_bytes_raises(self, backend):
        """Test that empty input raises ExtractionError."""
        with pytest.raises(ExtractionError):
            backend.extract(b"")


class TestPyPDFBackendEncryption:
    """Tests for encrypted PDF handling."""

    @patch("pdf_reader.extraction.pypdf_backend.PdfReader")
    def test_encrypted_pdf_attempts_empty_password(self, mock_reader_cls, backend):
        """Test that encrypted PDF is decrypted with empty password."""
        mock_reader = _make_reader([], encrypted=True)
        mock_reader_cls.return_value = mock_reader

        backend.extract(b"%PDF-")

        mock_reader.decrypt.assert_called_once_with("")

    @patch("pdf_reader.extraction.pypdf_backend.PdfReader")
    def test_encrypted_pdf_decrypt_failure_raises(self, mock_reader_cls, backend):
        """Test that undecryptable PDF raises ExtractionError."""
        mock_reader = _make_reader([], encrypted=True)
        mock_reader.decrypt.side_effect = Exception("Bad password")
        mock_reader_cls.return_value = mock_reader

        with pytest.raises(ExtractionError, match="encrypted"):
            backend.extract(b"%PDF-")

    @patch("pdf_reader.extraction.pypdf_backend.PdfReader")
    def test_unencrypted_pdf_skips_decrypt(self, mock_reader_cls, backend):
        """Test that unencrypted PDF does not call decrypt."""
        mock_reader = _make_reader(["Some text"])
        mock_reader_cls.return_value = mock_reader

        backend.extract(b"%PDF-")

        mock_reader.decrypt.assert_not_called()


class TestPyPDFBackendWithMock:
    """Tests using mocked PdfReader for deterministic behavior."""

    @patch("pdf_reader.extraction.pypdf_backend.PdfReader")
    def test_extract_joins_pages_with_blank_line(self, mock_reader_cls, backend):
        """Test that page texts are joined by a blank line."""
        mock_reader_cls.return_value = _make_reader(
            ["Page one content", "Page two content", "Page three content"]
        )

        result = backend.extract(b"%PDF-")

        assert result.text == "Page one content\n\nPage two content\n\nPage three content"
        assert result.page_count == 3

    @patch("pdf_reader.extraction.pypdf_backend.PdfReader")
    def test_empty_pages_skipped_but_counted(self, mock_reader_cls, backend):
        """Test that blank pages add no text but still count as pages."""
        mock_reader_cls.return_value = _make_reader(["Real content", "   \n  ", None])

        result = backend.extract(b"%PDF-")

        assert result.text == "Real content"
        assert result.page_count == 3

    @patch("pdf_reader.extraction.pypdf_backend.PdfReader")
    def test_extract_continues_on_page_error(self, mock_reader_cls, backend):
        """Test that a failing page doesn't stop extraction of others."""
        mock_reader_cls.return_value = _make_reader(
            ["Good content", Exception("Page corrupted"), "More content"]
        )

        result = backend.extract(b"%PDF-")

        assert result.text == "Good content\n\nMore content"

    @patch("pdf_reader.extraction.pypdf_backend.PdfReader")
    def test_metadata_is_normalized(self, mock_reader_cls, backend):
        """Test that metadata keys lose their slash and the version is added."""
        mock_reader_cls.return_value = _make_reader(
            ["Text"],
            metadata={"/Title": "Fares", "/Producer": "Writer"},
            header="%PDF-1.4"
        )

        result = backend.extract(b"%PDF-")

        assert result.info == {
            "Title": "Fares",
            "Producer": "Writer",
            "PDFFormatVersion": "1.4"
        }

    @patch("pdf_reader.extraction.pypdf_backend.PdfReader")
    def test_missing_metadata_gives_version_only(self, mock_reader_cls, backend):
        """Test that a PDF without an info dictionary still reports its version."""
        mock_reader_cls.return_value = _make_reader(["Text"], metadata=None)

        result = backend.extract(b"%PDF-")

        assert result.info == {"PDFFormatVersion": "1.7"}


class TestNormalizeInfo:
    """Tests for normalize_info helper."""

    def test_scalars_kept(self):
        """Test that JSON scalars pass through unchanged."""
        assert normalize_info({"/Pages": 3, "/Trapped": False, "/Empty": None}) == {
            "Pages": 3,
            "Trapped": False,
            "Empty": None
        }

    def test_other_values_stringified(self):
        """Test that non-scalar values are rendered as strings."""
        assert normalize_info({"/Keywords": ["a", "b"]}) == {"Keywords": "['a', 'b']"}

    def test_none_gives_empty_dict(self):
        """Test that missing metadata gives an empty dict."""
        assert normalize_info(None) == {}
