"""
Tests for the resource registry.

Tests the single document resource descriptor and resource reads.
"""

import pytest

from pdf_reader.core.exceptions import DocumentNotLoadedError, UnknownResourceError
from pdf_reader.server.resources import ResourceRegistry


class TestResourceList:
    """Tests for ResourceRegistry.list."""

    def test_loaded_document_descriptor(self, fox_document):
        """Test the descriptor of a loaded document."""
        resources = ResourceRegistry(fox_document).list()

        assert len(resources) == 1
        resource = resources[0]
        assert resource.uri == "pdf://document"
        assert resource.name == "fox.pdf"
        assert resource.description == "The loaded PDF document content"
        assert resource.mime_type == "text/plain"

    def test_placeholder_name_when_not_loaded(self):
        """Test that an absent document still lists one resource."""
        resources = ResourceRegistry(None).list()

        assert len(resources) == 1
        assert resources[0].name == "PDF Document"


class TestResourceRead:
    """Tests for ResourceRegistry.read."""

    def test_read_returns_text(self, fox_document):
        """Test reading the document URI."""
        assert ResourceRegistry(fox_document).read("pdf://document") == fox_document.text

    def test_trailing_slash_ignored(self, fox_document):
        """Test that a normalised URI with a trailing slash still matches."""
        assert ResourceRegistry(fox_document).read("pdf://document/") == fox_document.text

    @pytest.mark.parametrize("uri", ["pdf://document//", "pdf://document///", "pdf://documents"])
    def test_only_one_trailing_slash_ignored(self, fox_document, uri):
        """Test that extra slashes or characters do not match the document URI."""
        with pytest.raises(UnknownResourceError):
            ResourceRegistry(fox_document).read(uri)

    def test_unknown_uri(self, fox_document):
        """Test that other URIs raise UnknownResourceError."""
        with pytest.raises(UnknownResourceError) as exc_info:
            ResourceRegistry(fox_document).read("pdf://other")

        assert exc_info.value.uri == "pdf://other"

    def test_unknown_uri_checked_before_loaded(self):
        """Test that an unknown URI is reported even without a document."""
        with pytest.raises(UnknownResourceError):
            ResourceRegistry(None).read("file:///etc/passwd")

    def test_not_loaded(self):
        """Test that reading without a document raises DocumentNotLoadedError."""
        with pytest.raises(DocumentNotLoadedError):
            ResourceRegistry(None).read("pdf://document")

    def test_custom_uri(self, fox_document):
        """Test serving the document under a configured URI."""
        registry = ResourceRegistry(fox_document, uri="pdf://manual")

        assert registry.list()[0].uri == "pdf://manual"
        assert registry.read("pdf://manual") == fox_document.text
