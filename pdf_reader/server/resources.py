"""
Resource registry exposing the loaded document.

There is exactly one static resource; its name follows the loaded
file and falls back to a placeholder when nothing is loaded.
"""

from dataclasses import dataclass
from typing import List, Optional

from ..core import DocumentNotLoadedError, UnknownResourceError
from ..document import LoadedDocument


DOCUMENT_URI = "pdf://document"
PLACEHOLDER_NAME = "PDF Document"
DOCUMENT_DESCRIPTION = "The loaded PDF document content"
TEXT_MIME_TYPE = "text/plain"


@dataclass(frozen=True)
class ResourceDescriptor:
    """Describes one readable resource."""
    uri: str
    name: str
    description: str
    mime_type: str


class ResourceRegistry:
    """Serves the loaded document under a single fixed URI."""

    def __init__(self, document: Optional[LoadedDocument], uri: str = DOCUMENT_URI):
        self.document = document
        self.uri = uri

    def list(self) -> List[ResourceDescriptor]:
        """Return the single document resource descriptor."""
        name = self.document.filename if self.document is not None else PLACEHOLDER_NAME

        return [ResourceDescriptor(
            uri=self.uri,
            name=name,
            description=DOCUMENT_DESCRIPTION,
            mime_type=TEXT_MIME_TYPE
        )]

    def read(self, uri: str) -> str:
        """
        Read the document text.

        Args:
            uri: Resource URI; a trailing slash added by URL
                 normalisation is ignored.

        Returns:
            The full document text.

        Raises:
            UnknownResourceError: If the URI is not the document URI.
            DocumentNotLoadedError: If no document is loaded.
        """
        uri = str(uri)
        if uri not in (self.uri, self.uri + "/"):
            raise UnknownResourceError(uri)

        if self.document is None:
            raise DocumentNotLoadedError()

        return self.document.text
