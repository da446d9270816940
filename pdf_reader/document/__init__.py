"""
Document module holding the served PDF.

Provides the immutable LoadedDocument snapshot and the loader that
builds it once at startup.
"""

from .models import LoadedDocument
from .loader import DocumentLoader, load_document

__all__ = [
    "LoadedDocument",
    "DocumentLoader",
    "load_document"
]
