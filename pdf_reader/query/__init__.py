"""
Query module for the PDF Reader Server.

Provides the read-only query engine over the loaded document and the
result models it returns.
"""

from .models import SearchMatch, SearchResults, DocumentInfo, Excerpt
from .engine import QueryEngine

__all__ = [
    "SearchMatch",
    "SearchResults",
    "DocumentInfo",
    "Excerpt",
    "QueryEngine"
]
