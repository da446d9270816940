"""
Data models for query results.

Defines dataclasses for search matches, search results, document
information and excerpts returned by the query engine.
"""

from dataclasses import dataclass, field
from typing import Any, List, Mapping


@dataclass(frozen=True)
class SearchMatch:
    """
    Represents a single substring match.

    Attributes:
        position: Zero-based offset of the match in the document text.
        context: Surrounding text, clipped to document bounds.
        preview: Context on a single line, stripped.
    """
    position: int
    context: str
    preview: str


@dataclass(frozen=True)
class SearchResults:
    """
    Outcome of a search call.

    Attributes:
        query: The query as given by the caller.
        case_sensitive: Whether letter casing had to match.
        matches: Matches in ascending position order.
    """
    query: str
    case_sensitive: bool
    matches: List[SearchMatch] = field(default_factory=list)

    @property
    def count(self) -> int:
        """Total number of matches."""
        return len(self.matches)


@dataclass(frozen=True)
class DocumentInfo:
    """
    Summary of the loaded document.

    Attributes:
        filename: Source file name.
        page_count: Number of pages.
        characters: Length of the extracted text.
        words: Number of whitespace-delimited tokens.
        info: Raw parser metadata.
    """
    filename: str
    page_count: int
    characters: int
    words: int
    info: Mapping[str, Any]


@dataclass(frozen=True)
class Excerpt:
    """
    A character range of the document text.

    Attributes:
        start: Offset of the first character.
        end: Offset one past the last character.
        text: The excerpt itself.
    """
    start: int
    end: int
    text: str

    @property
    def length(self) -> int:
        return self.end - self.start


if __name__ == "__main__":
    match = SearchMatch(position=16, context="The quick brown fox.", preview="The quick brown fox.")
    results = SearchResults(query="fox", case_sensitive=False, matches=[match])
    print(f"Results for {results.query!r}: {results.count} match(es)")

    excerpt = Excerpt(start=4, end=9, text="quick")
    print(f"Excerpt {excerpt.start}-{excerpt.end}: {excerpt.text} ({excerpt.length} chars)")
