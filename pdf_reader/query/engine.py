"""
Query engine over the loaded document.

Read-only operations: full content, substring search with context
windows, document information and range excerpts. Every operation
raises DocumentNotLoadedError when no document is available.
"""

from typing import List, Optional

from ..core import (
    get_logger,
    DocumentNotLoadedError,
    ExcerptRangeError,
    InvalidArgumentError
)
from ..document import LoadedDocument
from ..utils import collapse_newlines, fold_case
from .models import DocumentInfo, Excerpt, SearchMatch, SearchResults

logger = get_logger(__name__)


DEFAULT_CONTEXT_RADIUS = 50
DEFAULT_EXCERPT_LENGTH = 1000


class QueryEngine:
    """
    Answers queries against a single immutable document.

    The engine holds no state besides the injected document, so
    repeated calls with the same arguments give identical results.
    """

    def __init__(
        self,
        document: Optional[LoadedDocument],
        context_radius: int = DEFAULT_CONTEXT_RADIUS,
        default_excerpt_length: int = DEFAULT_EXCERPT_LENGTH
    ):
        """
        Initialize the engine.

        Args:
            document: The loaded document, or None if loading failed.
            context_radius: Characters of context on each side of a match.
            default_excerpt_length: Excerpt length when none is given.
        """
        self.document = document
        self.context_radius = context_radius
        self.default_excerpt_length = default_excerpt_length

    @property
    def is_loaded(self) -> bool:
        return self.document is not None

    def _require_document(self) -> LoadedDocument:
        if self.document is None:
            raise DocumentNotLoadedError()
        return self.document

    def get_full_content(self) -> LoadedDocument:
        """Return the loaded document, whose text is the full content."""
        return self._require_document()

    def search(self, query: str, case_sensitive: bool = False) -> SearchResults:
        """
        Find every occurrence of a substring.

        The cursor advances by one character after each hit, so
        overlapping occurrences are all reported.

        Args:
            query: Non-empty text to look for.
            case_sensitive: Whether letter casing must match.

        Returns:
            SearchResults with matches in ascending position order.

        Raises:
            DocumentNotLoadedError: If no document is loaded.
            InvalidArgumentError: If the query is empty.
        """
        if not query:
            raise InvalidArgumentError("Search query must not be empty", argument="query")

        document = self._require_document()
        text = document.text
        haystack = text if case_sensitive else fold_case(text)
        needle = query if case_sensitive else fold_case(query)

        matches: List[SearchMatch] = []
        index = haystack.find(needle)

        while index != -1:
            start = max(0, index - self.context_radius)
            end = min(len(text), index + len(needle) + self.context_radius)
            context = text[start:end]

            matches.append(SearchMatch(
                position=index,
                context=context,
                preview=collapse_newlines(context)
            ))

            index = haystack.find(needle, index + 1)

        logger.debug(f"Search {query!r} (case_sensitive={case_sensitive}): {len(matches)} matches")

        return SearchResults(query=query, case_sensitive=case_sensitive, matches=matches)

    def get_info(self) -> DocumentInfo:
        """
        Summarize the loaded document.

        Returns:
            DocumentInfo with page, character and word counts.

        Raises:
            DocumentNotLoadedError: If no document is loaded.
        """
        document = self._require_document()

        return DocumentInfo(
            filename=document.filename,
            page_count=document.page_count,
            characters=document.character_count,
            words=document.word_count,
            info=document.info
        )

    def get_excerpt(self, start: int, length: int = None) -> Excerpt:
        """
        Extract a character range of the text.

        A range running past the end of the text is clipped.

        Args:
            start: Offset of the first character, 0 <= start < len(text).
            length: Number of characters wanted. Defaults to
                    default_excerpt_length.

        Returns:
            Excerpt with the actual start and end offsets.

        Raises:
            DocumentNotLoadedError: If no document is loaded.
            ExcerptRangeError: If start lies outside the text.
            InvalidArgumentError: If length is not positive.
        """
        if length is None:
            length = self.default_excerpt_length

        if length < 1:
            raise InvalidArgumentError(
                f"Excerpt length must be a positive integer, got {length}",
                argument="length"
            )

        text = self._require_document().text

        if start < 0 or start >= len(text):
            raise ExcerptRangeError(start=start, upper_bound=len(text) - 1)

        excerpt = text[start:start + length]

        return Excerpt(start=start, end=start + len(excerpt), text=excerpt)


if __name__ == "__main__":
    engine = QueryEngine(LoadedDocument(
        text="The quick brown fox. The fox jumps.",
        page_count=1,
        filename="fox.pdf"
    ))

    results = engine.search("fox")
    print(f"Found {results.count} matches for 'fox':")
    for match in results.matches:
        print(f"  position {match.position}: {match.preview}")

    info = engine.get_info()
    print(f"\n{info.filename}: {info.characters} chars, {info.words} words")

    excerpt = engine.get_excerpt(4, 11)
    print(f"\nExcerpt {excerpt.start}-{excerpt.end}: {excerpt.text!r}")
