"""
Text rendering of query results.

Every tool answers with a single Markdown-flavoured text payload;
the notices cover the cases where a call succeeds without data.
"""

import json

from ..core import ExcerptRangeError
from ..document import LoadedDocument
from ..query import DocumentInfo, Excerpt, SearchResults


NOT_LOADED_NOTICE = "PDF not loaded. Please ensure the PDF file exists at the specified path."


def format_full_content(document: LoadedDocument) -> str:
    return f"# PDF Content: {document.filename}\n\n{document.text}"


def format_search_results(results: SearchResults) -> str:
    """
    Render search matches with their one-line previews.

    Args:
        results: Results of QueryEngine.search.

    Returns:
        Header, match count and one block per match.
    """
    blocks = [
        f"**Match {i}** (position {match.position}):\n...{match.preview}...\n"
        for i, match in enumerate(results.matches, start=1)
    ]

    return (
        f"# Search Results for \"{results.query}\"\n\n"
        f"Found {results.count} matches:\n\n"
        + "\n".join(blocks)
    )


def format_document_info(info: DocumentInfo) -> str:
    metadata = json.dumps(dict(info.info), indent=2, ensure_ascii=False, default=str)

    return (
        "# PDF Information\n\n"
        f"**Filename:** {info.filename}\n"
        f"**Pages:** {info.page_count}\n"
        f"**Characters:** {info.characters}\n"
        f"**Words:** {info.words}\n\n"
        f"**PDF Metadata:**\n{metadata}"
    )


def format_excerpt(excerpt: Excerpt) -> str:
    return f"# PDF Excerpt ({excerpt.start}-{excerpt.end})\n\n{excerpt.text}"


def format_range_notice(error: ExcerptRangeError) -> str:
    return f"Invalid start position. Must be between 0 and {error.upper_bound}"
