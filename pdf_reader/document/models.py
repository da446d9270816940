"""
Data model for the served document.

A LoadedDocument is built once at startup and never mutated, so request
handlers can read it without coordination.
"""

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Optional

from ..utils import count_words


@dataclass(frozen=True)
class LoadedDocument:
    """
    Immutable snapshot of an extracted PDF.

    Attributes:
        text: Full extracted text.
        page_count: Number of pages in the PDF.
        filename: Base name of the source file.
        info: Parser-reported metadata, passed through verbatim.
        source_path: Path the document was loaded from, if any.
    """
    text: str
    page_count: int
    filename: str
    info: Mapping[str, Any] = field(default_factory=dict)
    source_path: Optional[Path] = None

    def __post_init__(self):
        if self.text is None:
            raise ValueError("LoadedDocument.text must not be None")
        if self.page_count < 0:
            raise ValueError("LoadedDocument.page_count must be >= 0")
        object.__setattr__(self, "info", MappingProxyType(dict(self.info or {})))

    @property
    def character_count(self) -> int:
        """Number of characters in the text."""
        return len(self.text)

    @property
    def word_count(self) -> int:
        """Number of whitespace-delimited tokens in the text."""
        return count_words(self.text)


if __name__ == "__main__":
    doc = LoadedDocument(
        text="The quick brown fox. The fox jumps.",
        page_count=1,
        filename="fox.pdf",
        info={"Title": "Foxes"}
    )
    print(f"{doc.filename}: {doc.page_count} page(s)")
    print(f"Characters: {doc.character_count}, words: {doc.word_count}")
    print(f"Info: {dict(doc.info)}")
