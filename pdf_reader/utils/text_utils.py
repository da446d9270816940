"""
Text utility functions for the PDF Reader Server.

Provides case folding, whitespace tokenization and preview cleanup
for querying extracted PDF content.
"""

from typing import List


def fold_case(text: str) -> str:
    """
    Lower-case text without changing its length.

    Characters whose lower-case form spans several code points
    (for example U+0130) are kept as-is, so offsets computed on the
    folded text index the original text.

    Args:
        text: Text to fold.

    Returns:
        Folded text of identical length.
    """
    if not text:
        return ""

    folded = text.lower()
    if len(folded) == len(text):
        return folded

    return "".join(
        char.lower() if len(char.lower()) == 1 else char
        for char in text
    )


def tokenize_words(text: str) -> List[str]:
    """
    Split text into whitespace-delimited tokens.

    Runs of whitespace collapse and leading/trailing whitespace
    produces no empty tokens.
    """
    if not text:
        return []
    return text.split()


def count_words(text: str) -> int:
    """Count whitespace-delimited tokens in text."""
    return len(tokenize_words(text))


def collapse_newlines(text: str) -> str:
    """
    Turn a context snippet into a single-line preview.

    Args:
        text: Snippet that may span several lines.

    Returns:
        Snippet with each newline replaced by a space, stripped.
    """
    if not text:
        return ""
    return text.replace("\n", " ").strip()


if __name__ == "__main__":
    sample_text = "  The quick\nbrown   fox.\n\nThe fox jumps.  "

    print("=== count_words ===")
    print(count_words(sample_text))

    print("\n=== collapse_newlines ===")
    print(repr(collapse_newlines(sample_text)))

    print("\n=== fold_case ===")
    print(repr(fold_case("İstanbul QUICK")))
