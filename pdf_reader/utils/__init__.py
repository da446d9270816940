"""
Utility module providing shared helper functions.

Contains file checks and text processing utilities used across
the application. Depends only on the standard library.
"""

from .file_utils import (
    is_readable_file,
    get_file_size_mb
)
from .text_utils import (
    fold_case,
    tokenize_words,
    count_words,
    collapse_newlines
)

__all__ = [
    "is_readable_file",
    "get_file_size_mb",
    "fold_case",
    "tokenize_words",
    "count_words",
    "collapse_newlines"
]
