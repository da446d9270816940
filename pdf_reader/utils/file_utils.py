"""
File utility functions for the PDF Reader Server.

Provides the accessibility check and size reporting used when
loading the served document.
"""

import os
from pathlib import Path
from typing import Union


def is_readable_file(filepath: Union[str, Path]) -> bool:
    """
    Check that a path points to a regular file the process can read.

    Args:
        filepath: Path to check.

    Returns:
        True if the file exists and is readable.
    """
    filepath = Path(filepath)
    return filepath.is_file() and os.access(filepath, os.R_OK)


def get_file_size_mb(filepath: Union[str, Path]) -> float:
    """
    Get file size in megabytes.

    Args:
        filepath: Path to the file.

    Returns:
        File size in MB, rounded to 2 decimal places.
    """
    filepath = Path(filepath)
    size_bytes = filepath.stat().st_size
    return round(size_bytes / (1024 * 1024), 2)


if __name__ == "__main__":
    import tempfile

    with tempfile.NamedTemporaryFile(delete=False, suffix=".pdf") as f:
        f.write(b"%PDF-1.4 test content")
        temp_path = Path(f.name)

    print(f"Test file: {temp_path}")
    print(f"Readable: {is_readable_file(temp_path)}")
    print(f"Size: {get_file_size_mb(temp_path)} MB")

    temp_path.unlink()
    print(f"Readable after delete: {is_readable_file(temp_path)}")
