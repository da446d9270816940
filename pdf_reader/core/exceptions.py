"""
Custom exception hierarchy for the PDF Reader Server.

Provides specific exception types for different failure modes:
configuration errors, extraction and load failures, query argument
problems, and unknown tool or resource references.
"""


class PDFReaderError(Exception):
    """Base exception for all PDF Reader Server errors."""

    def __init__(self, message: str, details: dict = None):
        """
        Initialize the exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary with additional context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(PDFReaderError):
    """Raised when configuration is invalid."""
    pass


class ExtractionError(PDFReaderError):
    """Raised when a backend fails to extract text from PDF bytes."""

    def __init__(self, message: str, filepath: str = None, details: dict = None):
        """
        Initialize extraction error.

        Args:
            message: Error description.
            filepath: Path (or label) of the problematic PDF.
            details: Additional context.
        """
        super().__init__(message, details)
        self.filepath = filepath


class DocumentLoadError(PDFReaderError):
    """Base class for failures while loading the served document."""

    def __init__(self, message: str, path: str = None, details: dict = None):
        super().__init__(message, details)
        self.path = path


class DocumentNotFoundError(DocumentLoadError):
    """Raised when the configured path does not exist or cannot be read."""
    pass


class DocumentParseError(DocumentLoadError):
    """Raised when the PDF bytes cannot be turned into text."""
    pass


class DocumentNotLoadedError(PDFReaderError):
    """Raised when a query runs while no document is loaded."""

    def __init__(self, message: str = "PDF not loaded", details: dict = None):
        super().__init__(message, details)


class InvalidArgumentError(PDFReaderError):
    """Raised when a request argument is missing, mistyped or out of range."""

    def __init__(self, message: str, argument: str = None, details: dict = None):
        """
        Initialize argument error.

        Args:
            message: Error description.
            argument: Name of the offending argument.
            details: Additional context.
        """
        super().__init__(message, details)
        self.argument = argument


class ExcerptRangeError(InvalidArgumentError):
    """Raised when an excerpt start offset falls outside the document text."""

    def __init__(self, start: int, upper_bound: int):
        super().__init__(
            f"Invalid start position. Must be between 0 and {upper_bound}",
            argument="start",
            details={"start": start, "upper_bound": upper_bound}
        )
        self.start = start
        self.upper_bound = upper_bound


class UnknownToolError(PDFReaderError):
    """Raised when a tool call names a tool the server does not offer."""

    def __init__(self, tool_name: str):
        super().__init__(f"Unknown tool: {tool_name}", {"tool": tool_name})
        self.tool_name = tool_name


class UnknownResourceError(PDFReaderError):
    """Raised when a resource read references an unknown URI."""

    def __init__(self, uri: str):
        super().__init__(f"Unknown resource: {uri}", {"uri": uri})
        self.uri = uri


if __name__ == "__main__":
    try:
        raise DocumentNotFoundError("PDF file not found", path="/pdf/missing.pdf")
    except PDFReaderError as e:
        print(f"Caught: {e.__class__.__name__}: {e.message}")
        print(f"Path: {e.path}")

    try:
        raise ExcerptRangeError(start=1000, upper_bound=499)
    except InvalidArgumentError as e:
        print(f"Argument {e.argument}: {e.message}")
