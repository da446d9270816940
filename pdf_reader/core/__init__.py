"""
Core module providing foundational components.

This module contains the configuration loader, centralized logging setup,
and custom exception hierarchy. It has no internal dependencies.
"""

from .config_loader import get_config, Config, QueryConfig, ServerConfig
from .logger import get_logger
from .exceptions import (
    PDFReaderError,
    ConfigurationError,
    ExtractionError,
    DocumentLoadError,
    DocumentNotFoundError,
    DocumentParseError,
    DocumentNotLoadedError,
    InvalidArgumentError,
    ExcerptRangeError,
    UnknownToolError,
    UnknownResourceError
)

__all__ = [
    "get_config",
    "Config",
    "QueryConfig",
    "ServerConfig",
    "get_logger",
    "PDFReaderError",
    "ConfigurationError",
    "ExtractionError",
    "DocumentLoadError",
    "DocumentNotFoundError",
    "DocumentParseError",
    "DocumentNotLoadedError",
    "InvalidArgumentError",
    "ExcerptRangeError",
    "UnknownToolError",
    "UnknownResourceError"
]
