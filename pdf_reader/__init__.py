"""
PDF Reader Server Package.

Serves the text content of a single PDF document to MCP clients over stdio:
full-text retrieval, substring search with context, metadata and excerpts.
"""

__version__ = "1.0.0"
