"""
Server module exposing the document over MCP.

Contains the tool descriptors, text formatting, resource registry,
request dispatcher and the stdio server entry point.
"""

from .tools import ToolDescriptor, build_tool_descriptors
from .resources import ResourceDescriptor, ResourceRegistry, DOCUMENT_URI
from .dispatcher import RequestDispatcher
from .formatting import NOT_LOADED_NOTICE

__all__ = [
    "ToolDescriptor",
    "build_tool_descriptors",
    "ResourceDescriptor",
    "ResourceRegistry",
    "DOCUMENT_URI",
    "RequestDispatcher",
    "NOT_LOADED_NOTICE"
]
