"""
Tool descriptors advertised to MCP clients.

Each descriptor carries a JSON-Schema input description listing the
required and optional arguments of one query operation.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List


GET_PDF_CONTENT = "get_pdf_content"
SEARCH_PDF = "search_pdf"
GET_PDF_INFO = "get_pdf_info"
GET_PDF_EXCERPT = "get_pdf_excerpt"


@dataclass(frozen=True)
class ToolDescriptor:
    """
    Describes one callable tool.

    Attributes:
        name: Tool name used in tools/call.
        description: Human-readable summary.
        input_schema: JSON Schema of the arguments object.
    """
    name: str
    description: str
    input_schema: Dict[str, Any] = field(default_factory=dict)


def build_tool_descriptors(default_excerpt_length: int = 1000) -> List[ToolDescriptor]:
    """
    Build the ordered list of tools the server offers.

    Args:
        default_excerpt_length: Default advertised for get_pdf_excerpt.length.

    Returns:
        Descriptors for content, search, info and excerpt, in that order.
    """
    return [
        ToolDescriptor(
            name=GET_PDF_CONTENT,
            description="Get the full text content of the loaded PDF document",
            input_schema={
                "type": "object",
                "properties": {},
                "required": []
            }
        ),
        ToolDescriptor(
            name=SEARCH_PDF,
            description="Search for specific text within the PDF document",
            input_schema={
                "type": "object",
                "properties": {
                    "query": {
                        "type": "string",
                        "description": "Text to search for in the PDF",
                        "minLength": 1
                    },
                    "case_sensitive": {
                        "type": "boolean",
                        "description": "Whether to perform case-sensitive search",
                        "default": False
                    }
                },
                "required": ["query"]
            }
        ),
        ToolDescriptor(
            name=GET_PDF_INFO,
            description="Get metadata and information about the loaded PDF",
            input_schema={
                "type": "object",
                "properties": {},
                "required": []
            }
        ),
        ToolDescriptor(
            name=GET_PDF_EXCERPT,
            description="Get a specific excerpt from the PDF by character range",
            input_schema={
                "type": "object",
                "properties": {
                    "start": {
                        "type": "integer",
                        "description": "Starting character position"
                    },
                    "length": {
                        "type": "integer",
                        "description": "Number of characters to extract",
                        "default": default_excerpt_length,
                        "minimum": 1
                    }
                },
                "required": ["start"]
            }
        )
    ]
