"""
Request dispatcher for tool calls and resource reads.

Maps a tool name and its arguments onto a QueryEngine call, validates
the arguments first, and renders the result as text. Requests are
independent of each other; the dispatcher keeps no session state.
"""

from typing import Any, Callable, Dict, List, Optional

from ..core import (
    get_logger,
    DocumentNotLoadedError,
    ExcerptRangeError,
    InvalidArgumentError,
    QueryConfig,
    UnknownToolError
)
from ..document import LoadedDocument
from ..query import QueryEngine
from .formatting import (
    NOT_LOADED_NOTICE,
    format_document_info,
    format_excerpt,
    format_full_content,
    format_range_notice,
    format_search_results
)
from .resources import DOCUMENT_URI, ResourceDescriptor, ResourceRegistry
from .tools import (
    GET_PDF_CONTENT,
    GET_PDF_EXCERPT,
    GET_PDF_INFO,
    SEARCH_PDF,
    ToolDescriptor,
    build_tool_descriptors
)

logger = get_logger(__name__)


_MISSING = object()


def _require_string(arguments: Dict[str, Any], name: str) -> str:
    value = arguments.get(name, _MISSING)
    if value is _MISSING or value is None:
        raise InvalidArgumentError(f"Missing required argument: {name}", argument=name)
    if not isinstance(value, str):
        raise InvalidArgumentError(
            f"Argument '{name}' must be a string, got {type(value).__name__}",
            argument=name
        )
    return value


def _optional_bool(arguments: Dict[str, Any], name: str, default: bool) -> bool:
    value = arguments.get(name)
    if value is None:
        return default
    if not isinstance(value, bool):
        raise InvalidArgumentError(
            f"Argument '{name}' must be a boolean, got {type(value).__name__}",
            argument=name
        )
    return value


def _integer(arguments: Dict[str, Any], name: str, required: bool) -> Optional[int]:
    value = arguments.get(name)
    if value is None:
        if required:
            raise InvalidArgumentError(f"Missing required argument: {name}", argument=name)
        return None
    # bool is a subclass of int
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(
            f"Argument '{name}' must be an integer, got {type(value).__name__}",
            argument=name
        )
    return value


class RequestDispatcher:
    """
    Dispatches tool calls and resource reads against one document.

    In compatibility mode (the default) a missing document and an
    out-of-range excerpt start are answered with a textual notice.
    With structured_errors=True they are raised as typed errors so
    clients can branch on them.
    """

    def __init__(
        self,
        document: Optional[LoadedDocument],
        query_config: QueryConfig = None,
        structured_errors: bool = False,
        resource_uri: str = DOCUMENT_URI
    ):
        """
        Initialize the dispatcher.

        Args:
            document: The loaded document, or None.
            query_config: Context radius and default excerpt length.
            structured_errors: Raise domain errors instead of rendering notices.
            resource_uri: URI under which the document is exposed.
        """
        if query_config is None:
            self.engine = QueryEngine(document)
        else:
            self.engine = QueryEngine(
                document,
                context_radius=query_config.context_radius,
                default_excerpt_length=query_config.default_excerpt_length
            )

        self.registry = ResourceRegistry(document, uri=resource_uri)
        self.structured_errors = structured_errors
        self._tools = build_tool_descriptors(self.engine.default_excerpt_length)

        self._handlers: Dict[str, Callable[[Dict[str, Any]], str]] = {
            GET_PDF_CONTENT: self._get_content,
            SEARCH_PDF: self._search,
            GET_PDF_INFO: self._get_info,
            GET_PDF_EXCERPT: self._get_excerpt
        }

    def list_tools(self) -> List[ToolDescriptor]:
        return list(self._tools)

    def call_tool(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> str:
        """
        Run one tool and render its result.

        Args:
            name: Tool name.
            arguments: Tool arguments; None is treated as no arguments.

        Returns:
            Text payload for the client.

        Raises:
            UnknownToolError: If no tool has this name.
            InvalidArgumentError: If arguments are missing or mistyped.
            DocumentNotLoadedError: In structured mode, if no document is loaded.
            ExcerptRangeError: In structured mode, for an out-of-range start.
        """
        handler = self._handlers.get(name)
        if handler is None:
            logger.warning(f"Unknown tool requested: {name}")
            raise UnknownToolError(name)

        if arguments is None:
            arguments = {}
        elif not isinstance(arguments, dict):
            raise InvalidArgumentError("Tool arguments must be an object")

        logger.debug(f"Calling tool {name} with {arguments}")

        try:
            return handler(arguments)
        except DocumentNotLoadedError:
            if self.structured_errors:
                raise
            return NOT_LOADED_NOTICE
        except ExcerptRangeError as e:
            if self.structured_errors:
                raise
            return format_range_notice(e)

    def list_resources(self) -> List[ResourceDescriptor]:
        return self.registry.list()

    def read_resource(self, uri: str) -> str:
        return self.registry.read(uri)

    def _get_content(self, arguments: Dict[str, Any]) -> str:
        return format_full_content(self.engine.get_full_content())

    def _search(self, arguments: Dict[str, Any]) -> str:
        query = _require_string(arguments, "query")
        case_sensitive = _optional_bool(arguments, "case_sensitive", False)

        return format_search_results(self.engine.search(query, case_sensitive))

    def _get_info(self, arguments: Dict[str, Any]) -> str:
        return format_document_info(self.engine.get_info())

    def _get_excerpt(self, arguments: Dict[str, Any]) -> str:
        start = _integer(arguments, "start", required=True)
        length = _integer(arguments, "length", required=False)

        return format_excerpt(self.engine.get_excerpt(start, length))
