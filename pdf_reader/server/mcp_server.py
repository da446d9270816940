"""
MCP server wiring and process entry point.

Registers the dispatcher's tools and resources on a low-level MCP server
and serves it over stdio. The document is loaded before the transport
starts, so no request can observe a partially loaded document.

Usage:
    pdf-reader-server                     # PDF from PDF_PATH or config
    pdf-reader-server --pdf path/to.pdf   # Explicit document
    pdf-reader-server --log-level DEBUG
"""

import argparse
import asyncio
import sys
from pathlib import Path
from typing import List, Optional

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError
from pydantic import AnyUrl

from ..core import get_config, get_logger, ConfigurationError, ExtractionError, UnknownToolError
from ..core.config_loader import Config
from ..core.logger import setup_logging
from ..document import load_document
from ..extraction import PDFExtractor
from .dispatcher import RequestDispatcher

logger = get_logger(__name__)


def build_server(dispatcher: RequestDispatcher, name: str = "pdf-reader-server", version: str = "1.0.0") -> Server:
    """
    Create an MCP server backed by a dispatcher.

    Args:
        dispatcher: Dispatcher holding the loaded document.
        name: Server name reported during initialization.
        version: Server version reported during initialization.

    Returns:
        Configured low-level MCP Server.
    """
    server = Server(name, version=version)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return [
            types.Tool(
                name=tool.name,
                description=tool.description,
                inputSchema=tool.input_schema
            )
            for tool in dispatcher.list_tools()
        ]

    @server.call_tool()
    async def call_tool(name: str, arguments: dict) -> List[types.TextContent]:
        text = dispatcher.call_tool(name, arguments)
        return [types.TextContent(type="text", text=text)]

    # Handler exceptions become isError results; unknown names are protocol errors
    handle_call_tool = server.request_handlers[types.CallToolRequest]
    tool_names = {tool.name for tool in dispatcher.list_tools()}

    async def checked_call_tool(request: types.CallToolRequest) -> types.ServerResult:
        name = request.params.name
        if name not in tool_names:
            logger.warning(f"Unknown tool requested: {name}")
            error = UnknownToolError(name)
            raise McpError(types.ErrorData(code=types.INVALID_PARAMS, message=error.message))
        return await handle_call_tool(request)

    server.request_handlers[types.CallToolRequest] = checked_call_tool

    @server.list_resources()
    async def list_resources() -> List[types.Resource]:
        return [
            types.Resource(
                uri=resource.uri,
                name=resource.name,
                description=resource.description,
                mimeType=resource.mime_type
            )
            for resource in dispatcher.list_resources()
        ]

    @server.read_resource()
    async def read_resource(uri: AnyUrl) -> List[ReadResourceContents]:
        text = dispatcher.read_resource(str(uri))
        return [ReadResourceContents(content=text, mime_type="text/plain")]

    return server


def create_server(config: Config, extractor=None) -> Server:
    """
    Load the configured document and build the server around it.

    A document that fails to load is logged and the server is built
    without one.
    """
    if extractor is None:
        extractor = PDFExtractor(
            primary_backend=config.extraction.primary_backend,
            fallback_backend=config.extraction.fallback_backend
        )

    document = load_document(config.document.pdf_path, extractor)

    dispatcher = RequestDispatcher(
        document,
        query_config=config.query,
        structured_errors=config.server.structured_errors,
        resource_uri=config.server.resource_uri
    )

    return build_server(dispatcher, config.server.name, config.server.version)


async def serve(server: Server) -> None:
    """Run the server over stdin/stdout until the client disconnects."""
    async with stdio_server() as (read_stream, write_stream):
        logger.info("PDF Reader MCP Server started")
        await server.run(read_stream, write_stream, server.create_initialization_options())


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Serve a PDF document's text to MCP clients over stdio"
    )

    parser.add_argument(
        "--pdf",
        type=str,
        help="Path to the PDF to serve (overrides PDF_PATH and config)"
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to custom config.json file"
    )

    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured log level"
    )

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point.

    Returns:
        0 on clean shutdown, 1 if configuration or the transport fails.
    """
    args = parse_args(argv)

    try:
        config = get_config(Path(args.config) if args.config else None)
    except ConfigurationError as e:
        setup_logging()
        logger.error(f"Configuration error: {e.message}")
        return 1

    if args.pdf:
        config.document.pdf_path = Path(args.pdf).expanduser()

    setup_logging(
        log_level=args.log_level or config.logging.level,
        log_format=config.logging.format,
        logs_directory=config.logging.logs_directory,
        max_file_size_mb=config.logging.max_file_size_mb,
        backup_count=config.logging.backup_count,
        force=True
    )

    try:
        server = create_server(config)
    except ExtractionError as e:
        logger.error(f"Configuration error: {e.message}")
        return 1

    try:
        asyncio.run(serve(server))
    except KeyboardInterrupt:
        logger.info("PDF Reader MCP Server stopped")
    except Exception:
        logger.exception("Failed to start server")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
