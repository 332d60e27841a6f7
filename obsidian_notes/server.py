"""MCP server initialization: tool and resource handlers over stdio."""

from __future__ import annotations

import logging

from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError
from pydantic import AnyUrl

from obsidian_notes.config import ServerSettings
from obsidian_notes.constants import MARKDOWN_MIME_TYPE
from obsidian_notes.core.resource_operations import ResourceCatalog
from obsidian_notes.dispatcher import OperationDispatcher
from obsidian_notes.exceptions import NoteVaultError, OperationNotFoundError

logger = logging.getLogger(__name__)

SERVER_NAME = "obsidian-mcp-server"


def build_server(
    dispatcher: OperationDispatcher,
    catalog: ResourceCatalog,
    version: str | None = None,
) -> Server:
    """Create the MCP server and register all request handlers.

    Tool calls are routed to ``dispatcher``; an unknown tool name is answered
    with a JSON-RPC ``METHOD_NOT_FOUND`` error rather than an error result.
    """
    server: Server = Server(SERVER_NAME, version=version)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return [
            types.Tool(
                name=op.name,
                description=op.description,
                inputSchema=op.input_schema(),
            )
            for op in dispatcher.operations
        ]

    # Registered directly: the decorator form turns every exception into an
    # error result, which would hide unknown tool names.
    async def call_tool(request: types.CallToolRequest) -> types.ServerResult:
        try:
            result = await dispatcher.dispatch(request.params.name, request.params.arguments)
        except OperationNotFoundError as exc:
            raise McpError(types.ErrorData(code=types.METHOD_NOT_FOUND, message=str(exc))) from exc

        return types.ServerResult(
            types.CallToolResult(
                content=[types.TextContent(type="text", text=result.text)],
                isError=result.is_error,
            )
        )

    server.request_handlers[types.CallToolRequest] = call_tool

    @server.list_resources()
    async def list_resources() -> list[types.Resource]:
        return [
            types.Resource(**entry.as_payload())
            for entry in catalog.list_resources()
        ]

    @server.read_resource()
    async def read_resource(uri: AnyUrl) -> list[ReadResourceContents]:
        try:
            text = catalog.read_resource(str(uri))
        except NoteVaultError as exc:
            raise McpError(types.ErrorData(code=types.INVALID_PARAMS, message=str(exc))) from exc
        return [ReadResourceContents(content=text, mime_type=MARKDOWN_MIME_TYPE)]

    return server


async def run_server(settings: ServerSettings, version: str | None = None) -> None:
    """Serve the vault described by ``settings`` over stdio until the client disconnects."""
    dispatcher = OperationDispatcher(settings)
    catalog = ResourceCatalog(settings.vault, settings.exclude_patterns)
    server = build_server(dispatcher, catalog, version=version)

    logger.info("Starting Obsidian MCP Server for vault: %s", settings.vault.path)
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())
