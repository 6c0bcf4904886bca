from typing import List

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.streamable_http_manager import StreamableHTTPSessionManager
from mcp.shared.exceptions import McpError
from starlette.types import Message, Receive, Scope, Send

from .. import __version__
from ..actions.dispatcher import ToolDispatcher
from ..actions.tool_calls import get_default_tools
from ..errors import UnknownToolError
from ..logger import log
from .response.response import SERVER_ERROR, jsonrpc_error, unexpect_error

SERVER_NAME = "google-search-mcp"

router = APIRouter(tags=["mcp"])


def build_mcp_server(dispatcher: ToolDispatcher) -> Server:
    """
    Create the MCP server exposing the registered tools.

    tools/call is registered on `request_handlers` directly so an unknown
    tool name surfaces as a JSON-RPC error instead of a tool error result.
    """
    server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return get_default_tools()

    async def call_tool(req: types.CallToolRequest) -> types.ServerResult:
        try:
            result = await dispatcher.handle(req.params.name, req.params.arguments)
        except UnknownToolError as e:
            raise McpError(types.ErrorData(code=types.INVALID_PARAMS, message=str(e))) from e
        return types.ServerResult(result)

    server.request_handlers[types.CallToolRequest] = call_tool
    return server


def build_session_manager(server: Server) -> StreamableHTTPSessionManager:
    # No session ids, plain JSON responses instead of SSE streams
    return StreamableHTTPSessionManager(
        app=server,
        json_response=True,
        stateless=True,
    )


class McpTransportApp:
    """ASGI endpoint handing POST /mcp bodies to the streamable HTTP transport."""

    def __init__(self, session_manager: StreamableHTTPSessionManager):
        self.session_manager = session_manager

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        response_started = False

        async def tracking_send(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.session_manager.handle_request(scope, receive, tracking_send)
        except Exception as e:
            log.error(f"MCP request handling error: {e}", exc_info=True)
            if not response_started:
                response = JSONResponse(status_code=500, content=unexpect_error())
                await response(scope, receive, send)


@router.get("/mcp")
async def mcp_get():
    return JSONResponse(
        status_code=405,
        content=jsonrpc_error(SERVER_ERROR, "Method not allowed. Use POST for Streamable HTTP."),
    )


@router.delete("/mcp")
async def mcp_delete():
    return JSONResponse(
        status_code=405,
        content=jsonrpc_error(
            SERVER_ERROR,
            "Method not allowed. Stateless server does not support session termination.",
        ),
    )
