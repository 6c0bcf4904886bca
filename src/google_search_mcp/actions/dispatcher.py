from typing import Dict, Optional

from mcp.types import CallToolResult

from ..errors import UnknownToolError
from ..logger import log
from .models import ToolArguments, ToolHandler
from .registry import get_tool_registry
from .search.client import GoogleSearchClient

class ToolDispatcher:
    """Routes a tool invocation to its registered handler."""

    def __init__(self, search_client: GoogleSearchClient, registry: Optional[Dict[str, ToolHandler]] = None):
        self.registry = registry if registry is not None else get_tool_registry(search_client)

    async def handle(self, name: str, arguments: Optional[ToolArguments] = None) -> CallToolResult:
        handler = self.registry.get(name)
        if handler is None:
            log.warning("Unknown tool requested", extra={"tool": name})
            raise UnknownToolError(name)

        log.info("Tool invoked", extra={"tool": name})
        return await handler(arguments or {})
