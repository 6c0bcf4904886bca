from typing import Any, Dict, Protocol

from mcp.types import CallToolResult

ToolArguments = Dict[str, Any]

class ToolHandler(Protocol):
    async def __call__(self, arguments: ToolArguments) -> CallToolResult:
        ...
