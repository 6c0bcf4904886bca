import json
from typing import Any, Dict, List

from mcp.types import CallToolResult, TextContent

from ...errors import InvalidArgumentsError
from ...logger import log
from ..models import ToolArguments
from .client import GoogleSearchClient
from .models import SearchItem, parse_search_arguments

def _drop_none(d: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in d.items() if v is not None}

def format_search_results(query: str, items: List[SearchItem]) -> Dict[str, Any]:
    """Reshape provider items into the compact records returned to the caller."""
    results = []
    for item in items:
        meta = item.first_metatags
        metadata = {}
        if meta is not None:
            metadata = _drop_none({
                "ogTitle": meta.og_title,
                "ogDescription": meta.og_description,
                "ogImage": meta.og_image,
            })
        results.append(_drop_none({
            "title": item.title,
            "url": item.link,
            "snippet": item.snippet,
            "metadata": metadata,
        }))

    return {
        "query": query,
        "resultsCount": len(results),
        "results": results,
    }

def error_result(text: str) -> CallToolResult:
    return CallToolResult(content=[TextContent(type="text", text=text)], isError=True)

class SearchHandler:
    """
    Handler behind the `search` tool.

    Provider and network failures come back as an error result, never as
    an exception.
    """

    def __init__(self, search_client: GoogleSearchClient):
        self.search_client = search_client

    async def __call__(self, arguments: ToolArguments) -> CallToolResult:
        try:
            args = parse_search_arguments(arguments)
        except InvalidArgumentsError as e:
            log.warning(str(e))
            return error_result(str(e))

        try:
            items = await self.search_client.search(args.query, args.num)
        except Exception as e:
            log.error(f"Search tool failed: {e}", extra={"error_type": type(e).__name__})
            return error_result(f"Search error: {e}")

        payload = format_search_results(args.query, items)
        return CallToolResult(
            content=[TextContent(type="text", text=json.dumps(payload, indent=2, ensure_ascii=False))],
        )
