from typing import Dict, Any, cast

from .models import ToolHandler
from .search.client import GoogleSearchClient

def validate_handler(handler: Any) -> ToolHandler:
    if not callable(handler):
        raise TypeError(f"Handler must be callable: {handler}")
    return cast(ToolHandler, handler)

def get_tool_registry(search_client: GoogleSearchClient) -> Dict[str, ToolHandler]:
    from .search import SearchHandler

    registry = {
        "search": validate_handler(SearchHandler(search_client)),
    }

    return registry
