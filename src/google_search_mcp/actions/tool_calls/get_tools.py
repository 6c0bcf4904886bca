from typing import List

from mcp.types import Tool

SEARCH_TOOL_DESCRIPTION = (
    "Performs a web search using the Google Search API, ideal for general queries, "
    "news, articles, and online content. Use this for broad information gathering, "
    "recent events, or when you need diverse web sources."
)

def get_default_tools() -> List[Tool]:
    """
    Tools advertised through tools/list. Static, one entry.
    """
    tools = [
        Tool(
            name="search",
            description=SEARCH_TOOL_DESCRIPTION,
            inputSchema={
                "type": "object",
                "properties": {
                    "query": {"type": "string", "description": "Search query"},
                    "num": {
                        "type": "integer",
                        "description": "Number of results to return (1-10, default: 5)",
                        "minimum": 1,
                        "maximum": 10,
                        "default": 5,
                    },
                },
                "required": ["query"],
            },
        )
    ]
    return tools
