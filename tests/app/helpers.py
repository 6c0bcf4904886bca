from typing import Any, Dict, List, Optional

from google_search_mcp.config import Settings

MCP_HEADERS = {
    "Accept": "application/json, text/event-stream",
    "Content-Type": "application/json",
}

def make_settings(**overrides) -> Settings:
    values = {
        "GOOGLE_SEARCH_API_KEY": "test-api-key",
        "GOOGLE_CSE_ID": "test-cse-id",
        "PORT": 3000,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)

def google_item(n: int, with_meta: bool = True) -> Dict[str, Any]:
    item = {
        "kind": "customsearch#result",
        "title": f"Result {n}",
        "link": f"https://example.com/{n}",
        "snippet": f"Snippet for result {n}",
        "displayLink": "example.com",
    }
    if with_meta:
        item["pagemap"] = {
            "metatags": [
                {
                    "og:title": f"OG title {n}",
                    "og:description": f"OG description {n}",
                    "og:image": f"https://example.com/{n}.png",
                    "viewport": "width=device-width",
                },
                {"og:title": "second metatag entry is ignored"},
            ]
        }
    return item

def google_response(count: int, with_meta: bool = True) -> Dict[str, Any]:
    return {
        "kind": "customsearch#search",
        "searchInformation": {"totalResults": str(count)},
        "items": [google_item(i, with_meta) for i in range(1, count + 1)],
    }

def rpc(method: str, params: Optional[Dict[str, Any]] = None, id: int = 1) -> Dict[str, Any]:
    body = {"jsonrpc": "2.0", "id": id, "method": method}
    if params is not None:
        body["params"] = params
    return body

def call_search(arguments: Dict[str, Any], id: int = 1, name: str = "search") -> Dict[str, Any]:
    return rpc("tools/call", {"name": name, "arguments": arguments}, id=id)

def text_blocks(result: Dict[str, Any]) -> List[str]:
    return [block["text"] for block in result["content"] if block["type"] == "text"]
