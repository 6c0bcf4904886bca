from typing import List, Optional

import httpx

from ...config import Settings
from ...errors import NetworkError, ProviderError
from ...logger import log
from .models import DEFAULT_RESULTS, SearchItem, parse_search_response

GOOGLE_SEARCH_URL = "https://www.googleapis.com/customsearch/v1"
MIN_RESULTS = 1
MAX_RESULTS = 10


def clamp_result_count(num: int) -> int:
    return max(MIN_RESULTS, min(num, MAX_RESULTS))

class GoogleSearchClient:
    """
    Thin wrapper around the Google Custom Search JSON API.

    One GET per call, no retries and no caching.
    """

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.api_key = settings.GOOGLE_SEARCH_API_KEY
        self.cse_id = settings.GOOGLE_CSE_ID
        self.timeout = settings.SEARCH_TIMEOUT_SECONDS
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        kwargs = {"transport": self.transport}
        if self.timeout is not None:
            kwargs["timeout"] = httpx.Timeout(self.timeout)
        return httpx.AsyncClient(**kwargs)

    async def search(self, query: str, num: int = DEFAULT_RESULTS) -> List[SearchItem]:
        """
        Run a web search.

        Args:
            query: Search text
            num: Requested number of results, clamped to 1..10

        Returns:
            List[SearchItem]: Items in provider order. Empty when the provider
            returned no items or a payload of unexpected shape.

        Raises:
            ProviderError: Non-success status or a body that is not JSON
            NetworkError: The provider could not be reached
        """
        params = {
            "key": self.api_key,
            "cx": self.cse_id,
            "q": query,
            "num": str(clamp_result_count(num)),
        }

        try:
            async with self._client() as client:
                response = await client.get(
                    GOOGLE_SEARCH_URL,
                    params=params,
                    headers={"Content-Type": "application/json"},
                )
        except httpx.RequestError as e:
            log.error(f"Search error: {e}", extra={"error_type": type(e).__name__})
            raise NetworkError(f"Failed to reach Google Search API: {e}") from e

        if not response.is_success:
            err = ProviderError(response.status_code, response.reason_phrase, response.text)
            log.error(f"Search error: {err}")
            raise err

        try:
            data = response.json()
        except ValueError as e:
            log.error(f"Search error: invalid JSON from Google Search API: {e}")
            raise ProviderError(
                response.status_code,
                response.reason_phrase,
                response.text,
                message=f"Google Search API returned invalid JSON (status {response.status_code})",
            ) from e

        parsed = parse_search_response(data)
        if not parsed.success:
            log.error(f"Failed to parse API response: {parsed.error}")
            return []

        items = parsed.data.items or []
        log.info("Search completed", extra={"results_count": len(items)})
        return items
