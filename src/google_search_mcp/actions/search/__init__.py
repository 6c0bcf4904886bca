from .client import GoogleSearchClient, clamp_result_count
from .search import SearchHandler, format_search_results

__all__ = ["GoogleSearchClient", "SearchHandler", "clamp_result_count", "format_search_results"]
