from typing import Optional


class SearchServerError(Exception):
    """Base class for errors raised by the search server."""


class ConfigurationError(SearchServerError):
    """Startup configuration is missing or invalid. Fatal."""


class ProviderError(SearchServerError):
    """The search provider answered with a non-success status or an unreadable body."""

    def __init__(self, status_code: int, reason: str = "", body: str = "", message: Optional[str] = None):
        self.status_code = status_code
        self.reason = reason
        self.body = body
        super().__init__(message or f"Google Search API error: {status_code} {reason} - {body}")


class NetworkError(SearchServerError):
    """The search provider could not be reached (DNS, connect, timeout, reset)."""


class SchemaValidationError(SearchServerError):
    """The provider response does not match the expected shape."""


class UnknownToolError(SearchServerError):
    def __init__(self, tool_name: str):
        self.tool_name = tool_name
        super().__init__(f"Unknown tool: {tool_name}")


class InvalidArgumentsError(SearchServerError):
    """Tool arguments do not match the declared input schema."""
