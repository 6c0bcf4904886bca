from contextlib import asynccontextmanager
from http import HTTPStatus
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.routing import Route

from . import __version__
from .actions.dispatcher import ToolDispatcher
from .actions.search.client import GoogleSearchClient
from .api import router as api_router
from .api.response.response import ok, error
from .api.transport import McpTransportApp, build_mcp_server, build_session_manager
from .config import Settings
from .logger import log
from .middleware import BodySizeLimitMiddleware, log_requests


def create_app(settings: Settings, search_client: Optional[GoogleSearchClient] = None) -> FastAPI:
    """
    Build the HTTP application around one MCP server instance.

    A session manager can only be run once, so every app gets its own.
    """
    if search_client is None:
        search_client = GoogleSearchClient(settings)
    dispatcher = ToolDispatcher(search_client)
    mcp_server = build_mcp_server(dispatcher)
    session_manager = build_session_manager(mcp_server)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        async with session_manager.run():
            log.info("MCP server connected to transport")
            yield
        log.info("MCP transport stopped")

    app = FastAPI(title="google-search-mcp", version=__version__, lifespan=lifespan)
    app.state.settings = settings

    app.add_middleware(BodySizeLimitMiddleware)
    if settings.is_development:
        app.middleware("http")(log_requests)

    # Raw ASGI endpoint, the transport writes its own response
    app.router.routes.append(Route("/mcp", endpoint=McpTransportApp(session_manager), methods=["POST"]))
    app.include_router(api_router)

    @app.get("/")
    async def root():
        # Deliberately minimal, no configuration details
        return ok()

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        # A known path with an unsupported verb is reported like any unmatched route
        if exc.status_code in (404, 405):
            return JSONResponse(status_code=404, content=error("Not Found", "The requested resource was not found"))

        try:
            phrase = HTTPStatus(exc.status_code).phrase
        except ValueError:
            phrase = "Error"
        return JSONResponse(
            status_code=exc.status_code,
            content=error(phrase, str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )

    # Custom global error handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """
        Handle all uncaught exceptions globally.
        """
        log.error(f"Unhandled exception: {exc}", exc_info=exc)
        message = str(exc) if settings.is_development else "An internal server error occurred"
        return JSONResponse(status_code=500, content=error("Internal Server Error", message))

    return app
