import asyncio
import logging
import os
import signal
import sys

import uvicorn

from .config import load_settings
from .errors import ConfigurationError
from .logger import LOGGING_CONFIG, log
from .main import create_app


def handle_loop_exception(loop: asyncio.AbstractEventLoop, context: dict) -> None:
    exc = context.get("exception")
    if exc is None:
        loop.default_exception_handler(context)
        return

    # No drain, no recovery
    log.critical(f"Unhandled asynchronous error: {context.get('message', exc)}", exc_info=exc)
    logging.shutdown()
    os._exit(1)


def log_uncaught_exception(exc_type, exc, tb) -> None:
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc, tb)
        return
    log.critical(f"Uncaught exception: {exc}", exc_info=(exc_type, exc, tb))


class SearchServer(uvicorn.Server):
    """
    uvicorn server with the process lifecycle of the search service.

    On SIGTERM/SIGINT uvicorn stops accepting connections and waits for
    in-flight requests before `run()` returns.
    """

    received_signal = None

    def handle_exit(self, sig, frame) -> None:
        # Signals are not re-raised after shutdown so the process exits 0
        self.received_signal = signal.Signals(sig).name
        log.info(f"Received {self.received_signal} signal. Shutting down server...")
        if self.should_exit and sig == signal.SIGINT:
            self.force_exit = True
        else:
            self.should_exit = True

    async def serve(self, sockets=None) -> None:
        asyncio.get_running_loop().set_exception_handler(handle_loop_exception)
        await super().serve(sockets)

    async def startup(self, sockets=None) -> None:
        await super().startup(sockets)
        if self.started:
            log.info(f"google-search-mcp server started (port: {self.config.port})")


def main() -> int:
    """Run the server until it is told to stop. Returns the process exit code."""
    sys.excepthook = log_uncaught_exception
    log.info("Starting google-search-mcp server")

    try:
        settings = load_settings()
    except ConfigurationError as e:
        log.error(f"Server startup error: {e}")
        return 1

    config = uvicorn.Config(
        create_app(settings),
        host=settings.HOST,
        port=settings.PORT,
        log_config=LOGGING_CONFIG,
        log_level="info",
    )
    server = SearchServer(config)

    try:
        server.run()
    except Exception as e:
        log.error(f"Server shutdown error: {e}", exc_info=True)
        return 1

    if not server.started:
        log.error("Server failed to start")
        return 1

    log.info("Server shut down gracefully")
    return 0
