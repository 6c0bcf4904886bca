from typing import List

from fastapi import Request
from fastapi.responses import JSONResponse
from mcp.server.streamable_http import MAXIMUM_MESSAGE_SIZE
from starlette.datastructures import Headers
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from .api.response.response import error
from .logger import log

# Same cap as the MCP transport, so its plain-text 413 is never reached
MAX_BODY_BYTES = MAXIMUM_MESSAGE_SIZE


class BodySizeLimitMiddleware:
    """
    Buffer the request body and answer 413 once it passes `max_body_bytes`.

    Declared sizes are rejected from `Content-Length` before reading;
    chunked uploads are counted as they arrive. Accepted bodies are replayed
    to the app as a single message.
    """

    def __init__(self, app: ASGIApp, max_body_bytes: int = MAX_BODY_BYTES):
        self.app = app
        self.max_body_bytes = max_body_bytes

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        content_length = Headers(scope=scope).get("content-length")
        if content_length is not None:
            try:
                declared = int(content_length)
            except ValueError:
                response = JSONResponse(status_code=400, content=error("Bad Request", "Invalid Content-Length header"))
                await response(scope, receive, send)
                return
            if declared > self.max_body_bytes:
                await self._reject(scope, receive, send, declared)
                return

        chunks: List[bytes] = []
        size = 0
        more_body = True
        while more_body:
            message = await receive()
            if message["type"] == "http.disconnect":
                return
            chunk = message.get("body", b"")
            size += len(chunk)
            if size > self.max_body_bytes:
                await self._reject(scope, receive, send, size)
                return
            chunks.append(chunk)
            more_body = message.get("more_body", False)

        body = b"".join(chunks)
        replayed = False

        async def replay() -> Message:
            nonlocal replayed
            if not replayed:
                replayed = True
                return {"type": "http.request", "body": body, "more_body": False}
            return await receive()

        await self.app(scope, replay, send)

    async def _reject(self, scope: Scope, receive: Receive, send: Send, size: int) -> None:
        log.warning("Request body too large", extra={"size": size, "path": scope.get("path")})
        response = JSONResponse(
            status_code=413,
            content=error("Payload Too Large", f"Request body exceeds {self.max_body_bytes} bytes"),
        )
        await response(scope, receive, send)


async def log_requests(request: Request, call_next):
    log.info(f"{request.method} {request.url.path}")
    return await call_next(request)
