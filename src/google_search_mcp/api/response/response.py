from typing import Any, Optional

JSONRPC_VERSION = "2.0"
INTERNAL_ERROR = -32603
SERVER_ERROR = -32000


def ok(data: dict = None):
    return data or dict(status="ok")


def error(error: str = "Internal Server Error", message: str = "An internal server error occurred"):
    return dict(error=error, message=message)


def jsonrpc_error(code: int, message: str, id: Optional[Any] = None):
    return dict(
        jsonrpc=JSONRPC_VERSION,
        error=dict(
            code=code,
            message=message,
        ),
        id=id,
    )


def unexpect_error():
    return jsonrpc_error(INTERNAL_ERROR, "Internal server error")
