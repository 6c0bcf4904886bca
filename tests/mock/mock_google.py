from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from tests.app.helpers import google_response

app = FastAPI()

VALID_KEY = "test-api-key"

@app.get("/customsearch/v1")
async def custom_search(request: Request):
    params = request.query_params
    if params.get("key") != VALID_KEY:
        return JSONResponse(
            status_code=403,
            content={"error": {"code": 403, "message": "The request is missing a valid API key.", "status": "PERMISSION_DENIED"}},
        )

    query = params.get("q", "")
    if query == "broken-json":
        return PlainTextResponse("<html>not json</html>")
    if query == "no-results":
        return JSONResponse(content={"kind": "customsearch#search", "searchInformation": {"totalResults": "0"}})

    num = int(params.get("num", "10"))
    return JSONResponse(content=google_response(num))
