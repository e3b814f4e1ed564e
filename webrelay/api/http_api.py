"""
HTTP API adapter for webrelay.

Architectural role:
- Expose `POST /search` and `POST /scrape` over JSON.
- Enforce adapter-level input validation before any outbound call.
- Delegate the outbound GET to `webrelay.jina.client.JinaClient`.
- Map results and errors to JSON response contracts.

API request lifecycle (both endpoints):
1. Optional `X-API-Key` check (`webrelay.api.auth.require_api_key`).
2. Parse request JSON; a non-object body is rejected.
3. Validate the required field is a non-empty string.
4. Run the blocking client call in the worker threadpool.
5. Return `{content, <field>}`.

Input validation behavior:
- Unparseable body, non-object body, or non-string field -> HTTP 400
  `{"error": "invalid request"}`.
- Missing/empty `question` -> HTTP 400 `{"error": "question is required"}`.
- Missing/empty `url` -> HTTP 400 `{"error": "url is required"}`.

Error handling strategy:
- `ValidationError` -> 400, `AuthenticationError` -> 401,
  `DispatchError` -> 500, each as `{"error": <message>}`.
- Anything else follows FastAPI default exception handling.
"""

import logging
from functools import lru_cache
from typing import Any

from fastapi import Depends, FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from webrelay import __version__
from webrelay.api.auth import require_api_key
from webrelay.api.schemas import (
    ErrorResponse,
    ScrapeRequest,
    ScrapeResponse,
    SearchRequest,
    SearchResponse,
)
from webrelay.errors import AuthenticationError, DispatchError, ValidationError
from webrelay.jina.client import JinaClient
from webrelay.jina.config import JinaConfig


logger = logging.getLogger(__name__)

app = FastAPI(title="webrelay", version=__version__)

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    401: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@lru_cache(maxsize=1)
def get_jina_client() -> JinaClient:
    """Return the process-wide forwarding client (config read once)."""
    return JinaClient(JinaConfig.from_env())


# ============================================================
# Error mapping
# ============================================================

@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(status_code=400, content={"error": str(exc)})


@app.exception_handler(AuthenticationError)
async def authentication_error_handler(request: Request, exc: AuthenticationError):
    return JSONResponse(status_code=401, content={"error": str(exc)})


@app.exception_handler(DispatchError)
async def dispatch_error_handler(request: Request, exc: DispatchError):
    return JSONResponse(status_code=500, content={"error": str(exc)})


# ============================================================
# Request parsing helpers
# ============================================================

async def read_json_object(request: Request) -> dict:
    """Parse the request body as a JSON object or raise `ValidationError`."""
    try:
        body = await request.json()
    except ValueError:
        raise ValidationError("invalid request")
    if not isinstance(body, dict):
        raise ValidationError("invalid request")
    return body


def required_text(body: dict, field: str) -> str:
    """
    Return `body[field]` when it is a non-empty string.

    Missing, `null` or empty values are reported as `"<field> is required"`;
    values of any other JSON type are reported as an invalid request.
    """
    value: Any = body.get(field)
    if value is None or value == "":
        raise ValidationError(f"{field} is required")
    if not isinstance(value, str):
        raise ValidationError("invalid request")
    return value


# ============================================================
# Endpoints
# ============================================================

@app.post(
    "/search",
    response_model=SearchResponse,
    responses=ERROR_RESPONSES,
    dependencies=[Depends(require_api_key)],
    tags=["websearch"],
)
async def search(request: Request, client: JinaClient = Depends(get_jina_client)):
    """Search the web using Jina AI and return clean, LLM-friendly results."""
    body = await read_json_object(request)
    search_request = SearchRequest(question=required_text(body, "question"))

    logger.info("Search requested")
    content = await run_in_threadpool(client.scrape_question, search_request.question)

    return SearchResponse(content=content, question=search_request.question)


@app.post(
    "/scrape",
    response_model=ScrapeResponse,
    responses=ERROR_RESPONSES,
    dependencies=[Depends(require_api_key)],
    tags=["websearch"],
)
async def scrape(request: Request, client: JinaClient = Depends(get_jina_client)):
    """Scrape a webpage using Jina AI's reader and return its main text."""
    body = await read_json_object(request)
    scrape_request = ScrapeRequest(url=required_text(body, "url"))

    logger.info("Scrape requested for %s", scrape_request.url)
    content = await run_in_threadpool(client.scrape_url, scrape_request.url)

    return ScrapeResponse(content=content, url=scrape_request.url)
