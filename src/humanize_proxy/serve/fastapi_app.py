"""FastAPI front for the humanize proxy.

Every path is served by the same handler:
- OPTIONS *  -> 200, empty body (pre-flight)
- POST *     { "inputText": "..." } -> { "humanizedText": "..." } | { "error": "..." }
- anything else -> 405
"""
from __future__ import annotations
import json
import logging
import os

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse, Response
from starlette.concurrency import run_in_threadpool
from starlette.exceptions import HTTPException as StarletteHTTPException

from humanize_proxy.common.config import load_config
from humanize_proxy.common.logging_setup import setup_logging
from humanize_proxy.common.schema import CORS_HEADERS, ErrorOut, ProxyRequest, ProxyResponse
from humanize_proxy.serve.proxy import Transport, handle

LOGGER = logging.getLogger("humanize.app")
setup_logging()

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

app = FastAPI(title="Humanize Proxy")

@app.on_event("startup")
def _check_config_on_startup() -> None:
    """Warn early about a missing key or unreadable config; requests still get a JSON error."""
    if not os.getenv("OPENAI_API_KEY"):
        LOGGER.warning("OPENAI_API_KEY is not set; humanize requests will fail with 500")
    try:
        cfg = load_config()
        LOGGER.info("Using model %s (temperature=%s, max_tokens=%s)", cfg.model, cfg.temperature, cfg.max_tokens)
    except Exception as e:
        LOGGER.warning("Failed to read humanizer config: %s", e)

def get_transport() -> Transport | None:
    """Override point for tests. None lets handle() build an httpx transport from the config."""
    return None

def _decode_body(raw: bytes) -> object:
    if not raw:
        return None
    try:
        return json.loads(raw)
    except ValueError:
        LOGGER.debug("Request body is not valid JSON")
        return None

def _to_response(out: ProxyResponse) -> Response:
    if out.body is None:
        return Response(status_code=out.status_code, headers=out.headers)
    return JSONResponse(status_code=out.status_code, content=out.body, headers=out.headers)

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> Response:
    # Methods outside ALL_METHODS (TRACE, PROPFIND, ...) are rejected by routing
    # before reaching the route; hand them to the same handler.
    if exc.status_code == 405:
        return _to_response(handle(ProxyRequest(method=request.method), load_config))
    return JSONResponse(status_code=exc.status_code, content=ErrorOut(error=str(exc.detail)).model_dump(), headers=dict(CORS_HEADERS))

@app.api_route("/{path:path}", methods=ALL_METHODS)
async def humanize(request: Request, transport: Transport | None = Depends(get_transport)) -> Response:
    raw = await request.body()
    proxy_request = ProxyRequest(method=request.method, body=_decode_body(raw))
    # handle() blocks on the upstream call; keep it off the event loop.
    out = await run_in_threadpool(handle, proxy_request, load_config, transport)
    return _to_response(out)
