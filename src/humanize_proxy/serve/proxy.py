"""Humanize request handler.

handle(request, config, transport) validates the inbound request, sends one
chat-completions call upstream and maps the outcome to a ProxyResponse.
The transport is injected so tests can run without a network.
"""
from __future__ import annotations
import logging
from typing import Any, Callable, Protocol

import httpx
from pydantic import ValidationError

from humanize_proxy.common.config import DEFAULT_TIMEOUT, ProxyConfig
from humanize_proxy.common.errors import (
    InputRequiredError,
    MethodNotAllowedError,
    MissingCredentialError,
    ProxyError,
    UpstreamAuthError,
    UpstreamStatusError,
)
from humanize_proxy.common.schema import (
    ChatCompletion,
    ErrorOut,
    HumanizeIn,
    HumanizeOut,
    ProxyRequest,
    ProxyResponse,
)
from humanize_proxy.common.templates import build_messages

LOGGER = logging.getLogger("humanize.proxy")

FALLBACK_ERROR = "Failed to humanize content"

class UpstreamResponse(Protocol):
    status_code: int

    @property
    def text(self) -> str: ...

    def json(self) -> Any: ...

Transport = Callable[[str, dict[str, str], dict[str, Any]], UpstreamResponse]
ConfigSource = ProxyConfig | Callable[[], ProxyConfig]

class HttpxTransport:
    """Default transport: one httpx.Client per call, no retries."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.timeout = timeout

    def __call__(self, url: str, headers: dict[str, str], payload: dict[str, Any]) -> httpx.Response:
        with httpx.Client(timeout=self.timeout) as client:
            return client.post(url, headers=headers, json=payload)

def _read_input(body: Any) -> str:
    """Return the trimmed inputText or raise InputRequiredError."""
    if not isinstance(body, dict):
        raise InputRequiredError()
    try:
        data = HumanizeIn.model_validate(body)
    except ValidationError:
        raise InputRequiredError()
    text = (data.inputText or "").strip()
    if not text:
        raise InputRequiredError()
    return text

def build_payload(config: ProxyConfig, text: str) -> dict[str, Any]:
    return {
        "model": config.model,
        "messages": build_messages(config.system_prompt, config.user_template, text),
        "temperature": config.temperature,
        "max_tokens": config.max_tokens,
    }

def _log_upstream_error(resp: UpstreamResponse) -> None:
    try:
        detail: Any = resp.json()
    except Exception:
        detail = resp.text
    LOGGER.error("OpenAI API error %s: %s", resp.status_code, detail)

def _humanize(request: ProxyRequest, source: ConfigSource, transport: Transport | None) -> ProxyResponse:
    method = request.method.upper()
    if method == "OPTIONS":
        return ProxyResponse(status_code=200)
    if method != "POST":
        raise MethodNotAllowedError()

    text = _read_input(request.body)
    config = source() if callable(source) else source

    if not config.api_key:
        raise MissingCredentialError()

    headers = {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {config.api_key}",
    }
    payload = build_payload(config, text)
    if transport is None:
        transport = HttpxTransport(timeout=config.timeout)

    LOGGER.info("Making request to OpenAI API (model=%s, chars=%d)", config.model, len(text))
    resp = transport(config.completions_url, headers, payload)
    LOGGER.info("Response status: %s", resp.status_code)

    if not 200 <= resp.status_code < 300:
        _log_upstream_error(resp)
        if resp.status_code == 401:
            raise UpstreamAuthError()
        raise UpstreamStatusError(resp.status_code)

    completion = ChatCompletion.model_validate(resp.json())
    out = HumanizeOut(humanizedText=completion.first_content())
    return ProxyResponse(status_code=200, body=out.model_dump())

def handle(request: ProxyRequest, config: ConfigSource, transport: Transport | None = None) -> ProxyResponse:
    """
    Handle one humanize request.

    Never raises: every failure becomes a JSON error with a non-2xx status,
    and every response carries the CORS headers.

    Args:
        request: Method and decoded JSON body.
        config: Prompt, generation parameters and API key, or a loader for them.
            A loader runs only for POST requests with usable input.
        transport: Callable performing the single upstream POST; defaults to
            HttpxTransport built from config.timeout.
    """
    try:
        return _humanize(request, config, transport)
    except ProxyError as e:
        if e.status_code >= 500:
            LOGGER.error("Humanize failed: %s", e.message)
        return ProxyResponse(status_code=e.status_code, body=ErrorOut(error=e.message).model_dump())
    except Exception as e:
        LOGGER.exception("Error humanizing content")
        message = str(e) or FALLBACK_ERROR
        return ProxyResponse(status_code=500, body=ErrorOut(error=message).model_dump())
