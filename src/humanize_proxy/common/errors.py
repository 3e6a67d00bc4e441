"""Errors raised inside the handler and mapped to client-facing JSON."""
from __future__ import annotations

class ProxyError(Exception):
    """Base error carrying the HTTP status and the message shown to the client."""
    status_code = 500
    message = "Failed to humanize content"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)

class MethodNotAllowedError(ProxyError):
    status_code = 405
    message = "Method not allowed"

class InputRequiredError(ProxyError):
    status_code = 400
    message = "Input text is required"

class MissingCredentialError(ProxyError):
    message = "OpenAI API key not configured"

class UpstreamAuthError(ProxyError):
    message = "Invalid API key configuration"

class UpstreamStatusError(ProxyError):
    def __init__(self, upstream_status: int) -> None:
        self.upstream_status = upstream_status
        super().__init__(f"OpenAI API error: {upstream_status}")
