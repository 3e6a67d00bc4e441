"""Pydantic models and dataclasses for request/response types."""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

class HumanizeIn(BaseModel):
    model_config = ConfigDict(extra="ignore")

    inputText: str | None = None

class HumanizeOut(BaseModel):
    humanizedText: str

class ErrorOut(BaseModel):
    error: str

class ChatMessage(BaseModel):
    model_config = ConfigDict(extra="ignore")

    role: str | None = None
    content: str | None = None

class Choice(BaseModel):
    model_config = ConfigDict(extra="ignore")

    message: ChatMessage | None = None

class ChatCompletion(BaseModel):
    """Upstream chat-completions reply; only the first choice is read."""
    model_config = ConfigDict(extra="ignore")

    choices: list[Choice | None]

    def first_content(self) -> str:
        first = self.choices[0] if self.choices else None
        if first is None or first.message is None:
            return ""
        return first.message.content or ""

@dataclass
class ProxyRequest:
    """Inbound request as seen by the handler; body is decoded JSON or None."""
    method: str
    body: Any = None

@dataclass
class ProxyResponse:
    status_code: int
    body: dict[str, Any] | None = None
    headers: dict[str, str] = field(default_factory=lambda: dict(CORS_HEADERS))
