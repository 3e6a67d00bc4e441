"""Proxy configuration: YAML file for prompt/generation params, env for secrets."""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

from humanize_proxy.common.templates import SYSTEM_PROMPT, USER_TEMPLATE

LOGGER = logging.getLogger("humanize.config")

DEFAULT_CONFIG_PATH = "configs/humanizer.yaml"
DEFAULT_BASE_URL = "https://api.openai.com"
DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_TEMPERATURE = 0.8
DEFAULT_MAX_TOKENS = 2000
DEFAULT_TIMEOUT = 120.0

@dataclass(frozen=True)
class ProxyConfig:
    """Everything the handler needs for one request."""
    api_key: str | None
    base_url: str = DEFAULT_BASE_URL
    model: str = DEFAULT_MODEL
    temperature: float = DEFAULT_TEMPERATURE
    max_tokens: int = DEFAULT_MAX_TOKENS
    system_prompt: str = SYSTEM_PROMPT
    user_template: str = USER_TEMPLATE
    timeout: float = DEFAULT_TIMEOUT

    @property
    def completions_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/v1/chat/completions"

def load_cfg(path: str | Path) -> dict[str, Any]:
    """
    Read a YAML config file.

    A missing file yields an empty mapping so the built-in defaults apply.

    Raises:
        ValueError: if the document is not a mapping.
    """
    p = Path(path)
    if not p.exists():
        LOGGER.debug("Config file %s not found; using defaults", p)
        return {}
    with open(p, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {p} must contain a mapping, got {type(data).__name__}")
    return data

def load_config(path: str | Path | None = None, environ: Mapping[str, str] | None = None) -> ProxyConfig:
    """
    Build a ProxyConfig from the YAML file and the process environment.

    Called per request so a rotated OPENAI_API_KEY takes effect without restart.

    Args:
        path: YAML path; defaults to HUMANIZER_CONFIG or configs/humanizer.yaml.
        environ: Environment mapping; defaults to os.environ.
    """
    env = os.environ if environ is None else environ
    cfg = load_cfg(path or env.get("HUMANIZER_CONFIG", DEFAULT_CONFIG_PATH))

    # An empty key counts as not configured.
    api_key = env.get("OPENAI_API_KEY") or None

    return ProxyConfig(
        api_key=api_key,
        base_url=env.get("OPENAI_BASE_URL", DEFAULT_BASE_URL),
        model=str(cfg.get("model", DEFAULT_MODEL)),
        temperature=float(cfg.get("temperature", DEFAULT_TEMPERATURE)),
        max_tokens=int(cfg.get("max_tokens", DEFAULT_MAX_TOKENS)),
        system_prompt=str(cfg.get("system_prompt", SYSTEM_PROMPT)),
        user_template=str(cfg.get("user_template", USER_TEMPLATE)),
        timeout=float(env.get("HUMANIZER_TIMEOUT", DEFAULT_TIMEOUT)),
    )
