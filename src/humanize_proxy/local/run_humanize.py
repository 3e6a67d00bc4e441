"""Humanize text from the command line through the same handler the server uses."""
from __future__ import annotations
import argparse
import logging
import sys
from pathlib import Path

from humanize_proxy.common.config import load_config
from humanize_proxy.common.logging_setup import setup_logging
from humanize_proxy.common.schema import ProxyRequest
from humanize_proxy.serve.proxy import HttpxTransport, Transport, handle

LOGGER = logging.getLogger("humanize.cli")

def read_text(text: str | None, file: str | None) -> str:
    if text is not None:
        return text
    if file == "-":
        return sys.stdin.read()
    return Path(file).read_text(encoding="utf-8")

def humanize(text: str, cfg_path: str | None = None, transport: Transport | None = None) -> tuple[int, dict]:
    """
    Run one humanize request.

    Args:
        text: Input text.
        cfg_path: Optional YAML config path.
        transport: Upstream caller; defaults to httpx.

    Returns:
        (status_code, body) as the HTTP endpoint would return them.
    """
    config = load_config(cfg_path)
    transport = transport or HttpxTransport(timeout=config.timeout)
    out = handle(ProxyRequest(method="POST", body={"inputText": text}), config, transport)
    return out.status_code, out.body or {}

def main(argv: list[str] | None = None) -> int:
    setup_logging()
    ap = argparse.ArgumentParser(description="Rewrite AI-generated text to read more naturally")
    src = ap.add_mutually_exclusive_group(required=True)
    src.add_argument("--text", help="Input text")
    src.add_argument("--file", help="Read input from file ('-' for stdin)")
    ap.add_argument("--cfg", default=None, help="Config path (default: HUMANIZER_CONFIG or configs/humanizer.yaml)")
    args = ap.parse_args(argv)

    status, body = humanize(read_text(args.text, args.file), args.cfg)
    if status != 200:
        LOGGER.error("Humanize failed (%s): %s", status, body.get("error"))
        return 1
    print(body["humanizedText"])
    return 0

if __name__ == "__main__":
    sys.exit(main())
