"""Launch the humanize proxy under uvicorn."""
from __future__ import annotations
import argparse
import os

import uvicorn

def main() -> None:
    ap = argparse.ArgumentParser(description="Serve the humanize proxy")
    ap.add_argument("--host", default=os.getenv("HOST", "0.0.0.0"))
    ap.add_argument("--port", type=int, default=int(os.getenv("PORT", "8000")))
    ap.add_argument("--workers", type=int, default=int(os.getenv("WEB_CONCURRENCY", "1")))
    args = ap.parse_args()

    uvicorn.run(
        "humanize_proxy.serve.fastapi_app:app",
        host=args.host,
        port=args.port,
        workers=args.workers,
        log_config=None,
    )

if __name__ == "__main__":
    main()
