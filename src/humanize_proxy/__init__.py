"""
Humanize proxy package.

Provides:
- A stateless request handler that rewrites text through an OpenAI chat model
- FastAPI app exposing the handler to browser clients
- A command-line humanizer sharing the same handler
"""
