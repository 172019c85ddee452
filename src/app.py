"""Marketplace FastAPI application.

Web server that processes commands synchronously via HTTP inside the
marketplace domain context.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV selects the config overlay from domain.toml.
from marketplace.api.application import create_app
from marketplace.domain import marketplace

marketplace.init()

app = create_app()
