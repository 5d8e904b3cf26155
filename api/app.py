"""
Module 06 - FastAPI Application

Main application setup and configuration.

Usage:
    uvicorn api.app:app --reload

    # Or run directly
    python -m api.app
"""

import json
import logging
import os
from pathlib import Path

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from api.errors import (
    APIError,
    api_error_handler,
    generic_error_handler,
    validation_error_handler,
    whitelist_error_handler,
)
from api.routes import health, whitelist
from core.schemas.errors import WhitelistException


# Configure logging: WHITELIST_LOG_LEVEL, then merkle-whitelist.json log_level
def _resolve_log_level() -> int:
    """Resolve log level from env var or merkle-whitelist.json, defaulting to INFO."""
    raw = os.getenv("WHITELIST_LOG_LEVEL")
    if raw is None:
        cfg_path = Path.cwd() / "merkle-whitelist.json"
        if cfg_path.exists():
            try:
                with open(cfg_path) as f:
                    raw = json.load(f).get("log_level")
            except (OSError, ValueError, AttributeError):
                raw = None
    return getattr(logging, (raw or "INFO").upper(), logging.INFO)


logging.basicConfig(
    level=_resolve_log_level(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(
        title="Merkle Whitelist API",
        description="""
HTTP API serving the Merkle root of an address whitelist and membership
proofs for individual addresses.

## Endpoints

- **GET /root** - Merkle root of the current whitelist
- **GET /proof?address=** - Proof for one address (400 without address, 404 for non-members)
- **POST /verify** - Check a proof against a root
- **GET /sync** - Compare the whitelist root with the on-chain root
- **GET /health** - Health check

## Response Format

Every whitelist endpoint answers with `{data, status, error}`.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register exception handlers
    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(WhitelistException, whitelist_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, generic_error_handler)

    # Include routers
    app.include_router(health.router)
    app.include_router(whitelist.router)

    return app


# Create the application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
