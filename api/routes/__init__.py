"""API route handlers."""

from api.routes import health, whitelist

__all__ = ["health", "whitelist"]
