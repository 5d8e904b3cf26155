"""
HTTP Client Module

requests-based client for fetching remote whitelist documents.
"""

from .client import HttpClient, HttpError, HttpResponse

__all__ = [
    "HttpClient",
    "HttpError",
    "HttpResponse",
]
