"""
HTTP Client

Thin requests-based client used by remote whitelist sources.
"""

from __future__ import annotations

import json as jsonlib
import logging
from dataclasses import dataclass
from typing import Any, Optional

import requests


logger = logging.getLogger(__name__)


@dataclass
class HttpResponse:
    """Status and body of a completed request."""
    status_code: int
    content: bytes

    @property
    def ok(self) -> bool:
        """Check if request was successful (2xx status)."""
        return 200 <= self.status_code < 300

    def json(self) -> Any:
        """Parse response as JSON."""
        return jsonlib.loads(self.content)


class HttpError(Exception):
    """Transport failure: the request never produced a response."""


class HttpClient:
    """
    HTTP client over a lazily created requests session.

    Usage:
        client = HttpClient(timeout=10)
        response = client.get("https://example.com/whitelist.json")
        if response.ok:
            data = response.json()
    """

    def __init__(
        self,
        *,
        timeout: float = 30.0,
        default_headers: Optional[dict[str, str]] = None,
    ) -> None:
        self.timeout = timeout
        self.default_headers = default_headers or {}
        self._session: Optional[requests.Session] = None

    def _get_session(self) -> requests.Session:
        """Lazy-load requests session."""
        if self._session is None:
            self._session = requests.Session()
            self._session.headers.update(self.default_headers)
        return self._session

    def get(self, url: str, *, timeout: Optional[float] = None) -> HttpResponse:
        """
        Make a GET request.

        Raises:
            HttpError: On any transport failure (connection, timeout, ...)
        """
        logger.debug(f"GET {url}")
        try:
            response = self._get_session().request(
                method="GET",
                url=url,
                timeout=timeout or self.timeout,
            )
        except requests.RequestException as e:
            raise HttpError(str(e)) from e

        return HttpResponse(status_code=response.status_code, content=response.content)
