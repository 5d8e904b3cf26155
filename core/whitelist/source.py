"""
Module 04 - Whitelist Sources

Adapters that load and validate the whitelist document.

Every source returns already-validated WhitelistEntry records. Read
failures raise SourceUnavailableError and schema violations raise
SchemaValidationError; neither is ever turned into a partial list.
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Iterable, Optional

from core.config.runtime import RuntimeConfig
from core.http.client import HttpClient, HttpError
from core.schemas.errors import SourceUnavailableError
from core.schemas.whitelist import WhitelistEntry, parse_whitelist


logger = logging.getLogger(__name__)


class WhitelistSource(ABC):
    """
    Abstract base class for whitelist sources.

    Subclasses implement _read() returning the decoded JSON document;
    load() validates it.
    """

    source_id: str = "base"

    @property
    @abstractmethod
    def location(self) -> str:
        """Human-readable location of the document, used in logs and errors."""

    @abstractmethod
    def _read(self) -> Any:
        """Return the decoded JSON document."""

    def load(self) -> list[WhitelistEntry]:
        """
        Read and validate the whitelist.

        Raises:
            SourceUnavailableError: If the document cannot be read or decoded
            SchemaValidationError: If the document violates the schema
        """
        data = self._read()
        entries = parse_whitelist(data)
        logger.info(f"Loaded {len(entries)} whitelist entries from {self.location}")
        return entries

    def addresses(self) -> list[str]:
        """Member identifiers, in document order."""
        return [entry.address for entry in self.load()]


class FileWhitelistSource(WhitelistSource):
    """Whitelist stored as a local JSON file."""

    source_id = "file"

    def __init__(self, path: str | Path):
        self.path = Path(path)

    @property
    def location(self) -> str:
        return str(self.path)

    def _read(self) -> Any:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise SourceUnavailableError(
                f"Cannot read whitelist file: {e}",
                location=self.location,
            ) from e

        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            raise SourceUnavailableError(
                f"Whitelist file is not valid JSON: {e}",
                location=self.location,
            ) from e


class HttpWhitelistSource(WhitelistSource):
    """Whitelist served as a JSON document over HTTP(S)."""

    source_id = "http"

    def __init__(
        self,
        url: str,
        client: Optional[HttpClient] = None,
        timeout: float = 10.0,
    ):
        self.url = url
        self.timeout = timeout
        self._client = client or HttpClient(timeout=timeout)

    @property
    def location(self) -> str:
        return self.url

    def _read(self) -> Any:
        try:
            response = self._client.get(self.url, timeout=self.timeout)
        except HttpError as e:
            raise SourceUnavailableError(
                f"Whitelist fetch failed: {e}",
                location=self.location,
            ) from e

        if not response.ok:
            raise SourceUnavailableError(
                f"Whitelist fetch returned HTTP {response.status_code}",
                location=self.location,
                details={"status_code": response.status_code},
            )

        try:
            return response.json()
        except ValueError as e:
            raise SourceUnavailableError(
                f"Whitelist response is not valid JSON: {e}",
                location=self.location,
            ) from e


class StaticWhitelistSource(WhitelistSource):
    """In-memory whitelist; still validated on every load."""

    source_id = "static"

    def __init__(self, records: Iterable[Any]):
        self._records = list(records)

    @property
    def location(self) -> str:
        return "<memory>"

    def _read(self) -> Any:
        return [
            r.model_dump() if isinstance(r, WhitelistEntry) else r
            for r in self._records
        ]


def create_source(config: RuntimeConfig, client: Optional[HttpClient] = None) -> WhitelistSource:
    """Build the source named by the configuration (URL wins over path)."""
    if config.source.url:
        if client is None:
            client = HttpClient(
                timeout=config.http.timeout,
                default_headers={"User-Agent": config.http.user_agent},
            )
        return HttpWhitelistSource(config.source.url, client=client, timeout=config.source.timeout)
    return FileWhitelistSource(config.source.path)


def source_from_location(location: str, config: RuntimeConfig | None = None) -> WhitelistSource:
    """Build a source from a CLI-style location: http(s) URL or file path."""
    if location.startswith(("http://", "https://")):
        timeout = config.source.timeout if config else 10.0
        return HttpWhitelistSource(location, timeout=timeout)
    return FileWhitelistSource(location)


__all__ = [
    "WhitelistSource",
    "FileWhitelistSource",
    "HttpWhitelistSource",
    "StaticWhitelistSource",
    "create_source",
    "source_from_location",
]
