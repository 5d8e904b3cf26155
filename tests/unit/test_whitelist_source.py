"""
Module 04 - Whitelist Source Unit Tests
Tests for core/whitelist/source.py
"""
import json
from unittest.mock import MagicMock

import pytest
import requests

from core.config.runtime import RuntimeConfig
from core.http.client import HttpClient, HttpError, HttpResponse
from core.schemas.errors import SchemaValidationError, SourceUnavailableError
from core.whitelist.source import (
    FileWhitelistSource,
    HttpWhitelistSource,
    StaticWhitelistSource,
    create_source,
    source_from_location,
)


URL = "https://example.com/whitelist.json"


def _mock_client(status_code=200, content=b"[]", exc=None):
    client = MagicMock(spec=HttpClient)
    if exc is not None:
        client.get.side_effect = exc
    else:
        client.get.return_value = HttpResponse(status_code=status_code, content=content)
    return client


class TestFileWhitelistSource:
    """Tests for FileWhitelistSource."""

    def test_load(self, whitelist_file, whitelist_records):
        source = FileWhitelistSource(whitelist_file)

        entries = source.load()

        assert [e.name for e in entries] == [r["name"] for r in whitelist_records]
        assert source.addresses() == [r["address"] for r in whitelist_records]

    def test_missing_file(self, tmp_path):
        source = FileWhitelistSource(tmp_path / "missing.json")

        with pytest.raises(SourceUnavailableError) as exc_info:
            source.load()

        assert exc_info.value.retryable
        assert exc_info.value.details["location"] == str(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "whitelist.json"
        path.write_text("[{not json", encoding="utf-8")

        with pytest.raises(SourceUnavailableError, match="not valid JSON"):
            FileWhitelistSource(path).load()

    def test_schema_violation(self, tmp_path):
        path = tmp_path / "whitelist.json"
        path.write_text(json.dumps([{"name": "alice", "address": None}]), encoding="utf-8")

        with pytest.raises(SchemaValidationError):
            FileWhitelistSource(path).load()

    def test_reads_current_contents(self, tmp_path):
        path = tmp_path / "whitelist.json"
        source = FileWhitelistSource(path)

        path.write_text(json.dumps([{"name": "a", "address": "0xa"}]), encoding="utf-8")
        assert source.addresses() == ["0xa"]

        path.write_text(json.dumps([{"name": "b", "address": "0xb"}]), encoding="utf-8")
        assert source.addresses() == ["0xb"]


class TestHttpWhitelistSource:
    """Tests for HttpWhitelistSource with a mocked client."""

    def test_load(self, whitelist_records):
        client = _mock_client(content=json.dumps(whitelist_records).encode())
        source = HttpWhitelistSource(URL, client=client, timeout=5.0)

        assert source.addresses() == [r["address"] for r in whitelist_records]
        client.get.assert_called_once_with(URL, timeout=5.0)

    def test_transport_error(self):
        source = HttpWhitelistSource(URL, client=_mock_client(exc=HttpError("connection refused")))

        with pytest.raises(SourceUnavailableError, match="connection refused"):
            source.load()

    def test_non_2xx(self):
        source = HttpWhitelistSource(URL, client=_mock_client(status_code=503))

        with pytest.raises(SourceUnavailableError) as exc_info:
            source.load()

        assert exc_info.value.details["status_code"] == 503

    def test_invalid_json(self):
        source = HttpWhitelistSource(URL, client=_mock_client(content=b"<html>"))

        with pytest.raises(SourceUnavailableError):
            source.load()

    def test_schema_violation(self):
        source = HttpWhitelistSource(URL, client=_mock_client(content=b'{"address": "0xa"}'))

        with pytest.raises(SchemaValidationError):
            source.load()


class TestHttpClientTransport:
    """HttpWhitelistSource over a real HttpClient with requests patched."""

    def test_connection_error(self, monkeypatch):
        def refuse(self, method, url, **kwargs):
            raise requests.ConnectionError("connection refused")

        monkeypatch.setattr(requests.Session, "request", refuse)
        source = HttpWhitelistSource(URL, client=HttpClient(timeout=1.0))

        with pytest.raises(SourceUnavailableError, match="connection refused") as exc_info:
            source.load()

        assert isinstance(exc_info.value.__cause__, HttpError)
        assert isinstance(exc_info.value.__cause__.__cause__, requests.ConnectionError)

    def test_success(self, monkeypatch, whitelist_records):
        calls = []

        def respond(self, method, url, **kwargs):
            calls.append((method, url, kwargs, dict(self.headers)))
            response = MagicMock()
            response.status_code = 200
            response.content = json.dumps(whitelist_records).encode()
            return response

        monkeypatch.setattr(requests.Session, "request", respond)
        client = HttpClient(timeout=3.0, default_headers={"User-Agent": "merkle-whitelist/test"})
        source = HttpWhitelistSource(URL, client=client, timeout=2.0)

        assert source.addresses() == [r["address"] for r in whitelist_records]
        method, url, kwargs, headers = calls[0]
        assert (method, url, kwargs["timeout"]) == ("GET", URL, 2.0)
        assert headers["User-Agent"] == "merkle-whitelist/test"

    def test_default_timeout(self, monkeypatch):
        seen = {}

        def respond(self, method, url, **kwargs):
            seen.update(kwargs)
            response = MagicMock()
            response.status_code = 404
            response.content = b""
            return response

        monkeypatch.setattr(requests.Session, "request", respond)

        response = HttpClient(timeout=7.5).get(URL)

        assert not response.ok
        assert seen["timeout"] == 7.5


class TestStaticWhitelistSource:
    """Tests for StaticWhitelistSource."""

    def test_addresses_in_document_order(self):
        source = StaticWhitelistSource([
            {"name": "b", "address": "0xb"},
            {"name": "a", "address": "0xa"},
        ])

        assert source.addresses() == ["0xb", "0xa"]

    def test_validated(self):
        with pytest.raises(SchemaValidationError):
            StaticWhitelistSource([{"name": "a"}]).load()


class TestSourceFactories:
    """Tests for create_source() and source_from_location()."""

    def test_path_by_default(self):
        source = create_source(RuntimeConfig())

        assert isinstance(source, FileWhitelistSource)
        assert source.location == "public/whitelist.json"

    def test_url_wins(self):
        config = RuntimeConfig()
        config.source.url = URL

        source = create_source(config)

        assert isinstance(source, HttpWhitelistSource)
        assert source.location == URL

    def test_location_url(self):
        assert isinstance(source_from_location(URL), HttpWhitelistSource)

    def test_location_path(self, tmp_path):
        source = source_from_location(str(tmp_path / "list.json"))

        assert isinstance(source, FileWhitelistSource)
