"""
Tests for loading markup from URLs.
"""

import http.client
import urllib.error

import pytest

from tagquery import FetchError
from tagquery.fetch import is_url, load_from_url


class FakeHeaders:
    def __init__(self, charset):
        self.charset = charset

    def get_content_charset(self):
        return self.charset


class FakeResponse:
    def __init__(self, body, charset=None):
        self.body = body
        self.headers = FakeHeaders(charset)

    def read(self):
        return self.body

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


def test_is_url():
    assert is_url("https://example.com")
    assert is_url("http://example.com/a")
    assert not is_url("page.html")
    assert not is_url("ftp://example.com")


def test_successful_load_decodes_with_charset(monkeypatch):
    monkeypatch.setattr(
        "urllib.request.urlopen",
        lambda url, timeout: FakeResponse("<p>café</p>".encode("latin-1"), "latin-1"),
    )

    assert load_from_url("https://example.com") == "<p>café</p>"


def test_defaults_to_utf8(monkeypatch):
    monkeypatch.setattr(
        "urllib.request.urlopen",
        lambda url, timeout: FakeResponse("<p>café</p>".encode()),
    )

    assert load_from_url("https://example.com") == "<p>café</p>"


def test_network_failure_becomes_fetch_error(monkeypatch):
    def fail(url, timeout):
        raise urllib.error.URLError("no route to host")

    monkeypatch.setattr("urllib.request.urlopen", fail)

    with pytest.raises(FetchError) as exc_info:
        load_from_url("https://example.com")

    assert exc_info.value.url == "https://example.com"
    assert "no route to host" in str(exc_info.value)
    assert isinstance(exc_info.value, OSError)


def test_timeout_becomes_fetch_error(monkeypatch):
    def fail(url, timeout):
        raise TimeoutError("timed out")

    monkeypatch.setattr("urllib.request.urlopen", fail)

    with pytest.raises(FetchError, match="timed out"):
        load_from_url("https://example.com")


def test_non_http_source_is_rejected():
    with pytest.raises(FetchError):
        load_from_url("file:///etc/passwd")


def test_malformed_url_becomes_fetch_error():
    # urllib rejects the unbalanced bracket before any connection is made
    with pytest.raises(FetchError) as exc_info:
        load_from_url("http://[::1")

    assert exc_info.value.url == "http://[::1"
    assert isinstance(exc_info.value.__cause__, ValueError)


@pytest.mark.parametrize("error", [
    http.client.InvalidURL("URL can't contain control characters"),
    http.client.RemoteDisconnected("Remote end closed connection"),
    ValueError("unknown url type"),
    ConnectionResetError("reset by peer"),
])
def test_low_level_failures_become_fetch_error(monkeypatch, error):
    def fail(url, timeout):
        raise error

    monkeypatch.setattr("urllib.request.urlopen", fail)

    with pytest.raises(FetchError) as exc_info:
        load_from_url("http://example.com/a b")

    assert exc_info.value.__cause__ is error
