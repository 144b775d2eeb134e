"""Load markup over HTTP(S). Lives outside the parsing core."""

from __future__ import annotations

import http.client
import logging
import socket
import urllib.error
import urllib.request

from .errors import FetchError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def load_from_url(url: str, timeout: float = DEFAULT_TIMEOUT) -> str:
    """Download ``url`` and return its body as text.

    Raises:
        FetchError: If the URL is malformed, or the request fails, times out
            or returns an HTTP error
    """
    if not is_url(url):
        raise FetchError(url, "only http:// and https:// URLs are supported")

    logger.debug("Fetching %s", url)
    try:
        with urllib.request.urlopen(url, timeout=timeout) as response:
            body = response.read()
            charset = response.headers.get_content_charset() or "utf-8"
    except urllib.error.HTTPError as e:
        raise FetchError(url, f"HTTP {e.code} {e.reason}") from e
    except urllib.error.URLError as e:
        raise FetchError(url, str(e.reason)) from e
    except (socket.timeout, TimeoutError) as e:
        raise FetchError(url, "timed out") from e
    except (ValueError, http.client.HTTPException, OSError) as e:
        # Malformed URLs surface from urllib and http.client as ValueError
        raise FetchError(url, str(e) or type(e).__name__) from e

    try:
        return body.decode(charset, errors="replace")
    except LookupError:
        return body.decode("utf-8", errors="replace")
