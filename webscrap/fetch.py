"""Download a page over HTTP and return its body as text."""

from __future__ import annotations

import codecs
import urllib.error
import urllib.parse
import urllib.request
from email.message import Message


class FetchError(Exception):
    """Raised when a URL cannot be fetched."""


def _decode(body: bytes, headers: Message | None) -> str:
    charset = (headers.get_content_charset() if headers is not None else None) or "utf-8"
    try:
        codecs.lookup(charset)
    except LookupError:
        charset = "utf-8"
    return body.decode(charset, errors="replace")


def fetch(url: str) -> str:
    """Return the body of ``url``; HTTP error statuses still yield their body."""
    scheme = urllib.parse.urlsplit(url).scheme.lower()
    if scheme not in ("http", "https"):
        raise FetchError(f"error fetching url:{url}: unsupported URL")
    try:
        with urllib.request.urlopen(urllib.request.Request(url)) as response:
            return _decode(response.read(), response.headers)
    except urllib.error.HTTPError as error:
        try:
            body = error.read()
        finally:
            error.close()
        return _decode(body, error.headers)
    except (urllib.error.URLError, OSError, ValueError) as error:
        raise FetchError(f"error fetching url:{url}: {error}") from error