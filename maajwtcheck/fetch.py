"""HTTP GET requests for retrieving key sets."""

from __future__ import annotations

import ssl
import urllib.error
import urllib.request

from .context import log


class FetchError(Exception):
    """Raised when a request cannot be performed."""


def _tls_context() -> ssl.SSLContext:
    context = ssl.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
    context.minimum_version = ssl.TLSVersion.TLSv1_2
    context.check_hostname = False
    context.verify_mode = ssl.CERT_NONE
    return context


def _parse_header(line: str) -> tuple[str, str]:
    name, sep, value = line.partition(":")
    if not sep or not name.strip():
        raise ValueError(f"malformed header line: {line!r}")
    return name.strip(), value.strip()


def get(url: str, headers: str | None = None) -> str:
    """Fetch ``url`` and return the response body as text.

    ``headers`` is an optional single "Name: value" line. Redirects are
    followed, TLS 1.2 or newer is required and the peer is not verified.
    The body is returned whatever the HTTP status.
    """
    if not url:
        log("Failed to send get request, input url is empty")
        raise ValueError("url is empty")
    request_headers = dict([_parse_header(headers)]) if headers else {}
    try:
        request = urllib.request.Request(url, headers=request_headers)
        with urllib.request.urlopen(request, context=_tls_context()) as response:
            body = response.read()
    except urllib.error.HTTPError as exc:
        body = exc.read()
        exc.close()
    except (urllib.error.URLError, ValueError, OSError) as exc:
        log(f"Request failed: {exc}")
        raise FetchError(str(exc)) from exc
    log(f"Received {len(body)} bytes")
    return body.split(b"\0", 1)[0].decode("utf-8", errors="replace")