"""HTTP transport for the parser façade.

Sends one request through a urllib3 PoolManager, following redirects by
hand so each hop can be logged and bounded. urllib3's own retries are off;
a failed request is reported, never retried.
"""

import logging
from urllib.parse import urljoin, urlsplit

import urllib3

from ogparser.config import Settings, settings as default_settings
from ogparser.errors import NetworkError, ParsingError
from ogparser.schemas.request import FetchRequest

logger = logging.getLogger(__name__)

REDIRECT_STATUSES = {301, 302, 303, 307, 308}
DEFAULT_PORTS = {"http": 80, "https": 443}
REMOVE_HEADERS_ON_HOST_CHANGE = {
    h.lower() for h in urllib3.Retry.DEFAULT_REMOVE_HEADERS_ON_REDIRECT
}

default_http = urllib3.PoolManager()


def _send(
    http: urllib3.PoolManager, request: FetchRequest, config: Settings
) -> urllib3.BaseHTTPResponse:
    try:
        response = http.request(
            request.method,
            request.url,
            body=request.body,
            headers=dict(request.headers),
            timeout=urllib3.Timeout(
                connect=config.connect_timeout, read=config.read_timeout
            ),
            retries=False,
            redirect=False,
        )
    except (urllib3.exceptions.HTTPError, OSError) as exc:
        raise NetworkError(exc) from exc

    if not isinstance(response, urllib3.BaseHTTPResponse):
        cause = TypeError(f"Not an HTTP response: {type(response).__name__}")
        raise NetworkError(cause) from cause
    return response


def _origin(url: str) -> tuple[str, str | None, int | None] | None:
    """(scheme, host, port) with the scheme's default port filled in.

    Returns None for an unparsable port.
    """
    parsed = urlsplit(url)
    scheme = parsed.scheme.lower()
    try:
        port = parsed.port
    except ValueError:
        return None
    if port is None:
        port = DEFAULT_PORTS.get(scheme)
    return scheme, parsed.hostname, port


def _redirect_request(
    request: FetchRequest, status: int, location: str
) -> FetchRequest:
    """Build the request for the next hop, following browser semantics."""
    target = urljoin(request.url, location)
    method = request.method.upper()
    body = request.body
    headers = dict(request.headers)

    if (status == 303 and method != "HEAD") or (
        status in (301, 302) and method not in ("GET", "HEAD")
    ):
        method = "GET"
        body = None
        headers = {
            k: v
            for k, v in headers.items()
            if k.lower() not in ("content-type", "content-length")
        }

    origin = _origin(target)
    if origin is None or origin != _origin(request.url):
        headers = {
            k: v
            for k, v in headers.items()
            if k.lower() not in REMOVE_HEADERS_ON_HOST_CHANGE
        }

    return request.model_copy(
        update={"url": target, "method": method, "body": body, "headers": headers}
    )


def fetch(
    request: FetchRequest,
    http: urllib3.PoolManager | None = None,
    config: Settings | None = None,
) -> bytes:
    """Send ``request`` and return the final response body.

    Non-2xx responses are returned like any other; the caller decides what
    their body is worth.

    Raises:
        NetworkError: Transport failure, non-HTTP response, missing body,
            or too many redirects.
    """
    if http is None:
        http = default_http
    if config is None:
        config = default_settings

    current = request
    for _ in range(config.max_redirects + 1):
        response = _send(http, current, config)

        if response.status in REDIRECT_STATUSES:
            location = response.headers.get("Location")
            if location:
                logger.debug(
                    "Redirect %d from %s to %s", response.status, current.url, location
                )
                current = _redirect_request(current, response.status, location)
                continue

        if not 200 <= response.status < 300:
            logger.warning("%s returned HTTP %d", current.url, response.status)

        data = response.data
        if data is None:
            cause = ValueError(f"Missing response body from {current.url}")
            raise NetworkError(cause) from cause
        return data

    cause = urllib3.exceptions.HTTPError(
        f"Exceeded {config.max_redirects} redirects starting from {request.url}"
    )
    raise NetworkError(cause) from cause


def decode_html(data: bytes) -> str:
    """Decode a response body as UTF-8.

    Raises:
        ParsingError: The body is not valid UTF-8.
    """
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ParsingError("Unable to convert data to string") from exc
