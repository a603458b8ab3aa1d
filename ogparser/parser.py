"""Fetch-and-parse façade.

Every entry point reduces to "obtain text, then extract". Errors from the
transport, decoding and URL validation propagate unchanged; nothing is
retried.

Example::

    parser = OpenGraphParser()
    metadata = parser.parse_url_string("https://www.example.com")
    print(metadata.title, metadata.image)
"""

import logging

import urllib3

from ogparser.config import Settings, settings as default_settings
from ogparser.schemas.metadata import OpenGraphMetadata
from ogparser.schemas.request import FetchRequest
from ogparser.services.extractor import extract
from ogparser.services.fetch import decode_html, default_http, fetch
from ogparser.services.url_validator import validate_url

logger = logging.getLogger(__name__)


class OpenGraphParser:
    """Parses Open Graph metadata from URLs, requests or HTML text.

    This is blocking IO (urllib3 is synchronous). Async callers should run
    the fetching methods in a thread.
    """

    def __init__(
        self,
        http: urllib3.PoolManager | None = None,
        settings: Settings | None = None,
    ):
        self.http = http if http is not None else default_http
        self.settings = settings if settings is not None else default_settings

    def parse_url(self, url: str) -> OpenGraphMetadata:
        """Fetch ``url`` with a plain GET and extract its metadata.

        Raises:
            NetworkError: The request failed.
            ParsingError: The body is not UTF-8.
        """
        request = FetchRequest(
            url=url, headers={"User-Agent": self.settings.user_agent}
        )
        return self.parse_request(request)

    def parse_url_string(self, url_string: str) -> OpenGraphMetadata:
        """Validate ``url_string`` and delegate to parse_url().

        Raises:
            InvalidURLError: Not an absolute URL. Raised before any network access.
            NetworkError: The request failed.
            ParsingError: The body is not UTF-8.
        """
        return self.parse_url(validate_url(url_string))

    def parse_request(self, request: FetchRequest) -> OpenGraphMetadata:
        """Send a caller-built request as-is and extract metadata from the body.

        Raises:
            NetworkError: The request failed.
            ParsingError: The body is not UTF-8.
        """
        logger.debug("Fetching %s %s", request.method, request.url)
        data = fetch(request, http=self.http, config=self.settings)
        return self.parse_html(decode_html(data))

    def parse_html(self, html: str) -> OpenGraphMetadata:
        """Extract metadata from ``html``.

        Raises:
            ParsingError: Only if the tag pattern cannot be compiled.
        """
        return extract(html)
