"""Errors raised by the parser.

Three kinds, one per failure class. Malformed og:url / og:image values are
not errors; the extractor drops them.
"""


class OpenGraphParserError(Exception):
    """Base for every error a parse call can raise."""

    pass


class InvalidURLError(OpenGraphParserError, ValueError):
    """Raised when a URL string is not an absolute URL with a scheme."""

    def __init__(self, url: str):
        self.url = url
        super().__init__(f"Invalid URL: {url!r}")


class NetworkError(OpenGraphParserError):
    """Raised when the transport fails. The original exception is kept in ``cause``."""

    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__(f"Network error: {cause}")


class ParsingError(OpenGraphParserError):
    """Raised when fetched bytes are not text or the tag pattern cannot be built."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)
