"""Absolute URL checks.

A URL is accepted when it is made only of RFC 3986 characters (unreserved,
reserved, or %XX escapes), splits cleanly and has a non-empty scheme.
Hostname resolution and scheme allow-lists are the transport's concern, not
this module's.
"""

import re
from urllib.parse import SplitResult, urlsplit

from ogparser.errors import InvalidURLError

URL_CHARACTERS = re.compile(
    r"(?:[A-Za-z0-9\-._~:/?#\[\]@!$&'()*+,;=]|%[0-9A-Fa-f]{2})+"
)


def parse_absolute_url(value: str) -> SplitResult | None:
    """Split an absolute URL into its components.

    Returns:
        The SplitResult, or None if the value is not an absolute URL.
    """
    if not URL_CHARACTERS.fullmatch(value):
        return None

    try:
        parsed = urlsplit(value)
    except ValueError:
        # e.g. unbalanced brackets in an IPv6 host
        return None

    if not parsed.scheme:
        return None
    return parsed


def is_absolute_url(value: str) -> bool:
    return parse_absolute_url(value) is not None


def validate_url(url: str) -> str:
    """Return the URL unchanged if it is absolute.

    Raises:
        InvalidURLError: The string has no scheme or does not parse.
    """
    if not is_absolute_url(url):
        raise InvalidURLError(url)
    return url
