"""Open Graph extraction from raw HTML text.

Declarations are located with a regular expression rather than a document
parser, so only the literal form

    <meta property="og:..." content="...">

is recognised: double quotes, property before content, optional self-closing
slash, tag and attribute names matched case-insensitively. Anything else in
the document is ignored, well-formed or not.
"""

import logging
import re

from ogparser.errors import ParsingError
from ogparser.schemas.metadata import OpenGraphMetadata
from ogparser.services.url_validator import is_absolute_url

logger = logging.getLogger(__name__)

META_TAG_PATTERN = r'<meta\s+property="(og:[^"]+)"\s+content="([^"]+)"\s*/?>'

TEXT_PROPERTIES = {
    "og:title": "title",
    "og:type": "type",
    "og:description": "description",
}
URL_PROPERTIES = {
    "og:url": "url",
    "og:image": "image",
}


def _compile_pattern() -> re.Pattern[str]:
    try:
        return re.compile(META_TAG_PATTERN, re.IGNORECASE)
    except re.error as exc:
        raise ParsingError("Failed to create regular expression") from exc


def find_declarations(html: str) -> list[tuple[str, str]]:
    """Return (property, content) pairs in document order.

    Raises:
        ParsingError: The tag pattern could not be compiled.
    """
    pattern = _compile_pattern()
    return [(m.group(1), m.group(2)) for m in pattern.finditer(html)]


def extract(html: str) -> OpenGraphMetadata:
    """Fold the declarations in ``html`` into an OpenGraphMetadata.

    Later declarations of a property replace earlier ones. og:url and
    og:image values that are not absolute URLs are skipped, leaving any
    earlier valid value in place. Unknown properties are ignored.

    Raises:
        ParsingError: The tag pattern could not be compiled.
    """
    declarations = find_declarations(html)
    fields: dict[str, str] = {}

    for prop, content in declarations:
        if prop in TEXT_PROPERTIES:
            fields[TEXT_PROPERTIES[prop]] = content
        elif prop in URL_PROPERTIES:
            if is_absolute_url(content):
                fields[URL_PROPERTIES[prop]] = content
            else:
                logger.debug("Skipping %s with non-absolute URL %r", prop, content)

    logger.debug(
        "Matched %d og declarations, populated %s",
        len(declarations),
        sorted(fields),
    )
    return OpenGraphMetadata(**fields)
