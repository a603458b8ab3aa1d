from ogparser.errors import (
    InvalidURLError,
    NetworkError,
    OpenGraphParserError,
    ParsingError,
)
from ogparser.parser import OpenGraphParser
from ogparser.schemas.metadata import OpenGraphMetadata
from ogparser.schemas.request import FetchRequest
from ogparser.services.extractor import extract

__all__ = [
    "FetchRequest",
    "InvalidURLError",
    "NetworkError",
    "OpenGraphMetadata",
    "OpenGraphParser",
    "OpenGraphParserError",
    "ParsingError",
    "extract",
]
