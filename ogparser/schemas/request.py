from typing import Optional

from pydantic import Field

from ogparser.schemas import AppBaseModel


class FetchRequest(AppBaseModel):
    """A caller-built HTTP request for OpenGraphParser.parse_request().

    The URL is passed to the transport as-is; an unusable URL surfaces as
    NetworkError when the request is sent.
    """

    url: str
    method: str = "GET"
    headers: dict[str, str] = Field(default_factory=dict)
    body: Optional[bytes] = None
