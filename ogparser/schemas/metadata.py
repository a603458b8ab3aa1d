from typing import Optional

from pydantic import field_validator

from ogparser.schemas import AppBaseModel
from ogparser.services.url_validator import is_absolute_url


class OpenGraphMetadata(AppBaseModel):
    """Open Graph properties found in a document.

    None means no usable declaration was found. Text fields are kept
    verbatim; url and image always hold absolute URLs.
    """

    title: Optional[str] = None
    type: Optional[str] = None
    url: Optional[str] = None
    image: Optional[str] = None
    description: Optional[str] = None

    @field_validator("url", "image")
    @classmethod
    def require_absolute_url(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not is_absolute_url(value):
            raise ValueError(f"{value!r} is not an absolute URL")
        return value
