"""Url schemas for forms and views."""
from datetime import datetime
from typing import List, Optional

from pydantic import AnyHttpUrl, BaseModel, TypeAdapter, ValidationError, field_validator
from pydantic_core import PydanticCustomError

MAX_URL_LENGTH = 255

_http_url = TypeAdapter(AnyHttpUrl)


class UrlCreate(BaseModel):
    """Submitted url name.

    The name is trimmed, then checked in order: present, at most
    255 characters, an absolute http(s) URL. Each failure carries the
    message shown to the user.
    """
    name: str

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        name = value.strip()
        if not name:
            raise PydanticCustomError("url_required", "URL is required")
        if len(name) > MAX_URL_LENGTH:
            raise PydanticCustomError(
                "url_too_long", f"URL exceeds {MAX_URL_LENGTH} characters"
            )
        try:
            _http_url.validate_python(name)
        except ValidationError:
            raise PydanticCustomError("url_invalid", "Invalid URL")
        return name


def first_error_message(exc: ValidationError) -> str:
    """User-facing text of the first validation error."""
    errors = exc.errors()
    return errors[0]["msg"] if errors else "Invalid URL"


class UrlCheckResponse(BaseModel):
    """A recorded check."""
    id: int
    url_id: int
    status_code: Optional[int] = None
    created_at: datetime

    class Config:
        from_attributes = True


class UrlResponse(BaseModel):
    """Schema for a url in page views."""
    id: int
    name: str
    created_at: datetime

    class Config:
        from_attributes = True


class UrlWithLatestCheck(UrlResponse):
    """Url with its most recent check."""
    latest_check: Optional[UrlCheckResponse] = None


class UrlDetail(UrlResponse):
    """Url with its full check history, newest first."""
    checks: List[UrlCheckResponse] = []
