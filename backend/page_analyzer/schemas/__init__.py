"""Pydantic schemas for form input and page view models."""
from .url import (
    UrlCreate,
    UrlResponse,
    UrlCheckResponse,
    UrlWithLatestCheck,
    UrlDetail,
    first_error_message,
)

__all__ = [
    "UrlCreate",
    "UrlResponse",
    "UrlCheckResponse",
    "UrlWithLatestCheck",
    "UrlDetail",
    "first_error_message",
]
