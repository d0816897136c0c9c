"""Database models."""
from .url import Url
from .url_check import UrlCheck

__all__ = ["Url", "UrlCheck"]
