"""Repositories over the urls and url_checks tables."""
from .urls import UrlRepository
from .checks import CheckRepository

__all__ = ["UrlRepository", "CheckRepository"]
