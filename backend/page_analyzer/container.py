"""Services handed to request handlers."""
from dataclasses import dataclass
from typing import Optional

from fastapi import Request

from .config import Settings
from .database import Database
from .repositories import CheckRepository, UrlRepository
from .services.checker import LivenessChecker


@dataclass
class Services:
    """Built once per application in create_app and kept on app.state."""
    db: Database
    urls: UrlRepository
    checks: CheckRepository
    checker: LivenessChecker
    record_failed_checks: bool = False


def build_services(settings: Settings, db: Database, checker: Optional[LivenessChecker] = None) -> Services:
    """Wire repositories and the checker around one database gateway."""
    return Services(
        db=db,
        urls=UrlRepository(db),
        checks=CheckRepository(db),
        checker=checker or LivenessChecker(timeout=settings.check_timeout),
        record_failed_checks=settings.record_failed_checks,
    )


def get_services(request: Request) -> Services:
    """Dependency to get the application's services."""
    return request.app.state.services
