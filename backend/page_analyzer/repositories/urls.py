"""Url repository."""
import logging
from typing import List, Optional, Tuple

from sqlalchemy import select, func

from ..database import Database
from ..models import Url, UrlCheck

logger = logging.getLogger(__name__)


class UrlRepository:
    """Create and look up registered urls."""

    def __init__(self, db: Database):
        self.db = db

    async def find_by_name(self, name: str) -> Optional[Url]:
        return await self.db.fetch_one(select(Url).where(Url.name == name))

    async def find_by_id(self, url_id: int) -> Optional[Url]:
        return await self.db.fetch_one(select(Url).where(Url.id == url_id))

    async def create(self, name: str) -> Url:
        """Insert a url.

        Raises ConstraintViolationError if the name is already taken.
        """
        url = await self.db.add(Url(name=name))
        logger.info(f"Created url {url.id}: {url.name}")
        return url

    async def list_all_with_latest_check(self) -> List[Tuple[Url, Optional[UrlCheck]]]:
        """All urls newest first, each paired with its highest-id check."""
        latest = (
            select(UrlCheck.url_id, func.max(UrlCheck.id).label("check_id"))
            .group_by(UrlCheck.url_id)
            .subquery()
        )
        statement = (
            select(Url, UrlCheck)
            .outerjoin(latest, latest.c.url_id == Url.id)
            .outerjoin(UrlCheck, UrlCheck.id == latest.c.check_id)
            .order_by(Url.id.desc())
        )
        return await self.db.fetch_all(statement, scalars=False)
