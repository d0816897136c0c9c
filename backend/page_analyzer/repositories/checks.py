"""Check repository."""
import logging
from typing import List, Optional

from sqlalchemy import select

from ..database import Database
from ..models import UrlCheck

logger = logging.getLogger(__name__)


class CheckRepository:
    """Record and list checks of a url."""

    def __init__(self, db: Database):
        self.db = db

    async def create(self, url_id: int, status_code: Optional[int] = None) -> UrlCheck:
        check = await self.db.add(UrlCheck(url_id=url_id, status_code=status_code))
        logger.info(f"Recorded check {check.id} for url {url_id}: status {status_code}")
        return check

    async def list_for_url(self, url_id: int) -> List[UrlCheck]:
        """Checks of a url, newest first."""
        return await self.db.fetch_all(
            select(UrlCheck)
            .where(UrlCheck.url_id == url_id)
            .order_by(UrlCheck.id.desc())
        )
