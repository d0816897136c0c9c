"""UrlCheck model - liveness check history for urls."""
from datetime import datetime
from sqlalchemy import Column, Integer, DateTime, ForeignKey

from ..database import Base


class UrlCheck(Base):
    """One probe of a url."""

    __tablename__ = "url_checks"

    id = Column(Integer, primary_key=True, autoincrement=True)
    url_id = Column(Integer, ForeignKey("urls.id"), nullable=False, index=True)
    status_code = Column(Integer, nullable=True)  # NULL if the probe got no response
    created_at = Column(DateTime, default=datetime.utcnow)
