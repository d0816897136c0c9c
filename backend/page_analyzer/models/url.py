"""Url model - registered web addresses."""
from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime

from ..database import Base


class Url(Base):
    """A registered URL. Names are unique and never change."""

    __tablename__ = "urls"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, unique=True)
    created_at = Column(DateTime, default=datetime.utcnow)
