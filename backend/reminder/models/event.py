"""SQLAlchemy model for user-owned events."""
from __future__ import annotations

from sqlalchemy import Column, ForeignKey, Integer, String, Text, UniqueConstraint

from reminder.core.db import Base


class Event(Base):
    __tablename__ = "events"
    __table_args__ = (UniqueConstraint("name", "owner_id", name="uq_events_name_owner"),)

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    message = Column(Text, nullable=False)
    date = Column(String(255), nullable=False)
    owner_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
