"""SQLAlchemy model for application users."""
from __future__ import annotations

from sqlalchemy import Column, Integer, String

from reminder.core.db import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    username = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
