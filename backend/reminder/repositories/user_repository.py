"""Repository for user persistence and retrieval."""
from __future__ import annotations

from sqlalchemy.orm import Session

from reminder.models.user import User


class UserRepository:
    def create_user(self, db: Session, username: str, password_hash: str) -> User:
        user = User(username=username, password_hash=password_hash)
        db.add(user)
        try:
            db.commit()
        except Exception:
            db.rollback()
            raise
        db.refresh(user)
        return user

    def get_by_username(self, db: Session, username: str) -> User | None:
        return db.query(User).filter(User.username == username).first()

    def get_id_by_username(self, db: Session, username: str) -> int | None:
        return db.query(User.id).filter(User.username == username).scalar()
