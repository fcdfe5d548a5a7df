"""Repository for owner-scoped event rows."""
from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from reminder.models.event import Event

LOGGER = logging.getLogger(__name__)


class EventRepository:
    def create_event(self, db: Session, owner_id: int, name: str, date: str, message: str) -> Event:
        try:
            record = Event(name=name, date=date, message=message, owner_id=owner_id)
            db.add(record)
            db.commit()
            db.refresh(record)
            return record
        except Exception as exc:  # noqa: BLE001
            db.rollback()
            LOGGER.error("DB insert failed for owner=%s name=%s: %s", owner_id, name, exc)
            raise

    def get_scoped(self, db: Session, owner_id: int, name: str) -> Event | None:
        return (
            db.query(Event)
            .filter(Event.name == name, Event.owner_id == owner_id)
            .one_or_none()
        )

    def update_event(self, db: Session, event_id: int, name: str, date: str, message: str) -> int:
        try:
            updated = (
                db.query(Event)
                .filter(Event.id == event_id)
                .update({Event.name: name, Event.date: date, Event.message: message}, synchronize_session=False)
            )
            db.commit()
            return updated
        except Exception as exc:  # noqa: BLE001
            db.rollback()
            LOGGER.error("DB update failed for event id=%s: %s", event_id, exc)
            raise

    def delete_scoped(self, db: Session, owner_id: int, name: str) -> int:
        try:
            deleted = (
                db.query(Event)
                .filter(Event.name == name, Event.owner_id == owner_id)
                .delete(synchronize_session=False)
            )
            db.commit()
            return deleted
        except Exception as exc:  # noqa: BLE001
            db.rollback()
            LOGGER.error("DB delete failed for owner=%s name=%s: %s", owner_id, name, exc)
            raise
