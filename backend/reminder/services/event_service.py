"""Domain service for owner-scoped event CRUD."""
from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from reminder.core.errors import ConflictError, InternalError, NotFoundError
from reminder.models.event import Event
from reminder.repositories.event_repository import EventRepository
from reminder.schemas.event import (
    EventCreated,
    EventDeleted,
    EventDetails,
    EventFetched,
    EventIn,
    EventUpdated,
)

LOGGER = logging.getLogger(__name__)

RECORD_NOT_FOUND = "Record not found"


class EventService:
    def __init__(self, repo: EventRepository) -> None:
        self.repo = repo

    def create(self, db: Session, owner_id: Optional[int], payload: EventIn) -> EventCreated:
        if owner_id is None:
            raise InternalError("No user is associated with this token")
        try:
            self.repo.create_event(db, owner_id, payload.name, payload.date, payload.message)
        except IntegrityError as exc:
            raise ConflictError(f"Event '{payload.name}' already exists") from exc
        except SQLAlchemyError as exc:
            raise InternalError("Failed to create event") from exc
        LOGGER.info("📌 Created event %r for owner=%s", payload.name, owner_id)
        return EventCreated(event_name=payload.name)

    def get(self, db: Session, owner_id: Optional[int], name: str) -> EventFetched:
        record = self._fetch_scoped(db, owner_id, name)
        return EventFetched(event_id=record.id, details=EventDetails.model_validate(record))

    def update(self, db: Session, owner_id: Optional[int], name: str, patch: EventIn) -> EventUpdated:
        record = self._fetch_scoped(db, owner_id, name)
        merged = EventDetails(
            name=patch.name or record.name,
            date=patch.date or record.date,
            message=patch.message or record.message,
        )
        event_id = record.id
        try:
            # Keyed by id so a patch that renames the event still hits the same row
            self.repo.update_event(db, event_id, merged.name, merged.date, merged.message)
        except IntegrityError as exc:
            raise ConflictError(f"Event '{merged.name}' already exists") from exc
        except SQLAlchemyError as exc:
            raise InternalError("Failed to update event") from exc
        return EventUpdated(event_id=event_id, details=merged)

    def delete(self, db: Session, owner_id: Optional[int], name: str) -> EventDeleted:
        if owner_id is None:
            raise NotFoundError(RECORD_NOT_FOUND)
        try:
            deleted = self.repo.delete_scoped(db, owner_id, name)
        except SQLAlchemyError as exc:
            raise InternalError("Failed to delete event") from exc
        if deleted == 0:
            raise NotFoundError(RECORD_NOT_FOUND)
        LOGGER.info("🗑️ Deleted event %r for owner=%s", name, owner_id)
        return EventDeleted(event_name=name)

    def _fetch_scoped(self, db: Session, owner_id: Optional[int], name: str) -> Event:
        if owner_id is None:
            raise NotFoundError(RECORD_NOT_FOUND)
        try:
            record = self.repo.get_scoped(db, owner_id, name)
        except SQLAlchemyError as exc:
            LOGGER.error("Event lookup for owner=%s name=%s failed: %s", owner_id, name, exc)
            raise InternalError("Failed to fetch event") from exc
        if record is None:
            raise NotFoundError(RECORD_NOT_FOUND)
        return record
