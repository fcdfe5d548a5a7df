"""Token-gated event routes."""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from reminder.core.db import get_db
from reminder.core.security import get_current_user_id, require_token_claims
from reminder.schemas.event import EventCreated, EventDeleted, EventFetched, EventIn, EventUpdated
from reminder.services.event_service import EventService

router = APIRouter(prefix="/api/v1", tags=["event"], dependencies=[Depends(require_token_claims)])


def get_event_service(request: Request) -> EventService:
    return request.app.state.event_service


@router.post("/event", response_model=EventCreated)
def create_event(
    payload: EventIn,
    db: Session = Depends(get_db),
    user_id: Optional[int] = Depends(get_current_user_id),
    event_service: EventService = Depends(get_event_service),
) -> EventCreated:
    return event_service.create(db, user_id, payload)


@router.get("/event/{name}", response_model=EventFetched)
def get_event(
    name: str,
    db: Session = Depends(get_db),
    user_id: Optional[int] = Depends(get_current_user_id),
    event_service: EventService = Depends(get_event_service),
) -> EventFetched:
    return event_service.get(db, user_id, name)


@router.put("/event/{name}", response_model=EventUpdated)
def update_event(
    name: str,
    payload: EventIn,
    db: Session = Depends(get_db),
    user_id: Optional[int] = Depends(get_current_user_id),
    event_service: EventService = Depends(get_event_service),
) -> EventUpdated:
    return event_service.update(db, user_id, name, payload)


@router.delete("/event/{name}", response_model=EventDeleted)
def delete_event(
    name: str,
    db: Session = Depends(get_db),
    user_id: Optional[int] = Depends(get_current_user_id),
    event_service: EventService = Depends(get_event_service),
) -> EventDeleted:
    return event_service.delete(db, user_id, name)
