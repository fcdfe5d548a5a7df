"""Pydantic schemas for event bodies and response envelopes."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class EventIn(BaseModel):
    """Create body and partial-update patch; omitted fields read as empty."""

    name: str = ""
    date: str = ""
    message: str = ""


class EventDetails(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    date: str
    message: str


class EventCreated(BaseModel):
    status: str = "created"
    event_name: str
    message: str = "Event created successfully"


class EventFetched(BaseModel):
    status: str = "fetched"
    event_id: int
    details: EventDetails
    message: str = "Event fetched successfully"


class EventUpdated(BaseModel):
    status: str = "updated"
    event_id: int
    details: EventDetails
    message: str = "Event updated successfully"


class EventDeleted(BaseModel):
    status: str = "deleted"
    event_name: str
    message: str = "Event deleted successfully"
