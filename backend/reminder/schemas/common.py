"""Common/shared schemas."""
from __future__ import annotations

from pydantic import BaseModel


class HealthStatus(BaseModel):
    status: str = "ok"


class ErrorEnvelope(BaseModel):
    status: str = "error"
    message: str
