"""Health check endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from reminder.core.db import get_db
from reminder.core.errors import UnavailableError
from reminder.schemas.common import HealthStatus

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthStatus)
def health(db: Session = Depends(get_db)) -> HealthStatus:
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        raise UnavailableError("Database unreachable") from exc
    return HealthStatus(status="ok")
