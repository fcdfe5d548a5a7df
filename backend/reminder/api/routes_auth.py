"""Public signup and login routes."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from reminder.core.db import get_db
from reminder.schemas.auth import Credentials, Token
from reminder.services.auth_service import AuthService

router = APIRouter(tags=["auth"])


def get_auth_service(request: Request) -> AuthService:
    return request.app.state.auth_service


@router.post("/signup", response_model=Token)
def signup(
    payload: Credentials,
    db: Session = Depends(get_db),
    auth_service: AuthService = Depends(get_auth_service),
) -> Token:
    return auth_service.signup(db, payload)


@router.post("/login", response_model=Token)
def login(
    payload: Credentials,
    db: Session = Depends(get_db),
    auth_service: AuthService = Depends(get_auth_service),
) -> Token:
    return auth_service.login(db, payload)
