"""Password hashing, JWT issuance and the bearer-token gate."""
from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from reminder.core.db import get_db
from reminder.core.errors import UnauthorizedError

LOGGER = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")
bearer_scheme = HTTPBearer(auto_error=False)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, password_hash: str) -> bool:
    return pwd_context.verify(plain_password, password_hash)


class TokenCodec:
    """Signs and verifies the `{username, exp}` tokens handed out at login.

    The secret is fixed at construction; the same instance is shared by the
    auth service (issuing) and the request gate (verifying).
    """

    def __init__(self, secret_key: str, algorithm: str = "HS256", lifetime: timedelta = timedelta(days=365)) -> None:
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.lifetime = lifetime

    def issue(self, username: str, now: Optional[datetime] = None) -> str:
        issued_at = now or datetime.now(timezone.utc)
        claims = {"username": username, "exp": issued_at + self.lifetime}
        return jwt.encode(claims, self.secret_key, algorithm=self.algorithm)

    def decode(self, token: str) -> Dict[str, Any]:
        try:
            return jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except ExpiredSignatureError as exc:
            raise UnauthorizedError("Token has expired") from exc
        except JWTError as exc:
            raise UnauthorizedError("Invalid or malformed JWT") from exc


def get_token_codec(request: Request) -> TokenCodec:
    return request.app.state.token_codec


def require_token_claims(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    token_codec: TokenCodec = Depends(get_token_codec),
) -> Dict[str, Any]:
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError("Missing or malformed JWT")
    return token_codec.decode(credentials.credentials)


def get_current_user_id(
    request: Request,
    claims: Dict[str, Any] = Depends(require_token_claims),
    db: Session = Depends(get_db),
) -> Optional[int]:
    """Re-resolve the numeric user id from the token's username on every call."""
    return request.app.state.identity_resolver.resolve_user_id(db, claims)
