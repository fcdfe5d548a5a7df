"""Authentication service handling signup and login."""
from __future__ import annotations

import logging

from jose import JWTError
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from reminder.core.errors import BadRequestError, ConflictError, InternalError, UnauthorizedError
from reminder.core.security import TokenCodec, get_password_hash, verify_password
from reminder.repositories.user_repository import UserRepository
from reminder.schemas.auth import Credentials, Token

LOGGER = logging.getLogger(__name__)


class AuthService:
    def __init__(self, user_repository: UserRepository, token_codec: TokenCodec) -> None:
        self.user_repository = user_repository
        self.token_codec = token_codec

    def signup(self, db: Session, credentials: Credentials) -> Token:
        try:
            password_hash = get_password_hash(credentials.password)
        except ValueError as exc:
            LOGGER.error("Password hashing failed for username=%s: %s", credentials.username, exc)
            raise InternalError("Failed to hash password") from exc

        try:
            self.user_repository.create_user(db, credentials.username, password_hash)
        except IntegrityError as exc:
            raise ConflictError("Username already exists") from exc
        except SQLAlchemyError as exc:
            LOGGER.error("Storing user %s failed: %s", credentials.username, exc)
            raise InternalError("Failed to store user") from exc

        LOGGER.info("👤 Registered user %s", credentials.username)
        return self.issue_token(credentials.username)

    def login(self, db: Session, credentials: Credentials) -> Token:
        try:
            user = self.user_repository.get_by_username(db, credentials.username)
        except SQLAlchemyError as exc:
            LOGGER.error("User lookup for %s failed: %s", credentials.username, exc)
            raise InternalError("Failed to look up user") from exc

        if user is None:
            raise BadRequestError("No user with the given credentials exists")
        try:
            password_ok = verify_password(credentials.password, user.password_hash)
        except ValueError:
            # bcrypt refuses some inputs (NUL bytes); they can never match a stored hash
            password_ok = False
        if not password_ok:
            raise UnauthorizedError("Invalid username or password")
        return self.issue_token(user.username)

    def issue_token(self, username: str) -> Token:
        try:
            return Token(token=self.token_codec.issue(username))
        except JWTError as exc:
            raise InternalError("Failed to generate token") from exc
